"""Numba-accelerated rational tableau backend."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .numpy_backend import rational_tableau

try:
    from numba import njit
except Exception as exc:  # pragma: no cover - optional dependency
    njit = None
    _NUMBA_IMPORT_ERROR = exc
else:
    _NUMBA_IMPORT_ERROR = None


if njit is not None:
    _rational_tableau_numba = njit(cache=True)(rational_tableau)

    # Prime JIT cache once to avoid a latency spike on the first query.
    _rational_tableau_numba(
        np.array([0.0, 1.0], dtype=np.float64),
        np.array([1.0, 0.5], dtype=np.float64),
        0,
        0,
        2,
        0.5,
        1.0e-15,
        1.0e-15,
    )


@dataclass(frozen=True)
class NumbaTableau:
    name: str = "numba"

    def __call__(self, ts, xs, offset, ns, order, t, tiny, accuracy) -> float:
        return float(
            _rational_tableau_numba(
                ts,
                xs,
                int(offset),
                int(ns),
                int(order),
                float(t),
                float(tiny),
                float(accuracy),
            )
        )


def build_numba_backend() -> NumbaTableau:
    if njit is None:
        raise RuntimeError(
            f"Numba backend unavailable: {_NUMBA_IMPORT_ERROR}"
        ) from _NUMBA_IMPORT_ERROR
    return NumbaTableau()
