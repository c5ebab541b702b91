"""Reference Bulirsch-Stoer tableau running as plain Python over NumPy arrays."""

from __future__ import annotations

from dataclasses import dataclass
import math

import numpy as np


def rational_tableau(
    ts: np.ndarray,
    xs: np.ndarray,
    offset: int,
    ns: int,
    order: int,
    t: float,
    tiny: float,
    accuracy: float,
) -> float:
    """Diagonal rational extrapolation of ``xs[offset:offset+order]`` to ``t``.

    ``ns`` is the window-local index of the sample closest to ``t``. Returns
    ``+inf`` as soon as a tableau denominator falls below ``accuracy``.
    """
    c = np.empty(order, dtype=np.float64)
    d = np.empty(order, dtype=np.float64)
    for i in range(order):
        c[i] = xs[offset + i]
        d[i] = c[i] + tiny

    y = xs[offset + ns]
    ns -= 1
    for level in range(1, order):
        for i in range(order - level):
            hp = ts[offset + i + level] - t
            ho = (ts[offset + i] - t) * d[i] / hp
            den = ho - c[i + 1]
            if abs(den) < accuracy:
                return math.inf
            den = (c[i + 1] - d[i]) / den
            d[i] = c[i + 1] * den
            c[i] = ho * den
        if 2 * (ns + 1) < order - level:
            y += c[ns + 1]
        else:
            y += d[ns]
            ns -= 1
    return float(y)


@dataclass(frozen=True)
class NumpyTableau:
    name: str = "numpy"

    def __call__(self, ts, xs, offset, ns, order, t, tiny, accuracy) -> float:
        return rational_tableau(ts, xs, offset, ns, order, t, tiny, accuracy)


def build_numpy_backend() -> NumpyTableau:
    return NumpyTableau()
