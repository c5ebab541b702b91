"""Backend factory for the rational tableau kernel."""

from __future__ import annotations

import logging

from .base import TableauKernel
from .numba_backend import build_numba_backend
from .numpy_backend import build_numpy_backend

log = logging.getLogger(__name__)

BACKENDS = ("numpy", "numba", "auto")


def build_backend(name: str = "numpy") -> TableauKernel:
    if name == "numpy":
        return build_numpy_backend()
    if name == "numba":
        return build_numba_backend()
    if name == "auto":
        try:
            return build_numba_backend()
        except RuntimeError as exc:
            log.debug("numba backend unavailable, using numpy: %s", exc)
            return build_numpy_backend()
    raise ValueError(f"Unknown backend: {name}")
