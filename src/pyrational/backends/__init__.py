"""Tableau kernels for the rational interpolator."""

from .base import TableauKernel
from .factory import BACKENDS, build_backend
from .numpy_backend import rational_tableau

__all__ = ["BACKENDS", "TableauKernel", "build_backend", "rational_tableau"]
