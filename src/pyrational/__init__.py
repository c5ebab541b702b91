"""Limited order rational interpolation with pole detection (Bulirsch & Stoer)."""

from . import constants
from .backends import build_backend
from .config import OrderConfig
from .interpolation_api import Derivatives, InterpolationMethod
from .numeric import almost_equal, almost_zero
from .rational import LimitedOrderRationalInterpolator, Window
from .samples import Sample, SampleTable

__version__ = "0.1.0"

__all__ = [
    "constants",
    "build_backend",
    "OrderConfig",
    "Derivatives",
    "InterpolationMethod",
    "almost_equal",
    "almost_zero",
    "LimitedOrderRationalInterpolator",
    "Window",
    "Sample",
    "SampleTable",
]
