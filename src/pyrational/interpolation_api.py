"""Common interface for interpolation methods over a ``SampleTable``."""

from __future__ import annotations

from typing import NamedTuple, Protocol, Sequence

import numpy as np

from .samples import SampleTable


class Derivatives(NamedTuple):
    value: float
    first_derivative: float
    second_derivative: float


class InterpolationMethod(Protocol):
    @property
    def supports_differentiation(self) -> bool:
        ...

    @property
    def supports_integration(self) -> bool:
        ...

    def bind(self, table: SampleTable) -> None:
        ...

    def bind_arrays(self, t: Sequence[float] | np.ndarray, x: Sequence[float] | np.ndarray) -> None:
        ...

    def interpolate(self, t: float) -> float:
        ...

    def differentiate(self, t: float) -> Derivatives:
        ...

    def integrate(self, t: float) -> float:
        ...
