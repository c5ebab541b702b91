"""Backend protocol for the rational tableau kernel."""

from __future__ import annotations

from typing import Protocol

import numpy as np


class TableauKernel(Protocol):
    name: str

    def __call__(
        self,
        ts: np.ndarray,
        xs: np.ndarray,
        offset: int,
        ns: int,
        order: int,
        t: float,
        tiny: float,
        accuracy: float,
    ) -> float:
        ...
