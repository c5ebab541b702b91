"""Immutable, ordered sample table ``(t, x)`` with binary-search lookup."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, NamedTuple, Sequence

import numpy as np


class Sample(NamedTuple):
    t: float
    x: float


def _as_vector(values: Sequence[float] | np.ndarray, name: str) -> np.ndarray:
    if values is None:
        raise ValueError(f"{name} is required")
    arr = np.array(values, dtype=np.float64, copy=True)
    if arr.ndim != 1:
        raise ValueError(f"{name} must be one-dimensional")
    return arr


@dataclass(frozen=True, eq=False)
class SampleTable:
    """Samples sorted by strictly increasing ``t``.

    Both arrays are private float64 copies flagged read-only, so a table can be
    shared freely between interpolators and threads.
    """

    t: np.ndarray
    x: np.ndarray

    def __post_init__(self) -> None:
        t = _as_vector(self.t, "t")
        x = _as_vector(self.x, "x")
        if t.shape[0] != x.shape[0]:
            raise ValueError("t and x must have the same length")
        if not np.all(np.isfinite(t)):
            raise ValueError("t values must be finite")
        if t.shape[0] > 1 and not np.all(np.diff(t) > 0.0):
            raise ValueError("t must be strictly increasing")
        t.flags.writeable = False
        x.flags.writeable = False
        object.__setattr__(self, "t", t)
        object.__setattr__(self, "x", x)

    @classmethod
    def from_arrays(cls, t: Sequence[float] | np.ndarray, x: Sequence[float] | np.ndarray) -> "SampleTable":
        return cls(t=t, x=x)

    @classmethod
    def from_unsorted(cls, t: Sequence[float] | np.ndarray, x: Sequence[float] | np.ndarray) -> "SampleTable":
        """Sort the pairs by ``t`` first. Duplicate abscissas are still rejected."""
        t_arr = _as_vector(t, "t")
        x_arr = _as_vector(x, "x")
        if t_arr.shape[0] != x_arr.shape[0]:
            raise ValueError("t and x must have the same length")
        order = np.argsort(t_arr, kind="stable")
        return cls(t=t_arr[order], x=x_arr[order])

    @classmethod
    def from_samples(cls, samples: Iterable[tuple[float, float]]) -> "SampleTable":
        pairs = [(float(t), float(x)) for t, x in samples]
        t = np.array([p[0] for p in pairs], dtype=np.float64)
        x = np.array([p[1] for p in pairs], dtype=np.float64)
        return cls(t=t, x=x)

    @property
    def count(self) -> int:
        return int(self.t.shape[0])

    def __len__(self) -> int:
        return self.count

    def __iter__(self) -> Iterator[Sample]:
        for i in range(self.count):
            yield Sample(float(self.t[i]), float(self.x[i]))

    def _check_index(self, i: int) -> int:
        i = int(i)
        if i < 0 or i >= self.count:
            raise IndexError(f"sample index {i} out of range [0, {self.count})")
        return i

    def get_t(self, i: int) -> float:
        return float(self.t[self._check_index(i)])

    def get_x(self, i: int) -> float:
        return float(self.x[self._check_index(i)])

    def get_sample(self, i: int) -> Sample:
        i = self._check_index(i)
        return Sample(float(self.t[i]), float(self.x[i]))

    def locate(self, t: float) -> int:
        """Index of the last sample with ``t_i <= t``.

        Returns -1 below the first sample and ``count - 1`` above the last.
        """
        return int(np.searchsorted(self.t, t, side="right")) - 1
