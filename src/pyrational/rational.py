"""Limited order rational interpolation (with poles) using Bulirsch & Stoer's algorithm.

The interpolant through each window of ``effective_order`` consecutive samples
is the diagonal rational function built by the classical Bulirsch-Stoer
tableau (Numerical Recipes, ``ratint``). Capping the order keeps each query
local and costs O(order^2) instead of O(n^2) over the whole table.

A tableau denominator that collapses to (almost) zero means the query sits on
a pole of the fitted function. The interpolator then returns ``+inf`` without
trying to tell which side of the pole it is on.
"""

from __future__ import annotations

import logging
from typing import NamedTuple, Sequence

import numpy as np

from .backends.base import TableauKernel
from .backends.factory import build_backend
from .config import OrderConfig
from .constants import DEFAULT_RELATIVE_ACCURACY, TINY
from .interpolation_api import Derivatives
from .numeric import almost_equal
from .samples import SampleTable

log = logging.getLogger(__name__)


class Window(NamedTuple):
    offset: int
    closest_index: int


class LimitedOrderRationalInterpolator:
    """Rational interpolator over a borrowed ``SampleTable``.

    ``maximum_order=None`` fits each query with every sample in the table.
    """

    supports_differentiation = False
    supports_integration = False

    def __init__(self, maximum_order: int | None = None, backend: str = "numpy") -> None:
        self._config = OrderConfig.resolve(maximum_order, None)
        self._table: SampleTable | None = None
        self._kernel: TableauKernel = build_backend(backend)
        log.debug("rational interpolator using %s backend", self._kernel.name)

    @property
    def config(self) -> OrderConfig:
        return self._config

    @property
    def maximum_order(self) -> int | None:
        return self._config.maximum_order

    @maximum_order.setter
    def maximum_order(self, value: int | None) -> None:
        self.reconfigure(value)

    @property
    def effective_order(self) -> int | None:
        return self._config.effective_order

    @property
    def table(self) -> SampleTable | None:
        return self._table

    def reconfigure(self, maximum_order: int | None) -> OrderConfig:
        count = None if self._table is None else self._table.count
        self._config = OrderConfig.resolve(maximum_order, count)
        log.debug(
            "reconfigured: maximum_order=%s effective_order=%s",
            self._config.maximum_order,
            self._config.effective_order,
        )
        return self._config

    def set_maximum_order(self, maximum_order: int | None) -> OrderConfig:
        return self.reconfigure(maximum_order)

    def bind(self, table: SampleTable) -> None:
        if table is None:
            raise ValueError("table is required")
        if not isinstance(table, SampleTable):
            raise TypeError("table must be a SampleTable")
        config = OrderConfig.resolve(self._config.maximum_order, table.count)
        self._table = table
        self._config = config
        log.debug("bound %d samples, effective_order=%d", table.count, config.effective_order)

    def bind_arrays(self, t: Sequence[float] | np.ndarray, x: Sequence[float] | np.ndarray) -> None:
        self.bind(SampleTable.from_arrays(t, x))

    def _require_table(self) -> SampleTable:
        if self._table is None:
            raise RuntimeError("no samples provided, call bind() first")
        return self._table

    def suggest_offset(self, t: float) -> Window:
        """Start of the window of ``effective_order`` samples used for ``t``.

        The window is centred on the preceding sample. ``closest_index`` is then
        moved to the following sample if that one is strictly nearer; the
        window itself is not shifted by that step.
        """
        table = self._require_table()
        order = self._config.effective_order
        count = table.count

        closest_index = max(table.locate(t), 0)
        half = (order - 1) // 2 if order > 0 else 0
        offset = min(max(closest_index - half, 0), count - order)

        if closest_index < count - 1:
            dist1 = abs(t - table.get_t(closest_index))
            dist2 = abs(t - table.get_t(closest_index + 1))
            if dist1 > dist2:
                closest_index += 1

        return Window(offset, closest_index)

    def interpolate(self, t: float) -> float:
        table = self._require_table()
        if table.count == 0:
            raise ValueError("cannot interpolate on an empty sample table")

        t = float(t)
        offset, closest_index = self.suggest_offset(t)
        if almost_equal(table.get_t(closest_index), t):
            return table.get_x(closest_index)

        order = self._config.effective_order
        value = self._kernel(
            table.t,
            table.x,
            offset,
            closest_index - offset,
            order,
            t,
            TINY,
            DEFAULT_RELATIVE_ACCURACY,
        )
        if np.isposinf(value):
            log.debug("pole detected at t=%r (offset=%d, order=%d)", t, offset, order)
        return value

    def interpolate_many(self, ts: Sequence[float] | np.ndarray) -> np.ndarray:
        points = np.asarray(ts, dtype=np.float64)
        out = np.empty(points.shape, dtype=np.float64)
        for idx, t in np.ndenumerate(points):
            out[idx] = self.interpolate(float(t))
        return out

    def __call__(self, t):
        if np.ndim(t) == 0:
            return self.interpolate(float(t))
        return self.interpolate_many(t)

    def differentiate(self, t: float) -> Derivatives:
        raise NotImplementedError("rational interpolation does not support differentiation")

    def integrate(self, t: float) -> float:
        raise NotImplementedError("rational interpolation does not support integration")
