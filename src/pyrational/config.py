"""Order configuration for the limited-order rational interpolator."""

from __future__ import annotations

from dataclasses import dataclass
import numbers


def validate_maximum_order(maximum_order: int | None) -> int | None:
    if maximum_order is None:
        return None
    if isinstance(maximum_order, bool) or not isinstance(maximum_order, numbers.Integral):
        raise TypeError("maximum_order must be an int or None")
    if maximum_order < 0:
        raise ValueError("maximum_order must be >= 0")
    return int(maximum_order)


@dataclass(frozen=True)
class OrderConfig:
    """Maximum order as configured, and the order actually used per query.

    ``maximum_order=None`` means unlimited. ``effective_order`` is ``None``
    while no sample table is bound, otherwise ``min(maximum_order, count)``.
    """

    maximum_order: int | None = None
    effective_order: int | None = None

    def __post_init__(self) -> None:
        validate_maximum_order(self.maximum_order)
        if self.effective_order is not None:
            if self.effective_order < 0:
                raise ValueError("effective_order must be >= 0")
            if self.maximum_order is not None and self.effective_order > self.maximum_order:
                raise ValueError("effective_order must be <= maximum_order")

    @classmethod
    def resolve(cls, maximum_order: int | None, count: int | None) -> "OrderConfig":
        maximum_order = validate_maximum_order(maximum_order)
        if count is None:
            return cls(maximum_order=maximum_order, effective_order=None)
        if count < 0:
            raise ValueError("count must be >= 0")
        effective = count if maximum_order is None else min(maximum_order, count)
        return cls(maximum_order=maximum_order, effective_order=effective)

    @property
    def is_unlimited(self) -> bool:
        return self.maximum_order is None

    @property
    def is_bound(self) -> bool:
        return self.effective_order is not None
