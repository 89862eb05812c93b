"""A lightweight closed interval type, plus the two range transforms built on it."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy.typing import ArrayLike


@dataclass(frozen=True)
class Interval:
    """Closed interval [left, right] on the real line.

    Used both as the domain that periodic values are folded into (its width is then
    the period) and as the domain occupied by an ordinary linear quantity when
    remapping between ranges.

    Parameters
    ----------
    left : float
        Left endpoint.
    right : float
        Right endpoint. Must not be smaller than left.
    """

    left: float
    right: float

    def __post_init__(self):
        if not (np.isfinite(self.left) and np.isfinite(self.right)):
            raise ValueError(
                f"Interval endpoints must be finite, but got [{self.left}, {self.right}]."
            )
        if self.right < self.left:
            raise ValueError(
                f"Interval right endpoint {self.right} is smaller than left endpoint "
                f"{self.left}."
            )

    @classmethod
    def from_width(cls, left: float, width: float) -> Interval:
        return cls(left, left + width)

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def center(self) -> float:
        return (self.left + self.right) / 2

    def __contains__(self, value) -> bool:
        # Arrays are contained when every element is
        value = np.asanyarray(value)
        return bool(np.all((self.left <= value) & (value <= self.right)))

    def __iter__(self):
        # Allows `left, right = interval`
        return iter((self.left, self.right))


def as_interval(interval: Interval | tuple[float, float]) -> Interval:
    """Accepts an Interval or a (left, right) pair and returns an Interval."""
    if isinstance(interval, Interval):
        return interval
    try:
        left, right = interval
    except (TypeError, ValueError):
        raise ValueError(
            "interval must be an Interval or a (left, right) pair, but got "
            f"{interval!r}."
        ) from None
    return Interval(left, right)


def _check_positive_width(interval: Interval):
    if interval.width <= 0:
        raise ValueError(
            f"Interval {interval} has zero width and cannot be used as a period."
        )


def shift_range(
    x: ArrayLike | float,
    from_interval: Interval | tuple[float, float],
    to_interval: Interval | tuple[float, float],
) -> np.ndarray | float:
    """Affinely maps x from one interval onto another, such that from_interval.left
    lands on to_interval.left and from_interval.right on to_interval.right. Values
    outside of from_interval are extrapolated, not folded.

    Calling it again with the two intervals swapped is the exact inverse.

    Example: shift_range(1.6, (1, 2), (20, 30)) == 26.
    """
    from_interval = as_interval(from_interval)
    to_interval = as_interval(to_interval)
    _check_positive_width(from_interval)
    x = np.asarray(x, dtype=float) if not np.isscalar(x) else x
    return (x - from_interval.left) / from_interval.width * to_interval.width + (
        to_interval.left
    )


def to_range(
    x: ArrayLike | float, interval: Interval | tuple[float, float]
) -> np.ndarray | float:
    """Folds x into [interval.left, interval.left + interval.width) using modular
    arithmetic with the interval width as the period.
    """
    interval = as_interval(interval)
    _check_positive_width(interval)
    x = np.asarray(x, dtype=float) if not np.isscalar(x) else x
    return np.mod(x - interval.left, interval.width) + interval.left
