"""Descriptive statistics for circular data: angles, phases, times of day, and
anything else that wraps around with a fixed period.

By default, values are angles in radians with period 2π. Any other period is handled
by passing an `interval` (an Interval or a (left, right) pair) whose width is the
period: samples are mapped affinely onto [-π, π), the statistic is computed there,
and the result is mapped back. For example, `mean(hours, interval=(0, 24))` gives the
circular mean time of day.

Alternatively, angles may be given as an astropy Quantity in any angular unit, in
which case results have the same unit.

References
----------
[1] Mardia, Jupp. (2000). Directional Statistics. Wiley.
[2] https://en.wikipedia.org/wiki/Directional_statistics
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

from dirstats.circular.angles import center_angle, distance
from dirstats.constants import DEFAULT_INTERVAL, TWO_PI
from dirstats.util.check import _as_1d_float_array, _check_not_empty
from dirstats.util.interval import Interval, as_interval, shift_range
from dirstats.util.units import (
    _convert_quantity_to_radians,
    _convert_radians_to_quantity,
)


def _prepare_values(x, interval):
    """Converts x to a 1D float array of radians on the canonical interval. Returns the
    values, the parsed interval (or None) and the unit of x (or None).
    """
    x, unit = _convert_quantity_to_radians(x, interval)
    values = _as_1d_float_array(x, name="x")
    _check_not_empty(values, name="x")
    if interval is not None:
        interval = as_interval(interval)
        values = shift_range(values, interval, DEFAULT_INTERVAL)
    return values, interval, unit


def _scale_to_interval(value, interval: Interval | None):
    """Rescales a spread (not a position) from radians to the width of interval."""
    if interval is None:
        return value
    return value / TWO_PI * interval.width


def resultant_vector(x: ArrayLike) -> complex:
    """Sum of the unit vectors e^(i x) of angles x, as a complex number."""
    x, _ = _convert_quantity_to_radians(x)
    values = _as_1d_float_array(x, name="x")
    return np.sum(np.exp(1j * values))


def resultant_mean_vector(x: ArrayLike) -> complex:
    """Mean of the unit vectors e^(i x). Its length is always in [0, 1]: if rounding
    puts it marginally outside the unit circle, it is scaled back onto it.
    """
    x, _ = _convert_quantity_to_radians(x)
    values = _as_1d_float_array(x, name="x")
    _check_not_empty(values, name="x")
    result = resultant_vector(values) / len(values)
    if np.abs(result) > 1:
        result = result / np.abs(result)
    return result


def resultant_length(x: ArrayLike) -> float:
    return np.abs(resultant_vector(x))


def resultant_mean_length(x: ArrayLike) -> float:
    return np.abs(resultant_mean_vector(x))


def _one_minus_resultant_mean_length(values: np.ndarray) -> float:
    """1 - R̄ of values in radians. Evaluated as mean(2 sin²((x - μ) / 2)) around the
    mean direction μ, which is algebraically identical but keeps full precision for
    tightly concentrated samples.
    """
    centre = np.angle(np.sum(np.exp(1j * values)))
    result = np.mean(2 * np.sin((values - centre) / 2) ** 2)
    return np.clip(result, 0.0, 1.0)


def mean(x: ArrayLike, interval: Interval | tuple | None = None) -> float:
    """Circular mean of x: the direction of the resultant vector.

    Parameters
    ----------
    x : array-like
        Angles. Must not be empty. NaN values propagate into the result.
    interval : Interval or (left, right), optional
        Interval defining the period of x. Default: None, meaning radians with
        period 2π.

    Returns
    -------
    mean : float
        Mean direction in (-π, π], or in (interval.left, interval.right] when an
        interval is given.
    """
    values, interval, unit = _prepare_values(x, interval)
    result = np.angle(np.sum(np.exp(1j * values)))
    if interval is not None:
        result = shift_range(result, DEFAULT_INTERVAL, interval)
    return _convert_radians_to_quantity(result, unit)


def var(x: ArrayLike, interval: Interval | tuple | None = None) -> float:
    """Circular variance of x, 1 - R̄, where R̄ is the mean resultant length. Always
    dimensionless and in [0, 1]: 0 when all angles coincide, and 1 when their unit
    vectors cancel out completely. For small spreads, this approaches half of the
    linear variance (in radians).
    """
    values, _, _ = _prepare_values(x, interval)
    return _one_minus_resultant_mean_length(values)


def std(x: ArrayLike, interval: Interval | tuple | None = None) -> float:
    """Circular standard deviation of x, sqrt(-2 ln R̄).

    For small spreads this approaches the linear standard deviation, and it is
    expressed in the same units as x (i.e. scaled by interval.width / 2π when an
    interval is given). It is infinite for samples with a zero resultant.
    """
    values, interval, unit = _prepare_values(x, interval)
    one_minus_r = _one_minus_resultant_mean_length(values)
    with np.errstate(divide="ignore"):
        result = np.sqrt(np.maximum(0.0, -2 * np.log1p(-one_minus_r)))
    result = _scale_to_interval(result, interval)
    return _convert_radians_to_quantity(result, unit)


def _medoid_index(values: np.ndarray) -> int:
    """Index of the element with the smallest summed circular distance to all others.
    The first such element wins in case of ties.
    """
    sums_of_distances = np.sum(distance(values[:, None], values[None, :]), axis=1)
    return int(np.argmin(sums_of_distances))


def median(x: ArrayLike, interval: Interval | tuple | None = None):
    """Circular median of x, defined as the medoid: the element of x that minimises
    the summed circular distance to all other elements.

    The result is always one of the input elements, returned unchanged. When several
    elements are equally good, the one that comes first in x is returned, so the
    result depends on the input order for such ties.
    """
    values, _, _ = _prepare_values(x, interval)
    return np.asanyarray(x)[_medoid_index(values)]


def mad(x: ArrayLike, interval: Interval | tuple | None = None) -> float:
    """Median absolute deviation of x around its circular median. Deviations are the
    absolute centered differences to the median, and their ordinary median is taken.
    Not scaled by any consistency constant.
    """
    values, interval, unit = _prepare_values(x, interval)
    centre = values[_medoid_index(values)]
    result = np.median(np.abs(center_angle(values - centre)))
    result = _scale_to_interval(result, interval)
    return _convert_radians_to_quantity(result, unit)


def _largest_gap(values: np.ndarray) -> tuple[float, float]:
    """Finds the largest empty arc between neighbouring angles, including the arc
    wrapping around from the last to the first angle. Returns the angle at which the
    occupied arc starts (i.e. just after the gap) and the size of the gap.
    """
    ordered = np.sort(center_angle(values))
    gaps = np.diff(ordered, append=ordered[0] + TWO_PI)
    index = np.argmax(gaps)
    start = ordered[(index + 1) % len(ordered)]
    return start, gaps[index]


def sample_range(x: ArrayLike, interval: Interval | tuple | None = None) -> float:
    """Length of the shortest arc that contains all elements of x."""
    values, interval, unit = _prepare_values(x, interval)
    _, gap = _largest_gap(values)
    result = _scale_to_interval(TWO_PI - gap, interval)
    return _convert_radians_to_quantity(result, unit)


def sample_interval(x: ArrayLike, interval: Interval | tuple | None = None) -> Interval:
    """Shortest arc that contains all elements of x, as an Interval. Its left end is
    within the canonical range (or the given interval), while the right end may
    extend beyond it by up to one period. Its width equals sample_range(x).
    """
    values, interval, unit = _prepare_values(x, interval)
    if np.any(np.isnan(values)):
        raise ValueError("Cannot find the sample interval of values containing NaN.")
    start, gap = _largest_gap(values)
    end = start + (TWO_PI - gap)
    if interval is not None:
        start, end = shift_range(np.asarray([start, end]), DEFAULT_INTERVAL, interval)
    return Interval(
        _convert_radians_to_quantity(start, unit), _convert_radians_to_quantity(end, unit)
    )
