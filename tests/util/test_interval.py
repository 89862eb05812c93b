"""Tests for dirstats.util.interval."""

import numpy as np
import pytest

from dirstats.util.interval import Interval, as_interval, shift_range, to_range


def test_interval_properties():
    interval = Interval(20, 30)
    assert interval.width == 10
    assert interval.center == 25
    assert 25 in interval
    assert 30 in interval
    assert 31 not in interval
    assert np.asarray([20, 25, 30]) in interval
    assert np.asarray([25, 31]) not in interval
    left, right = interval
    assert (left, right) == (20, 30)
    assert Interval.from_width(-1.5, 1.5) == Interval(-1.5, 0)


def test_interval_rejects_bad_endpoints():
    with pytest.raises(ValueError, match="smaller than left endpoint"):
        Interval(1, 0)
    with pytest.raises(ValueError, match="must be finite"):
        Interval(0, np.inf)
    with pytest.raises(ValueError, match="must be an Interval"):
        as_interval(5)


def test_shift_range_linear():
    """Checks the affine remap of [1, 2] onto [20, 30], including extrapolation."""
    assert shift_range(1, (1, 2), (20, 30)) == 20
    assert shift_range(1.6, (1, 2), (20, 30)) == 26
    assert shift_range(-2, (1, 2), (20, 30)) == -10
    np.testing.assert_allclose(
        shift_range([1, 1.5, 2], Interval(1, 2), Interval(20, 30)), [20, 25, 30]
    )


def test_shift_range_inverse():
    forward = (Interval(1, 2), Interval(20, 30))
    x = np.array([1.2, -7.3, 5.0, 1.999])
    there = shift_range(x, *forward)
    back = shift_range(there, *reversed(forward))
    np.testing.assert_allclose(back, x, rtol=1e-14)


def test_shift_range_zero_width():
    with pytest.raises(ValueError, match="zero width"):
        shift_range(1.0, (1, 1), (0, 1))


def test_to_range():
    for x in [0.01, 1, np.pi - 0.01, -2]:
        np.testing.assert_allclose(to_range(x, (-np.pi, np.pi)), x)
        np.testing.assert_allclose(to_range(x + 2 * np.pi, (-np.pi, np.pi)), x)
        np.testing.assert_allclose(to_range(x - 2 * np.pi, (-np.pi, np.pi)), x)

    result = to_range([-180, 180, 540, 10], Interval(-180, 180))
    np.testing.assert_allclose(result, [-180, -180, -180, 10])
    assert np.all(result < 180)
