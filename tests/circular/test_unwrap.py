"""Tests for dirstats.circular.unwrap."""

import numpy as np
import pytest
from astropy import units as u

from dirstats.circular import center_angle, unwrap, unwrap_inplace


def _continuous_sequence(seed=42, size=200, max_step=2.0):
    rng = np.random.default_rng(seed)
    return np.cumsum(rng.uniform(-max_step, max_step, size=size)) + 100.0


def test_unwrap_recovers_continuous_sequence():
    for period in [2 * np.pi, 5.0, 360.0]:
        original = _continuous_sequence(max_step=0.45 * period)
        wrapped = center_angle(original, period=period)
        result = unwrap(wrapped, period=period)

        # Equal up to one global multiple of the period
        offsets = (original - result) / period
        np.testing.assert_allclose(offsets, np.round(offsets[0]), atol=1e-9)


def test_unwrap_refix():
    original = _continuous_sequence(seed=1, size=50, max_step=1.0)
    wrapped = center_angle(original)

    for refix in [0, 10, 49, -1]:
        result = unwrap(wrapped, refix=refix)
        assert result[refix] == wrapped[refix]
        offsets = (original - result) / (2 * np.pi)
        np.testing.assert_allclose(offsets, np.round(offsets[0]), atol=1e-9)


def test_unwrap_tol():
    """Steps smaller than tol are never touched, even when larger than half a
    period."""
    values = [0.0, 4.0, 8.0]
    np.testing.assert_allclose(unwrap(values, tol=5.0), values)
    np.testing.assert_allclose(
        unwrap(values), [0.0, 4.0 - 2 * np.pi, 8.0 - 4 * np.pi]
    )


def test_unwrap_does_not_modify_input():
    values = np.asarray([0.0, 3.0, -3.0, 0.0])
    copy = values.copy()
    result = unwrap(values)
    np.testing.assert_array_equal(values, copy)
    assert result is not values
    assert unwrap([]).shape == (0,)


def test_unwrap_inplace():
    values = np.asarray([350.0, 355.0, 0.0, 5.0, 10.0])
    result = unwrap_inplace(values, period=360)
    assert result is values
    np.testing.assert_allclose(values, [350, 355, 360, 365, 370])

    values = np.asarray([350.0, 355.0, 0.0, 5.0, 10.0])
    unwrap_inplace(values, refix=3, period=360)
    np.testing.assert_allclose(values, [-10, -5, 0, 5, 10])


def test_unwrap_inplace_bad_input():
    with pytest.raises(TypeError, match="numpy arrays"):
        unwrap_inplace([0.0, 1.0])
    with pytest.raises(TypeError, match="float array"):
        unwrap_inplace(np.asarray([0, 1]))
    with pytest.raises(IndexError, match="out of bounds"):
        unwrap_inplace(np.zeros(3), refix=3)
    with pytest.raises(ValueError, match="period must be positive"):
        unwrap(np.zeros(3), period=-1)


def test_unwrap_with_units():
    result = unwrap([350, 355, 0, 5] * u.deg)
    assert result.unit == u.deg
    np.testing.assert_allclose(result.to_value(u.deg), [350, 355, 360, 365])

    result = unwrap([0, 100, 200] * u.deg, period=180 * u.deg)
    np.testing.assert_allclose(result.to_value(u.deg), [0, -80, -160])

    with pytest.raises(TypeError, match="Quantity"):
        unwrap_inplace(np.asarray([350.0, 0.0]) * u.deg)
