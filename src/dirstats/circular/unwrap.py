"""Reconstruction of continuous sequences from wrapped (modular) ones."""

import numpy as np
from astropy.units import Quantity
from numpy.typing import ArrayLike

from dirstats.constants import TWO_PI
from dirstats.util.check import _as_1d_float_array
from dirstats.util.units import (
    _angle_in_radians,
    _convert_quantity_to_radians,
    _convert_radians_to_quantity,
)


def _unwrap_forward(values: np.ndarray, period: float, tol: float):
    """Unwraps values in place, keeping values[0] fixed."""
    if len(values) < 2:
        return
    steps = np.diff(values)
    wrapped_steps = np.mod(steps + period / 2, period) - period / 2
    # Keep the sign of steps of exactly half a period
    wrapped_steps[(wrapped_steps == -period / 2) & (steps > 0)] = period / 2
    corrections = wrapped_steps - steps
    corrections[np.abs(steps) < tol] = 0
    values[1:] += np.cumsum(corrections)


def unwrap_inplace(
    values: np.ndarray, refix: int = 0, period: float = TWO_PI, tol: float = None
) -> np.ndarray:
    """Unwraps a sequence of periodic values in place. Starting from values[refix],
    which is left unchanged, the sequence is walked outward in both directions, and
    every step of magnitude tol or larger is replaced by its representative in
    [-period / 2, period / 2] by adding a multiple of period to the remaining values.

    Modifies and returns the caller's array, which must be a one dimensional numpy
    array of floats. The array must not be unwrapped from several threads at once.

    Parameters
    ----------
    values : np.ndarray
        Array to unwrap.
    refix : int
        Index of the value that is kept fixed. Negative values count from the end.
        Default: 0
    period : float
        Period of the values. Default: 2π
    tol : float, optional
        Smallest step that is considered a wrap. Default: period / 2

    Returns
    -------
    values : np.ndarray
        The same array, now unwrapped.
    """
    if not isinstance(values, np.ndarray):
        raise TypeError(
            "unwrap_inplace can only modify numpy arrays. Use unwrap for other "
            "sequences."
        )
    if isinstance(values, Quantity):
        raise TypeError(
            "unwrap_inplace cannot modify astropy Quantity arrays. Use unwrap, which "
            "converts them to radians and back."
        )
    if not np.issubdtype(values.dtype, np.floating):
        raise TypeError(f"values must be a float array, but has dtype {values.dtype}.")
    if values.ndim != 1:
        raise ValueError(f"values must be one dimensional, but has shape {values.shape}.")
    if period <= 0:
        raise ValueError(f"period must be positive, but is {period}.")
    if tol is None:
        tol = period / 2
    if len(values) == 0:
        return values
    if not -len(values) <= refix < len(values):
        raise IndexError(
            f"refix {refix} is out of bounds for a sequence of length {len(values)}."
        )
    refix = refix % len(values)

    # Views, so both directions write straight into values
    _unwrap_forward(values[refix:], period, tol)
    _unwrap_forward(values[refix::-1], period, tol)
    return values


def unwrap(
    values: ArrayLike, refix: int = 0, period: float = TWO_PI, tol: float = None
) -> np.ndarray:
    """Unwraps a sequence of periodic values, returning a new array. See
    unwrap_inplace for details.

    If an originally continuous sequence never changes by tol or more between
    neighbouring elements, unwrapping its wrapped version recovers it up to a constant
    multiple of period.

    values may also be an astropy Quantity with angular units. The result then has the
    same unit, and period and tol may be given as Quantity objects too (plain floats
    are taken to be in radians).
    """
    values, unit = _convert_quantity_to_radians(values)
    if unit is not None:
        period = _angle_in_radians(period)
        tol = None if tol is None else _angle_in_radians(tol)
    values = _as_1d_float_array(values).copy()
    result = unwrap_inplace(values, refix=refix, period=period, tol=tol)
    return _convert_radians_to_quantity(result, unit)
