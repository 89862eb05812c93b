"""Range and distance primitives for angles, on a circle of arbitrary period."""

import numpy as np
from numpy.typing import ArrayLike

from dirstats.constants import TWO_PI
from dirstats.util.units import (
    _convert_quantity_to_radians,
    _convert_radians_to_quantity,
)


def center_angle(
    x: ArrayLike | float, at: float = 0.0, period: float = TWO_PI
) -> np.ndarray | float:
    """Returns the representative of x (modulo period) that lies in the range
    [at - period / 2, at + period / 2).

    Parameters
    ----------
    x : array-like or float
        Angle(s) to center. May be an astropy Quantity with angular units, in which
        case `at` and `period` are in radians and the result has the unit of x.
    at : float
        Center of the output range. Default: 0
    period : float
        Period of the circle. Default: 2π

    Returns
    -------
    centered : array-like or float
    """
    x, unit = _convert_quantity_to_radians(x)
    if period <= 0:
        raise ValueError(f"period must be positive, but is {period}.")
    low = at - period / 2
    return _convert_radians_to_quantity(np.mod(np.subtract(x, low), period) + low, unit)


def distance(
    x: ArrayLike | float, y: ArrayLike | float, period: float = TWO_PI
) -> np.ndarray | float:
    """Shortest arc length between angles x and y on a circle with the given period.
    Symmetric in x and y, and always in [0, period / 2]. Broadcasts over arrays.
    """
    x, unit_x = _convert_quantity_to_radians(x)
    y, unit_y = _convert_quantity_to_radians(y)
    if (unit_x is None) != (unit_y is None):
        raise ValueError(
            "Either both or neither of x and y must be astropy Quantity objects."
        )
    result = np.abs(center_angle(np.subtract(x, y), period=period))
    return _convert_radians_to_quantity(result, unit_x)
