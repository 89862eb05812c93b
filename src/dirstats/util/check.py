"""Utilities for checking that things have the correct shape, etc."""

import numpy as np

from dirstats.errors import EmptyInputError


def _check_not_empty(values, name="values"):
    """Raises EmptyInputError if values has no elements."""
    if len(values) == 0:
        raise EmptyInputError(
            f"{name} is empty, but at least one element is needed to compute this "
            "statistic."
        )


def _check_at_least(values, minimum: int, name="values"):
    """Checks that values holds at least `minimum` elements."""
    _check_not_empty(values, name=name)
    if len(values) < minimum:
        raise ValueError(
            f"{name} must contain at least {minimum} elements, but only has "
            f"{len(values)}."
        )


def _as_1d_float_array(values, name="values") -> np.ndarray:
    """Converts values to a one dimensional float array, raising if it has any other
    shape.
    """
    array = np.asarray(values, dtype=float)
    if array.ndim == 0:
        array = array.reshape(1)
    if array.ndim != 1:
        raise ValueError(
            f"{name} must be one dimensional, but has shape {array.shape}."
        )
    return array
