"""Helpers for accepting angles as astropy Quantity objects. Statistics are always
computed on plain floats in radians; units are stripped on the way in and restored on
the way out.
"""

from astropy import units as u
from astropy.units import Quantity


def _convert_quantity_to_radians(values, interval=None):
    """Returns values as plain radians and the unit they came in (or None)."""
    if not isinstance(values, Quantity):
        return values, None
    if interval is not None:
        raise ValueError(
            "An explicit interval cannot be combined with astropy Quantity input, as "
            "the unit already defines the period."
        )
    return values.to_value(u.rad), values.unit


def _convert_radians_to_quantity(result, unit=None):
    """Inverse of _convert_quantity_to_radians for angular results."""
    if unit is None:
        return result
    return (result * u.rad).to(unit)


def _angle_in_radians(value):
    """Plain radians of a scalar angle. Floats are taken to be in radians already."""
    if isinstance(value, Quantity):
        return value.to_value(u.rad)
    return value
