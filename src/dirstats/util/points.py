"""Generic point handling for the geometric statistics. Reals, complex numbers and
fixed-size vectors are all converted to an (n_points, n_dims) float array of
coordinates, which is all that the algorithms need (subtraction, norms and weighted
averages). Results are converted back to the kind of point that came in.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy.typing import ArrayLike

from dirstats.util.check import _check_not_empty

SUPPORTED_POINT_KINDS = ("real", "complex", "vector", "tuple")


@dataclass(frozen=True)
class PointSet:
    """A set of points stored as coordinates, remembering what kind of point they
    were given as.

    Parameters
    ----------
    coordinates : np.ndarray
        Array of shape (n_points, n_dims).
    kind : str
        One of "real" (n_dims = 1), "complex" (n_dims = 2, real and imaginary parts),
        "vector" (numpy rows) or "tuple" (tuples of numbers).
    """

    coordinates: np.ndarray
    kind: str

    def __post_init__(self):
        if self.kind not in SUPPORTED_POINT_KINDS:
            raise ValueError(f"Point kind {self.kind} not supported!")

    def __len__(self):
        return len(self.coordinates)

    @property
    def n_dims(self) -> int:
        return self.coordinates.shape[1]

    def to_point(self, row: np.ndarray):
        """Converts one row of coordinates back into a point of the original kind."""
        match self.kind:
            case "real":
                return float(row[0])
            case "complex":
                return complex(row[0], row[1])
            case "tuple":
                return tuple(float(value) for value in row)
        return np.array(row, dtype=float)


def as_point_set(points: ArrayLike | PointSet) -> PointSet:
    """Converts a sequence of reals, complex numbers or equal-length vectors into a
    PointSet. Raises EmptyInputError for an empty sequence.
    """
    if isinstance(points, PointSet):
        return points
    _check_not_empty(points, name="points")

    array = np.asarray(points)
    if np.iscomplexobj(array):
        if array.ndim != 1:
            raise ValueError(
                "Complex points must be given as a one dimensional sequence, but got "
                f"an array of shape {array.shape}."
            )
        return PointSet(np.column_stack((array.real, array.imag)), "complex")

    array = array.astype(float)
    if array.ndim == 1:
        return PointSet(array.reshape(-1, 1), "real")
    if array.ndim == 2:
        kind = "tuple" if isinstance(points[0], tuple) else "vector"
        return PointSet(array, kind)
    raise ValueError(
        "points must be a sequence of numbers or of equal-length vectors, but got an "
        f"array of shape {array.shape}."
    )
