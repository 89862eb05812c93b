"""Spread measures for sets of points in a vector space."""

import numpy as np
from numpy.typing import ArrayLike
from scipy.spatial.distance import pdist

from dirstats.util.check import _check_at_least
from dirstats.util.points import as_point_set


def vec_std(points: ArrayLike, center=None) -> float:
    """Standard deviation of a set of points, sqrt(Σ |p - center|² / (n - 1)).

    For real points, this is the usual (Bessel-corrected) standard deviation.

    Parameters
    ----------
    points : array-like
        Sequence of reals, complex numbers or equal-length vectors. Must contain at
        least two points.
    center : point, optional
        Point to measure deviations from, of the same kind as points. Default: None,
        meaning the arithmetic mean of points.

    Returns
    -------
    std : float
    """
    point_set = as_point_set(points)
    _check_at_least(point_set.coordinates, 2, name="points")

    if center is None:
        center = np.mean(point_set.coordinates, axis=0)
    else:
        center = as_point_set([center]).coordinates[0]

    squared_distances = np.sum((point_set.coordinates - center) ** 2, axis=1)
    return float(np.sqrt(np.sum(squared_distances) / (len(point_set) - 1)))


def most_distant_points_ix(points: ArrayLike) -> tuple[int, int]:
    """Indices (i, j), with i < j, of the two points furthest apart from one another.

    Found by brute force over all pairs, in the order (0, 1), (0, 2), ..., (1, 2), ...;
    the first pair with the maximum distance wins in case of ties.
    """
    point_set = as_point_set(points)
    _check_at_least(point_set.coordinates, 2, name="points")

    # pdist enumerates pairs in the same order as triu_indices
    distances = pdist(point_set.coordinates)
    first, second = np.triu_indices(len(point_set), k=1)
    index = np.argmax(distances)
    return int(first[index]), int(second[index])


def most_distant_points(points: ArrayLike) -> tuple:
    """The two points furthest apart from one another. See most_distant_points_ix."""
    i, j = most_distant_points_ix(points)
    return points[i], points[j]
