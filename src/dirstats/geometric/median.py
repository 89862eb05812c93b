"""Geometric median: the point minimising the summed Euclidean distance to a set of
points. Unlike the coordinate-wise median, it is equivariant under rotations, and it
is robust to outliers.

Points may be reals, complex numbers (treated as 2D vectors) or fixed-size vectors,
and results are returned as the same kind of point. See dirstats.util.points.
"""

from __future__ import annotations

import warnings
from enum import Enum

import numpy as np
from numpy.typing import ArrayLike
from scipy.spatial.distance import cdist

from dirstats.constants import DEFAULT_ATOL, DEFAULT_MAXITER
from dirstats.errors import ConvergenceWarning
from dirstats.util.points import PointSet, as_point_set


class GeometricMedianAlgorithm(Enum):
    """Iterative algorithms available for computing the geometric median.

    WEISZFELD
        Weiszfeld's algorithm [1]. Points that coincide exactly with the current
        estimate get a distance of 1 instead of 0, to avoid infinite weights.
    VARDI_ZHANG
        Modification of Weiszfeld's algorithm by Vardi & Zhang [2], which handles
        points coinciding with the current estimate correctly.

    References
    ----------
    [1] https://en.wikipedia.org/wiki/Geometric_median#Computation
    [2] Vardi, Zhang. (2000). The multivariate L1-median and associated data depth.
        PNAS 97 (4), 1423-1426.
    """

    WEISZFELD = "weiszfeld"
    VARDI_ZHANG = "vardi_zhang"


def _weiszfeld_step(coordinates: np.ndarray, current: np.ndarray) -> np.ndarray:
    distances = np.linalg.norm(coordinates - current, axis=1)
    # A point on the estimate already agrees with it, so its weight barely matters
    distances[distances == 0] = 1.0
    return np.average(coordinates, axis=0, weights=1 / distances)


def _vardi_zhang_step(coordinates: np.ndarray, current: np.ndarray) -> np.ndarray:
    distances = np.linalg.norm(coordinates - current, axis=1)
    coincident = distances == 0
    n_coincident = np.count_nonzero(coincident)

    # All points on the estimate: it is a fixed point, and returning it unchanged
    # stops the iteration
    if n_coincident == len(coordinates):
        return current

    weights = 1 / distances[~coincident]
    next_value = np.average(coordinates[~coincident], axis=0, weights=weights)
    if n_coincident == 0:
        return next_value

    # Blend between the weighted mean of the other points and the current estimate,
    # depending on how strongly the other points pull away from the coincident ones
    pull = np.linalg.norm(next_value - current) * np.sum(weights)
    stay = 1.0 if pull == 0 else min(n_coincident / pull, 1.0)
    return (1 - stay) * next_value + stay * current


def _geometric_median_coordinates(
    point_set: PointSet,
    algorithm: GeometricMedianAlgorithm | str = GeometricMedianAlgorithm.WEISZFELD,
    maxiter: int = DEFAULT_MAXITER,
    atol: float = DEFAULT_ATOL,
    warn: bool = False,
) -> np.ndarray:
    """Runs the fixed-point iteration on the coordinates of point_set."""
    algorithm = GeometricMedianAlgorithm(algorithm)
    match algorithm:
        case GeometricMedianAlgorithm.WEISZFELD:
            step = _weiszfeld_step
        case GeometricMedianAlgorithm.VARDI_ZHANG:
            step = _vardi_zhang_step

    coordinates = point_set.coordinates
    current = np.mean(coordinates, axis=0)
    movement = np.inf

    for _ in range(maxiter):
        next_value = step(coordinates, current)
        movement = np.linalg.norm(next_value - current)
        current = next_value
        if movement < atol:
            break
    else:
        if warn:
            warnings.warn(
                f"Geometric median did not converge within {maxiter} iterations: the "
                f"final step was {movement:.3g}, compared to atol={atol:.3g}. "
                "Returning the latest estimate.",
                ConvergenceWarning,
            )

    return current


def geometric_median(
    points: ArrayLike,
    algorithm: GeometricMedianAlgorithm | str = GeometricMedianAlgorithm.WEISZFELD,
    maxiter: int = DEFAULT_MAXITER,
    atol: float = DEFAULT_ATOL,
    warn: bool = False,
):
    """Calculates the geometric median of a set of points.

    The iteration starts from the arithmetic mean and stops once an update moves the
    estimate by less than atol, or after maxiter updates. Running out of iterations is
    not an error: the latest estimate is returned regardless.

    Parameters
    ----------
    points : array-like
        Sequence of reals, of complex numbers, or of equal-length vectors (e.g. an
        array of shape (n_points, n_dims)). Must not be empty.
    algorithm : GeometricMedianAlgorithm or str
        Algorithm to use. Default: GeometricMedianAlgorithm.WEISZFELD
    maxiter : int
        Maximum number of iterations. Default: 1000
    atol : float
        Convergence threshold on the size of an update. Default: 1e-7
    warn : bool
        Whether to emit a ConvergenceWarning when maxiter is reached. Default: False

    Returns
    -------
    median : float, complex, np.ndarray or tuple
        Same kind of point as the elements of points.
    """
    point_set = as_point_set(points)
    result = _geometric_median_coordinates(
        point_set, algorithm=algorithm, maxiter=maxiter, atol=atol, warn=warn
    )
    return point_set.to_point(result)


def geometric_mad(points: ArrayLike, **kwargs) -> float:
    """Geometric median absolute deviation [1]: the median Euclidean distance of the
    points from their geometric median. Invariant under rotations, and identical to
    the (unscaled) median absolute deviation for real-valued points.

    Keyword arguments are passed to geometric_median.

    References
    ----------
    [1] https://en.wikipedia.org/wiki/Median_absolute_deviation#Geometric_median_absolute_deviation
    """
    point_set = as_point_set(points)
    centre = _geometric_median_coordinates(point_set, **kwargs)
    return float(np.median(np.linalg.norm(point_set.coordinates - centre, axis=1)))


def medoid(points: ArrayLike):
    """The point from points with the smallest summed Euclidean distance to all other
    points. The first one wins in case of ties.
    """
    point_set = as_point_set(points)
    coordinates = point_set.coordinates
    sums_of_distances = np.sum(cdist(coordinates, coordinates), axis=1)
    return point_set.to_point(coordinates[np.argmin(sums_of_distances)])
