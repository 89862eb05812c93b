"""Medians and spread measures for points in a vector space."""

from .median import (
    GeometricMedianAlgorithm,  # noqa: F401
    geometric_median,  # noqa: F401
    geometric_mad,  # noqa: F401
    medoid,  # noqa: F401
)
from .spread import vec_std, most_distant_points, most_distant_points_ix  # noqa: F401
