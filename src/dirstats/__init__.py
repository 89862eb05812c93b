__version__ = "0.1.0"

from . import circular  # noqa: F401
from .circular import center_angle, distance, unwrap, unwrap_inplace  # noqa: F401
from .circular import mean as circular_mean  # noqa: F401
from .circular import var as circular_var  # noqa: F401
from .circular import std as circular_std  # noqa: F401
from .circular import median as circular_median  # noqa: F401
from .circular import mad as circular_mad  # noqa: F401
from .circular import sample_range, sample_interval, wrap_curve_closed  # noqa: F401
from .geometric import (
    GeometricMedianAlgorithm,  # noqa: F401
    geometric_median,  # noqa: F401
    geometric_mad,  # noqa: F401
    medoid,  # noqa: F401
    vec_std,  # noqa: F401
    most_distant_points,  # noqa: F401
    most_distant_points_ix,  # noqa: F401
)
from .util.interval import Interval, shift_range, to_range  # noqa: F401
from .errors import DirstatsError, EmptyInputError, ConvergenceWarning  # noqa: F401
