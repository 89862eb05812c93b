"""Statistics for circular data, such as angles and phases."""

from .angles import center_angle, distance  # noqa: F401
from .stats import (
    resultant_vector,  # noqa: F401
    resultant_mean_vector,  # noqa: F401
    resultant_length,  # noqa: F401
    resultant_mean_length,  # noqa: F401
    mean,  # noqa: F401
    var,  # noqa: F401
    std,  # noqa: F401
    median,  # noqa: F401
    mad,  # noqa: F401
    sample_range,  # noqa: F401
    sample_interval,  # noqa: F401
)
from .unwrap import unwrap, unwrap_inplace  # noqa: F401
from .plot import wrap_curve_closed  # noqa: F401
from .distributions import vonmises_mean, vonmises_var, vonmises_std  # noqa: F401
from dirstats.util.interval import to_range  # noqa: F401
