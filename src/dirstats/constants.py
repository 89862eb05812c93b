"""Numeric defaults shared across the package. Every function that uses one of these
exposes it as a keyword argument, so they only need changing here for a new default.
"""

import numpy as np

from dirstats.util.interval import Interval

TWO_PI = 2 * np.pi

# Canonical domain that circular statistics are computed on
DEFAULT_INTERVAL = Interval(-np.pi, np.pi)

# Geometric median iteration settings
DEFAULT_MAXITER = 1000
DEFAULT_ATOL = 1e-7

# Curve wrapping: boundary vertices are pulled inward by WRAP_NUDGE * width, and a
# step only counts as a wrap if the circular step is shorter than the naive one by
# more than WRAP_MARGIN * width
WRAP_NUDGE = 1e-10
WRAP_MARGIN = 1e-8
