"""Circular summary statistics of the von Mises distribution, in the same sense as the
sample statistics in dirstats.circular.stats. Note that scipy's own `vonmises.mean()`
and `.var()` are linear moments, which are not what is wanted for an angle.
"""

import numpy as np
from scipy.special import i0e, i1e

from dirstats.circular.angles import center_angle


def _vonmises_parameters(dist) -> tuple[float, float]:
    """Returns (kappa, loc) of a frozen scipy.stats.vonmises distribution."""
    if getattr(getattr(dist, "dist", None), "name", None) != "vonmises":
        raise ValueError(
            "dist must be a frozen scipy.stats.vonmises distribution, e.g. "
            "vonmises(kappa=2.0, loc=1.0)."
        )
    args, kwds = dist.args, dist.kwds
    kappa = args[0] if len(args) > 0 else kwds["kappa"]
    loc = args[1] if len(args) > 1 else kwds.get("loc", 0.0)
    scale = args[2] if len(args) > 2 else kwds.get("scale", 1.0)
    if scale != 1:
        raise ValueError(
            f"von Mises distributions with a scale other than 1 are not circular; got "
            f"scale={scale}."
        )
    return kappa, loc


def vonmises_mean(dist) -> float:
    """Mean direction of a von Mises distribution, in (-π, π]."""
    _, loc = _vonmises_parameters(dist)
    return -center_angle(-loc)


def vonmises_var(dist) -> float:
    """Circular variance of a von Mises distribution, 1 - I1(κ) / I0(κ)."""
    kappa, _ = _vonmises_parameters(dist)
    # Exponential scaling cancels in the ratio, and stops overflow for large kappa
    return 1 - i1e(kappa) / i0e(kappa)


def vonmises_std(dist) -> float:
    """Circular standard deviation of a von Mises distribution."""
    return np.sqrt(-2 * np.log1p(-vonmises_var(dist)))
