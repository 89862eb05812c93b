"""Helpers for preparing periodic data for plotting. Nothing here draws anything; the
output is meant to be passed straight to e.g. matplotlib's `ax.plot`.
"""

from __future__ import annotations

from collections.abc import Mapping

import numpy as np
import pandas as pd
from numpy.typing import ArrayLike

from dirstats.circular.angles import center_angle
from dirstats.constants import WRAP_MARGIN, WRAP_NUDGE
from dirstats.util.interval import Interval, as_interval, to_range


def _split_at_wraps(
    angles: np.ndarray, interval: Interval, nudge: float, margin: float
) -> tuple[np.ndarray, np.ndarray]:
    """Works out where a closed curve with angular coordinates `angles` has to be cut
    when drawn inside interval.

    Returns the position in the input that each output vertex is copied from, and the
    angular coordinate each output vertex gets.
    """
    width = interval.width
    mapped = to_range(angles, interval)
    naive_steps = np.roll(mapped, -1) - mapped
    true_steps = center_angle(naive_steps, period=width)
    is_wrap = np.abs(true_steps) < np.abs(naive_steps) - margin * width

    low = interval.left + nudge * width
    high = interval.right - nudge * width

    positions, new_angles = [], []
    first_break = None
    for i in range(len(mapped)):
        positions.append(i)
        new_angles.append(mapped[i])
        if not is_wrap[i]:
            continue

        # The curve leaves through one boundary and comes back in through the other
        j = (i + 1) % len(mapped)
        exit_at, enter_at = (high, low) if true_steps[i] > 0 else (low, high)
        if first_break is None:
            first_break = len(positions) + 1
        positions.extend([i, i, j])
        new_angles.extend([exit_at, np.nan, enter_at])

    positions = np.asarray(positions, dtype=int)
    new_angles = np.asarray(new_angles, dtype=float)
    if first_break is None:
        return positions, new_angles

    # Start the curve right after the first break, dropping that break: the curve is
    # closed, so its end connects back to its start through the dropped break
    order = np.concatenate(
        (np.arange(first_break + 1, len(positions)), np.arange(first_break))
    )
    return positions[order], new_angles[order]


def wrap_curve_closed(
    data: ArrayLike | pd.DataFrame | list[dict],
    interval: Interval | tuple[float, float],
    key: int | str | None = None,
    nudge: float = WRAP_NUDGE,
    margin: float = WRAP_MARGIN,
) -> np.ndarray | pd.DataFrame | list[dict]:
    """Prepares a closed curve with a periodic coordinate for plotting within
    interval.

    All angular coordinates are mapped into interval. Wherever the curve crosses the
    interval boundary, it is cut: the curve runs up to the boundary, is broken by a
    NaN vertex (which matplotlib and most other plotting libraries do not draw across),
    and continues from the opposite boundary. Boundary vertices are pulled inward by a
    tiny amount so that they stay on the correct side. Without this, a naive plot would
    draw a long, spurious line right across the plot each time the curve wraps.

    For example, wrapping [-20, 0, 100, 200] into (-180, 180) gives
    [-180, -160, -20, 0, 100, 180].

    Parameters
    ----------
    data : array-like, pd.DataFrame or list of dict
        Vertices of the closed curve, in order. Either a 1D sequence of angles, a 2D
        array with one vertex per row, a DataFrame with one vertex per row, or a list
        of records (dicts) with one vertex each.
    interval : Interval or (left, right)
        Interval to fit the curve into. Its width is the period.
    key : int or str, optional
        Which field holds the angular coordinate: a column index for 2D arrays, a
        column name for DataFrames or a dict key for records. Must be None for 1D
        data. This selects the angular coordinate of each vertex and is also where
        the wrapped value is written back. All other fields of inserted vertices are
        copied from their neighbours unchanged.
    nudge : float
        Distance that boundary vertices are moved inward, relative to the interval
        width. Default: 1e-10
    margin : float
        Tolerance for detecting crossings, relative to the interval width.
        Default: 1e-8

    Returns
    -------
    wrapped : np.ndarray, pd.DataFrame or list of dict
        The new curve, of the same kind as data. It is no longer closed: when it had to
        be cut, it starts and ends at a boundary.
    """
    interval = as_interval(interval)

    if isinstance(data, (list, tuple)) and data and isinstance(data[0], Mapping):
        frame = wrap_curve_closed(
            pd.DataFrame.from_records(data), interval, key=key, nudge=nudge, margin=margin
        )
        return frame.to_dict("records")

    if isinstance(data, pd.DataFrame):
        if key is None:
            raise ValueError("key must name the angular column of a DataFrame.")
        positions, new_angles = _split_at_wraps(
            data[key].to_numpy(dtype=float), interval, nudge, margin
        )
        result = data.iloc[positions].reset_index(drop=True)
        result[key] = new_angles
        return result

    array = np.asarray(data, dtype=float)
    if array.ndim == 1:
        if key is not None:
            raise ValueError("key must be None when data is one dimensional.")
        return _split_at_wraps(array, interval, nudge, margin)[1]
    if array.ndim != 2 or key is None:
        raise ValueError(
            "data must be one dimensional, or two dimensional with key set to the "
            "index of the angular column."
        )
    positions, new_angles = _split_at_wraps(array[:, key], interval, nudge, margin)
    result = array[positions]
    result[:, key] = new_angles
    return result
