"""
Classification of recent trends in monthly series

The mean of the most recent window of months is compared
with the mean of the window immediately before it.
The classification knows nothing about what the values measure,
so the same rule applies to counts, balances, rates and averages.
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum

import numpy as np
from attrs import define

from energy_burden.typing import NUMERIC_DATA


class TrendDirection(Enum):
    """
    Direction of a trend
    """

    UP = "up"
    DOWN = "down"
    FLAT = "flat"

    @property
    def arrow(self) -> str:
        """
        Arrow used to show the direction
        """
        return {"up": "↑", "down": "↓", "flat": "→"}[self.value]


@define(frozen=True)
class TrendResult:
    """
    Result of classifying a trend
    """

    direction: TrendDirection
    """
    Direction of the trend
    """

    change_pct: float
    """
    Change of the current window's mean relative to the prior window's mean

    Expressed in percent and unrounded.
    Zero whenever the classification falls back to flat
    because there is not enough data or the prior mean is zero.
    """

    current_mean: float = 0.0
    """
    Mean of the most recent window
    """

    prior_mean: float = 0.0
    """
    Mean of the window before the most recent one
    """

    @property
    def change_pct_display(self) -> str:
        """
        Change rounded to one decimal, e.g. `"+30.0%"`
        """
        return f"{self.change_pct:+.1f}%"


def classify_trend(
    values: Iterable[NUMERIC_DATA],
    window: int = 3,
    threshold_pct: float = 2.0,
) -> TrendResult:
    """
    Classify the trend at the end of a series

    Parameters
    ----------
    values
        Values in chronological order.
        Missing values (NaN) are treated as zero.

    window
        Number of values in each of the two windows that are compared

    threshold_pct
        Percentage change beyond which the trend is up or down

    Returns
    -------
    :
        Trend of the series.
        With fewer than `2 * window` values, or a prior mean of zero,
        the trend is flat with zero change.

    Examples
    --------
    >>> classify_trend([100] * 6 + [130] * 3).direction
    <TrendDirection.UP: 'up'>
    >>> classify_trend([100] * 6 + [130] * 3).change_pct_display
    '+30.0%'
    """
    if window < 1:
        msg = f"`window` must be at least 1. Received {window=}"
        raise ValueError(msg)

    values_arr = np.nan_to_num(np.asarray(list(values), dtype=float), nan=0.0)
    if values_arr.size < 2 * window:
        return TrendResult(direction=TrendDirection.FLAT, change_pct=0.0)

    current_mean = float(values_arr[-window:].mean())
    prior_mean = float(values_arr[-2 * window : -window].mean())
    if prior_mean == 0.0:
        return TrendResult(
            direction=TrendDirection.FLAT,
            change_pct=0.0,
            current_mean=current_mean,
            prior_mean=prior_mean,
        )

    change_pct = (current_mean - prior_mean) / prior_mean * 100.0
    if change_pct > threshold_pct:
        direction = TrendDirection.UP
    elif change_pct < -threshold_pct:
        direction = TrendDirection.DOWN
    else:
        direction = TrendDirection.FLAT

    return TrendResult(
        direction=direction,
        change_pct=change_pct,
        current_mean=current_mean,
        prior_mean=prior_mean,
    )
