"""
Aggregation across utilities

Sums, customer-weighted averages and rates of the monthly metrics.
Every ratio checks its denominator explicitly
and is defined as zero when the denominator is zero,
so no NaN or infinite values reach the caller.
"""

from __future__ import annotations

from collections.abc import Iterable

import numpy as np
import pandas as pd
from loguru import logger
from pandas_openscm.grouping import groupby_except

from energy_burden.exceptions import UnrecognisedValueError
from energy_burden.metrics import (
    ARREARS_BALANCE_BUCKETS,
    ARREARS_CUSTOMERS_BUCKETS,
    DerivedMetric,
    Metric,
    metric_from_key,
)
from energy_burden.store import TimeSeriesStore
from energy_burden.typing import NUMERIC_DATA, UtilityFilter
from energy_burden.utilities import ALL_UTILITIES


def round_half_up(value: NUMERIC_DATA) -> int:
    """
    Round to the nearest integer, with halves rounded up

    Python's built-in `round` rounds halves to even,
    which is not what readers of a dashboard expect.

    Parameters
    ----------
    value
        Value to round

    Returns
    -------
    :
        Rounded value

    Examples
    --------
    >>> round_half_up(100.5)
    101
    >>> round_half_up(100.49)
    100
    """
    return int(np.floor(float(value) + 0.5))


def round_weighted_average(value: NUMERIC_DATA) -> int:
    """
    Round a weighted average for display

    Weighted averages (bills, usage) are shown as whole numbers,
    rates keep their decimals and are not passed through here.
    """
    return round_half_up(value)


def safe_ratio(
    numerator: pd.Series[float],  # type: ignore # pandas-stubs confused
    denominator: pd.Series[float],  # type: ignore # pandas-stubs confused
    scale: float = 1.0,
) -> pd.Series[float]:  # type: ignore # pandas-stubs confused
    """
    Divide two aligned series, giving zero wherever the denominator is zero

    Parameters
    ----------
    numerator
        Numerator

    denominator
        Denominator, aligned with `numerator`

    scale
        Factor applied to the ratio (e.g. 100 for percentages)

    Returns
    -------
    :
        `numerator / denominator * scale`, zero where `denominator` is zero
    """
    num = numerator.to_numpy(dtype=float)
    den = denominator.to_numpy(dtype=float)
    zero_den = den == 0.0
    if zero_den.any():
        logger.debug(
            "Zero denominator at {} of {} points, ratio set to zero",
            int(zero_den.sum()),
            den.size,
        )

    res = np.divide(num * scale, den, out=np.zeros_like(num), where=~zero_den)

    return pd.Series(res, index=numerator.index)


def sum_over_utilities(
    store: TimeSeriesStore,
    metrics: Iterable[Metric | str],
    utility_filter: UtilityFilter = ALL_UTILITIES,
) -> pd.DataFrame:
    """
    Sum metrics over a selection of utilities

    Parameters
    ----------
    store
        Data source

    metrics
        Metrics to sum

    utility_filter
        Utilities to include

    Returns
    -------
    :
        Frame with one row per metric (indexed by the metric's value)
        and one column per month
    """
    metric_values = [metric_from_key(m).value for m in metrics]
    selected = store.select_many(metric_values, store.resolve(utility_filter))

    res = groupby_except(selected, store.utility_level).sum()
    res.index = res.index.get_level_values(store.metric_level)
    res = res.reindex(metric_values, fill_value=0.0)

    return res


def sum_series(
    store: TimeSeriesStore,
    metric: Metric | str,
    utility_filter: UtilityFilter = ALL_UTILITIES,
) -> pd.Series[float]:  # type: ignore # pandas-stubs confused
    """
    Get the monthly sum of a metric over a selection of utilities

    Parameters
    ----------
    store
        Data source

    metric
        Metric to sum

    utility_filter
        Utilities to include

    Returns
    -------
    :
        One value per month, ready for plotting
    """
    metric = metric_from_key(metric)
    res = sum_over_utilities(store, [metric], utility_filter).loc[metric.value]
    res.name = metric.value

    return res


def sum_metric(
    store: TimeSeriesStore,
    metric: Metric | str,
    month_index: int,
    utility_filter: UtilityFilter = ALL_UTILITIES,
) -> float:
    """
    Sum a metric over a selection of utilities in a given month

    Parameters
    ----------
    store
        Data source

    metric
        Metric to sum

    month_index
        Index of the month in the reporting window

    utility_filter
        Utilities to include

    Returns
    -------
    :
        Sum (utilities that did not report count as zero)

    Raises
    ------
    OutOfRangeIndexError
        `month_index` is outside the reporting window
    """
    store.check_month_index(month_index)

    return float(sum_series(store, metric, utility_filter).iloc[month_index])


def weighted_average_series(
    store: TimeSeriesStore,
    value_metric: Metric | str,
    weight_metric: Metric | str = Metric.ACTIVE_ACCOUNTS,
    utility_filter: UtilityFilter = ALL_UTILITIES,
) -> pd.Series[float]:  # type: ignore # pandas-stubs confused
    """
    Get the monthly weighted average of a metric over a selection of utilities

    The average is `sum(weight * value) / sum(weight)`.
    Utilities differ in size by orders of magnitude,
    so averages of per-customer values (bills, usage)
    must be weighted by account counts rather than taken as a simple mean.

    Parameters
    ----------
    store
        Data source

    value_metric
        Metric to average

    weight_metric
        Metric to use as weights

    utility_filter
        Utilities to include

    Returns
    -------
    :
        One value per month, zero in months where the weights sum to zero
    """
    utility_ids = store.resolve(utility_filter)
    values = store.select(value_metric, utility_ids)
    weights = store.select(weight_metric, utility_ids)

    res = safe_ratio((values * weights).sum(axis="rows"), weights.sum(axis="rows"))
    res.name = metric_from_key(value_metric).value

    return res


def weighted_average(  # noqa: PLR0913
    store: TimeSeriesStore,
    value_metric: Metric | str,
    weight_metric: Metric | str,
    month_index: int,
    utility_filter: UtilityFilter = ALL_UTILITIES,
) -> float:
    """
    Get the weighted average of a metric over a selection of utilities

    Parameters
    ----------
    store
        Data source

    value_metric
        Metric to average

    weight_metric
        Metric to use as weights

    month_index
        Index of the month in the reporting window

    utility_filter
        Utilities to include

    Returns
    -------
    :
        Weighted average, zero if the weights sum to zero.
        Use [round_half_up][(m).] before displaying it.

    Raises
    ------
    OutOfRangeIndexError
        `month_index` is outside the reporting window
    """
    store.check_month_index(month_index)

    return float(
        weighted_average_series(
            store, value_metric, weight_metric, utility_filter
        ).iloc[month_index]
    )


def rate_series(
    store: TimeSeriesStore,
    numerator_metric: Metric | str,
    denominator_metric: Metric | str,
    utility_filter: UtilityFilter = ALL_UTILITIES,
    scale: float = 100.0,
) -> pd.Series[float]:  # type: ignore # pandas-stubs confused
    """
    Get the monthly rate of one metric relative to another

    Numerator and denominator are each summed over the selected utilities
    before dividing, so the rate for a group of utilities
    is the rate of the group, not a mean of the utilities' rates.

    Parameters
    ----------
    store
        Data source

    numerator_metric
        Metric in the numerator

    denominator_metric
        Metric in the denominator

    utility_filter
        Utilities to include

    scale
        Factor applied to the ratio (100 gives a percentage)

    Returns
    -------
    :
        One value per month, zero in months where the denominator is zero
    """
    sums = sum_over_utilities(
        store, [numerator_metric, denominator_metric], utility_filter
    )
    numerator = sums.iloc[0]
    denominator = sums.iloc[1]

    return safe_ratio(numerator, denominator, scale=scale)


def rate(  # noqa: PLR0913
    store: TimeSeriesStore,
    numerator_metric: Metric | str,
    denominator_metric: Metric | str,
    month_index: int,
    utility_filter: UtilityFilter = ALL_UTILITIES,
    scale: float = 100.0,
) -> float:
    """
    Get the rate of one metric relative to another in a given month

    Parameters
    ----------
    store
        Data source

    numerator_metric
        Metric in the numerator

    denominator_metric
        Metric in the denominator

    month_index
        Index of the month in the reporting window

    utility_filter
        Utilities to include

    scale
        Factor applied to the ratio (100 gives a percentage)

    Returns
    -------
    :
        Rate (unrounded), zero if the denominator is zero or absent

    Raises
    ------
    OutOfRangeIndexError
        `month_index` is outside the reporting window
    """
    store.check_month_index(month_index)

    return float(
        rate_series(
            store, numerator_metric, denominator_metric, utility_filter, scale=scale
        ).iloc[month_index]
    )


def derived_series(
    store: TimeSeriesStore,
    derived_metric: DerivedMetric,
    utility_filter: UtilityFilter = ALL_UTILITIES,
) -> pd.Series[float]:  # type: ignore # pandas-stubs confused
    """
    Get the monthly values of a derived metric

    Parameters
    ----------
    store
        Data source

    derived_metric
        Derived metric to calculate

    utility_filter
        Utilities to include

    Returns
    -------
    :
        One value per month
    """
    definition = derived_metric.definition
    res = rate_series(
        store,
        definition.numerator,
        definition.denominator,
        utility_filter,
        scale=definition.scale,
    )
    res.name = derived_metric.value

    return res


def bucket_breakdown(
    store: TimeSeriesStore,
    utility_filter: UtilityFilter = ALL_UTILITIES,
    kind: str = "balance",
) -> pd.DataFrame:
    """
    Get the arrears split into aging buckets for each month

    Parameters
    ----------
    store
        Data source

    utility_filter
        Utilities to include

    kind
        `"balance"` for dollar balances, `"customers"` for customer counts

    Returns
    -------
    :
        Frame with one row per month and one column per aging bucket

    Raises
    ------
    UnrecognisedValueError
        `kind` is not supported
    """
    buckets_options = {
        "balance": ARREARS_BALANCE_BUCKETS,
        "customers": ARREARS_CUSTOMERS_BUCKETS,
    }
    if kind not in buckets_options:
        raise UnrecognisedValueError(
            unrecognised_value=kind, name="bucket kind", known_values=buckets_options
        )

    buckets = buckets_options[kind]
    sums = sum_over_utilities(store, buckets.values(), utility_filter)
    sums.index = pd.Index(list(buckets.keys()), name="bucket")

    return sums.T


def values_by_utility(
    store: TimeSeriesStore,
    metric: Metric | str,
    month_index: int,
    utility_filter: UtilityFilter = ALL_UTILITIES,
) -> pd.Series[float]:  # type: ignore # pandas-stubs confused
    """
    Get each selected utility's value of a metric in a given month

    Parameters
    ----------
    store
        Data source

    metric
        Metric to get

    month_index
        Index of the month in the reporting window

    utility_filter
        Utilities to include

    Returns
    -------
    :
        Values indexed by utility ID, in catalog order
    """
    store.check_month_index(month_index)
    res = store.select(metric, store.resolve(utility_filter)).iloc[:, month_index]
    res.name = metric_from_key(metric).value

    return res


def utility_comparison(store: TimeSeriesStore, month_index: int) -> pd.DataFrame:
    """
    Compare the utilities side by side in a given month

    Parameters
    ----------
    store
        Data source

    month_index
        Index of the month in the reporting window

    Returns
    -------
    :
        One row per utility with its headline figures and rates
    """
    store.check_month_index(month_index)

    rows = []
    for utility in store.utilities:

        def get(metric: Metric) -> float:
            return store.value(metric, utility.id, month_index)  # noqa: B023

        rows.append(
            {
                "utility": utility.id,
                "name": utility.name,
                "category": utility.category.value,
                "active_accounts": get(Metric.ACTIVE_ACCOUNTS),
                "arrears_customers": get(Metric.ARREARS_CUSTOMERS),
                "arrears_balance": get(Metric.ARREARS_BALANCE),
                "disconnections": get(Metric.DISCONNECTIONS),
                "average_bill": get(Metric.AVERAGE_BILL),
                "average_usage": get(Metric.AVERAGE_USAGE),
                "usage_unit": utility.usage_unit,
                "arrears_rate": rate(
                    store,
                    Metric.ARREARS_CUSTOMERS,
                    Metric.ACTIVE_ACCOUNTS,
                    month_index,
                    utility.id,
                ),
                "disconnection_rate": rate(
                    store,
                    Metric.DISCONNECTIONS,
                    Metric.ACTIVE_ACCOUNTS,
                    month_index,
                    utility.id,
                ),
            }
        )

    return pd.DataFrame(rows).set_index("utility")


WEIGHTED_METRICS: tuple[Metric, ...] = (
    Metric.AVERAGE_BILL,
    Metric.AVERAGE_USAGE,
    Metric.DISCONNECTION_PCT,
)
"""
Metrics that are per-account values

These are combined across utilities with an account-weighted average,
every other raw metric is summed.
"""


def metric_series(
    store: TimeSeriesStore,
    metric: Metric | DerivedMetric | str,
    utility_filter: UtilityFilter = ALL_UTILITIES,
) -> pd.Series[float]:  # type: ignore # pandas-stubs confused
    """
    Get the monthly series of any metric, combined across utilities

    Parameters
    ----------
    store
        Data source

    metric
        Metric to get

    utility_filter
        Utilities to include

    Returns
    -------
    :
        One value per month.
        Derived metrics are ratios of sums,
        per-account metrics in [WEIGHTED_METRICS][(m).] are weighted averages
        and every other metric is a sum.
    """
    if isinstance(metric, str) and metric in {m.value for m in DerivedMetric}:
        metric = DerivedMetric(metric)

    if isinstance(metric, DerivedMetric):
        return derived_series(store, metric, utility_filter)

    metric = metric_from_key(metric)
    if metric in WEIGHTED_METRICS:
        return weighted_average_series(
            store, metric, Metric.ACTIVE_ACCOUNTS, utility_filter
        )

    return sum_series(store, metric, utility_filter)
