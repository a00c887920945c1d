"""
Restatement of the data as tables for export

Writing the tables to a file is left to the caller,
e.g. `pd.ExcelWriter` with one sheet per table.
"""

from __future__ import annotations

import pandas as pd

from energy_burden.aggregation import derived_series
from energy_burden.metrics import ARREARS_BALANCE_BUCKETS, DerivedMetric, Metric
from energy_burden.store import TimeSeriesStore


def export_table(store: TimeSeriesStore, include_derived: bool = True) -> pd.DataFrame:
    """
    Restate the store as one wide table

    Parameters
    ----------
    store
        Data to restate

    include_derived
        Should per-utility derived metrics be appended after the raw metrics?

        Derived metrics are only included
        if both their numerator and denominator are in the store.

    Returns
    -------
    :
        Table with one row per month (indexed by month label)
        and one column per (metric, utility) combination.
        Columns are ordered by metric, then by utility in catalog order.
    """
    metrics = store.metrics
    raw = store.select_many(metrics, store.utility_ids).T
    raw.index = pd.Index(store.month_labels, name="month")

    if not include_derived:
        return raw

    derived_columns = {}
    for derived_metric in DerivedMetric:
        definition = derived_metric.definition
        if definition.numerator not in metrics or definition.denominator not in metrics:
            continue

        for utility_id in store.utility_ids:
            derived_columns[(derived_metric.value, utility_id)] = derived_series(
                store, derived_metric, utility_id
            ).to_numpy()

    if not derived_columns:
        return raw

    derived = pd.DataFrame(derived_columns, index=raw.index)
    derived.columns = derived.columns.set_names(raw.columns.names)

    return pd.concat([raw, derived], axis="columns")


def _by_utility(
    store: TimeSeriesStore, metric: Metric, suffix: str = ""
) -> pd.DataFrame:
    res = store.select(metric, store.utility_ids).T
    res.index = pd.Index(store.month_labels, name="Month")
    res.columns = [f"{u.name}{suffix}" for u in store.utilities]

    return res


def export_sheets(
    store: TimeSeriesStore, month_index: int | None = None
) -> dict[str, pd.DataFrame]:
    """
    Restate the store as the tables of the dashboard's workbook

    Parameters
    ----------
    store
        Data to restate

    month_index
        Month shown in the summary table.
        If not supplied, we use the last month in the store.

    Returns
    -------
    :
        Tables, keyed by sheet name, in workbook order

    Raises
    ------
    OutOfRangeIndexError
        `month_index` is outside the reporting window
    """
    if month_index is None:
        month_index = store.n_months - 1

    store.check_month_index(month_index)

    summary_columns = {
        "Active Accounts": Metric.ACTIVE_ACCOUNTS,
        "Customers in Arrears": Metric.ARREARS_CUSTOMERS,
        "Arrears Balance": Metric.ARREARS_BALANCE,
        "Disconnections": Metric.DISCONNECTIONS,
        "Avg Bill": Metric.AVERAGE_BILL,
        "Avg Usage": Metric.AVERAGE_USAGE,
    }
    summary = pd.DataFrame(
        [
            {
                "Type": u.category.value,
                **{
                    name: store.value(metric, u.id, month_index)
                    for name, metric in summary_columns.items()
                },
            }
            for u in store.utilities
        ],
        index=pd.Index([u.name for u in store.utilities], name="Utility"),
    )

    bucket_columns = {**ARREARS_BALANCE_BUCKETS, "Total": Metric.ARREARS_BALANCE}
    bucket_values = {
        label: store.select(metric, store.utility_ids).to_numpy()
        for label, metric in bucket_columns.items()
    }
    bucket_rows = [
        {
            "Month": month,
            "Utility": u.name,
            **{label: values[j, i] for label, values in bucket_values.items()},
        }
        for i, month in enumerate(store.month_labels)
        for j, u in enumerate(store.utilities)
    ]

    by_bucket = pd.DataFrame(bucket_rows).set_index(["Month", "Utility"])

    return {
        "Summary": summary,
        "Arrears - Customers": _by_utility(store, Metric.ARREARS_CUSTOMERS),
        "Arrears - Balance": _by_utility(store, Metric.ARREARS_BALANCE),
        "Arrears - By Bucket": by_bucket,
        "Disconnections": pd.concat(
            [
                _by_utility(store, Metric.DISCONNECTIONS, " (Count)"),
                _by_utility(store, Metric.DISCONNECTION_PCT, " (Rate %)"),
            ],
            axis="columns",
        ),
        "Bill Discounts": pd.concat(
            [
                _by_utility(
                    store, Metric.BILL_DISCOUNT_PARTICIPANTS, " (Participants)"
                ),
                _by_utility(store, Metric.BILL_DISCOUNT_DOLLARS, " (Dollars)"),
            ],
            axis="columns",
        ),
        "Avg Bill & Usage": pd.concat(
            [
                _by_utility(store, Metric.AVERAGE_BILL, " (Avg Bill $)"),
                _by_utility(store, Metric.AVERAGE_USAGE, " (Avg Usage)"),
            ],
            axis="columns",
        ),
        "Active Accounts": _by_utility(store, Metric.ACTIVE_ACCOUNTS),
    }
