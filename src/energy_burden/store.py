"""
Read-only store of the monthly metric series
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

import attr
import numpy as np
import pandas as pd
from attrs import define, field
from loguru import logger
from pandas_openscm.indexing import multi_index_match

from energy_burden.assertions import (
    assert_data_is_all_numeric,
    assert_has_index_levels,
    assert_index_is_multiindex,
    assert_month_index_in_range,
    assert_no_duplicated_index,
)
from energy_burden.exceptions import MisalignedSeriesError, UnrecognisedValueError
from energy_burden.metrics import (
    REPORTING_MONTHS,
    Metric,
    metric_from_key,
    month_labels,
)
from energy_burden.typing import MetricDataFrame, UtilityFilter
from energy_burden.utilities import (
    DEFAULT_UTILITIES,
    Utility,
    get_utility,
    resolve_utility_filter,
)


@define(frozen=True, eq=False)
class TimeSeriesStore:
    """
    Container of the monthly series of every metric for every utility

    The store never changes once built.
    Lookups of series that were not reported return zeros,
    so missing data never leaks into arithmetic as NaN.
    """

    data: MetricDataFrame = field()
    """
    Monthly data

    Index levels are `metric_level` and `utility_level`,
    columns are monthly [pd.Period][pandas.Period]'s.
    """

    utilities: tuple[Utility, ...] = field(default=DEFAULT_UTILITIES, converter=tuple)
    """
    Catalog of the utilities in the data, in display order
    """

    metric_level: str = "metric"
    """
    Level in the data's index that holds the metric
    """

    utility_level: str = "utility"
    """
    Level in the data's index that holds the utility ID
    """

    @data.validator
    def validate_data(
        self, attribute: attr.Attribute[Any], value: pd.DataFrame
    ) -> None:
        """
        Validate the data

        Checks the index structure, the numeric content,
        the monthly columns and that every metric and utility is known.
        """
        assert_index_is_multiindex(value)
        assert_has_index_levels(value, [self.metric_level, self.utility_level])
        if list(value.index.names) != [self.metric_level, self.utility_level]:
            msg = (
                "The index must have exactly the levels "
                f"{[self.metric_level, self.utility_level]} (in that order). "
                f"Received {list(value.index.names)}"
            )
            raise AssertionError(msg)

        assert_data_is_all_numeric(value)
        assert_no_duplicated_index(value)

        is_monthly = isinstance(value.columns, pd.PeriodIndex) and (
            value.columns.freqstr in ("M", "ME")
        )
        if not is_monthly:
            msg = (
                "Columns must be a monthly `pd.PeriodIndex`. "
                f"Received {value.columns!r}"
            )
            raise TypeError(msg)

        for metric_key in value.index.get_level_values(self.metric_level).unique():
            metric_from_key(metric_key)

        known_ids = [u.id for u in self.utilities]
        for utility_id in value.index.get_level_values(self.utility_level).unique():
            if utility_id not in known_ids:
                raise UnrecognisedValueError(
                    unrecognised_value=utility_id,
                    name="utility",
                    known_values=known_ids,
                )

    @classmethod
    def from_series(
        cls,
        series: Mapping[Metric | str, Mapping[str, Sequence[float]]],
        utilities: Iterable[Utility] = DEFAULT_UTILITIES,
        months: pd.PeriodIndex = REPORTING_MONTHS,
    ) -> TimeSeriesStore:
        """
        Build a store from plain per-metric, per-utility sequences

        Parameters
        ----------
        series
            Mapping from metric to a mapping from utility ID to monthly values

        utilities
            Catalog of utilities

        months
            Months the values refer to

        Returns
        -------
        :
            Store

        Raises
        ------
        MisalignedSeriesError
            Some sequence does not have one value per month
        """
        keys: list[tuple[str, str]] = []
        rows: list[list[float]] = []
        for metric, per_utility in series.items():
            metric_value = metric_from_key(metric).value
            for utility_id, values in per_utility.items():
                keys.append((metric_value, utility_id))
                rows.append([float(v) for v in values])

        lengths = {k: len(r) for k, r in zip(keys, rows)}
        if any(n != len(months) for n in lengths.values()):
            raise MisalignedSeriesError(lengths=lengths, expected=len(months))

        data = pd.DataFrame(
            np.array(rows, dtype=float).reshape((len(rows), len(months))),
            index=pd.MultiIndex.from_tuples(keys, names=["metric", "utility"]),
            columns=months,
        )

        return cls(data=data, utilities=tuple(utilities))

    @property
    def months(self) -> pd.PeriodIndex:
        """
        Months covered by the store
        """
        return self.data.columns

    @property
    def n_months(self) -> int:
        """
        Number of months covered by the store
        """
        return len(self.data.columns)

    @property
    def month_labels(self) -> list[str]:
        """
        Short labels of the months, e.g. `"Jan 24"`
        """
        return month_labels(self.months)

    @property
    def utility_ids(self) -> tuple[str, ...]:
        """
        IDs of the utilities in the catalog, in display order
        """
        return tuple(u.id for u in self.utilities)

    @property
    def metrics(self) -> tuple[Metric, ...]:
        """
        Metrics that have at least one series in the store
        """
        present = set(self.data.index.get_level_values(self.metric_level))
        return tuple(m for m in Metric if m.value in present)

    def check_month_index(self, month_index: int) -> None:
        """
        Raise if `month_index` is outside the reporting window

        Parameters
        ----------
        month_index
            Index to check

        Raises
        ------
        OutOfRangeIndexError
            `month_index` is outside the reporting window
        """
        assert_month_index_in_range(month_index, self.n_months)

    def resolve(self, utility_filter: UtilityFilter) -> tuple[str, ...]:
        """
        Resolve a utility filter against the store's catalog

        Parameters
        ----------
        utility_filter
            Filter to resolve

        Returns
        -------
        :
            Selected utility IDs
        """
        return resolve_utility_filter(utility_filter, self.utilities)

    def select_many(
        self, metrics: Iterable[Metric | str], utility_ids: Iterable[str]
    ) -> MetricDataFrame:
        """
        Get the series of several metrics for some utilities

        Parameters
        ----------
        metrics
            Metrics to get

        utility_ids
            Utilities to get, in the order they should appear

        Returns
        -------
        :
            Frame with one row per (metric, utility) combination
            and one column per month.
            Series that are missing, or missing values, are zero.
        """
        metric_values = [metric_from_key(m).value for m in metrics]
        utility_ids = list(utility_ids)

        locator = pd.MultiIndex.from_product(
            [metric_values, utility_ids],
            names=[self.metric_level, self.utility_level],
        )
        if locator.empty:
            return self.data.iloc[:0, :]

        present = multi_index_match(locator, self.data.index)
        if not present.all():
            logger.debug(
                "No data for {}, treating as zero",
                [key for key, p in zip(locator, present) if not p],
            )

        return self.data.reindex(locator).fillna(0.0)

    def select(self, metric: Metric | str, utility_ids: Iterable[str]) -> pd.DataFrame:
        """
        Get a metric's series for some utilities

        Parameters
        ----------
        metric
            Metric to get

        utility_ids
            Utilities to get, in the order they should appear

        Returns
        -------
        :
            Frame indexed by utility ID with one column per month.
            Series that are missing, or missing values, are zero.
        """
        return self.select_many([metric], utility_ids).reset_index(
            self.metric_level, drop=True
        )

    def series(
        self,
        metric: Metric | str,
        utility_id: str,
    ) -> pd.Series[float]:  # type: ignore # pandas-stubs confused
        """
        Get one utility's series for a metric

        Parameters
        ----------
        metric
            Metric to get

        utility_id
            Utility to get

        Returns
        -------
        :
            Monthly values (zeros if the utility did not report the metric)
        """
        get_utility(utility_id, self.utilities)
        res = self.select(metric, [utility_id]).loc[utility_id]
        res.name = metric_from_key(metric).value

        return res

    def value(self, metric: Metric | str, utility_id: str, month_index: int) -> float:
        """
        Get one utility's value for a metric in a given month

        Parameters
        ----------
        metric
            Metric to get

        utility_id
            Utility to get

        month_index
            Index of the month within the reporting window

        Returns
        -------
        :
            Value (zero if not reported)
        """
        self.check_month_index(month_index)

        return float(self.series(metric, utility_id).iloc[month_index])
