"""
Views of the data needed by the dashboard

The [Dashboard][(m).] combines the store, the geographic records
and the configuration.
Each view is a pure function of its arguments,
results are memoised per dashboard to avoid recalculating them
every time the presentation layer redraws.
"""

from __future__ import annotations

from collections.abc import Hashable, Mapping
from types import MappingProxyType
from typing import Any, Callable, TypeVar

import attr
import pandas as pd
from attrs import define, field
from loguru import logger

from energy_burden.aggregation import (
    metric_series,
    round_weighted_average,
    sum_metric,
    sum_series,
    weighted_average,
    weighted_average_series,
)
from energy_burden.config import DashboardConfig
from energy_burden.geo.colour import Colour, ColourScale
from energy_burden.geo.projection import (
    ProjectedPoint,
    project_coordinate,
    project_records,
)
from energy_burden.geo.ranking import RankablePoint, rank_points
from energy_burden.geo.records import (
    GEO_PERIOD_LABELS,
    GeoMetric,
    GeoRecord,
    geo_metric_from_key,
    to_pairs,
)
from energy_burden.geo.regions import DEFAULT_REGIONS, Landmark, Region, get_region
from energy_burden.metrics import DerivedMetric, Metric
from energy_burden.store import TimeSeriesStore
from energy_burden.trends import TrendResult, classify_trend
from energy_burden.typing import UtilityFilter
from energy_burden.utilities import ALL_UTILITIES, UtilityCategory

T = TypeVar("T")


def read_only_regions(regions: Mapping[str, Region]) -> Mapping[str, Region]:
    """
    Get a read-only copy of a region catalog
    """
    return MappingProxyType(dict(regions))


@define(frozen=True)
class Summary:
    """
    Headline figures for a month
    """

    month_index: int
    """
    Index of the month summarised
    """

    month_label: str
    """
    Label of the month summarised, e.g. `"Sep 25"`
    """

    utility_ids: tuple[str, ...]
    """
    Utilities included in the summary
    """

    arrears_customers: float
    """
    Customers in arrears
    """

    arrears_balance: float
    """
    Total arrears balance ($)
    """

    disconnections: float
    """
    Disconnections for non-payment
    """

    bill_discount_participants: float
    """
    Bill discount program participants
    """

    bill_discount_dollars: float
    """
    Bill discounts provided ($)
    """

    active_accounts: float
    """
    Active residential accounts
    """

    average_bill: int
    """
    Account-weighted average bill ($), rounded to the nearest dollar
    """

    average_electric_usage: int
    """
    Account-weighted average usage of the electric utilities (kWh)
    """

    average_gas_usage: int
    """
    Account-weighted average usage of the gas utilities (therms)
    """

    trends: tuple[tuple[str, TrendResult], ...] = field(converter=to_pairs)
    """
    Trends up to the summarised month, as `(name, trend)` pairs

    Names are `"arrears_customers"`, `"arrears_balance"`, `"disconnections"`,
    `"bill_discount_participants"` and `"average_bill"`.
    """

    def trend(self, name: str) -> TrendResult:
        """
        Get a trend by name

        Parameters
        ----------
        name
            Name of the trend, e.g. `"disconnections"`

        Returns
        -------
        :
            Trend

        Raises
        ------
        KeyError
            There is no trend called `name`
        """
        return dict(self.trends)[name]


@define(frozen=True)
class GeoView:
    """
    Everything needed to draw the geographic view
    """

    region: Region
    period: str
    period_label: str
    metric: GeoMetric

    points: tuple[ProjectedPoint, ...]
    """
    Markers within the region
    """

    ranked: tuple[RankablePoint, ...]
    """
    Records with the largest values, largest first

    On the statewide view every selected record is ranked,
    on zoomed views only the records within the region.
    """

    colour_scale: ColourScale
    legend: tuple[tuple[str, tuple[Colour, Colour]], ...] = field(converter=to_pairs)
    """
    Colours at either end of the scale, as `(utility ID, colours)` pairs
    """

    landmarks: tuple[tuple[Landmark, float, float], ...]
    """
    Landmarks of the region with their `(x, y)` position on the canvas
    """

    def at_zip(self, zip_code: str) -> tuple[ProjectedPoint, ...]:
        """
        Get the markers for a ZIP code, one per utility serving it
        """
        return tuple(p for p in self.points if p.zip_code == zip_code)


@define(frozen=True, eq=False)
class Dashboard:
    """
    Entry point for the views of the energy burden metrics

    The dashboard cannot be changed once created,
    so memoised results always match its inputs.
    Build a new dashboard to use a different configuration.
    """

    store: TimeSeriesStore
    """
    Monthly metrics
    """

    geo_records: tuple[GeoRecord, ...] = field(factory=tuple, converter=tuple)
    """
    ZIP-level records for the geographic view
    """

    config: DashboardConfig = field(factory=DashboardConfig)
    """
    Configuration
    """

    regions: Mapping[str, Region] = field(
        default=DEFAULT_REGIONS, converter=read_only_regions
    )
    """
    Regions available in the geographic view
    """

    _cache: dict[Hashable, Any] = field(factory=dict, init=False, repr=False)

    @config.validator
    def validate_config(
        self, attribute: attr.Attribute[Any], value: DashboardConfig
    ) -> None:
        """
        Validate that the current month is within the store's reporting window
        """
        self.store.check_month_index(value.current_month_index)

    def clear_cache(self) -> None:
        """
        Forget all memoised results
        """
        self._cache.clear()

    def _memoised(self, key: Hashable, calculate: Callable[[], T]) -> T:
        if key in self._cache:
            logger.debug("Cache hit for {}", key)
            res: T = self._cache[key]
        else:
            res = calculate()
            self._cache[key] = res

        # Callers get their own copy of mutable results
        if isinstance(res, (pd.Series, pd.DataFrame)):
            return res.copy()  # type: ignore[return-value]

        return res

    def _month_index(self, month_index: int | None) -> int:
        if month_index is None:
            return self.config.current_month_index

        self.store.check_month_index(month_index)

        return month_index

    def _trend(
        self,
        values: pd.Series[float],  # type: ignore # pandas-stubs confused
        month_index: int,
    ) -> TrendResult:
        return classify_trend(
            values.iloc[: month_index + 1],
            window=self.config.trend.window,
            threshold_pct=self.config.trend.threshold_pct,
        )

    def summary(
        self,
        month_index: int | None = None,
        utility_filter: UtilityFilter = ALL_UTILITIES,
    ) -> Summary:
        """
        Get the headline figures for a month

        Parameters
        ----------
        month_index
            Month to summarise. If not supplied, we use the current month.

        utility_filter
            Utilities to include

        Returns
        -------
        :
            Summary

        Raises
        ------
        OutOfRangeIndexError
            `month_index` is outside the reporting window
        """
        month_index = self._month_index(month_index)
        utility_ids = self.store.resolve(utility_filter)

        return self._memoised(
            ("summary", month_index, utility_ids),
            lambda: self._calculate_summary(month_index, utility_ids),
        )

    def _calculate_summary(
        self, month_index: int, utility_ids: tuple[str, ...]
    ) -> Summary:
        store = self.store

        def total(metric: Metric) -> float:
            return sum_metric(store, metric, month_index, utility_ids)

        def average_usage(category: UtilityCategory) -> int:
            in_category = store.resolve(category)
            return round_weighted_average(
                weighted_average(
                    store,
                    Metric.AVERAGE_USAGE,
                    Metric.ACTIVE_ACCOUNTS,
                    month_index,
                    [uid for uid in utility_ids if uid in in_category],
                )
            )

        trend_series = {
            "arrears_customers": sum_series(
                store, Metric.ARREARS_CUSTOMERS, utility_ids
            ),
            "arrears_balance": sum_series(store, Metric.ARREARS_BALANCE, utility_ids),
            "disconnections": sum_series(store, Metric.DISCONNECTIONS, utility_ids),
            "bill_discount_participants": sum_series(
                store, Metric.BILL_DISCOUNT_PARTICIPANTS, utility_ids
            ),
            "average_bill": weighted_average_series(
                store, Metric.AVERAGE_BILL, Metric.ACTIVE_ACCOUNTS, utility_ids
            ),
        }

        return Summary(
            month_index=month_index,
            month_label=store.month_labels[month_index],
            utility_ids=utility_ids,
            arrears_customers=total(Metric.ARREARS_CUSTOMERS),
            arrears_balance=total(Metric.ARREARS_BALANCE),
            disconnections=total(Metric.DISCONNECTIONS),
            bill_discount_participants=total(Metric.BILL_DISCOUNT_PARTICIPANTS),
            bill_discount_dollars=total(Metric.BILL_DISCOUNT_DOLLARS),
            active_accounts=total(Metric.ACTIVE_ACCOUNTS),
            average_bill=round_weighted_average(
                weighted_average(
                    store,
                    Metric.AVERAGE_BILL,
                    Metric.ACTIVE_ACCOUNTS,
                    month_index,
                    utility_ids,
                )
            ),
            average_electric_usage=average_usage(UtilityCategory.ELECTRIC),
            average_gas_usage=average_usage(UtilityCategory.GAS),
            trends={k: self._trend(v, month_index) for k, v in trend_series.items()},
        )

    def plot_series(
        self,
        metric: Metric | DerivedMetric | str,
        utility_filter: UtilityFilter = ALL_UTILITIES,
    ) -> pd.Series[float]:  # type: ignore # pandas-stubs confused
        """
        Get a metric's monthly series for plotting

        Parameters
        ----------
        metric
            Metric to plot

        utility_filter
            Utilities to include

        Returns
        -------
        :
            Values indexed by month label
        """
        utility_ids = self.store.resolve(utility_filter)

        def calculate() -> pd.Series[float]:  # type: ignore # pandas-stubs confused
            res = metric_series(self.store, metric, utility_ids).copy()
            res.index = pd.Index(self.store.month_labels, name="month")
            return res

        return self._memoised(("plot_series", metric, utility_ids), calculate)

    def arrears_trends(
        self, utility_filter: UtilityFilter = ALL_UTILITIES
    ) -> dict[str, TrendResult]:
        """
        Get the trends in arrears as of the current month

        Parameters
        ----------
        utility_filter
            Utilities to include

        Returns
        -------
        :
            Trends of the customers in arrears (`"customers"`)
            and of the arrears balance (`"balance"`)
        """
        utility_ids = self.store.resolve(utility_filter)
        month_index = self.config.current_month_index

        trends = self._memoised(
            ("arrears_trends", month_index, utility_ids),
            lambda: (
                (
                    "customers",
                    self._trend(
                        sum_series(self.store, Metric.ARREARS_CUSTOMERS, utility_ids),
                        month_index,
                    ),
                ),
                (
                    "balance",
                    self._trend(
                        sum_series(self.store, Metric.ARREARS_BALANCE, utility_ids),
                        month_index,
                    ),
                ),
            ),
        )

        return dict(trends)

    def disconnection_trends(
        self, utility_filter: UtilityFilter = ALL_UTILITIES
    ) -> dict[str, TrendResult]:
        """
        Get the trends in disconnections as of the current month

        Parameters
        ----------
        utility_filter
            Utilities to include

        Returns
        -------
        :
            Trends of the number of disconnections (`"disconnections"`)
            and of the disconnection rate (`"rate"`)
        """
        utility_ids = self.store.resolve(utility_filter)
        month_index = self.config.current_month_index

        trends = self._memoised(
            ("disconnection_trends", month_index, utility_ids),
            lambda: (
                (
                    "disconnections",
                    self._trend(
                        sum_series(self.store, Metric.DISCONNECTIONS, utility_ids),
                        month_index,
                    ),
                ),
                (
                    "rate",
                    self._trend(
                        metric_series(
                            self.store, DerivedMetric.DISCONNECTION_RATE, utility_ids
                        ),
                        month_index,
                    ),
                ),
            ),
        )

        return dict(trends)

    def geo_view(
        self,
        period: str = "jun",
        geo_metric: GeoMetric | str = GeoMetric.ARREARS_RATE,
        region_key: str = "statewide",
        utility_filter: UtilityFilter = ALL_UTILITIES,
    ) -> GeoView:
        """
        Get the geographic view

        Parameters
        ----------
        period
            Reporting period to show

        geo_metric
            Metric to show

        region_key
            Region to show

        utility_filter
            Utilities to include

        Returns
        -------
        :
            Geographic view

        Raises
        ------
        UnrecognisedValueError
            `geo_metric` or `region_key` is not known
        """
        geo_metric = geo_metric_from_key(geo_metric)
        region = get_region(region_key, self.regions)
        utility_ids = self.store.resolve(utility_filter)

        return self._memoised(
            ("geo_view", period, geo_metric, region_key, utility_ids),
            lambda: self._calculate_geo_view(period, geo_metric, region, utility_ids),
        )

    def _calculate_geo_view(
        self,
        period: str,
        geo_metric: GeoMetric,
        region: Region,
        utility_ids: tuple[str, ...],
    ) -> GeoView:
        settings = self.config.geo
        projection = project_records(
            self.geo_records,
            period=period,
            metric=geo_metric,
            region=region,
            utility_ids=utility_ids,
            canvas=self.config.canvas,
            settings=settings,
            utilities=self.store.utilities,
        )

        to_rank: tuple[RankablePoint, ...]
        if region.key == settings.statewide_region:
            to_rank = projection.selected
        else:
            to_rank = projection.points

        landmarks = []
        for landmark in region.landmarks:
            x, y = project_coordinate(
                landmark.lat, landmark.lng, region, self.config.canvas
            )
            landmarks.append((landmark, x, y))

        return GeoView(
            region=region,
            period=period,
            period_label=GEO_PERIOD_LABELS.get(period, period),
            metric=geo_metric,
            points=projection.points,
            ranked=rank_points(to_rank, top_n=settings.top_n),
            colour_scale=projection.colour_scale,
            legend=projection.colour_scale.legend_stops(
                u for u in self.store.utilities if u.id in utility_ids
            ),
            landmarks=tuple(landmarks),
        )
