"""
ZIP-level records used by the geographic view

Each record is one utility's service in one ZIP code,
with a snapshot of its accounts for each reporting period.
Several utilities may serve the same ZIP code,
giving several records at the same location.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from enum import Enum
from typing import Any, TypeVar

from attrs import define, field
from loguru import logger

from energy_burden.exceptions import UnrecognisedValueError

K = TypeVar("K")
V = TypeVar("V")

GEO_PERIOD_LABELS: dict[str, str] = {
    "apr": "April 2025",
    "may": "May 2025",
    "jun": "June 2025",
}
"""
Display labels of the reporting periods in the default geographic data
"""


@define(frozen=True)
class GeoSnapshot:
    """
    Account counts of one record in one reporting period
    """

    active_accounts: int
    """
    Active residential accounts
    """

    arrears_count: int
    """
    Accounts in arrears
    """

    disconnections: int
    """
    Disconnections for non-payment
    """


def to_pairs(value: Mapping[K, V] | Iterable[tuple[K, V]]) -> tuple[tuple[K, V], ...]:
    """
    Convert a mapping to `(key, value)` pairs

    Pairs can be stored on frozen classes without breaking their hash.

    Parameters
    ----------
    value
        Mapping, or `(key, value)` pairs

    Returns
    -------
    :
        `(key, value)` pairs, in the order they were supplied
    """
    if isinstance(value, Mapping):
        return tuple(value.items())

    return tuple((k, v) for k, v in value)


@define(frozen=True)
class GeoRecord:
    """
    One utility's service within one ZIP code
    """

    zip_code: str
    """
    ZIP code
    """

    lat: float
    """
    Latitude of the ZIP code's centroid
    """

    lng: float
    """
    Longitude of the ZIP code's centroid
    """

    utility_id: str
    """
    ID of the utility serving the ZIP code
    """

    snapshots: tuple[tuple[str, GeoSnapshot], ...] = field(
        factory=tuple, converter=to_pairs
    )
    """
    Snapshots as `(reporting period, snapshot)` pairs

    A mapping from period to snapshot is also accepted on creation.
    """

    @property
    def periods(self) -> tuple[str, ...]:
        """
        Reporting periods with a snapshot
        """
        return tuple(period for period, _ in self.snapshots)

    def snapshot(self, period: str) -> GeoSnapshot | None:
        """
        Get the snapshot for a period, `None` if the period was not reported
        """
        for snapshot_period, snapshot in self.snapshots:
            if snapshot_period == period:
                return snapshot

        return None


class GeoMetric(Enum):
    """
    Metrics that can be shown on the map
    """

    ARREARS_RATE = "arrears_rate"
    DISCONNECTION_RATE = "disc_rate"
    ARREARS_COUNT = "arrears_count"
    DISCONNECTIONS = "disconnections"

    @property
    def label(self) -> str:
        """
        Display label
        """
        return {
            GeoMetric.ARREARS_RATE: "Arrears Rate (%)",
            GeoMetric.DISCONNECTION_RATE: "Disconnection Rate (%)",
            GeoMetric.ARREARS_COUNT: "Accounts in Arrears",
            GeoMetric.DISCONNECTIONS: "Disconnections",
        }[self]

    def format(self, value: float) -> str:
        """
        Format a value of this metric for display

        Parameters
        ----------
        value
            Value to format

        Returns
        -------
        :
            Formatted value, e.g. `"18.4%"` or `"1,862"`
        """
        if self is GeoMetric.ARREARS_RATE:
            return f"{value:.1f}%"

        if self is GeoMetric.DISCONNECTION_RATE:
            return f"{value:.2f}%"

        return f"{value:,.0f}"


def geo_metric_from_key(key: str | GeoMetric) -> GeoMetric:
    """
    Get the [GeoMetric][(m).] for a string key

    Parameters
    ----------
    key
        Key to look up

    Returns
    -------
    :
        Geographic metric

    Raises
    ------
    UnrecognisedValueError
        `key` is not a known geographic metric
    """
    if isinstance(key, GeoMetric):
        return key

    try:
        return GeoMetric(key)
    except ValueError as exc:
        raise UnrecognisedValueError(
            unrecognised_value=key,
            name="geographic metric",
            known_values=[m.value for m in GeoMetric],
        ) from exc


def geo_metric_value(
    snapshot: GeoSnapshot | None, metric: GeoMetric | str
) -> float:
    """
    Calculate the value of a geographic metric for a snapshot

    Parameters
    ----------
    snapshot
        Snapshot to use

    metric
        Metric to calculate

    Returns
    -------
    :
        Value of the metric.
        Zero if there is no snapshot or it has no active accounts.
    """
    metric = geo_metric_from_key(metric)
    if snapshot is None or snapshot.active_accounts <= 0:
        return 0.0

    if metric is GeoMetric.ARREARS_RATE:
        return snapshot.arrears_count / snapshot.active_accounts * 100.0

    if metric is GeoMetric.DISCONNECTION_RATE:
        return snapshot.disconnections / snapshot.active_accounts * 100.0

    if metric is GeoMetric.ARREARS_COUNT:
        return float(snapshot.arrears_count)

    return float(snapshot.disconnections)


@define(frozen=True)
class GeoValue:
    """
    A record together with the value of the metric being shown
    """

    record: GeoRecord
    value: float

    @property
    def zip_code(self) -> str:
        """
        ZIP code of the record
        """
        return self.record.zip_code

    @property
    def utility_id(self) -> str:
        """
        Utility of the record
        """
        return self.record.utility_id


def select_geo_values(
    records: Iterable[GeoRecord],
    period: str,
    metric: GeoMetric | str,
    utility_ids: Iterable[str],
    min_active_accounts: int = 20,
) -> tuple[GeoValue, ...]:
    """
    Select the records to display and calculate their values

    Parameters
    ----------
    records
        All available records

    period
        Reporting period to show

    metric
        Metric to show

    utility_ids
        Utilities to include, in the order their records should be returned

    min_active_accounts
        Records need strictly more active accounts than this in `period`
        to be selected.
        Records with no snapshot for `period` are never selected.

    Returns
    -------
    :
        Selected records with their values,
        grouped by utility in the order of `utility_ids`
        and otherwise in the order of `records`
    """
    metric = geo_metric_from_key(metric)
    records = tuple(records)

    res = []
    for utility_id in utility_ids:
        for record in records:
            if record.utility_id != utility_id:
                continue

            snapshot = record.snapshot(period)
            if snapshot is None or snapshot.active_accounts <= min_active_accounts:
                continue

            res.append(GeoValue(record, geo_metric_value(snapshot, metric)))

    logger.debug(
        "Selected {} of {} records for period={!r}", len(res), len(records), period
    )

    return tuple(res)


def records_from_mapping(
    data: Mapping[str, Iterable[Mapping[str, Any]]],
) -> tuple[GeoRecord, ...]:
    """
    Build records from plain nested mappings

    Parameters
    ----------
    data
        Mapping from utility ID to a list of ZIP entries.
        Each entry has the keys `"zip"`, `"lat"`, `"lng"`
        and one key per reporting period,
        whose value has the keys `"active"`, `"arrears"` and `"disc"`.

    Returns
    -------
    :
        Records, in the order they appear in `data`

    Examples
    --------
    >>> records = records_from_mapping(
    ...     {
    ...         "pge": [
    ...             {
    ...                 "zip": "97003",
    ...                 "lat": 45.527,
    ...                 "lng": -122.887,
    ...                 "apr": {"active": 11334, "arrears": 1862, "disc": 69},
    ...             }
    ...         ]
    ...     }
    ... )
    >>> records[0].snapshot("apr").arrears_count
    1862
    """
    location_keys = {"zip", "lat", "lng"}

    res = []
    for utility_id, entries in data.items():
        for entry in entries:
            snapshots = {
                period: GeoSnapshot(
                    active_accounts=int(values["active"]),
                    arrears_count=int(values["arrears"]),
                    disconnections=int(values["disc"]),
                )
                for period, values in entry.items()
                if period not in location_keys
            }
            res.append(
                GeoRecord(
                    zip_code=str(entry["zip"]),
                    lat=float(entry["lat"]),
                    lng=float(entry["lng"]),
                    utility_id=utility_id,
                    snapshots=snapshots,
                )
            )

    return tuple(res)
