"""
Metrics reported under the Oregon energy burden metrics rules

The raw metrics are the monthly values each utility reports.
Derived metrics are ratios of two raw metrics.
Definitions follow OAR 860-021-0408.
"""

from __future__ import annotations

from enum import Enum

import pandas as pd
from attrs import define

from energy_burden.exceptions import UnrecognisedValueError

REPORTING_MONTHS: pd.PeriodIndex = pd.period_range(
    "2024-01", "2025-09", freq="M", name="month"
)
"""
The fixed reporting window (January 2024 to September 2025)
"""


class Metric(Enum):
    """
    Raw monthly metrics reported per utility
    """

    ACTIVE_ACCOUNTS = "active_accounts"
    ARREARS_CUSTOMERS = "arrears_customers"
    ARREARS_CUSTOMERS_31_60 = "arrears_customers_31_60"
    ARREARS_CUSTOMERS_61_90 = "arrears_customers_61_90"
    ARREARS_CUSTOMERS_91_PLUS = "arrears_customers_91_plus"
    ARREARS_BALANCE = "arrears_balance"
    ARREARS_BALANCE_31_60 = "arrears_balance_31_60"
    ARREARS_BALANCE_61_90 = "arrears_balance_61_90"
    ARREARS_BALANCE_91_PLUS = "arrears_balance_91_plus"
    DISCONNECTIONS = "disconnections"
    DISCONNECTION_PCT = "disconnection_pct"
    DISCONNECTION_NOTICES = "disconnection_notices"
    RECONNECTIONS = "reconnections"
    BILL_DISCOUNT_PARTICIPANTS = "bill_discount_participants"
    BILL_DISCOUNT_DOLLARS = "bill_discount_dollars"
    BILL_DISCOUNT_DISCONNECTIONS = "bill_discount_disconnections"
    BILL_DISCOUNT_PARTICIPANTS_WITH_ARREARS = "bill_discount_participants_with_arrears"
    BILL_DISCOUNT_ARREARS_BALANCE = "bill_discount_arrears_balance"
    AVERAGE_BILL = "average_bill"
    AVERAGE_USAGE = "average_usage"


ARREARS_BALANCE_BUCKETS: dict[str, Metric] = {
    "31-60 Days": Metric.ARREARS_BALANCE_31_60,
    "61-90 Days": Metric.ARREARS_BALANCE_61_90,
    "91+ Days": Metric.ARREARS_BALANCE_91_PLUS,
}
"""
Aging buckets of the arrears balance, keyed by display label
"""

ARREARS_CUSTOMERS_BUCKETS: dict[str, Metric] = {
    "31-60 Days": Metric.ARREARS_CUSTOMERS_31_60,
    "61-90 Days": Metric.ARREARS_CUSTOMERS_61_90,
    "91+ Days": Metric.ARREARS_CUSTOMERS_91_PLUS,
}
"""
Aging buckets of the customers in arrears, keyed by display label
"""


@define(frozen=True)
class DerivedMetricDefinition:
    """
    A metric computed as `numerator / denominator * scale`
    """

    numerator: Metric
    denominator: Metric
    scale: float


class DerivedMetric(Enum):
    """
    Ratios of raw metrics

    Percentages use a scale of 100, per-unit averages a scale of 1.
    """

    DISCONNECTION_RATE = "disconnection_rate"
    RECONNECTION_RATE = "reconnection_rate"
    AVERAGE_ARREARS = "average_arrears"
    BILL_DISCOUNT_DISCONNECTION_RATE = "bill_discount_disconnection_rate"
    BILL_DISCOUNT_DISCONNECTION_SHARE = "bill_discount_disconnection_share"
    BILL_DISCOUNT_ARREARS_RATE = "bill_discount_arrears_rate"
    BILL_DISCOUNT_AVERAGE_ARREARS = "bill_discount_average_arrears"

    @property
    def definition(self) -> DerivedMetricDefinition:
        """
        Numerator, denominator and scale of the ratio
        """
        return DERIVED_METRIC_DEFINITIONS[self]


DERIVED_METRIC_DEFINITIONS: dict[DerivedMetric, DerivedMetricDefinition] = {
    DerivedMetric.DISCONNECTION_RATE: DerivedMetricDefinition(
        Metric.DISCONNECTIONS, Metric.ACTIVE_ACCOUNTS, 100.0
    ),
    DerivedMetric.RECONNECTION_RATE: DerivedMetricDefinition(
        Metric.RECONNECTIONS, Metric.DISCONNECTIONS, 100.0
    ),
    DerivedMetric.AVERAGE_ARREARS: DerivedMetricDefinition(
        Metric.ARREARS_BALANCE, Metric.ARREARS_CUSTOMERS, 1.0
    ),
    DerivedMetric.BILL_DISCOUNT_DISCONNECTION_RATE: DerivedMetricDefinition(
        Metric.BILL_DISCOUNT_DISCONNECTIONS, Metric.BILL_DISCOUNT_PARTICIPANTS, 100.0
    ),
    DerivedMetric.BILL_DISCOUNT_DISCONNECTION_SHARE: DerivedMetricDefinition(
        Metric.BILL_DISCOUNT_DISCONNECTIONS, Metric.DISCONNECTIONS, 100.0
    ),
    DerivedMetric.BILL_DISCOUNT_ARREARS_RATE: DerivedMetricDefinition(
        Metric.BILL_DISCOUNT_PARTICIPANTS_WITH_ARREARS,
        Metric.BILL_DISCOUNT_PARTICIPANTS,
        100.0,
    ),
    DerivedMetric.BILL_DISCOUNT_AVERAGE_ARREARS: DerivedMetricDefinition(
        Metric.BILL_DISCOUNT_ARREARS_BALANCE,
        Metric.BILL_DISCOUNT_PARTICIPANTS_WITH_ARREARS,
        1.0,
    ),
}


@define(frozen=True)
class MetricDescription:
    """
    Human-readable description of a metric
    """

    title: str
    """
    Display title
    """

    definition: str
    """
    Regulatory definition
    """

    source: str
    """
    Where the definition comes from
    """


METRIC_DESCRIPTIONS: dict[Metric | DerivedMetric, MetricDescription] = {
    Metric.ACTIVE_ACCOUNTS: MetricDescription(
        "Active Residential Accounts",
        "Residential accounts receiving utility service during the reporting month.",
        "OAR 860-021-0408(1)(q)",
    ),
    Metric.ARREARS_CUSTOMERS: MetricDescription(
        "Customers in Arrears",
        "Residential customers with an arrearage balance, any amount owed "
        "to the utility for services provided which remains unpaid "
        "past the bill issuance date.",
        "OAR 860-021-0408(1)(c)",
    ),
    Metric.ARREARS_BALANCE: MetricDescription(
        "Total Residential Arrearage Balances",
        "The total dollar amount of outstanding balances owed "
        "by residential customers on their utility bills.",
        "OAR 860-021-0408(1)(w)",
    ),
    Metric.ARREARS_BALANCE_31_60: MetricDescription(
        "31-60 Days in Arrears",
        "Arrearage balance unpaid for between 31 and 60 days "
        "from the original bill issuance date.",
        "OAR 860-021-0408(1)(i)(A)",
    ),
    Metric.ARREARS_BALANCE_61_90: MetricDescription(
        "61-90 Days in Arrears",
        "Arrearage balance unpaid for between 61 and 90 days "
        "from the original bill issuance date.",
        "OAR 860-021-0408(1)(i)(B)",
    ),
    Metric.ARREARS_BALANCE_91_PLUS: MetricDescription(
        "91+ Days in Arrears",
        "Arrearage balance unpaid for more than 90 days "
        "from the original bill issuance date.",
        "OAR 860-021-0408(1)(i)(C)",
    ),
    Metric.DISCONNECTIONS: MetricDescription(
        "Service Disconnection for Non-Payment",
        "Instances where service to a residential account was terminated "
        "due to the customer's failure to pay their utility bill.",
        "OAR 860-021-0408(1)(r)",
    ),
    Metric.DISCONNECTION_NOTICES: MetricDescription(
        "Disconnection Notice",
        "Any written or electronic notification issued by a utility "
        "to a customer in accordance with OAR 860-021-0405.",
        "OAR 860-021-0408(1)(j)",
    ),
    Metric.RECONNECTIONS: MetricDescription(
        "Reconnections",
        "Instances where service was restored to a residential account "
        "following a service disconnection for non-payment.",
        "OAR 860-021-0408",
    ),
    Metric.BILL_DISCOUNT_PARTICIPANTS: MetricDescription(
        "Bill Discount Program Participants",
        "Residential customers enrolled in a utility-administered "
        "bill discount program for low-income customers.",
        "OAR 860-021-0408",
    ),
    Metric.BILL_DISCOUNT_DOLLARS: MetricDescription(
        "Total Dollars Provided to Bill Discount Program Participants",
        "The aggregate dollar value of discounts applied to the utility bills "
        "of residential customers who participate in the bill discount program.",
        "OAR 860-021-0408(1)(v)",
    ),
    Metric.BILL_DISCOUNT_DISCONNECTIONS: MetricDescription(
        "Bill Discount Recipient Disconnections",
        "Disconnections for non-payment of residential accounts "
        "enrolled in a bill discount program.",
        "Derived from OAR 860-021-0408(1)(r)",
    ),
    Metric.BILL_DISCOUNT_PARTICIPANTS_WITH_ARREARS: MetricDescription(
        "Bill Discount Program Participants with Arrears",
        "Bill discount program participants with an arrearage balance.",
        "Derived from OAR 860-021-0408(1)(c), (1)(s)",
    ),
    Metric.BILL_DISCOUNT_ARREARS_BALANCE: MetricDescription(
        "Total Arrears Balance of Bill Discount Program Participants",
        "The total outstanding balances owed by residential customers "
        "enrolled in a utility-administered bill discount program.",
        "OAR 860-021-0408(1)(s)",
    ),
    Metric.AVERAGE_BILL: MetricDescription(
        "Average Residential Bill",
        "The average monthly bill for residential utility services "
        "within a utility's Oregon service territory.",
        "OAR 860-021-0408(1)(f)",
    ),
    Metric.AVERAGE_USAGE: MetricDescription(
        "Average Residential Usage",
        "The average monthly amount of energy billed per residential meter "
        "within a utility's Oregon service territory.",
        "OAR 860-021-0408(1)(g)",
    ),
    DerivedMetric.DISCONNECTION_RATE: MetricDescription(
        "Disconnection Rate",
        "Disconnections divided by total active residential accounts.",
        "Derived from OAR 860-021-0408(1)(r)",
    ),
    DerivedMetric.RECONNECTION_RATE: MetricDescription(
        "Reconnection Rate",
        "The percentage of disconnected customers whose service was restored.",
        "Derived from OAR 860-021-0408",
    ),
    DerivedMetric.AVERAGE_ARREARS: MetricDescription(
        "Average Arrears per Customer",
        "The total residential arrearage balance divided by "
        "the number of customers with an arrearage balance.",
        "Derived from OAR 860-021-0408(1)(c), (1)(w)",
    ),
    DerivedMetric.BILL_DISCOUNT_ARREARS_RATE: MetricDescription(
        "Bill Discount Arrears Rate",
        "The percentage of bill discount program participants "
        "with an arrearage balance.",
        "Derived from OAR 860-021-0408(1)(s)",
    ),
}
"""
Descriptions of the metrics, where the rules provide one
"""


def metric_from_key(key: str | Metric) -> Metric:
    """
    Get the [Metric][(m).] for a string key

    Parameters
    ----------
    key
        Key to look up (the metric's value, e.g. `"arrears_balance"`)

    Returns
    -------
    :
        Metric

    Raises
    ------
    UnrecognisedValueError
        `key` is not a known metric
    """
    if isinstance(key, Metric):
        return key

    try:
        return Metric(key)
    except ValueError as exc:
        raise UnrecognisedValueError(
            unrecognised_value=key,
            name="metric",
            known_values=[m.value for m in Metric],
        ) from exc


def describe_metric(metric: Metric | DerivedMetric) -> MetricDescription:
    """
    Get the description of a metric

    Metrics without a regulatory definition
    fall back to a title built from their name.

    Parameters
    ----------
    metric
        Metric to describe

    Returns
    -------
    :
        Description of `metric`
    """
    try:
        return METRIC_DESCRIPTIONS[metric]
    except KeyError:
        return MetricDescription(
            title=metric.value.replace("_", " ").capitalize(),
            definition="",
            source="",
        )


def month_labels(months: pd.PeriodIndex) -> list[str]:
    """
    Get the short display labels of months

    Parameters
    ----------
    months
        Months to label

    Returns
    -------
    :
        Labels like `"Jan 24"`
    """
    return [m.strftime("%b %y") for m in months]
