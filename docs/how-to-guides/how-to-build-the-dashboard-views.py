# ---
# jupyter:
#   jupytext:
#     text_representation:
#       extension: .py
#       format_name: percent
#       format_version: '1.3'
#       jupytext_version: 1.16.6
#   kernelspec:
#     display_name: Python 3 (ipykernel)
#     language: python
#     name: python3
# ---

# %% [markdown]
# # How to build the dashboard views
#
# Here we demonstrate how to go from the monthly series reported by the utilities
# to the figures shown on the dashboard.
# Drawing the charts and the map is left to the presentation layer,
# everything here produces plain numbers, `pandas` objects and points.

# %% [markdown]
# ## Imports

# %%
import numpy as np
import pandas as pd
from loguru import logger

from energy_burden.aggregation import rate, sum_metric, weighted_average
from energy_burden.dashboard import Dashboard
from energy_burden.export import export_sheets
from energy_burden.geo.records import records_from_mapping
from energy_burden.metrics import REPORTING_MONTHS, Metric
from energy_burden.store import TimeSeriesStore

# %%
# Opt in to the package's log messages
logger.enable("energy_burden")

# %% [markdown]
# ## Starting point
#
# The starting point is one sequence of 21 monthly values
# (January 2024 to September 2025)
# per metric per utility.
# Here we make up some values for two utilities
# (you would normally use the values reported to the PUC).

# %%
n_months = len(REPORTING_MONTHS)
rng = np.random.default_rng(seed=2025)

series = {
    Metric.ACTIVE_ACCOUNTS: {
        "pge": np.linspace(822_000, 842_000, n_months),
        "nwn": np.linspace(643_000, 648_000, n_months),
    },
    Metric.ARREARS_CUSTOMERS: {
        "pge": rng.normal(125_000, 8_000, n_months).round(),
        "nwn": rng.normal(52_000, 3_000, n_months).round(),
    },
    Metric.DISCONNECTIONS: {
        "pge": rng.integers(300, 4_800, n_months),
        "nwn": rng.integers(0, 1_500, n_months),
    },
    Metric.AVERAGE_BILL: {
        "pge": rng.normal(130, 15, n_months).round(),
        "nwn": rng.normal(70, 25, n_months).round(),
    },
}

store = TimeSeriesStore.from_series(series)
store.data

# %% [markdown]
# ## Aggregating across utilities
#
# Counts are summed.
# Per-account values are averaged with active accounts as weights,
# otherwise a small utility would count as much as a large one.

# %%
current = 20
sum_metric(store, Metric.ARREARS_CUSTOMERS, current)

# %%
weighted_average(store, Metric.AVERAGE_BILL, Metric.ACTIVE_ACCOUNTS, current)

# %%
rate(store, Metric.DISCONNECTIONS, Metric.ACTIVE_ACCOUNTS, current, "nwn")

# %% [markdown]
# ## The dashboard
#
# The [Dashboard][energy_burden.dashboard.Dashboard] bundles
# the views shown on each tab and memoises them.

# %%
geo_records = records_from_mapping(
    {
        "pge": [
            {
                "zip": "97003",
                "lat": 45.527,
                "lng": -122.887,
                "jun": {"active": 11325, "arrears": 1941, "disc": 68},
            },
            {
                "zip": "97233",
                "lat": 45.517,
                "lng": -122.5,
                "jun": {"active": 15684, "arrears": 4428, "disc": 164},
            },
        ],
        "nwn": [
            {
                "zip": "97003",
                "lat": 45.527,
                "lng": -122.887,
                "jun": {"active": 7039, "arrears": 689, "disc": 32},
            },
        ],
    }
)
dashboard = Dashboard(store=store, geo_records=geo_records)

# %%
summary = dashboard.summary()
summary.month_label, summary.average_bill

# %%
{
    name: f"{trend.direction.arrow} {trend.change_pct_display}"
    for name, trend in summary.trends
}

# %%
dashboard.plot_series(Metric.AVERAGE_BILL, utility_filter=["pge", "nwn"])

# %% [markdown]
# ### The geographic view
#
# Records at the same ZIP code are spread out sideways
# so that every utility's marker stays visible.

# %%
geo_view = dashboard.geo_view(period="jun", region_key="portland")
pd.DataFrame(
    [
        {
            "zip": p.zip_code,
            "utility": p.utility_id,
            "value": geo_view.metric.format(p.value),
            "x": p.display_x,
            "y": p.y,
            "colour": p.colour.css,
        }
        for p in geo_view.points
    ]
)

# %% [markdown]
# ## Export
#
# The tables of the workbook can be written with any `pandas` writer.

# %%
sheets = export_sheets(store)
sheets["Summary"]
