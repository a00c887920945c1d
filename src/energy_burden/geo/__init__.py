"""
Geographic view of ZIP-level records

Selection of records, projection onto a map canvas,
colouring by value and ranking.
"""

from __future__ import annotations

from energy_burden.geo.colour import Colour, ColourScale
from energy_burden.geo.projection import (
    GeoProjection,
    ProjectedPoint,
    project_coordinate,
    project_records,
)
from energy_burden.geo.ranking import rank_points
from energy_burden.geo.records import (
    GeoMetric,
    GeoRecord,
    GeoSnapshot,
    geo_metric_value,
    records_from_mapping,
)
from energy_burden.geo.regions import DEFAULT_REGIONS, Region, get_region

__all__ = [
    "DEFAULT_REGIONS",
    "Colour",
    "ColourScale",
    "GeoMetric",
    "GeoProjection",
    "GeoRecord",
    "GeoSnapshot",
    "ProjectedPoint",
    "Region",
    "geo_metric_value",
    "get_region",
    "project_coordinate",
    "project_records",
    "rank_points",
    "records_from_mapping",
]
