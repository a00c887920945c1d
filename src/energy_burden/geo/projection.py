"""
Projection of geographic records onto the map canvas

The projection is a linear map of the region's bounding box
onto the canvas, less its margins.
Latitude increases upwards, canvas `y` increases downwards.
"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable, Sequence

from attrs import define
from loguru import logger

from energy_burden.config import GeoDisplaySettings, MapCanvas
from energy_burden.geo.colour import Colour, ColourScale
from energy_burden.geo.records import (
    GeoMetric,
    GeoRecord,
    GeoValue,
    select_geo_values,
)
from energy_burden.geo.regions import Region, check_region_extent
from energy_burden.utilities import DEFAULT_UTILITIES, Utility, get_utility


def project_coordinate(
    lat: float, lng: float, region: Region, canvas: MapCanvas
) -> tuple[float, float]:
    """
    Project a coordinate onto the canvas

    Parameters
    ----------
    lat
        Latitude

    lng
        Longitude

    region
        Region shown on the canvas

    canvas
        Canvas to project onto

    Returns
    -------
    :
        `(x, y)` position on the canvas.
        The region's western and eastern edges map to `margin`
        and `width - margin`,
        its northern and southern edges map to `margin` and `height - margin`.

    Raises
    ------
    InvalidRegionError
        `region` has a zero width or height
    """
    check_region_extent(
        region.name, region.lat_min, region.lat_max, region.lng_min, region.lng_max
    )

    x = (lng - region.lng_min) / (region.lng_max - region.lng_min) * (
        canvas.width - 2 * canvas.margin
    ) + canvas.margin
    y = (
        canvas.height
        - canvas.margin
        - (lat - region.lat_min)
        / (region.lat_max - region.lat_min)
        * (canvas.height - 2 * canvas.margin)
    )

    return x, y


def collision_offsets(
    values: Sequence[GeoValue], offset_px: float, utility_order: Sequence[str]
) -> list[float]:
    """
    Calculate lateral offsets that separate records at the same location

    Parameters
    ----------
    values
        Records being drawn

    offset_px
        Distance between neighbouring markers

    utility_order
        Order of the utilities, used to rank records sharing a location

    Returns
    -------
    :
        Offset of each record in `values`, in the same order.
        Records at a unique location have an offset of zero,
        `n` records sharing a location are centred on it,
        `(rank - (n - 1) / 2) * offset_px` from it.
    """
    utility_rank = {uid: i for i, uid in enumerate(utility_order)}

    groups: dict[tuple[float, float], list[int]] = defaultdict(list)
    for i, v in enumerate(values):
        groups[(v.record.lat, v.record.lng)].append(i)

    offsets = [0.0] * len(values)
    for members in groups.values():
        n = len(members)
        if n == 1:
            continue

        ordered = sorted(
            members,
            key=lambda i: (
                utility_rank.get(values[i].utility_id, len(utility_rank)),
                values[i].utility_id,
                values[i].zip_code,
                i,
            ),
        )
        for rank, i in enumerate(ordered):
            offsets[i] = (rank - (n - 1) / 2) * offset_px

    return offsets


@define(frozen=True)
class ProjectedPoint:
    """
    A record placed on the canvas
    """

    record: GeoRecord
    """
    Record being drawn
    """

    value: float
    """
    Value of the metric being shown
    """

    x: float
    """
    Horizontal position of the record's location
    """

    y: float
    """
    Vertical position of the record's location
    """

    x_offset: float
    """
    Lateral shift applied when drawing, to separate records at the same location
    """

    colour: Colour
    """
    Marker colour
    """

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

    @property
    def display_x(self) -> float:
        """
        Horizontal position at which to draw the marker
        """
        return self.x + self.x_offset


@define(frozen=True)
class GeoProjection:
    """
    Result of projecting records onto a region
    """

    selected: tuple[GeoValue, ...]
    """
    Every record selected for display, whether or not it is in the region
    """

    points: tuple[ProjectedPoint, ...]
    """
    Records within the region, placed on the canvas
    """

    colour_scale: ColourScale
    """
    Colour scale fitted to the values of `points`
    """


def project_records(  # noqa: PLR0913
    records: Iterable[GeoRecord],
    period: str,
    metric: GeoMetric | str,
    region: Region,
    utility_ids: Sequence[str],
    canvas: MapCanvas | None = None,
    settings: GeoDisplaySettings | None = None,
    utilities: Iterable[Utility] = DEFAULT_UTILITIES,
) -> GeoProjection:
    """
    Project records onto a region of the map

    Parameters
    ----------
    records
        All available records

    period
        Reporting period to show

    metric
        Metric to show

    region
        Region to show

    utility_ids
        Utilities to include

    canvas
        Canvas to project onto

        If not supplied, we use the default canvas.

    settings
        Display settings

        If not supplied, we use the default settings.

    utilities
        Catalog of utilities, used for colours and for collision ordering

    Returns
    -------
    :
        Selected records and their projection onto the canvas

    Raises
    ------
    InvalidRegionError
        `region` has a zero width or height
    """
    if canvas is None:
        canvas = MapCanvas()

    if settings is None:
        settings = GeoDisplaySettings()

    utilities = tuple(utilities)
    check_region_extent(
        region.name, region.lat_min, region.lat_max, region.lng_min, region.lng_max
    )

    selected = select_geo_values(
        records,
        period=period,
        metric=metric,
        utility_ids=utility_ids,
        min_active_accounts=settings.min_active_accounts,
    )
    visible = [v for v in selected if region.contains(v.record.lat, v.record.lng)]
    logger.info(
        "Projecting {} of {} selected records onto region {!r}",
        len(visible),
        len(selected),
        region.key,
    )

    colour_scale = ColourScale.from_values(
        [v.value for v in visible],
        lightness_low_value=settings.lightness_low_value,
        lightness_high_value=settings.lightness_high_value,
    )
    offsets = collision_offsets(
        visible,
        offset_px=settings.collision_offset(region.key),
        utility_order=[u.id for u in utilities],
    )

    points = []
    for v, x_offset in zip(visible, offsets):
        x, y = project_coordinate(v.record.lat, v.record.lng, region, canvas)
        utility = get_utility(v.utility_id, utilities)
        points.append(
            ProjectedPoint(
                record=v.record,
                value=v.value,
                x=x,
                y=y,
                x_offset=x_offset,
                colour=colour_scale.colour_for_utility(v.value, utility),
            )
        )

    return GeoProjection(
        selected=selected, points=tuple(points), colour_scale=colour_scale
    )
