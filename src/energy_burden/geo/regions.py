"""
Geographic regions the map can be zoomed to
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import attr
from attrs import define, field

from energy_burden.exceptions import InvalidRegionError, UnrecognisedValueError


@define(frozen=True)
class Landmark:
    """
    A named place drawn on the map for orientation
    """

    name: str
    lat: float
    lng: float


def check_region_extent(
    name: str, lat_min: float, lat_max: float, lng_min: float, lng_max: float
) -> None:
    """
    Check that a bounding box has a strictly positive extent in both directions

    Parameters
    ----------
    name
        Name of the region (used in the error message)

    lat_min
        Minimum latitude

    lat_max
        Maximum latitude

    lng_min
        Minimum longitude

    lng_max
        Maximum longitude

    Raises
    ------
    InvalidRegionError
        The bounding box has zero (or negative) width or height
    """
    if not (lat_max > lat_min and lng_max > lng_min):
        raise InvalidRegionError(
            name=name,
            lat_min=lat_min,
            lat_max=lat_max,
            lng_min=lng_min,
            lng_max=lng_max,
        )


@define(frozen=True)
class Region:
    """
    A rectangular latitude/longitude bounding box
    """

    key: str
    """
    Identifier of the region
    """

    name: str
    """
    Display name
    """

    lat_min: float
    """
    Southern edge (degrees)
    """

    lat_max: float
    """
    Northern edge (degrees)
    """

    lng_min: float
    """
    Western edge (degrees)
    """

    lng_max: float = field()
    """
    Eastern edge (degrees)
    """

    landmarks: tuple[Landmark, ...] = field(default=(), converter=tuple)
    """
    Places to mark on the map when this region is shown
    """

    @lng_max.validator
    def validate_extent(self, attribute: attr.Attribute[Any], value: float) -> None:
        """
        Validate that the region has a non-zero width and height
        """
        check_region_extent(
            self.name, self.lat_min, self.lat_max, self.lng_min, value
        )

    def contains(self, lat: float, lng: float) -> bool:
        """
        Check whether a point lies within the region

        Points on the edges are inside.

        Parameters
        ----------
        lat
            Latitude of the point

        lng
            Longitude of the point

        Returns
        -------
        :
            `True` if the point is within the bounds, otherwise `False`
        """
        return (
            self.lat_min <= lat <= self.lat_max and self.lng_min <= lng <= self.lng_max
        )


def _landmarks(*items: tuple[str, float, float]) -> tuple[Landmark, ...]:
    return tuple(Landmark(name, lat, lng) for name, lat, lng in items)


DEFAULT_REGIONS: dict[str, Region] = {
    r.key: r
    for r in (
        Region(
            "statewide",
            "Entire State",
            41.95,
            46.30,
            -124.60,
            -116.45,
            _landmarks(
                ("Portland", 45.52, -122.68),
                ("Salem", 44.94, -123.03),
                ("Eugene", 44.05, -123.09),
                ("Bend", 44.06, -121.31),
                ("Medford", 42.33, -122.87),
                ("Pendleton", 45.67, -118.78),
                ("Ontario", 44.03, -116.96),
                ("Klamath Falls", 42.22, -121.77),
                ("Astoria", 46.18, -123.83),
            ),
        ),
        Region(
            "portland",
            "Portland Metro",
            45.30,
            45.75,
            -123.15,
            -122.25,
            _landmarks(
                ("Portland", 45.52, -122.68),
                ("Gresham", 45.50, -122.43),
                ("Hillsboro", 45.52, -122.99),
                ("Beaverton", 45.49, -122.80),
            ),
        ),
        Region(
            "salem",
            "Salem/Albany",
            44.10,
            45.30,
            -123.85,
            -122.35,
            _landmarks(
                ("Salem", 44.94, -123.03),
                ("Albany", 44.63, -123.10),
                ("Corvallis", 44.56, -123.26),
                ("Dallas", 44.92, -123.32),
            ),
        ),
        Region(
            "southern",
            "Southern Oregon",
            41.95,
            43.70,
            -124.20,
            -120.80,
            _landmarks(
                ("Medford", 42.33, -122.87),
                ("Ashland", 42.19, -122.71),
                ("Grants Pass", 42.44, -123.33),
                ("Klamath Falls", 42.22, -121.77),
                ("Roseburg", 43.22, -123.34),
            ),
        ),
        Region(
            "central",
            "Central Oregon",
            43.40,
            45.00,
            -122.10,
            -119.70,
            _landmarks(
                ("Bend", 44.06, -121.31),
                ("Redmond", 44.27, -121.17),
                ("Prineville", 44.30, -120.83),
                ("Madras", 44.63, -121.13),
            ),
        ),
        Region(
            "coast",
            "Oregon Coast",
            44.10,
            46.30,
            -124.25,
            -123.30,
            _landmarks(
                ("Astoria", 46.18, -123.83),
                ("Seaside", 45.99, -123.92),
                ("Tillamook", 45.46, -123.84),
                ("Lincoln City", 44.96, -124.02),
                ("Newport", 44.63, -124.05),
            ),
        ),
        Region(
            "eastern",
            "Eastern Oregon",
            41.95,
            46.05,
            -120.10,
            -116.85,
            _landmarks(
                ("Pendleton", 45.67, -118.78),
                ("Hermiston", 45.84, -119.29),
                ("La Grande", 45.32, -118.09),
                ("Baker City", 44.77, -117.83),
                ("Ontario", 44.03, -116.96),
                ("Vale", 43.98, -117.24),
                ("Nyssa", 44.02, -116.97),
            ),
        ),
    )
}
"""
Regions of Oregon available for zooming, keyed by region key
"""


def get_region(
    region_key: str, regions: Mapping[str, Region] = DEFAULT_REGIONS
) -> Region:
    """
    Get a region by its key

    Parameters
    ----------
    region_key
        Key of the region

    regions
        Regions to choose from

    Returns
    -------
    :
        Region

    Raises
    ------
    UnrecognisedValueError
        `region_key` is not in `regions`
    """
    try:
        return regions[region_key]
    except KeyError as exc:
        raise UnrecognisedValueError(
            unrecognised_value=region_key,
            name="region",
            known_values=list(regions.keys()),
        ) from exc
