"""
Settings for the analytics

These are display and classification parameters,
none of them alter the underlying data.
"""

from __future__ import annotations

from typing import Any

import attr
from attrs import define, field, validators


@define(frozen=True)
class TrendSettings:
    """
    Settings for the rolling trend classification
    """

    window: int = field(default=3, validator=validators.ge(1))
    """
    Number of months in each of the current and prior windows
    """

    threshold_pct: float = field(default=2.0, validator=validators.ge(0.0))
    """
    Percentage change above which a trend is up (and below minus which it is down)
    """


@define(frozen=True)
class MapCanvas:
    """
    Pixel canvas onto which geographic points are projected
    """

    width: float = 850.0
    """
    Canvas width in pixels
    """

    height: float = 520.0
    """
    Canvas height in pixels
    """

    margin: float = field(default=30.0, validator=validators.ge(0.0))
    """
    Margin kept clear on each side of the canvas
    """

    @margin.validator
    def validate_margin(self, attribute: attr.Attribute[Any], value: float) -> None:
        """
        Validate that the margin leaves a drawable area
        """
        if 2 * value >= min(self.width, self.height):
            msg = (
                "The margins must leave a drawable area. "
                f"Received margin={value} for {self.width=} and {self.height=}"
            )
            raise ValueError(msg)


@define(frozen=True)
class GeoDisplaySettings:
    """
    Settings for the geographic view
    """

    statewide_region: str = "statewide"
    """
    Key of the region that shows the entire state

    The statewide view uses smaller collision offsets
    and ranks every selected record, not just the visible ones.
    """

    statewide_collision_offset: float = 6.0
    """
    Pixels between markers sharing a location on the statewide view
    """

    zoomed_collision_offset: float = 12.0
    """
    Pixels between markers sharing a location on zoomed views
    """

    top_n: int = field(default=50, validator=validators.ge(1))
    """
    Number of records shown in ranked lists
    """

    min_active_accounts: int = field(default=20, validator=validators.ge(0))
    """
    Records need strictly more active accounts than this to be displayed
    """

    lightness_low_value: float = 82.0
    """
    Lightness (percent) of the smallest value in the colour scale
    """

    lightness_high_value: float = 40.0
    """
    Lightness (percent) of the largest value in the colour scale
    """

    def collision_offset(self, region_key: str) -> float:
        """
        Get the collision offset to use for a region

        Parameters
        ----------
        region_key
            Key of the region being displayed

        Returns
        -------
        :
            Offset in pixels
        """
        if region_key == self.statewide_region:
            return self.statewide_collision_offset

        return self.zoomed_collision_offset


@define(frozen=True)
class DashboardConfig:
    """
    Configuration of the dashboard views
    """

    current_month_index: int = field(default=20, validator=validators.ge(0))
    """
    Index of the month treated as 'current' (September 2025 by default)
    """

    trend: TrendSettings = field(factory=TrendSettings)
    """
    Trend classification settings
    """

    canvas: MapCanvas = field(factory=MapCanvas)
    """
    Map canvas
    """

    geo: GeoDisplaySettings = field(factory=GeoDisplaySettings)
    """
    Geographic display settings
    """
