"""
Mapping of values to marker colours

Each utility keeps a constant hue and saturation,
so markers of different utilities stay distinguishable.
The value only changes the lightness: larger values are darker.
"""

from __future__ import annotations

from collections.abc import Iterable

import numpy as np
from attrs import define

from energy_burden.typing import NUMERIC_DATA
from energy_burden.utilities import Utility


@define(frozen=True)
class Colour:
    """
    A colour in hue, saturation, lightness space
    """

    hue: float
    """
    Hue (degrees)
    """

    saturation: float
    """
    Saturation (percent)
    """

    lightness: float
    """
    Lightness (percent)
    """

    @property
    def css(self) -> str:
        """
        CSS representation, e.g. `"hsl(142, 65%, 82%)"`
        """
        return f"hsl({self.hue:g}, {self.saturation:g}%, {self.lightness:g}%)"


@define(frozen=True)
class ColourScale:
    """
    Linear scale from values to lightness
    """

    min_value: float
    """
    Value mapped to the lightest colour
    """

    max_value: float
    """
    Value mapped to the darkest colour
    """

    lightness_low_value: float = 82.0
    """
    Lightness (percent) at `min_value`
    """

    lightness_high_value: float = 40.0
    """
    Lightness (percent) at `max_value`
    """

    @classmethod
    def from_values(
        cls,
        values: Iterable[NUMERIC_DATA],
        lightness_low_value: float = 82.0,
        lightness_high_value: float = 40.0,
    ) -> ColourScale:
        """
        Initialise from the values being displayed

        Only strictly positive values set the extent of the scale,
        so records with nothing to report do not stretch it.

        Parameters
        ----------
        values
            Values being displayed

        lightness_low_value
            Lightness (percent) of the smallest positive value

        lightness_high_value
            Lightness (percent) of the largest value

        Returns
        -------
        :
            Initialised scale.
            If there are no positive values, both ends of the scale are zero.
        """
        values_arr = np.asarray(list(values), dtype=float)
        positive = values_arr[values_arr > 0]
        if positive.size == 0:
            min_value = max_value = 0.0
        else:
            min_value = float(positive.min())
            max_value = float(positive.max())

        return cls(
            min_value=min_value,
            max_value=max_value,
            lightness_low_value=lightness_low_value,
            lightness_high_value=lightness_high_value,
        )

    def normalise(self, value: NUMERIC_DATA) -> float:
        """
        Get the position of a value within the scale

        Parameters
        ----------
        value
            Value to normalise

        Returns
        -------
        :
            Position between 0 (at or below `min_value`)
            and 1 (at or above `max_value`).
            Always 0 if the scale has no extent.
        """
        if self.max_value <= self.min_value:
            return 0.0

        t = (float(value) - self.min_value) / (self.max_value - self.min_value)

        return float(np.clip(t, 0.0, 1.0))

    def lightness(self, value: NUMERIC_DATA) -> float:
        """
        Get the lightness (percent) for a value
        """
        t = self.normalise(value)

        return self.lightness_low_value - t * (
            self.lightness_low_value - self.lightness_high_value
        )

    def colour(self, value: NUMERIC_DATA, hue: float, saturation: float) -> Colour:
        """
        Get the colour of a value for a given hue and saturation

        Parameters
        ----------
        value
            Value to colour

        hue
            Hue (degrees)

        saturation
            Saturation (percent)

        Returns
        -------
        :
            Colour of the value
        """
        return Colour(hue=hue, saturation=saturation, lightness=self.lightness(value))

    def colour_for_utility(self, value: NUMERIC_DATA, utility: Utility) -> Colour:
        """
        Get the colour of a value for a utility's marker
        """
        return self.colour(value, utility.geo_hue, utility.geo_saturation)

    def legend_stops(
        self, utilities: Iterable[Utility]
    ) -> dict[str, tuple[Colour, Colour]]:
        """
        Get the colours at either end of the scale for each utility

        Parameters
        ----------
        utilities
            Utilities to include in the legend

        Returns
        -------
        :
            Map from utility ID to the colours at `min_value` and `max_value`
        """
        return {
            u.id: (
                self.colour_for_utility(self.min_value, u),
                self.colour_for_utility(self.max_value, u),
            )
            for u in utilities
        }
