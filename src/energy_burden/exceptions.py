"""
Exceptions that are used throughout
"""

from __future__ import annotations

from collections.abc import Collection
from difflib import get_close_matches
from typing import Any


class UnrecognisedValueError(ValueError):
    """
    Raised when a value is not recognised
    """

    def __init__(
        self,
        unrecognised_value: Any,
        name: str,
        known_values: Collection[Any],
        n_suggestions: int = 3,
    ) -> None:
        """
        Initialise the error

        Parameters
        ----------
        unrecognised_value
            The value that was not recognised

        name
            Name of the thing being looked up (used in the message)

        known_values
            Values that would have been recognised

        n_suggestions
            Maximum number of close matches to suggest
        """
        known_str = [str(v) for v in known_values]
        close = get_close_matches(str(unrecognised_value), known_str, n=n_suggestions)

        error_msg = f"{unrecognised_value!r} is not a recognised value for {name}. "
        if close:
            error_msg += f"Did you mean one of {close}? "

        error_msg += f"Known values: {known_str}"

        super().__init__(error_msg)


class InvalidRegionError(ValueError):
    """
    Raised when a region's bounding box cannot be used for projection
    """

    def __init__(
        self,
        name: str,
        lat_min: float,
        lat_max: float,
        lng_min: float,
        lng_max: float,
    ) -> None:
        """
        Initialise the error

        Parameters
        ----------
        name
            Name of the region

        lat_min
            Minimum latitude of the bounding box

        lat_max
            Maximum latitude of the bounding box

        lng_min
            Minimum longitude of the bounding box

        lng_max
            Maximum longitude of the bounding box
        """
        error_msg = (
            f"Region {name!r} has a degenerate bounding box. "
            "Both latitude and longitude ranges must have a strictly positive extent. "
            f"{lat_min=} {lat_max=} {lng_min=} {lng_max=}"
        )
        super().__init__(error_msg)


class OutOfRangeIndexError(IndexError):
    """
    Raised when a month index falls outside the reporting window
    """

    def __init__(self, month_index: int, n_months: int) -> None:
        error_msg = (
            f"Month index {month_index} is outside the reporting window. "
            f"Valid indices are 0 to {n_months - 1} (inclusive)."
        )
        super().__init__(error_msg)


class MisalignedSeriesError(ValueError):
    """
    Raised when monthly series do not all cover the same months
    """

    def __init__(self, lengths: dict[tuple[str, str], int], expected: int) -> None:
        bad = {k: v for k, v in lengths.items() if v != expected}
        error_msg = (
            f"All series must contain exactly {expected} monthly values. "
            f"The following (metric, utility) series differ: {bad}"
        )
        super().__init__(error_msg)
