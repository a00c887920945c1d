"""
Catalog of the reporting utilities and resolution of utility filters
"""

from __future__ import annotations

from collections.abc import Collection, Iterable
from enum import Enum
from typing import Any

from attrs import define, field

from energy_burden.exceptions import UnrecognisedValueError

ALL_UTILITIES = "all"
"""
Filter value that selects every utility in the catalog
"""


class UtilityCategory(Enum):
    """
    Kind of energy a utility delivers
    """

    ELECTRIC = "electric"
    GAS = "gas"

    @property
    def usage_unit(self) -> str:
        """
        Unit in which average usage is reported for this category
        """
        return "kWh" if self is UtilityCategory.ELECTRIC else "therms"


@define(frozen=True)
class Utility:
    """
    A regulated utility that reports energy burden metrics
    """

    id: str
    """
    Identifier used as the `utility` level in the data
    """

    name: str
    """
    Full display name
    """

    short_name: str
    """
    Abbreviated display name
    """

    category: UtilityCategory = field(converter=UtilityCategory)
    """
    Electric or gas
    """

    colour: str
    """
    Hex colour used for the utility in charts
    """

    geo_hue: float
    """
    Hue (degrees) of the utility's markers on the map

    Only lightness varies with the mapped value,
    so the hue keeps utilities distinguishable.
    """

    geo_saturation: float
    """
    Saturation (percent) of the utility's markers on the map
    """

    geo_label: str
    """
    Three letter label used in ranked lists
    """

    @property
    def usage_unit(self) -> str:
        """
        Unit of this utility's average usage
        """
        return self.category.usage_unit


DEFAULT_UTILITIES: tuple[Utility, ...] = (
    Utility(
        id="pge",
        name="Portland General Electric",
        short_name="PGE",
        category="electric",
        colour="#1E3A5F",
        geo_hue=142,
        geo_saturation=65,
        geo_label="PGE",
    ),
    Utility(
        id="pac",
        name="Pacific Power",
        short_name="PacifiCorp",
        category="electric",
        colour="#DC2626",
        geo_hue=0,
        geo_saturation=70,
        geo_label="PAC",
    ),
    Utility(
        id="ipco",
        name="Idaho Power",
        short_name="IPCO",
        category="electric",
        colour="#059669",
        geo_hue=188,
        geo_saturation=85,
        geo_label="IDA",
    ),
    Utility(
        id="nwn",
        name="NW Natural",
        short_name="NWN",
        category="gas",
        colour="#7C3AED",
        geo_hue=217,
        geo_saturation=80,
        geo_label="NWN",
    ),
    Utility(
        id="cng",
        name="Cascade Natural Gas",
        short_name="Cascade",
        category="gas",
        colour="#EA580C",
        geo_hue=271,
        geo_saturation=70,
        geo_label="CAS",
    ),
    Utility(
        id="avista",
        name="Avista Utilities",
        short_name="Avista",
        category="gas",
        colour="#0891B2",
        geo_hue=25,
        geo_saturation=85,
        geo_label="AVA",
    ),
)
"""
The utilities reporting to the Oregon PUC, in display order
"""


def get_utility(
    utility_id: str, utilities: Iterable[Utility] = DEFAULT_UTILITIES
) -> Utility:
    """
    Get a utility from a catalog by its ID

    Parameters
    ----------
    utility_id
        ID to look up

    utilities
        Catalog to search

        If not supplied, we use the default catalog.

    Returns
    -------
    :
        The matching utility

    Raises
    ------
    UnrecognisedValueError
        `utility_id` is not in `utilities`
    """
    utilities = tuple(utilities)
    for utility in utilities:
        if utility.id == utility_id:
            return utility

    raise UnrecognisedValueError(
        unrecognised_value=utility_id,
        name="utility",
        known_values=[u.id for u in utilities],
    )


def resolve_utility_filter(
    utility_filter: Any, utilities: Iterable[Utility]
) -> tuple[str, ...]:
    """
    Resolve a utility filter to the IDs it selects

    Parameters
    ----------
    utility_filter
        Filter to resolve

        `"all"` selects every utility,
        a [UtilityCategory][(m).] (or its value, e.g. `"gas"`)
        selects all utilities of that category,
        any other string is treated as a single utility ID
        and a collection selects the IDs it contains.

    utilities
        Catalog of utilities

    Returns
    -------
    :
        Selected utility IDs, in catalog order

    Raises
    ------
    UnrecognisedValueError
        The filter refers to a utility that is not in the catalog

    Examples
    --------
    >>> resolve_utility_filter("all", DEFAULT_UTILITIES)
    ('pge', 'pac', 'ipco', 'nwn', 'cng', 'avista')
    >>> resolve_utility_filter("gas", DEFAULT_UTILITIES)
    ('nwn', 'cng', 'avista')
    >>> resolve_utility_filter(["avista", "pge"], DEFAULT_UTILITIES)
    ('pge', 'avista')
    """
    utilities = tuple(utilities)
    known_ids = [u.id for u in utilities]

    if isinstance(utility_filter, UtilityCategory):
        return tuple(u.id for u in utilities if u.category is utility_filter)

    if isinstance(utility_filter, str):
        if utility_filter == ALL_UTILITIES:
            return tuple(known_ids)

        if utility_filter in {c.value for c in UtilityCategory}:
            return resolve_utility_filter(UtilityCategory(utility_filter), utilities)

        requested: Collection[str] = (utility_filter,)

    else:
        requested = tuple(utility_filter)

    for utility_id in requested:
        if utility_id not in known_ids:
            raise UnrecognisedValueError(
                unrecognised_value=utility_id,
                name="utility",
                known_values=known_ids,
            )

    return tuple(uid for uid in known_ids if uid in requested)
