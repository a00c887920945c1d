"""
Ranking of geographic records by value
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TypeVar

from typing_extensions import Protocol


class RankablePoint(Protocol):
    """
    Something that can be ranked
    """

    @property
    def value(self) -> float:
        """
        Value to rank by
        """

    @property
    def zip_code(self) -> str:
        """
        ZIP code, used to break ties
        """

    @property
    def utility_id(self) -> str:
        """
        Utility ID, used to break remaining ties
        """


P = TypeVar("P", bound=RankablePoint)


def rank_points(points: Iterable[P], top_n: int | None = None) -> tuple[P, ...]:
    """
    Rank points from largest to smallest value

    Parameters
    ----------
    points
        Points to rank. They are not modified.

    top_n
        If supplied, only the first `top_n` points are returned

    Returns
    -------
    :
        Points sorted by value (descending),
        then ZIP code (ascending), then utility ID (ascending).
        The order is fully determined by these keys,
        so ranking an already ranked sequence leaves it unchanged.
    """
    if top_n is not None and top_n < 0:
        msg = f"`top_n` must be non-negative. Received {top_n=}"
        raise ValueError(msg)

    ranked = sorted(points, key=lambda p: (-p.value, p.zip_code, p.utility_id))
    if top_n is not None:
        ranked = ranked[:top_n]

    return tuple(ranked)
