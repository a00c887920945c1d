"""
Useful assertions
"""

from __future__ import annotations

from collections.abc import Collection

import pandas as pd

from energy_burden.exceptions import OutOfRangeIndexError


def assert_index_is_multiindex(df: pd.DataFrame) -> None:
    """
    Assert that a [pd.DataFrame][pandas.DataFrame]'s index is a multi-index

    Parameters
    ----------
    df
        Data to check

    Raises
    ------
    TypeError
        `df`'s index is not a [pd.MultiIndex][pandas.MultiIndex]
    """
    if not isinstance(df.index, pd.MultiIndex):
        msg = f"The index is not a `pd.MultiIndex`, instead we have {type(df.index)=}"
        raise TypeError(msg)


def assert_has_index_levels(df: pd.DataFrame, levels: Collection[str]) -> None:
    """
    Assert that a [pd.DataFrame][pandas.DataFrame] has all the given index levels

    Parameters
    ----------
    df
        Data to check

    levels
        Levels that must be in the index

    Raises
    ------
    AssertionError
        `df` is missing some of `levels`
    """
    missing_levels = [level for level in levels if level not in df.index.names]
    if missing_levels:
        msg = (
            f"The DataFrame is missing the following index levels: {missing_levels}. "
            f"Available levels: {list(df.index.names)}"
        )
        raise AssertionError(msg)


def assert_data_is_all_numeric(df: pd.DataFrame) -> None:
    """
    Assert that all the data in a [pd.DataFrame][pandas.DataFrame] is numeric

    Parameters
    ----------
    df
        Data to check

    Raises
    ------
    TypeError
        Some of `df`'s columns hold non-numeric data
    """
    non_numeric = [
        c for c in df.columns if not pd.api.types.is_numeric_dtype(df[c].dtype)
    ]
    if non_numeric:
        msg = f"The following columns are not numeric: {non_numeric}"
        raise TypeError(msg)


def assert_no_duplicated_index(df: pd.DataFrame) -> None:
    """
    Assert that no row label appears more than once

    Parameters
    ----------
    df
        Data to check

    Raises
    ------
    AssertionError
        There are duplicated rows in the index
    """
    duplicated = df.index[df.index.duplicated()]
    if not duplicated.empty:
        msg = f"The index contains duplicates: {duplicated.tolist()}"
        raise AssertionError(msg)


def assert_month_index_in_range(month_index: int, n_months: int) -> None:
    """
    Assert that a month index is within the reporting window

    Negative indices are not accepted,
    callers must always request an explicit month.

    Parameters
    ----------
    month_index
        Index to check

    n_months
        Number of months in the reporting window

    Raises
    ------
    OutOfRangeIndexError
        `month_index` is not in `[0, n_months)`
    """
    if isinstance(month_index, bool) or not 0 <= month_index < n_months:
        raise OutOfRangeIndexError(month_index=month_index, n_months=n_months)
