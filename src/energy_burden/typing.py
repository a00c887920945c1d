"""
Type hints that are used throughout
"""

from __future__ import annotations

from collections.abc import Collection
from typing import Union

import numpy as np
import pandas as pd
from typing_extensions import TypeAlias

from energy_burden.utilities import UtilityCategory

NUMERIC_DATA: TypeAlias = Union[float, int, np.floating, np.integer]
"""
Type alias for a value that can be used in the data of a [MetricDataFrame][(m).]
"""

MetricDataFrame: TypeAlias = pd.DataFrame
"""
Type alias for the [pandas.DataFrame][pd.DataFrame] shape we use throughout

For typing purposes, this is just a direct alias of [pandas.DataFrame][pd.DataFrame].
However, the point of defining this
is to provide greater clarity of the kind of data we expect.

We expect a collection of monthly timeseries, one per metric per utility.
The columns are monthly [pandas.Period][pd.Period]'s
covering the reporting window.
The index is a [pandas.MultiIndex][pd.MultiIndex]
with the levels `metric` and `utility`.
The data itself is numerical only.

```python
                                   2024-01  2024-02  ...  2025-09
metric             utility
active_accounts    pge              822345   824585  ...   841869
                   pac              520138   519816  ...   528315
disconnections     pge                 761     2216  ...     4081
```
"""

UtilityFilter: TypeAlias = Union[str, UtilityCategory, Collection[str]]
"""
Type alias for a selection of utilities

This can be `"all"`, a single utility ID,
a [UtilityCategory][(p).utilities.] (or its string value)
or a collection of utility IDs.
"""
