"""pandas objects are looked up by label, the way pandas' own ``in`` works:
a Series is a mapping from its index, a DataFrame from its columns."""

import pandas as pd

from containment.container import register


@register(pd.Index)
def _index_contains(index, label):
    return label in index


@register(pd.Series)
def _series_contains(series, label):
    return label in series.index


@register(pd.DataFrame)
def _frame_contains(frame, label):
    return label in frame.columns
