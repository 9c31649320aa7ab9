# tablemap/interop/frames.py
#
# Conversion between tables and pandas DataFrames / NumPy arrays. Absent
# cells become None on the way out; None and NaN become absent cells on
# the way in.

import math

import numpy as np
import pandas as pd

from ..table.facade import TableMap
from ..table.store import ColumnStore


def _is_missing(value) -> bool:
    if value is None or value is pd.NA or value is pd.NaT:
        return True
    return isinstance(value, (float, np.floating)) and math.isnan(value)


def to_dataframe(table: TableMap) -> pd.DataFrame:
    """
    Returns a DataFrame with one object-dtype column per table column, in
    table order. Absent cells are None.
    """
    columns = table.store.columns
    data = {key: pd.Series(cells, dtype=object) for key, cells in columns.items()}
    return pd.DataFrame(data, index=pd.RangeIndex(len(table)), columns=list(columns))


def from_dataframe(df: pd.DataFrame, table_cls=TableMap):
    """
    Builds a table from `df`, one column per frame column in frame order.
    The frame's index is ignored; rows keep their positional order.

    Raises:
        ValueError: `df` has duplicate column labels.
    """
    if not df.columns.is_unique:
        raise ValueError("DataFrame column labels must be unique")
    columns = {}
    for key in df.columns:
        columns[key] = [None if _is_missing(value) else value for value in df[key].tolist()]
    return table_cls.from_store(ColumnStore.from_columns(columns, len(df)))


def column_array(table: TableMap, key) -> np.ndarray:
    """
    Returns one column as a NumPy object array (absent cells are None).

    Raises:
        KeyError: the table has no column `key`.
    """
    cells = table.store.get_column(key)
    if cells is None:
        raise KeyError(key)
    array = np.empty(len(cells), dtype=object)
    # Element-wise so list or dict cells are not broadcast.
    for i, cell in enumerate(cells):
        array[i] = cell
    return array
