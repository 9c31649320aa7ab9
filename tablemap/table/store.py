# tablemap/table/store.py
#
# Implements the ColumnStore, the sparse column storage behind every table.
# Columns live in an insertion-ordered dict mapping a key to a list of cells;
# an absent cell is None. All column lists are kept exactly `row_count` long
# between public operations.

import logging
import operator

from ..errors import IndexOutOfRange, BorrowError, TableConsumedError
from ..runtime.borrow import BorrowTracker

logger = logging.getLogger(__name__)


class ColumnStore:
    """
    Named columns of optional cells sharing a common row count.
    """
    def __init__(self):
        self._columns = {}
        self._row_count = 0
        self._consumed = False
        self.borrows = BorrowTracker()

    @classmethod
    def from_columns(cls, columns: dict, row_count: int) -> "ColumnStore":
        """
        Builds a store that takes ownership of prepared cell lists.

        Raises:
            ValueError: a column's length differs from `row_count`.
        """
        for key, cells in columns.items():
            if len(cells) != row_count:
                raise ValueError(f"column {key!r} has {len(cells)} cell(s), expected {row_count}")
        store = cls()
        store._columns = dict(columns)
        store._row_count = row_count
        return store

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    @property
    def columns(self) -> dict:
        """The live key -> cell list mapping."""
        if self._consumed:
            raise TableConsumedError()
        return self._columns

    @property
    def row_count(self) -> int:
        if self._consumed:
            raise TableConsumedError()
        return self._row_count

    @property
    def consumed(self) -> bool:
        return self._consumed

    def keys(self):
        return iter(self.columns)

    def get_column(self, key):
        """Returns the cell list for `key`, or None if the column does not exist."""
        return self.columns.get(key)

    def check_index(self, index) -> int:
        """
        Validates a row index and returns it as a plain int. Any integer type
        implementing __index__ (numpy integers included) is accepted.
        """
        row_count = self.row_count
        if isinstance(index, bool):
            raise TypeError("row index must be an int, not bool")
        try:
            index = operator.index(index)
        except TypeError:
            raise TypeError(f"row index must be an int, not {type(index).__name__}") from None
        if index < 0 or index >= row_count:
            raise IndexOutOfRange(index, row_count)
        return index

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def column(self, key) -> list:
        """
        Returns the cell list for `key`, creating it if needed.

        A new column is appended after the existing ones and pre-filled with
        one absent cell per existing row.
        """
        columns = self.columns
        cells = columns.get(key)
        if cells is None:
            cells = [None] * self._row_count
            columns[key] = cells
        return cells

    def append_row(self):
        for cells in self.columns.values():
            cells.append(None)
        self._row_count += 1
        self.borrows.invalidate()

    def remove_row(self, index):
        """Removes row `index`; later rows shift down by one."""
        index = self.check_index(index)
        for cells in self._columns.values():
            del cells[index]
        self._row_count -= 1
        self.borrows.invalidate()

    def swap_remove_row(self, index):
        """Removes row `index` by moving the last row into its slot."""
        index = self.check_index(index)
        for cells in self._columns.values():
            last = cells.pop()
            if index < len(cells):
                cells[index] = last
        self._row_count -= 1
        self.borrows.invalidate()

    def compact(self):
        """
        Drops every all-absent column, then every row whose remaining cells
        are all absent.

        Returns:
            A (removed_columns, removed_rows) tuple of counts.
        """
        columns = self.columns
        empty = [key for key, cells in columns.items() if all(cell is None for cell in cells)]
        for key in empty:
            del columns[key]

        keep = [False] * self._row_count
        for cells in columns.values():
            for i, cell in enumerate(cells):
                if cell is not None:
                    keep[i] = True
        removed_rows = keep.count(False)
        if removed_rows:
            for key, cells in columns.items():
                columns[key] = [cell for cell, kept in zip(cells, keep) if kept]
            self._row_count -= removed_rows

        self.borrows.invalidate()
        logger.debug("Compacted store: dropped %d column(s) and %d row(s)", len(empty), removed_rows)
        return len(empty), removed_rows

    def concatenate(self, other: "ColumnStore"):
        """
        Appends the rows of `other` after the rows of this store and consumes
        `other`. Columns missing on either side are padded with absent cells.
        """
        if other is self:
            raise BorrowError("cannot concatenate a table with itself; concatenate a copy instead")
        columns = self.columns
        other_columns = other.columns
        own_rows = self._row_count
        other_rows = other.row_count

        for key, cells in columns.items():
            incoming = other_columns.get(key)
            if incoming is None:
                cells.extend([None] * other_rows)
            else:
                cells.extend(incoming)
        for key, incoming in other_columns.items():
            if key not in columns:
                cells = [None] * own_rows
                cells.extend(incoming)
                columns[key] = cells

        self._row_count = own_rows + other_rows
        other._consume()
        self.borrows.invalidate()
        logger.debug("Concatenated %d row(s) onto %d row(s)", other_rows, own_rows)

    def _consume(self):
        self._columns = {}
        self._row_count = 0
        self._consumed = True
        self.borrows.invalidate()

    def copy(self) -> "ColumnStore":
        clone = ColumnStore()
        clone._columns = {key: list(cells) for key, cells in self.columns.items()}
        clone._row_count = self._row_count
        return clone

    def __eq__(self, other):
        if not isinstance(other, ColumnStore):
            return NotImplemented
        return (
            self.row_count == other.row_count
            and list(self.columns.items()) == list(other.columns.items())
        )

    def __repr__(self):
        if self._consumed:
            return "<ColumnStore consumed>"
        return f"<ColumnStore columns={len(self._columns)} rows={self._row_count}>"
