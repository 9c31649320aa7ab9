# tablemap/table/facade.py
#
# The user-facing table types. TableMap owns a ColumnStore and exposes the
# row lifecycle (append, remove, swap-remove, cleanup, concatenate), row
# views and SSV persistence. SSVTable is the string-cell flavour whose
# mutable rows format every inserted value as JSON text.

import logging

from ..errors import BorrowError
from ..formatting import format_value
from ..io import json_cells, ssv
from .entry import TableEntry, TableEntryMut, CellRef
from .store import ColumnStore

logger = logging.getLogger(__name__)


class TableMap:
    """
    A sparse columnar table: rows of key -> value cells where any cell may
    be absent.

    Rows are addressed by 0-based index and accessed through views:
    `entry(i)` for reading, `entry_mut(i)` for writing. A mutable view holds
    the table's exclusive borrow, see tablemap.runtime.borrow.
    """
    entry_class = TableEntry
    entry_mut_class = TableEntryMut

    def __init__(self):
        self.store = ColumnStore()

    @classmethod
    def from_store(cls, store: ColumnStore):
        table = cls.__new__(cls)
        table.store = store
        return table

    # ------------------------------------------------------------------
    # Size and keys
    # ------------------------------------------------------------------

    def len(self) -> int:
        return self.store.row_count

    def __len__(self):
        return self.store.row_count

    def is_empty(self) -> bool:
        return self.store.row_count == 0

    def keys(self):
        """Yields the column keys in creation order."""
        return self.store.keys()

    # ------------------------------------------------------------------
    # Row views
    # ------------------------------------------------------------------

    def entry(self, index):
        """
        Returns a read-only view of row `index`.

        Raises:
            IndexOutOfRange: `index` is not in 0 .. len - 1.
        """
        index = self.store.check_index(index)
        return self.entry_class(self.store, index)

    def entry_mut(self, index):
        """
        Returns a mutable view of row `index`, taking the exclusive borrow.

        Raises:
            IndexOutOfRange: `index` is not in 0 .. len - 1.
        """
        index = self.store.check_index(index)
        return self.entry_mut_class(self.store, index)

    def entries(self):
        """
        Yields a read-only view of every row, first to last.

        Mutating the table while iterating makes the next step raise
        BorrowError.
        """
        store = self.store
        generation = None
        for index in range(store.row_count):
            if generation is not None and store.borrows.generation != generation:
                raise BorrowError("table was modified during iteration")
            view = self.entry_class(store, index)
            generation = store.borrows.generation
            yield view

    def __iter__(self):
        return self.entries()

    def last(self):
        if self.is_empty():
            return None
        return self.entry(len(self) - 1)

    def last_mut(self):
        if self.is_empty():
            return None
        return self.entry_mut(len(self) - 1)

    # ------------------------------------------------------------------
    # Row lifecycle
    # ------------------------------------------------------------------

    def new_entry(self):
        """Appends an empty row and returns a mutable view of it."""
        self.store.append_row()
        return self.entry_mut(len(self) - 1)

    def add_entry(self, mapping):
        """
        Appends a row built from `mapping` and returns its mutable view.

        Example:
            table.add_entry({"firstname": "Michelle", "cats": 1}).insert("lost", True)
        """
        entry = self.new_entry()
        for key, value in dict(mapping).items():
            entry.insert(key, value)
        return entry

    def remove_entry(self, index):
        """Removes row `index`, shifting the following rows down by one."""
        self.store.remove_row(index)

    def swap_remove_entry(self, index):
        """Removes row `index` in O(1) by moving the last row into its place."""
        self.store.swap_remove_row(index)

    def cleanup(self):
        """
        Drops all-absent columns, then rows left without any present cell.

        Returns:
            A (removed_columns, removed_rows) tuple.
        """
        return self.store.compact()

    def concatenate(self, other: "TableMap"):
        """
        Appends `other`'s rows after this table's rows and returns self.

        `other` is consumed: using it afterwards raises TableConsumedError.
        """
        self.store.concatenate(other.store)
        return self

    def copy(self):
        return type(self).from_store(self.store.copy())

    __copy__ = copy

    def __eq__(self, other):
        if not isinstance(other, TableMap):
            return NotImplemented
        return self.store == other.store

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def __str__(self):
        return ssv.encode(self)

    def __repr__(self):
        if self.store.consumed:
            return f"<{type(self).__name__} consumed>"
        return f"<{type(self).__name__} columns={list(self.store.columns)!r} rows={len(self)}>"

    def save_ssv(self, path, **kwargs):
        """Writes the table to `path` in SSV format; see tablemap.io.ssv.save."""
        ssv.save(path, self, **kwargs)

    @classmethod
    def load_ssv(cls, path, **kwargs):
        """Reads an SSV file into a table of string cells; see tablemap.io.ssv.load."""
        return ssv.load(path, table_cls=cls, **kwargs)

    @classmethod
    def decode_ssv(cls, text, **kwargs):
        return ssv.decode(text, table_cls=cls, **kwargs)

    def extract_json(self):
        """Returns a TableMap of the JSON values decoded from every cell."""
        return json_cells.extract_json(self, table_cls=TableMap)


class SSVCellRef(CellRef):
    """Cell handle of an SSVTable row; written values are stored as JSON text."""
    __slots__ = ()

    def set(self, value):
        super().set(format_value(value))


class SSVEntryMut(TableEntryMut):
    """
    Mutable row of an SSVTable. Keys are coerced with str() and values are
    stored as their canonical JSON text, whether written through insert()
    or through the CellRef handles of get_mut() and iter_mut().
    """
    cell_ref_class = SSVCellRef

    def insert(self, key, value):
        return super().insert(str(key), format_value(value))


class SSVTable(TableMap):
    """
    A table of string cells destined for SSV files.

    Values inserted through its rows are serialized with format_value(), so
    `insert("alive", False)` stores the text 'false' and
    `insert("name", "John")` stores '"John"'.
    """
    entry_mut_class = SSVEntryMut
