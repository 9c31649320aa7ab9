# tablemap/table/entry.py
#
# Row views. A view is a cursor (store, row index) that presents one row of
# a ColumnStore as a key -> value mapping without copying any cells. Views
# hold a borrow token from the store's tracker and check it on every use,
# so a view that outlived a conflicting borrow or a structural mutation
# raises BorrowError instead of reading the wrong row.

from ..errors import BorrowError


class TableEntry:
    """
    A read-only view of one table row.
    """
    def __init__(self, store, index):
        self._store = store
        self._index = index
        self._borrow = self._acquire(store)

    def _acquire(self, store):
        return store.borrows.shared()

    @property
    def index(self) -> int:
        return self._index

    def _columns(self):
        self._borrow.check()
        return self._store.columns

    def _walk(self):
        """
        Yields (key, cells) for every column, checking the borrow before each
        step. Adding a column while the walk is suspended raises BorrowError.
        """
        self._borrow.check()
        columns = self._store.columns
        size = len(columns)
        for key, cells in list(columns.items()):
            self._borrow.check()
            if len(columns) != size:
                raise BorrowError("columns were added to the table while iterating a row")
            yield key, cells

    def keys(self):
        """
        Yields every column key of the table, whether or not this row has a
        value for it, in column order.
        """
        for key, _ in self._walk():
            yield key

    def iter(self):
        """Yields (key, value) pairs for the cells of this row that are present."""
        index = self._index
        for key, cells in self._walk():
            value = cells[index]
            if value is not None:
                yield key, value

    items = iter

    def __iter__(self):
        return self.iter()

    def get(self, key, default=None):
        """
        Returns the value stored under `key` for this row.

        Any lookup key that hashes and compares equal to the stored key
        finds the column. Returns `default` when the column does not exist
        or the cell is absent.
        """
        cells = self._columns().get(key)
        if cells is None:
            return default
        value = cells[self._index]
        return default if value is None else value

    def __getitem__(self, key):
        value = self.get(key)
        if value is None:
            raise KeyError(key)
        return value

    def __contains__(self, key):
        return self.get(key) is not None

    def to_dict(self) -> dict:
        return dict(self.iter())

    def release(self):
        """Gives up this view's borrow; any later use raises BorrowError."""
        self._borrow.release()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.release()

    def __repr__(self):
        return "{" + "".join(f"{key!r}: {value!r}, " for key, value in self.iter()) + "}"


class CellRef:
    """
    An in-place handle on one present cell, handed out by a mutable view.

    Reading or writing through the handle skips the key lookup but still
    honours the owning view's borrow.
    """
    __slots__ = ("_entry", "_cells", "key")

    def __init__(self, entry, cells, key):
        self._entry = entry
        self._cells = cells
        self.key = key

    @property
    def value(self):
        self._entry._borrow.check()
        return self._cells[self._entry.index]

    @value.setter
    def value(self, value):
        self.set(value)

    def set(self, value):
        """Overwrites the cell. Use TableEntryMut.insert to clear it."""
        if value is None:
            raise ValueError("CellRef cannot store None; cells are cleared through the table")
        self._entry._borrow.check()
        self._cells[self._entry.index] = value

    def __repr__(self):
        return f"CellRef({self.key!r}, {self.value!r})"


class TableEntryMut(TableEntry):
    """
    A mutable view of one table row.

    It holds the table's exclusive borrow: creating it invalidates every
    other view of the same table, and creating any other view afterwards
    invalidates it.
    """
    cell_ref_class = CellRef

    def _acquire(self, store):
        return store.borrows.exclusive()

    def get_mut(self, key):
        """Returns a CellRef for a present cell, or None if the cell is absent."""
        cells = self._columns().get(key)
        if cells is None or cells[self._index] is None:
            return None
        return self.cell_ref_class(self, cells, key)

    def iter_mut(self):
        """Yields (key, CellRef) pairs for the present cells of this row."""
        index = self._index
        for key, cells in self._walk():
            if cells[index] is not None:
                yield key, self.cell_ref_class(self, cells, key)

    def insert(self, key, value):
        """
        Stores `value` in this row under `key`.

        The column is created (with absent cells for every other row) if it
        does not exist yet.

        Returns:
            The value previously stored in the cell, or None if it was absent.
        """
        if value is None:
            raise ValueError("cannot insert None; absent cells are represented by omission")
        self._borrow.check()
        cells = self._store.column(key)
        previous = cells[self._index]
        cells[self._index] = value
        return previous

    def __setitem__(self, key, value):
        self.insert(key, value)

    def update(self, mapping):
        for key, value in dict(mapping).items():
            self.insert(key, value)
        return self
