from .store import ColumnStore
from .entry import TableEntry, TableEntryMut, CellRef
from .facade import TableMap, SSVTable, SSVEntryMut, SSVCellRef
