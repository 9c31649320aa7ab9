# tablemap/__init__.py

# Expose the core, user-facing components of the tablemap library
# at the top-level package namespace.

from .table import TableMap, SSVTable, TableEntry, TableEntryMut, CellRef, ColumnStore
from .errors import (
    TableMapError,
    IndexOutOfRange,
    BorrowError,
    TableConsumedError,
    SSVFormatError,
    ParseError,
)
from .formatting import format_value, JSON_NULL
from .profiler import profile

__version__ = "0.1.0"
