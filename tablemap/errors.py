# tablemap/errors.py
#
# Exception types raised by the table, its row views and the SSV codec.
# Every error derives from TableMapError and from the builtin exception a
# caller would naturally catch for that situation (IndexError, ValueError,
# RuntimeError). I/O failures are not wrapped: OSError propagates as is.


class TableMapError(Exception):
    """Base class for all tablemap errors."""


class IndexOutOfRange(TableMapError, IndexError):
    """A row index outside ``0 .. len - 1`` was used."""

    def __init__(self, index, length):
        self.index = index
        self.length = length
        super().__init__(f"row index {index} out of range for table of {length} row(s)")


class BorrowError(TableMapError, RuntimeError):
    """A row view was used after a conflicting borrow or mutation."""


class TableConsumedError(BorrowError):
    """The table was moved into another one by ``concatenate``."""

    def __init__(self):
        super().__init__("table was consumed by concatenate() and can no longer be used")


class SSVFormatError(TableMapError, ValueError):
    """A line of SSV text does not fit the header."""

    def __init__(self, message, lineno=None):
        self.lineno = lineno
        if lineno is not None:
            message = f"line {lineno}: {message}"
        super().__init__(message)


class ParseError(TableMapError, ValueError):
    """A cell could not be decoded as JSON."""

    def __init__(self, index, key, cause):
        self.index = index
        self.key = key
        super().__init__(f"row {index}, column {key!r}: {cause}")
