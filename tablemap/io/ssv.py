# tablemap/io/ssv.py
#
# The SSV ("semicolon separated values") text codec.
#
# Format:
#   * the first line holds the column keys joined by the delimiter;
#   * every following line holds one row, cells in header order, an absent
#     cell written as an empty field;
#   * empty lines are skipped when reading.
# Nothing is quoted or escaped: a key or value containing the delimiter
# produces a file that does not read back to the same table.

import logging
import os
import time

from .. import config, profiler
from ..errors import SSVFormatError
from ..table.store import ColumnStore

logger = logging.getLogger(__name__)


def _chomp(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line


# ============================================================================
# Encoding
# ============================================================================

def iter_lines(table, *, delimiter=None, render=str):
    """
    Yields the SSV lines of `table`, each terminated by a newline.

    Args:
        table: A TableMap (or anything exposing a ColumnStore as `.store`).
        delimiter: Field separator; defaults to config.DELIMITER.
        render: Callable turning a present cell into its text.
    """
    delimiter = config.DELIMITER if delimiter is None else delimiter
    columns = table.store.columns
    if not columns:
        return
    yield delimiter.join(str(key) for key in columns) + "\n"
    for row in zip(*columns.values()):
        yield delimiter.join("" if cell is None else render(cell) for cell in row) + "\n"


def encode(table, *, delimiter=None, render=str) -> str:
    """Returns the full SSV text of `table`. A table with no columns encodes to ''."""
    return "".join(iter_lines(table, delimiter=delimiter, render=render))


# ============================================================================
# Decoding
# ============================================================================

def decode_store(lines, *, delimiter=None, strict=None) -> ColumnStore:
    """
    Builds a ColumnStore of string cells from SSV lines.

    Args:
        lines: The SSV text as one string, or an iterable of lines (with or
            without their line terminators).
        delimiter: Field separator; defaults to config.DELIMITER.
        strict: When true, a row with fewer fields than the header raises
            SSVFormatError instead of leaving its trailing cells absent.
            Defaults to config.STRICT_ROWS.

    Raises:
        SSVFormatError: duplicate header keys, a row with more fields than
            the header, or (strict mode) a row with fewer.
    """
    delimiter = config.DELIMITER if delimiter is None else delimiter
    strict = config.STRICT_ROWS if strict is None else strict
    if isinstance(lines, str):
        lines = lines.split("\n") if lines else []

    iterator = iter(lines)
    header = next(iterator, None)
    if header is None:
        return ColumnStore()

    keys = _chomp(header).split(delimiter)
    if len(set(keys)) != len(keys):
        raise SSVFormatError(f"duplicate column key in header {keys!r}", lineno=1)

    width = len(keys)
    columns = [[] for _ in keys]
    row_count = 0
    for lineno, line in enumerate(iterator, start=2):
        line = _chomp(line)
        if not line:
            continue
        fields = line.split(delimiter)
        if len(fields) > width:
            raise SSVFormatError(f"expected at most {width} field(s), found {len(fields)}", lineno=lineno)
        if len(fields) < width:
            if strict:
                raise SSVFormatError(f"expected {width} field(s), found {len(fields)}", lineno=lineno)
            logger.debug("Line %d has %d of %d field(s); padding with absent cells", lineno, len(fields), width)
            fields.extend([""] * (width - len(fields)))
        for cells, value in zip(columns, fields):
            cells.append(value if value else None)
        row_count += 1

    return ColumnStore.from_columns(dict(zip(keys, columns)), row_count)


def decode(lines, *, delimiter=None, strict=None, table_cls=None):
    """Decodes SSV text into a table of type `table_cls` (TableMap by default)."""
    if table_cls is None:
        from ..table.facade import TableMap as table_cls
    return table_cls.from_store(decode_store(lines, delimiter=delimiter, strict=strict))


# ============================================================================
# Files
# ============================================================================

def load(path, *, delimiter=None, encoding=None, strict=None, table_cls=None):
    """
    Reads an SSV file into a table.

    Raises:
        OSError: the file cannot be opened or read.
        UnicodeDecodeError: the file is not valid in `encoding`.
        SSVFormatError: see decode_store().
    """
    encoding = config.ENCODING if encoding is None else encoding
    start = time.perf_counter()
    with open(path, "r", encoding=encoding) as fh:
        table = decode(fh, delimiter=delimiter, strict=strict, table_cls=table_cls)
    elapsed_ms = (time.perf_counter() - start) * 1000
    if profiler.is_active():
        profiler.record("load_ssv", elapsed_ms, os.path.getsize(path))
    logger.debug(
        "Loaded %d row(s) x %d column(s) from %s in %.3f ms",
        len(table), len(table.store.columns), path, elapsed_ms,
    )
    return table


def save(path, table, *, delimiter=None, encoding=None, render=str):
    """
    Writes `table` to `path`, truncating or creating the file.

    Raises:
        OSError: the file cannot be created or written.
    """
    encoding = config.ENCODING if encoding is None else encoding
    start = time.perf_counter()
    text = encode(table, delimiter=delimiter, render=render)
    with open(path, "w", encoding=encoding, newline="\n") as fh:
        fh.write(text)
    elapsed_ms = (time.perf_counter() - start) * 1000
    if profiler.is_active():
        profiler.record("save_ssv", elapsed_ms, len(text.encode(encoding)))
    logger.debug("Saved %d row(s) to %s in %.3f ms", len(table), path, elapsed_ms)
