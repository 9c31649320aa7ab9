# tablemap/io/json_cells.py
#
# Decodes every cell of a string table as JSON.

import json

from ..errors import ParseError
from ..formatting import JSON_NULL


def extract_json(table, *, table_cls=None):
    """
    Returns a new table of the same shape whose cells are the JSON values
    decoded from `table`'s string cells.

    Absent cells stay absent and a `null` cell stays present as JSON_NULL.
    Columns of `table` that are absent in every row are carried over so the
    result keeps the same keys in the same order.

    Raises:
        ParseError: the first cell that is not valid JSON; the
            json.JSONDecodeError is chained as its cause.
    """
    if table_cls is None:
        from ..table.facade import TableMap as table_cls
    result = table_cls()
    for key in table.keys():
        result.store.column(key)
    for entry in table.entries():
        row = result.new_entry()
        for key, value in entry.iter():
            try:
                decoded = json.loads(value)
            except json.JSONDecodeError as exc:
                raise ParseError(entry.index, key, exc) from exc
            row.insert(key, JSON_NULL if decoded is None else decoded)
    return result
