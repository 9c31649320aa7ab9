# tablemap/formatting.py
#
# Canonical string form of cell values stored in string tables. Values are
# serialized as compact JSON so that extract_json() can decode them back.

import json


class JsonNull:
    """
    The JSON `null` value as a present cell.

    None marks an absent cell, so a decoded `null` is stored as the
    JSON_NULL singleton instead. It is falsy and prints as 'null'.
    """
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self):
        return False

    def __repr__(self):
        return "null"

    __str__ = __repr__

    def __reduce__(self):
        return (JsonNull, ())


JSON_NULL = JsonNull()


def to_python(value):
    """Maps JSON_NULL back to None; every other value is returned as is."""
    return None if value is JSON_NULL else value


def format_value(value) -> str:
    """
    Returns the canonical JSON text of `value`.

    Example:
        format_value("John") -> '"John"'
        format_value(False)  -> 'false'
        format_value({"a": 1}) -> '{"a":1}'
        format_value(JSON_NULL) -> 'null'

    Raises:
        TypeError: `value` has no JSON representation.
    """
    if value is JSON_NULL:
        return "null"
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"))
