import sys
import os

# Make the 'tablemap' package in this directory importable without installing it.
sys.path.insert(0, os.path.abspath(os.path.dirname(__file__)))

import pytest

from tablemap import TableMap, SSVTable, SSVFormatError
from tablemap import config
from tablemap.io import ssv


def characters():
    table = TableMap()
    table.add_entry({"firstname": "John", "lastname": "Snow", "profession": "Knower of Nothing"})
    table.add_entry({"profession": "Night King", "alive": "false"})
    return table


def test_encode_characters():
    assert ssv.encode(characters()) == (
        "firstname;lastname;profession;alive\n"
        "John;Snow;Knower of Nothing;\n"
        ";;Night King;false\n"
    )


def test_encode_table_without_columns_is_empty():
    table = TableMap()
    table.new_entry()
    assert ssv.encode(table) == ""
    assert len(ssv.decode("")) == 0


def test_decode_restores_absent_cells():
    table = ssv.decode(ssv.encode(characters()))
    assert list(table.keys()) == ["firstname", "lastname", "profession", "alive"]
    assert table.entry(0).get("alive") is None
    assert table.entry(1).get("firstname") is None
    assert table.entry(1).get("lastname") is None
    assert table == characters()


def test_round_trip_through_file(tmp_path):
    path = tmp_path / "characters.ssv"
    table = characters()
    table.save_ssv(path)
    loaded = TableMap.load_ssv(path)
    assert loaded == table
    assert path.read_text(encoding="utf-8") == str(table)


def test_round_trip_of_mixed_sparse_table(tmp_path):
    table = TableMap()
    table.add_entry({"a": "1"})
    table.add_entry({"c": "x", "b": "ünïcode"})
    table.add_entry({"a": "3", "c": "z"})
    table.add_entry({"b": "only b"})
    path = tmp_path / "sparse.ssv"
    table.save_ssv(path)
    assert TableMap.load_ssv(path) == table


def test_save_truncates_existing_file(tmp_path):
    path = tmp_path / "out.ssv"
    path.write_text("old;header\n" + "junk;junk\n" * 10, encoding="utf-8")
    characters().save_ssv(path)
    assert TableMap.load_ssv(path) == characters()


def test_load_missing_file_raises_oserror(tmp_path):
    with pytest.raises(FileNotFoundError):
        TableMap.load_ssv(tmp_path / "missing.ssv")


def test_load_returns_requested_table_class(tmp_path):
    path = tmp_path / "t.ssv"
    path.write_text('name\n"John"\n', encoding="utf-8")
    table = SSVTable.load_ssv(path)
    assert type(table) is SSVTable
    assert table.extract_json().entry(0).get("name") == "John"


def test_decode_skips_empty_lines_and_crlf():
    table = ssv.decode("a;b\r\n1;2\r\n\r\n;3\r\n")
    assert len(table) == 2
    assert table.entry(0).to_dict() == {"a": "1", "b": "2"}
    assert table.entry(1).to_dict() == {"b": "3"}


def test_decode_accepts_iterable_of_lines():
    table = ssv.decode(["a;b\n", "1;\n", ";2\n"])
    assert table.store.columns == {"a": ["1", None], "b": [None, "2"]}


def test_decode_empty_field_is_absent():
    table = ssv.decode("a;b;c\n;;x\n")
    assert list(table.entry(0).iter()) == [("c", "x")]


def test_short_row_is_padded_by_default():
    table = ssv.decode("a;b;c\n1\n1;2;3\n")
    assert table.store.columns == {"a": ["1", "1"], "b": [None, "2"], "c": [None, "3"]}


def test_short_row_raises_in_strict_mode():
    with pytest.raises(SSVFormatError) as info:
        ssv.decode("a;b;c\n1;2;3\n1;2\n", strict=True)
    assert info.value.lineno == 3


def test_strict_mode_follows_config(monkeypatch):
    monkeypatch.setattr(config, "STRICT_ROWS", True)
    with pytest.raises(SSVFormatError):
        ssv.decode("a;b\n1\n")


def test_long_row_always_raises():
    with pytest.raises(SSVFormatError) as info:
        ssv.decode("a;b\n1;2;3\n")
    assert info.value.lineno == 2
    assert isinstance(info.value, ValueError)


def test_duplicate_header_key_raises():
    with pytest.raises(SSVFormatError):
        ssv.decode("a;a\n1;2\n")


def test_custom_delimiter():
    table = characters()
    text = ssv.encode(table, delimiter="|")
    assert text.splitlines()[0] == "firstname|lastname|profession|alive"
    assert ssv.decode(text, delimiter="|") == table


def test_delimiter_follows_config(monkeypatch):
    monkeypatch.setattr(config, "DELIMITER", ",")
    assert ssv.encode(characters()).splitlines()[0] == "firstname,lastname,profession,alive"


def test_value_containing_delimiter_corrupts_format():
    table = TableMap()
    table.add_entry({"a": "x;y"})
    with pytest.raises(SSVFormatError):
        ssv.decode(ssv.encode(table))


def test_render_controls_cell_text():
    table = TableMap()
    table.add_entry({"n": 1.5, "flag": True})
    assert ssv.encode(table, render=repr) == "n;flag\n1.5;True\n"


if __name__ == "__main__":
    sys.exit(pytest.main([__file__]))
