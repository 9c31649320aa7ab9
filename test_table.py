import sys
import os

# Make the 'tablemap' package in this directory importable without installing it.
sys.path.insert(0, os.path.abspath(os.path.dirname(__file__)))

import copy

import pytest

from tablemap import (
    TableMap,
    SSVTable,
    BorrowError,
    IndexOutOfRange,
    TableConsumedError,
)


def characters():
    table = TableMap()
    entry = table.new_entry()
    entry.insert("firstname", "John")
    entry.insert("lastname", "Snow")
    entry.insert("profession", "Knower of Nothing")
    entry = table.new_entry()
    entry.insert("profession", "Night King")
    entry.insert("alive", "false")
    return table


def rows_of(table):
    return [entry.to_dict() for entry in table.entries()]


def test_empty_table():
    table = TableMap()
    assert len(table) == 0
    assert table.len() == 0
    assert table.is_empty()
    assert list(table.keys()) == []
    assert table.last() is None
    assert table.last_mut() is None
    assert list(table.entries()) == []


def test_character_scenario():
    table = characters()
    assert table.len() == 2
    assert list(table.keys()) == ["firstname", "lastname", "profession", "alive"]
    assert table.entry(0).get("alive") is None
    assert table.entry(1).get("firstname") is None
    assert table.last().get("profession") == "Night King"


def test_entry_bounds_are_checked():
    table = characters()
    with pytest.raises(IndexOutOfRange):
        table.entry(2)
    with pytest.raises(IndexOutOfRange):
        table.entry_mut(-1)
    with pytest.raises(TypeError):
        table.entry("0")


def test_entries_is_restartable():
    table = characters()
    first = [entry.index for entry in table.entries()]
    second = [entry.index for entry in table]
    assert first == second == [0, 1]


def test_entries_fails_when_table_mutated_during_iteration():
    table = characters()
    iterator = table.entries()
    next(iterator)
    table.new_entry()
    with pytest.raises(BorrowError):
        next(iterator)


def test_last_mut_edits_last_row():
    table = characters()
    table.last_mut().insert("alive", "true")
    assert table.entry(1).get("alive") == "true"


def test_add_entry_returns_mutable_view():
    table = TableMap()
    table.add_entry({"firstname": "Michelle", "cats": 1}).insert("lost", True)
    assert rows_of(table) == [{"firstname": "Michelle", "cats": 1, "lost": True}]


def test_remove_entry_preserves_order():
    table = TableMap()
    for i in range(5):
        table.add_entry({"n": i})
    table.remove_entry(1)
    assert [entry.get("n") for entry in table.entries()] == [0, 2, 3, 4]


def test_swap_remove_entry_moves_last_row():
    table = TableMap()
    for i in range(5):
        table.add_entry({"n": i})
    table.swap_remove_entry(1)
    assert [entry.get("n") for entry in table.entries()] == [0, 4, 2, 3]


def test_cleanup_scenario():
    table = characters()
    table.store.column("ghost")
    table.new_entry()
    assert len(table) == 3
    assert "ghost" in list(table.keys())

    assert table.cleanup() == (1, 1)
    assert list(table.keys()) == ["firstname", "lastname", "profession", "alive"]
    assert len(table) == 2
    assert table.cleanup() == (0, 0)


def test_cleanup_removes_rows_empty_after_column_pruning():
    table = TableMap()
    table.add_entry({"a": "1"})
    table.new_entry()
    table.add_entry({"a": "2"})
    assert table.cleanup() == (0, 1)
    assert rows_of(table) == [{"a": "1"}, {"a": "2"}]


def test_concatenate_returns_self_and_consumes_other():
    table = characters()
    other = TableMap()
    other.add_entry({"firstname": "Arya", "house": "Stark"})
    assert table.concatenate(other) is table
    assert len(table) == 3
    assert list(table.keys()) == ["firstname", "lastname", "profession", "alive", "house"]
    assert rows_of(table)[2] == {"firstname": "Arya", "house": "Stark"}
    with pytest.raises(TableConsumedError):
        len(other)
    with pytest.raises(TableConsumedError):
        other.new_entry()


def test_concatenate_with_itself_is_rejected():
    table = characters()
    with pytest.raises(BorrowError):
        table.concatenate(table)
    table.concatenate(table.copy())
    assert len(table) == 4


def test_copy_and_equality():
    table = characters()
    clone = copy.copy(table)
    assert clone == table
    clone.entry_mut(0).insert("alive", "true")
    assert clone != table
    assert table.entry(0).get("alive") is None


def test_equality_depends_on_column_order():
    first = TableMap()
    first.add_entry({"a": "1", "b": "2"})
    second = TableMap()
    second.add_entry({"b": "2", "a": "1"})
    assert first != second


def test_str_is_ssv_text():
    assert str(characters()) == (
        "firstname;lastname;profession;alive\n"
        "John;Snow;Knower of Nothing;\n"
        ";;Night King;false\n"
    )


def test_ssv_table_formats_inserted_values():
    table = SSVTable()
    with table.new_entry() as entry:
        entry.insert("firstname", "John")
        entry.insert("alive", False)
        entry.insert(7, {"a": [1, 2]})
    assert table.entry(0).to_dict() == {
        "firstname": '"John"',
        "alive": "false",
        "7": '{"a":[1,2]}',
    }


def test_ssv_table_add_entry_and_extract_json():
    table = SSVTable()
    table.add_entry({"firstname": "Michelle", "cats": 1}).insert("lost", True)
    table.add_entry({"firstname": "Daenyris", "profession": 'Mad "Queen"'})
    decoded = table.extract_json()
    assert type(decoded) is TableMap
    assert rows_of(decoded) == [
        {"firstname": "Michelle", "cats": 1, "lost": True},
        {"firstname": "Daenyris", "profession": 'Mad "Queen"'},
    ]


def test_ssv_table_cell_refs_store_json_text():
    table = SSVTable()
    entry = table.add_entry({"alive": True, "name": "John"})
    entry.get_mut("alive").set(False)
    for key, cell in entry.iter_mut():
        if key == "name":
            cell.value = "Jon"
    assert table.entry(0).to_dict() == {"alive": "false", "name": '"Jon"'}
    assert table.extract_json().entry(0).to_dict() == {"alive": False, "name": "Jon"}


if __name__ == "__main__":
    sys.exit(pytest.main([__file__]))
