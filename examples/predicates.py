# examples/predicates.py
#
# Filters rows with a plain predicate over read-only row views, then
# compacts the table once a column is no longer used.

from tablemap import TableMap

def is_alive(entry):
    """Rows without an 'alive' cell count as alive."""
    return entry.get("alive") != "false"

def main():
    """Runs the demonstration."""
    print("--- Running Predicate Demonstration ---")

    table = TableMap.decode_ssv(
        "name;alive;house\n"
        "Jon;true;Stark\n"
        "Night King;false;\n"
        "Arya;;Stark\n"
        "Viserion;false;\n"
    )

    print("\nLiving characters:")
    for entry in filter(is_alive, table.entries()):
        print(f"  {entry!r}")

    # Drop the dead from the back so indices stay valid.
    for index in reversed(range(len(table))):
        if not is_alive(table.entry(index)):
            table.remove_entry(index)

    for index in range(len(table)):
        entry = table.entry_mut(index)
        entry.insert("alive", "true")

    removed_columns, removed_rows = table.cleanup()
    print(f"\nAfter cleanup ({removed_columns} column(s), {removed_rows} row(s) removed):\n{table}")

    print("--- Predicate Demonstration Complete ---")


if __name__ == "__main__":
    main()
