# benchmarks/micro/removal.py
#
# Compares order-preserving row removal against swap removal. remove_entry
# shifts every later cell of every column, swap_remove_entry moves a single
# row, so the gap grows with the number of rows.

import numpy as np
from tablemap import TableMap
from benchmarks.runner import run_benchmark

def build_table(rows, columns):
    rng = np.random.default_rng(0)
    table = TableMap()
    for _ in range(rows):
        entry = table.new_entry()
        for c in rng.choice(columns, size=max(1, columns // 2), replace=False):
            entry.insert(f"col_{c}", "x")
    return table

def remove_front(table, count):
    for _ in range(count):
        table.remove_entry(0)

def swap_remove_front(table, count):
    for _ in range(count):
        table.swap_remove_entry(0)

def main():
    print("--- Running Row Removal Benchmark ---")
    rows, columns, count = 20_000, 16, 500
    template = build_table(rows, columns)

    remove_time = run_benchmark(remove_front, num_warmup=1, num_iter=5,
                                setup=lambda: (template.copy(), count))
    swap_time = run_benchmark(swap_remove_front, num_warmup=1, num_iter=5,
                              setup=lambda: (template.copy(), count))

    print(f"remove_entry x{count}:      {remove_time:.4f} ms")
    print(f"swap_remove_entry x{count}: {swap_time:.4f} ms")

if __name__ == "__main__":
    main()
