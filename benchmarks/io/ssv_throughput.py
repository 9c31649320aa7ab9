# benchmarks/io/ssv_throughput.py
#
# Measures SSV parsing and formatting throughput on a generated sparse
# table: parse from disk, format in RAM, and write back to disk. Reports
# through the tablemap profiler plus median timings from the runner.

import os
import tempfile

import numpy as np
import tablemap
from tablemap import SSVTable
from tablemap.io import ssv
from benchmarks.runner import run_benchmark

def generate(path, rows=200_000, columns=12, fill=0.6):
    rng = np.random.default_rng(42)
    table = SSVTable()
    mask = rng.random((rows, columns)) < fill
    values = rng.integers(0, 1_000_000, size=(rows, columns))
    for r in range(rows):
        entry = table.new_entry()
        for c in np.flatnonzero(mask[r]):
            entry.insert(f"field_{c}", int(values[r, c]))
    table.save_ssv(path)

def main():
    print("--- Running SSV Throughput Benchmark ---")
    with tempfile.TemporaryDirectory() as tmp:
        path = os.path.join(tmp, "big.ssv")
        out = os.path.join(tmp, "big_write.ssv")
        generate(path)
        size = os.path.getsize(path)

        with tablemap.profile() as p:
            table = SSVTable.load_ssv(path)
            table.save_ssv(out)
        p.print_report()

        format_time = run_benchmark(ssv.encode, (table,), num_warmup=1, num_iter=5)
        parse_time = run_benchmark(SSVTable.load_ssv, (path,), num_warmup=1, num_iter=5)

    print(f"Parse {size / 1e6:.2f} MB from disk: {parse_time:.4f} ms ({size / 1e3 / parse_time:.1f} MB/s)")
    print(f"Format {size / 1e6:.2f} MB in RAM:   {format_time:.4f} ms ({size / 1e3 / format_time:.1f} MB/s)")

if __name__ == "__main__":
    main()
