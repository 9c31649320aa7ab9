# benchmarks/runner.py
#
# A generic utility for running and timing benchmark functions.
# Warm-up iterations are excluded from the measurements and the median
# execution time is reported, which keeps the numbers stable against
# system noise. Benchmarks that mutate their input pass a `setup`
# callable that builds fresh arguments outside the timed region.

import time
import numpy as np

def run_benchmark(func, args=(), num_warmup=5, num_iter=20, setup=None):
    """
    Runs a given function with arguments and measures its performance.

    Args:
        func: The function to benchmark.
        args: A tuple of arguments to pass to the function.
        num_warmup (int): Number of warm-up runs before timing.
        num_iter (int): Number of timed iterations.
        setup: Optional callable returning a fresh argument tuple for each
            run; when given, `args` is ignored.

    Returns:
        The median execution time in milliseconds.
    """
    def next_args():
        return setup() if setup is not None else args

    # Warm-up runs
    for _ in range(num_warmup):
        func(*next_args())

    # Timed runs
    times = []
    for _ in range(num_iter):
        call_args = next_args()
        start_time = time.perf_counter()
        func(*call_args)
        end_time = time.perf_counter()
        times.append((end_time - start_time) * 1000) # Store in ms

    return np.median(times)
