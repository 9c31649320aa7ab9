# tablemap/profiler.py
#
# Defines the profiler API: a context manager that collects timing events
# emitted by the SSV codec while it is active, and prints a throughput
# report afterwards.

_active_profiles = []


def record(name: str, duration_ms: float, nbytes: int = 0):
    """Adds an event to every active profile. A no-op when none is active."""
    for active in _active_profiles:
        active.events.append((name, duration_ms, nbytes))


def is_active() -> bool:
    return bool(_active_profiles)


class profile:
    """
    A context manager for profiling a block of tablemap code.

    Example:
        with tablemap.profile() as p:
            table = SSVTable.load_ssv("big.ssv")
            table.save_ssv("copy.ssv")
        p.print_report()
    """
    def __init__(self):
        self.events = []

    def __enter__(self):
        self.events = []
        _active_profiles.append(self)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        _active_profiles.remove(self)

    @property
    def total_ms(self) -> float:
        return sum(duration for _, duration, _ in self.events)

    def print_report(self):
        print("--- tablemap Profiler Report ---")
        if not self.events:
            print("No events captured.")
            return

        total_time = self.total_ms

        print(f"Total Time: {total_time:.4f} ms")
        print("--------------------------------")

        for name, duration, nbytes in self.events:
            percentage = (duration / total_time * 100) if total_time > 0 else 0
            line = f"{name:<25} | {duration:>10.4f} ms | ({percentage:5.1f}%)"
            if nbytes and duration > 0:
                line += f" | {nbytes / 1e6:.2f} MB at {nbytes / 1e3 / duration:.1f} MB/s"
            print(line)
        print("--------------------------------")
