import time


def now_ms() -> int:
    """Milliseconds since the epoch."""
    return int(time.time() * 1000)


def later_than(previous: int) -> int:
    """Current time, bumped past `previous` when the clock has not advanced."""
    return max(now_ms(), previous + 1)
