import time


def now_millis() -> int:
    """Current time in milliseconds since the epoch."""
    return int(time.time() * 1000)
