from __future__ import annotations

import time


def monotonic_seconds() -> float:
    """Current monotonic clock reading.

    Note: Wrapped so tests can inject a fake clock instead.
    """
    return time.monotonic()
