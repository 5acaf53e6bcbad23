from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar

from ..common.datetime_utils import monotonic_seconds

T = TypeVar("T")


@dataclass(frozen=True)
class CacheEntry(Generic[T]):
    value: T
    stored_at: float


class TtlCache(Generic[T]):
    """Holds one value for `ttl_seconds`, measured with an injected clock."""

    def __init__(self, ttl_seconds: float, *, clock: Callable[[], float] = monotonic_seconds):
        self._ttl = float(ttl_seconds)
        self._clock = clock
        self._entry: Optional[CacheEntry[T]] = None

    def get(self) -> Optional[T]:
        entry = self._entry
        if entry is None:
            return None
        if self._clock() - entry.stored_at >= self._ttl:
            return None
        return entry.value

    def put(self, value: T) -> T:
        self._entry = CacheEntry(value=value, stored_at=self._clock())
        return value

    def get_or_load(self, loader: Callable[[], T]) -> T:
        cached = self.get()
        if cached is not None:
            return cached
        return self.put(loader())

    def invalidate(self) -> None:
        self._entry = None
