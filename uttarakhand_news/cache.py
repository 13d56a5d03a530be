from __future__ import annotations

import time
from typing import Any, Callable, Optional


class TimeBoxedCache:
    """Single-slot cache whose value is valid for ``ttl_seconds`` after it was set.

    Not shared module state: each owner creates its own instance. There is no
    locking; two concurrent refreshes simply write the slot twice.
    """

    def __init__(self, ttl_seconds: float, clock: Callable[[], float] = time.monotonic) -> None:
        self._ttl = float(ttl_seconds)
        self._clock = clock
        self._value: Any = None
        self._fetched_at: Optional[float] = None

    @property
    def ttl_seconds(self) -> float:
        return self._ttl

    @property
    def fetched_at(self) -> Optional[float]:
        return self._fetched_at

    def is_stale(self) -> bool:
        if self._fetched_at is None:
            return True
        return (self._clock() - self._fetched_at) >= self._ttl

    def get(self) -> Any:
        if self.is_stale():
            return None
        return self._value

    def set(self, value: Any) -> None:
        self._value = value
        self._fetched_at = self._clock()

    def clear(self) -> None:
        self._value = None
        self._fetched_at = None
