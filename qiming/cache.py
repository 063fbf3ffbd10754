"""
Memoization cache port and its default in-memory implementation.

The generator and scorer never reach for a global map: they are handed an object satisfying
``NameCache`` (``get`` / ``set``). ``MemoryCache`` is the stock implementation, an LRU map with a
per-entry time-to-live and hit/miss bookkeeping. It takes an internal lock only when asked to, so a
cache shared between threads must be built with ``synchronized=True``.
"""

from __future__ import annotations

import contextlib
import datetime
import threading
import time
from collections import OrderedDict
from dataclasses import dataclass
from typing import Any, Callable, Optional, Protocol, Sequence, Tuple, TypeVar

T = TypeVar("T")


class NameCache(Protocol):
    def get(self, key: str) -> Optional[Any]: ...

    def set(self, key: str, value: Any) -> None: ...


@dataclass(frozen=True)
class CacheStats:
    """Immutable snapshot of cache bookkeeping."""

    size: int
    max_size: int
    hits: int
    misses: int
    evictions: int
    expirations: int

    @property
    def hit_rate(self) -> float:
        lookups = self.hits + self.misses
        return self.hits / lookups if lookups else 0.0


class MemoryCache:
    """LRU + TTL cache keyed by opaque strings."""

    def __init__(
        self,
        max_size: int = 1000,
        ttl: Optional[float] = 3600.0,
        clock: Callable[[], float] = time.monotonic,
        synchronized: bool = False,
    ):
        if max_size < 1:
            raise ValueError(f"max_size must be positive, got {max_size}")
        self._max_size = max_size
        self._ttl = ttl
        self._clock = clock
        self._entries: "OrderedDict[str, Tuple[Optional[float], Any]]" = OrderedDict()
        self._lock: Any = threading.Lock() if synchronized else contextlib.nullcontext()
        self._hits = 0
        self._misses = 0
        self._evictions = 0
        self._expirations = 0

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: str) -> bool:
        with self._lock:
            entry = self._entries.get(key)
            return entry is not None and not self._is_expired(entry[0])

    def _is_expired(self, expires_at: Optional[float]) -> bool:
        return expires_at is not None and self._clock() >= expires_at

    def get(self, key: str) -> Optional[Any]:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                self._misses += 1
                return None
            expires_at, value = entry
            if self._is_expired(expires_at):
                del self._entries[key]
                self._expirations += 1
                self._misses += 1
                return None
            self._entries.move_to_end(key)
            self._hits += 1
            return value

    def set(self, key: str, value: Any, ttl: Optional[float] = None) -> None:
        lifetime = self._ttl if ttl is None else ttl
        expires_at = None if lifetime is None else self._clock() + lifetime
        with self._lock:
            if key in self._entries:
                self._entries.move_to_end(key)
            self._entries[key] = (expires_at, value)
            while len(self._entries) > self._max_size:
                self._entries.popitem(last=False)
                self._evictions += 1

    def get_or_set(self, key: str, compute: Callable[[], T], ttl: Optional[float] = None) -> T:
        cached = self.get(key)
        if cached is not None:
            return cached
        value = compute()
        self.set(key, value, ttl=ttl)
        return value

    def delete(self, key: str) -> bool:
        with self._lock:
            return self._entries.pop(key, None) is not None

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            self._hits = self._misses = self._evictions = self._expirations = 0

    def stats(self) -> CacheStats:
        with self._lock:
            return CacheStats(
                size=len(self._entries),
                max_size=self._max_size,
                hits=self._hits,
                misses=self._misses,
                evictions=self._evictions,
                expirations=self._expirations,
            )


# ════════════════════════════════════════════════════════════════════════════════
# CACHE KEYS
# ════════════════════════════════════════════════════════════════════════════════


def chart_cache_key(birth_date: datetime.date, hour: int) -> str:
    return f"bazi:{birth_date.year}-{birth_date.month}-{birth_date.day}:{hour}"


def name_score_cache_key(surname: str, given_name: str, chart_signature: Optional[str] = None) -> str:
    """Score key; charts are distinguished by their pillars so a shared cache never mixes birth dates."""
    key = f"name_score:{surname}:{given_name}"
    if chart_signature:
        key += f":with_bazi:{chart_signature}"
    return key


def wuge_cache_key(surname_strokes: Sequence[int], given_strokes: Sequence[int]) -> str:
    return f"wuge:{'-'.join(map(str, surname_strokes))}:{'-'.join(map(str, given_strokes))}"


def phonetics_cache_key(full_name: str) -> str:
    return f"phonetics:{full_name}"
