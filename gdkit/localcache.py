"""In-process key/value cache with a capacity bound and per-item expiry."""

import threading
import time
from collections import OrderedDict
from dataclasses import dataclass
from datetime import timedelta


@dataclass
class LocalCacheConfiguration:
    """Cache settings.

    ``num_counters`` is the number of keys tracked for access frequency,
    ``max_cost`` the capacity (each item costs 1), ``buffer_items`` the size
    of read buffers and ``metrics`` whether statistics are kept.
    """

    num_counters: int = 0
    max_cost: int = 0
    buffer_items: int = 0
    metrics: bool = False


class LocalCache:
    """A thread-safe cache evicting the least recently used items beyond capacity."""

    def __init__(self, config, clock=time.monotonic):
        if config.num_counters <= 0:
            raise ValueError("num_counters can't be zero")
        if config.max_cost <= 0:
            raise ValueError("max_cost can't be zero")
        if config.buffer_items <= 0:
            raise ValueError("buffer_items can't be zero")
        self._capacity = config.max_cost
        self._clock = clock
        self._items = OrderedDict()
        self._lock = threading.Lock()
        self._closed = False

    def __len__(self):
        with self._lock:
            self._purge_expired()
            return len(self._items)

    def _expired(self, expires_at, now):
        return expires_at is not None and expires_at <= now

    def _purge_expired(self):
        now = self._clock()
        for key in [k for k, (_, exp) in self._items.items() if self._expired(exp, now)]:
            del self._items[key]

    def get(self, key):
        """Return the value stored under ``key``, or None when absent or expired."""
        with self._lock:
            if self._closed:
                return None
            entry = self._items.get(key)
            if entry is None:
                return None
            value, expires_at = entry
            if self._expired(expires_at, self._clock()):
                del self._items[key]
                return None
            self._items.move_to_end(key)
            return value

    def set(self, key, value):
        """Store ``value`` without expiry; return False if the cache is closed."""
        return self.set_ex(key, value, 0)

    def set_ex(self, key, value, ttl):
        """Store ``value`` for ``ttl`` seconds (or a timedelta).

        A zero ttl never expires; a negative ttl discards the value and
        returns False.
        """
        if isinstance(ttl, timedelta):
            ttl = ttl.total_seconds()
        with self._lock:
            if self._closed or ttl < 0:
                return False
            expires_at = None if ttl == 0 else self._clock() + ttl
            self._items[key] = (value, expires_at)
            self._items.move_to_end(key)
            if len(self._items) > self._capacity:
                self._purge_expired()
            while len(self._items) > self._capacity:
                self._items.popitem(last=False)
            return True

    def delete(self, key):
        """Remove ``key`` if present."""
        with self._lock:
            self._items.pop(key, None)

    def clear(self):
        """Remove every item."""
        with self._lock:
            self._items.clear()

    def close(self):
        """Empty the cache and refuse further writes; later calls do nothing."""
        with self._lock:
            if self._closed:
                return
            self._items.clear()
            self._closed = True

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False