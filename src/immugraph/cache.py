"""Memoization cache keyed by structural identity."""

from __future__ import annotations

import functools
import threading
import weakref
from collections.abc import Callable, Hashable, MutableMapping
from typing import Any

from cachetools import LRUCache  # type: ignore[import]

from .logger import logger

__all__ = [
    "MemoCache",
    "memoize",
    "clear_caches",
    "resize_caches",
    "registered_caches",
]

# every cache created through ``memoize``; weak so throwaway caches can go
_registry: "weakref.WeakSet[MemoCache]" = weakref.WeakSet()
_registry_lock = threading.Lock()


def _make_store(maxsize: int | None) -> MutableMapping[Hashable, Any]:
    if maxsize is None:
        return {}
    return LRUCache(maxsize=maxsize)


class MemoCache:
    """Thread-safe mapping from a resolver-computed key to a computed value.

    Unbounded by default: entries live until :meth:`clear` is called or the
    process exits. Passing ``maxsize`` switches to an LRU bound.
    """

    def __init__(self, name: str = "memo", maxsize: int | None = None):
        self.name = name
        self._maxsize = maxsize
        self._store = _make_store(maxsize)
        self._lock = threading.Lock()
        self.hits = 0
        self.misses = 0

    @property
    def maxsize(self) -> int | None:
        return self._maxsize

    def get(self, key: Hashable) -> tuple[bool, Any]:
        """Get a cached value.

        Args:
            key: Cache key produced by a resolver.

        Returns:
            A tuple of (hit, value).
        """
        with self._lock:
            if key in self._store:
                self.hits += 1
                return True, self._store[key]
            self.misses += 1
        return False, None

    def put(self, key: Hashable, value: Any) -> None:
        with self._lock:
            self._store[key] = value

    def delete(self, key: Hashable) -> None:
        with self._lock:
            self._store.pop(key, None)

    def clear(self) -> None:
        """Drop every entry and reset the hit/miss counters."""
        with self._lock:
            self._store.clear()
            self.hits = 0
            self.misses = 0
        logger.debug("cleared cache {}", self.name)

    def resize(self, maxsize: int | None) -> None:
        """Rebuild the store with a new bound, keeping as many entries as fit."""
        with self._lock:
            old = self._store
            self._store = _make_store(maxsize)
            self._maxsize = maxsize
            for k, v in old.items():
                self._store[k] = v
        logger.debug("resized cache {} to maxsize={}", self.name, maxsize)

    def __contains__(self, key: Hashable) -> bool:
        with self._lock:
            return key in self._store

    def __len__(self) -> int:
        with self._lock:
            return len(self._store)

    def __repr__(self) -> str:
        return (
            f"MemoCache(name={self.name!r}, size={len(self)}, "
            f"maxsize={self._maxsize}, hits={self.hits}, misses={self.misses})"
        )


def registered_caches() -> list[MemoCache]:
    """Return every cache created through :func:`memoize` that is still alive."""
    with _registry_lock:
        return list(_registry)


def clear_caches() -> None:
    """Clear every registered cache."""
    for cache in registered_caches():
        cache.clear()


def resize_caches(maxsize: int | None) -> None:
    """Apply a new bound to every registered cache."""
    for cache in registered_caches():
        cache.resize(maxsize)


def memoize(
    resolver: Callable[..., Hashable],
    *,
    name: str | None = None,
    maxsize: int | None = None,
) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Cache a pure function's results under ``resolver(*args, **kwargs)``.

    The resolver is called on every invocation and must return a hashable
    key that is equal for structurally equal inputs. Exceptions raised by
    the wrapped function propagate and nothing is stored.

    The returned function carries ``cache`` (its :class:`MemoCache`) and
    ``clear_cache()``.
    """

    def decorator(fn: Callable[..., Any]) -> Callable[..., Any]:
        cache = MemoCache(name or getattr(fn, "__name__", "memo"), maxsize=maxsize)
        with _registry_lock:
            _registry.add(cache)

        @functools.wraps(fn)
        def memoized(*args, **kwargs):
            key = resolver(*args, **kwargs)
            # falsy values are valid entries
            hit, value = cache.get(key)
            if hit:
                return value
            logger.debug("cache miss {} key={}", cache.name, key)
            value = fn(*args, **kwargs)
            cache.put(key, value)
            return value

        memoized.cache = cache  # type: ignore[attr-defined]
        memoized.clear_cache = cache.clear  # type: ignore[attr-defined]
        return memoized

    return decorator
