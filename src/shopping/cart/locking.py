"""Per-shopper mutation locks.

Cart mutations are read-modify-write cycles over a single cart. Holding the
shopper's lock across the whole cycle (load, mutate, commit) keeps two rapid
requests for the same shopper from both incrementing the same stale quantity.
Shoppers never contend with each other.

A shopper's lock lives in the registry only while some request holds or waits
for it; the last one out removes the entry.
"""

import threading
from collections.abc import Iterator
from contextlib import contextmanager


class _Entry:
    __slots__ = ("lock", "users")

    def __init__(self):
        self.lock = threading.Lock()
        self.users = 0


_registry_guard = threading.Lock()
_locks: dict[str, _Entry] = {}


def _checkout(key: str) -> _Entry:
    with _registry_guard:
        entry = _locks.get(key)
        if entry is None:
            entry = _locks[key] = _Entry()
        entry.users += 1
        return entry


def _checkin(key: str, entry: _Entry) -> None:
    with _registry_guard:
        entry.users -= 1
        if entry.users == 0:
            del _locks[key]


def tracked_users() -> set[str]:
    """Shoppers whose lock is currently held or awaited."""
    with _registry_guard:
        return set(_locks)


@contextmanager
def cart_lock(user_id: str) -> Iterator[None]:
    key = str(user_id)
    entry = _checkout(key)
    try:
        with entry.lock:
            yield
    finally:
        _checkin(key, entry)
