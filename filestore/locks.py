"""Per-key mutual exclusion."""

import threading
from contextlib import contextmanager


class KeyLocks(object):
    """A table of locks, one per key, created on demand.

    An entry is dropped as soon as no thread holds or waits on it, so the
    table only ever holds keys that are in use.
    """

    def __init__(self):
        self._guard = threading.Lock()
        self._locks = {}

    @contextmanager
    def hold(self, key):
        """Block until the lock for `key` is acquired, release on exit."""
        with self._guard:
            entry = self._locks.get(key)
            if entry is None:
                entry = self._locks[key] = [threading.Lock(), 0]
            entry[1] += 1

        try:
            with entry[0]:
                yield
        finally:
            with self._guard:
                entry[1] -= 1
                if not entry[1]:
                    del self._locks[key]

    def __len__(self):
        with self._guard:
            return len(self._locks)

    def __contains__(self, key):
        with self._guard:
            return key in self._locks


_registry_guard = threading.Lock()
_registry = {}


def for_root(root_id):
    """Return the :class:`KeyLocks` shared by every store on `root_id`,
    creating it on first use.
    """
    with _registry_guard:
        locks = _registry.get(root_id)
        if locks is None:
            locks = _registry[root_id] = KeyLocks()
        return locks
