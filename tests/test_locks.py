# -*- coding: utf-8 -*-

import threading
import time

from filestore import KeyLocks
from filestore.locks import for_root


def test_locks_released():
    locks = KeyLocks()

    with locks.hold("a"):
        assert "a" in locks
        assert len(locks) == 1

    assert "a" not in locks
    assert len(locks) == 0


def test_locks_independent_keys():
    locks = KeyLocks()

    with locks.hold("a"):
        with locks.hold("b"):
            assert len(locks) == 2

    assert len(locks) == 0


def test_locks_exclusive():
    locks = KeyLocks()
    events = []
    entered = threading.Event()

    def worker():
        entered.set()
        with locks.hold("a"):
            events.append("worker")

    with locks.hold("a"):
        thread = threading.Thread(target=worker)
        thread.start()
        entered.wait()
        time.sleep(0.05)
        events.append("main")

    thread.join()

    assert events == ["main", "worker"]
    assert len(locks) == 0


def test_locks_released_on_error():
    locks = KeyLocks()

    try:
        with locks.hold("a"):
            raise RuntimeError("boom")
    except RuntimeError:
        pass

    assert len(locks) == 0

    with locks.hold("a"):
        pass


def test_for_root_shared():
    assert for_root("/srv/store") is for_root("/srv/store")
    assert for_root("/srv/store") is not for_root("/srv/other")
