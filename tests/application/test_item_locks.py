"""Tests for per-item mutual exclusion."""

import threading
import time

from inventory_service.application.item_locks import ItemLocks


class TestItemLocks:

    def test_registry_empties_after_release(self):
        locks = ItemLocks()
        with locks.hold("1"):
            assert len(locks) == 1
        assert len(locks) == 0

    def test_released_on_exception(self):
        locks = ItemLocks()
        try:
            with locks.hold("1"):
                raise RuntimeError("boom")
        except RuntimeError:
            pass
        assert len(locks) == 0
        with locks.hold("1"):
            pass

    def test_same_id_is_serialized(self):
        locks = ItemLocks()
        active = 0
        peak = 0
        counter_lock = threading.Lock()

        def work():
            nonlocal active, peak
            with locks.hold("1"):
                with counter_lock:
                    active += 1
                    peak = max(peak, active)
                time.sleep(0.01)
                with counter_lock:
                    active -= 1

        threads = [threading.Thread(target=work) for _ in range(5)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert peak == 1
        assert len(locks) == 0

    def test_different_ids_run_in_parallel(self):
        locks = ItemLocks()
        inside = threading.Event()
        done = threading.Event()

        def hold_first():
            with locks.hold("1"):
                inside.set()
                done.wait(timeout=5)

        t = threading.Thread(target=hold_first)
        t.start()
        assert inside.wait(timeout=5)

        # Would deadlock if ids shared one lock.
        with locks.hold("2"):
            assert len(locks) == 2

        done.set()
        t.join()
        assert len(locks) == 0
