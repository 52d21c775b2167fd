"""
Tests for the in-memory store and its read-write lock.
"""

import threading

import pytest

from Info_app.store import KVStore, RWLock


@pytest.mark.unit
class TestKVStore:
    def test_last_write_wins(self, store):
        store.set("color", "red")
        store.set("color", "blue")
        assert store.get("color") == ("blue", True)

    def test_missing_key_is_not_found(self, store):
        store.set("a", "1")
        assert store.get("b") == ("", False)

    def test_accepts_empty_strings(self, store):
        store.set("", "")
        assert store.get("") == ("", True)

    def test_get_all_matches_written_keys(self, store):
        store.set("k1", "v1")
        store.set("k2", "v2")
        store.set("k1", "v3")
        assert store.get_all() == {"k1": "v3", "k2": "v2"}
        assert len(store) == 2

    def test_get_all_is_independent_snapshot(self, store):
        store.set("a", "1")
        snapshot = store.get_all()
        store.set("a", "2")
        store.set("b", "3")
        assert snapshot == {"a": "1"}

        snapshot["c"] = "mutated"
        assert store.get("c") == ("", False)

    def test_instances_do_not_share_state(self):
        first, second = KVStore(), KVStore()
        first.set("a", "1")
        assert second.get_all() == {}


@pytest.mark.unit
class TestKVStoreConcurrency:
    def test_concurrent_writers_lose_no_updates(self, store):
        expected = {}

        def worker(thread_id):
            for i in range(200):
                store.set(f"t{thread_id}_k{i}", f"t{thread_id}_v{i}")

        for t in range(8):
            for i in range(200):
                expected[f"t{t}_k{i}"] = f"t{t}_v{i}"

        threads = [threading.Thread(target=worker, args=(t,)) for t in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert store.get_all() == expected

    def test_reader_sees_old_or_new_value_only(self, store):
        old, new = "o" * 1000, "n" * 1000
        store.set("shared", old)
        stop = threading.Event()
        seen = set()

        def writer():
            for i in range(2000):
                store.set("shared", new if i % 2 else old)
            stop.set()

        def reader():
            while not stop.is_set():
                seen.add(store.get("shared"))

        threads = [threading.Thread(target=writer)] + [threading.Thread(target=reader) for _ in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert seen <= {(old, True), (new, True)}

    def test_snapshot_unaffected_by_concurrent_writes(self, store):
        for i in range(100):
            store.set(f"k{i}", "before")
        snapshot = store.get_all()

        writer = threading.Thread(target=lambda: [store.set(f"k{i}", "after") for i in range(100)])
        writer.start()
        values = [snapshot[k] for k in snapshot]
        writer.join()

        assert values == ["before"] * 100
        assert set(snapshot.values()) == {"before"}


@pytest.mark.unit
class TestRWLock:
    def test_readers_share_the_lock(self):
        lock = RWLock()
        barrier = threading.Barrier(2, timeout=2)
        errors = []

        def reader():
            with lock.read():
                try:
                    barrier.wait()
                except threading.BrokenBarrierError as e:
                    errors.append(e)

        threads = [threading.Thread(target=reader) for _ in range(2)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert errors == []

    def test_writer_excludes_readers(self):
        lock = RWLock()
        acquired = threading.Event()

        def reader():
            with lock.read():
                acquired.set()

        with lock.write():
            thread = threading.Thread(target=reader)
            thread.start()
            assert not acquired.wait(0.1)

        assert acquired.wait(2)
        thread.join()

    def test_writer_excludes_writers(self):
        lock = RWLock()
        acquired = threading.Event()

        def writer():
            with lock.write():
                acquired.set()

        with lock.write():
            thread = threading.Thread(target=writer)
            thread.start()
            assert not acquired.wait(0.1)

        assert acquired.wait(2)
        thread.join()
