"""Tests for the result cache."""

import threading

from app.repositories.common import ResultCache


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


class TestResultCache:
    def test_miss(self):
        assert ResultCache().get("nope") is None

    def test_hit(self):
        cache = ResultCache()
        cache.put("k", {"a": 1})
        assert cache.get("k") == {"a": 1}

    def test_stale_after_ttl(self):
        clock = FakeClock()
        cache = ResultCache(ttl=900, clock=clock)
        cache.put("k", 1)
        clock.now = 899.9
        assert cache.get("k") == 1
        clock.now = 900
        assert cache.get("k") is None

    def test_stale_entry_stays_stored(self):
        clock = FakeClock()
        cache = ResultCache(ttl=10, clock=clock)
        cache.put("k", 1)
        clock.now = 20
        assert cache.get("k") is None
        assert len(cache) == 1

    def test_refresh_restarts_ttl(self):
        clock = FakeClock()
        cache = ResultCache(ttl=10, clock=clock)
        cache.put("k", 1)
        clock.now = 15
        cache.put("k", 2)
        clock.now = 20
        assert cache.get("k") == 2

    def test_evicts_oldest_past_cap(self):
        cache = ResultCache(max_entries=100)
        for i in range(101):
            cache.put(f"k{i}", i)
        assert len(cache) == 100
        assert cache.get("k0") is None
        assert cache.get("k1") == 1
        assert cache.get("k100") == 100

    def test_overwrite_keeps_insertion_slot(self):
        cache = ResultCache(max_entries=3)
        cache.put("a", 1)
        cache.put("b", 2)
        cache.put("c", 3)
        cache.put("a", 10)
        assert cache.keys() == ["a", "b", "c"]
        assert cache.get("a") == 10

        cache.put("d", 4)
        assert cache.keys() == ["b", "c", "d"]
        assert cache.get("a") is None

    def test_overwrite_refreshes_timestamp(self):
        clock = FakeClock()
        cache = ResultCache(ttl=900, clock=clock)
        cache.put("k", 1)
        clock.now = 800
        cache.put("k", 2)
        clock.now = 1000
        assert cache.get("k") == 2

    def test_reads_do_not_affect_eviction(self):
        cache = ResultCache(max_entries=2)
        cache.put("a", 1)
        cache.put("b", 2)
        cache.get("a")
        cache.put("c", 3)
        assert cache.keys() == ["b", "c"]

    def test_concurrent_puts_respect_cap(self):
        cache = ResultCache(max_entries=50)

        def writer(prefix: str):
            for i in range(200):
                cache.put(f"{prefix}{i}", i)

        threads = [threading.Thread(target=writer, args=(p,)) for p in "abcd"]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert len(cache) == 50
