"""Tests for thread safety of the cache engine."""

import threading
from concurrent.futures import ThreadPoolExecutor

from lru_engine import LRUCache


class TestConcurrency:
    """Test cases for concurrent access."""

    def test_concurrent_writers_keep_structures_consistent(self):
        """Test that parallel get/set never break the capacity bound or key sets."""
        cache = LRUCache(8)
        evicted = []
        cache.subscribe(lambda key, value: evicted.append(key))

        def worker(worker_id):
            for step in range(500):
                key = (worker_id * 7 + step) % 20
                cache.set(key, (worker_id, step))
                cache.get((key + 3) % 20)
                assert len(cache) <= 8

        with ThreadPoolExecutor(max_workers=8) as executor:
            list(executor.map(worker, range(8)))

        keys = cache.keys()
        assert len(keys) == len(set(keys)) == len(cache) == 8
        assert set(keys) == set(cache._entries)
        stats = cache.get_stats()
        assert stats.evictions == len(evicted)
        assert stats.sets - stats.evictions == 8

    def test_notifications_preserve_per_thread_order(self):
        """Test that each thread sees its keys evicted in insertion order."""
        cache = LRUCache(1)
        evicted = []

        def listener(key, value):
            evicted.append(key)

        cache.subscribe(listener)

        def worker(worker_id):
            for step in range(200):
                key = (worker_id, step)
                cache.set(key, step)

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(evicted) == 799
        assert len(set(evicted)) == 799
        assert cache.keys()[0] not in evicted
        for worker_id in range(4):
            steps = [step for owner, step in evicted if owner == worker_id]
            assert steps == sorted(steps)
