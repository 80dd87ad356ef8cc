#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
tests/unit/test_cache_multi_level.py
L1MemoryCache / L2RedisCache / MultiLevelCache 单元测试
"""

import json
import os
import threading
from unittest.mock import MagicMock, patch

import redis

from server.utils.cache_multi_level import (
    L1MemoryCache,
    L2RedisCache,
    MultiLevelCache,
    get_multi_cache,
)


# ════════════════════ L1MemoryCache ════════════════════


class TestL1MemoryCache:

    def test_set_and_get(self, l1_cache):
        l1_cache.set("k1", {"a": 1})
        assert l1_cache.get("k1") == {"a": 1}

    def test_get_miss_returns_none(self, l1_cache):
        assert l1_cache.get("nonexist") is None

    def test_ttl_expiry(self, l1_cache):
        """超过 TTL 的条目视为未命中并被移除"""
        l1_cache.set("k", "v")
        l1_cache._cache_times["k"] -= l1_cache.ttl + 1
        assert l1_cache.get("k") is None
        assert len(l1_cache) == 0

    def test_max_size_eviction(self):
        cache = L1MemoryCache(max_size=3, ttl=300)
        cache.set("a", 1)
        cache.set("b", 2)
        cache.set("c", 3)
        cache.set("d", 4)
        assert len(cache) == 3
        assert cache.get("a") is None
        assert cache.get("d") == 4

    def test_overwrite_does_not_evict(self):
        cache = L1MemoryCache(max_size=2, ttl=300)
        cache.set("a", 1)
        cache.set("b", 2)
        cache.set("a", 3)
        assert cache.get("a") == 3
        assert cache.get("b") == 2

    def test_delete_and_clear(self, l1_cache):
        l1_cache.set("x", 1)
        l1_cache.set("y", 2)
        l1_cache.delete("x")
        assert l1_cache.get("x") is None
        l1_cache.clear()
        assert l1_cache.get("y") is None

    def test_stats(self, l1_cache):
        l1_cache.get("miss1")
        l1_cache.set("hit1", 100)
        l1_cache.get("hit1")
        stats = l1_cache.stats()
        assert stats["hits"] == 1
        assert stats["misses"] == 1
        assert stats["size"] == 1
        assert stats["max_size"] == 100

    def test_thread_safety_under_eviction(self):
        """多线程写入触发淘汰时不应抛出异常，条目数不超过上限"""
        cache = L1MemoryCache(max_size=20, ttl=300)
        errors = []

        def writer(start):
            try:
                for i in range(500):
                    cache.set(f"key_{start}_{i}", i)
                    cache.get(f"key_{start}_{i // 2}")
            except Exception as e:
                errors.append(e)

        threads = [threading.Thread(target=writer, args=(n,)) for n in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert errors == []
        assert len(cache) <= 20


# ════════════════════ L2RedisCache ════════════════════


class TestL2RedisCache:

    def test_unavailable_without_client(self):
        cache = L2RedisCache(redis_client=None)
        assert not cache.available
        cache.set("k", 1)
        assert cache.get("k") is None
        assert cache.stats() == {"status": "unavailable"}

    def test_set_stores_json_with_ttl(self, mock_redis):
        cache = L2RedisCache(redis_client=mock_redis, ttl=60)
        cache.set("k", {"name": "Tử Vi"})
        mock_redis.setex.assert_called_once_with("k", 60, json.dumps({"name": "Tử Vi"}, ensure_ascii=False))
        assert cache.get("k") == {"name": "Tử Vi"}

    def test_redis_error_is_miss(self):
        client = MagicMock()
        client.get.side_effect = redis.ConnectionError("down")
        client.setex.side_effect = redis.ConnectionError("down")
        cache = L2RedisCache(redis_client=client)
        assert cache.get("k") is None
        cache.set("k", 1)
        cache.delete("k")

    def test_corrupted_value_is_miss(self, mock_redis):
        mock_redis._store["bad"] = ("{not json", float("inf"))
        assert L2RedisCache(redis_client=mock_redis).get("bad") is None

    def test_stats(self, mock_redis):
        stats = L2RedisCache(redis_client=mock_redis).stats()
        assert stats["status"] == "available"
        assert stats["used_memory"] == "1M"

    def test_stats_error(self):
        client = MagicMock()
        client.info.side_effect = redis.ConnectionError("down")
        assert L2RedisCache(redis_client=client).stats() == {"status": "error"}


# ════════════════════ MultiLevelCache ════════════════════


class TestMultiLevelCache:

    def test_set_writes_both_levels(self, multi_cache, mock_redis):
        multi_cache.set("k", {"v": 1})
        assert multi_cache.l1.get("k") == {"v": 1}
        assert "k" in mock_redis._store

    def test_l2_hit_backfills_l1(self, multi_cache, mock_redis):
        mock_redis._store["k"] = (json.dumps({"v": 2}), float("inf"))
        assert multi_cache.l1.get("k") is None
        assert multi_cache.get("k") == {"v": 2}
        assert multi_cache.l1.get("k") == {"v": 2}

    def test_delete_all_levels(self, multi_cache, mock_redis):
        multi_cache.set("k", 1)
        multi_cache.delete("k")
        assert multi_cache.get("k") is None
        assert "k" not in mock_redis._store

    def test_clear_only_local(self, multi_cache, mock_redis):
        multi_cache.set("k", 1)
        multi_cache.clear()
        assert len(multi_cache.l1) == 0
        assert multi_cache.get("k") == 1

    def test_works_without_redis(self):
        cache = MultiLevelCache(redis_client=None)
        cache.set("k", 1)
        assert cache.get("k") == 1
        assert cache.stats()["l2"] == {"status": "unavailable"}


class TestGetMultiCache:

    def test_singleton_uses_cache_config(self):
        with patch.dict(os.environ, {
            'REDIS_ENABLED': 'false',
            'TUVI_CACHE_L1_MAX_SIZE': '12',
            'TUVI_CACHE_L1_TTL': '34',
        }):
            cache = get_multi_cache()
            assert cache is get_multi_cache()
            assert cache.l1.max_size == 12
            assert cache.l1.ttl == 34
            assert not cache.l2.available
