#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
多级缓存系统
架构：L1(进程内存) -> L2(Redis)

命盘对同一出生信息是确定的，缓存只是加速；任何一层失败都只记录警告，
调用方按未命中处理。
"""

import json
import logging
import threading
import time
from typing import Any, Optional

import redis

logger = logging.getLogger(__name__)


# L1: 本地内存缓存（热点数据）
class L1MemoryCache:
    """L1缓存：本地内存，按写入时间淘汰最旧条目（线程安全，排盘在线程池中执行）"""

    def __init__(self, max_size: int = 10000, ttl: int = 300):
        """
        Args:
            max_size: 最大缓存条目数
            ttl: 过期时间（秒）
        """
        self._cache = {}
        self._cache_times = {}
        self.max_size = max_size
        self.ttl = ttl
        self.hits = 0
        self.misses = 0
        self._lock = threading.Lock()

    def get(self, key: str) -> Optional[Any]:
        with self._lock:
            if key not in self._cache:
                self.misses += 1
                return None
            if time.time() - self._cache_times[key] > self.ttl:
                self._remove(key)
                self.misses += 1
                return None
            self.hits += 1
            return self._cache[key]

    def set(self, key: str, value: Any):
        with self._lock:
            if key not in self._cache and len(self._cache) >= self.max_size:
                oldest = min(self._cache_times, key=self._cache_times.get)
                self._remove(oldest)
            self._cache[key] = value
            self._cache_times[key] = time.time()

    def _remove(self, key: str):
        # 调用方须持有 _lock
        self._cache.pop(key, None)
        self._cache_times.pop(key, None)

    def delete(self, key: str):
        with self._lock:
            self._remove(key)

    def clear(self):
        with self._lock:
            self._cache.clear()
            self._cache_times.clear()

    def __len__(self):
        return len(self._cache)

    def stats(self) -> dict:
        """获取缓存统计信息"""
        return {
            "size": len(self._cache),
            "max_size": self.max_size,
            "ttl": self.ttl,
            "hits": self.hits,
            "misses": self.misses,
        }


# L2: Redis分布式缓存
class L2RedisCache:
    """L2缓存：Redis，值以 JSON 存储，支持多进程共享"""

    def __init__(self, redis_client=None, ttl: int = 2592000):
        """
        Args:
            redis_client: Redis 客户端对象，None 表示不可用
            ttl: 过期时间（秒）
        """
        self.redis = redis_client
        self.ttl = ttl

    @property
    def available(self) -> bool:
        return self.redis is not None

    def get(self, key: str) -> Optional[Any]:
        if not self.available:
            return None
        try:
            data = self.redis.get(key)
        except redis.RedisError as e:
            logger.warning(f"⚠️ Redis 读取失败 {key}: {e}")
            return None
        if not data:
            return None
        try:
            return json.loads(data)
        except (TypeError, ValueError) as e:
            logger.warning(f"⚠️ Redis 缓存数据损坏 {key}: {e}")
            return None

    def set(self, key: str, value: Any):
        if not self.available:
            return
        try:
            self.redis.setex(key, self.ttl, json.dumps(value, ensure_ascii=False))
        except (TypeError, ValueError) as e:
            logger.warning(f"⚠️ 缓存值无法序列化 {key}: {e}")
        except redis.RedisError as e:
            logger.warning(f"⚠️ Redis 写入失败 {key}: {e}")

    def delete(self, key: str):
        if not self.available:
            return
        try:
            self.redis.delete(key)
        except redis.RedisError as e:
            logger.warning(f"⚠️ Redis 删除失败 {key}: {e}")

    def stats(self) -> dict:
        if not self.available:
            return {"status": "unavailable"}
        try:
            info = self.redis.info()
        except redis.RedisError as e:
            logger.warning(f"⚠️ Redis 状态读取失败: {e}")
            return {"status": "error"}
        return {
            "status": "available",
            "used_memory": info.get('used_memory_human', 'N/A'),
            "connected_clients": info.get('connected_clients', 0),
        }


# 多级缓存管理器
class MultiLevelCache:
    """多级缓存管理器：读 L1 -> L2（命中后回填 L1），写两层"""

    def __init__(self,
                 l1_max_size: int = 10000,
                 l1_ttl: int = 300,
                 redis_client=None,
                 redis_ttl: int = 2592000):
        self.l1 = L1MemoryCache(max_size=l1_max_size, ttl=l1_ttl)
        self.l2 = L2RedisCache(redis_client=redis_client, ttl=redis_ttl)

    def get(self, key: str) -> Optional[Any]:
        value = self.l1.get(key)
        if value is not None:
            return value

        value = self.l2.get(key)
        if value is not None:
            # 回填L1
            self.l1.set(key, value)
        return value

    def set(self, key: str, value: Any):
        self.l1.set(key, value)
        self.l2.set(key, value)

    def delete(self, key: str):
        """删除缓存（所有层级）"""
        self.l1.delete(key)
        self.l2.delete(key)

    def clear(self):
        """清空本地缓存（Redis 中的条目按 TTL 过期）"""
        self.l1.clear()

    def stats(self) -> dict:
        return {
            "l1": self.l1.stats(),
            "l2": self.l2.stats(),
        }


# 全局多级缓存实例（延迟初始化）
_multi_cache: Optional[MultiLevelCache] = None


def get_multi_cache() -> MultiLevelCache:
    """获取多级缓存实例（单例模式），参数取自 TuviCacheConfig"""
    global _multi_cache

    if _multi_cache is None:
        from server.config.app_config import get_config
        from server.config.redis_config import get_redis_client

        cache_config = get_config().cache
        _multi_cache = MultiLevelCache(
            l1_max_size=cache_config.l1_max_size,
            l1_ttl=cache_config.l1_ttl,
            redis_client=get_redis_client(),
            redis_ttl=cache_config.redis_ttl,
        )

    return _multi_cache


def reset_multi_cache():
    """丢弃单例（测试用）"""
    global _multi_cache
    _multi_cache = None
