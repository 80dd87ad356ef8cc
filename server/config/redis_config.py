#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Redis 配置模块

连接池在首次 get_redis_client() 时按 RedisConfig 创建；
REDIS_ENABLED=false 或连接失败时返回 None，调用方退化为仅用本地缓存。
"""

import logging
from typing import Optional

import redis
from redis.connection import ConnectionPool

from server.config.app_config import RedisConfig, get_config

logger = logging.getLogger(__name__)

# 全局 Redis 连接池
redis_pool: Optional[ConnectionPool] = None
redis_client: Optional[redis.Redis] = None
_initialized = False


def init_redis(config: Optional[RedisConfig] = None) -> bool:
    """
    初始化 Redis 连接

    Args:
        config: Redis 配置，默认取全局配置

    Returns:
        bool: 连接是否可用
    """
    global redis_pool, redis_client, _initialized
    config = config or get_config().redis
    _initialized = True

    if not config.enabled:
        logger.info("Redis 已禁用（REDIS_ENABLED=false），仅使用本地缓存")
        redis_pool = None
        redis_client = None
        return False

    redis_pool = ConnectionPool(
        host=config.host,
        port=config.port,
        db=config.db,
        password=config.password,
        max_connections=config.max_connections,
        socket_timeout=config.socket_timeout,
        socket_connect_timeout=config.socket_timeout,
        decode_responses=False,
    )
    client = redis.Redis(connection_pool=redis_pool)

    # 测试连接
    try:
        client.ping()
    except redis.RedisError as e:
        logger.warning(f"⚠️ Redis 连接失败，仅使用本地缓存: {e}")
        redis_client = None
        return False

    redis_client = client
    logger.info(f"✅ Redis 连接成功: {config.host}:{config.port}/{config.db}")
    return True


def get_redis_client() -> Optional[redis.Redis]:
    """获取 Redis 客户端（首次调用时初始化）"""
    if not _initialized:
        init_redis()
    return redis_client


def reset_redis():
    """关闭连接池并重置状态（测试 / 配置热更新用）"""
    global redis_pool, redis_client, _initialized
    if redis_pool is not None:
        redis_pool.disconnect()
    redis_pool = None
    redis_client = None
    _initialized = False
