#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
统一应用配置管理
所有配置统一从这里读取，避免配置分散
"""

import os
from typing import Optional
from dataclasses import dataclass

# 使用统一环境配置
from server.config.env_config import get_env_config


@dataclass
class RedisConfig:
    """Redis 配置"""
    host: str
    port: int
    db: int
    password: Optional[str]
    enabled: bool = True
    max_connections: int = 100
    socket_timeout: float = 1.0

    @classmethod
    def from_env(cls) -> 'RedisConfig':
        """从环境变量创建配置"""
        env_config = get_env_config()
        return cls(
            host=os.getenv('REDIS_HOST', 'localhost'),
            port=int(os.getenv('REDIS_PORT', '6379')),
            db=int(os.getenv('REDIS_DB', '0')),
            password=os.getenv('REDIS_PASSWORD') or None,
            enabled=env_config.get_bool_config('REDIS_ENABLED', default=True),
            max_connections=int(os.getenv('REDIS_MAX_CONNECTIONS', '100')),
            socket_timeout=float(os.getenv('REDIS_SOCKET_TIMEOUT', '1.0')),
        )


@dataclass
class TuviCacheConfig:
    """紫微命盘缓存配置"""
    enabled: bool = True
    l1_max_size: int = 10000
    l1_ttl: int = 300
    redis_ttl: int = 2592000  # 30天，命盘对同一出生信息恒定

    @classmethod
    def from_env(cls) -> 'TuviCacheConfig':
        """从环境变量创建配置"""
        env_config = get_env_config()
        return cls(
            enabled=env_config.get_bool_config('TUVI_CACHE_ENABLED', default=True),
            l1_max_size=env_config.get_int_config('TUVI_CACHE_L1_MAX_SIZE', default=10000),
            l1_ttl=env_config.get_int_config('TUVI_CACHE_L1_TTL', default=300),
            redis_ttl=env_config.get_int_config('TUVI_CACHE_REDIS_TTL', default=2592000),
        )


@dataclass
class AppConfig:
    """应用配置"""
    env: str = 'local'
    debug: bool = False
    log_level: str = 'INFO'
    max_workers: int = 8

    # 子配置
    redis: RedisConfig = None
    cache: TuviCacheConfig = None

    @classmethod
    def from_env(cls) -> 'AppConfig':
        """从环境变量创建完整配置"""
        env_config = get_env_config()
        config = cls(
            env=env_config.env,
            debug=env_config.get_bool_config('DEBUG', default=False),
            log_level=env_config.get_config('LOG_LEVEL', default='INFO'),
            max_workers=env_config.get_int_config('TUVI_MAX_WORKERS', default=min((os.cpu_count() or 4) * 2, 100)),
        )

        # 加载子配置
        config.redis = RedisConfig.from_env()
        config.cache = TuviCacheConfig.from_env()

        return config


# 全局配置实例（单例模式）
_config: Optional[AppConfig] = None


def get_config() -> AppConfig:
    """获取全局配置实例（单例）"""
    global _config
    if _config is None:
        _config = AppConfig.from_env()
    return _config


def reload_config():
    """重新加载配置（用于热更新）"""
    global _config
    _config = AppConfig.from_env()
    return _config
