#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
统一环境配置管理

环境判断（local / staging / production）与类型化的环境变量读取
"""

import logging
import os
from typing import Literal, Optional

logger = logging.getLogger(__name__)

Environment = Literal["local", "staging", "production"]

_ENV_ALIASES = {
    "local": "local", "dev": "local", "development": "local",
    "staging": "staging", "stage": "staging",
    "prod": "production", "production": "production",
}

# 生产环境必须显式配置的变量
PRODUCTION_REQUIRED_VARS = ["REDIS_HOST"]


class EnvConfig:
    """环境配置：读取 ENV / APP_ENV，默认为本地开发"""

    def __init__(self):
        raw = os.getenv("ENV", os.getenv("APP_ENV", "local")).lower()
        self._env: Environment = _ENV_ALIASES.get(raw, "local")
        if self.is_production:
            missing = [var for var in PRODUCTION_REQUIRED_VARS if not os.getenv(var)]
            if missing:
                # 不阻止启动，连接时会给出具体错误
                logger.error(f"❌ 生产环境缺少必需环境变量: {', '.join(missing)}")

    @property
    def env(self) -> Environment:
        return self._env

    @property
    def is_local_dev(self) -> bool:
        return self._env == "local"

    @property
    def is_production(self) -> bool:
        return self._env == "production"

    def get_config(self, key: str, default: str = None, required: bool = False) -> Optional[str]:
        """
        读取字符串配置

        Raises:
            ValueError: required=True 且未设置
        """
        value = os.getenv(key, default)
        if required and value is None:
            raise ValueError(f"必需的环境变量 {key} 未设置")
        return value

    def get_bool_config(self, key: str, default: bool = False) -> bool:
        value = os.getenv(key)
        if value is None:
            return default
        return value.strip().lower() in ("true", "1", "yes", "on")

    def get_int_config(self, key: str, default: int = 0) -> int:
        value = os.getenv(key)
        if value is None:
            return default
        try:
            return int(value)
        except ValueError:
            logger.warning(f"⚠️ 环境变量 {key}={value!r} 不是整数，使用默认值 {default}")
            return default


# 全局单例实例
_env_config: Optional[EnvConfig] = None


def get_env_config() -> EnvConfig:
    """获取环境配置实例（全局单例）"""
    global _env_config
    if _env_config is None:
        _env_config = EnvConfig()
    return _env_config


def reset_env_config():
    """丢弃单例，下次读取时重新检测环境（测试用）"""
    global _env_config
    _env_config = None


def is_local_dev() -> bool:
    """是否为本地开发环境（便捷函数）"""
    return get_env_config().is_local_dev


def is_production() -> bool:
    """是否为生产环境（便捷函数）"""
    return get_env_config().is_production
