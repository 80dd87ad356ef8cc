#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Pytest 全局配置

提供：
- 共享 fixtures（出生信息、命盘、缓存）
- 测试钩子（按目录自动打标记）
- 全局配置（测试期间关闭 Redis）
"""

import json
import os
import sys
import time
from typing import Any, Dict
from unittest.mock import MagicMock

import pytest

# 添加项目根目录到路径
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

# 测试不依赖真实 Redis
os.environ.setdefault("REDIS_ENABLED", "false")


# ==================== 出生信息 / 命盘 Fixtures ====================

@pytest.fixture(scope="function")
def giap_ty_record():
    """
    农历 1984-01-01 子时 男（甲子年，命宫寅，火六局）

    Returns:
        BirthRecord
    """
    from core.calculators.tuvi_core import BirthRecord
    return BirthRecord(
        full_name="Nguyễn Văn A",
        birth_date="1984-01-01",
        birth_hour="ty",
        gender="male",
        calendar_type="lunar",
    )


@pytest.fixture(scope="function")
def at_suu_record():
    """农历 1985-12-25 子时 女（乙丑年，命宫丑）"""
    from core.calculators.tuvi_core import BirthRecord
    return BirthRecord(
        full_name="Trần Thị B",
        birth_date="1985-12-25",
        birth_hour="ty",
        gender="female",
        calendar_type="lunar",
    )


@pytest.fixture(scope="function")
def giap_ty_chart(giap_ty_record):
    """甲子年样例命盘"""
    from core.calculators.tuvi_calculator import generate_chart
    return generate_chart(giap_ty_record)


@pytest.fixture(scope="function")
def sample_tuvi_request() -> Dict[str, Any]:
    """
    示例排盘请求

    Returns:
        请求字典
    """
    return {
        "full_name": "Nguyễn Văn A",
        "birth_date": "1984-01-01",
        "birth_hour": "ty",
        "gender": "male",
        "calendar_type": "lunar",
    }


# ==================== 缓存 Fixtures ====================

@pytest.fixture(scope="function")
def mock_redis():
    """
    带内存存储的 Mock Redis 客户端

    _store: key -> (value, expire_at)
    """
    client = MagicMock()
    client._store = {}

    def _get(key):
        item = client._store.get(key)
        if item is None:
            return None
        value, expire_at = item
        if expire_at < time.time():
            client._store.pop(key, None)
            return None
        return value if isinstance(value, (str, bytes)) else json.dumps(value)

    def _setex(key, ttl, value):
        client._store[key] = (value, time.time() + ttl)
        return True

    def _delete(key):
        return 1 if client._store.pop(key, None) is not None else 0

    client.get.side_effect = _get
    client.setex.side_effect = _setex
    client.delete.side_effect = _delete
    client.info.return_value = {"used_memory_human": "1M", "connected_clients": 1}
    return client


@pytest.fixture(scope="function")
def l1_cache():
    from server.utils.cache_multi_level import L1MemoryCache
    return L1MemoryCache(max_size=100, ttl=300)


@pytest.fixture(scope="function")
def multi_cache(mock_redis):
    from server.utils.cache_multi_level import MultiLevelCache
    return MultiLevelCache(l1_max_size=100, l1_ttl=300, redis_client=mock_redis, redis_ttl=600)


@pytest.fixture(autouse=True)
def _reset_singletons():
    """每个测试后丢弃配置 / 缓存单例，避免环境变量互相影响"""
    yield
    from server.config import app_config
    from server.config.env_config import reset_env_config
    from server.config.redis_config import reset_redis
    from server.utils.cache_multi_level import reset_multi_cache
    app_config._config = None
    reset_env_config()
    reset_multi_cache()
    reset_redis()


# ==================== Pytest Hooks ====================

def pytest_collection_modifyitems(config, items):
    """
    修改测试收集

    根据路径自动添加标记
    """
    for item in items:
        if "unit" in item.nodeid:
            item.add_marker(pytest.mark.unit)
        elif "api" in item.nodeid:
            item.add_marker(pytest.mark.api)


# ==================== 辅助函数 ====================

def assert_response_success(response: Dict[str, Any]):
    """
    断言响应成功

    Args:
        response: API 响应字典
    """
    assert response.get("success") is True, f"Expected success=True, got {response}"
    assert response.get("data") is not None
