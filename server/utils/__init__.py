# -*- coding: utf-8 -*-
"""
服务器工具模块
"""

from .cache_multi_level import L1MemoryCache, L2RedisCache, MultiLevelCache, get_multi_cache

__all__ = [
    'L1MemoryCache', 'L2RedisCache', 'MultiLevelCache', 'get_multi_cache',
]
