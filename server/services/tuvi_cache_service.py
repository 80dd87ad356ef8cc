#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
紫微命盘缓存服务 - 统一管理命盘数据的缓存读写

命盘只由出生日期、时辰、性别、历法类型和闰月标记决定，
姓名不参与缓存键（读出后由调用方回填）。
"""

import hashlib
import logging
from typing import Any, Dict, Optional

from core.calculators.tuvi_core import BirthRecord
from server.utils.cache_multi_level import MultiLevelCache, get_multi_cache

logger = logging.getLogger(__name__)


class TuviCacheService:
    """紫微命盘缓存服务"""

    KEY_PREFIX = "tuvi:chart"

    @staticmethod
    def _generate_hash(record: BirthRecord) -> str:
        """
        生成缓存键的哈希值

        Returns:
            MD5 哈希值（32位）
        """
        year = record.birth_date.split('-', 1)[0]
        key_str = (
            f"{record.birth_date}:{record.birth_hour.lower()}:{record.gender}:"
            f"{record.calendar_type}:{int(record.is_leap_month)}:{year}"
        )
        return hashlib.md5(key_str.encode('utf-8')).hexdigest()

    @staticmethod
    def get_chart_key(record: BirthRecord) -> str:
        """获取命盘缓存键"""
        return f"{TuviCacheService.KEY_PREFIX}:{TuviCacheService._generate_hash(record)}"

    @staticmethod
    def _cache(cache: Optional[MultiLevelCache]) -> Optional[MultiLevelCache]:
        from server.config.app_config import get_config
        if not get_config().cache.enabled:
            return None
        return cache or get_multi_cache()

    @staticmethod
    def get_chart(record: BirthRecord, cache: Optional[MultiLevelCache] = None) -> Optional[Dict[str, Any]]:
        """
        读取命盘缓存

        Returns:
            命盘 dict，未命中 / 缓存关闭 / 读取失败时返回 None
        """
        cache = TuviCacheService._cache(cache)
        if cache is None:
            return None
        cache_key = TuviCacheService.get_chart_key(record)
        try:
            result = cache.get(cache_key)
        except Exception as e:
            logger.warning(f"⚠️ 读取命盘缓存失败: {e}")
            return None
        if result is None:
            logger.debug(f"[缓存未命中] {cache_key}")
            return None
        if not isinstance(result, dict):
            logger.warning(f"⚠️ 命盘缓存格式错误，已删除: {cache_key}")
            cache.delete(cache_key)
            return None
        logger.debug(f"✅ [缓存命中] {cache_key}")
        return result

    @staticmethod
    def set_chart(record: BirthRecord, data: Dict[str, Any], cache: Optional[MultiLevelCache] = None) -> bool:
        """
        写入命盘缓存

        Returns:
            是否成功
        """
        cache = TuviCacheService._cache(cache)
        if cache is None:
            return False
        cache_key = TuviCacheService.get_chart_key(record)
        try:
            cache.set(cache_key, data)
        except Exception as e:
            logger.warning(f"⚠️ 写入命盘缓存失败: {e}")
            return False
        logger.info(f"✅ [缓存写入] {cache_key}")
        return True

    @staticmethod
    def delete_chart(record: BirthRecord, cache: Optional[MultiLevelCache] = None):
        """删除命盘缓存（所有层级）"""
        cache = TuviCacheService._cache(cache)
        if cache is None:
            return
        cache.delete(TuviCacheService.get_chart_key(record))
