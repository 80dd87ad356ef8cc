#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
紫微排盘服务层

串联：输入规范化 -> 缓存 -> 排盘 -> 附加解读 / 提示词
"""

import logging
from typing import Any, Dict, Optional

from core.analyzers.destiny_score_analyzer import interpret_destiny_scores
from core.calculators.tuvi_calculator import TuviCalculator
from server.services.tuvi_cache_service import TuviCacheService
from server.utils.prompt_builders import build_palace_analysis_prompt, build_tuvi_analysis_prompt
from server.utils.tuvi_input_processor import TuviInputProcessor

logger = logging.getLogger(__name__)


class TuviService:
    """紫微排盘服务"""

    @staticmethod
    def calculate_chart(
        full_name: Optional[str],
        birth_date: str,
        birth_hour: str,
        gender: str,
        calendar_type: Optional[str] = "solar",
        is_leap_month: Optional[bool] = False,
        use_cache: bool = True,
    ) -> Dict[str, Any]:
        """
        排盘并返回命盘 dict（带分数解读与历法转换信息）

        Raises:
            InvalidInputError: 出生信息无效
        """
        record, lunar_date, conversion_info = TuviInputProcessor.process_input(
            full_name, birth_date, birth_hour, gender, calendar_type, is_leap_month
        )

        if use_cache:
            cached = TuviCacheService.get_chart(record)
            if cached is not None:
                # 姓名不参与缓存键，时辰口令按小写入键；L1 返回的是共享对象，先复制
                cached = dict(cached)
                cached['center_info'] = {
                    **cached.get('center_info', {}),
                    'name': record.full_name,
                    'birth_hour': record.birth_hour,
                }
                cached['conversion_info'] = conversion_info
                return cached

        # 历法已在输入处理时换算过，直接复用
        chart = TuviCalculator(record, solar_resolver=lambda y, m, d: lunar_date).calculate()
        result = chart.to_dict()
        result['destiny_interpretation'] = interpret_destiny_scores(chart.destiny_scores)

        if use_cache:
            TuviCacheService.set_chart(record, dict(result))

        result['conversion_info'] = conversion_info
        logger.info(
            f"排盘完成: {record.birth_date} ({record.calendar_type}) {record.birth_hour} {record.gender} -> "
            f"{result['heavenly_stem']} {result['earthly_branch']}, {result['cuc_loai']}"
        )
        return result

    @staticmethod
    def build_analysis_prompt(chart: Dict[str, Any], full_name: Optional[str] = None) -> str:
        """命盘总览提示词"""
        return build_tuvi_analysis_prompt(chart, full_name=full_name)

    @staticmethod
    def build_palace_prompt(chart: Dict[str, Any], palace_name: str, full_name: Optional[str] = None) -> str:
        """
        单宫提示词

        Raises:
            KeyError: 宫名不存在
        """
        return build_palace_analysis_prompt(chart, palace_name, full_name=full_name)

