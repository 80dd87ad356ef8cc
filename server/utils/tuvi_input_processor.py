#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
紫微输入处理工具类 - 统一处理出生信息规范化和历法转换
"""

import logging
from typing import Any, Dict, Optional, Tuple

from core.calculators.LunarConverter import LunarConverter
from core.calculators.tuvi_calculator import parse_birth_date, resolve_lunar_date
from core.calculators.tuvi_core import BirthRecord, InvalidInputError, LunarDate

logger = logging.getLogger(__name__)


class TuviInputProcessor:
    """紫微输入处理工具类"""

    @staticmethod
    def build_birth_record(
        full_name: Optional[str],
        birth_date: str,
        birth_hour: str,
        gender: str,
        calendar_type: Optional[str] = "solar",
        is_leap_month: Optional[bool] = False,
    ) -> BirthRecord:
        """
        规范化请求字段并构造 BirthRecord

        - 去除首尾空白，日期补零为 YYYY-MM-DD
        - 性别、历法类型转小写
        - 闰月标记只对农历输入有意义，公历输入时忽略

        Raises:
            InvalidInputError: 日期格式错误
        """
        calendar_type = (calendar_type or "solar").strip().lower()
        year, month, day = parse_birth_date(birth_date)
        return BirthRecord(
            full_name=(full_name or "").strip(),
            birth_date=f"{year:04d}-{month:02d}-{day:02d}",
            birth_hour=(birth_hour or "").strip(),
            gender=(gender or "").strip().lower(),
            calendar_type=calendar_type,
            is_leap_month=bool(is_leap_month) and calendar_type == "lunar",
        )

    @staticmethod
    def process_input(
        full_name: Optional[str],
        birth_date: str,
        birth_hour: str,
        gender: str,
        calendar_type: Optional[str] = "solar",
        is_leap_month: Optional[bool] = False,
    ) -> Tuple[BirthRecord, LunarDate, Dict[str, Any]]:
        """
        处理紫微输入（规范化 + 历法转换）

        Returns:
            (record, lunar_date, conversion_info) - 规范化后的出生信息、排盘用农历日期和转换信息
        """
        record = TuviInputProcessor.build_birth_record(
            full_name, birth_date, birth_hour, gender, calendar_type, is_leap_month
        )
        lunar_date = resolve_lunar_date(record)

        conversion_info = {
            'original_date': birth_date,
            'calendar_type': record.calendar_type,
            'converted': record.calendar_type == "solar",
            'lunar_date': lunar_date.to_dict(),
        }

        if record.calendar_type == "lunar":
            # 农历输入附带对应公历，便于前端展示；无对应公历（如不存在的闰月）时只记录警告
            try:
                solar = LunarConverter.lunar_to_solar(
                    lunar_date.year, lunar_date.month, lunar_date.day, lunar_date.is_leap_month
                )
                conversion_info['solar_date'] = solar['solar_date']
            except ValueError as e:
                logger.warning(f"⚠️ 农历日期无对应公历，仅按农历排盘: {record.birth_date}, {e}")
                conversion_info['solar_date'] = None
        else:
            conversion_info['solar_date'] = record.birth_date

        return record, lunar_date, conversion_info


__all__ = ['TuviInputProcessor', 'InvalidInputError']
