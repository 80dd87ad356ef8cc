#!/usr/bin/env python3
# -*- coding: utf-8 -*-

from datetime import date

from lunar_python import Solar, Lunar

from core.calculators.tuvi_core.errors import InvalidInputError
from core.calculators.tuvi_core.models import LunarDate
from core.calculators.tuvi_logging import safe_log


class LunarConverter:
    """农历转换工具类 - 提供统一的公历/农历互转方法"""

    @staticmethod
    def solar_to_lunar_date(year: int, month: int, day: int) -> LunarDate:
        """
        公历转农历（排盘用）

        lunar_python 以负数月份表示闰月，这里统一转为 1-12 并单独标记闰月。

        Args:
            year: 公历年
            month: 公历月
            day: 公历日

        Returns:
            LunarDate: 农历日期

        Raises:
            InvalidInputError: 日期不存在或超出历表范围
        """
        try:
            date(year, month, day)
            lunar = Solar.fromYmd(year, month, day).getLunar()
        except Exception as e:
            safe_log('warning', f"⚠️ 公历转农历失败: {year}-{month}-{day}, {e}")
            raise InvalidInputError(f"公历转农历失败: {e}", field='birth_date') from e

        lunar_month = lunar.getMonth()
        return LunarDate(
            year=lunar.getYear(),
            month=abs(lunar_month),
            day=lunar.getDay(),
            is_leap_month=LunarConverter._get_leap_month_status(lunar),
        )

    @staticmethod
    def solar_to_lunar(solar_date):
        """
        将公历日期转换为农历信息
        Args:
            solar_date: 公历日期，格式 'YYYY-MM-DD'
        Returns:
            dict: 包含农历日期（含中文月日名）的字典
        """
        year, month, day = map(int, solar_date.split('-'))
        lunar_date = LunarConverter.solar_to_lunar_date(year, month, day)
        lunar = Lunar.fromYmd(
            lunar_date.year,
            -lunar_date.month if lunar_date.is_leap_month else lunar_date.month,
            lunar_date.day,
        )
        return {
            'lunar_date': {
                **lunar_date.to_dict(),
                'month_name': lunar.getMonthInChinese(),
                'day_name': lunar.getDayInChinese(),
            },
            'solar_date': f"{year:04d}-{month:02d}-{day:02d}",
        }

    @staticmethod
    def _get_leap_month_status(lunar):
        """获取闰月状态：lunar_python 闰月的月份为负数"""
        return lunar.getMonth() < 0

    @staticmethod
    def lunar_to_solar(lunar_year, lunar_month, lunar_day, is_leap_month=False):
        """
        将农历日期转换为公历信息

        Args:
            lunar_year: 农历年份
            lunar_month: 农历月份（1-12）
            lunar_day: 农历日期
            is_leap_month: 是否为闰月，默认 False

        Returns:
            dict: 包含公历日期和农历信息的字典
        """
        try:
            lunar = Lunar.fromYmd(lunar_year, -lunar_month if is_leap_month else lunar_month, lunar_day)
            solar = lunar.getSolar()
        except Exception as e:
            raise ValueError(f"农历转阳历失败: {e}")

        solar_year = solar.getYear()
        solar_month = solar.getMonth()
        solar_day = solar.getDay()

        return {
            'solar_date': f"{solar_year:04d}-{solar_month:02d}-{solar_day:02d}",
            'solar_year': solar_year,
            'solar_month': solar_month,
            'solar_day': solar_day,
            'lunar_date': {
                'year': lunar.getYear(),
                'month': abs(lunar.getMonth()),
                'day': lunar.getDay(),
                'month_name': lunar.getMonthInChinese(),
                'day_name': lunar.getDayInChinese(),
                'is_leap_month': LunarConverter._get_leap_month_status(lunar)
            },
            'original_lunar': {
                'year': lunar_year,
                'month': lunar_month,
                'day': lunar_day,
                'is_leap_month': is_leap_month
            }
        }
