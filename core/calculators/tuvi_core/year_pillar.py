#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""年柱：农历年 -> 天干 / 地支 / 纳音"""

from core.calculators.tuvi_core.models import YearPillar


def resolve_year_pillar(lunar_year: int) -> YearPillar:
    """
    由农历年份推算年柱

    公元 4 年为甲子年，天干周期 10、地支周期 12。
    对任意整数年份有效（Python 取模恒非负）。

    Args:
        lunar_year: 农历年份

    Returns:
        YearPillar: 年柱
    """
    return YearPillar(
        stem_index=(lunar_year - 4) % 10,
        branch_index=(lunar_year - 4) % 12,
    )
