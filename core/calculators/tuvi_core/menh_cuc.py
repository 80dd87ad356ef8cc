#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
命宫定位与五行局

命宫：寅宫起正月顺数至生月，再从该宫起子时逆数至生时。
五行局：五虎遁求寅宫天干，顺推至命宫得命宫干支，取其纳音五行定局。
"""

from core.calculators.tuvi_core.models import Cuc
from core.data.stems_branches import CUC_MAPPING, CUC_NUMERALS, NAP_AM, stem_branch_key

# 寅宫下标
DAN_POSITION = 2


def locate_menh(lunar_month: int, hour_branch: int) -> int:
    """
    定命宫地支下标

    Args:
        lunar_month: 农历月（1-12）
        hour_branch: 时辰地支下标（0-11）

    Returns:
        int: 命宫地支下标（0-11）
    """
    return (DAN_POSITION + lunar_month - 1 - hour_branch + 12) % 12


def calculate_cuc(year_stem_index: int, menh_position: int) -> Cuc:
    """
    计算五行局

    Args:
        year_stem_index: 年干下标
        menh_position: 命宫地支下标

    Returns:
        Cuc: 五行局（局名如 "Thủy Nhị Cục"）
    """
    month1_stem = ((year_stem_index % 5) * 2 + 2) % 10
    distance = (menh_position - DAN_POSITION + 12) % 12
    menh_stem = (month1_stem + distance) % 10

    element = NAP_AM.get(stem_branch_key(menh_stem, menh_position), "Thủy")
    value = CUC_MAPPING.get(element, 2)
    return Cuc(
        element=element,
        value=value,
        name=f"{element} {CUC_NUMERALS[value]} Cục",
    )
