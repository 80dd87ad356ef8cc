#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
十四主星安星

紫微按生日与局数定位，天府与紫微以寅申为轴对称，
其余十二主星按固定偏移跟随两颗主星排布。
"""

from typing import Dict

from core.calculators.tuvi_core.placement_builder import PlacementBuilder
from core.data.tuvi_stars import THIEN_PHU_CHAIN, TU_VI_CHAIN


def locate_tu_vi(lunar_day: int, cuc_value: int) -> int:
    """
    定紫微星地支下标

    生日除以局数：整除时从寅宫起数商数；
    有余数时从寅宫起数 (商+1)，再逆退 (余数-1) 宫。
    """
    if cuc_value <= 0:
        return 2
    quotient, remainder = divmod(lunar_day, cuc_value)
    if remainder == 0:
        return (2 + quotient - 1) % 12
    base = (2 + quotient) % 12
    return (base - (remainder - 1) + 12) % 12


def locate_thien_phu(tu_vi_position: int) -> int:
    """天府与紫微对称：两者之和恒为 4（mod 12）"""
    return (12 - tu_vi_position + 4) % 12


def place_main_stars(builder: PlacementBuilder, lunar_day: int, cuc_value: int) -> Dict[str, int]:
    """
    安十四主星

    Args:
        builder: 星曜安放器
        lunar_day: 农历日
        cuc_value: 局数（2-6）

    Returns:
        dict: 主星名 -> 地支下标
    """
    tu_vi = locate_tu_vi(lunar_day, cuc_value)
    thien_phu = locate_thien_phu(tu_vi)

    positions: Dict[str, int] = {}
    for name, offset in TU_VI_CHAIN:
        positions[name] = (tu_vi + offset) % 12
        builder.place_main(positions[name], name)
    for name, offset in THIEN_PHU_CHAIN:
        positions[name] = (thien_phu + offset) % 12
        builder.place_main(positions[name], name)
    return positions
