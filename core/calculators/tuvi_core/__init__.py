#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
紫微排盘核心计算模块

提供紫微排盘的各个步骤：
- 年柱与纳音
- 命宫与五行局
- 十四主星、辅星
- 大运、旬空截空
"""

from .errors import InvalidInputError
from .models import (
    BirthRecord,
    Cuc,
    DestinyScores,
    LunarDate,
    MajorStarGroup,
    Nature,
    Palace,
    RingDirection,
    Star,
    StarKind,
    TuviChart,
    YearPillar,
)
from .year_pillar import resolve_year_pillar
from .menh_cuc import locate_menh, calculate_cuc
from .main_stars import locate_tu_vi, locate_thien_phu, place_main_stars
from .placement_builder import PlacementBuilder
from .secondary_stars import PlacementContext, place_secondary_stars
from .dai_van import calculate_dai_van
from .tuan_triet import calculate_tuan_triet

__all__ = [
    'InvalidInputError',
    'BirthRecord',
    'Cuc',
    'DestinyScores',
    'LunarDate',
    'MajorStarGroup',
    'Nature',
    'Palace',
    'RingDirection',
    'Star',
    'StarKind',
    'TuviChart',
    'YearPillar',
    'resolve_year_pillar',
    'locate_menh',
    'calculate_cuc',
    'locate_tu_vi',
    'locate_thien_phu',
    'place_main_stars',
    'PlacementBuilder',
    'PlacementContext',
    'place_secondary_stars',
    'calculate_dai_van',
    'calculate_tuan_triet',
]
