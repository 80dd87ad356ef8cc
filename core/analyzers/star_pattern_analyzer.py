#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
主星格局分析器

功能：
- 收集命宫三方（命、财、官）内的主星
- 按优先级依次比对主星格局表，首个命中者即为命盘格局
- 两星格局须全部出现；三星及以上格局至少出现三颗
"""

import logging
from typing import Iterable, Mapping, Sequence, Set

from core.calculators.tuvi_core.models import MajorStarGroup, Star, StarKind
from core.data.star_patterns import (
    FALLBACK_PATTERN,
    MIN_MATCH_FOR_LARGE_PATTERN,
    STAR_PATTERNS,
)

logger = logging.getLogger(__name__)


class StarPatternAnalyzer:
    """主星格局分析器"""

    # 三方：命宫、命宫+4、命宫+8
    TRIPLICITY_OFFSETS = (0, 4, 8)

    @staticmethod
    def triplicity_positions(menh_position: int) -> Sequence[int]:
        return [(menh_position + offset) % 12 for offset in StarPatternAnalyzer.TRIPLICITY_OFFSETS]

    @staticmethod
    def collect_triplicity_stars(stars_by_position: Mapping[int, Iterable[Star]], menh_position: int) -> Set[str]:
        """三方内全部主星名"""
        names: Set[str] = set()
        for position in StarPatternAnalyzer.triplicity_positions(menh_position):
            for star in stars_by_position.get(position, ()):
                if star.kind is StarKind.MAIN:
                    names.add(star.name)
        return names

    @staticmethod
    def pattern_matches(pattern_stars: Sequence[str], present: Set[str]) -> bool:
        match_count = sum(1 for name in pattern_stars if name in present)
        if len(pattern_stars) <= 2:
            return match_count == len(pattern_stars)
        return match_count >= MIN_MATCH_FOR_LARGE_PATTERN

    @staticmethod
    def identify(stars_by_position: Mapping[int, Iterable[Star]], menh_position: int) -> MajorStarGroup:
        """
        识别主星格局

        Args:
            stars_by_position: 地支下标 -> 该宫星曜（只取主星）
            menh_position: 命宫地支下标

        Returns:
            MajorStarGroup: 命中的格局；均未命中时返回 "Cách Cục Khác"
        """
        present = StarPatternAnalyzer.collect_triplicity_stars(stars_by_position, menh_position)
        for pattern in STAR_PATTERNS:
            if StarPatternAnalyzer.pattern_matches(pattern["stars"], present):
                logger.debug(f"命中主星格局: {pattern['name']} (三方主星: {sorted(present)})")
                return MajorStarGroup(name=pattern["name"], description=pattern["description"])
        return MajorStarGroup(name=FALLBACK_PATTERN["name"], description=FALLBACK_PATTERN["description"])


def identify_major_star_group(stars_by_position: Mapping[int, Iterable[Star]], menh_position: int) -> MajorStarGroup:
    """便捷函数，见 StarPatternAnalyzer.identify"""
    return StarPatternAnalyzer.identify(stars_by_position, menh_position)
