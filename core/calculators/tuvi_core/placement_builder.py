#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
星曜安放器

按调用顺序累积 (地支, 星) 安放记录，并维护星名 -> 地支的登记表，
供后续规则（四化、日系星）按名取位。
"""

from typing import Dict, List, Optional, Tuple

from core.calculators.tuvi_core.models import Nature, Star, StarKind
from core.data.tuvi_stars import (
    MAIN_STARS_INFO,
    SECONDARY_STARS_INFO,
    get_star_brightness,
)


def make_star(name: str, kind: StarKind, position: int) -> Star:
    """
    按星表生成星曜对象（含庙旺利陷）

    Raises:
        KeyError: 星名不在对应星表中
    """
    brightness = get_star_brightness(name, position)
    if kind is StarKind.MAIN:
        nature, element, name_chinese = MAIN_STARS_INFO[name]
        return Star(
            name=name,
            kind=kind,
            nature=Nature(nature),
            brightness=brightness,
            element=element,
            name_chinese=name_chinese,
        )
    return Star(
        name=name,
        kind=kind,
        nature=Nature(SECONDARY_STARS_INFO[name]),
        brightness=brightness,
    )


class PlacementBuilder:
    """一次排盘内的星曜安放记录"""

    def __init__(self):
        self._placements: List[Tuple[int, Star]] = []
        self._registry: Dict[str, int] = {}

    def place(self, position: int, name: str, kind: StarKind = StarKind.SECONDARY) -> Star:
        position %= 12
        star = make_star(name, kind, position)
        self._placements.append((position, star))
        # 同名星只登记首次位置
        self._registry.setdefault(name, position)
        return star

    def place_main(self, position: int, name: str) -> Star:
        return self.place(position, name, StarKind.MAIN)

    def position_of(self, name: str) -> Optional[int]:
        """已安放星曜的地支下标，未安放返回 None"""
        return self._registry.get(name)

    def stars_at(self, position: int, kind: StarKind) -> Tuple[Star, ...]:
        """某宫某类星曜，保持安放顺序"""
        position %= 12
        return tuple(star for pos, star in self._placements if pos == position and star.kind is kind)

    @property
    def placements(self) -> Tuple[Tuple[int, Star], ...]:
        return tuple(self._placements)

    def count(self, kind: StarKind) -> int:
        return sum(1 for _, star in self._placements if star.kind is kind)
