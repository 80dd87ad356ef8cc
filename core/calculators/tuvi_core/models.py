#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
紫微排盘数据模型

全部为不可变 dataclass，每次排盘新建，不在盘与盘之间共享。
to_dict() 输出 API / 缓存 / 提示词使用的纯数据结构。
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from core.data.stems_branches import (
    EARTHLY_BRANCHES,
    HEAVENLY_STEMS,
    PALACE_NAMES,
    get_full_nap_am,
    get_nap_am,
)

GENDERS = ("male", "female")
CALENDAR_TYPES = ("solar", "lunar")
PALACE_ORDER: List[str] = [name for name, _ in PALACE_NAMES]


class Nature(Enum):
    """星曜吉凶"""
    GOOD = "good"
    BAD = "bad"
    NEUTRAL = "neutral"


class StarKind(Enum):
    """主星 / 辅星"""
    MAIN = "main"
    SECONDARY = "secondary"


class RingDirection(Enum):
    """
    排布方向（大运、禄存环、长生环共用）

    阳男阴女顺行，阴男阳女逆行。
    """
    CLOCKWISE = "clockwise"
    COUNTER_CLOCKWISE = "counter_clockwise"

    @classmethod
    def from_gender_and_polarity(cls, gender: str, is_yang_stem: bool) -> 'RingDirection':
        """年干阴阳取自 YearPillar.is_yang"""
        is_male = gender == "male"
        if is_male == is_yang_stem:
            return cls.CLOCKWISE
        return cls.COUNTER_CLOCKWISE

    def step(self, origin: int, steps: int) -> int:
        """从 origin 出发沿本方向走 steps 格，返回地支下标"""
        if self is RingDirection.CLOCKWISE:
            return (origin + steps) % 12
        return (origin - steps) % 12


@dataclass(frozen=True)
class BirthRecord:
    """出生信息（排盘唯一输入）"""
    full_name: str
    birth_date: str
    birth_hour: str
    gender: str
    calendar_type: str = "solar"
    is_leap_month: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            'full_name': self.full_name,
            'birth_date': self.birth_date,
            'birth_hour': self.birth_hour,
            'gender': self.gender,
            'calendar_type': self.calendar_type,
            'is_leap_month': self.is_leap_month,
        }


@dataclass(frozen=True)
class LunarDate:
    """农历日期，month 恒为 1-12，闰月由 is_leap_month 标记"""
    year: int
    month: int
    day: int
    is_leap_month: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            'year': self.year,
            'month': self.month,
            'day': self.day,
            'is_leap_month': self.is_leap_month,
        }


@dataclass(frozen=True)
class YearPillar:
    """年柱（天干、地支、纳音）"""
    stem_index: int
    branch_index: int

    @property
    def stem(self) -> str:
        return HEAVENLY_STEMS[self.stem_index]

    @property
    def branch(self) -> str:
        return EARTHLY_BRANCHES[self.branch_index]

    @property
    def element(self) -> str:
        return get_nap_am(self.stem_index, self.branch_index)

    @property
    def nap_am(self) -> str:
        return get_full_nap_am(self.stem_index, self.branch_index, default=self.element)

    @property
    def is_yang(self) -> bool:
        return self.stem_index % 2 == 0


@dataclass(frozen=True)
class Cuc:
    """五行局"""
    element: str
    value: int
    name: str

    def to_dict(self) -> Dict[str, Any]:
        return {'element': self.element, 'value': self.value, 'name': self.name}


@dataclass(frozen=True)
class Star:
    """星曜"""
    name: str
    kind: StarKind
    nature: Nature
    brightness: Optional[str] = None
    element: Optional[str] = None
    name_chinese: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'name_chinese': self.name_chinese,
            'type': self.kind.value,
            'nature': self.nature.value,
            'brightness': self.brightness,
            'element': self.element,
        }


@dataclass(frozen=True)
class Palace:
    """宫位"""
    name: str
    name_chinese: str
    position: int
    main_stars: Tuple[Star, ...] = ()
    secondary_stars: Tuple[Star, ...] = ()
    element: str = ""
    dai_van: int = 0
    tuan: bool = False
    triet: bool = False

    @property
    def branch(self) -> str:
        return EARTHLY_BRANCHES[self.position]

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'name_chinese': self.name_chinese,
            'position': self.position,
            'branch': self.branch,
            'main_stars': [s.to_dict() for s in self.main_stars],
            'secondary_stars': [s.to_dict() for s in self.secondary_stars],
            'element': self.element,
            'dai_van': self.dai_van,
            'tuan': self.tuan,
            'triet': self.triet,
        }


@dataclass(frozen=True)
class MajorStarGroup:
    """主星格局"""
    name: str
    description: str

    def to_dict(self) -> Dict[str, str]:
        return {'name': self.name, 'description': self.description}


@dataclass(frozen=True)
class DestinyScores:
    """四项运势分数（20-98）"""
    career: int
    finance: int
    romance: int
    health: int

    def to_dict(self) -> Dict[str, int]:
        return {
            'career_score': self.career,
            'finance_score': self.finance,
            'romance_score': self.romance,
            'health_score': self.health,
        }


@dataclass(frozen=True)
class TuviChart:
    """紫微命盘"""
    palaces: Tuple[Palace, ...]
    year_pillar: YearPillar
    lunar_date: LunarDate
    cuc: Cuc
    menh_position: int
    chu_menh: str
    chu_than: str
    major_star_group: MajorStarGroup
    destiny_scores: DestinyScores
    tuan_positions: Tuple[int, int]
    triet_positions: Tuple[int, int]
    center_info: Dict[str, Any] = field(default_factory=dict)

    @property
    def heavenly_stem(self) -> str:
        return self.year_pillar.stem

    @property
    def earthly_branch(self) -> str:
        return self.year_pillar.branch

    @property
    def element(self) -> str:
        return self.year_pillar.element

    @property
    def nap_am(self) -> str:
        return self.year_pillar.nap_am

    def palace(self, name: str) -> Palace:
        """按宫名取宫位，未知宫名抛 KeyError"""
        for palace in self.palaces:
            if palace.name == name:
                return palace
        raise KeyError(name)

    def palace_at(self, position: int) -> Palace:
        """按地支下标取宫位"""
        for palace in self.palaces:
            if palace.position == position % 12:
                return palace
        raise KeyError(position)

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {
            'palaces': [p.to_dict() for p in self.palaces],
            'heavenly_stem': self.heavenly_stem,
            'earthly_branch': self.earthly_branch,
            'element': self.element,
            'nap_am': self.nap_am,
            'lunar_date': self.lunar_date.to_dict(),
            'cuc': self.cuc.to_dict(),
            'cuc_loai': self.cuc.name,
            'menh_position': self.menh_position,
            'chu_menh': self.chu_menh,
            'chu_than': self.chu_than,
            'major_star_group': self.major_star_group.to_dict(),
            'destiny_scores': self.destiny_scores.to_dict(),
            'tuan_positions': list(self.tuan_positions),
            'triet_positions': list(self.triet_positions),
            'center_info': dict(self.center_info),
        }
        return result
