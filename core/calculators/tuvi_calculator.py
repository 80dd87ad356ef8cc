#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
紫微斗数排盘主模块

排盘流程（自上而下，单向依赖）：
1. 历法：公历经 LunarConverter 转农历，农历输入直接使用
2. 年柱与纳音
3. 命宫
4. 五行局
5. 十四主星
6. 辅星
7. 大运
8. 旬空 / 截空
9. 主星格局
10. 运势分数

每次 calculate() 都从出生信息重新推算，不保留跨盘状态。
"""

import re
from datetime import date
from typing import Callable, Dict, Optional, Tuple, Union

from core.analyzers.destiny_score_analyzer import DestinyScoreAnalyzer
from core.analyzers.star_pattern_analyzer import StarPatternAnalyzer
from core.calculators.LunarConverter import LunarConverter
from core.calculators.tuvi_core import (
    BirthRecord,
    InvalidInputError,
    LunarDate,
    Palace,
    PlacementBuilder,
    PlacementContext,
    RingDirection,
    StarKind,
    TuviChart,
    calculate_cuc,
    calculate_dai_van,
    calculate_tuan_triet,
    locate_menh,
    place_main_stars,
    place_secondary_stars,
    resolve_year_pillar,
)
from core.calculators.tuvi_core.models import CALENDAR_TYPES, GENDERS
from core.calculators.tuvi_logging import safe_log
from core.data.stems_branches import (
    CHU_MENH_MAP,
    CHU_THAN_MAP,
    EARTHLY_BRANCHES,
    HOUR_TOKENS,
    PALACE_ELEMENTS,
    PALACE_NAMES,
)

SolarResolver = Callable[[int, int, int], LunarDate]

_DATE_PATTERN = re.compile(r'^\s*(\d{4})-(\d{1,2})-(\d{1,2})\s*$')


def parse_birth_date(birth_date: str) -> Tuple[int, int, int]:
    """
    解析 'YYYY-MM-DD' 日期字符串

    Raises:
        InvalidInputError: 格式不符
    """
    if not birth_date:
        raise InvalidInputError("出生日期不能为空", field='birth_date')
    match = _DATE_PATTERN.match(birth_date)
    if not match:
        raise InvalidInputError(f"出生日期格式错误，应为 YYYY-MM-DD: {birth_date}", field='birth_date')
    return int(match.group(1)), int(match.group(2)), int(match.group(3))


def resolve_hour_branch(birth_hour: str) -> int:
    """
    时辰口令 -> 地支下标

    支持拉丁口令（ty, suu, ... hoi，不区分大小写）与越南文地支名（Tý, Sửu, ...）。
    无法识别的非空口令按子时（0）处理并记录警告。

    Raises:
        InvalidInputError: 口令为空
    """
    token = (birth_hour or "").strip()
    if not token:
        raise InvalidInputError("出生时辰不能为空", field='birth_hour')
    if token.lower() in HOUR_TOKENS:
        return HOUR_TOKENS[token.lower()]
    if token in EARTHLY_BRANCHES:
        return EARTHLY_BRANCHES.index(token)
    safe_log('warning', f"⚠️ 无法识别的时辰口令 '{birth_hour}'，按子时(Tý)处理")
    return 0


def resolve_lunar_date(record: BirthRecord, solar_resolver: Optional[SolarResolver] = None) -> LunarDate:
    """
    历法边界：出生信息 -> 农历日期

    - lunar：输入即农历，月 1-12、日 1-30，闰月取 record.is_leap_month
    - solar：校验公历日期后交由 solar_resolver（默认 lunar_python）转换

    Raises:
        InvalidInputError: 日期无效或历法类型未知
    """
    year, month, day = parse_birth_date(record.birth_date)

    if record.calendar_type == "lunar":
        if not 1 <= month <= 12:
            raise InvalidInputError(f"农历月份超出范围 1-12: {month}", field='birth_date')
        if not 1 <= day <= 30:
            raise InvalidInputError(f"农历日期超出范围 1-30: {day}", field='birth_date')
        return LunarDate(year=year, month=month, day=day, is_leap_month=record.is_leap_month)

    if record.calendar_type != "solar":
        raise InvalidInputError(f"历法类型必须为 solar 或 lunar: {record.calendar_type}", field='calendar_type')

    try:
        date(year, month, day)
    except ValueError as e:
        raise InvalidInputError(f"公历日期无效: {record.birth_date} ({e})", field='birth_date') from e

    resolver = solar_resolver or LunarConverter.solar_to_lunar_date
    return resolver(year, month, day)


class TuviCalculator:
    """紫微斗数排盘主类"""

    def __init__(self, birth_record: BirthRecord, solar_resolver: Optional[SolarResolver] = None):
        if birth_record.gender not in GENDERS:
            raise InvalidInputError(f"性别必须为 male 或 female: {birth_record.gender}", field='gender')
        if birth_record.calendar_type not in CALENDAR_TYPES:
            raise InvalidInputError(
                f"历法类型必须为 solar 或 lunar: {birth_record.calendar_type}", field='calendar_type'
            )
        self.birth_record = birth_record
        self.solar_resolver = solar_resolver
        self.last_result: Optional[TuviChart] = None

    def calculate(self) -> TuviChart:
        """执行排盘，返回完整命盘（同时记录在 last_result）"""
        record = self.birth_record

        # 1. 历法（所有输入校验在安星之前完成）
        lunar_date = resolve_lunar_date(record, self.solar_resolver)
        hour_branch = resolve_hour_branch(record.birth_hour)

        # 2. 年柱
        pillar = resolve_year_pillar(lunar_date.year)
        direction = RingDirection.from_gender_and_polarity(record.gender, pillar.is_yang)

        # 3-4. 命宫、五行局
        menh_position = locate_menh(lunar_date.month, hour_branch)
        cuc = calculate_cuc(pillar.stem_index, menh_position)

        # 5-6. 主星、辅星
        builder = PlacementBuilder()
        place_main_stars(builder, lunar_date.day, cuc.value)
        place_secondary_stars(builder, PlacementContext(
            hour_branch=hour_branch,
            lunar_month=lunar_date.month,
            lunar_day=lunar_date.day,
            stem_index=pillar.stem_index,
            branch_index=pillar.branch_index,
            menh_position=menh_position,
            cuc_value=cuc.value,
            direction=direction,
        ))

        # 7-8. 大运、旬空截空
        dai_van = calculate_dai_van(cuc.value, menh_position, direction)
        tuan_positions, triet_positions = calculate_tuan_triet(pillar.stem_index, pillar.branch_index)

        palaces = self._build_palaces(builder, menh_position, dai_van, tuan_positions, triet_positions)

        # 9-10. 格局、分数
        main_stars_by_position = {p.position: p.main_stars for p in palaces}
        major_star_group = StarPatternAnalyzer.identify(main_stars_by_position, menh_position)
        destiny_scores = DestinyScoreAnalyzer.calculate(palaces)

        year, month, day = parse_birth_date(record.birth_date)
        chart = TuviChart(
            palaces=palaces,
            year_pillar=pillar,
            lunar_date=lunar_date,
            cuc=cuc,
            menh_position=menh_position,
            chu_menh=CHU_MENH_MAP.get(pillar.branch, "Tham Lang"),
            chu_than=CHU_THAN_MAP.get(pillar.branch, "Linh Tinh"),
            major_star_group=major_star_group,
            destiny_scores=destiny_scores,
            tuan_positions=tuan_positions,
            triet_positions=triet_positions,
            center_info={
                'name': record.full_name,
                'birth_year': year,
                'birth_month': month,
                'birth_day': day,
                'birth_hour': record.birth_hour,
                'gender': record.gender,
                'destiny': f"{pillar.element} - {cuc.name}",
            },
        )
        safe_log('debug', (
            f"排盘完成: {pillar.stem} {pillar.branch}, 农历 {lunar_date.year}-{lunar_date.month}-{lunar_date.day}, "
            f"命宫 {EARTHLY_BRANCHES[menh_position]}, {cuc.name}, 格局 {major_star_group.name}"
        ))
        self.last_result = chart
        return chart

    @staticmethod
    def _build_palaces(builder: PlacementBuilder, menh_position: int, dai_van, tuan_positions,
                       triet_positions) -> Tuple[Palace, ...]:
        """从命宫起按十二宫顺序绑定地支"""
        palaces = []
        for i, (name, name_chinese) in enumerate(PALACE_NAMES):
            position = (menh_position + i) % 12
            palaces.append(Palace(
                name=name,
                name_chinese=name_chinese,
                position=position,
                main_stars=builder.stars_at(position, StarKind.MAIN),
                secondary_stars=builder.stars_at(position, StarKind.SECONDARY),
                element=PALACE_ELEMENTS[position],
                dai_van=dai_van[position],
                tuan=position in tuan_positions,
                triet=position in triet_positions,
            ))
        return tuple(palaces)


def generate_chart(birth_record: Union[BirthRecord, Dict], solar_resolver: Optional[SolarResolver] = None) -> TuviChart:
    """
    排盘入口（纯函数）

    Args:
        birth_record: BirthRecord 或同名字段的 dict
        solar_resolver: 可选的公历 -> 农历转换函数（默认 lunar_python）

    Returns:
        TuviChart
    """
    if isinstance(birth_record, dict):
        birth_record = BirthRecord(**birth_record)
    return TuviCalculator(birth_record, solar_resolver).calculate()
