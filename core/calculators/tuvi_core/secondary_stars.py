#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
辅星安星规则

每条规则为 (context, builder) -> [(地支下标, 星名)]，按 SECONDARY_STAR_RULES
的顺序依次执行并写入 builder。规则只读 builder 中已安放星曜的位置
（日系星依赖昌曲辅弼，四化依赖主星与昌曲辅弼），因此顺序不可调换。
"""

from dataclasses import dataclass
from typing import Callable, List, Tuple

from core.calculators.tuvi_core.models import RingDirection
from core.calculators.tuvi_core.placement_builder import PlacementBuilder
from core.calculators.tuvi_logging import safe_log
from core.data.tuvi_stars import TU_HOA, TU_HOA_NAMES

Placements = List[Tuple[int, str]]


@dataclass(frozen=True)
class PlacementContext:
    """辅星规则的输入"""
    hour_branch: int
    lunar_month: int
    lunar_day: int
    stem_index: int
    branch_index: int
    menh_position: int
    cuc_value: int
    direction: RingDirection


Rule = Callable[[PlacementContext, PlacementBuilder], Placements]

# 天魁、天钺（按年干）
KHOI_VIET = [[1, 7], [0, 8], [11, 9], [11, 9], [1, 7], [0, 8], [1, 7], [6, 2], [3, 5], [3, 5]]
LUU_HA = [9, 10, 7, 8, 5, 6, 8, 9, 11, 0]
THIEN_TRU = [5, 6, 0, 5, 6, 8, 2, 6, 9, 10]
THIEN_QUAN = [9, 4, 5, 2, 3, 9, 11, 9, 10, 6]
THIEN_PHUC = [9, 8, 0, 11, 3, 2, 6, 5, 6, 5]
LOC_TON = [2, 3, 5, 6, 5, 6, 8, 9, 11, 0]

THAI_TUE_RING = [
    "Thái Tuế", "Thiếu Dương", "Tang Môn", "Thiếu Âm", "Quan Phù (TT)", "Tử Phù",
    "Tuế Phá", "Long Đức", "Bạch Hổ", "Phúc Đức", "Điếu Khách", "Trực Phù",
]
LOC_TON_RING = [
    "Lộc Tồn", "Lực Sĩ", "Thanh Long", "Tiểu Hao", "Tướng Quân", "Tấu Thư",
    "Phi Liêm", "Hỷ Thần", "Bệnh Phù", "Đại Hao", "Phục Binh", "Quan Phủ",
]
TRANG_SINH_RING = [
    "Tràng Sinh", "Mộc Dục", "Quan Đới", "Lâm Quan", "Đế Vượng", "Suy",
    "Bệnh", "Tử", "Mộ", "Tuyệt", "Thai", "Dưỡng",
]
# 长生起宫（按局数）
TRANG_SINH_START = {2: 8, 3: 11, 4: 5, 5: 8, 6: 2}

# 火星 / 铃星起宫（按年支，子时起）
HOA_TINH_START = {2: 1, 6: 1, 10: 1, 8: 2, 0: 2, 4: 2, 5: 3, 9: 3, 1: 3, 11: 9, 3: 9, 7: 9}
LINH_TINH_START = {2: 3, 6: 3, 10: 3}
LINH_TINH_DEFAULT = 10

CO_THAN = [2, 2, 5, 5, 5, 8, 8, 8, 11, 11, 11, 2]

THIEN_LA_POSITION = 4
DIA_VONG_POSITION = 10


def hour_stars(ctx: PlacementContext, placed: PlacementBuilder) -> Placements:
    """时系星：文昌、文曲、地劫、地空、台辅、封诰"""
    h = ctx.hour_branch
    return [
        ((10 - h) % 12, "Văn Xương"),
        ((4 + h) % 12, "Văn Khúc"),
        ((11 + h) % 12, "Địa Kiếp"),
        ((11 - h) % 12, "Địa Không"),
        ((6 + h) % 12, "Thai Phụ"),
        ((2 + h) % 12, "Phong Cáo"),
    ]


def month_stars(ctx: PlacementContext, placed: PlacementBuilder) -> Placements:
    """月系星：左辅、右弼、天刑、天姚、天医、天解、地解"""
    m = ctx.lunar_month - 1
    return [
        ((4 + m) % 12, "Tả Phụ"),
        ((10 - m) % 12, "Hữu Bật"),
        ((9 + m) % 12, "Thiên Hình"),
        ((1 + m) % 12, "Thiên Riêu"),
        ((1 + m) % 12, "Thiên Y"),
        ((8 + m) % 12, "Thiên Giải"),
        ((7 + m) % 12, "Địa Giải"),
    ]


def day_stars(ctx: PlacementContext, placed: PlacementBuilder) -> Placements:
    """日系星：三台、八座（随辅弼），恩光、天贵（随昌曲）"""
    d = ctx.lunar_day
    return [
        ((placed.position_of("Tả Phụ") + d - 1) % 12, "Tam Thai"),
        ((placed.position_of("Hữu Bật") - (d - 1)) % 12, "Bát Tọa"),
        ((placed.position_of("Văn Xương") + d - 2) % 12, "Ân Quang"),
        ((placed.position_of("Văn Khúc") - (d - 2)) % 12, "Thiên Quý"),
    ]


def year_stem_stars(ctx: PlacementContext, placed: PlacementBuilder) -> Placements:
    """年干系星：天魁、天钺、流霞、天厨"""
    s = ctx.stem_index
    khoi, viet = KHOI_VIET[s]
    return [
        (khoi, "Thiên Khôi"),
        (viet, "Thiên Việt"),
        (LUU_HA[s], "Lưu Hà"),
        (THIEN_TRU[s], "Thiên Trù"),
    ]


def tu_hoa_stars(ctx: PlacementContext, placed: PlacementBuilder) -> Placements:
    """四化：化禄、化权、化科、化忌附于年干对应之星"""
    result: Placements = []
    for hoa_name, base_star in zip(TU_HOA_NAMES, TU_HOA[ctx.stem_index]):
        position = placed.position_of(base_star)
        if position is None:
            safe_log('warning', f"⚠️ 四化基星未安放，跳过: {hoa_name} -> {base_star}")
            continue
        result.append((position, hoa_name))
    return result


def thai_tue_ring(ctx: PlacementContext, placed: PlacementBuilder) -> Placements:
    """太岁十二神：从年支起恒顺行"""
    return [((ctx.branch_index + i) % 12, name) for i, name in enumerate(THAI_TUE_RING)]


def year_branch_stars(ctx: PlacementContext, placed: PlacementBuilder) -> Placements:
    """年支系星：火铃、天马、华盖、桃花、劫煞、破碎、孤寡、哭虚、龙凤、红鸾天喜、天德月德"""
    b = ctx.branch_index
    h = ctx.hour_branch
    hoa_start = HOA_TINH_START.get(b, 1)
    linh_start = LINH_TINH_START.get(b, LINH_TINH_DEFAULT)
    co_than = CO_THAN[b]
    phuong_cac = (10 - b) % 12
    hong_loan = (3 - b) % 12
    return [
        ((hoa_start + h) % 12, "Hỏa Tinh"),
        ((linh_start - h) % 12, "Linh Tinh"),
        ([2, 11, 8, 5][b % 4], "Thiên Mã"),
        ([4, 1, 10, 7][b % 4], "Hoa Cái"),
        ([9, 6, 3, 0][b % 4], "Đào Hoa"),
        ([5, 2, 11, 8][b % 4], "Kiếp Sát"),
        ([5, 1, 9][b % 3], "Phá Toái"),
        (co_than, "Cô Thần"),
        ((co_than - 4) % 12, "Quả Tú"),
        ((6 - b) % 12, "Thiên Khốc"),
        ((6 + b) % 12, "Thiên Hư"),
        ((4 + b) % 12, "Long Trì"),
        (phuong_cac, "Phượng Các"),
        (phuong_cac, "Giải Thần"),
        (hong_loan, "Hồng Loan"),
        ((hong_loan + 6) % 12, "Thiên Hỷ"),
        ((9 + b) % 12, "Thiên Đức"),
        ((5 + b) % 12, "Nguyệt Đức"),
    ]


def thien_quan_phuc(ctx: PlacementContext, placed: PlacementBuilder) -> Placements:
    """天官、天福（按年干）"""
    return [
        (THIEN_QUAN[ctx.stem_index], "Thiên Quan"),
        (THIEN_PHUC[ctx.stem_index], "Thiên Phúc"),
    ]


def loc_ton_ring(ctx: PlacementContext, placed: PlacementBuilder) -> Placements:
    """禄存系：国印、堂符、博士十二神（随大运方向）、擎羊、陀罗"""
    loc_ton = LOC_TON[ctx.stem_index]
    result: Placements = [
        ((loc_ton + 8) % 12, "Quốc Ấn"),
        ((loc_ton - 8) % 12, "Đường Phù"),
    ]
    for i, name in enumerate(LOC_TON_RING):
        position = ctx.direction.step(loc_ton, i)
        result.append((position, name))
        if i == 0:
            result.append((position, "Bác Sỹ"))
    result.append(((loc_ton + 1) % 12, "Kình Dương"))
    result.append(((loc_ton - 1) % 12, "Đà La"))
    return result


def trang_sinh_ring(ctx: PlacementContext, placed: PlacementBuilder) -> Placements:
    """长生十二神：按局数起宫，随大运方向"""
    start = TRANG_SINH_START.get(ctx.cuc_value, 8)
    return [(ctx.direction.step(start, i), name) for i, name in enumerate(TRANG_SINH_RING)]


def fixed_stars(ctx: PlacementContext, placed: PlacementBuilder) -> Placements:
    """固定星：天伤、天使（随命宫），天罗在辰、地网在戌"""
    return [
        ((ctx.menh_position + 5) % 12, "Thiên Thương"),
        ((ctx.menh_position + 7) % 12, "Thiên Sứ"),
        (THIEN_LA_POSITION, "Thiên La"),
        (DIA_VONG_POSITION, "Địa Võng"),
    ]


def thien_tai_tho(ctx: PlacementContext, placed: PlacementBuilder) -> Placements:
    """天才、天寿：以年支起，加生月、加减生时"""
    b = ctx.branch_index
    m = ctx.lunar_month - 1
    h = ctx.hour_branch
    return [
        ((b + m - h + 12) % 12, "Thiên Tài"),
        ((b + m + h) % 12, "Thiên Thọ"),
    ]


SECONDARY_STAR_RULES: Tuple[Rule, ...] = (
    hour_stars,
    month_stars,
    day_stars,
    year_stem_stars,
    tu_hoa_stars,
    thai_tue_ring,
    year_branch_stars,
    thien_quan_phuc,
    loc_ton_ring,
    trang_sinh_ring,
    fixed_stars,
    thien_tai_tho,
)


def place_secondary_stars(builder: PlacementBuilder, ctx: PlacementContext) -> None:
    """依次执行全部辅星规则，写入 builder（主星须已安放）"""
    for rule in SECONDARY_STAR_RULES:
        for position, name in rule(ctx, builder):
            builder.place(position, name)
