#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""辅星安星规则单元测试"""

import pytest

from core.calculators.tuvi_core import (
    PlacementBuilder,
    PlacementContext,
    RingDirection,
    StarKind,
    place_main_stars,
    place_secondary_stars,
)
from core.calculators.tuvi_core import secondary_stars as rules


def _context(**overrides) -> PlacementContext:
    """甲子年、正月初一、子时、命宫寅、火六局、顺行"""
    params = dict(
        hour_branch=0,
        lunar_month=1,
        lunar_day=1,
        stem_index=0,
        branch_index=0,
        menh_position=2,
        cuc_value=6,
        direction=RingDirection.CLOCKWISE,
    )
    params.update(overrides)
    return PlacementContext(**params)


def _placed_builder(ctx: PlacementContext) -> PlacementBuilder:
    builder = PlacementBuilder()
    place_main_stars(builder, ctx.lunar_day, ctx.cuc_value)
    place_secondary_stars(builder, ctx)
    return builder


class TestHourAndMonthStars:
    def test_hour_stars_ty(self):
        placements = dict((name, pos) for pos, name in rules.hour_stars(_context(), PlacementBuilder()))
        assert placements == {
            "Văn Xương": 10, "Văn Khúc": 4, "Địa Kiếp": 11,
            "Địa Không": 11, "Thai Phụ": 6, "Phong Cáo": 2,
        }

    def test_xuong_khuc_mirror(self):
        """文昌逆行、文曲顺行，两者之和恒为 2（mod 12）"""
        for hour in range(12):
            placements = dict((name, pos) for pos, name in rules.hour_stars(_context(hour_branch=hour), PlacementBuilder()))
            assert (placements["Văn Xương"] + placements["Văn Khúc"]) % 12 == 2

    def test_month_stars_first_month(self):
        placements = dict((name, pos) for pos, name in rules.month_stars(_context(), PlacementBuilder()))
        assert placements["Tả Phụ"] == 4
        assert placements["Hữu Bật"] == 10
        assert placements["Thiên Riêu"] == placements["Thiên Y"] == 1


class TestDerivedStars:
    def test_day_stars_follow_placed_stars(self):
        builder = PlacementBuilder()
        ctx = _context(lunar_day=5)
        for rule in (rules.hour_stars, rules.month_stars):
            for pos, name in rule(ctx, builder):
                builder.place(pos, name)
        placements = dict((name, pos) for pos, name in rules.day_stars(ctx, builder))
        assert placements["Tam Thai"] == (4 + 4) % 12
        assert placements["Bát Tọa"] == (10 - 4) % 12
        assert placements["Ân Quang"] == (10 + 3) % 12
        assert placements["Thiên Quý"] == (4 - 3) % 12

    def test_tu_hoa_giap_year(self):
        builder = _placed_builder(_context())
        assert builder.position_of("Hóa Lộc") == builder.position_of("Liêm Trinh") == 6
        assert builder.position_of("Hóa Quyền") == builder.position_of("Phá Quân") == 0
        assert builder.position_of("Hóa Khoa") == builder.position_of("Vũ Khúc") == 10
        assert builder.position_of("Hóa Kỵ") == builder.position_of("Thái Dương") == 11

    def test_tu_hoa_skips_missing_base_star(self):
        """主星未安放时跳过对应四化，不抛异常"""
        placements = rules.tu_hoa_stars(_context(), PlacementBuilder())
        assert placements == []

    def test_tu_hoa_on_assistant_star(self):
        """丙年化科附文昌"""
        builder = _placed_builder(_context(stem_index=2, branch_index=2))
        assert builder.position_of("Hóa Khoa") == builder.position_of("Văn Xương")


class TestRings:
    def test_thai_tue_always_clockwise(self):
        for direction in RingDirection:
            placements = rules.thai_tue_ring(_context(branch_index=3, direction=direction), PlacementBuilder())
            assert placements[0] == (3, "Thái Tuế")
            assert placements[6] == (9, "Tuế Phá")

    def test_loc_ton_ring_follows_direction(self):
        forward = dict((name, pos) for pos, name in rules.loc_ton_ring(_context(), PlacementBuilder()))
        backward = dict(
            (name, pos) for pos, name in
            rules.loc_ton_ring(_context(direction=RingDirection.COUNTER_CLOCKWISE), PlacementBuilder())
        )
        assert forward["Lộc Tồn"] == backward["Lộc Tồn"] == 2
        assert forward["Bác Sỹ"] == 2
        assert forward["Lực Sĩ"] == 3
        assert backward["Lực Sĩ"] == 1
        assert forward["Kình Dương"] == backward["Kình Dương"] == 3
        assert forward["Đà La"] == backward["Đà La"] == 1

    def test_trang_sinh_start_by_cuc(self):
        for cuc, start in rules.TRANG_SINH_START.items():
            placements = rules.trang_sinh_ring(_context(cuc_value=cuc), PlacementBuilder())
            assert placements[0] == (start, "Tràng Sinh")
            assert len(placements) == 12
            assert sorted(pos for pos, _ in placements) == list(range(12))


class TestFixedStars:
    def test_structural_positions(self):
        placements = dict((name, pos) for pos, name in rules.fixed_stars(_context(menh_position=5), PlacementBuilder()))
        assert placements == {"Thiên Thương": 10, "Thiên Sứ": 0, "Thiên La": 4, "Địa Võng": 10}

    def test_thien_tai_tho(self):
        placements = dict(
            (name, pos) for pos, name in
            rules.thien_tai_tho(_context(branch_index=4, lunar_month=3, hour_branch=5), PlacementBuilder())
        )
        assert placements["Thiên Tài"] == (4 + 2 - 5 + 12) % 12
        assert placements["Thiên Thọ"] == (4 + 2 + 5) % 12


class TestPlaceSecondaryStars:
    def test_menh_secondary_order(self):
        builder = _placed_builder(_context())
        names = [star.name for star in builder.stars_at(2, StarKind.SECONDARY)]
        assert names == [
            "Phong Cáo", "Tang Môn", "Hỏa Tinh", "Thiên Mã",
            "Cô Thần", "Lộc Tồn", "Bác Sỹ", "Tràng Sinh",
        ]

    def test_hoa_tinh_brightness(self):
        builder = _placed_builder(_context())
        hoa_tinh = [s for s in builder.stars_at(2, StarKind.SECONDARY) if s.name == "Hỏa Tinh"][0]
        assert hoa_tinh.brightness == "M"

    def test_no_tuan_triet_stars(self):
        """旬空截空是宫位标记，不作为星曜安放"""
        builder = _placed_builder(_context())
        names = {star.name for _, star in builder.placements}
        assert "Tuần" not in names
        assert "Triệt" not in names

    @pytest.mark.parametrize("stem, branch", [(0, 0), (1, 1), (6, 10), (9, 11)])
    def test_every_star_has_nature(self, stem, branch):
        builder = _placed_builder(_context(stem_index=stem, branch_index=branch))
        for position, star in builder.placements:
            assert 0 <= position <= 11
            assert star.nature is not None
