#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""十四主星安星单元测试"""

import pytest

from core.calculators.tuvi_core import (
    PlacementBuilder,
    StarKind,
    locate_thien_phu,
    locate_tu_vi,
    place_main_stars,
)
from core.calculators.tuvi_core.placement_builder import make_star
from core.data.tuvi_stars import MAIN_STARS_INFO


class TestLocateTuVi:
    @pytest.mark.parametrize("day, cuc, expected", [
        (1, 6, 2),    # 有余数：寅起 1 宫，不退
        (25, 6, 6),   # 25 = 6*4 + 1
        (6, 6, 2),    # 整除：寅起数 1 宫
        (12, 6, 3),
        (4, 2, 3),
        (5, 2, 4),    # 5 = 2*2 + 1
        (2, 3, 1),    # 2 = 3*0 + 2：寅起 1 宫，退 1
    ])
    def test_known_positions(self, day, cuc, expected):
        assert locate_tu_vi(day, cuc) == expected

    def test_all_days_all_cuc_in_range(self):
        for cuc in range(2, 7):
            for day in range(1, 31):
                assert 0 <= locate_tu_vi(day, cuc) <= 11


class TestLocateThienPhu:
    def test_symmetry_sum_is_four(self):
        for tu_vi in range(12):
            assert (tu_vi + locate_thien_phu(tu_vi)) % 12 == 4

    def test_dan_and_than_coincide(self):
        """寅、申两宫紫府同宫"""
        assert locate_thien_phu(2) == 2
        assert locate_thien_phu(8) == 8


class TestPlaceMainStars:
    def test_fourteen_placements(self):
        builder = PlacementBuilder()
        positions = place_main_stars(builder, 1, 6)
        assert len(positions) == 14
        assert builder.count(StarKind.MAIN) == 14
        assert set(positions) == set(MAIN_STARS_INFO)

    def test_giap_ty_layout(self):
        """农历初一、火六局：紫微、天府同在寅"""
        positions = place_main_stars(PlacementBuilder(), 1, 6)
        assert positions == {
            "Tử Vi": 2, "Thiên Cơ": 1, "Thái Dương": 11, "Vũ Khúc": 10,
            "Thiên Đồng": 9, "Liêm Trinh": 6,
            "Thiên Phủ": 2, "Thái Âm": 3, "Tham Lang": 4, "Cự Môn": 5,
            "Thiên Tướng": 6, "Thiên Lương": 7, "Thất Sát": 8, "Phá Quân": 0,
        }

    def test_brightness_in_dan(self):
        builder = PlacementBuilder()
        place_main_stars(builder, 1, 6)
        dan = {star.name: star.brightness for star in builder.stars_at(2, StarKind.MAIN)}
        assert dan == {"Tử Vi": "M", "Thiên Phủ": "M"}

    @pytest.mark.parametrize("cuc", [2, 3, 4, 5, 6])
    def test_symmetry_for_every_day(self, cuc):
        for day in range(1, 31):
            positions = place_main_stars(PlacementBuilder(), day, cuc)
            assert (positions["Tử Vi"] + positions["Thiên Phủ"]) % 12 == 4

    def test_main_star_carries_static_info(self):
        star = make_star("Thất Sát", StarKind.MAIN, 8)
        assert star.nature.value == "bad"
        assert star.element == "Kim"
        assert star.name_chinese == "七殺"
        assert star.kind is StarKind.MAIN

    def test_unknown_star_name_raises(self):
        with pytest.raises(KeyError):
            make_star("Không Tồn Tại", StarKind.MAIN, 0)
