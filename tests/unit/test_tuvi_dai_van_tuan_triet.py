#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""大运、旬空、截空单元测试"""

import pytest

from core.calculators.tuvi_core import RingDirection, calculate_dai_van, calculate_tuan_triet
from core.calculators.tuvi_core.tuan_triet import TRIET_TABLE, calculate_triet, calculate_tuan


class TestDaiVan:
    def test_clockwise_from_menh(self):
        dai_van = calculate_dai_van(6, 2, RingDirection.CLOCKWISE)
        for i in range(12):
            assert dai_van[(2 + i) % 12] == 6 + 10 * i

    def test_counter_clockwise_from_menh(self):
        dai_van = calculate_dai_van(4, 5, RingDirection.COUNTER_CLOCKWISE)
        assert dai_van[5] == 4
        assert dai_van[4] == 14
        assert dai_van[6] == 114

    @pytest.mark.parametrize("direction", list(RingDirection))
    def test_values_are_distinct_decades(self, direction):
        dai_van = calculate_dai_van(3, 7, direction)
        assert len(dai_van) == 12
        assert sorted(dai_van) == [3 + 10 * i for i in range(12)]


class TestTuanTriet:
    def test_giap_ty(self):
        assert calculate_tuan_triet(0, 0) == ((10, 11), (8, 9))

    def test_at_suu(self):
        assert calculate_tuan_triet(1, 1) == ((10, 11), (6, 7))

    @pytest.mark.parametrize("stem, branch, expected", [
        (0, 10, (8, 9)),   # Giáp Tuất
        (0, 8, (6, 7)),    # Giáp Thân
        (0, 6, (4, 5)),    # Giáp Ngọ
        (0, 4, (2, 3)),    # Giáp Thìn
        (0, 2, (0, 1)),    # Giáp Dần
        (9, 7, (8, 9)),    # Quý Mùi 属甲戌旬
    ])
    def test_tuan_by_decade(self, stem, branch, expected):
        assert calculate_tuan(stem, branch) == expected

    def test_triet_pairs_share_positions(self):
        """甲己、乙庚、丙辛、丁壬、戊癸截空相同"""
        for stem in range(5):
            assert calculate_triet(stem) == calculate_triet(stem + 5)
        assert len(TRIET_TABLE) == 5

    def test_exactly_two_each(self):
        for year_offset in range(60):
            stem, branch = year_offset % 10, year_offset % 12
            tuan, triet = calculate_tuan_triet(stem, branch)
            assert len(set(tuan)) == 2
            assert len(set(triet)) == 2

    def test_giap_tuat_tuan_and_triet_coincide(self):
        """甲戌年旬空、截空同落申酉，两组各自仍为两宫"""
        assert calculate_tuan_triet(0, 10) == ((8, 9), (8, 9))

    def test_coinciding_years(self):
        """六十甲子中旬空与截空重合的十个年份"""
        coinciding = []
        for year_offset in range(60):
            stem, branch = year_offset % 10, year_offset % 12
            tuan, triet = calculate_tuan_triet(stem, branch)
            if set(tuan) == set(triet):
                coinciding.append((stem, branch))
        assert sorted(coinciding) == [
            (0, 10),   # Giáp Tuất
            (1, 9),    # Ất Dậu
            (2, 8),    # Bính Thân
            (3, 7),    # Đinh Mùi
            (4, 6),    # Mậu Ngọ
            (5, 3),    # Kỷ Mão
            (6, 2),    # Canh Dần
            (7, 1),    # Tân Sửu
            (8, 0),    # Nhâm Tý
            (9, 11),   # Quý Hợi
        ]
