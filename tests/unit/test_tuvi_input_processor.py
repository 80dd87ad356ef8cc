#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""TuviInputProcessor 单元测试"""

import pytest

from core.calculators.tuvi_core import InvalidInputError, LunarDate
from server.utils.tuvi_input_processor import TuviInputProcessor


class TestBuildBirthRecord:
    def test_normalizes_fields(self):
        record = TuviInputProcessor.build_birth_record(
            "  Lê Văn C ", "1990-5-7", " Ngo ", "MALE", "Solar", True,
        )
        assert record.full_name == "Lê Văn C"
        assert record.birth_date == "1990-05-07"
        assert record.birth_hour == "Ngo"
        assert record.gender == "male"
        assert record.calendar_type == "solar"
        # 公历输入忽略闰月标记
        assert record.is_leap_month is False

    def test_leap_flag_kept_for_lunar(self):
        record = TuviInputProcessor.build_birth_record(None, "2023-02-01", "ty", "female", "lunar", True)
        assert record.full_name == ""
        assert record.is_leap_month is True

    def test_default_calendar_is_solar(self):
        record = TuviInputProcessor.build_birth_record("A", "2000-01-01", "ty", "male", None)
        assert record.calendar_type == "solar"

    def test_bad_date_raises(self):
        with pytest.raises(InvalidInputError):
            TuviInputProcessor.build_birth_record("A", "01/01/2000", "ty", "male")


class TestProcessInput:
    def test_solar_input(self):
        record, lunar_date, info = TuviInputProcessor.process_input("A", "2024-02-10", "ty", "male", "solar")
        assert lunar_date == LunarDate(2024, 1, 1, False)
        assert info['converted'] is True
        assert info['solar_date'] == "2024-02-10"
        assert info['lunar_date'] == {'year': 2024, 'month': 1, 'day': 1, 'is_leap_month': False}

    def test_lunar_input_reports_solar_date(self):
        record, lunar_date, info = TuviInputProcessor.process_input(
            "A", "2023-02-01", "ty", "male", "lunar", True,
        )
        assert lunar_date == LunarDate(2023, 2, 1, True)
        assert info['converted'] is False
        assert info['solar_date'] == "2023-03-22"

    def test_lunar_input_without_solar_counterpart(self):
        """不存在的闰月仍按农历排盘，只是没有对应公历"""
        record, lunar_date, info = TuviInputProcessor.process_input(
            "A", "2024-01-01", "ty", "male", "lunar", True,
        )
        assert lunar_date.is_leap_month is True
        assert info['solar_date'] is None

    def test_invalid_solar_date(self):
        with pytest.raises(InvalidInputError):
            TuviInputProcessor.process_input("A", "2023-02-30", "ty", "male", "solar")
