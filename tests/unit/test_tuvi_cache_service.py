#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""紫微命盘缓存服务单元测试"""

import os
from dataclasses import replace
from unittest.mock import patch

from server.services.tuvi_cache_service import TuviCacheService


class TestChartKey:
    def test_prefix_and_md5(self, giap_ty_record):
        key = TuviCacheService.get_chart_key(giap_ty_record)
        prefix, digest = key.rsplit(':', 1)
        assert prefix == "tuvi:chart"
        assert len(digest) == 32

    def test_name_not_in_key(self, giap_ty_record):
        other = replace(giap_ty_record, full_name="Someone Else")
        assert TuviCacheService.get_chart_key(other) == TuviCacheService.get_chart_key(giap_ty_record)

    def test_hour_case_insensitive(self, giap_ty_record):
        upper = replace(giap_ty_record, birth_hour="TY")
        assert TuviCacheService.get_chart_key(upper) == TuviCacheService.get_chart_key(giap_ty_record)

    def test_inputs_change_key(self, giap_ty_record):
        base = TuviCacheService.get_chart_key(giap_ty_record)
        for changes in ({'gender': 'female'}, {'calendar_type': 'solar'},
                        {'is_leap_month': True}, {'birth_hour': 'suu'}):
            assert TuviCacheService.get_chart_key(replace(giap_ty_record, **changes)) != base


class TestReadWrite:
    def test_round_trip(self, giap_ty_record, multi_cache):
        assert TuviCacheService.get_chart(giap_ty_record, multi_cache) is None
        assert TuviCacheService.set_chart(giap_ty_record, {'menh': 2}, multi_cache) is True
        assert TuviCacheService.get_chart(giap_ty_record, multi_cache) == {'menh': 2}

    def test_non_dict_value_discarded(self, giap_ty_record, multi_cache):
        key = TuviCacheService.get_chart_key(giap_ty_record)
        multi_cache.set(key, ["broken"])
        assert TuviCacheService.get_chart(giap_ty_record, multi_cache) is None
        assert multi_cache.get(key) is None

    def test_delete(self, giap_ty_record, multi_cache):
        TuviCacheService.set_chart(giap_ty_record, {'menh': 2}, multi_cache)
        TuviCacheService.delete_chart(giap_ty_record, multi_cache)
        assert TuviCacheService.get_chart(giap_ty_record, multi_cache) is None

    def test_disabled_cache(self, giap_ty_record, multi_cache):
        with patch.dict(os.environ, {'TUVI_CACHE_ENABLED': 'false'}):
            assert TuviCacheService.set_chart(giap_ty_record, {'menh': 2}, multi_cache) is False
            assert TuviCacheService.get_chart(giap_ty_record, multi_cache) is None
        assert len(multi_cache.l1) == 0
