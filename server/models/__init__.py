#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
紫微数据模型 - 统一的数据结构定义
"""

from server.models.tuvi_chart import PalaceModel, StarModel, TuviChartModel

__all__ = [
    'StarModel',
    'PalaceModel',
    'TuviChartModel',
]
