#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""大运（Đại Vận）：自命宫起，每宫十年"""

from typing import List

from core.calculators.tuvi_core.models import RingDirection


def calculate_dai_van(cuc_value: int, menh_position: int, direction: RingDirection) -> List[int]:
    """
    计算十二宫大运起始岁数

    命宫起于局数，沿大运方向每进一宫加十岁。

    Args:
        cuc_value: 局数
        menh_position: 命宫地支下标
        direction: 排布方向

    Returns:
        list: 长度 12，下标为地支，值为该宫大运起始岁数
    """
    dai_van = [0] * 12
    for step in range(12):
        dai_van[direction.step(menh_position, step)] = cuc_value + step * 10
    return dai_van
