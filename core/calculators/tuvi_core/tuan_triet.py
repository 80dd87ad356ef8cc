#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
旬空（Tuần）与截空（Triệt）

两者均为宫位标记而非星曜，每张命盘各落两宫。
"""

from typing import Dict, Tuple

# (年支 - 年干) mod 12 -> 旬空两宫
TUAN_TABLE: Dict[int, Tuple[int, int]] = {
    0: (10, 11),
    10: (8, 9),
    8: (6, 7),
    6: (4, 5),
    4: (2, 3),
    2: (0, 1),
}
TUAN_DEFAULT: Tuple[int, int] = (10, 11)

# 年干 mod 5 -> 截空两宫（甲己、乙庚、丙辛、丁壬、戊癸）
TRIET_TABLE: Dict[int, Tuple[int, int]] = {
    0: (8, 9),
    1: (6, 7),
    2: (4, 5),
    3: (2, 3),
    4: (0, 1),
}


def calculate_tuan(stem_index: int, branch_index: int) -> Tuple[int, int]:
    """旬空：同一旬内天干比地支多出的两支"""
    return TUAN_TABLE.get((branch_index - stem_index + 12) % 12, TUAN_DEFAULT)


def calculate_triet(stem_index: int) -> Tuple[int, int]:
    """截空：按年干取两宫"""
    return TRIET_TABLE[stem_index % 5]


def calculate_tuan_triet(stem_index: int, branch_index: int) -> Tuple[Tuple[int, int], Tuple[int, int]]:
    """
    Returns:
        (tuan_positions, triet_positions)
    """
    return calculate_tuan(stem_index, branch_index), calculate_triet(stem_index)
