#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
天干地支基础数据（越南紫微斗数 Tử Vi 用字）

- 十天干 / 十二地支（越南文名称）
- 时辰口令 -> 地支
- 六十甲子纳音（五行 + 全称）
- 五行局、十二宫、地支五行、命主 / 身主
"""

from typing import Dict, List, Tuple

HEAVENLY_STEMS: List[str] = [
    "Giáp", "Ất", "Bính", "Đinh", "Mậu", "Kỷ", "Canh", "Tân", "Nhâm", "Quý",
]

EARTHLY_BRANCHES: List[str] = [
    "Tý", "Sửu", "Dần", "Mão", "Thìn", "Tỵ", "Ngọ", "Mùi", "Thân", "Dậu", "Tuất", "Hợi",
]

# 时辰口令（无声调拉丁写法）-> 地支下标
HOUR_TOKENS: Dict[str, int] = {
    "ty": 0, "suu": 1, "dan": 2, "mao": 3, "thin": 4, "ti": 5,
    "ngo": 6, "mui": 7, "than": 8, "dau": 9, "tuat": 10, "hoi": 11,
}

# 纳音五行（按 "天干 地支" 索引）
NAP_AM: Dict[str, str] = {
    "Giáp Tý": "Kim", "Ất Sửu": "Kim", "Bính Dần": "Hỏa", "Đinh Mão": "Hỏa",
    "Mậu Thìn": "Mộc", "Kỷ Tỵ": "Mộc", "Canh Ngọ": "Thổ", "Tân Mùi": "Thổ",
    "Nhâm Thân": "Kim", "Quý Dậu": "Kim", "Giáp Tuất": "Hỏa", "Ất Hợi": "Hỏa",
    "Bính Tý": "Thủy", "Đinh Sửu": "Thủy", "Mậu Dần": "Thổ", "Kỷ Mão": "Thổ",
    "Canh Thìn": "Kim", "Tân Tỵ": "Kim", "Nhâm Ngọ": "Mộc", "Quý Mùi": "Mộc",
    "Giáp Thân": "Thủy", "Ất Dậu": "Thủy", "Bính Tuất": "Thổ", "Đinh Hợi": "Thổ",
    "Mậu Tý": "Hỏa", "Kỷ Sửu": "Hỏa", "Canh Dần": "Mộc", "Tân Mão": "Mộc",
    "Nhâm Thìn": "Thủy", "Quý Tỵ": "Thủy", "Giáp Ngọ": "Kim", "Ất Mùi": "Kim",
    "Bính Thân": "Hỏa", "Đinh Dậu": "Hỏa", "Mậu Tuất": "Mộc", "Kỷ Hợi": "Mộc",
    "Canh Tý": "Thổ", "Tân Sửu": "Thổ", "Nhâm Dần": "Kim", "Quý Mão": "Kim",
    "Giáp Thìn": "Hỏa", "Ất Tỵ": "Hỏa", "Bính Ngọ": "Thủy", "Đinh Mùi": "Thủy",
    "Mậu Thân": "Thổ", "Kỷ Dậu": "Thổ", "Canh Tuất": "Kim", "Tân Hợi": "Kim",
    "Nhâm Tý": "Mộc", "Quý Sửu": "Mộc", "Giáp Dần": "Thủy", "Ất Mão": "Thủy",
    "Bính Thìn": "Thổ", "Đinh Tỵ": "Thổ", "Mậu Ngọ": "Hỏa", "Kỷ Mùi": "Hỏa",
    "Canh Thân": "Mộc", "Tân Dậu": "Mộc", "Nhâm Tuất": "Thủy", "Quý Hợi": "Thủy",
}

# 纳音全称
FULL_NAP_AM: Dict[str, str] = {
    "Giáp Tý": "Hải Trung Kim", "Ất Sửu": "Hải Trung Kim",
    "Bính Dần": "Lư Trung Hỏa", "Đinh Mão": "Lư Trung Hỏa",
    "Mậu Thìn": "Đại Lâm Mộc", "Kỷ Tỵ": "Đại Lâm Mộc",
    "Canh Ngọ": "Lộ Bàng Thổ", "Tân Mùi": "Lộ Bàng Thổ",
    "Nhâm Thân": "Kiếm Phong Kim", "Quý Dậu": "Kiếm Phong Kim",
    "Giáp Tuất": "Sơn Đầu Hỏa", "Ất Hợi": "Sơn Đầu Hỏa",
    "Bính Tý": "Giản Hạ Thủy", "Đinh Sửu": "Giản Hạ Thủy",
    "Mậu Dần": "Thành Đầu Thổ", "Kỷ Mão": "Thành Đầu Thổ",
    "Canh Thìn": "Bạch Lạp Kim", "Tân Tỵ": "Bạch Lạp Kim",
    "Nhâm Ngọ": "Dương Liễu Mộc", "Quý Mùi": "Dương Liễu Mộc",
    "Giáp Thân": "Tuyền Trung Thủy", "Ất Dậu": "Tuyền Trung Thủy",
    "Bính Tuất": "Ốc Thượng Thổ", "Đinh Hợi": "Ốc Thượng Thổ",
    "Mậu Tý": "Tích Lịch Hỏa", "Kỷ Sửu": "Tích Lịch Hỏa",
    "Canh Dần": "Tùng Bách Mộc", "Tân Mão": "Tùng Bách Mộc",
    "Nhâm Thìn": "Trường Lưu Thủy", "Quý Tỵ": "Trường Lưu Thủy",
    "Giáp Ngọ": "Sa Trung Kim", "Ất Mùi": "Sa Trung Kim",
    "Bính Thân": "Sơn Hạ Hỏa", "Đinh Dậu": "Sơn Hạ Hỏa",
    "Mậu Tuất": "Bình Địa Mộc", "Kỷ Hợi": "Bình Địa Mộc",
    "Canh Tý": "Bích Thượng Thổ", "Tân Sửu": "Bích Thượng Thổ",
    "Nhâm Dần": "Kim Bạch Kim", "Quý Mão": "Kim Bạch Kim",
    "Giáp Thìn": "Phúc Đăng Hỏa", "Ất Tỵ": "Phúc Đăng Hỏa",
    "Bính Ngọ": "Thiên Hà Thủy", "Đinh Mùi": "Thiên Hà Thủy",
    "Mậu Thân": "Đại Trạch Thổ", "Kỷ Dậu": "Đại Trạch Thổ",
    "Canh Tuất": "Thoa Xuyến Kim", "Tân Hợi": "Thoa Xuyến Kim",
    "Nhâm Tý": "Tang Đố Mộc", "Quý Sửu": "Tang Đố Mộc",
    "Giáp Dần": "Đại Khê Thủy", "Ất Mão": "Đại Khê Thủy",
    "Bính Thìn": "Sa Trung Thổ", "Đinh Tỵ": "Sa Trung Thổ",
    "Mậu Ngọ": "Thiên Thượng Hỏa", "Kỷ Mùi": "Thiên Thượng Hỏa",
    "Canh Thân": "Thạch Lựu Mộc", "Tân Dậu": "Thạch Lựu Mộc",
    "Nhâm Tuất": "Đại Hải Thủy", "Quý Hợi": "Đại Hải Thủy",
}

# 五行局：纳音五行 -> 局数
CUC_MAPPING: Dict[str, int] = {"Thủy": 2, "Mộc": 3, "Kim": 4, "Thổ": 5, "Hỏa": 6}

# 局数 -> 越南数词（下标即局数）
CUC_NUMERALS: List[str] = ["", "", "Nhị", "Tam", "Tứ", "Ngũ", "Lục"]

# 十二宫（从命宫起顺排）：(越南名, 中文名)
PALACE_NAMES: List[Tuple[str, str]] = [
    ("Mệnh", "命宮"),
    ("Phụ Mẫu", "父母宮"),
    ("Phúc Đức", "福德宮"),
    ("Điền Trạch", "田宅宮"),
    ("Quan Lộc", "官祿宮"),
    ("Nô Bộc", "奴僕宮"),
    ("Thiên Di", "遷移宮"),
    ("Tật Ách", "疾厄宮"),
    ("Tài Bạch", "財帛宮"),
    ("Tử Tức", "子息宮"),
    ("Phu Thê", "夫妻宮"),
    ("Huynh Đệ", "兄弟宮"),
]

# 地支本宫五行（Tý -> Hợi）
PALACE_ELEMENTS: List[str] = [
    "Thủy", "Thổ", "Mộc", "Mộc", "Thổ", "Hỏa", "Hỏa", "Thổ", "Kim", "Kim", "Thổ", "Thủy",
]

# 命主（按年支）
CHU_MENH_MAP: Dict[str, str] = {
    "Tý": "Tham Lang", "Sửu": "Cự Môn", "Dần": "Lộc Tồn", "Mão": "Văn Khúc",
    "Thìn": "Liêm Trinh", "Tỵ": "Vũ Khúc", "Ngọ": "Phá Quân", "Mùi": "Vũ Khúc",
    "Thân": "Liêm Trinh", "Dậu": "Văn Khúc", "Tuất": "Lộc Tồn", "Hợi": "Cự Môn",
}

# 身主（按年支）
CHU_THAN_MAP: Dict[str, str] = {
    "Tý": "Linh Tinh", "Sửu": "Thiên Tướng", "Dần": "Thiên Lương", "Mão": "Thiên Đồng",
    "Thìn": "Văn Xương", "Tỵ": "Thiên Cơ", "Ngọ": "Hỏa Tinh", "Mùi": "Thiên Tướng",
    "Thân": "Thiên Lương", "Dậu": "Thiên Đồng", "Tuất": "Văn Xương", "Hợi": "Thiên Cơ",
}


def stem_branch_key(stem_index: int, branch_index: int) -> str:
    """组合 "天干 地支" 查表键"""
    return f"{HEAVENLY_STEMS[stem_index % 10]} {EARTHLY_BRANCHES[branch_index % 12]}"


def get_nap_am(stem_index: int, branch_index: int, default: str = "Thổ") -> str:
    """查询纳音五行"""
    return NAP_AM.get(stem_branch_key(stem_index, branch_index), default)


def get_full_nap_am(stem_index: int, branch_index: int, default: str = "") -> str:
    """查询纳音全称"""
    return FULL_NAP_AM.get(stem_branch_key(stem_index, branch_index), default)
