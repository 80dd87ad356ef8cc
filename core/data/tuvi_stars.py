#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
紫微斗数星曜静态数据

- 十四主星（性质 / 五行 / 中文名）
- 辅星性质表
- 庙旺利陷表（按地支 Tý -> Hợi）：M=Miếu 庙, V=Vượng 旺, Đ=Đắc 得, B=Bình hòa 平, H=Hãm 陷
- 四化表（按年干）
"""

from typing import Dict, List, Tuple

# 主星：名称 -> (性质, 五行, 中文名)
MAIN_STARS_INFO: Dict[str, Tuple[str, str, str]] = {
    "Tử Vi": ("good", "Thổ", "紫微"),
    "Thiên Cơ": ("good", "Mộc", "天機"),
    "Thái Dương": ("good", "Hỏa", "太陽"),
    "Vũ Khúc": ("good", "Kim", "武曲"),
    "Thiên Đồng": ("good", "Thủy", "天同"),
    "Liêm Trinh": ("neutral", "Hỏa", "廉貞"),
    "Thiên Phủ": ("good", "Thổ", "天府"),
    "Thái Âm": ("good", "Thủy", "太陰"),
    "Tham Lang": ("neutral", "Thủy", "貪狼"),
    "Cự Môn": ("neutral", "Thủy", "巨門"),
    "Thiên Tướng": ("good", "Thủy", "天相"),
    "Thiên Lương": ("good", "Mộc", "天梁"),
    "Thất Sát": ("bad", "Kim", "七殺"),
    "Phá Quân": ("bad", "Thủy", "破軍"),
}

# 紫微星系（相对紫微的顺行偏移）
TU_VI_CHAIN: List[Tuple[str, int]] = [
    ("Tử Vi", 0),
    ("Thiên Cơ", 11),
    ("Thái Dương", 9),
    ("Vũ Khúc", 8),
    ("Thiên Đồng", 7),
    ("Liêm Trinh", 4),
]

# 天府星系（相对天府的顺行偏移）
THIEN_PHU_CHAIN: List[Tuple[str, int]] = [
    ("Thiên Phủ", 0),
    ("Thái Âm", 1),
    ("Tham Lang", 2),
    ("Cự Môn", 3),
    ("Thiên Tướng", 4),
    ("Thiên Lương", 5),
    ("Thất Sát", 6),
    ("Phá Quân", 10),
]

# 辅星性质
SECONDARY_STARS_INFO: Dict[str, str] = {
    # 六吉
    "Văn Xương": "good", "Văn Khúc": "good", "Tả Phụ": "good", "Hữu Bật": "good",
    "Thiên Khôi": "good", "Thiên Việt": "good", "Thai Phụ": "good", "Phong Cáo": "good",
    "Tam Thai": "good", "Bát Tọa": "good", "Ân Quang": "good", "Thiên Quý": "good",
    # 六煞
    "Kình Dương": "bad", "Đà La": "bad", "Địa Không": "bad", "Địa Kiếp": "bad",
    "Hỏa Tinh": "bad", "Linh Tinh": "bad",
    # 四化
    "Hóa Lộc": "good", "Hóa Quyền": "good", "Hóa Khoa": "good", "Hóa Kỵ": "bad",
    # 禄存 / 博士十二神
    "Lộc Tồn": "good", "Lực Sĩ": "bad", "Thanh Long": "good", "Tiểu Hao": "bad",
    "Tướng Quân": "good", "Tấu Thư": "good", "Phi Liêm": "bad", "Hỷ Thần": "good",
    "Bệnh Phù": "bad", "Đại Hao": "bad", "Phục Binh": "bad", "Quan Phủ": "bad",
    "Bác Sỹ": "good",
    # 太岁十二神
    "Thái Tuế": "neutral", "Thiếu Dương": "good", "Tang Môn": "bad", "Thiếu Âm": "good",
    "Quan Phù (TT)": "neutral", "Tử Phù": "bad", "Tuế Phá": "bad", "Long Đức": "good",
    "Bạch Hổ": "bad", "Phúc Đức": "good", "Điếu Khách": "bad", "Trực Phù": "bad",
    # 长生十二神
    "Tràng Sinh": "good", "Mộc Dục": "neutral", "Quan Đới": "good", "Lâm Quan": "good",
    "Đế Vượng": "good", "Suy": "neutral", "Bệnh": "bad", "Tử": "bad",
    "Mộ": "neutral", "Tuyệt": "bad", "Thai": "neutral", "Dưỡng": "good",
    # 杂曜
    "Thiên Mã": "good", "Thiên Hình": "bad", "Thiên Riêu": "bad", "Thiên Y": "neutral",
    "Thiên Giải": "good", "Địa Giải": "good", "Quốc Ấn": "good", "Đường Phù": "good",
    "Long Trì": "good", "Phượng Các": "good", "Thiên Đức": "good", "Nguyệt Đức": "good",
    "Hồng Loan": "good", "Thiên Hỷ": "good", "Thiên Quan": "good", "Thiên Phúc": "good",
    "Lưu Hà": "bad", "Thiên Khốc": "bad", "Thiên Hư": "bad", "Đào Hoa": "good",
    "Cô Thần": "bad", "Quả Tú": "bad", "Kiếp Sát": "bad", "Phá Toái": "bad",
    "Thiên Thương": "bad", "Thiên Sứ": "bad", "Thiên La": "bad", "Địa Võng": "bad",
    "Thiên Tài": "neutral", "Thiên Thọ": "good", "Hoa Cái": "good", "Thiên Trù": "good",
    "Giải Thần": "good",
}

# 庙旺利陷（Tý -> Hợi）
STAR_BRIGHTNESS: Dict[str, List[str]] = {
    "Tử Vi": ["B", "Đ", "M", "B", "V", "M", "M", "V", "M", "B", "V", "B"],
    "Thiên Cơ": ["V", "H", "M", "M", "V", "Đ", "H", "H", "M", "M", "H", "H"],
    "Thái Dương": ["H", "H", "V", "V", "V", "V", "M", "Đ", "Đ", "H", "H", "H"],
    "Vũ Khúc": ["V", "M", "V", "Đ", "M", "Đ", "V", "M", "V", "Đ", "M", "H"],
    "Thiên Đồng": ["V", "H", "M", "M", "H", "Đ", "H", "H", "V", "M", "H", "M"],
    "Liêm Trinh": ["V", "Đ", "M", "H", "V", "H", "V", "Đ", "M", "H", "V", "H"],
    "Thiên Phủ": ["M", "M", "M", "B", "M", "Đ", "V", "M", "M", "B", "M", "Đ"],
    "Thái Âm": ["M", "M", "H", "H", "H", "H", "H", "H", "Đ", "V", "M", "M"],
    "Tham Lang": ["H", "M", "Đ", "H", "M", "H", "H", "M", "Đ", "H", "M", "H"],
    "Cự Môn": ["V", "H", "M", "M", "H", "H", "V", "H", "M", "M", "H", "H"],
    "Thiên Tướng": ["V", "M", "M", "H", "M", "Đ", "V", "M", "M", "H", "M", "Đ"],
    "Thiên Lương": ["V", "Đ", "V", "M", "V", "H", "M", "Đ", "V", "M", "H", "H"],
    "Thất Sát": ["M", "M", "M", "H", "H", "M", "M", "M", "M", "H", "H", "M"],
    "Phá Quân": ["M", "V", "Đ", "H", "V", "H", "M", "V", "Đ", "H", "V", "H"],
    # 辅星
    "Kình Dương": ["H", "M", "H", "H", "M", "H", "H", "M", "H", "H", "M", "H"],
    "Đà La": ["H", "M", "H", "H", "M", "H", "H", "M", "H", "H", "M", "H"],
    "Hỏa Tinh": ["H", "Đ", "M", "H", "H", "Đ", "M", "H", "H", "Đ", "M", "H"],
    "Linh Tinh": ["H", "Đ", "M", "H", "H", "Đ", "M", "H", "H", "Đ", "M", "H"],
    "Địa Không": ["H", "H", "M", "H", "H", "M", "H", "H", "M", "H", "H", "M"],
    "Địa Kiếp": ["H", "H", "M", "H", "H", "M", "H", "H", "M", "H", "H", "M"],
    "Văn Xương": ["H", "M", "H", "H", "Đ", "M", "H", "H", "H", "M", "Đ", "H"],
    "Văn Khúc": ["H", "M", "H", "H", "Đ", "M", "H", "H", "H", "M", "Đ", "H"],
    "Hóa Kỵ": ["H", "Đ", "H", "H", "Đ", "H", "H", "Đ", "H", "H", "Đ", "H"],
}

# 四化星名，与 TU_HOA 每行的列一一对应
TU_HOA_NAMES: List[str] = ["Hóa Lộc", "Hóa Quyền", "Hóa Khoa", "Hóa Kỵ"]

# 四化（按年干）：[化禄, 化权, 化科, 化忌] 所附之星
TU_HOA: List[List[str]] = [
    ["Liêm Trinh", "Phá Quân", "Vũ Khúc", "Thái Dương"],    # Giáp
    ["Thiên Cơ", "Thiên Lương", "Tử Vi", "Thái Âm"],        # Ất
    ["Thiên Đồng", "Thiên Cơ", "Văn Xương", "Liêm Trinh"],  # Bính
    ["Thái Âm", "Thiên Đồng", "Thiên Cơ", "Cự Môn"],        # Đinh
    ["Tham Lang", "Thái Âm", "Hữu Bật", "Thiên Cơ"],        # Mậu
    ["Vũ Khúc", "Tham Lang", "Thiên Lương", "Văn Khúc"],    # Kỷ
    ["Thái Dương", "Vũ Khúc", "Thái Âm", "Thiên Đồng"],     # Canh
    ["Cự Môn", "Thái Dương", "Văn Khúc", "Văn Xương"],      # Tân
    ["Thiên Lương", "Tử Vi", "Tả Phụ", "Vũ Khúc"],          # Nhâm
    ["Phá Quân", "Cự Môn", "Thái Âm", "Tham Lang"],         # Quý
]


def get_star_brightness(star_name: str, position: int):
    """查询星曜在某地支的庙旺利陷，无记录返回 None"""
    row = STAR_BRIGHTNESS.get(star_name)
    if row is None:
        return None
    return row[position % 12]
