#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
主星格局（Bộ sao chủ đạo）

按优先级排列，识别时先命中者为准。
"""

from typing import Any, Dict, List

STAR_PATTERNS: List[Dict[str, Any]] = [
    {
        "name": "Sát Phá Tham",
        "stars": ["Thất Sát", "Phá Quân", "Tham Lang"],
        "description": (
            "Bộ võ cách đầy uy lực, chủ về sự đột phá, dám nghĩ dám làm, thích hợp lĩnh vực "
            "kinh doanh, quân sự, kỹ thuật. Cuộc đời thường nhiều biến động nhưng dễ làm nên đại nghiệp."
        ),
        "priority": 10,
    },
    {
        "name": "Tử Phủ Vũ Tướng",
        "stars": ["Tử Vi", "Thiên Phủ", "Vũ Khúc", "Thiên Tướng"],
        "description": (
            "Bộ đế vương, chủ về sự ổn định, quyền uy, lãnh đạo và tài lộc. Thường có cuộc sống "
            "phú quý, ít sóng gió, thích hợp làm quản lý, chính trị, tài chính."
        ),
        "priority": 9,
    },
    {
        "name": "Cơ Nguyệt Đồng Lương",
        "stars": ["Thiên Cơ", "Thái Âm", "Thiên Đồng", "Thiên Lương"],
        "description": (
            "Bộ văn cách, chủ về sự mưu trí, hiền lành, phúc đức. Thường làm công chức, giáo dục, "
            "y tế hoặc tham mưu. Cuộc sống êm đềm, được nhiều người quý mến."
        ),
        "priority": 8,
    },
    {
        "name": "Cự Nhật",
        "stars": ["Cự Môn", "Thái Dương"],
        "description": (
            "Chủ về khẩu tài, lý luận sắc bén, ngoại giao tốt. Thường thành công trong các nghề "
            "luật sư, giáo viên, diễn giả. Tuy nhiên cần đề phòng thị phi."
        ),
        "priority": 7,
    },
    {
        "name": "Nhật Nguyệt",
        "stars": ["Thái Dương", "Thái Âm"],
        "description": (
            "Chủ về sự thông minh, sáng suốt, thay đổi linh hoạt. Thường phải đi xa lập nghiệp, "
            "cuộc đời có nhiều thăng trầm nhưng hậu vận tốt đẹp."
        ),
        "priority": 6,
    },
]

FALLBACK_PATTERN: Dict[str, str] = {
    "name": "Cách Cục Khác",
    "description": "Lá số này có cách cục pha trộn, cần xem xét kỹ các sao và vị trí cụ thể.",
}

# 多于两颗星的格局，三方中至少出现的星数
MIN_MATCH_FOR_LARGE_PATTERN = 3
