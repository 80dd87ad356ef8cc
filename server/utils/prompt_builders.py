# -*- coding: utf-8 -*-
"""
Prompt 构建工具模块

根据紫微命盘（TuviChart.to_dict() 的纯数据结构）构建大模型提示词。
不依赖 FastAPI 或其他服务器端依赖，可以在评测脚本中安全导入。
大模型调用本身不在本项目内。
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from core.data.stems_branches import PALACE_NAMES

PALACE_SEQUENCE = [name for name, _ in PALACE_NAMES]

NO_MAIN_STAR = "Vô Chính Diệu"


# ==============================================================================
# 通用辅助函数
# ==============================================================================

def _gender_text(gender: Optional[str]) -> str:
    return "Nam" if gender == "male" else "Nữ"


def _star_names(stars: List[Dict[str, Any]]) -> str:
    return ", ".join(s.get('name', '') for s in stars)


def format_palace_line(palace: Dict[str, Any]) -> str:
    """
    单宫概要：宫名、大运起岁、主星与辅星

    Args:
        palace: Palace.to_dict() 结果

    Returns:
        str: 一行文字
    """
    main = _star_names(palace.get('main_stars', [])) or "Không có"
    secondary = _star_names(palace.get('secondary_stars', [])) or "Không có"
    return (
        f"- Cung {palace.get('name')} ({palace.get('branch', '')}, Đại vận {palace.get('dai_van')}): "
        f"Chính tinh [{main}], Phụ tinh [{secondary}]"
    )


def format_palace_stars(palace: Dict[str, Any]) -> str:
    """
    主星带庙旺等级，无主星时写作 Vô Chính Diệu
    """
    main_stars = palace.get('main_stars', [])
    if main_stars:
        main = ", ".join(f"{s.get('name')} ({s.get('brightness') or 'Bình hòa'})" for s in main_stars)
    else:
        main = NO_MAIN_STAR
    secondary = _star_names(palace.get('secondary_stars', []))
    return f"Chính tinh: [{main}]\nPhụ tinh: [{secondary}]"


def format_tuan_triet(palace: Dict[str, Any]) -> str:
    flags = []
    if palace.get('tuan'):
        flags.append("Gặp TUẦN")
    if palace.get('triet'):
        flags.append("Gặp TRIỆT")
    return ", ".join(flags) or "Không"


def _find_palace(chart: Dict[str, Any], palace_name: str) -> Dict[str, Any]:
    for palace in chart.get('palaces', []):
        if palace.get('name') == palace_name:
            return palace
    raise KeyError(palace_name)


def _birth_year(chart: Dict[str, Any]) -> Optional[int]:
    center = chart.get('center_info', {})
    return center.get('birth_year')


# ==============================================================================
# 总览提示词
# ==============================================================================

def build_tuvi_analysis_prompt(chart: Dict[str, Any], full_name: Optional[str] = None,
                               current_year: Optional[int] = None) -> str:
    """
    构建命盘总览提示词（越南语）

    Args:
        chart: TuviChart.to_dict() 结果
        full_name: 姓名，缺省取 center_info.name
        current_year: 计算虚岁用的当前年份，缺省取系统年份

    Returns:
        str: 提示词
    """
    center = chart.get('center_info', {})
    name = full_name or center.get('name') or "Đương số"
    birth_year = _birth_year(chart)
    current_year = current_year or datetime.now().year

    prompt_lines = []
    prompt_lines.append(
        "Vai trò: Bạn là một chuyên gia Tử Vi Đẩu Số, luận giải dựa trên các cổ thư "
        "và kinh nghiệm thực tế, lời văn trang trọng, mạch lạc."
    )
    prompt_lines.append("")

    prompt_lines.append("Thông tin đương số:")
    prompt_lines.append(f"- Họ tên: {name}")
    prompt_lines.append(f"- Giới tính: {_gender_text(center.get('gender'))}")
    if birth_year:
        prompt_lines.append(f"- Năm sinh: {birth_year} (tuổi âm lịch năm {current_year}: {current_year - birth_year + 1})")
    prompt_lines.append(
        f"- Can Chi năm: {chart.get('heavenly_stem')} {chart.get('earthly_branch')}, "
        f"Mệnh {chart.get('element')} ({chart.get('nap_am')})"
    )
    prompt_lines.append(f"- Cục: {chart.get('cuc_loai') or 'N/A'}")
    prompt_lines.append(f"- Chủ Mệnh: {chart.get('chu_menh') or 'N/A'}")
    prompt_lines.append(f"- Chủ Thân: {chart.get('chu_than') or 'N/A'}")
    group = chart.get('major_star_group') or {}
    if group.get('name'):
        prompt_lines.append(f"- Cách cục chính tinh: {group['name']} ({group.get('description', '')})")
    prompt_lines.append("")

    prompt_lines.append("Lược đồ mười hai cung:")
    for palace in chart.get('palaces', []):
        prompt_lines.append(format_palace_line(palace))
    prompt_lines.append("")

    scores = chart.get('destiny_scores') or {}
    if scores:
        prompt_lines.append(
            "Chỉ số tham khảo: "
            f"Sự nghiệp {scores.get('career_score')}, Tài lộc {scores.get('finance_score')}, "
            f"Tình duyên {scores.get('romance_score')}, Sức khỏe {scores.get('health_score')}"
        )
        prompt_lines.append("")

    prompt_lines.append("Yêu cầu: Viết phần tổng luận lá số, không liệt kê máy móc từng sao, gồm:")
    prompt_lines.append("1. Cốt cách: quan hệ giữa Can Chi năm sinh, hành Mệnh và Cục.")
    prompt_lines.append("2. Tính cách và tài năng theo bộ chính tinh thủ Mệnh.")
    prompt_lines.append("3. Vận trình: tiền vận, trung vận, hậu vận; giai đoạn thuận lợi nhất.")
    prompt_lines.append("4. Lời khuyên tu dưỡng và định hướng nghề nghiệp.")
    prompt_lines.append("")
    prompt_lines.append("Định dạng: Markdown, có tiêu đề phụ, khoảng 400 từ.")

    return "\n".join(prompt_lines)


# ==============================================================================
# 单宫提示词
# ==============================================================================

def build_palace_analysis_prompt(chart: Dict[str, Any], palace_name: str,
                                 full_name: Optional[str] = None) -> str:
    """
    构建单宫详解提示词（越南语）

    带入本宫、两个三合宫（宫序 +4、+8）与对宫（+6）的星曜，以及本宫旬空 / 截空。

    Args:
        chart: TuviChart.to_dict() 结果
        palace_name: 越南文宫名（如 "Quan Lộc"）
        full_name: 姓名，缺省取 center_info.name

    Returns:
        str: 提示词

    Raises:
        KeyError: 宫名不存在
    """
    if palace_name not in PALACE_SEQUENCE:
        raise KeyError(palace_name)
    target = _find_palace(chart, palace_name)

    idx = PALACE_SEQUENCE.index(palace_name)
    tam_hop_1 = _find_palace(chart, PALACE_SEQUENCE[(idx + 4) % 12])
    tam_hop_2 = _find_palace(chart, PALACE_SEQUENCE[(idx + 8) % 12])
    xung_chieu = _find_palace(chart, PALACE_SEQUENCE[(idx + 6) % 12])

    center = chart.get('center_info', {})
    name = full_name or center.get('name') or "Đương số"
    birth_year = _birth_year(chart)

    prompt_lines = []
    prompt_lines.append(
        "Vai trò: Bạn là chuyên gia Tử Vi, chú trọng Tam Phương Tứ Chính "
        "(tam hợp và xung chiếu) khi luận một cung."
    )
    prompt_lines.append("")
    prompt_lines.append(f"Đương số: {name} ({_gender_text(center.get('gender'))}, {birth_year or 'N/A'})")
    prompt_lines.append(f"Bản Mệnh: {chart.get('element')}, Cục: {chart.get('cuc_loai')}")
    prompt_lines.append(f"Cung cần luận: **{palace_name}** an tại **{target.get('branch', '')}**")
    prompt_lines.append("")

    prompt_lines.append(f"Cung {palace_name}:")
    prompt_lines.append(format_palace_stars(target))
    prompt_lines.append(f"Tuần/Triệt: {format_tuan_triet(target)}")
    prompt_lines.append("")

    prompt_lines.append("Tam Phương Tứ Chính:")
    prompt_lines.append(f"1. Tam hợp ({tam_hop_1.get('name')}): {format_palace_stars(tam_hop_1)}")
    prompt_lines.append(f"2. Tam hợp ({tam_hop_2.get('name')}): {format_palace_stars(tam_hop_2)}")
    prompt_lines.append(f"3. Xung chiếu ({xung_chieu.get('name')}): {format_palace_stars(xung_chieu)}")
    prompt_lines.append("")

    prompt_lines.append(f"Yêu cầu: Luận giải chuyên sâu cung {palace_name}:")
    prompt_lines.append(
        f"1. Thế đứng của chính tinh (Miếu/Vượng/Đắc/Hãm); nếu {NO_MAIN_STAR} thì mượn chính tinh xung chiếu."
    )
    prompt_lines.append("2. Tương tác giữa chính tinh với cát tinh và sát tinh, các cách cục đặc biệt nếu có.")
    prompt_lines.append("3. Nhận định tốt xấu và cách hóa giải.")
    prompt_lines.append("")
    prompt_lines.append("Định dạng: Markdown, văn phong chuyên môn nhưng dễ hiểu, không liệt kê rời rạc.")

    return "\n".join(prompt_lines)
