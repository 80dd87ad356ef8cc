#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
运势分数分析器

功能：
- 对单宫星曜打分：基础 60 分，主星看庙旺利陷与吉凶，辅星看吉凶及特殊吉煞
- 官禄 -> 事业、财帛 -> 财运、夫妻 -> 感情、疾厄 -> 健康
- 分数夹在 [20, 98]
- 按分数给出简短解读
"""

import logging
from typing import Iterable, Optional

from core.calculators.tuvi_core.models import DestinyScores, Nature, Palace, Star

logger = logging.getLogger(__name__)


class DestinyScoreAnalyzer:
    """运势分数分析器"""

    BASE_SCORE = 60
    MIN_SCORE = 20
    MAX_SCORE = 98

    # 主星庙旺利陷加减分；B（平）与无记录不加减
    BRIGHTNESS_SCORES = {'M': 8, 'V': 8, 'Đ': 4, 'H': -5}
    MAIN_NATURE_SCORES = {Nature.GOOD: 2, Nature.BAD: -2, Nature.NEUTRAL: 0}
    SECONDARY_NATURE_SCORES = {Nature.GOOD: 3, Nature.BAD: -3, Nature.NEUTRAL: 0}

    LUCKY_STARS = frozenset(["Lộc Tồn", "Hóa Lộc", "Hóa Quyền", "Hóa Khoa", "Thiên Khôi", "Thiên Việt"])
    UNLUCKY_STARS = frozenset(["Hóa Kỵ", "Địa Không", "Địa Kiếp", "Kình Dương", "Đà La"])
    SPECIAL_STAR_BONUS = 5

    # 运势 -> 宫名
    SCORE_PALACES = {
        'career': "Quan Lộc",
        'finance': "Tài Bạch",
        'romance': "Phu Thê",
        'health': "Tật Ách",
    }

    # 解读阈值
    GOOD_THRESHOLD = 70
    BAD_THRESHOLD = 40

    @staticmethod
    def score_stars(main_stars: Iterable[Star], secondary_stars: Iterable[Star]) -> int:
        """单宫打分（已夹取）"""
        score = DestinyScoreAnalyzer.BASE_SCORE
        for star in main_stars:
            score += DestinyScoreAnalyzer.BRIGHTNESS_SCORES.get(star.brightness, 0)
            score += DestinyScoreAnalyzer.MAIN_NATURE_SCORES[star.nature]
        for star in secondary_stars:
            score += DestinyScoreAnalyzer.SECONDARY_NATURE_SCORES[star.nature]
            if star.name in DestinyScoreAnalyzer.LUCKY_STARS:
                score += DestinyScoreAnalyzer.SPECIAL_STAR_BONUS
            elif star.name in DestinyScoreAnalyzer.UNLUCKY_STARS:
                score -= DestinyScoreAnalyzer.SPECIAL_STAR_BONUS
        return max(DestinyScoreAnalyzer.MIN_SCORE, min(DestinyScoreAnalyzer.MAX_SCORE, score))

    @staticmethod
    def score_palace(palace: Optional[Palace]) -> int:
        if palace is None:
            return DestinyScoreAnalyzer.BASE_SCORE
        return DestinyScoreAnalyzer.score_stars(palace.main_stars, palace.secondary_stars)

    @staticmethod
    def calculate(palaces: Iterable[Palace]) -> DestinyScores:
        """
        计算四项运势分数

        Args:
            palaces: 命盘十二宫

        Returns:
            DestinyScores
        """
        by_name = {palace.name: palace for palace in palaces}
        scores = {
            key: DestinyScoreAnalyzer.score_palace(by_name.get(palace_name))
            for key, palace_name in DestinyScoreAnalyzer.SCORE_PALACES.items()
        }
        return DestinyScores(**scores)

    @staticmethod
    def interpret(scores: DestinyScores) -> str:
        """
        分数解读（越南文）

        依次检查健康、财运、感情、事业：高分给出顺境提示，低分给出提醒，
        中间分数不提；全部居中时返回平衡提示。
        """
        ordered = [
            (scores.health,
             "Sức khỏe của bạn rất tốt, hãy duy trì lối sống lành mạnh.",
             "Cần chú ý đến sức khỏe, hãy kiểm tra định kỳ và tránh quá sức."),
            (scores.finance,
             "Tài chính sẽ khá thuận lợi, đây là thời điểm tốt để đầu tư.",
             "Tài chính cần cẩn thận, hãy quản lý chi tiêu hợp lý."),
            (scores.romance,
             "Tình duyên sẽ phát triển tốt, là thời điểm thuận lợi cho tình yêu.",
             "Tình duyên cần chú ý, hãy kiên nhẫn và tìm hiểu kỹ đối phương."),
            (scores.career,
             "Sự nghiệp sẽ có bước tiến, hãy tận dụng cơ hội phát triển.",
             "Sự nghiệp cần cố gắng thêm, hãy nâng cao kỹ năng và kinh nghiệm."),
        ]
        interpretations = []
        for score, good_text, bad_text in ordered:
            if score >= DestinyScoreAnalyzer.GOOD_THRESHOLD:
                interpretations.append(good_text)
            elif score < DestinyScoreAnalyzer.BAD_THRESHOLD:
                interpretations.append(bad_text)
        if interpretations:
            return " ".join(interpretations)
        return "Vận mệnh của bạn cân bằng, hãy tiếp tục phát triển từng khía cạnh một cách đều đặn."


def calculate_destiny_scores(palaces: Iterable[Palace]) -> DestinyScores:
    """便捷函数，见 DestinyScoreAnalyzer.calculate"""
    return DestinyScoreAnalyzer.calculate(palaces)


def interpret_destiny_scores(scores: DestinyScores) -> str:
    """便捷函数，见 DestinyScoreAnalyzer.interpret"""
    return DestinyScoreAnalyzer.interpret(scores)
