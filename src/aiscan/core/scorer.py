from __future__ import annotations

from typing import Mapping

from aiscan.models.config import LabelThresholds

LIKELY_AI = "LIKELY AI"
UNCERTAIN = "UNCERTAIN"
LIKELY_HUMAN = "LIKELY HUMAN"


def pattern_score(match_map: Mapping[int, int]) -> float:
    """
    Weighted sum of weight class * match count.
    Negative classes count against generated text, so the sum can go below 0.
    """
    return float(sum(weight * count for weight, count in match_map.items()))


def is_likely_ai(score: float, thresholds: LabelThresholds) -> bool:
    return score >= thresholds.likely_ai


def label_for(score: float, thresholds: LabelThresholds) -> str:
    if is_likely_ai(score, thresholds):
        return LIKELY_AI
    if score <= thresholds.likely_human:
        return LIKELY_HUMAN
    return UNCERTAIN
