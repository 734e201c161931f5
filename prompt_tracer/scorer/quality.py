# prompt_tracer/scorer/quality.py
from __future__ import annotations

from enum import Enum

from prompt_tracer.scorer.metrics import MetricSet


class QualityLevel(str, Enum):
    BASIC = "basic"
    DEVELOPING = "developing"
    GOOD = "good"
    EXCELLENT = "excellent"
    MASTERFUL = "masterful"

    @property
    def rank(self) -> int:
        return list(QualityLevel).index(self)


# (upper bound exclusive, level); anything above the last bound is masterful
QUALITY_BANDS = (
    (30, QualityLevel.BASIC),
    (50, QualityLevel.DEVELOPING),
    (70, QualityLevel.GOOD),
    (85, QualityLevel.EXCELLENT),
)


def quality_label(score: float) -> QualityLevel:
    """
    Map a 0-100 average to its quality level.
    """
    score = max(0.0, min(100.0, score))
    for bound, level in QUALITY_BANDS:
        if score < bound:
            return level
    return QualityLevel.MASTERFUL


def grade(metrics: MetricSet) -> QualityLevel:
    return quality_label(metrics.core_average())


def overall_score(metrics: MetricSet) -> int:
    return int(round(metrics.core_average()))
