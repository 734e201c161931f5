# prompt_tracer/scorer/local_score.py
from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict

from prompt_tracer.scorer.features import extract_features
from prompt_tracer.scorer.intent import Context, Intent, IntentDetector
from prompt_tracer.scorer.issues import Issue, detect_issues
from prompt_tracer.scorer.metrics import MetricSet, score_metrics
from prompt_tracer.scorer.quality import QualityLevel, grade, overall_score
from prompt_tracer.suggester.insights import (
    FeedbackItem,
    Insight,
    generate_feedback,
    generate_insights,
    generate_suggestions,
)


class Analysis(BaseModel):
    model_config = ConfigDict(frozen=True)

    metrics: MetricSet
    intent: Intent
    context: Context
    quality: QualityLevel
    score: int
    insights: List[Insight] = []
    suggestions: List[str] = []
    issues: List[Issue] = []
    feedback: List[FeedbackItem] = []


class LocalScorer:
    """
    Local, no-LLM analysis:
    - Metrics: twelve keyword/feature heuristics
    - Intent + context: ordered keyword rule tables
    - Quality: grade of the six core metrics
    - Insights, suggestions, issues and live feedback for the UI
    """

    def __init__(self, detector: IntentDetector | None = None):
        self.detector = detector or IntentDetector()

    def score(self, prompt: str) -> Analysis:
        prompt = prompt or ""
        features = extract_features(prompt)
        metrics = score_metrics(features)

        return Analysis(
            metrics=metrics,
            intent=self.detector.detect(prompt),
            context=self.detector.detect_context(prompt),
            quality=grade(metrics),
            score=overall_score(metrics),
            insights=generate_insights(metrics),
            suggestions=generate_suggestions(metrics),
            issues=detect_issues(prompt),
            feedback=generate_feedback(features, metrics),
        )
