import pytest

from prompt_tracer.scorer.features import extract_features
from prompt_tracer.scorer.metrics import (
    ALL_METRICS,
    CORE_METRICS,
    MetricSet,
    score_clarity,
    score_specificity,
    score_structure,
    score_text,
)

from conftest import EDGE_INPUTS


class TestBounds:
    @pytest.mark.parametrize("text", EDGE_INPUTS)
    def test_every_metric_in_range(self, text):
        scores = score_text(text).as_dict()
        assert set(scores) == set(ALL_METRICS)
        assert all(0 <= v <= 100 for v in scores.values())

    def test_keyword_stuffing_is_capped(self):
        stuffed = " ".join(
            ["innovative creative unique original imaginative inspiring novel fresh"] * 20
            + ["1 2 3 4 5 6 7 8 9 10"] * 20
        )
        scores = score_text(stuffed)
        assert scores.creativity <= 100
        assert scores.specificity <= 100

    def test_deterministic(self):
        text = "Compare Python vs Java for backend development in a table"
        assert score_text(text) == score_text(text)


class TestBaseScores:
    def test_empty_prompt(self):
        assert score_text("").as_dict() == {
            "clarity": 10,
            "specificity": 30,
            "structure": 40,
            "context": 25,
            "intent": 35,
            "completeness": 30,
            "creativity": 30,
            "precision": 40,
            "engagement": 35,
            "adaptability": 30,
            "technical_quality": 40,
            "output_potential": 35,
        }

    def test_short_vague_prompt(self):
        scores = score_text("write about AI")
        assert scores.clarity == 10
        assert scores.specificity == 37
        assert scores.structure == 50
        assert scores.context == 25
        assert scores.intent == 47
        assert scores.completeness == 30


class TestIndividualMetrics:
    def test_specific_details_raise_specificity(self):
        detailed = score_text("Explain the Big Bang theory to a beginner with specific examples")
        terse = score_text("explain big bang")
        assert detailed.specificity == 49
        assert terse.specificity == 30
        assert detailed.specificity - terse.specificity >= 15

    def test_number_contribution_is_capped(self):
        f = extract_features("1 2 3 4 5 6 7 8 9 10")
        assert score_specificity(f) == 55

    def test_short_prompts_lose_clarity(self):
        short = extract_features("explain big bang")
        full = extract_features(
            "Please explain the main stages of the Big Bang theory and the evidence that supports it today?")
        assert score_clarity(short) == 15
        assert score_clarity(full) == 85

    def test_organized_prompt_scores_higher_structure(self):
        organized = extract_features("First, gather data.\n\nNext, clean it. Finally, report?")
        flat = extract_features("gather data")
        assert score_structure(organized) == 94
        assert score_structure(flat) == 50

    def test_audience_and_domain_raise_context(self):
        assert score_text("a business plan for a beginner").context > score_text("a plan").context


class TestMetricSet:
    def test_core_is_first_six(self):
        m = MetricSet(**{name: i * 5 for i, name in enumerate(ALL_METRICS)})
        assert list(m.core()) == list(CORE_METRICS)
        assert m.core_average() == pytest.approx(sum(i * 5 for i in range(6)) / 6)

    def test_average_covers_all_twelve(self):
        m = MetricSet(**{name: 60 for name in ALL_METRICS})
        assert m.average() == 60

    def test_rejects_out_of_range(self):
        with pytest.raises(ValueError):
            MetricSet(clarity=101)
