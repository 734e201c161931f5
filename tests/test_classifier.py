import pytest

from prompt_tracer.scorer.intent import (
    IntentDetector,
    Rule,
    classify_context,
    classify_intent,
    first_match,
)


class TestIntent:
    @pytest.mark.parametrize("prompt, expected", [
        ("write about AI", "creation"),
        ("Generate a logo idea", "creation"),
        ("explain the difference", "explanation"),
        ("what is entropy", "explanation"),
        ("compare python vs java", "comparison"),
        ("python vs java", "comparison"),
        ("how to bake bread", "instruction"),
        ("evaluate my essay", "analysis"),
        ("hello there", "general"),
        ("", "general"),
    ])
    def test_intent_type(self, prompt, expected):
        assert classify_intent(prompt).type == expected

    def test_earlier_rule_wins(self):
        intent = classify_intent("write an essay to explain and compare two theories")
        assert intent.type == "creation"
        assert intent.action == "generate"

    def test_default_action(self):
        assert classify_intent("hello there").action == "request"

    @pytest.mark.parametrize("prompt, expected", [
        ("give a detailed plan", "high"),
        ("a quick summary", "low"),
        ("a plan", "low"),
    ])
    def test_specificity(self, prompt, expected):
        assert classify_intent(prompt).specificity == expected

    @pytest.mark.parametrize("prompt, expected", [
        ("list the planets", "list"),
        ("make a table of planets", "structured"),
        ("evaluate my essay", "narrative"),
        ("planets", "none"),
    ])
    def test_format(self, prompt, expected):
        assert classify_intent(prompt).format == expected


class TestContext:
    def test_defaults(self):
        ctx = classify_context("hello there")
        assert (ctx.domain, ctx.tone, ctx.audience, ctx.complexity) == (
            "general", "neutral", "general", "medium")

    def test_business_sets_professional_tone(self):
        ctx = classify_context("write a business plan")
        assert ctx.domain == "business"
        assert ctx.tone == "professional"

    def test_technical_sets_high_complexity(self):
        ctx = classify_context("review my python code")
        assert ctx.domain == "technical"
        assert ctx.tone == "neutral"
        assert ctx.complexity == "high"

    def test_first_domain_wins(self):
        ctx = classify_context("technical business report")
        assert ctx.domain == "business"
        assert ctx.tone == "professional"
        assert ctx.complexity == "medium"

    @pytest.mark.parametrize("prompt, domain, tone", [
        ("a creative story", "creative", "casual"),
        ("a research study on sleep", "academic", "formal"),
        ("give me beach trip ideas", "travel", "casual"),
        ("recommend a movie to watch", "entertainment", "casual"),
    ])
    def test_domain_and_tone(self, prompt, domain, tone):
        ctx = classify_context(prompt)
        assert ctx.domain == domain
        assert ctx.tone == tone

    def test_audience_overrides_domain_complexity(self):
        ctx = classify_context("a technical guide for beginners")
        assert ctx.domain == "technical"
        assert ctx.audience == "beginner"
        assert ctx.complexity == "low"

    def test_expert_audience(self):
        ctx = classify_context("professional code")
        assert ctx.domain == "business"
        assert ctx.tone == "professional"
        assert ctx.audience == "expert"
        assert ctx.complexity == "high"

    def test_beginner_from_big_bang_prompt(self):
        ctx = classify_context("Explain the Big Bang theory to a beginner with specific examples")
        assert ctx.audience == "beginner"
        assert ctx.complexity == "low"


class TestRuleTables:
    def test_first_match_default(self):
        rules = (Rule(("alpha",), 1), Rule(("beta",), 2))
        assert first_match(rules, "beta then alpha") == 1
        assert first_match(rules, "gamma", default=0) == 0

    def test_custom_tables(self):
        detector = IntentDetector(intent_rules=(Rule(("haiku",), ("creation", "poem")),))
        assert detector.detect("a haiku about rain").action == "poem"
        assert detector.detect("explain rain").type == "general"
