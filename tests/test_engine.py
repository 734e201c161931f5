import pytest

from prompt_tracer.config import EngineConfig
from prompt_tracer.engine import PromptEngine, analyze
from prompt_tracer.llm.openai_client import OpenAIRewriter
from prompt_tracer.scorer.quality import QualityLevel

from conftest import EDGE_INPUTS, FAKE_KEY


@pytest.mark.parametrize("prompt", EDGE_INPUTS)
def test_analyze_is_total_and_deterministic(prompt):
    first = analyze(prompt)
    assert first == analyze(prompt)
    assert all(0 <= v <= 100 for v in first.metrics.as_dict().values())
    assert isinstance(first.quality, QualityLevel)


def test_engine_defaults_to_local_only():
    engine = PromptEngine()
    assert not engine.config.remote_allowed
    assert engine.optimizer.rewriter is None


def test_engine_builds_openai_rewriter_when_allowed():
    engine = PromptEngine(EngineConfig(api_key=FAKE_KEY))
    assert isinstance(engine.optimizer.rewriter, OpenAIRewriter)
    assert engine.optimizer.remote_available()


def test_engine_skips_rewriter_for_bad_key():
    engine = PromptEngine(EngineConfig(api_key="nope"))
    assert engine.optimizer.rewriter is None


def test_optimize_locally_matches_async_local_path():
    engine = PromptEngine()
    result = engine.optimize_locally("explain big bang")
    assert result.provenance == "local-rules"
    assert result.text != "explain big bang"


async def test_optimize_computes_analysis_when_missing():
    engine = PromptEngine()
    with_analysis = await engine.optimize("explain big bang", analyze("explain big bang"))
    without = await engine.optimize("explain big bang")
    assert with_analysis == without


def test_specificity_scenario():
    detailed = analyze("Explain the Big Bang theory to a beginner with specific examples")
    terse = analyze("explain big bang")
    assert detailed.metrics.specificity - terse.metrics.specificity >= 15
    assert detailed.context.audience == "beginner"
    assert detailed.intent.type == terse.intent.type == "explanation"
