import logging

import pytest

from prompt_tracer.config import EngineConfig
from prompt_tracer.engine import PromptEngine, analyze
from prompt_tracer.llm.openai_client import LLMError, ModelUnavailableError
from prompt_tracer.optimizer.prompt_builder import PromptOptimizer
from prompt_tracer.rewrite.pipeline import rewrite_locally

from conftest import EDGE_INPUTS, FAKE_KEY, FakeRewriter

PROMPT = "write about AI"
GOOD_REWRITE = "Write a detailed blog post about AI safety for beginners, with examples."


async def _optimize(config, script, prompt=PROMPT):
    rewriter = FakeRewriter(script)
    result = await PromptOptimizer(config, rewriter).optimize(prompt, analyze(prompt))
    return result, rewriter


class TestRemotePath:
    async def test_first_model_succeeds(self, remote_config):
        result, rewriter = await _optimize(remote_config, {
            "model-a": f"Here is the optimized prompt: {GOOD_REWRITE}",
        })
        assert result.provenance == "remote"
        assert result.model == "model-a"
        assert result.text == GOOD_REWRITE
        assert result.changed
        assert rewriter.calls == ["model-a"]

    async def test_unavailable_model_falls_through_to_next(self, remote_config, caplog):
        with caplog.at_level(logging.WARNING, logger="prompt_tracer"):
            result, rewriter = await _optimize(remote_config, {
                "model-a": ModelUnavailableError("model-a"),
                "model-b": GOOD_REWRITE,
            })
        assert result.provenance == "remote"
        assert result.model == "model-b"
        assert rewriter.calls == ["model-a", "model-b"]
        assert "model-a" in caplog.text

    async def test_all_models_unavailable(self, remote_config):
        result, rewriter = await _optimize(remote_config, {
            "model-a": ModelUnavailableError("model-a"),
            "model-b": ModelUnavailableError("model-b"),
        })
        assert result.provenance == "local-rules"
        assert result.text == rewrite_locally(PROMPT, analyze(PROMPT))
        assert rewriter.calls == ["model-a", "model-b"]

    async def test_other_error_aborts_remaining_models(self, remote_config):
        result, rewriter = await _optimize(remote_config, {
            "model-a": LLMError("quota exceeded"),
            "model-b": GOOD_REWRITE,
        })
        assert result.provenance == "local-rules"
        assert rewriter.calls == ["model-a"]

    async def test_unexpected_exception_degrades_to_local(self, remote_config):
        result, _ = await _optimize(remote_config, {"model-a": RuntimeError("socket closed")})
        assert result.provenance == "local-rules"
        assert result.text != PROMPT

    @pytest.mark.parametrize("reply", [
        PROMPT,
        f'"{PROMPT}"',
        "Write   about ai",
        "about AI write",
        "",
        "Here is the optimized prompt:",
    ])
    async def test_unchanged_or_empty_reply_is_rejected(self, remote_config, reply):
        result, _ = await _optimize(remote_config, {"model-a": reply})
        assert result.provenance == "local-rules"
        assert result.text != PROMPT

    async def test_near_duplicate_check_can_be_disabled(self):
        config = EngineConfig(api_key=FAKE_KEY, models=("model-a",), near_duplicate_threshold=1.5)
        result, _ = await _optimize(config, {"model-a": "about AI write"})
        assert result.provenance == "remote"
        assert result.text == "about AI write"


class TestLocalOnly:
    async def test_disabled_config_never_calls_remote(self, disabled_config):
        result, rewriter = await _optimize(disabled_config, {"model-a": GOOD_REWRITE})
        assert result.provenance == "local-rules"
        assert rewriter.calls == []

    async def test_malformed_key_never_calls_remote(self):
        config = EngineConfig(api_key="not-a-key", models=("model-a",))
        result, rewriter = await _optimize(config, {"model-a": GOOD_REWRITE})
        assert result.provenance == "local-rules"
        assert rewriter.calls == []

    async def test_no_rewriter(self, remote_config):
        result = await PromptOptimizer(remote_config).optimize(PROMPT, analyze(PROMPT))
        assert result.provenance == "local-rules"

    @pytest.mark.parametrize("prompt", EDGE_INPUTS)
    async def test_always_changed(self, disabled_config, prompt):
        result = await PromptEngine(disabled_config).optimize(prompt)
        assert result.changed
        assert result.text != prompt
        assert result.model is None

    async def test_local_path_is_deterministic(self, disabled_config):
        engine = PromptEngine(disabled_config)
        first = await engine.optimize("give me beach trip ideas")
        second = await engine.optimize("give me beach trip ideas")
        assert first == second
