# prompt_tracer/engine.py
from __future__ import annotations

import logging
from typing import Optional

from prompt_tracer.config import EngineConfig
from prompt_tracer.llm.openai_client import LLMError, OpenAIRewriter, RemoteRewriter
from prompt_tracer.optimizer.prompt_builder import PromptOptimizer, RewriteResult
from prompt_tracer.rewrite.pipeline import rewrite_locally
from prompt_tracer.scorer.local_score import Analysis, LocalScorer

logger = logging.getLogger(__name__)

_scorer = LocalScorer()


def analyze(text: str) -> Analysis:
    return _scorer.score(text)


def _build_rewriter(config: EngineConfig) -> Optional[RemoteRewriter]:
    if not config.remote_allowed:
        return None
    try:
        return OpenAIRewriter(
            api_key=config.api_key,
            timeout=config.remote_timeout_seconds,
            temperature=config.temperature,
            max_tokens=config.max_tokens,
        )
    except LLMError as e:
        logger.warning("Remote rewriter unavailable: %s", e)
        return None


class PromptEngine:
    """Public entry point: analyze(text) and optimize(text, analysis)."""

    def __init__(
        self,
        config: Optional[EngineConfig] = None,
        rewriter: Optional[RemoteRewriter] = None,
        scorer: Optional[LocalScorer] = None,
    ):
        self.config = config or EngineConfig.disabled()
        self.scorer = scorer or _scorer
        if rewriter is None:
            rewriter = _build_rewriter(self.config)
        self.optimizer = PromptOptimizer(self.config, rewriter)

    def analyze(self, text: str) -> Analysis:
        return self.scorer.score(text)

    async def optimize(self, text: str, analysis: Optional[Analysis] = None) -> RewriteResult:
        if analysis is None:
            analysis = self.analyze(text)
        return await self.optimizer.optimize(text, analysis)

    def optimize_locally(self, text: str, analysis: Optional[Analysis] = None) -> RewriteResult:
        if analysis is None:
            analysis = self.analyze(text)
        return self.optimizer.optimize_locally(text, analysis)


__all__ = ["PromptEngine", "analyze", "rewrite_locally", "EngineConfig", "RewriteResult", "Analysis"]
