# prompt_tracer/optimizer/prompt_builder.py
from __future__ import annotations

import logging
from enum import Enum
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict

from prompt_tracer.config import EngineConfig
from prompt_tracer.llm.fallback import Decision, ModelFallbackPolicy
from prompt_tracer.llm.openai_client import LLMError, RemoteRewriter
from prompt_tracer.optimizer.sanitize import is_unchanged, sanitize_response
from prompt_tracer.rewrite.pipeline import RewritePipeline
from prompt_tracer.scorer.local_score import Analysis

logger = logging.getLogger(__name__)


class RewriteResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str
    provenance: Literal["remote", "local-rules"]
    changed: bool
    model: Optional[str] = None


class OptimizationState(str, Enum):
    ATTEMPT_REMOTE = "attempt_remote"
    ATTEMPT_LOCAL = "attempt_local"
    DONE = "done"


class PromptOptimizer:
    """
    Remote rewrite first, local rule pipeline as the unconditional fallback.

    ATTEMPT_REMOTE -> ATTEMPT_LOCAL -> DONE; the remote step may jump straight
    to DONE when it yields a usable, changed rewrite.
    """

    def __init__(
        self,
        config: EngineConfig,
        rewriter: Optional[RemoteRewriter] = None,
        pipeline: Optional[RewritePipeline] = None,
    ):
        self.config = config
        self.rewriter = rewriter
        self.pipeline = pipeline or RewritePipeline()

    def remote_available(self) -> bool:
        return self.rewriter is not None and self.config.remote_allowed

    async def optimize(self, prompt: str, analysis: Analysis) -> RewriteResult:
        original = prompt or ""
        state = (OptimizationState.ATTEMPT_REMOTE if self.remote_available()
                 else OptimizationState.ATTEMPT_LOCAL)
        result: Optional[RewriteResult] = None

        while state is not OptimizationState.DONE:
            if state is OptimizationState.ATTEMPT_REMOTE:
                result = await self._attempt_remote(original, analysis)
                state = (OptimizationState.DONE if result is not None
                         else OptimizationState.ATTEMPT_LOCAL)
            elif state is OptimizationState.ATTEMPT_LOCAL:
                result = self.optimize_locally(original, analysis)
                state = OptimizationState.DONE

        return result

    def optimize_locally(self, prompt: str, analysis: Analysis) -> RewriteResult:
        text = self.pipeline.rewrite(prompt, analysis)
        return RewriteResult(text=text, provenance="local-rules", changed=text != prompt)

    async def _attempt_remote(self, original: str, analysis: Analysis) -> Optional[RewriteResult]:
        policy = ModelFallbackPolicy(self.config.models)
        try:
            while not policy.exhausted:
                model = policy.current()
                try:
                    raw = await self.rewriter.rewrite(original, analysis, model)
                except LLMError as e:
                    decision = policy.record_failure(e)
                    if decision is Decision.ADVANCE:
                        logger.warning("Model %s unavailable, trying next: %s", model, e)
                        continue
                    logger.info("Remote rewrite failed on %s, using local rules: %s", model, e)
                    return None

                policy.record_success()
                text = sanitize_response(raw)
                if not text or is_unchanged(original, text, self.config.near_duplicate_threshold):
                    logger.info("Remote rewrite from %s was empty or unchanged, using local rules", model)
                    return None
                logger.info("Remote rewrite succeeded using %s", model)
                return RewriteResult(text=text, provenance="remote", changed=True, model=model)
        except Exception:
            logger.exception("Unexpected error during remote rewrite, using local rules")
            return None

        logger.info("All remote models unavailable (%s), using local rules", ", ".join(policy.tried))
        return None
