# prompt_tracer/rewrite/pipeline.py
from __future__ import annotations

import logging
from functools import reduce
from typing import Sequence

from prompt_tracer.rewrite.stages import DEFAULT_STAGES, Stage
from prompt_tracer.rewrite.templates import CLOSING_REQUEST, fallback_template
from prompt_tracer.scorer.local_score import Analysis

logger = logging.getLogger(__name__)


class RewritePipeline:
    """
    Folds the stages over the prompt, then enforces rewrite(x) != x.
    """

    def __init__(self, stages: Sequence[Stage] = DEFAULT_STAGES):
        self.stages = tuple(stages)

    def run_stages(self, prompt: str, analysis: Analysis) -> str:
        return reduce(lambda text, stage: stage(text, analysis), self.stages, prompt)

    def rewrite(self, prompt: str, analysis: Analysis) -> str:
        original = prompt or ""
        result = self.run_stages(original, analysis)

        if result == original:
            logger.debug("Stages left prompt unchanged, using fallback template")
            result = fallback_template(original)

        if result == original:
            result = (original.rstrip() + "\n\n" + CLOSING_REQUEST).lstrip()
        return result


_default_pipeline = RewritePipeline()


def rewrite_locally(prompt: str, analysis: Analysis) -> str:
    return _default_pipeline.rewrite(prompt, analysis)
