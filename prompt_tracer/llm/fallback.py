# prompt_tracer/llm/fallback.py
from __future__ import annotations

from enum import Enum
from typing import Optional, Sequence

from prompt_tracer.llm.openai_client import ModelUnavailableError


class Decision(str, Enum):
    ADVANCE = "advance"  # try the next model
    ABORT = "abort"      # give up on the remote path


class ModelFallbackPolicy:
    """
    Cursor over an ordered model list.

    A model-unavailable error advances the cursor; any other error aborts.
    Exhausting the list also ends the remote attempt.
    """

    def __init__(self, models: Sequence[str]):
        self.models = tuple(m for m in models if m)
        self.cursor = 0
        self.aborted = False
        self.tried: list[str] = []

    @property
    def exhausted(self) -> bool:
        return self.aborted or self.cursor >= len(self.models)

    def current(self) -> Optional[str]:
        if self.exhausted:
            return None
        return self.models[self.cursor]

    @staticmethod
    def classify(error: BaseException) -> Decision:
        if isinstance(error, ModelUnavailableError):
            return Decision.ADVANCE
        return Decision.ABORT

    def record_failure(self, error: BaseException) -> Decision:
        model = self.current()
        if model is not None:
            self.tried.append(model)
        decision = self.classify(error)
        if decision is Decision.ADVANCE:
            self.cursor += 1
        else:
            self.aborted = True
        return decision

    def record_success(self) -> None:
        model = self.current()
        if model is not None:
            self.tried.append(model)
