import pytest

from prompt_tracer.config import EngineConfig
from prompt_tracer.llm.openai_client import LLMError

FAKE_KEY = "sk-test-" + "x" * 32


class FakeRewriter:
    """Scripted remote rewriter: model -> reply string or exception to raise."""

    def __init__(self, script):
        self.script = dict(script)
        self.calls = []

    async def rewrite(self, original, analysis, model):
        self.calls.append(model)
        outcome = self.script.get(model, LLMError(f"no script for {model}"))
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome


@pytest.fixture
def remote_config():
    return EngineConfig(remote_enabled=True, api_key=FAKE_KEY, models=("model-a", "model-b"))


@pytest.fixture
def disabled_config():
    return EngineConfig.disabled()


# Inputs used by the totality / guaranteed-change checks
EDGE_INPUTS = [
    "",
    " ",
    "\n\n\t",
    "?",
    "...!!!???",
    "hi",
    "write about AI",
    "explain big bang",
    "give me beach trip ideas",
    "Explain the Big Bang theory to a beginner with specific examples",
    "Compare Python vs Java for backend development in a table",
    "First, describe the problem.\n\nNext, list 3 options. Finally, recommend one?",
    "ünïcödé prompt — with “smart quotes” and emoji 🚀",
    "word " * 3000,
    ("Please write a comprehensive, detailed, professional business plan for a "
     "software company targeting expert users. Include specific examples, a "
     "table of costs, 5 milestones, and a step-by-step timeline. Could you also "
     "compare two pricing strategies and explain the goal of each?"),
]
