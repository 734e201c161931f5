# prompt_tracer/scorer/intent.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional, Sequence, Tuple

from pydantic import BaseModel, ConfigDict

from prompt_tracer.scorer.features import any_keyword

IntentType = Literal["creation", "explanation", "comparison",
                     "instruction", "analysis", "general"]
Domain = Literal["general", "business", "technical", "creative",
                 "academic", "travel", "entertainment"]
Tone = Literal["neutral", "professional", "casual", "formal"]
Audience = Literal["general", "beginner", "expert"]
Complexity = Literal["low", "medium", "high"]


class Intent(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: IntentType = "general"
    action: str = "request"
    specificity: Literal["low", "high"] = "low"
    format: Literal["none", "list", "structured", "narrative"] = "none"


class Context(BaseModel):
    model_config = ConfigDict(frozen=True)

    domain: Domain = "general"
    tone: Tone = "neutral"
    audience: Audience = "general"
    complexity: Complexity = "medium"


@dataclass(frozen=True)
class Rule:
    """One row of a classification table: any keyword hit yields `value`."""

    keywords: Tuple[str, ...]
    value: object

    def matches(self, lowered: str) -> bool:
        return any_keyword(lowered, self.keywords)


def first_match(rules: Sequence[Rule], lowered: str, default=None):
    """Evaluate rules top-to-bottom; the first hit wins."""
    for rule in rules:
        if rule.matches(lowered):
            return rule.value
    return default


# -----------------------------
# Intent tables
# -----------------------------

INTENT_RULES: Tuple[Rule, ...] = (
    Rule(("write", "create", "generate"), ("creation", "generate")),
    Rule(("explain", "describe", "what is"), ("explanation", "explain")),
    Rule(("compare", "difference", "vs"), ("comparison", "compare")),
    Rule(("how to", "steps", "guide"), ("instruction", "instruct")),
    Rule(("analyze", "evaluate", "assess"), ("analysis", "analyze")),
)

SPECIFICITY_RULES: Tuple[Rule, ...] = (
    Rule(("specific", "detailed", "comprehensive"), "high"),
    Rule(("brief", "simple", "quick"), "low"),
)

FORMAT_RULES: Tuple[Rule, ...] = (
    Rule(("list", "bullet", "points"), "list"),
    Rule(("table", "chart", "format"), "structured"),
    Rule(("paragraph", "essay", "story"), "narrative"),
)

# -----------------------------
# Context tables
# -----------------------------

# value = (domain, coupled field overrides)
DOMAIN_RULES: Tuple[Rule, ...] = (
    Rule(("business", "professional", "work"),
         ("business", {"tone": "professional"})),
    Rule(("technical", "code", "programming"),
         ("technical", {"complexity": "high"})),
    Rule(("creative", "story", "art"), ("creative", {"tone": "casual"})),
    Rule(("academic", "research", "study"), ("academic", {"tone": "formal"})),
    Rule(("trip", "travel", "vacation", "destination", "beach"),
         ("travel", {"tone": "casual"})),
    Rule(("movie", "film", "watch", "entertainment", "series"),
         ("entertainment", {"tone": "casual"})),
)

AUDIENCE_RULES: Tuple[Rule, ...] = (
    Rule(("beginner", "simple", "basic"), ("beginner", "low")),
    Rule(("expert", "advanced", "professional"), ("expert", "high")),
)


class IntentDetector:
    """
    Keyword classifier for intent and context.
    Rules are ordered tables so precedence can be read (and tested) row by row.
    """

    def __init__(
        self,
        intent_rules: Sequence[Rule] = INTENT_RULES,
        domain_rules: Sequence[Rule] = DOMAIN_RULES,
        audience_rules: Sequence[Rule] = AUDIENCE_RULES,
    ):
        self.intent_rules = tuple(intent_rules)
        self.domain_rules = tuple(domain_rules)
        self.audience_rules = tuple(audience_rules)

    def detect(self, prompt: str) -> Intent:
        lowered = (prompt or "").lower()
        intent_type, action = first_match(
            self.intent_rules, lowered, ("general", "request"))
        return Intent(
            type=intent_type,
            action=action,
            specificity=first_match(SPECIFICITY_RULES, lowered, "low"),
            format=first_match(FORMAT_RULES, lowered, "none"),
        )

    def detect_context(self, prompt: str) -> Context:
        lowered = (prompt or "").lower()
        fields = Context().model_dump()

        hit: Optional[tuple] = first_match(self.domain_rules, lowered)
        if hit is not None:
            domain, coupled = hit
            fields["domain"] = domain
            fields.update(coupled)

        audience = first_match(self.audience_rules, lowered)
        if audience is not None:
            fields["audience"], fields["complexity"] = audience

        return Context(**fields)


_default_detector = IntentDetector()


def classify_intent(prompt: str) -> Intent:
    return _default_detector.detect(prompt)


def classify_context(prompt: str) -> Context:
    return _default_detector.detect_context(prompt)
