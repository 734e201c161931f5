# prompt_tracer/rewrite/stages.py
# coding: utf-8
"""
Rewrite stages. Every stage is a pure ``(text, analysis) -> text`` function
and leaves blank text untouched.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Dict, Tuple

from prompt_tracer.scorer.features import any_keyword
from prompt_tracer.scorer.local_score import Analysis
from prompt_tracer.scorer.metrics import ACTION_VERBS, CLARITY_WORDS

Stage = Callable[[str, Analysis], str]

VAGUE_REPLACEMENTS: Dict[str, str] = {
    "good": "effective",
    "bad": "ineffective",
    "nice": "well-designed",
    "interesting": "noteworthy",
    "stuff": "elements",
    "things": "components",
}
POLITE_OPENERS = ("please", "can you", "could you", "would you", "i need", "help me")
IMPERATIVE_VERBS = frozenset(ACTION_VERBS + CLARITY_WORDS + [
    "give", "list", "make", "tell", "find", "suggest", "recommend", "summarize",
    "plan", "draft", "design", "build", "translate", "teach", "provide", "outline",
    "review", "fix", "rewrite", "brainstorm", "develop", "calculate", "identify",
    "define", "generate", "help", "prepare", "propose", "rank",
])
QUESTION_WORDS = frozenset([
    "what", "how", "why", "when", "where", "who", "which", "is", "are",
    "can", "should", "do", "does", "will", "would",
])
FIRST_WORD = re.compile(r"[a-z]+")

SPECIFICITY_REQUEST = (
    "Please keep the response to about 300 words and use a clear format "
    "with headings or bullet points."
)
STRUCTURE_REQUEST = "Organize the answer into clearly labeled sections."
EXAMPLE_REQUEST = "Include at least one concrete example."
CONTEXT_REQUEST = "State any assumptions you make about my situation and who the answer is for."
CREATIVITY_REQUEST = (
    "Take an innovative angle: offer a few original ideas or unexpected "
    "framings rather than the most obvious answer."
)

DOMAIN_TEMPLATES: Dict[str, str] = {
    "business": "Please provide a professional, business-focused response with practical applications and ROI considerations.",
    "technical": "Please provide technical details, code examples where relevant, and implementation considerations.",
    "academic": "Please provide a well-researched response with citations, evidence, and academic rigor.",
    "travel": (
        "Please suggest specific destinations with the best time to visit, "
        "activities and attractions, accommodation options, and practical travel tips."
    ),
    "entertainment": (
        "Please suggest specific titles with a brief description of each, "
        "why they are worth watching, and where to find them."
    ),
}

INTENT_TEMPLATES: Dict[str, str] = {
    "creation": (
        "Please include:\n- Key requirements to cover\n- A clear outline or structure"
        "\n- Best practices to follow\n- A finished draft"
    ),
    "explanation": (
        "Please cover:\n- A clear definition\n- How it works\n- Examples or analogies"
        "\n- Practical applications"
    ),
    "comparison": (
        "Please provide a structured comparison including:\n- Key differences"
        "\n- Similarities\n- Pros and cons\n- Recommendation"
    ),
    "instruction": (
        "Please provide step-by-step instructions including:\n- Prerequisites"
        "\n- Detailed steps\n- Tips and warnings\n- Expected outcomes"
    ),
    "analysis": (
        "Please provide a comprehensive analysis including:\n- Key factors"
        "\n- Evidence and examples\n- Implications\n- Recommendations"
    ),
}

AUDIENCE_TEMPLATES: Dict[str, str] = {
    "beginner": "Please explain in simple terms and provide examples that beginners can understand.",
    "expert": "Please provide detailed, technical information suitable for professionals in this field.",
}

FORMAT_TEMPLATES: Dict[str, str] = {
    "list": "Please provide your response in a clear, bullet-pointed format.",
    "structured": "Please structure your response with clear sections and headings.",
}


def _append(text: str, block: str) -> str:
    return text.rstrip() + "\n\n" + block


def _lower_first(text: str) -> str:
    # keep acronyms and proper "I" intact
    if len(text) > 1 and (text[1].isupper() or text[:2] == "I "):
        return text
    return text[:1].lower() + text[1:]


# -----------------------------
# Metric-gated transforms
# -----------------------------

def replace_vague_language(text: str, analysis: Analysis) -> str:
    out = text
    for vague, specific in VAGUE_REPLACEMENTS.items():
        out = re.sub(rf"\b{vague}\b", specific, out, flags=re.IGNORECASE)
    return out


def split_compound_request(text: str, analysis: Analysis) -> str:
    """Turn one long "X and Y" request into two sentences."""
    stripped = text.strip()
    if re.search(r"[.!?]\s", stripped) or "\n" in stripped:
        return text
    head, sep, tail = stripped.partition(" and ")
    if not sep or len(head.split()) < 4 or len(tail.split()) < 4:
        return text
    return f"{head.rstrip(',')}. Also, {tail}"


def add_polite_imperative(text: str, analysis: Analysis) -> str:
    """
    "write a poem" -> "Please write a poem"; a bare topic such as "AI risks"
    becomes "Please tell me about AI risks".
    """
    stripped = text.lstrip()
    if stripped.lower().startswith(POLITE_OPENERS):
        return text
    first = FIRST_WORD.match(stripped.lower())
    word = first.group(0) if first else ""
    if word in IMPERATIVE_VERBS:
        return "Please " + _lower_first(stripped)
    if word in QUESTION_WORDS:
        return "Please answer this question: " + stripped
    return "Please tell me about " + stripped


def request_length_and_format(text: str, analysis: Analysis) -> str:
    return _append(text, SPECIFICITY_REQUEST)


def request_sections(text: str, analysis: Analysis) -> str:
    return _append(text, STRUCTURE_REQUEST)


def request_example(text: str, analysis: Analysis) -> str:
    return _append(text, EXAMPLE_REQUEST)


def request_assumptions(text: str, analysis: Analysis) -> str:
    return _append(text, CONTEXT_REQUEST)


def request_innovation(text: str, analysis: Analysis) -> str:
    return _append(text, CREATIVITY_REQUEST)


def _has_vague_words(text: str, analysis: Analysis) -> bool:
    return any_keyword(text.lower(), VAGUE_REPLACEMENTS)


def _is_wordy(text: str, analysis: Analysis) -> bool:
    return len(text.split()) > 10 and "\n" not in text


def _lacks_examples(text: str, analysis: Analysis) -> bool:
    return not any_keyword(text.lower(), ["example", "instance"])


def _is_creative(text: str, analysis: Analysis) -> bool:
    return analysis.intent.type == "creation" or analysis.context.domain == "creative"


def _always(text: str, analysis: Analysis) -> bool:
    return True


@dataclass(frozen=True)
class MetricRule:
    """Apply `transform` when `metric` (scaled to 0-1) is below `threshold`."""

    metric: str
    threshold: float
    transform: Stage
    when: Callable[[str, Analysis], bool] = _always

    def applies(self, text: str, analysis: Analysis) -> bool:
        score = getattr(analysis.metrics, self.metric) / 100.0
        return score < self.threshold and self.when(text, analysis)


METRIC_RULES: Tuple[MetricRule, ...] = (
    MetricRule("clarity", 0.6, replace_vague_language, _has_vague_words),
    MetricRule("clarity", 0.5, split_compound_request),
    MetricRule("clarity", 0.5, add_polite_imperative),
    MetricRule("specificity", 0.5, request_length_and_format),
    MetricRule("structure", 0.5, request_sections, _is_wordy),
    MetricRule("completeness", 0.5, request_example, _lacks_examples),
    MetricRule("context", 0.4, request_assumptions),
    MetricRule("creativity", 0.5, request_innovation, _is_creative),
)


# -----------------------------
# Stages
# -----------------------------

def metric_improvements(text: str, analysis: Analysis) -> str:
    if not text.strip():
        return text
    out = text
    for rule in METRIC_RULES:
        # gates see the prompt as written; transforms see the text so far
        if rule.applies(text, analysis):
            out = rule.transform(out, analysis)
    return out


def inject_context(text: str, analysis: Analysis) -> str:
    template = DOMAIN_TEMPLATES.get(analysis.context.domain)
    if not text.strip() or template is None:
        return text
    return _append(text, template)


def inject_intent(text: str, analysis: Analysis) -> str:
    template = INTENT_TEMPLATES.get(analysis.intent.type)
    if not text.strip() or template is None:
        return text
    return _append(text, template)


def inject_format_and_audience(text: str, analysis: Analysis) -> str:
    if not text.strip():
        return text
    out = text
    audience = AUDIENCE_TEMPLATES.get(analysis.context.audience)
    if audience:
        out = _append(out, audience)
    fmt = FORMAT_TEMPLATES.get(analysis.intent.format)
    if fmt:
        out = _append(out, fmt)
    return out


DEFAULT_STAGES: Tuple[Stage, ...] = (
    metric_improvements,
    inject_context,
    inject_intent,
    inject_format_and_audience,
)
