# prompt_tracer/scorer/metrics.py
from __future__ import annotations

from typing import Callable, Dict

from pydantic import BaseModel, ConfigDict, Field

from prompt_tracer.scorer.features import Features, count_keywords, extract_features

CORE_METRICS = ("clarity", "specificity", "structure",
                "context", "intent", "completeness")
ADVISORY_METRICS = ("creativity", "precision", "engagement",
                    "adaptability", "technical_quality", "output_potential")
ALL_METRICS = CORE_METRICS + ADVISORY_METRICS

# Keyword lists (lower-case). Each distinct hit counts once.
CLARITY_WORDS = ["explain", "describe", "show", "demonstrate", "illustrate"]
SPECIFIC_WORDS = ["specific", "detailed", "concrete", "particular", "exact"]
REFERENCE_WORDS = ["for", "about", "regarding", "concerning", "related to"]
STRUCTURE_WORDS = ["first", "second", "finally",
                   "next", "then", "also", "however"]
DOMAIN_WORDS = {
    "business": ["business", "professional", "company", "industry", "market"],
    "technical": ["code", "programming", "software", "technical", "algorithm"],
    "academic": ["research", "study", "analysis", "academic", "theoretical"],
    "creative": ["creative", "story", "art", "design", "imaginative"],
}
AUDIENCE_WORDS = ["beginner", "expert", "professional", "student", "user"]
PURPOSE_WORDS = ["goal", "objective", "purpose", "aim", "target"]
ACTION_VERBS = ["write", "create", "explain", "analyze", "compare", "evaluate"]
POLITE_MARKERS = ["please", "can you", "could you"]
DETAIL_WORDS = ["detailed", "comprehensive",
                "complete", "thorough", "extensive"]

CREATIVE_WORDS = [
    "innovative", "creative", "unique", "original", "imaginative", "inspiring",
    "breakthrough", "revolutionary", "cutting-edge", "state-of-the-art",
    "novel", "fresh", "dynamic", "vibrant", "compelling", "engaging",
]
METAPHOR_WORDS = ["like", "as", "similar to",
                  "reminds me of", "imagine", "picture"]
CREATIVE_QUESTIONS = ["what if", "how might",
                      "imagine if", "suppose", "consider"]
TIME_WORDS = ["today", "yesterday", "tomorrow", "this week", "next month",
              "by", "until", "before", "after"]
PRECISION_TERMS = ["algorithm", "methodology", "framework",
                   "protocol", "specification", "requirement"]
INTERACTIVE_WORDS = ["you", "your", "we", "our",
                     "let's", "together", "collaborate"]
EMOTIONAL_WORDS = [
    "excited", "thrilled", "amazing", "incredible", "fantastic", "wonderful",
    "concerned", "worried", "important", "crucial", "critical", "urgent",
    "love", "passionate", "dedicated", "committed", "motivated",
]
ENGAGING_ACTIONS = ["create", "build", "develop", "implement",
                    "execute", "launch", "achieve", "accomplish"]
FLEXIBLE_WORDS = ["could", "might", "possibly", "perhaps",
                  "maybe", "potentially", "alternatively"]
OPTION_WORDS = ["or", "either", "alternatively",
                "option 1", "option 2", "choice"]
CONDITIONAL_WORDS = ["if", "when", "unless", "provided that", "assuming"]
SCALABLE_WORDS = ["scale", "expand", "adjust", "modify", "customize", "adapt"]
TECHNICAL_TERMS = [
    "algorithm", "database", "api", "framework", "architecture", "optimization",
    "performance", "scalability", "security", "authentication", "encryption",
    "integration", "deployment", "configuration", "implementation",
]
CODE_TERMS = ["function", "variable", "class",
              "method", "parameter", "syntax", "debug"]
PROCESS_WORDS = ["step", "process", "procedure",
                 "workflow", "sequence", "order"]
PROBLEM_WORDS = ["analyze", "diagnose",
                 "troubleshoot", "resolve", "fix", "debug"]
COMPREHENSIVE_WORDS = ["detailed", "comprehensive", "thorough",
                       "complete", "extensive", "in-depth"]
FORMAT_WORDS = ["format", "structure", "template",
                "outline", "list", "table", "chart", "diagram"]
QUALITY_WORDS = ["high-quality", "professional", "expert",
                 "advanced", "sophisticated", "polished"]
PRECISE_WORDS = ["specific", "exact", "precise", "particular", "detailed"]


def _clamp(score: float) -> int:
    return int(max(0, min(100, round(score))))


class MetricSet(BaseModel):
    """Twelve independent 0-100 scores. Only the core six feed the grade."""

    model_config = ConfigDict(frozen=True)

    clarity: int = Field(default=0, ge=0, le=100)
    specificity: int = Field(default=0, ge=0, le=100)
    structure: int = Field(default=0, ge=0, le=100)
    context: int = Field(default=0, ge=0, le=100)
    intent: int = Field(default=0, ge=0, le=100)
    completeness: int = Field(default=0, ge=0, le=100)
    creativity: int = Field(default=0, ge=0, le=100)
    precision: int = Field(default=0, ge=0, le=100)
    engagement: int = Field(default=0, ge=0, le=100)
    adaptability: int = Field(default=0, ge=0, le=100)
    technical_quality: int = Field(default=0, ge=0, le=100)
    output_potential: int = Field(default=0, ge=0, le=100)

    def as_dict(self) -> Dict[str, int]:
        return {name: getattr(self, name) for name in ALL_METRICS}

    def core(self) -> Dict[str, int]:
        return {name: getattr(self, name) for name in CORE_METRICS}

    def core_average(self) -> float:
        return sum(self.core().values()) / len(CORE_METRICS)

    def average(self) -> float:
        return sum(self.as_dict().values()) / len(ALL_METRICS)


# -----------------------------
# Core metrics
# -----------------------------

def score_clarity(f: Features) -> int:
    score = 50

    if f.word_count < 5:
        score -= 30
    elif f.word_count < 15:
        score -= 15
    elif f.word_count > 100:
        score -= 10
    else:
        score += 10

    avg = f.avg_sentence_length
    if avg < 5:
        score -= 10
    elif avg > 25:
        score -= 15
    else:
        score += 10

    if f.has_question_mark:
        score += 10
    if f.has_exclamation:
        score += 5
    if f.has_colon:
        score += 5

    score += 5 * count_keywords(f.lowered, CLARITY_WORDS)
    return _clamp(score)


def score_specificity(f: Features) -> int:
    score = 30
    score += min(10 * count_keywords(f.lowered, SPECIFIC_WORDS), 30)
    score += min(5 * f.number_tokens, 25)
    score += min(3 * f.proper_noun_tokens, 20)
    score += min(2 * f.acronym_tokens, 15)
    score += 5 * count_keywords(f.lowered, REFERENCE_WORDS)
    return _clamp(score)


def score_structure(f: Features) -> int:
    score = 40

    if f.paragraph_count > 1:
        score += 15

    # sentence variety
    if f.question_sentences:
        score += 10
    if f.exclamation_sentences:
        score += 5
    if f.declarative_sentences:
        score += 10

    if f.has_newline:
        score += 10
    if "-" in f.text:
        score += 5
    if "•" in f.text:
        score += 5

    score += 3 * count_keywords(f.lowered, STRUCTURE_WORDS)
    return _clamp(score)


def score_context(f: Features) -> int:
    score = 25
    for keywords in DOMAIN_WORDS.values():
        score += 8 * count_keywords(f.lowered, keywords)
    score += 10 * count_keywords(f.lowered, AUDIENCE_WORDS)
    score += 8 * count_keywords(f.lowered, PURPOSE_WORDS)
    return _clamp(score)


def score_intent(f: Features) -> int:
    score = 35
    score += 12 * count_keywords(f.lowered, ACTION_VERBS)
    if count_keywords(f.lowered, POLITE_MARKERS):
        score += 10
    if f.has_question_mark:
        score += 15
    if f.has_exclamation:
        score += 5
    return _clamp(score)


def score_completeness(f: Features) -> int:
    score = 30

    if f.word_count > 20:
        score += 15
    if f.sentence_count > 2:
        score += 10

    score += 8 * count_keywords(f.lowered, DETAIL_WORDS)
    if count_keywords(f.lowered, ["example", "instance"]):
        score += 10
    if count_keywords(f.lowered, ["format", "style"]):
        score += 8
    if count_keywords(f.lowered, ["limit", "maximum"]):
        score += 8
    return _clamp(score)


# -----------------------------
# Advisory metrics
# -----------------------------

def score_creativity(f: Features) -> int:
    score = 30
    score += min(8 * count_keywords(f.lowered, CREATIVE_WORDS), 40)
    score += min(5 * count_keywords(f.lowered, METAPHOR_WORDS), 20)
    score += min(5 * count_keywords(f.lowered, CREATIVE_QUESTIONS), 10)
    return _clamp(score)


def score_precision(f: Features) -> int:
    score = 40
    score += min(5 * f.number_tokens, 25)
    score += min(4 * count_keywords(f.lowered, TIME_WORDS), 15)
    score += min(2 * f.proper_noun_tokens, 10)
    score += min(3 * count_keywords(f.lowered, PRECISION_TERMS), 10)
    return _clamp(score)


def score_engagement(f: Features) -> int:
    score = 35
    score += min(4 * count_keywords(f.lowered, INTERACTIVE_WORDS), 25)
    score += min(5 * count_keywords(f.lowered, EMOTIONAL_WORDS), 20)
    score += min(3 * count_keywords(f.lowered, ENGAGING_ACTIONS), 15)
    score += min(3 * f.text.count("?"), 5)
    return _clamp(score)


def score_adaptability(f: Features) -> int:
    score = 30
    score += min(5 * count_keywords(f.lowered, FLEXIBLE_WORDS), 25)
    score += min(4 * count_keywords(f.lowered, OPTION_WORDS), 20)
    score += min(3 * count_keywords(f.lowered, CONDITIONAL_WORDS), 15)
    score += min(4 * count_keywords(f.lowered, SCALABLE_WORDS), 10)
    return _clamp(score)


def score_technical_quality(f: Features) -> int:
    score = 40
    score += min(4 * count_keywords(f.lowered, TECHNICAL_TERMS), 30)
    score += min(3 * count_keywords(f.lowered, CODE_TERMS), 15)
    score += min(2 * count_keywords(f.lowered, PROCESS_WORDS), 10)
    score += min(3 * count_keywords(f.lowered, PROBLEM_WORDS), 5)
    return _clamp(score)


def score_output_potential(f: Features) -> int:
    score = 35
    score += min(8 * count_keywords(f.lowered, COMPREHENSIVE_WORDS), 25)
    score += min(4 * count_keywords(f.lowered, FORMAT_WORDS), 15)
    score += min(5 * count_keywords(f.lowered, QUALITY_WORDS), 15)

    if f.word_count > 50:
        score += 10
    if f.sentence_count > 3:
        score += 5
    if f.has_colon:
        score += 5
    if f.has_newline:
        score += 5

    score += min(4 * count_keywords(f.lowered, PRECISE_WORDS), 10)
    return _clamp(score)


SCORERS: Dict[str, Callable[[Features], int]] = {
    "clarity": score_clarity,
    "specificity": score_specificity,
    "structure": score_structure,
    "context": score_context,
    "intent": score_intent,
    "completeness": score_completeness,
    "creativity": score_creativity,
    "precision": score_precision,
    "engagement": score_engagement,
    "adaptability": score_adaptability,
    "technical_quality": score_technical_quality,
    "output_potential": score_output_potential,
}


def score_metrics(features: Features) -> MetricSet:
    return MetricSet(**{name: fn(features) for name, fn in SCORERS.items()})


def score_text(text: str) -> MetricSet:
    return score_metrics(extract_features(text))
