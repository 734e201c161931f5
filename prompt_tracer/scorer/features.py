# prompt_tracer/scorer/features.py
from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Iterable

# A sentence is a run of non-terminators followed by its (optional) terminators.
SENTENCE = re.compile(r"[^.!?]+([.!?]*)")
PARAGRAPH_BREAK = re.compile(r"\n\s*\n")
NUMBER = re.compile(r"\d+(?:\.\d+)?")
PROPER_NOUN = re.compile(r"[A-Z][a-z]+")
ACRONYM = re.compile(r"\b[A-Z]{2,}\b")


@dataclass(frozen=True)
class Features:
    text: str
    lowered: str
    word_count: int
    sentence_count: int
    paragraph_count: int
    has_question_mark: bool
    has_exclamation: bool
    has_colon: bool
    has_newline: bool
    number_tokens: int
    proper_noun_tokens: int
    acronym_tokens: int
    question_sentences: int
    exclamation_sentences: int
    declarative_sentences: int

    @property
    def avg_sentence_length(self) -> float:
        return self.word_count / max(self.sentence_count, 1)


def _split_sentences(text: str) -> list[tuple[str, str]]:
    out = []
    for m in SENTENCE.finditer(text):
        body = m.group(0)[: len(m.group(0)) - len(m.group(1))]
        if body.strip():
            out.append((body.strip(), m.group(1)))
    return out


def extract_features(text: str) -> Features:
    """
    Derive primitive counts from raw prompt text.
    Never fails: an empty string yields all-zero counts.
    """
    text = text or ""
    words = text.split()
    sentences = _split_sentences(text)
    paragraphs = [p for p in PARAGRAPH_BREAK.split(text) if p.strip()]

    questions = sum(1 for _, term in sentences if "?" in term)
    exclamations = sum(1 for _, term in sentences if "!" in term and "?" not in term)

    return Features(
        text=text,
        lowered=text.lower(),
        word_count=len(words),
        sentence_count=len(sentences),
        paragraph_count=len(paragraphs),
        has_question_mark="?" in text,
        has_exclamation="!" in text,
        has_colon=":" in text,
        has_newline="\n" in text,
        number_tokens=len(NUMBER.findall(text)),
        proper_noun_tokens=len(PROPER_NOUN.findall(text)),
        acronym_tokens=len(ACRONYM.findall(text)),
        question_sentences=questions,
        exclamation_sentences=exclamations,
        declarative_sentences=len(sentences) - questions - exclamations,
    )


@lru_cache(maxsize=512)
def _keyword_pattern(keyword: str) -> re.Pattern:
    # Short keywords ("ai", "vs", "or") must stand alone; longer ones also
    # match inflections ("explain" -> "explaining").
    tail = r"\b" if len(keyword) <= 3 else ""
    return re.compile(r"\b" + re.escape(keyword) + tail)


def has_keyword(lowered: str, keyword: str) -> bool:
    return _keyword_pattern(keyword).search(lowered) is not None


def count_keywords(lowered: str, keywords: Iterable[str]) -> int:
    """Number of distinct keywords present in the lower-cased text."""
    return sum(1 for kw in keywords if has_keyword(lowered, kw))


def any_keyword(lowered: str, keywords: Iterable[str]) -> bool:
    return any(has_keyword(lowered, kw) for kw in keywords)
