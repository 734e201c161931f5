# prompt_tracer/optimizer/sanitize.py
# coding: utf-8
from __future__ import annotations

import re

from sklearn.feature_extraction.text import CountVectorizer
from sklearn.metrics.pairwise import cosine_similarity

# "Optimized prompt:", "**Optimized Version:**", ... ; the text after the last
# such marker is the rewrite.
OPTIMIZED_SECTION = re.compile(
    r"(?im)^\s*[*_#\s]*(?:the\s+)?(?:optimized|improved|rewritten)(?:\s+(?:prompt|version))?\s*[*_]*:[*_]*\s*"
)
CODE_FENCE_OPEN = re.compile(r"^```[a-zA-Z]*\s*\n")
CODE_FENCE_CLOSE = re.compile(r"\n?```\s*$")

META_PREFIXES = [
    re.compile(p, re.IGNORECASE)
    for p in (
        r"^(?:sure|certainly|of course|absolutely|okay|ok)\b(?:[!,.:]+|[ \t]*(?:\n|$))\s*",
        r"^here(?:'s| is) (?:the |an |a |your )?(?:optimized|improved|rewritten|revised|enhanced)"
        r"(?: version of (?:the |your )?prompt| prompt| version)?[^:\n]*:\s*",
        r"^here you go\b(?:[!,.:]+|[ \t]*(?:\n|$))\s*",
        r"^i(?:'ve| have) (?:optimized|improved|rewritten|revised) (?:the |your )?prompt[^:\n]*[:.]\s*",
    )
]

QUOTE_PAIRS = {'"': '"', "'": "'", "“": "”", "‘": "’", "«": "»"}


def normalize_prompt(prompt: str) -> str:
    # normalize whitespace + trim
    p = (prompt or "").strip()
    p = " ".join(p.split())
    return p


def extract_optimized_section(text: str) -> str:
    matches = list(OPTIMIZED_SECTION.finditer(text))
    if not matches:
        return text
    tail = text[matches[-1].end():].strip()
    return tail or text


def strip_code_fences(text: str) -> str:
    out = CODE_FENCE_OPEN.sub("", text.strip())
    return CODE_FENCE_CLOSE.sub("", out).strip()


def strip_meta_commentary(text: str) -> str:
    out = text.strip()
    changed = True
    while changed and out:
        changed = False
        for pattern in META_PREFIXES:
            stripped = pattern.sub("", out, count=1).strip()
            if stripped != out:
                out = stripped
                changed = True
    return out


def _quotes_inside(inner: str, open_quote: str, close_quote: str) -> bool:
    # an apostrophe between two word characters ("don't") is not a quote
    for q in {open_quote, close_quote}:
        q = re.escape(q)
        if re.search(rf"(?<!\w){q}|{q}(?!\w)", inner):
            return True
    return False


def strip_wrapping_quotes(text: str) -> str:
    """Remove quotes only when the first and last characters are one pair."""
    out = text.strip()
    while len(out) >= 2 and QUOTE_PAIRS.get(out[0]) == out[-1]:
        if _quotes_inside(out[1:-1], out[0], out[-1]):
            break
        out = out[1:-1].strip()
    return out


def sanitize_response(text: str) -> str:
    """
    Clean a remote rewrite down to the prompt itself.
    """
    out = (text or "").strip()
    if not out:
        return ""
    out = strip_code_fences(out)
    out = extract_optimized_section(out)
    out = strip_meta_commentary(out)
    out = strip_code_fences(out)
    out = strip_wrapping_quotes(out)
    return out


def token_similarity(a: str, b: str) -> float:
    """Cosine similarity of the two texts' word counts (0.0 when neither has words)."""
    vectorizer = CountVectorizer(lowercase=True, token_pattern=r"(?u)\b\w+\b")
    try:
        matrix = vectorizer.fit_transform([a or "", b or ""])
    except ValueError:
        # empty vocabulary
        return 0.0
    return float(cosine_similarity(matrix[0], matrix[1])[0, 0])


def is_unchanged(original: str, candidate: str, threshold: float = 1.0) -> bool:
    """
    True when `candidate` adds nothing over `original`: byte-equal, equal after
    whitespace/case normalization, or at least `threshold` similar by words.
    A threshold above 1.0 disables the similarity check.
    """
    if candidate == original:
        return True
    if normalize_prompt(candidate).lower() == normalize_prompt(original).lower():
        return True
    if threshold > 1.0:
        return False
    return token_similarity(original, candidate) >= threshold
