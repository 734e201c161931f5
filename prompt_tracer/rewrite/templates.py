# prompt_tracer/rewrite/templates.py
# coding: utf-8
from __future__ import annotations

import re
from typing import Callable, Tuple

from prompt_tracer.scorer.features import any_keyword

BLANK_TEMPLATE = (
    "Please help me write a clear, specific prompt. Ask me what topic I want "
    "to cover, who the answer is for, and what format the response should take."
)

GENERIC_TEMPLATE = """Please provide a comprehensive and detailed response about "{prompt}" that includes:

1. **Clear Definition**: What exactly is this and why is it important?
2. **Practical Examples**: Real-world applications and use cases
3. **Step-by-Step Guidance**: How to approach or implement this
4. **Common Challenges**: What difficulties people typically face
5. **Best Practices**: Tips and recommendations for success
6. **Resources**: Where to learn more or get help

Make your response actionable, informative, and easy to understand for someone who wants to learn about this topic."""

CLOSING_REQUEST = (
    "Please answer with specific examples, a clear structure, and practical next steps."
)


def _topic(prompt: str, pattern: str) -> str:
    topic = re.sub(pattern, "", prompt, flags=re.IGNORECASE)
    topic = " ".join(topic.split()).strip(" .?!,")
    return topic or "this topic"


def _explanation(prompt: str) -> str:
    topic = _topic(prompt, r"explain|what is|tell me about")
    return (
        f"Please explain {topic} in a clear and engaging way. I'd like to understand "
        "what it is, why it matters, key concepts, and real-world examples. "
        "Make it accessible and interesting."
    )


def _travel(prompt: str) -> str:
    return (
        "I'm planning a trip and need recommendations. Please suggest specific "
        "destinations with details about best time to visit, activities and "
        "attractions, accommodation options, and travel tips. Include both popular "
        "spots and hidden gems."
    )


def _entertainment(prompt: str) -> str:
    return (
        "I'm looking for entertainment recommendations. Please suggest specific "
        "titles with brief descriptions, why they're worth watching, where to find "
        "them, and similar recommendations if I enjoy these."
    )


def _ideas(prompt: str) -> str:
    topic = _topic(prompt, r"give me|ideas for|ideas|suggest|recommend")
    return (
        f"I need creative and practical ideas related to {topic}. Please provide "
        "specific suggestions with details about implementation, benefits, and any "
        "considerations I should know about."
    )


def _how_to(prompt: str) -> str:
    task = _topic(prompt, r"how to|guide|steps")
    return (
        f"I need guidance on how to {task}. Please provide clear, practical steps "
        "with explanations, tips for success, and things to watch out for."
    )


def _creation(prompt: str) -> str:
    request = " ".join(prompt.split()).rstrip(".?!")
    return (
        f'I need help with this request: "{request}". Please provide guidance on how '
        "to approach it, key elements to include, and tips for making it effective."
    )


def _comparison(prompt: str) -> str:
    return (
        "I'd like to compare the topics mentioned. Please provide a helpful comparison "
        "with key differences, similarities, pros and cons, and when each option "
        "might be best."
    )


def _generic(prompt: str) -> str:
    return GENERIC_TEMPLATE.format(prompt=" ".join(prompt.split()))


# Ordered coarse topic buckets; first match wins, generic is the default.
TOPIC_BUCKETS: Tuple[Tuple[str, Tuple[str, ...], Callable[[str], str]], ...] = (
    ("explanation", ("explain", "what is", "tell me about"), _explanation),
    ("travel", ("trip", "travel", "vacation", "destination", "beach"), _travel),
    ("entertainment", ("movie", "film", "watch", "entertainment", "series"), _entertainment),
    ("ideas", ("idea", "suggest", "recommend"), _ideas),
    ("how_to", ("how to", "guide", "steps"), _how_to),
    ("creation", ("write", "create", "generate"), _creation),
    ("comparison", ("compare",), _comparison),
)


def topic_bucket(prompt: str) -> str:
    lowered = (prompt or "").lower()
    if not lowered.strip():
        return "blank"
    for name, keywords, _ in TOPIC_BUCKETS:
        if any_keyword(lowered, keywords):
            return name
    return "generic"


def fallback_template(prompt: str) -> str:
    """
    Topic-aware replacement used when the stages produced no change.
    """
    bucket = topic_bucket(prompt)
    if bucket == "blank":
        return BLANK_TEMPLATE
    builders = {name: build for name, _, build in TOPIC_BUCKETS}
    return builders.get(bucket, _generic)(prompt)


# Fill-in-the-blank starting points offered to users.
STARTER_TEMPLATES = {
    "analysis": "Analyze [topic/subject] by examining [specific aspects]. Focus on [key points] and provide [type of insights].",
    "explanation": "Explain [concept] to someone with [expertise level] background. Include [specific examples] and [practical applications].",
    "comparison": "Compare [item A] and [item B] based on [criteria]. Highlight [key differences] and [similarities].",
    "recommendation": "Based on [context/situation], recommend [type of solution] that considers [constraints/requirements].",
}
