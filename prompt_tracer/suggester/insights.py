# prompt_tracer/suggester/insights.py
from __future__ import annotations

from typing import List, Literal

from pydantic import BaseModel, ConfigDict

from prompt_tracer.scorer.features import Features, any_keyword
from prompt_tracer.scorer.metrics import MetricSet

INSIGHT_THRESHOLD = 40
SUGGESTION_THRESHOLD = 50


class Insight(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: str
    message: str
    icon: str


class FeedbackItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["error", "warning", "info"]
    icon: str
    title: str
    message: str
    suggestion: str


# metric -> (message, icon), checked against INSIGHT_THRESHOLD
TARGETED_INSIGHTS = {
    "clarity": ("Try to be more clear and direct in your request.", "🎯"),
    "specificity": ("Add more specific details to get better results.", "📊"),
    "structure": ("Organize your prompt with clear sections or bullet points.", "📋"),
}

# metric -> actionable imperative, checked against SUGGESTION_THRESHOLD
SUGGESTIONS = {
    "context": "Add context about your audience or domain",
    "specificity": "Include specific examples or constraints",
    "structure": "Use bullet points or numbered lists for clarity",
    "completeness": "Specify the desired format or length",
}


def generate_insights(metrics: MetricSet) -> List[Insight]:
    """
    One general insight keyed off the average of all twelve metrics, then one
    per weak core metric.
    """
    avg = metrics.average()
    if avg < 30:
        insights = [Insight(
            type="improvement",
            message="Your prompt is quite basic. Consider adding more details and context.",
            icon="📝")]
    elif avg < 60:
        insights = [Insight(
            type="development",
            message="Good start! Your prompt could benefit from more structure and specificity.",
            icon="🚀")]
    else:
        insights = [Insight(
            type="excellent",
            message="Well-crafted prompt! You're using effective prompt engineering techniques.",
            icon="✨")]

    for metric, (message, icon) in TARGETED_INSIGHTS.items():
        if getattr(metrics, metric) < INSIGHT_THRESHOLD:
            insights.append(Insight(type=metric, message=message, icon=icon))
    return insights


def generate_suggestions(metrics: MetricSet) -> List[str]:
    return [
        text for metric, text in SUGGESTIONS.items()
        if getattr(metrics, metric) < SUGGESTION_THRESHOLD
    ]


def generate_feedback(features: Features, metrics: MetricSet) -> List[FeedbackItem]:
    """Live feedback shown while the user is still typing."""
    low = features.lowered
    out: List[FeedbackItem] = []

    if features.word_count < 5:
        out.append(FeedbackItem(
            type="error", icon="📝", title="Too Short",
            message="Your prompt is very brief. Longer prompts usually get better, more detailed responses.",
            suggestion="Add more context about what you want to know or achieve."))

    if metrics.clarity < 50:
        out.append(FeedbackItem(
            type="warning", icon="🎯", title="Unclear Request",
            message="Your prompt could be clearer. The AI might not understand exactly what you need.",
            suggestion='Use specific action words like "explain", "compare", "create", or "analyze".'))

    if metrics.specificity < 50:
        out.append(FeedbackItem(
            type="warning", icon="📊", title="Too Vague",
            message="Your prompt lacks specific details. More specific prompts get better results.",
            suggestion="Add details like: who is this for, what format you want, any constraints or preferences."))

    if metrics.context < 50 and not any_keyword(low, ["for", "about"]):
        out.append(FeedbackItem(
            type="info", icon="🌍", title="Missing Context",
            message="Adding context helps the AI provide more relevant responses.",
            suggestion='Specify your audience (e.g., "for beginners"), domain, or use case.'))

    if (metrics.structure < 50 and features.word_count > 10
            and not features.has_newline and not features.has_colon):
        out.append(FeedbackItem(
            type="info", icon="📋", title="Could Be Better Organized",
            message="Structured prompts with clear sections often get better organized responses.",
            suggestion="Use bullet points, numbered lists, or separate your request into clear parts."))

    if (metrics.intent < 50 and not features.has_question_mark
            and not any_keyword(low, ["please", "can you"])):
        out.append(FeedbackItem(
            type="info", icon="🎯", title="Unclear Intent",
            message="It's not clear what action you want the AI to take.",
            suggestion='Start with action words: "Explain...", "Create...", "Compare...", "Help me..."'))

    if "tell me" in low and features.word_count < 8:
        out.append(FeedbackItem(
            type="warning", icon="💬", title="Generic Request",
            message='"Tell me" is quite generic. Be more specific about what you want to learn.',
            suggestion='Instead of "Tell me about X", try "Explain X in simple terms" or "What are the key aspects of X?"'))

    if (any_keyword(low, ["best", "good", "nice"])
            and not any_keyword(low, ["why", "criteria", "compare"])):
        out.append(FeedbackItem(
            type="info", icon="⭐", title="Subjective Terms",
            message='Words like "best" or "good" are subjective. The AI needs criteria to judge.',
            suggestion='Add what makes it "best" for you: budget, location, features, etc.'))

    return out
