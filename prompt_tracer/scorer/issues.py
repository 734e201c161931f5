# prompt_tracer/scorer/issues.py
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Tuple

from pydantic import BaseModel, ConfigDict


class Issue(BaseModel):
    model_config = ConfigDict(frozen=True)

    category: str
    issue: str
    suggestion: str


@dataclass(frozen=True)
class IssueRule:
    category: str
    issue: str
    pattern: re.Pattern
    suggestion: str
    # "absent" rules fire when the pattern does NOT occur
    absent: bool = False

    def fires(self, text: str) -> bool:
        found = self.pattern.search(text) is not None
        return not found if self.absent else found


def _words(*words: str) -> re.Pattern:
    return re.compile(r"\b(" + "|".join(words) + r")\b", re.IGNORECASE)


ISSUE_RULES: Tuple[IssueRule, ...] = (
    IssueRule("Improve Clarity", "Run-on sentences", re.compile(r"[^.!?]{100,}"),
              "Break into shorter, focused sentences"),
    IssueRule("Improve Clarity", "Vague language",
              _words("good", "bad", "nice", "interesting", "stuff", "things"),
              "Use more specific and descriptive language"),
    IssueRule("Improve Clarity", "Ambiguous pronouns",
              _words("it", "this", "that", "these", "those"),
              "Replace pronouns with specific nouns for clarity"),
    IssueRule("Add Specificity", "Missing context",
              _words("explain", "describe", "analyze"),
              "Add specific context, examples, or constraints"),
    IssueRule("Add Specificity", "No target audience",
              _words("for", "to", "as", "like"),
              "Specify your target audience or expertise level", absent=True),
    IssueRule("Add Specificity", "No constraints or limitations",
              _words("within", "limit", "only", "max", "min"),
              "Add constraints or limitations to focus the response", absent=True),
    IssueRule("Improve Structure", "No clear objective",
              _words("goal", "objective", "purpose", "aim"),
              "Start with a clear objective or goal", absent=True),
    IssueRule("Improve Structure", "Missing format specification",
              _words("format", "output", "response", "answer"),
              "Specify desired output format or structure", absent=True),
    IssueRule("Improve Structure", "No step-by-step guidance",
              _words("step", "first", "then", "finally", "process"),
              "Request step-by-step guidance for complex tasks", absent=True),
    IssueRule("Enhance Engagement", "No examples requested",
              _words("example", "instance", "case", "scenario"),
              "Request specific examples or case studies", absent=True),
    IssueRule("Enhance Engagement", "No comparison requested",
              _words("compare", "versus", "vs", "difference", "similar"),
              "Ask for comparisons to provide better context", absent=True),
    IssueRule("Enhance Engagement", "No practical application",
              _words("apply", "practice", "real-world", "practical"),
              "Request practical applications or real-world examples", absent=True),
)


def detect_issues(prompt: str) -> List[Issue]:
    text = prompt or ""
    if not text.strip():
        return []
    return [
        Issue(category=r.category, issue=r.issue, suggestion=r.suggestion)
        for r in ISSUE_RULES
        if r.fires(text)
    ]
