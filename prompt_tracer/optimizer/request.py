# prompt_tracer/optimizer/request.py
from __future__ import annotations

from prompt_tracer.scorer.local_score import Analysis

SYSTEM = (
    "You are an expert prompt engineer. Provide only the optimized prompt, "
    "no explanations or additional text."
)

USER_TEMPLATE = """Please optimize the following prompt to make it more effective and clear.

ORIGINAL PROMPT:
"{prompt}"

ANALYSIS:
- Current Score: {score}/100 ({quality})
- Intent: {intent} (format: {format})
- Context: {domain} domain, {audience} audience, {tone} tone
- Weakest metrics: {weakest}
- Issues Found:
{issues}

TASK: Rewrite this prompt to address the identified issues and make it more effective. The optimized prompt should:
1. Be clear and specific
2. Include necessary context and constraints
3. Specify the desired output format when helpful
4. Be concise but comprehensive
5. Maintain the original intent while improving structure

Return ONLY the optimized prompt, nothing else."""


def build_rewrite_request(prompt: str, analysis: Analysis) -> str:
    core = analysis.metrics.core()
    weakest = sorted(core, key=lambda m: core[m])[:3]
    issues = "\n".join(f"- {i.issue}" for i in analysis.issues) or "- none"

    return USER_TEMPLATE.format(
        prompt=prompt,
        score=analysis.score,
        quality=analysis.quality.value,
        intent=analysis.intent.type,
        format=analysis.intent.format,
        domain=analysis.context.domain,
        audience=analysis.context.audience,
        tone=analysis.context.tone,
        weakest=", ".join(f"{m} ({core[m]})" for m in weakest),
        issues=issues,
    )
