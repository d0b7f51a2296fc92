"""Rewrite sample text and analyze writing samples with the AI service."""

from __future__ import annotations

from typing import Mapping, Sequence

from flask import current_app

from ..metrics import record_ai_call
from .ai_client import AIServiceError, get_ai_client
from .style_prompt import cta_guidance, structure_guidance
from .style_rules import CTA_OPTIONS, SCALE_DIMENSIONS, scale_value


def build_rewrite_prompt(generated_prompt: str, content: str) -> str:
    return (
        f"{generated_prompt}\n\n"
        "Now, using the writing style preferences outlined above, rewrite the following "
        f'text to match this exact style:\n\n"{content}"\n\nRewritten version:'
    )


def build_fallback_prompt(content: str, survey_data: Mapping) -> str:
    """Describe the preferences inline when no style guide has been generated yet."""

    lines = [
        "You are a professional writing assistant. Rewrite the text below so it follows "
        "these writing style preferences:",
        "",
    ]
    for dimension in SCALE_DIMENSIONS:
        value = scale_value(survey_data, dimension.key)
        lines.append(
            f"- {dimension.heading}: {dimension.label(value)} ({value}/5). {dimension.guidance(value)}."
        )
    cta_style = survey_data.get("cta_style") or ""
    cta_label = CTA_OPTIONS[cta_style][0] if cta_style in CTA_OPTIONS else "Not specified"
    lines.append(f"- Call-to-action style: {cta_label}. {cta_guidance(cta_style)}.")
    lines.append(f"- Structure: {structure_guidance(survey_data.get('structural_elements') or [])}")
    lines.append(f"- Audience: {survey_data.get('company_audience_context', '')}")
    lines.append(f"- Industry: {survey_data.get('company_industry', '')}")
    lines.extend(
        [
            "",
            f'Original text:\n"{content}"',
            "",
            "Return only the rewritten text.",
        ]
    )
    return "\n".join(lines)


def build_style_analysis_prompt(samples: Sequence[Mapping]) -> str:
    blocks = []
    for index, sample in enumerate(samples, start=1):
        blocks.append(f"Sample {index}: {sample['title']}\n{sample['content']}")
    joined = "\n\n---\n\n".join(blocks)
    return (
        "Analyze the writing style of the following samples. Describe the author's "
        "formality, pacing and density, use of industry jargon, warmth and empathy, "
        "directness, the balance between authority and approachability, recurring "
        "structural habits, and how they phrase calls to action. Finish with a short "
        "list of concrete guidelines another writer could follow to imitate this style.\n\n"
        f"{joined}"
    )


def _run(operation: str, prompt: str) -> str:
    client = get_ai_client()
    try:
        text = client.complete_text(prompt)
    except AIServiceError as exc:
        record_ai_call(operation, "error")
        current_app.logger.error(
            "AI %s failed: %s",
            operation,
            exc,
            extra={"event": "ai_call_failed", "operation": operation},
        )
        raise
    record_ai_call(operation, "success")
    return text


def generate_preview(
    content: str,
    survey_data: Mapping,
    generated_prompt: str | None = None,
) -> str:
    style_guide = generated_prompt or survey_data.get("generated_prompt")
    if style_guide and style_guide.strip():
        prompt = build_rewrite_prompt(style_guide, content)
    else:
        prompt = build_fallback_prompt(content, survey_data)
    return _run("preview", prompt)


def analyze_writing_style(samples: Sequence[Mapping]) -> str:
    return _run("analyze_style", build_style_analysis_prompt(samples))
