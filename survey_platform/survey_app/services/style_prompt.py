"""Build the style-guide prompt document from validated survey answers."""

from __future__ import annotations

from typing import Mapping

from .style_rules import (
    DEFAULT_AUDIENCE_CONTEXT,
    DEFAULT_INDUSTRY,
    SCALE_DIMENSIONS,
    scale_value,
)

DEFAULT_COMPANY_NAME = "Diamond Consultants"

STRUCTURE_FALLBACK = "Use clear, logical structure appropriate to the content type"

CTA_GUIDANCE = {
    "direct": (
        "Use direct, clear calls-to-action that specify exactly what you want the "
        "recipient to do and when"
    ),
    "benefit": (
        "Frame calls-to-action around benefits to the recipient, showing value before "
        "making requests"
    ),
    "soft": "Use gentle, non-pressure language that invites rather than demands action",
    "minimal": (
        "Keep calls-to-action infrequent and weave them subtly into the context rather "
        "than stating them as explicit requests"
    ),
}
CTA_GUIDANCE_FALLBACK = (
    "Provide clear next steps while maintaining a professional, collaborative tone"
)


def _preamble(company_name: str) -> str:
    return (
        f"# AI Writing Style Guide for {company_name}\n"
        "\n"
        "## Core Writing Instructions\n"
        "\n"
        f"You are writing for {company_name}, a premier executive recruiting firm. "
        "Your writing should reflect the following personalized style preferences:"
    )


def _scale_sections(survey_data: Mapping) -> list[str]:
    sections = []
    for index, dimension in enumerate(SCALE_DIMENSIONS, start=1):
        value = scale_value(survey_data, dimension.key)
        sections.append(
            f"### {index}. **{dimension.heading}**\n"
            f"- **Setting:** {dimension.label(value)} ({value}/5)\n"
            f"- **Application:** {dimension.guidance(value)}"
        )
    return sections


def structure_guidance(elements) -> str:
    if not elements:
        return STRUCTURE_FALLBACK
    bullets = "\n".join(f"- {element}" for element in elements)
    return f"Always include these structural elements:\n{bullets}"


def cta_guidance(cta_style: str | None) -> str:
    return CTA_GUIDANCE.get(cta_style or "", CTA_GUIDANCE_FALLBACK)


def _closing(company_name: str) -> str:
    return (
        "## Professional Excellence\n"
        "\n"
        f"Maintain the high standards expected from {company_name}' communications while "
        "staying true to this personalized style profile. The goal is to create a "
        "distinctive, professional voice that resonates with your specific audience while "
        f"maintaining {company_name}' reputation for excellence."
    )


def generate_writing_prompt(
    survey_data: Mapping,
    company_name: str = DEFAULT_COMPANY_NAME,
) -> str:
    """Render the full style guide for one respondent.

    ``survey_data`` is a dict produced by ``SurveyDataSchema().load``. The output
    depends only on its values, so identical input always renders the same text.
    """

    audience = survey_data.get("company_audience_context", DEFAULT_AUDIENCE_CONTEXT)
    industry = survey_data.get("company_industry", DEFAULT_INDUSTRY)
    sections = [
        _preamble(company_name),
        *_scale_sections(survey_data),
        "## Content Structure Requirements",
        structure_guidance(survey_data.get("structural_elements") or []),
        "## Call-to-Action Style",
        cta_guidance(survey_data.get("cta_style")),
        "## Target Audience Context",
        f"**Primary Audience:** {audience}\n**Industry Focus:** {industry}",
        _closing(company_name),
    ]
    return "\n\n".join(sections)
