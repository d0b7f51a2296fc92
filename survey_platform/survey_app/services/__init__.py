"""Business logic modules (style rules, generators, AI client, persistence)."""

from . import (
    style_rules,
    style_prompt,
    sample_writer,
    survey_flow,
    survey_service,
    ai_client,
    ai_writer,
)

__all__ = [
    "style_rules",
    "style_prompt",
    "sample_writer",
    "survey_flow",
    "survey_service",
    "ai_client",
    "ai_writer",
]
