"""REST API blueprints (survey responses, AI helpers, metrics)."""

from __future__ import annotations

from .ai_bp import ai_bp
from .survey_bp import survey_bp
from .metrics_bp import metrics_bp

BLUEPRINTS = (
    (survey_bp, "/api/survey"),
    (ai_bp, "/api/ai"),
    (metrics_bp, ""),
)

__all__ = [
    "BLUEPRINTS",
    "ai_bp",
    "survey_bp",
    "metrics_bp",
]
