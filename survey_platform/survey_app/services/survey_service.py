"""Survey response persistence keyed by session identifier."""

from __future__ import annotations

from typing import Mapping

from flask import current_app
from sqlalchemy.exc import IntegrityError

from ..extensions import db
from ..models import SurveyResponse
from ..models.survey import utc_timestamp
from .style_rules import DIMENSIONS_BY_KEY, scale_value

BULLET_ELEMENT = "Bullet points or numbered lists"
HEADER_ELEMENT = "Subheadings to break up text"


class SurveyError(Exception):
    def __init__(self, message: str, session_id: str | None = None):
        super().__init__(message)
        self.message = message
        self.session_id = session_id


class SurveyConflict(SurveyError):
    pass


class SurveyNotFound(SurveyError):
    pass


def find_response(session_id: str) -> SurveyResponse | None:
    return SurveyResponse.query.filter_by(session_id=session_id).first()


def get_response(session_id: str) -> SurveyResponse:
    response = find_response(session_id)
    if response is None:
        raise SurveyNotFound("Survey response not found", session_id)
    return response


def create_response(payload: dict) -> SurveyResponse:
    """Store a new response; ``payload`` comes from ``SurveyResponseCreateSchema``."""

    session_id = payload["session_id"]
    if find_response(session_id) is not None:
        raise SurveyConflict("Survey response already exists for this session", session_id)
    response = SurveyResponse(**payload)
    response.completed_at = utc_timestamp()
    db.session.add(response)
    try:
        db.session.commit()
    except IntegrityError as exc:
        db.session.rollback()
        raise SurveyConflict(
            "Survey response already exists for this session", session_id
        ) from exc
    current_app.logger.info(
        "survey_response_created",
        extra={"event": "survey_response_created", "session_id": session_id},
    )
    return response


def update_response(session_id: str, payload: dict) -> SurveyResponse:
    """Overwrite the stored attributes present in ``payload``; last write wins."""

    response = get_response(session_id)
    for key, value in payload.items():
        if key in {"id", "session_id", "completed_at"}:
            continue
        setattr(response, key, value)
    db.session.commit()
    return response


def delete_response(session_id: str) -> None:
    response = get_response(session_id)
    db.session.delete(response)
    db.session.commit()
    current_app.logger.info(
        "survey_response_deleted",
        extra={"event": "survey_response_deleted", "session_id": session_id},
    )


def export_filename(session_id: str) -> str:
    return f"ai-writing-preferences-{session_id}.json"


def response_payload_from_survey(
    session_id: str,
    survey_data: Mapping,
    generated_prompt: str | None = None,
) -> dict:
    """Flatten loaded survey answers into the persisted response shape."""

    elements = survey_data.get("structural_elements") or []
    warmth = scale_value(survey_data, "warmth_empathy")
    content_types = []
    for sample in survey_data.get("writing_samples") or []:
        if sample["type"] not in content_types:
            content_types.append(sample["type"])
    return {
        "session_id": session_id,
        "tone": DIMENSIONS_BY_KEY["warmth_empathy"].label(warmth),
        "sentence_length": scale_value(survey_data, "content_pace"),
        "vocabulary": scale_value(survey_data, "industry_jargon"),
        "formality": scale_value(survey_data, "overall_formality"),
        "examples": 3,
        "audiences": [],
        "content_types": content_types,
        "personality": [],
        "use_bullet_points": BULLET_ELEMENT in elements,
        "use_headers": HEADER_ELEMENT in elements,
        "use_cta": bool(survey_data.get("cta_style")),
        "industry": survey_data.get("company_industry"),
        "custom_instructions": generated_prompt or survey_data.get("generated_prompt"),
        "audience_context": survey_data.get("company_audience_context"),
    }
