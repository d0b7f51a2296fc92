"""AI blueprint: style-guide generation, sample rewrites and style analysis."""

from __future__ import annotations

from http import HTTPStatus

from flask import Blueprint, current_app, jsonify, request
from marshmallow import ValidationError

from ..extensions import limiter
from ..schemas import (
    GeneratePromptRequestSchema,
    PreviewRequestSchema,
    StyleAnalysisRequestSchema,
)
from ..services import ai_writer, sample_writer, style_prompt
from ..services.ai_client import AIServiceError

ai_bp = Blueprint("ai_bp", __name__)

preview_schema = PreviewRequestSchema()
analysis_schema = StyleAnalysisRequestSchema()
generate_schema = GeneratePromptRequestSchema()


def _ai_rate_limit() -> str:
    return current_app.config.get("AI_RATE_LIMIT", "20 per minute")


@ai_bp.errorhandler(ValidationError)
def handle_validation_error(err: ValidationError):
    return jsonify({"message": "Validation error", "errors": err.messages}), HTTPStatus.BAD_REQUEST


@ai_bp.get("/ping")
def ping():
    return jsonify({"module": "ai", "status": "ok"})


@ai_bp.post("/preview")
@limiter.limit(_ai_rate_limit)
def preview():
    payload = preview_schema.load(request.get_json(silent=True) or {})
    try:
        text = ai_writer.generate_preview(
            content=payload["content"],
            survey_data=payload["survey_data"],
            generated_prompt=payload.get("generated_prompt"),
        )
    except AIServiceError:
        return jsonify({"message": "Failed to generate preview"}), HTTPStatus.INTERNAL_SERVER_ERROR
    return jsonify({"preview": text})


@ai_bp.post("/analyze-style")
@limiter.limit(_ai_rate_limit)
def analyze_style():
    payload = analysis_schema.load(request.get_json(silent=True) or {})
    try:
        analysis = ai_writer.analyze_writing_style(payload["samples"])
    except AIServiceError:
        return (
            jsonify({"message": "Failed to analyze writing style"}),
            HTTPStatus.INTERNAL_SERVER_ERROR,
        )
    return jsonify({"analysis": analysis})


@ai_bp.post("/generate-prompt")
def generate_prompt():
    payload = generate_schema.load(request.get_json(silent=True) or {})
    survey_data = payload["survey_data"]
    company_name = current_app.config.get("COMPANY_NAME", style_prompt.DEFAULT_COMPANY_NAME)
    prompt = style_prompt.generate_writing_prompt(survey_data, company_name=company_name)
    sample = sample_writer.generate_sample_email(survey_data, company_name=company_name)
    current_app.logger.info(
        "style_prompt_generated",
        extra={"event": "style_prompt_generated", "session_id": payload["session_id"]},
    )
    return jsonify({"prompt": prompt, "sampleWriting": sample})
