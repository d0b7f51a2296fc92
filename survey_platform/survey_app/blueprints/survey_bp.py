"""Survey response CRUD and export endpoints."""

from __future__ import annotations

import json
from http import HTTPStatus

from flask import Blueprint, Response, current_app, jsonify, request
from marshmallow import ValidationError

from ..schemas import (
    SurveyResponseCreateSchema,
    SurveyResponseSchema,
    SurveyResponseUpdateSchema,
)
from ..services import survey_service

survey_bp = Blueprint("survey_bp", __name__)

response_schema = SurveyResponseSchema()
create_schema = SurveyResponseCreateSchema()
update_schema = SurveyResponseUpdateSchema()


@survey_bp.errorhandler(ValidationError)
def handle_validation_error(err: ValidationError):
    return jsonify({"message": "Validation error", "errors": err.messages}), HTTPStatus.BAD_REQUEST


@survey_bp.errorhandler(survey_service.SurveyNotFound)
def handle_not_found(err: survey_service.SurveyNotFound):
    return jsonify({"message": err.message}), HTTPStatus.NOT_FOUND


@survey_bp.errorhandler(survey_service.SurveyConflict)
def handle_conflict(err: survey_service.SurveyConflict):
    return jsonify({"message": err.message}), HTTPStatus.CONFLICT


@survey_bp.get("/<session_id>")
def get_survey(session_id: str):
    response = survey_service.get_response(session_id)
    return jsonify(response_schema.dump(response))


@survey_bp.post("")
def create_survey():
    payload = create_schema.load(request.get_json(silent=True) or {})
    response = survey_service.create_response(payload)
    return jsonify(response_schema.dump(response)), HTTPStatus.CREATED


@survey_bp.put("/<session_id>")
def update_survey(session_id: str):
    payload = update_schema.load(request.get_json(silent=True) or {})
    response = survey_service.update_response(session_id, payload)
    return jsonify(response_schema.dump(response))


@survey_bp.delete("/<session_id>")
def delete_survey(session_id: str):
    survey_service.delete_response(session_id)
    return "", HTTPStatus.NO_CONTENT


def _attachment_disposition(filename: str) -> str:
    # quoted-string: backslash and double quote must be escaped
    quoted = filename.replace("\\", "\\\\").replace('"', '\\"')
    return f'attachment; filename="{quoted}"'


@survey_bp.get("/<session_id>/export")
def export_survey(session_id: str):
    response = survey_service.get_response(session_id)
    body = json.dumps(response_schema.dump(response), ensure_ascii=False, indent=2)
    filename = survey_service.export_filename(session_id)
    current_app.logger.info(
        "survey_response_exported",
        extra={"event": "survey_response_exported", "session_id": session_id},
    )
    return Response(
        body,
        mimetype="application/json",
        headers={"Content-Disposition": _attachment_disposition(filename)},
    )
