"""Schemas for persisted survey responses."""

from __future__ import annotations

from marshmallow import EXCLUDE, Schema, fields, post_load, validate

from .survey_schema import SurveyDataSchema

SCALE_RANGE = validate.Range(min=1, max=5)


class SurveyResponseUpdateSchema(Schema):
    """Attributes a client may write; everything except identity and timestamp."""

    tone = fields.String(required=True, validate=validate.Length(min=1))
    sentence_length = fields.Integer(data_key="sentenceLength", strict=True, validate=SCALE_RANGE)
    vocabulary = fields.Integer(strict=True, validate=SCALE_RANGE)
    formality = fields.Integer(strict=True, validate=SCALE_RANGE)
    examples = fields.Integer(strict=True, validate=SCALE_RANGE)
    audiences = fields.List(fields.String())
    content_types = fields.List(fields.String(), data_key="contentTypes")
    personality = fields.List(fields.String())
    use_bullet_points = fields.Boolean(data_key="useBulletPoints")
    use_headers = fields.Boolean(data_key="useHeaders")
    use_cta = fields.Boolean(data_key="useCTA")
    industry = fields.String(allow_none=True)
    custom_instructions = fields.String(data_key="customInstructions", allow_none=True)
    audience_context = fields.String(data_key="audienceContext", allow_none=True)
    survey_data = fields.Nested(SurveyDataSchema, data_key="surveyData", allow_none=True)

    class Meta:
        unknown = EXCLUDE

    @post_load
    def store_survey_data_in_wire_shape(self, data, **kwargs):
        if data.get("survey_data") is not None:
            data["survey_data"] = SurveyDataSchema().dump(data["survey_data"])
        return data


class SurveyResponseCreateSchema(SurveyResponseUpdateSchema):
    session_id = fields.String(data_key="sessionId", required=True, validate=validate.Length(min=1))


class SurveyResponseSchema(Schema):
    id = fields.Integer(dump_only=True)
    session_id = fields.String(data_key="sessionId")
    tone = fields.String()
    sentence_length = fields.Integer(data_key="sentenceLength")
    vocabulary = fields.Integer()
    formality = fields.Integer()
    examples = fields.Integer()
    audiences = fields.List(fields.String())
    content_types = fields.List(fields.String(), data_key="contentTypes")
    personality = fields.List(fields.String())
    use_bullet_points = fields.Boolean(data_key="useBulletPoints")
    use_headers = fields.Boolean(data_key="useHeaders")
    use_cta = fields.Boolean(data_key="useCTA")
    industry = fields.String(allow_none=True)
    custom_instructions = fields.String(data_key="customInstructions", allow_none=True)
    audience_context = fields.String(data_key="audienceContext", allow_none=True)
    survey_data = fields.Dict(data_key="surveyData", allow_none=True)
    completed_at = fields.String(data_key="completedAt", dump_only=True)
