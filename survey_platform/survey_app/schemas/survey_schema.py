"""Schemas for the survey answers and the AI request payloads built on them."""

from __future__ import annotations

from marshmallow import EXCLUDE, Schema, ValidationError, fields, validate, validates

from ..services.style_rules import (
    CTA_STYLES,
    DEFAULT_AUDIENCE_CONTEXT,
    DEFAULT_INDUSTRY,
    SAMPLE_TYPES,
    SCALE_DEFAULT,
    SCALE_MAX,
    SCALE_MIN,
    STRUCTURAL_OPTIONS,
)


def _scale(data_key: str) -> fields.Integer:
    return fields.Integer(
        data_key=data_key,
        strict=True,
        load_default=SCALE_DEFAULT,
        validate=validate.Range(min=SCALE_MIN, max=SCALE_MAX),
    )


class WritingSampleSchema(Schema):
    id = fields.String(required=True)
    title = fields.String(required=True)
    content = fields.String(required=True)
    type = fields.String(required=True, validate=validate.OneOf(SAMPLE_TYPES))
    purpose = fields.String(load_default=None, allow_none=True)

    class Meta:
        unknown = EXCLUDE


class SurveyDataSchema(Schema):
    overall_formality = _scale("overallFormality")
    content_pace = _scale("contentPace")
    industry_jargon = _scale("industryJargon")
    warmth_empathy = _scale("warmthEmpathy")
    directness = _scale("directness")
    authority_balance = _scale("authorityBalance")

    structural_elements = fields.List(
        fields.String(validate=validate.OneOf(STRUCTURAL_OPTIONS)),
        data_key="structuralElements",
        load_default=list,
    )
    cta_style = fields.String(
        data_key="ctaStyle",
        load_default="",
        validate=validate.OneOf(("",) + CTA_STYLES),
    )
    writing_samples = fields.List(
        fields.Nested(WritingSampleSchema),
        data_key="writingSamples",
        load_default=list,
    )
    company_audience_context = fields.String(
        data_key="companyAudienceContext", load_default=DEFAULT_AUDIENCE_CONTEXT
    )
    company_industry = fields.String(data_key="companyIndustry", load_default=DEFAULT_INDUSTRY)

    style_analysis = fields.String(data_key="styleAnalysis")
    generated_prompt = fields.String(data_key="generatedPrompt")
    sample_writing = fields.String(data_key="sampleWriting")

    class Meta:
        unknown = EXCLUDE

    @validates("structural_elements")
    def validate_structural_elements(self, value, **kwargs):
        if len(set(value)) != len(value):
            raise ValidationError("Structural elements must not repeat.")


class PreviewRequestSchema(Schema):
    content = fields.String(required=True, validate=validate.Length(min=1, error="Content is required"))
    survey_data = fields.Nested(SurveyDataSchema, data_key="surveyData", required=True)
    generated_prompt = fields.String(data_key="generatedPrompt", load_default=None, allow_none=True)

    class Meta:
        unknown = EXCLUDE


class StyleSampleSchema(Schema):
    title = fields.String(required=True)
    content = fields.String(required=True)

    class Meta:
        unknown = EXCLUDE


class StyleAnalysisRequestSchema(Schema):
    samples = fields.List(
        fields.Nested(StyleSampleSchema),
        required=True,
        validate=validate.Length(min=1, error="At least one writing sample is required"),
    )

    class Meta:
        unknown = EXCLUDE


class GeneratePromptRequestSchema(Schema):
    survey_data = fields.Nested(SurveyDataSchema, data_key="surveyData", required=True)
    session_id = fields.String(data_key="sessionId", required=True)

    class Meta:
        unknown = EXCLUDE
