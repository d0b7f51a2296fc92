"""Serialization / validation schemas (Marshmallow)."""

from .survey_schema import (
    WritingSampleSchema,
    SurveyDataSchema,
    PreviewRequestSchema,
    StyleSampleSchema,
    StyleAnalysisRequestSchema,
    GeneratePromptRequestSchema,
)
from .response_schema import (
    SurveyResponseSchema,
    SurveyResponseCreateSchema,
    SurveyResponseUpdateSchema,
)

__all__ = [
    "WritingSampleSchema",
    "SurveyDataSchema",
    "PreviewRequestSchema",
    "StyleSampleSchema",
    "StyleAnalysisRequestSchema",
    "GeneratePromptRequestSchema",
    "SurveyResponseSchema",
    "SurveyResponseCreateSchema",
    "SurveyResponseUpdateSchema",
]
