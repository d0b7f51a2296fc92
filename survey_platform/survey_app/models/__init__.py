"""Database models package."""

from .survey import SurveyResponse

__all__ = ["SurveyResponse"]
