from __future__ import annotations

from datetime import datetime, timezone

from ..extensions import db


def utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


class SurveyResponse(db.Model):
    """One respondent's saved writing preferences, addressed by session id."""

    __tablename__ = "survey_responses"
    __table_args__ = (
        db.UniqueConstraint("session_id", name="uq_survey_response_session"),
    )

    id = db.Column(db.Integer, primary_key=True)
    session_id = db.Column(db.String(128), nullable=False, index=True)
    tone = db.Column(db.Text, nullable=False)
    sentence_length = db.Column(db.Integer, nullable=False, default=3)
    vocabulary = db.Column(db.Integer, nullable=False, default=3)
    formality = db.Column(db.Integer, nullable=False, default=3)
    examples = db.Column(db.Integer, nullable=False, default=3)
    audiences = db.Column(db.JSON, nullable=False, default=list)
    content_types = db.Column(db.JSON, nullable=False, default=list)
    personality = db.Column(db.JSON, nullable=False, default=list)
    use_bullet_points = db.Column(db.Boolean, nullable=False, default=False)
    use_headers = db.Column(db.Boolean, nullable=False, default=False)
    use_cta = db.Column(db.Boolean, nullable=False, default=False)
    industry = db.Column(db.Text)
    custom_instructions = db.Column(db.Text)
    audience_context = db.Column(db.Text)
    survey_data = db.Column(db.JSON)  # full wizard answers, camelCase keys
    completed_at = db.Column(db.String(40), nullable=False, default=utc_timestamp)

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"<SurveyResponse id={self.id} session={self.session_id}>"
