"""Pytest configuration for ensuring project modules resolve correctly."""

from __future__ import annotations

import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import pytest

from survey_app import create_app
from survey_app.extensions import db
from survey_app.schemas import SurveyDataSchema


@pytest.fixture()
def app_with_db():
    app = create_app("test")
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app_with_db):
    return app_with_db.test_client()


@pytest.fixture()
def make_survey():
    """Build loaded survey data from wire-shaped overrides."""

    schema = SurveyDataSchema()

    def _make(**overrides):
        return schema.load(overrides)

    return _make


@pytest.fixture()
def fake_ai(monkeypatch):
    """Replace the HTTP call to the AI service and record what was sent."""

    calls: list[dict] = []
    state = {"content": "Rewritten in your voice.", "error": None}

    class _FakeResponse:
        def __init__(self, body):
            self._body = body

        def raise_for_status(self):
            return None

        def json(self):
            return self._body

    def _fake_post(url, headers=None, data=None, timeout=None):
        calls.append({"url": url, "headers": headers, "data": data, "timeout": timeout})
        if state["error"] is not None:
            raise state["error"]
        return _FakeResponse({"choices": [{"message": {"content": state["content"]}}]})

    monkeypatch.setattr("survey_app.services.ai_client.requests.post", _fake_post)
    return {"calls": calls, "state": state}
