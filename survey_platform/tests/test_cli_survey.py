"""Tests for the survey CLI commands."""

from __future__ import annotations

import json

import requests

from survey_app.models import SurveyResponse
from survey_app.services import survey_service

# formality, pace, jargon, warmth, directness, authority, elements, CTA, three samples
ANSWERS = "5\n2\n4\n5\n1\n3\n1,2\nbenefit\nMy usual intro email.\n\n\n"


def test_run_prints_guide_and_sample(app_with_db):
    runner = app_with_db.test_cli_runner()
    result = runner.invoke(args=["survey", "run"], input=ANSWERS)
    assert result.exit_code == 0, result.output
    assert "Your Custom Writing Prompt" in result.output
    assert "- **Setting:** Very Formal (5/5)" in result.output
    assert "- Bullet points or numbered lists" in result.output
    assert "Dear Sarah," in result.output


def test_run_back_revisits_previous_step(app_with_db):
    runner = app_with_db.test_cli_runner()
    answers = "1\nb\n4\n" + ANSWERS[2:]
    result = runner.invoke(args=["survey", "run"], input=answers)
    assert result.exit_code == 0, result.output
    assert "- **Setting:** Formal (4/5)" in result.output


def test_run_saves_response(app_with_db):
    runner = app_with_db.test_cli_runner()
    result = runner.invoke(
        args=["survey", "run", "--session-id", "session_cli_1", "--save"], input=ANSWERS
    )
    assert result.exit_code == 0, result.output
    assert "Saved survey response for session_cli_1." in result.output
    with app_with_db.app_context():
        saved = SurveyResponse.query.filter_by(session_id="session_cli_1").one()
        assert saved.tone == "Very Warm"
        assert saved.formality == 5
        assert saved.sentence_length == 2
        assert saved.use_bullet_points is True
        assert saved.use_headers is False
        assert saved.use_cta is True
        assert saved.content_types == ["email"]
        assert saved.custom_instructions.startswith("# AI Writing Style Guide")
        assert saved.survey_data["structuralElements"] == [
            "Short paragraphs",
            "Bullet points or numbered lists",
        ]


def test_run_save_conflict(app_with_db):
    runner = app_with_db.test_cli_runner()
    args = ["survey", "run", "--session-id", "session_cli_2", "--save"]
    assert runner.invoke(args=args, input=ANSWERS).exit_code == 0
    result = runner.invoke(args=args, input=ANSWERS)
    assert result.exit_code != 0
    assert "already exists" in result.output


def test_run_writes_prompt_into_directory(app_with_db, tmp_path):
    runner = app_with_db.test_cli_runner()
    result = runner.invoke(
        args=["survey", "run", "--session-id", "session_cli_3", "--output", str(tmp_path)],
        input=ANSWERS,
    )
    assert result.exit_code == 0, result.output
    written = tmp_path / "writing-style-prompt-session_cli_3.txt"
    assert written.read_text(encoding="utf-8").startswith("# AI Writing Style Guide")


def test_run_with_ai_sample(app_with_db, fake_ai):
    fake_ai["state"]["content"] = "A rewritten seed sentence."
    runner = app_with_db.test_cli_runner()
    result = runner.invoke(args=["survey", "run", "--ai-sample"], input=ANSWERS)
    assert result.exit_code == 0, result.output
    assert "A rewritten seed sentence." in result.output
    assert len(fake_ai["calls"]) == 1


def test_run_ai_sample_failure_keeps_canned_sample(app_with_db, fake_ai):
    fake_ai["state"]["error"] = requests.ConnectionError("down")
    runner = app_with_db.test_cli_runner()
    result = runner.invoke(args=["survey", "run", "--ai-sample"], input=ANSWERS)
    assert result.exit_code == 0, result.output
    assert "AI sample unavailable" in result.output
    assert "Dear Sarah," in result.output


def test_render_from_file(app_with_db, tmp_path):
    path = tmp_path / "answers.json"
    path.write_text(json.dumps({"overallFormality": 1, "ctaStyle": "soft"}), encoding="utf-8")
    runner = app_with_db.test_cli_runner()
    result = runner.invoke(args=["survey", "render", str(path)])
    assert result.exit_code == 0, result.output
    assert result.output.startswith("# AI Writing Style Guide for Diamond Consultants")
    assert "Hi Sarah," in result.output


def test_render_rejects_invalid_answers(app_with_db, tmp_path):
    path = tmp_path / "answers.json"
    path.write_text(json.dumps({"overallFormality": 9}), encoding="utf-8")
    runner = app_with_db.test_cli_runner()
    result = runner.invoke(args=["survey", "render", str(path)])
    assert result.exit_code != 0
    assert "Survey data is invalid" in result.output


def test_render_rejects_bad_json(app_with_db, tmp_path):
    path = tmp_path / "answers.json"
    path.write_text("{not json", encoding="utf-8")
    runner = app_with_db.test_cli_runner()
    result = runner.invoke(args=["survey", "render", str(path)])
    assert result.exit_code != 0
    assert "not valid JSON" in result.output


def test_export_prints_json(app_with_db):
    with app_with_db.app_context():
        survey_service.create_response({"session_id": "session_cli_4", "tone": "Balanced"})
    runner = app_with_db.test_cli_runner()
    result = runner.invoke(args=["survey", "export", "session_cli_4"])
    assert result.exit_code == 0, result.output
    exported = json.loads(result.output)
    assert exported["sessionId"] == "session_cli_4"
    assert exported["tone"] == "Balanced"


def test_export_unknown_session(app_with_db):
    runner = app_with_db.test_cli_runner()
    result = runner.invoke(args=["survey", "export", "missing"])
    assert result.exit_code != 0
    assert "not found" in result.output


def test_run_with_style_analysis(app_with_db, fake_ai):
    fake_ai["state"]["content"] = "Crisp, warm and confident."
    runner = app_with_db.test_cli_runner()
    result = runner.invoke(args=["survey", "run", "--analyze"], input=ANSWERS)
    assert result.exit_code == 0, result.output
    assert "Style Analysis" in result.output
    assert "Crisp, warm and confident." in result.output
    assert len(fake_ai["calls"]) == 1
    prompt = json.loads(fake_ai["calls"][0]["data"])["messages"][0]["content"]
    assert "Sample 1: Email Samples\nMy usual intro email." in prompt


def test_run_analysis_skipped_without_samples(app_with_db, fake_ai):
    runner = app_with_db.test_cli_runner()
    answers = ANSWERS.replace("My usual intro email.", "")
    result = runner.invoke(args=["survey", "run", "--analyze"], input=answers)
    assert result.exit_code == 0, result.output
    assert "Style analysis skipped" in result.output
    assert fake_ai["calls"] == []
