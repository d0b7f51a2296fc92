"""Wizard state transitions."""

from __future__ import annotations

import dataclasses
import random
import re

import pytest

from survey_app.services import survey_flow
from survey_app.services.survey_flow import FlowError, FlowState


def _at_step(step: int, **data) -> FlowState:
    state = survey_flow.update(FlowState(session_id="session_1_aaaaaaaaa"), **data)
    return dataclasses.replace(state, step=step)


def test_session_id_format():
    session_id = survey_flow.new_session_id(now_ms=1700000000000, rng=random.Random(7))
    assert re.fullmatch(r"session_1700000000000_[0-9a-z]{9}", session_id)
    assert re.fullmatch(r"session_\d+_[0-9a-z]{9}", FlowState().session_id)


def test_initial_state():
    state = FlowState()
    assert state.step == 1
    assert state.data["overallFormality"] == 3
    assert state.data["structuralElements"] == []
    assert state.data["ctaStyle"] == ""
    assert state.progress_percent == 11
    assert not state.is_results


def test_next_step_stops_at_last_step():
    state = _at_step(8)
    state = survey_flow.next_step(state)
    assert state.step == 9
    assert survey_flow.next_step(state).step == 9
    assert state.progress_percent == 100


def test_previous_step_stops_at_first_step():
    state = _at_step(2)
    state = survey_flow.previous_step(state)
    assert state.step == 1
    assert survey_flow.previous_step(state).step == 1


def test_transitions_leave_original_untouched():
    original = FlowState()
    moved = survey_flow.update(survey_flow.next_step(original), directness=5)
    assert original.step == 1
    assert original.data["directness"] == 3
    assert moved.step == 2
    assert moved.data["directness"] == 5


def test_state_cannot_be_mutated():
    state = FlowState()
    with pytest.raises(dataclasses.FrozenInstanceError):
        state.step = 4
    with pytest.raises(TypeError):
        state.data["directness"] = 1


def test_finish_only_from_last_step():
    with pytest.raises(FlowError):
        survey_flow.finish(_at_step(5), lambda payload, session_id: {"prompt": "x"})


def test_finish_moves_to_results():
    seen = {}

    def generate(payload, session_id):
        seen.update(payload=payload, session_id=session_id)
        return {"prompt": "GUIDE", "sampleWriting": "Dear Sarah,"}

    state = survey_flow.finish(_at_step(9, ctaStyle="soft"), generate)
    assert state.is_results
    assert state.step == survey_flow.RESULTS_STEP
    assert state.data["generatedPrompt"] == "GUIDE"
    assert state.data["sampleWriting"] == "Dear Sarah,"
    assert seen["session_id"] == "session_1_aaaaaaaaa"
    assert seen["payload"]["ctaStyle"] == "soft"


def test_failed_finish_keeps_draft():
    state = _at_step(9, warmthEmpathy=5)

    def generate(payload, session_id):
        raise RuntimeError("network down")

    with pytest.raises(RuntimeError):
        survey_flow.finish(state, generate)
    assert state.step == 9
    assert state.data["warmthEmpathy"] == 5
    assert "generatedPrompt" not in state.data


def test_finish_requires_a_prompt():
    with pytest.raises(FlowError):
        survey_flow.finish(_at_step(9), lambda payload, session_id: {"prompt": ""})


def test_back_from_results_reopens_samples_step():
    state = survey_flow.finish(_at_step(9), lambda payload, session_id: {"prompt": "GUIDE"})
    assert survey_flow.next_step(state).step == survey_flow.RESULTS_STEP
    back = survey_flow.previous_step(state)
    assert back.step == survey_flow.TOTAL_STEPS
    assert not back.is_results
    assert back.data["generatedPrompt"] == "GUIDE"


def test_regenerate_sample_replaces_text():
    state = survey_flow.finish(
        _at_step(9), lambda payload, session_id: {"prompt": "GUIDE", "sampleWriting": "canned"}
    )
    state = survey_flow.regenerate_sample(state, lambda payload: f"AI: {payload['generatedPrompt']}")
    assert state.data["sampleWriting"] == "AI: GUIDE"


def test_regenerate_sample_needs_results():
    with pytest.raises(FlowError):
        survey_flow.regenerate_sample(_at_step(9), lambda payload: "x")


def test_restart_clears_answers_and_keeps_session():
    state = survey_flow.finish(
        _at_step(9, directness=1), lambda payload, session_id: {"prompt": "GUIDE"}
    )
    fresh = survey_flow.restart(state)
    assert fresh.step == 1
    assert fresh.session_id == state.session_id
    assert fresh.data["directness"] == 3
    assert "generatedPrompt" not in fresh.data


def test_set_writing_sample_keeps_one_per_type():
    state = FlowState()
    state = survey_flow.set_writing_sample(state, "email", "first")
    state = survey_flow.set_writing_sample(state, "article", "essay")
    state = survey_flow.set_writing_sample(state, "email", "second")
    samples = state.data["writingSamples"]
    assert [sample["type"] for sample in samples] == ["article", "email"]
    assert survey_flow.writing_sample(state, "email") == "second"
    assert samples[1] == {
        "id": "email-samples",
        "title": "Email Samples",
        "content": "second",
        "type": "email",
    }

    state = survey_flow.set_writing_sample(state, "email", "")
    assert survey_flow.writing_sample(state, "email") == ""
    assert [sample["type"] for sample in state.data["writingSamples"]] == ["article"]


def test_toggle_structural_element():
    state = survey_flow.toggle_structural_element(FlowState(), "Short paragraphs")
    assert state.data["structuralElements"] == ["Short paragraphs"]
    state = survey_flow.toggle_structural_element(state, "Short paragraphs")
    assert state.data["structuralElements"] == []


def test_analyze_samples():
    received = []

    def analyzer(samples):
        received.extend(samples)
        return "Measured and warm."

    state = survey_flow.set_writing_sample(FlowState(), "linkedin", "Big news!")
    state = survey_flow.analyze_samples(state, analyzer)
    assert state.data["styleAnalysis"] == "Measured and warm."
    assert received == [{"title": "LinkedIn Posts", "content": "Big news!"}]


def test_analyze_samples_needs_a_sample():
    with pytest.raises(FlowError):
        survey_flow.analyze_samples(FlowState(), lambda samples: "x")
