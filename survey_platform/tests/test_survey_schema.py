"""Validation rules for survey answers."""

from __future__ import annotations

import pytest
from marshmallow import ValidationError

from survey_app.schemas import SurveyDataSchema
from survey_app.services.style_rules import DEFAULT_AUDIENCE_CONTEXT, DEFAULT_INDUSTRY


def test_empty_payload_gets_defaults():
    data = SurveyDataSchema().load({})
    assert data["overall_formality"] == 3
    assert data["authority_balance"] == 3
    assert data["structural_elements"] == []
    assert data["cta_style"] == ""
    assert data["writing_samples"] == []
    assert data["company_audience_context"] == DEFAULT_AUDIENCE_CONTEXT
    assert data["company_industry"] == DEFAULT_INDUSTRY


def test_every_failing_field_is_reported():
    with pytest.raises(ValidationError) as excinfo:
        SurveyDataSchema().load({"overallFormality": 0, "directness": 6, "ctaStyle": "loud"})
    errors = excinfo.value.messages
    assert set(errors) == {"overallFormality", "directness", "ctaStyle"}


@pytest.mark.parametrize("value", [2.5, "3", None])
def test_scale_must_be_an_integer(value):
    with pytest.raises(ValidationError) as excinfo:
        SurveyDataSchema().load({"contentPace": value})
    assert "contentPace" in excinfo.value.messages


def test_duplicate_structural_elements_rejected():
    with pytest.raises(ValidationError) as excinfo:
        SurveyDataSchema().load({"structuralElements": ["Short paragraphs", "Short paragraphs"]})
    assert "structuralElements" in excinfo.value.messages


def test_unknown_structural_element_rejected():
    with pytest.raises(ValidationError) as excinfo:
        SurveyDataSchema().load({"structuralElements": ["Haiku"]})
    assert "structuralElements" in excinfo.value.messages


def test_unknown_sample_type_rejected():
    sample = {"id": "x", "title": "Tweets", "content": "short", "type": "tweet"}
    with pytest.raises(ValidationError) as excinfo:
        SurveyDataSchema().load({"writingSamples": [sample]})
    assert "type" in excinfo.value.messages["writingSamples"][0]


def test_unknown_keys_are_dropped():
    data = SurveyDataSchema().load({"directness": 4, "favouriteColour": "green"})
    assert "favouriteColour" not in data
    assert data["directness"] == 4


def test_dump_uses_wire_keys():
    data = SurveyDataSchema().load({"warmthEmpathy": 5, "ctaStyle": "soft"})
    dumped = SurveyDataSchema().dump(data)
    assert dumped["warmthEmpathy"] == 5
    assert dumped["ctaStyle"] == "soft"
    assert "warmth_empathy" not in dumped
