"""Step-by-step survey wizard state.

``FlowState`` is immutable: every transition returns a new state and leaves the
one it was given untouched. The draft is kept in the wire (camelCase) shape so
it can be posted to the API or loaded by ``SurveyDataSchema`` as-is. Nothing is
validated until ``finish`` hands the draft to the prompt generator.
"""

from __future__ import annotations

import random
import string
import time
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, Callable, Mapping

from .style_rules import (
    DEFAULT_AUDIENCE_CONTEXT,
    DEFAULT_INDUSTRY,
    SAMPLE_SLOTS,
    SCALE_DEFAULT,
    SCALE_DIMENSIONS,
)

TOTAL_STEPS = 9
RESULTS_STEP = TOTAL_STEPS + 1

# step -> short title, used by the CLI progress line
STEP_TITLES = {
    1: "Welcome",
    **{index: dimension.title for index, dimension in enumerate(SCALE_DIMENSIONS, start=2)},
    8: "Structure & Call to Action",
    9: "Writing Samples",
    RESULTS_STEP: "Results",
}

_BASE36 = string.digits + string.ascii_lowercase


class FlowError(Exception):
    """A transition was requested from a step that does not allow it."""


def initial_draft() -> dict[str, Any]:
    draft: dict[str, Any] = {dimension.wire_key: SCALE_DEFAULT for dimension in SCALE_DIMENSIONS}
    draft.update(
        {
            "structuralElements": [],
            "ctaStyle": "",
            "writingSamples": [],
            "companyAudienceContext": DEFAULT_AUDIENCE_CONTEXT,
            "companyIndustry": DEFAULT_INDUSTRY,
        }
    )
    return draft


def new_session_id(now_ms: int | None = None, rng: random.Random | None = None) -> str:
    now_ms = int(time.time() * 1000) if now_ms is None else now_ms
    rng = rng or random.Random()
    suffix = "".join(rng.choice(_BASE36) for _ in range(9))
    return f"session_{now_ms}_{suffix}"


def _freeze(draft: Mapping[str, Any]) -> Mapping[str, Any]:
    return MappingProxyType(dict(draft))


@dataclass(frozen=True)
class FlowState:
    session_id: str = field(default_factory=new_session_id)
    step: int = 1
    data: Mapping[str, Any] = field(default_factory=lambda: _freeze(initial_draft()))
    total_steps: int = TOTAL_STEPS

    @property
    def is_results(self) -> bool:
        return self.step > self.total_steps

    @property
    def progress_percent(self) -> int:
        return round(min(self.step, self.total_steps) / self.total_steps * 100)

    def payload(self) -> dict[str, Any]:
        """Plain dict copy of the draft, ready to send to the API."""

        return dict(self.data)


def update(state: FlowState, **changes: Any) -> FlowState:
    """Shallow-merge ``changes`` (wire keys) into the draft."""

    return replace(state, data=_freeze({**state.data, **changes}))


def next_step(state: FlowState) -> FlowState:
    if state.step >= state.total_steps:
        return state
    return replace(state, step=state.step + 1)


def previous_step(state: FlowState) -> FlowState:
    """Go back one step; from the results step this reopens the samples step with answers kept."""

    if state.step <= 1:
        return state
    return replace(state, step=state.step - 1)


def finish(state: FlowState, generate: Callable[[dict, str], Mapping[str, str]]) -> FlowState:
    """Generate the style guide and move to the results step.

    ``generate`` receives the draft payload and session id and returns a mapping
    with ``prompt`` and optionally ``sampleWriting``. Any exception it raises propagates; since states are
    immutable the caller still holds the unchanged draft for a retry.
    """

    if state.step != state.total_steps:
        raise FlowError(f"finish is only available from step {state.total_steps}")
    result = generate(state.payload(), state.session_id)
    prompt = result.get("prompt") if result else None
    if not prompt:
        raise FlowError("Prompt generation returned no prompt")
    changes = {"generatedPrompt": prompt}
    if result.get("sampleWriting"):
        changes["sampleWriting"] = result["sampleWriting"]
    return replace(update(state, **changes), step=RESULTS_STEP)


def regenerate_sample(state: FlowState, preview: Callable[[dict], str]) -> FlowState:
    """Ask for a fresh AI-written sample and replace the displayed one."""

    if not state.is_results:
        raise FlowError("Samples can only be generated from the results step")
    return update(state, sampleWriting=preview(state.payload()))


def analyze_samples(state: FlowState, analyzer: Callable[[list], str]) -> FlowState:
    samples = [
        {"title": sample["title"], "content": sample["content"]}
        for sample in state.data.get("writingSamples", [])
    ]
    if not samples:
        raise FlowError("Add at least one writing sample before analyzing")
    return update(state, styleAnalysis=analyzer(samples))


def restart(state: FlowState) -> FlowState:
    return replace(state, step=1, data=_freeze(initial_draft()))


def set_writing_sample(state: FlowState, sample_type: str, content: str) -> FlowState:
    """Keep one sample per type: a new write replaces it, empty content removes it."""

    entry_id, title = SAMPLE_SLOTS[sample_type]
    others = [sample for sample in state.data.get("writingSamples", []) if sample["type"] != sample_type]
    if content:
        others.append({"id": entry_id, "title": title, "content": content, "type": sample_type})
    return update(state, writingSamples=others)


def writing_sample(state: FlowState, sample_type: str) -> str:
    for sample in state.data.get("writingSamples", []):
        if sample["type"] == sample_type:
            return sample["content"]
    return ""


def toggle_structural_element(state: FlowState, element: str) -> FlowState:
    current = list(state.data.get("structuralElements", []))
    if element in current:
        current.remove(element)
    else:
        current.append(element)
    return update(state, structuralElements=current)
