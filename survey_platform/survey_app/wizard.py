"""Terminal front end for the survey flow, used by ``flask survey run``."""

from __future__ import annotations

from typing import Callable

import click

from .services import survey_flow
from .services.style_rules import CTA_OPTIONS, SAMPLE_SLOTS, SCALE_DIMENSIONS, STRUCTURAL_OPTIONS
from .services.survey_flow import FlowState

BACK = "b"
NO_CTA = "none"

SCALE_STEPS = {index: dimension for index, dimension in enumerate(SCALE_DIMENSIONS, start=2)}


def _header(state: FlowState) -> None:
    title = survey_flow.STEP_TITLES.get(state.step, "")
    click.echo("")
    click.secho(
        f"Step {state.step} of {state.total_steps} ({state.progress_percent}% complete): {title}",
        bold=True,
    )


def _welcome(state: FlowState) -> FlowState:
    click.echo(
        "This survey captures your writing style so an AI assistant can write the way you do.\n"
        "You will rate six style dimensions, pick structural elements and a call-to-action\n"
        f"style, and paste a few writing samples. Enter '{BACK}' at any prompt to go back."
    )
    return survey_flow.next_step(state)


def _scale(state: FlowState) -> FlowState:
    dimension = SCALE_STEPS[state.step]
    click.echo(dimension.question)
    click.echo(f"  1 = {dimension.low_anchor}   5 = {dimension.high_anchor}")
    current = state.data.get(dimension.wire_key)
    while True:
        raw = click.prompt("Your rating (1-5)", default=str(current)).strip().lower()
        if raw == BACK:
            return survey_flow.previous_step(state)
        if raw.isdigit() and 1 <= int(raw) <= 5:
            updated = survey_flow.update(state, **{dimension.wire_key: int(raw)})
            return survey_flow.next_step(updated)
        click.echo("Please enter a whole number from 1 to 5.")


def _parse_choices(raw: str, limit: int) -> list[int] | None:
    picks: list[int] = []
    for token in raw.replace(" ", "").split(","):
        if not token:
            continue
        if not token.isdigit() or not 1 <= int(token) <= limit:
            return None
        if int(token) not in picks:
            picks.append(int(token))
    return picks


def _structure_and_cta(state: FlowState) -> FlowState:
    click.echo("Which structural elements do you find most effective? (comma-separated numbers)")
    for index, option in enumerate(STRUCTURAL_OPTIONS, start=1):
        click.echo(f"  {index}. {option}")
    selected = state.data.get("structuralElements", [])
    default = ",".join(str(STRUCTURAL_OPTIONS.index(item) + 1) for item in selected)
    while True:
        raw = click.prompt("Elements", default=default, show_default=bool(default)).strip().lower()
        if raw == BACK:
            return survey_flow.previous_step(state)
        picks = _parse_choices(raw, len(STRUCTURAL_OPTIONS))
        if picks is not None:
            break
        click.echo(f"Use numbers between 1 and {len(STRUCTURAL_OPTIONS)}, separated by commas.")
    for element in STRUCTURAL_OPTIONS:
        chosen = STRUCTURAL_OPTIONS.index(element) + 1 in picks
        if chosen != (element in state.data.get("structuralElements", [])):
            state = survey_flow.toggle_structural_element(state, element)

    click.echo("What call-to-action style feels most natural to you?")
    for value, (label, description) in CTA_OPTIONS.items():
        click.echo(f"  {value}: {label} - {description}")
    cta = click.prompt(
        "Call-to-action style",
        type=click.Choice([*CTA_OPTIONS, NO_CTA]),
        default=state.data.get("ctaStyle") or NO_CTA,
    )
    state = survey_flow.update(state, ctaStyle="" if cta == NO_CTA else cta)
    return survey_flow.next_step(state)


def _samples(state: FlowState) -> FlowState:
    click.echo("Paste your writing samples (leave blank to skip a type).")
    for sample_type, (_, title) in SAMPLE_SLOTS.items():
        current = survey_flow.writing_sample(state, sample_type)
        raw = click.prompt(title, default=current, show_default=False)
        if raw.strip().lower() == BACK:
            return survey_flow.previous_step(state)
        state = survey_flow.set_writing_sample(state, sample_type, raw.strip())
    return state


STEP_HANDLERS: dict[int, Callable[[FlowState], FlowState]] = {
    1: _welcome,
    **{step: _scale for step in SCALE_STEPS},
    8: _structure_and_cta,
}


def collect_answers(state: FlowState) -> FlowState:
    """Walk the respondent through every step until the final one is answered."""

    while True:
        _header(state)
        if state.step == state.total_steps:
            answered = _samples(state)
            if answered.step == state.step:
                return answered
            state = answered
            continue
        state = STEP_HANDLERS[state.step](state)


def show_results(state: FlowState) -> None:
    click.echo("")
    click.secho("Your Custom Writing Prompt", bold=True)
    click.echo(state.data.get("generatedPrompt", ""))
    sample = state.data.get("sampleWriting")
    if sample:
        click.echo("")
        click.secho("Writing Sample", bold=True)
        click.echo(sample)
    analysis = state.data.get("styleAnalysis")
    if analysis:
        click.echo("")
        click.secho("Style Analysis", bold=True)
        click.echo(analysis)
