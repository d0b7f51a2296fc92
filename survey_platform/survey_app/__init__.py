"""survey_app package – application factory and blueprint registration."""

from __future__ import annotations

import json
import os
from http import HTTPStatus
from pathlib import Path
from time import perf_counter

import click
from flask import Flask, g, jsonify, request
from marshmallow import ValidationError
from werkzeug.exceptions import InternalServerError

from config import resolve_config
from .blueprints import BLUEPRINTS
from .extensions import cors, db, migrate, limiter
from .logging_config import configure_logging, assign_request_id
from .metrics import record_request


def create_app(config_name: str | None = None) -> Flask:
    """Application factory used by both CLI and runtime servers."""

    app = Flask(__name__)
    _configure_app(app, config_name)
    configure_logging(app)
    _register_extensions(app)
    _register_blueprints(app)
    _register_error_handlers(app)
    _register_shellcontext(app)
    _register_cli(app)
    _register_bootstrap(app)
    _register_request_hooks(app)

    return app


def _configure_app(app: Flask, config_name: str | None) -> None:
    env_name = config_name or os.getenv("FLASK_CONFIG")
    config_obj = resolve_config(env_name)
    app.config.from_object(config_obj)


def _register_extensions(app: Flask) -> None:
    db.init_app(app)
    migrate.init_app(app, db)
    cors.init_app(
        app,
        resources={r"/api/*": {"origins": app.config.get("CORS_ORIGINS", "*")}},
    )
    limiter.default_limits = app.config.get("RATE_LIMIT_DEFAULTS", [])
    limiter.init_app(app)


def _register_blueprints(app: Flask) -> None:
    for blueprint, prefix in BLUEPRINTS:
        app.register_blueprint(blueprint, url_prefix=prefix)


def _register_error_handlers(app: Flask) -> None:
    @app.errorhandler(InternalServerError)
    def handle_internal_error(err: InternalServerError):
        return jsonify({"message": "Internal server error"}), HTTPStatus.INTERNAL_SERVER_ERROR


def _register_shellcontext(app: Flask) -> None:
    # Lazy import inside function to avoid circular dependencies.
    from . import models  # noqa: F401

    @app.shell_context_processor
    def shell_context():
        return {"db": db}


def _register_bootstrap(app: Flask) -> None:
    @app.before_request
    def ensure_schema():
        if app.config.get("_SCHEMA_READY"):
            return
        _ensure_schema(app)
        app.config["_SCHEMA_READY"] = True


def _register_request_hooks(app: Flask) -> None:
    @app.before_request
    def start_request():
        assign_request_id()
        g.request_started_at = perf_counter()

    @app.after_request
    def finalize(response):
        request_id = getattr(g, "request_id", None)
        if request_id:
            response.headers["X-Request-ID"] = request_id
        started = getattr(g, "request_started_at", None)
        latency = perf_counter() - started if started else 0.0
        endpoint = request.endpoint or request.path
        record_request(request.method, endpoint, response.status_code, latency)
        return response


def _ensure_schema(app: Flask) -> None:
    from . import models  # noqa: F401

    with app.app_context():
        db.create_all()


def _local_generator(app: Flask):
    """Prompt generation run in-process, equivalent to POST /api/ai/generate-prompt."""

    from .schemas import SurveyDataSchema
    from .services import sample_writer, style_prompt

    schema = SurveyDataSchema()

    def generate(payload: dict, session_id: str) -> dict:
        survey_data = schema.load(payload)
        company_name = app.config.get("COMPANY_NAME", style_prompt.DEFAULT_COMPANY_NAME)
        return {
            "prompt": style_prompt.generate_writing_prompt(survey_data, company_name=company_name),
            "sampleWriting": sample_writer.generate_sample_email(survey_data, company_name=company_name),
        }

    return generate


def _register_cli(app: Flask) -> None:
    @app.cli.group("survey")
    def survey_group():
        """Writing style survey commands."""

    @survey_group.command("run")
    @click.option("--session-id", help="Reuse a session id instead of generating one.")
    @click.option(
        "--save/--no-save",
        default=False,
        help="Persist a survey response derived from the answers.",
    )
    @click.option(
        "--ai-sample/--no-ai-sample",
        default=False,
        help="Ask the AI service to rewrite the seed sentence in your style.",
    )
    @click.option(
        "--analyze/--no-analyze",
        default=False,
        help="Ask the AI service to analyze your writing samples before finishing.",
    )
    @click.option(
        "--output",
        type=click.Path(dir_okay=True, file_okay=True, path_type=Path),
        help="Write the prompt to this file, or into this directory as writing-style-prompt-<session>.txt.",
    )
    def run_survey(
        session_id: str | None, save: bool, ai_sample: bool, analyze: bool, output: Path | None
    ):
        """Answer the survey interactively and print the generated style guide."""

        from . import wizard
        from .schemas import SurveyDataSchema
        from .services import ai_writer, survey_flow, survey_service
        from .services.ai_client import AIServiceError

        state = survey_flow.FlowState(session_id=session_id) if session_id else survey_flow.FlowState()
        state = wizard.collect_answers(state)
        if analyze:
            try:
                state = survey_flow.analyze_samples(state, ai_writer.analyze_writing_style)
            except survey_flow.FlowError as exc:
                click.echo(f"Style analysis skipped: {exc}", err=True)
            except AIServiceError as exc:
                click.echo(f"Style analysis unavailable: {exc}", err=True)

        try:
            state = survey_flow.finish(state, _local_generator(app))
        except ValidationError as exc:
            raise click.ClickException(f"Survey answers are invalid: {exc.messages}") from exc

        if ai_sample:
            seed = app.config["SAMPLE_SEED_SENTENCE"]

            def preview(payload: dict) -> str:
                survey_data = SurveyDataSchema().load(payload)
                return ai_writer.generate_preview(seed, survey_data)

            try:
                state = survey_flow.regenerate_sample(state, preview)
            except AIServiceError as exc:
                click.echo(f"AI sample unavailable: {exc}", err=True)

        wizard.show_results(state)

        if save:
            _ensure_schema(app)
            survey_data = SurveyDataSchema().load(state.payload())
            payload = survey_service.response_payload_from_survey(state.session_id, survey_data)
            payload["survey_data"] = SurveyDataSchema().dump(survey_data)
            try:
                survey_service.create_response(payload)
            except survey_service.SurveyConflict as exc:
                raise click.ClickException(exc.message) from exc
            click.echo(f"Saved survey response for {state.session_id}.")

        if output is not None:
            target = output / f"writing-style-prompt-{state.session_id}.txt" if output.is_dir() else output
            target.write_text(state.data["generatedPrompt"], encoding="utf-8")
            click.echo(f"Prompt written to {target}.")

    @survey_group.command("render")
    @click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
    def render_survey(path: Path):
        """Print the style guide and sample email for a survey JSON file."""

        try:
            payload = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise click.ClickException(f"{path} is not valid JSON: {exc}") from exc
        try:
            result = _local_generator(app)(payload, session_id="cli")
        except ValidationError as exc:
            raise click.ClickException(f"Survey data is invalid: {exc.messages}") from exc
        click.echo(result["prompt"])
        click.echo("")
        click.echo(result["sampleWriting"])

    @survey_group.command("export")
    @click.argument("session_id")
    def export_survey(session_id: str):
        """Print a stored survey response as JSON."""

        from .schemas import SurveyResponseSchema
        from .services import survey_service

        _ensure_schema(app)
        try:
            response = survey_service.get_response(session_id)
        except survey_service.SurveyNotFound as exc:
            raise click.ClickException(exc.message) from exc
        click.echo(json.dumps(SurveyResponseSchema().dump(response), ensure_ascii=False, indent=2))
