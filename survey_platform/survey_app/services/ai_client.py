"""Simple AI client for calling an OpenAI-compatible chat completions endpoint."""

from __future__ import annotations

import json
from dataclasses import dataclass

import requests
from flask import current_app


class AIServiceError(RuntimeError):
    """The generative-text service could not produce a usable answer."""


class AIConfigurationError(AIServiceError):
    pass


@dataclass
class AIClient:
    api_key: str
    api_base: str
    default_model: str

    def chat(self, messages, model: str | None = None, temperature: float | None = None):
        if not self.api_key:
            raise AIConfigurationError("GEMINI_API_KEY / AI_API_KEY is not configured")

        app = current_app
        payload = {
            "model": model or self.default_model,
            "messages": messages,
            "temperature": app.config.get("AI_TEMPERATURE", 0.7) if temperature is None else temperature,
        }
        connect_timeout = app.config.get("AI_CONNECT_TIMEOUT_SEC", 15)
        read_timeout = app.config.get("AI_READ_TIMEOUT_SEC", 120)

        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }
        try:
            response = requests.post(
                f"{self.api_base}/chat/completions",
                headers=headers,
                data=json.dumps(payload),
                timeout=(connect_timeout, read_timeout),
            )
            response.raise_for_status()
            return response.json()
        except requests.RequestException as exc:
            raise AIServiceError(f"AI request failed: {exc}") from exc
        except ValueError as exc:
            raise AIServiceError("AI response was not valid JSON") from exc

    def complete_text(self, prompt: str, model: str | None = None) -> str:
        """Send a single user prompt and return the reply text."""

        raw = self.chat([{"role": "user", "content": prompt}], model=model)
        try:
            content = raw["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError) as exc:
            raise AIServiceError("AI response is missing the message content") from exc
        if not isinstance(content, str) or not content.strip():
            raise AIServiceError("AI response contained no text")
        return content.strip()


def get_ai_client() -> AIClient:
    app = current_app
    client = app.extensions.get("ai_client")
    if client is None:
        client = AIClient(
            api_key=app.config.get("AI_API_KEY", ""),
            api_base=app.config.get("AI_API_BASE", "").rstrip("/"),
            default_model=app.config.get("AI_MODEL_NAME", "gemini-1.5-flash"),
        )
        app.extensions["ai_client"] = client
    return client
