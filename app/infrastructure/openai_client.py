"""Client used to draft BRD documents through the OpenAI Responses API."""

from __future__ import annotations

import logging
from typing import Any

from openai import OpenAI, OpenAIError

from app.config import get_settings

logger = logging.getLogger(__name__)

DEFAULT_SYSTEM_PROMPT = (
    "You are an expert Business Analyst at Bank Jateng with over 10 years of "
    "experience in creating Business Requirements Documents (BRD).\n"
    "Your task is to generate content ONLY for the filled fields and sections in "
    "the BRD, following banking industry standards.\n"
    "Use formal Indonesian language, technical banking terminology, and ensure "
    "compliance with banking regulations.\n"
    "Do not generate content for unfilled fields or sections."
)

_PROMPT_LIMIT = 24000


def _truncate_message(message: str, limit: int = _PROMPT_LIMIT) -> tuple[str, bool]:
    """Trim the message to the provided limit, returning the trimmed text and a flag."""

    if len(message) <= limit:
        return message, False
    return message[:limit], True


def _strip_code_fences(text: str) -> str:
    """Return the text without a surrounding Markdown code fence."""

    s = text.strip()
    if not s.startswith("```"):
        return text

    lines = s.splitlines()
    # Drop the opening fence (with its optional language tag) and the closing one.
    body = lines[1:]
    if body and body[-1].strip().startswith("```"):
        body = body[:-1]
    return "\n".join(body)


class OpenAIConfigurationError(RuntimeError):
    """Raised when the client is missing basic configuration."""


class OpenAIServiceError(RuntimeError):
    """Raised when the OpenAI API does not answer as expected."""


class BRDGenerationService:
    """Thin wrapper around the Responses API returning plain BRD text."""

    def __init__(self) -> None:
        settings = get_settings()

        api_key = (settings.openai_api_key or "").strip()
        if not api_key:
            raise OpenAIConfigurationError(
                "OPENAI_API_KEY is not defined in the environment.",
            )

        base_url = (settings.openai_base_url or "").strip()
        model = (settings.openai_model or "gpt-4.1-mini").strip() or "gpt-4.1-mini"
        max_output_tokens = settings.openai_max_output_tokens
        if max_output_tokens is not None and max_output_tokens <= 0:
            max_output_tokens = None

        client_kwargs: dict[str, Any] = {"api_key": api_key}
        if base_url:
            client_kwargs["base_url"] = base_url

        self._client = OpenAI(**client_kwargs)
        self._model = model
        self._temperature = float(settings.openai_temperature)
        self._max_output_tokens = max_output_tokens

    def generate_text(self, prompt: str, *, system_prompt: str | None = None) -> str:
        """Send ``prompt`` to the model and return the text of its answer."""

        message_to_use, was_truncated = _truncate_message(prompt)
        if was_truncated:
            logger.warning("BRD prompt truncated to %s characters", _PROMPT_LIMIT)

        messages = [
            {
                "role": "system",
                "content": [
                    {"type": "input_text", "text": system_prompt or DEFAULT_SYSTEM_PROMPT}
                ],
            },
            {"role": "user", "content": [{"type": "input_text", "text": message_to_use}]},
        ]

        try:
            request_kwargs: dict[str, Any] = {
                "model": self._model,
                "input": messages,
            }
            if self._temperature is not None:
                request_kwargs["temperature"] = self._temperature
            if self._max_output_tokens is not None:
                request_kwargs["max_output_tokens"] = self._max_output_tokens

            resp = self._client.responses.create(**request_kwargs)
        except OpenAIError as exc:
            raise OpenAIServiceError("The request to OpenAI could not be completed.") from exc

        text = getattr(resp, "output_text", None)
        if not text:
            try:
                text = resp.output[0].content[0].text
            except (AttributeError, IndexError, TypeError) as exc:
                raise OpenAIServiceError("The OpenAI response contains no usable text.") from exc

        logger.debug("Raw model answer: %s", text)

        text = _strip_code_fences(text).strip()
        if not text:
            raise OpenAIServiceError("The OpenAI response contains no usable text.")
        return text


__all__ = [
    "BRDGenerationService",
    "DEFAULT_SYSTEM_PROMPT",
    "OpenAIConfigurationError",
    "OpenAIServiceError",
]
