"""
Recipe structuring using the Gemini API.

This module delegates the extraction of dish name, ingredients and method to
an external text-generation service and salvages a usable answer even when
the response is not clean JSON.
"""
from __future__ import annotations

import json
import logging
import re
from typing import Any

import requests

from ..const import (
    API_BASE_URL,
    DEFAULT_MAX_TEXT_LENGTH,
    DEFAULT_MODELS,
    DEFAULT_TEMPERATURE,
    DEFAULT_TIMEOUT,
)
from ..models.recipe import StructuredText
from .prompts import STRUCTURING_PROMPT

_LOGGER = logging.getLogger(__name__)

_RE_FENCED_BLOCK = re.compile(r"```(?:json|JSON)?\s*([\s\S]*?)\s*```")
_RE_BRACED_SPAN = re.compile(r"\{[\s\S]*\}")
_RE_HEX_COLOR = re.compile(r"^#[0-9A-Fa-f]{6}$")
_RE_ORDINAL = re.compile(r"^\d+\s*[.)](?!\d)")


def _parse_object(text: str) -> dict[str, Any] | None:
    try:
        parsed = json.loads(text)
    except (ValueError, TypeError):
        return None
    return parsed if isinstance(parsed, dict) else None


def _parse_direct(text: str) -> dict[str, Any] | None:
    return _parse_object(text.strip())


def _parse_fenced(text: str) -> dict[str, Any] | None:
    match = _RE_FENCED_BLOCK.search(text)
    return _parse_object(match.group(1)) if match else None


def _parse_braced(text: str) -> dict[str, Any] | None:
    match = _RE_BRACED_SPAN.search(text)
    return _parse_object(match.group(0)) if match else None


# Tried in order until one yields a JSON object
JSON_COERCIONS = (_parse_direct, _parse_fenced, _parse_braced)


def coerce_json(text: str) -> dict[str, Any] | None:
    """Coerce a model answer into a JSON object.

    Tries a direct parse, then the first fenced code block, then the first
    {...} span.

    Args:
        text: The text of the first response candidate

    Returns:
        The parsed object, or None if every coercion failed
    """
    if not isinstance(text, str) or not text.strip():
        return None

    for coercion in JSON_COERCIONS:
        parsed = coercion(text)
        if parsed is not None:
            _LOGGER.debug("Model answer parsed via %s", coercion.__name__)
            return parsed
    return None


def _as_text(value: Any) -> str:
    """Flatten a JSON field into text; lists become one entry per line."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value.strip()
    if isinstance(value, list):
        return "\n".join(_as_text(item) for item in value if _as_text(item))
    if isinstance(value, (int, float)):
        return str(value)
    return ""


def _as_method_text(value: Any) -> str:
    """Flatten the method field; list items are numbered unless already numbered."""
    if not isinstance(value, list):
        return _as_text(value)

    items = [_as_text(item) for item in value]
    lines = []
    for item in (item for item in items if item):
        if not _RE_ORDINAL.match(item):
            item = f"{len(lines) + 1}. {item}"
        lines.append(item)
    return "\n".join(lines)


def _to_structured(data: dict[str, Any]) -> StructuredText:
    name = _as_text(data.get("name")) or None
    ingredients_text = _as_text(data.get("recipe", data.get("ingredients")))
    method_text = _as_method_text(data.get("method", data.get("steps")))

    color = _as_text(data.get("color"))
    if not _RE_HEX_COLOR.match(color):
        color = None

    return StructuredText(
        name=name,
        ingredients_text=ingredients_text,
        method_text=method_text,
        color=color,
    )


def _candidate_part(data: Any) -> Any:
    """Return the first part of the first candidate, or None."""
    try:
        return data["candidates"][0]["content"]["parts"][0]
    except (KeyError, IndexError, TypeError):
        return None


class StructuringAdapter:
    """Structures raw recipe text with the Gemini generateContent endpoint."""

    def __init__(
        self,
        api_key: str,
        models: list[str] | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        max_text_length: int = DEFAULT_MAX_TEXT_LENGTH,
        session: requests.Session | None = None,
    ) -> None:
        """Initialize the structuring adapter.

        Args:
            api_key: API key for the Gemini API
            models: Model names tried in order when a model is not found
            timeout: Request timeout in seconds
            max_text_length: Raw text beyond this length is cut before sending
            session: HTTP session to send requests with

        Raises:
            ValueError: If API key is empty
        """
        if not api_key or not api_key.strip():
            raise ValueError("API key cannot be empty")

        self.api_key = api_key
        self.models = list(models or DEFAULT_MODELS)
        self.timeout = timeout
        self.max_text_length = max_text_length
        self.session = session or requests.Session()
        _LOGGER.debug("Initialized StructuringAdapter with models %s", self.models)

    def _build_payload(self, raw_text: str) -> dict[str, Any]:
        text = raw_text[:self.max_text_length]
        return {
            "contents": [{
                "parts": [{"text": STRUCTURING_PROMPT.format(text=text)}],
            }],
            "generationConfig": {
                "responseMimeType": "application/json",
                "temperature": DEFAULT_TEMPERATURE,
            },
        }

    def _request(self, model: str, payload: dict[str, Any]) -> requests.Response:
        return self.session.post(
            f"{API_BASE_URL}/models/{model}:generateContent",
            params={"key": self.api_key},
            json=payload,
            timeout=self.timeout,
        )

    def _read_response(self, response: requests.Response) -> StructuredText:
        try:
            data = response.json()
        except ValueError:
            _LOGGER.warning("Response body is not JSON, passing it through as method text")
            return StructuredText(method_text=response.text or "")

        part = _candidate_part(data)
        if isinstance(part, dict) and isinstance(part.get("text"), str):
            text = part["text"]
        elif isinstance(part, dict) and part:
            _LOGGER.debug("Response part is already a JSON object")
            return _to_structured(part)
        else:
            _LOGGER.warning("Response carries no candidate text")
            return StructuredText()

        parsed = coerce_json(text)
        if parsed is None:
            _LOGGER.warning("Could not parse model answer as JSON, passing it through")
            return StructuredText(method_text=text)
        return _to_structured(parsed)

    def structure(self, raw_text: str) -> StructuredText | None:
        """Ask the text-generation service to structure recipe text.

        Args:
            raw_text: Combined raw text of the recipe source

        Returns:
            StructuredText, or None when the service could not be used. Never
            raises.
        """
        if not raw_text or not raw_text.strip():
            return None

        try:
            payload = self._build_payload(raw_text)
            _LOGGER.info("Structuring %d characters of text", len(raw_text))

            for model in self.models:
                _LOGGER.debug("Calling Gemini model %s", model)
                try:
                    response = self._request(model, payload)
                except requests.RequestException as e:
                    _LOGGER.warning("Request to model %s failed: %s", model, e)
                    return None

                if response.status_code == 404:
                    _LOGGER.warning("Model %s not found, trying next model", model)
                    continue

                if not response.ok:
                    _LOGGER.warning("Model %s returned %s: %s",
                                    model, response.status_code, (response.text or "")[:200])
                    return None

                structured = self._read_response(response)
                _LOGGER.info("Model %s structured recipe '%s' (%d/%d characters of ingredients/method)",
                             model, structured.name, len(structured.ingredients_text),
                             len(structured.method_text))
                return structured

            _LOGGER.warning("None of the models %s are available", self.models)
            return None

        except Exception as e:
            _LOGGER.error("Unexpected error while structuring recipe text: %s",
                          str(e), exc_info=True)
            return None
