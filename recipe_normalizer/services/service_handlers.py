"""
Service Handlers.

This module validates inbound extraction payloads and turns them into
serializable extraction results.
"""
from __future__ import annotations

import logging
from typing import Any

import voluptuous as vol

from ..const import (
    DATA_DESCRIPTION,
    DATA_FREEFORM_TEXT,
    DATA_PINNED_COMMENT,
    DATA_TITLE,
)
from ..extractors.structuring_adapter import StructuringAdapter
from ..models.recipe import RawSource
from .recipe_service import extract_recipe

_LOGGER = logging.getLogger(__name__)

# camelCase keys sent by web clients
PAYLOAD_ALIASES = {
    "pinnedComment": DATA_PINNED_COMMENT,
    "freeformText": DATA_FREEFORM_TEXT,
    "text": DATA_FREEFORM_TEXT,
}

_OPTIONAL_TEXT = vol.Any(None, str)

RAW_SOURCE_SCHEMA = vol.Schema(
    {
        vol.Optional(DATA_TITLE): _OPTIONAL_TEXT,
        vol.Optional(DATA_DESCRIPTION): _OPTIONAL_TEXT,
        vol.Optional(DATA_PINNED_COMMENT): _OPTIONAL_TEXT,
        vol.Optional(DATA_FREEFORM_TEXT): _OPTIONAL_TEXT,
    }
)


def _canonical_keys(payload: dict[str, Any]) -> dict[str, Any]:
    return {PAYLOAD_ALIASES.get(key, key): value for key, value in payload.items()}


def raw_source_from_payload(payload: dict[str, Any]) -> RawSource:
    """Validate a payload and build the RawSource it describes.

    Raises:
        vol.Invalid: If the payload has unknown keys or non-text values
    """
    if not isinstance(payload, dict):
        raise vol.Invalid("Payload must be an object")

    data = RAW_SOURCE_SCHEMA(_canonical_keys(payload))
    return RawSource(**data)


def handle_extract(
    payload: dict[str, Any],
    adapter: StructuringAdapter | None = None,
) -> dict[str, Any]:
    """Handle an extraction request.

    Args:
        payload: Dict with any of title, description, pinned_comment, freeform_text
        adapter: Structuring adapter; None uses local parsing only

    Returns:
        The extraction result as a dict with camelCase keys

    Raises:
        vol.Invalid: If the payload does not validate
    """
    source = raw_source_from_payload(payload)
    if source.is_empty():
        _LOGGER.info("Extraction requested with no text")

    result = extract_recipe(source, adapter)
    return result.model_dump(by_alias=True)
