"""
Recipe Extraction Service.

This module orchestrates the extraction of a structured recipe from raw
text, trying the structuring service first and falling back to the local
parser chain.
"""
from __future__ import annotations

import logging
from enum import Enum

from ..config import Settings
from ..const import METHOD_EMPTY, METHOD_LOCAL, METHOD_STRUCTURED
from ..extractors.structuring_adapter import StructuringAdapter
from ..models.recipe import ExtractionResult, RawSource, StructuredText
from ..parsers.local_parser import LocalRecipeParser, ParsedRecipe
from ..parsers.section_segmenter import segment
from ..parsers.text_normalizer import combine_sources, normalize
from .name_resolver import resolve_name

_LOGGER = logging.getLogger(__name__)


class ExtractionState(str, Enum):
    """States of one extraction run."""

    STRUCTURING_ATTEMPTED = "structuring_attempted"
    LOCAL_FALLBACK = "local_fallback"


def build_adapter(settings: Settings) -> StructuringAdapter | None:
    """Create the structuring adapter, or None when no API key is configured."""
    if not settings.api_key:
        _LOGGER.warning("No API key configured, using local parsing only")
        return None

    return StructuringAdapter(
        api_key=settings.api_key,
        models=settings.models,
        timeout=settings.timeout,
        max_text_length=settings.max_text_length,
    )


def _parse_structured(parser: LocalRecipeParser, structured: StructuredText) -> ParsedRecipe:
    if structured.ingredients_text.strip():
        return parser.parse_sections(structured.ingredients_text, structured.method_text)

    # Raw passthrough: the method text holds the whole answer
    blocks = segment(structured.method_text)
    return parser.parse_sections(blocks.ingredients_block, blocks.steps_block)


def _structured_text(structured: StructuredText) -> str:
    return normalize("\n\n".join(
        part for part in (structured.ingredients_text, structured.method_text) if part
    ))


def _run(raw_text: str, adapter: StructuringAdapter | None) -> ExtractionResult:
    normalized = normalize(raw_text)
    parser = LocalRecipeParser()

    state = ExtractionState.STRUCTURING_ATTEMPTED
    structured = adapter.structure(raw_text) if adapter else None
    parsed = None
    best_text = normalized

    if structured is not None and structured.has_content():
        parsed = _parse_structured(parser, structured)
        if parsed.is_empty():
            _LOGGER.warning("Structured answer produced no ingredients or steps")
            parsed = None
        else:
            best_text = _structured_text(structured) or normalized
    else:
        _LOGGER.info("Structuring unavailable or empty")

    if parsed is None:
        state = ExtractionState.LOCAL_FALLBACK
        _LOGGER.info("Falling back to local parsing of %d characters", len(normalized))
        parsed = parser.parse_recipe(normalized)

    name = resolve_name(
        structured.name if structured else None,
        raw_text,
        structured.ingredients_text if structured else None,
    )

    if parsed.is_empty():
        method = METHOD_EMPTY
        _LOGGER.warning("No ingredients or steps could be extracted, manual entry needed")
    elif state is ExtractionState.STRUCTURING_ATTEMPTED:
        method = METHOD_STRUCTURED
    else:
        method = METHOD_LOCAL

    _LOGGER.info("Extracted recipe '%s' with %d ingredients and %d steps (%s)",
                 name, len(parsed.ingredients), len(parsed.steps), method)

    return ExtractionResult(
        name=name,
        ingredients=parsed.ingredients,
        steps=parsed.steps,
        raw_text=best_text,
        color=structured.color if structured else None,
        method=method,
    )


def extract_recipe(
    source: RawSource | str,
    adapter: StructuringAdapter | None = None,
) -> ExtractionResult:
    """Extract a structured recipe from raw text.

    This function orchestrates the extraction process:
    1. Combines the raw source fragments
    2. Asks the structuring adapter, if one is given
    3. Parses the structured answer, or the normalized raw text when the
       answer is missing or yields nothing
    4. Resolves the dish name independently

    Args:
        source: RawSource or plain text
        adapter: Structuring adapter; None skips straight to local parsing

    Returns:
        ExtractionResult, always; empty lists signal that manual entry is needed
    """
    if isinstance(source, RawSource):
        raw_text = combine_sources(source)
    elif isinstance(source, str):
        raw_text = source
    else:
        raw_text = ""

    if not raw_text.strip():
        _LOGGER.debug("Empty input, nothing to extract")
        return ExtractionResult(method=METHOD_EMPTY)

    try:
        return _run(raw_text, adapter)
    except Exception as e:
        _LOGGER.error("Unexpected error extracting recipe: %s", str(e), exc_info=True)
        return ExtractionResult(raw_text=normalize(raw_text), method=METHOD_EMPTY)
