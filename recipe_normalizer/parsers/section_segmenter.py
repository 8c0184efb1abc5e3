"""
Section segmentation.

Splits a recipe text blob into an ingredients region and a steps region,
using bracketed section markers when present and header keywords otherwise.
"""
from __future__ import annotations

import logging
import re
from typing import NamedTuple

from ..const import (
    INGREDIENT_KEYWORDS,
    INGREDIENT_MARKERS,
    SECTION_HEADER_MAX_LENGTH,
    SECTION_HEADER_MAX_WORDS,
    STEP_KEYWORDS,
    STEP_MARKERS,
)

_LOGGER = logging.getLogger(__name__)

_INGREDIENTS = "ingredients"
_STEPS = "steps"


def _marker_pattern(names: list[str]) -> re.Pattern[str]:
    # Longest names first so '필요한 재료' wins over '재료'
    alternatives = "|".join(
        re.escape(name).replace(r"\ ", r"\s*")
        for name in sorted(names, key=len, reverse=True)
    )
    return re.compile(rf"^\s*[\[【(]\s*(?:{alternatives})\s*[\]】)]\s*:?\s*(?P<rest>.*)$", re.IGNORECASE)


_RE_INGREDIENT_MARKER = _marker_pattern(INGREDIENT_MARKERS)
_RE_STEP_MARKER = _marker_pattern(STEP_MARKERS)
_RE_NUMBERED = re.compile(r"^\d+\s*[.)](?!\d)")

# Marker names written without brackets, e.g. '조리방법' or '만드는 법'
_INGREDIENT_NAMES = {name.replace(" ", "").lower() for name in INGREDIENT_MARKERS}
_STEP_NAMES = {name.replace(" ", "").lower() for name in STEP_MARKERS}


class SectionBlocks(NamedTuple):
    """The two regions of a recipe text."""

    ingredients_block: str
    steps_block: str


def _match_marker(line: str) -> tuple[str, str] | None:
    """Return (section, trailing text) if the line is an explicit marker."""
    match = _RE_STEP_MARKER.match(line)
    if match:
        return _STEPS, match.group("rest").strip()
    match = _RE_INGREDIENT_MARKER.match(line)
    if match:
        return _INGREDIENTS, match.group("rest").strip()
    return None


def _match_keyword_header(line: str) -> str | None:
    """Return the section a short keyword header line starts, if any."""
    stripped = line.strip().rstrip(":").strip()
    if not stripped or len(stripped) >= SECTION_HEADER_MAX_LENGTH:
        return None
    # '2. 양념 만들기' is a numbered step, not a header
    if _RE_NUMBERED.match(stripped):
        return None

    # Keywords must stand as whole words: '조리한다' or '재료를' are sentences
    words = stripped.lower().split()
    compact = "".join(words)
    short = len(words) <= SECTION_HEADER_MAX_WORDS
    if compact in _STEP_NAMES or (short and any(word in STEP_KEYWORDS for word in words)):
        return _STEPS
    if compact in _INGREDIENT_NAMES or (short and any(word in INGREDIENT_KEYWORDS for word in words)):
        return _INGREDIENTS
    return None


def is_section_header(line: str) -> bool:
    """Check whether a line is a section marker or a short keyword header."""
    return _match_marker(line) is not None or _match_keyword_header(line) is not None


def _split(lines: list[str], classify) -> SectionBlocks:
    blocks: dict[str, list[str]] = {_INGREDIENTS: [], _STEPS: []}
    current = None

    for line in lines:
        header = classify(line)
        if header is not None:
            current, rest = header
            if rest:
                blocks[current].append(rest)
            continue
        if current is not None:
            blocks[current].append(line)

    return SectionBlocks("\n".join(blocks[_INGREDIENTS]), "\n".join(blocks[_STEPS]))


def segment(text: str) -> SectionBlocks:
    """Split text into its ingredients and steps regions.

    Explicit bracketed markers take precedence. Keyword headers are only
    considered when the text carries no marker at all. Text with neither is
    committed to the steps region in full.

    Args:
        text: Recipe text, one entry per line

    Returns:
        SectionBlocks with the ingredients and steps regions
    """
    if not isinstance(text, str) or not text:
        return SectionBlocks("", "")

    lines = [line.strip() for line in text.split("\n") if line.strip()]

    if any(_match_marker(line) for line in lines):
        _LOGGER.debug("Segmenting %d lines using explicit section markers", len(lines))
        return _split(lines, _match_marker)

    def classify_keyword(line: str) -> tuple[str, str] | None:
        section = _match_keyword_header(line)
        return (section, "") if section else None

    if any(classify_keyword(line) for line in lines):
        _LOGGER.debug("Segmenting %d lines using section keywords", len(lines))
        return _split(lines, classify_keyword)

    _LOGGER.debug("No section markers or keywords found, treating text as steps")
    return SectionBlocks("", text)
