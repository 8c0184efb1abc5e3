"""
Dish name resolution.

Each source of a dish name is an attempt evaluated lazily, in order, until
one of them yields a name.
"""
from __future__ import annotations

import logging
import re
from typing import Callable

from ..const import KNOWN_DISH_NAMES
from ..parsers.section_segmenter import is_section_header

_LOGGER = logging.getLogger(__name__)

# A short run of Hangul syllables standing on its own, e.g. '된장찌개'
_RE_DISH_NAME = re.compile(r"(?<![가-힣])[가-힣]{2,10}(?![가-힣])")


def _scan_lines(text: str | None) -> str | None:
    """Return the first dish-name-shaped token found line by line."""
    if not text:
        return None
    for line in text.split("\n"):
        line = line.strip()
        if not line or is_section_header(line):
            continue
        match = _RE_DISH_NAME.search(line)
        if match:
            return match.group(0)
    return None


def _search_known_dishes(text: str | None) -> str | None:
    if not text:
        return None
    for dish in KNOWN_DISH_NAMES:
        if dish in text:
            return dish
    return None


def resolve_name(
    structured_name: str | None,
    raw_text: str | None,
    ingredients_text: str | None = None,
) -> str | None:
    """Resolve the dish name.

    Args:
        structured_name: Name proposed by the text-generation service
        raw_text: The combined raw input
        ingredients_text: The ingredients text returned by the service

    Returns:
        The first name found, or None
    """
    attempts: list[tuple[str, Callable[[], str | None]]] = [
        ("structured", lambda: (structured_name or "").strip() or None),
        ("raw lines", lambda: _scan_lines(raw_text)),
        ("ingredients text", lambda: _scan_lines(ingredients_text)),
        ("known dishes", lambda: _search_known_dishes(raw_text)),
    ]

    for source, attempt in attempts:
        name = attempt()
        if name:
            _LOGGER.debug("Resolved dish name '%s' from %s", name, source)
            return name

    _LOGGER.debug("No dish name found")
    return None
