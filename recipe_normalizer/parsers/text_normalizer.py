"""
Input text normalization.

Strips links, hashtags and emoji from pasted recipe text while keeping its
line structure, so later stages can work line by line.
"""
from __future__ import annotations

import re

from ..const import DECORATIVE_EMOJI
from ..models.recipe import RawSource
from ..unit_converter import format_quantity

_RE_URL = re.compile(r"https?://\S+", re.IGNORECASE)
_RE_HASHTAG = re.compile(r"#[^\s#]+")
# '1/2' and '1 1/2' are rewritten as decimals before '/' is stripped
_RE_FRACTION = re.compile(r"(?<![0-9/.])(?:([0-9]{1,6})[ \t]+)?([0-9]{1,6})[ \t]*/[ \t]*([0-9]{1,6})(?![0-9/])")
_RE_DECORATIVE = re.compile("[" + re.escape(DECORATIVE_EMOJI) + "]")
# Anything but letters, digits, whitespace and . , ( ) [ ] { } :
_RE_DISALLOWED = re.compile(r"[^\w\s.,()\[\]{}:]|_")
_RE_SPACES = re.compile(r"[^\S\n]+")


def _fraction_to_decimal(match: re.Match[str]) -> str:
    whole, numerator, denominator = match.groups()
    if int(denominator) == 0:
        return match.group(0)
    return format_quantity(int(whole or 0) + int(numerator) / int(denominator))


def normalize(text: str) -> str:
    """Return a cleaned copy of text.

    Idempotent: normalizing already normalized text returns it unchanged.

    Args:
        text: Raw text, possibly containing links, emoji and hashtags

    Returns:
        The cleaned text, one trimmed non-empty line per source line
    """
    if not isinstance(text, str) or not text:
        return ""

    cleaned = text.replace("\r\n", "\n").replace("\r", "\n")
    cleaned = _RE_URL.sub(" ", cleaned)
    cleaned = _RE_HASHTAG.sub(" ", cleaned)
    cleaned = _RE_FRACTION.sub(_fraction_to_decimal, cleaned)
    cleaned = _RE_DECORATIVE.sub(" ", cleaned)
    cleaned = _RE_DISALLOWED.sub(" ", cleaned)

    lines = (_RE_SPACES.sub(" ", line).strip() for line in cleaned.split("\n"))
    return "\n".join(line for line in lines if line)


def combine_sources(source: RawSource) -> str:
    """Join the fragments of a RawSource into one raw text blob."""
    return source.combined_text()
