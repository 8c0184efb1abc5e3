"""
Step Line Parser.

Turns the steps region of a recipe into densely ordered Step entities.
"""
from __future__ import annotations

import logging
import re

from ..models.recipe import Step
from .section_segmenter import is_section_header

_LOGGER = logging.getLogger(__name__)

# '1. 물을 끓인다' or '2) 두부를 넣는다', but not '1.5컵'
_RE_ORDINAL = re.compile(r"^(\d+)\s*[.)](?!\d)\s*(.*)$")
_RE_DIGITS_ONLY = re.compile(r"^[\d\s.)]+$")

IMPLICIT_STEP_MIN_LENGTH = 10


def _collect(block: str) -> list[tuple[int | None, str]]:
    """Return (literal numeral, description) pairs in discourse order."""
    collected = []
    for raw_line in block.split("\n"):
        line = raw_line.strip()
        if not line or _RE_DIGITS_ONLY.match(line):
            continue

        match = _RE_ORDINAL.match(line)
        if match:
            description = match.group(2).strip()
            if description:
                collected.append((int(match.group(1)), description))
            continue

        if is_section_header(line):
            _LOGGER.debug("Skipping section header '%s'", line)
        elif len(line) > IMPLICIT_STEP_MIN_LENGTH:
            collected.append((None, line))
        else:
            _LOGGER.debug("Line too short for an implicit step: '%s'", line)
    return collected


def _numbering_is_reconstructible(numerals: list[int | None]) -> bool:
    """True when every step is numbered and the numerals are exactly 1..n."""
    if any(numeral is None for numeral in numerals):
        return False
    return sorted(numerals) == list(range(1, len(numerals) + 1))


def parse_steps(block: str) -> list[Step]:
    """Parse a steps region into ordered steps.

    Explicit numbering is honoured when it is a clean 1..n sequence; any gap,
    repeat or unnumbered line renumbers the steps densely in the order they
    appear.

    Args:
        block: The steps region, one step per line

    Returns:
        Steps ordered 1..n
    """
    if not isinstance(block, str) or not block.strip():
        return []

    collected = _collect(block)
    numerals = [numeral for numeral, _ in collected]

    if _numbering_is_reconstructible(numerals):
        ordered = sorted(collected, key=lambda item: item[0])
    else:
        if any(numeral is not None for numeral in numerals):
            _LOGGER.debug("Step numbering %s is not a clean sequence, renumbering", numerals)
        ordered = collected

    return [
        Step(id=f"step-{order}", order=order, description=description)
        for order, (_, description) in enumerate(ordered, start=1)
    ]
