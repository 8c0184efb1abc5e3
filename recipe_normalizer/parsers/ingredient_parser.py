"""
Ingredient Line Parser.

This module turns comma-delimited ingredient lines into canonical Ingredient
entities, supporting the notations seen in video descriptions and comments
(Korean and English units, name-first and quantity-first order).
"""
from __future__ import annotations

import logging
import re
from typing import Callable, NamedTuple

from ..const import VAGUE_QUANTITY_KEYWORDS
from ..models.recipe import Ingredient
from ..unit_converter import fold_unit, to_canonical
from .section_segmenter import is_section_header

_LOGGER = logging.getLogger(__name__)

# Map unicode fractions to their decimal values
FRACTION_VALUES = {
    '½': 0.5,
    '⅓': 0.333,
    '⅔': 0.667,
    '¼': 0.25,
    '¾': 0.75,
    '⅛': 0.125,
    '⅜': 0.375,
    '⅝': 0.625,
    '⅞': 0.875
}

# Mass, volume and count units (Korean + English), longest first
UNIT_WORDS = sorted(
    [
        "kg", "g", "mg", "ml", "l", "cups", "cup", "tbsp", "tbs", "tsp", "t",
        "tablespoons", "tablespoon", "teaspoons", "teaspoon", "spoons", "spoon",
        "pieces", "piece", "ea", "oz", "ounces", "ounce", "lbs", "lb", "pounds", "pound",
        "개", "컵", "큰술", "작은술", "스푼", "티스푼", "숟가락", "줌", "장", "마리", "쪽",
        "줄기", "뿌리", "송이", "포기", "대", "모", "단", "알", "봉지", "팩", "공기", "캔",
        "조각", "톨", "토막",
    ],
    key=len,
    reverse=True,
)
_UNITS = "(?:" + "|".join(re.escape(unit) for unit in UNIT_WORDS) + r")(?![A-Za-z])"
_FRACTIONS = "".join(FRACTION_VALUES)
_NUM = (
    r"(?:\d+\s+\d+\s*/\s*\d+"
    r"|\d+\s*/\s*\d+"
    rf"|\d*[{_FRACTIONS}]"
    r"|\d{1,3}(?:,\d{3})+(?:\.\d+)?"
    r"|\d+(?:\.\d+)?)"
)

# The name never ends on a bare number: '양파 1 2개' must not read as '양파 1'
_RE_NAME_QTY_UNIT = re.compile(
    rf"^(?P<name>.*?[^\s:\-\d.,/{_FRACTIONS}])\s*(?P<qty>{_NUM})\s*(?P<unit>{_UNITS})",
    re.IGNORECASE,
)
_RE_NAME_SEP_QTY_UNIT = re.compile(
    rf"^(?P<name>.+?)\s*[:\-]\s*(?P<qty>{_NUM})\s*(?P<unit>{_UNITS})",
    re.IGNORECASE,
)
_RE_QTY_UNIT_NAME = re.compile(
    rf"^(?P<qty>{_NUM})\s*(?P<unit>{_UNITS})\s+(?P<name>.+)$",
    re.IGNORECASE,
)
_RE_NAME_QTY = re.compile(rf"^(?P<name>.*?[^\s:\-])(?:\s*[:\-]\s*|\s+)(?P<qty>{_NUM})$")

# Commas split segments, except inside thousands separators such as 1,000g
_RE_SEGMENT_SPLIT = re.compile(r"[、;]|,(?!\d{3}(?:\D|$))")
_RE_URL = re.compile(r"https?://\S+", re.IGNORECASE)
_RE_HASHTAG = re.compile(r"#[^\s#]+")
_RE_NOISE = re.compile(r"[^\w\s.,()\[\]{}:/\-½⅓⅔¼¾⅛⅜⅝⅞]")
_RE_BULLET = re.compile(r"^\s*(?:[\-•·*]+|\d+[.)](?!\d))\s*")
_RE_DIGIT = re.compile(r"\d")
_RE_VAGUE = [
    re.compile(rf"(?<![a-z]){re.escape(keyword)}(?![a-z])")
    for keyword in VAGUE_QUANTITY_KEYWORDS
]

# Conjunctions separating two ingredients inside one name portion
CONJUNCTION_WORDS = {"및", "그리고", "또는", "&", "+"}
CONJUNCTION_SUFFIXES = ("과", "와", "랑", "이랑", "하고")

BARE_NAME_MAX_LENGTH = 20
COUNT_UNIT = "개"


class IngredientMatch(NamedTuple):
    """The outcome of the first matcher that accepted a segment."""

    rule: str
    name: str
    quantity: str
    unit: str


def _parse_fraction(fraction_str: str) -> float:
    """Safely parse a fraction string like '1/2' or '3/4'.

    Raises:
        ValueError: If the fraction string is invalid
        ZeroDivisionError: If denominator is zero
    """
    if '/' not in fraction_str:
        return float(fraction_str)

    parts = fraction_str.strip().split('/')
    if len(parts) != 2:
        raise ValueError(f"Invalid fraction format: {fraction_str}")

    numerator = float(parts[0].strip())
    denominator = float(parts[1].strip())

    if denominator == 0:
        raise ZeroDivisionError(
            f"Fraction has zero denominator: {fraction_str}")

    return numerator / denominator


def _apply_unicode_fractions(text: str) -> str:
    """Replace unicode fraction characters with decimal equivalents.

    Mixed numbers are converted by adding the decimal: 2½ -> 2 + 0.5 = 2.5
    """
    for fraction_char, decimal_value in FRACTION_VALUES.items():
        pattern = rf'(\d+){re.escape(fraction_char)}'

        def replace_mixed(match, value=decimal_value):
            return str(int(match.group(1)) + value)

        text = re.sub(pattern, replace_mixed, text)
        text = text.replace(fraction_char, str(decimal_value))

    return text


def parse_quantity(quantity_str: str) -> float | None:
    """Parse a quantity string that may contain fractions.

    Args:
        quantity_str: String like '2', '1/2', '2 1/2', '2.5', '1,000', '1½'

    Returns:
        Parsed float value or None if parsing fails
    """
    try:
        cleaned = quantity_str.strip().replace(',', '')
        if '/' in cleaned:
            # '2 1/2' -> whole part plus fraction
            cleaned = re.sub(r'\s*/\s*', '/', cleaned)
            return sum(_parse_fraction(p) for p in cleaned.split())
        return float(_apply_unicode_fractions(cleaned))
    except (ValueError, TypeError, ZeroDivisionError) as e:
        _LOGGER.debug("Failed to parse quantity '%s': %s", quantity_str, e)
        return None


def _from_match(rule: str, match: re.Match[str] | None, unit: str | None = None) -> IngredientMatch | None:
    if not match:
        return None
    return IngredientMatch(
        rule=rule,
        name=match.group("name"),
        quantity=match.group("qty"),
        unit=unit if unit is not None else match.group("unit"),
    )


def _match_name_quantity_unit(segment: str) -> IngredientMatch | None:
    """'두부 200g', '간장 2 큰술'"""
    return _from_match("name_quantity_unit", _RE_NAME_QTY_UNIT.match(segment))


def _match_name_separator_quantity_unit(segment: str) -> IngredientMatch | None:
    """'두부: 200g', '설탕 - 1큰술'"""
    return _from_match("name_separator_quantity_unit", _RE_NAME_SEP_QTY_UNIT.match(segment))


def _match_quantity_unit_name(segment: str) -> IngredientMatch | None:
    """'300g 돼지고기', '2 tbsp soy sauce'"""
    return _from_match("quantity_unit_name", _RE_QTY_UNIT_NAME.match(segment))


def _match_name_quantity(segment: str) -> IngredientMatch | None:
    """'양파 1', unit defaults to the canonical unit."""
    return _from_match("name_quantity", _RE_NAME_QTY.match(segment), unit="g")


def _match_bare_name(segment: str) -> IngredientMatch | None:
    """'후추', a short name with no number at all counts as one piece."""
    if _RE_DIGIT.search(segment) or len(segment) > BARE_NAME_MAX_LENGTH:
        return None
    return IngredientMatch("bare_name", segment, "1", COUNT_UNIT)


# Tried in order; the first matcher that accepts a segment wins
INGREDIENT_MATCHERS: tuple[Callable[[str], IngredientMatch | None], ...] = (
    _match_name_quantity_unit,
    _match_name_separator_quantity_unit,
    _match_quantity_unit_name,
    _match_name_quantity,
    _match_bare_name,
)


def _contains_vague_keyword(text: str) -> bool:
    lower = text.lower()
    return any(pattern.search(lower) for pattern in _RE_VAGUE)


def _split_clauses(name: str) -> list[str]:
    """Split a name portion at conjunctions: '약간의 소금과 고기' -> ['약간의 소금과', '고기']"""
    clauses: list[list[str]] = [[]]
    words = name.split()
    for index, word in enumerate(words):
        is_last = index == len(words) - 1
        if word in CONJUNCTION_WORDS:
            clauses.append([])
            continue
        clauses[-1].append(word)
        if not is_last and len(word) > 1 and word.endswith(CONJUNCTION_SUFFIXES):
            clauses.append([])
    return [" ".join(clause) for clause in clauses if clause]


def _clean_name(name: str) -> str | None:
    """Strip decoration from a name portion and drop vague-quantity clauses.

    Returns:
        The usable name, or None when nothing measurable remains
    """
    name = re.sub(r"\s+", " ", name).strip(" :-•·*/.,")
    if not name:
        return None

    if _contains_vague_keyword(name):
        clauses = _split_clauses(name)
        if len(clauses) < 2 or _contains_vague_keyword(clauses[-1]):
            return None
        name = clauses[-1].strip(" :-•·*/.,")

    if not name or not re.search(r"[^\W\d_]", name):
        return None
    return name


def scrub_segment(segment: str) -> str:
    """Remove hashtags, links, emoji and bullet prefixes from a segment."""
    segment = _RE_URL.sub(" ", segment)
    segment = _RE_HASHTAG.sub(" ", segment)
    segment = _RE_NOISE.sub(" ", segment)
    segment = _RE_BULLET.sub("", segment)
    return re.sub(r"\s+", " ", segment).strip()


def split_segments(line: str) -> list[str]:
    """Split an ingredient line on commas, keeping thousands separators intact."""
    return [part for part in _RE_SEGMENT_SPLIT.split(line) if part.strip()]


def match_ingredient_segment(segment: str) -> IngredientMatch | None:
    """Run the ordered matchers over a scrubbed segment.

    Returns:
        The match of the first matcher that accepts the segment, or None
    """
    for matcher in INGREDIENT_MATCHERS:
        result = matcher(segment)
        if result is not None:
            return result
    return None


def _parse_segment(segment: str) -> tuple[str, float] | None:
    segment = scrub_segment(segment)
    if not segment:
        return None

    if not _RE_DIGIT.search(segment) and is_section_header(segment):
        _LOGGER.debug("Skipping section header '%s'", segment)
        return None

    match = match_ingredient_segment(segment)
    if match is None:
        _LOGGER.debug("No ingredient pattern matched '%s'", segment)
        return None

    name = _clean_name(match.name)
    if name is None:
        _LOGGER.debug("Dropping vague or empty ingredient '%s'", segment)
        return None

    quantity = parse_quantity(match.quantity)
    if quantity is None or quantity <= 0:
        _LOGGER.debug("Dropping ingredient '%s' with unusable quantity", segment)
        return None

    canonical = to_canonical(quantity, fold_unit(match.unit))
    if canonical.quantity <= 0:
        return None

    _LOGGER.debug("Parsed '%s' via %s: %s %s -> %s %s",
                  segment, match.rule, name, match.quantity, match.unit,
                  canonical.quantity, canonical.unit)
    return name, canonical.quantity


def parse_ingredient_line(line: str) -> list[Ingredient]:
    """Parse one ingredient line into zero or more ingredients.

    Args:
        line: A line such as '두부 200g, 양파 1개'

    Returns:
        Ingredients numbered from 1 in segment order
    """
    if not isinstance(line, str) or not line.strip():
        return []

    ingredients = []
    for segment in split_segments(line):
        parsed = _parse_segment(segment)
        if parsed is None:
            continue
        name, quantity = parsed
        ingredients.append(Ingredient(
            id=f"ingredient-{len(ingredients) + 1}",
            name=name,
            quantity=quantity,
        ))

    return ingredients


def parse_ingredients(block: str) -> list[Ingredient]:
    """Parse every line of an ingredients block, numbering ids across the block."""
    if not isinstance(block, str):
        return []

    ingredients: list[Ingredient] = []
    for line in block.split("\n"):
        for ingredient in parse_ingredient_line(line):
            ingredients.append(ingredient.model_copy(
                update={"id": f"ingredient-{len(ingredients) + 1}"}))

    return ingredients
