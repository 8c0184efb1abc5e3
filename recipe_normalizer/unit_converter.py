"""Unit canonicalization utilities for recipe ingredients."""
from __future__ import annotations

import math
from typing import NamedTuple

from .const import CANONICAL_UNIT

# Spoon measurements folded to a single synonym before lookup
SPOON_SYNONYMS = {
    # Tablespoons
    "spoon": "tablespoon",
    "spoons": "tablespoon",
    "tablespoon": "tablespoon",
    "tablespoons": "tablespoon",
    "tbsp": "tablespoon",
    "tbs": "tablespoon",
    "t": "tablespoon",
    "스푼": "tablespoon",
    "숟가락": "tablespoon",
    "큰술": "tablespoon",
    # Teaspoons
    "teaspoon-small": "teaspoon",
    "teaspoon": "teaspoon",
    "teaspoons": "teaspoon",
    "tsp": "teaspoon",
    "티스푼": "teaspoon",
    "작은술": "teaspoon",
}

# Multipliers onto the canonical numeric scale, keyed by lower-cased unit
TO_CANONICAL = {
    "mg": 0.001,
    "milligram": 0.001,
    "milligrams": 0.001,
    "g": 1,
    "gram": 1,
    "grams": 1,
    "kg": 1000,
    "kilogram": 1000,
    "kilograms": 1000,
    "ounce": 28.35,
    "ounces": 28.35,
    "oz": 28.35,
    "pound": 453.592,
    "pounds": 453.592,
    "lb": 453.592,
    "lbs": 453.592,
    # Volumes share the canonical scale (1 ml == 1 g)
    "ml": 1,
    "milliliter": 1,
    "milliliters": 1,
    "l": 1000,
    "liter": 1000,
    "liters": 1000,
}


class CanonicalQuantity(NamedTuple):
    """A quantity expressed in the canonical unit."""

    quantity: float
    unit: str


def fold_unit(unit: str | None) -> str:
    """
    Fold spoon-measure synonyms onto their canonical synonym name.

    Examples:
        >>> fold_unit('tbsp')
        'tablespoon'
        >>> fold_unit('티스푼')
        'teaspoon'
        >>> fold_unit('개')
        '개'
    """
    if not unit:
        return ""

    unit_stripped = unit.strip()
    if unit_stripped in SPOON_SYNONYMS:
        return SPOON_SYNONYMS[unit_stripped]

    return SPOON_SYNONYMS.get(unit_stripped.lower(), unit_stripped)


def to_canonical(quantity: float, unit: str | None) -> CanonicalQuantity:
    """
    Convert a quantity and unit onto the canonical unit.

    Mass and volume units are scaled; count nouns and spoon measures keep their
    numeric value, since downstream pricing works per canonical unit.

    Args:
        quantity: The numeric quantity
        unit: The unit string (e.g., 'kg', 'L', '개', 'tbsp')

    Returns:
        CanonicalQuantity tagged with the canonical unit. A quantity that is not
        a finite number comes back as 0.

    Examples:
        >>> to_canonical(1.5, 'kg')
        CanonicalQuantity(quantity=1500.0, unit='g')
        >>> to_canonical(2, '큰술')
        CanonicalQuantity(quantity=2.0, unit='g')
    """
    try:
        value = float(quantity)
    except (TypeError, ValueError):
        return CanonicalQuantity(0.0, CANONICAL_UNIT)

    if not math.isfinite(value):
        return CanonicalQuantity(0.0, CANONICAL_UNIT)

    folded = fold_unit(unit).lower()
    multiplier = TO_CANONICAL.get(folded, 1)
    return CanonicalQuantity(value * multiplier, CANONICAL_UNIT)


def format_quantity(quantity: float | int | None) -> str:
    """
    Format quantity to remove unnecessary decimals.

    Args:
        quantity: The numeric quantity (can be int, float, or None)

    Returns:
        Formatted string (empty string if quantity is None)

    Examples:
        >>> format_quantity(2.0)
        '2'
        >>> format_quantity(2.5)
        '2.5'
        >>> format_quantity(2.126)
        '2.13'
    """
    if quantity is None:
        return ""

    # If it's a whole number, return without decimals
    if quantity == int(quantity):
        return str(int(quantity))

    # Otherwise, return with up to 2 decimal places, removing trailing zeros
    return f"{quantity:.2f}".rstrip('0').rstrip('.')
