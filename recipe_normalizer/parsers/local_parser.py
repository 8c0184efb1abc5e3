"""
Local Recipe Parser.

The deterministic, network-free parser chain: segment the text, then parse
the ingredients region and the steps region.
"""
from __future__ import annotations

import logging
from typing import NamedTuple

from ..models.recipe import Ingredient, Step
from .ingredient_parser import parse_ingredients
from .section_segmenter import segment
from .step_parser import parse_steps

_LOGGER = logging.getLogger(__name__)


class ParsedRecipe(NamedTuple):
    """Ingredients and steps recovered from one text."""

    ingredients: list[Ingredient]
    steps: list[Step]

    def is_empty(self) -> bool:
        return not self.ingredients and not self.steps


class LocalRecipeParser:
    """Parses recipe text without any external service."""

    def parse_recipe(self, text: str) -> ParsedRecipe:
        """Parse ingredients and steps from recipe text.

        Args:
            text: Normalized recipe text

        Returns:
            ParsedRecipe, possibly with empty lists
        """
        blocks = segment(text)
        ingredients = parse_ingredients(blocks.ingredients_block)
        steps = parse_steps(blocks.steps_block)

        _LOGGER.debug("Local parsing found %d ingredients and %d steps",
                      len(ingredients), len(steps))
        return ParsedRecipe(ingredients, steps)

    def parse_sections(self, ingredients_text: str, method_text: str) -> ParsedRecipe:
        """Parse text that already arrives split into ingredients and method.

        Either part may still carry its own section header, which is skipped.
        """
        return ParsedRecipe(
            parse_ingredients(segment(ingredients_text).ingredients_block or ingredients_text),
            parse_steps(method_text),
        )
