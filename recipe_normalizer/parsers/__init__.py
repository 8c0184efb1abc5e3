"""Parsers package."""
from .ingredient_parser import parse_ingredient_line, parse_ingredients
from .local_parser import LocalRecipeParser, ParsedRecipe
from .section_segmenter import SectionBlocks, segment
from .step_parser import parse_steps
from .text_normalizer import normalize

__all__ = [
    "LocalRecipeParser",
    "ParsedRecipe",
    "SectionBlocks",
    "normalize",
    "parse_ingredient_line",
    "parse_ingredients",
    "parse_steps",
    "segment",
]
