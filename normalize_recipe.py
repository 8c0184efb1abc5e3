#!/usr/bin/env python3
"""
Recipe Normalizer - Structure recipes from video text

Reads a video title, description, pinned comment or pasted text, and prints
the structured recipe: dish name, ingredients in the canonical unit and
ordered cooking steps.
"""
import argparse
import json
import logging
import sys
from pathlib import Path

import voluptuous as vol

from recipe_normalizer.config import load_settings
from recipe_normalizer.models.recipe import ExtractionResult, RawSource
from recipe_normalizer.services.ingredient_formatter import (
    format_ingredients,
    format_steps,
    scale_ingredients,
)
from recipe_normalizer.services.recipe_service import build_adapter, extract_recipe
from recipe_normalizer.services.service_handlers import raw_source_from_payload

logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def build_source(args: argparse.Namespace) -> RawSource:
    """Build the RawSource from command line arguments.

    A JSON payload file is validated first; explicit flags override its fields.
    """
    fields = {}
    if args.payload:
        payload = json.loads(args.payload.read_text(encoding='utf-8'))
        fields = raw_source_from_payload(payload).model_dump()

    freeform = args.text
    if args.file:
        freeform = args.file.read_text(encoding='utf-8')

    overrides = {
        "title": args.title,
        "description": args.description,
        "pinned_comment": args.pinned_comment,
        "freeform_text": freeform,
    }
    fields.update({key: value for key, value in overrides.items() if value is not None})
    return RawSource(**fields)


def print_result(result: ExtractionResult, ingredients) -> None:
    """Print a human readable summary of the extraction."""
    print(f"\n📝 Name: {result.name or '(unknown)'}")
    print(f"🔎 Method: {result.method}")

    print(f"\n🥘 Ingredients: {len(ingredients)}")
    for line in format_ingredients(ingredients):
        print(f"   - {line}")

    print(f"\n👩‍🍳 Steps: {len(result.steps)}")
    for line in format_steps(result.steps):
        print(f"   {line}")

    if result.is_empty():
        print("\n⚠️  Nothing could be extracted, please fill in the recipe manually:")
        print(result.raw_text)


def main():
    """Main entry point for the recipe normalizer."""
    parser = argparse.ArgumentParser(
        description="Structure recipe text from videos into ingredients and steps"
    )
    parser.add_argument("--title", help="Video title")
    parser.add_argument("--description", help="Video description")
    parser.add_argument("--pinned-comment", help="Pinned comment text")
    parser.add_argument("--text", help="Freeform recipe text")
    parser.add_argument(
        "--file",
        type=Path,
        help="Read freeform recipe text from a file"
    )
    parser.add_argument(
        "--payload",
        type=Path,
        help="JSON file with title, description, pinned_comment and/or freeform_text"
    )
    parser.add_argument(
        "--no-ai",
        action="store_true",
        help="Skip the Gemini structuring step and parse locally only"
    )
    parser.add_argument(
        "--base-servings",
        type=float,
        help="Servings the recipe is written for"
    )
    parser.add_argument(
        "--servings",
        type=float,
        help="Scale ingredient quantities to this many servings"
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the result as JSON"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    args = parser.parse_args()
    _configure_logging(args.verbose)

    try:
        source = build_source(args)
    except (OSError, ValueError, vol.Invalid) as e:
        logger.error("Invalid input: %s", e)
        sys.exit(2)

    if source.is_empty():
        logger.error("No text provided. Use --title, --description, --pinned-comment, --text, --file or --payload")
        sys.exit(2)

    settings = load_settings()
    adapter = None if args.no_ai else build_adapter(settings)

    result = extract_recipe(source, adapter)

    ingredients = result.ingredients
    if args.servings:
        ingredients = scale_ingredients(ingredients, args.base_servings, args.servings)

    if args.json:
        data = result.model_dump(by_alias=True)
        data["ingredients"] = [ingredient.model_dump(by_alias=True) for ingredient in ingredients]
        print(json.dumps(data, indent=2, ensure_ascii=False))
    else:
        print_result(result, ingredients)

    sys.exit(0 if not result.is_empty() else 1)


if __name__ == "__main__":
    main()
