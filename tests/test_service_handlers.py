from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

import pytest
import voluptuous as vol

from recipe_normalizer.config import load_settings
from recipe_normalizer.const import (
    CONF_API_KEY,
    CONF_MAX_TEXT_LENGTH,
    CONF_MODELS,
    CONF_TIMEOUT,
    DEFAULT_MAX_TEXT_LENGTH,
    DEFAULT_MODELS,
)
from recipe_normalizer.models.recipe import Ingredient
from recipe_normalizer.parsers.step_parser import parse_steps
from recipe_normalizer.services.ingredient_formatter import (
    format_ingredients,
    format_steps,
    scale_ingredients,
)
from recipe_normalizer.services.request_generation import RequestGeneration
from recipe_normalizer.services.service_handlers import handle_extract, raw_source_from_payload

ENV_KEYS = (CONF_API_KEY, CONF_MODELS, CONF_TIMEOUT, CONF_MAX_TEXT_LENGTH)


def test_handle_extract_serializes_camel_case() -> None:
    data = handle_extract({
        "title": "된장찌개",
        "pinnedComment": "[재료]\n두부 200g, 양파 1개\n[조리방법]\n1. 물을 끓인다",
    })

    assert data["name"] == "된장찌개"
    assert data["ingredients"][0] == {
        "id": "ingredient-1",
        "name": "두부",
        "quantity": 200,
        "unit": "g",
        "costPerUnit": 0.0,
        "category": None,
    }
    assert data["steps"][0]["description"] == "물을 끓인다"
    assert "rawText" in data
    assert data["method"] == "local"


def test_payload_aliases() -> None:
    source = raw_source_from_payload({"text": "두부 200g", "description": None})

    assert source.freeform_text == "두부 200g"
    assert source.description is None


@pytest.mark.parametrize(
    "payload",
    [{"title": 3}, {"unknown": "x"}, ["두부 200g"], "두부 200g"],
)
def test_invalid_payloads(payload) -> None:
    with pytest.raises(vol.Invalid):
        handle_extract(payload)


def test_request_generation() -> None:
    generations = RequestGeneration()

    first = generations.next()
    second = generations.next()

    assert second > first
    assert not generations.is_current(first)
    assert generations.is_current(second)
    assert generations.current == second


def test_scale_ingredients() -> None:
    ingredients = [Ingredient(id="ingredient-1", name="두부", quantity=200)]

    assert scale_ingredients(ingredients, 2, 3)[0].quantity == 300
    assert scale_ingredients(ingredients, None, 3) is ingredients
    assert scale_ingredients(ingredients, 2, 0) is ingredients


def test_format_lines() -> None:
    ingredients = [
        Ingredient(id="ingredient-1", name="두부", quantity=200),
        Ingredient(id="ingredient-2", name="간장", quantity=1.5),
    ]

    assert format_ingredients(ingredients) == ["두부 200g", "간장 1.5g"]
    assert format_steps(parse_steps("1. 물을 끓인다")) == ["1. 물을 끓인다"]


@pytest.fixture
def clean_env(monkeypatch):
    # Registering each key first makes monkeypatch remove whatever
    # load_dotenv writes once the test ends.
    for key in ENV_KEYS:
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)


def test_load_settings_from_env_file(clean_env, tmp_path) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text(
        f"{CONF_API_KEY}=secret\n"
        f"{CONF_MODELS}=model-a, model-b\n"
        f"{CONF_TIMEOUT}=12.5\n"
        f"{CONF_MAX_TEXT_LENGTH}=not-a-number\n",
        encoding="utf-8",
    )

    settings = load_settings(str(env_file))

    assert settings.api_key == "secret"
    assert settings.models == ["model-a", "model-b"]
    assert settings.timeout == 12.5
    assert settings.max_text_length == DEFAULT_MAX_TEXT_LENGTH


def test_load_settings_defaults(clean_env, tmp_path) -> None:
    settings = load_settings(str(tmp_path / "missing.env"))

    assert settings.api_key == ""
    assert settings.models == DEFAULT_MODELS


def test_request_generation_across_threads() -> None:
    generations = RequestGeneration()

    with ThreadPoolExecutor(max_workers=8) as executor:
        taken = list(executor.map(lambda _: generations.next(), range(200)))

    assert sorted(taken) == list(range(1, 201))
    assert generations.current == 200
    assert generations.is_current(200)
