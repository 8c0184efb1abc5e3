from __future__ import annotations

from recipe_normalizer.parsers.section_segmenter import (
    SectionBlocks,
    is_section_header,
    segment,
)
from recipe_normalizer.parsers.text_normalizer import normalize

from conftest import SCENARIO_A


def test_empty_input() -> None:
    assert segment("") == SectionBlocks("", "")


def test_text_without_sections_becomes_steps() -> None:
    text = "물을 냄비에 붓고 끓인다\n두부를 넣고 5분 더 끓인다"
    assert segment(text) == SectionBlocks("", text)


def test_bracketed_markers() -> None:
    blocks = segment(normalize(SCENARIO_A))

    assert blocks.ingredients_block == "두부 200g, 양파 1개"
    assert blocks.steps_block == "1. 물을 끓인다\n2. 두부를 넣는다"


def test_ingredients_marker_runs_to_end_of_text() -> None:
    blocks = segment("[재료]\n두부 200g\n양파 1개")

    assert blocks.ingredients_block == "두부 200g\n양파 1개"
    assert blocks.steps_block == ""


def test_marker_with_trailing_text() -> None:
    blocks = segment("[재료] 두부 200g, 양파 1개\n[만드는 법] 1. 물을 끓인다")

    assert blocks.ingredients_block == "두부 200g, 양파 1개"
    assert blocks.steps_block == "1. 물을 끓인다"


def test_steps_before_ingredients() -> None:
    blocks = segment("[Method]\n1. Boil water\n[Ingredients]\ntofu 200g")

    assert blocks.ingredients_block == "tofu 200g"
    assert blocks.steps_block == "1. Boil water"


def test_keyword_headers() -> None:
    text = "김치찌개\n재료\n김치 200g\n만드는 법\n1. 김치를 볶는다\n2. 양념 만들기"
    blocks = segment(text)

    assert blocks.ingredients_block == "김치 200g"
    assert blocks.steps_block == "1. 김치를 볶는다\n2. 양념 만들기"


def test_markers_take_precedence_over_keywords() -> None:
    text = "재료 준비\n[재료]\n두부 200g\n[조리방법]\n1. 끓인다"
    blocks = segment(text)

    assert blocks.ingredients_block == "두부 200g"
    assert blocks.steps_block == "1. 끓인다"


def test_is_section_header() -> None:
    assert is_section_header("[레시피]")
    assert is_section_header("【조리 순서】")
    assert is_section_header("필요한 재료:")
    assert is_section_header("Ingredients")
    assert not is_section_header("두부 200g")
    assert not is_section_header("2. 양념 만들기")
    assert not is_section_header("재료를 모두 넣고 센 불에서 10분 동안 끓여 주세요")


def test_sentences_with_section_words_are_not_headers() -> None:
    text = "재료를 모두 냄비에 넣는다\n약불에서 5분간 조리한다\n그릇에 담아서 완성합니다"

    assert segment(text) == SectionBlocks("", text)
    assert not is_section_header("약불에서 5분간 조리한다")
    assert not is_section_header("재료를 모두 냄비에 넣는다")


def test_unbracketed_marker_names_are_headers() -> None:
    assert is_section_header("조리방법")
    assert is_section_header("만드는 법:")
    assert is_section_header("김치찌개 재료")
