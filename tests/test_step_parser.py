from __future__ import annotations

import pytest

from recipe_normalizer.parsers.step_parser import parse_steps


def _descriptions(steps) -> list[str]:
    return [step.description for step in steps]


def test_numbered_steps() -> None:
    steps = parse_steps("1. 물을 끓인다\n2. 두부를 넣는다")

    assert [(step.id, step.order) for step in steps] == [("step-1", 1), ("step-2", 2)]
    assert _descriptions(steps) == ["물을 끓인다", "두부를 넣는다"]


def test_parenthesis_numbering() -> None:
    assert _descriptions(parse_steps("1) 물을 끓인다\n2) 두부를 넣는다")) == ["물을 끓인다", "두부를 넣는다"]


def test_shuffled_numbering_is_restored() -> None:
    steps = parse_steps("2. 두부를 넣는다\n1. 물을 끓인다")

    assert _descriptions(steps) == ["물을 끓인다", "두부를 넣는다"]
    assert [step.order for step in steps] == [1, 2]


def test_broken_numbering_is_renumbered_in_order() -> None:
    steps = parse_steps("1. 물을 끓인다\n2. 두부를 넣는다\n2. 파를 넣는다\n4. 불을 끈다")

    assert [step.order for step in steps] == [1, 2, 3, 4]
    assert _descriptions(steps) == ["물을 끓인다", "두부를 넣는다", "파를 넣는다", "불을 끈다"]


def test_implicit_steps() -> None:
    steps = parse_steps("물을 냄비에 붓고 끓인다\n맛있게 드세요\n두부를 넣고 5분 더 끓인다")

    assert _descriptions(steps) == ["물을 냄비에 붓고 끓인다", "두부를 넣고 5분 더 끓인다"]


def test_mixed_numbered_and_implicit_steps() -> None:
    steps = parse_steps("1. 물을 끓인다\n두부를 넣고 5분 더 끓인다")

    assert [step.order for step in steps] == [1, 2]
    assert _descriptions(steps) == ["물을 끓인다", "두부를 넣고 5분 더 끓인다"]


def test_decimal_is_not_an_ordinal() -> None:
    line = "1.5컵의 물을 냄비에 붓는다"

    assert _descriptions(parse_steps(line)) == [line]


def test_headers_and_bare_numbers_are_skipped() -> None:
    steps = parse_steps("[조리방법]\n만드는 법\n3\n1. 물을 끓인다\n2. 양념 만들기")

    assert _descriptions(steps) == ["물을 끓인다", "양념 만들기"]


def test_orders_are_dense() -> None:
    block = "\n".join(f"{number}. 재료를 순서대로 넣는다" for number in (3, 7, 9))
    steps = parse_steps(block)

    assert [step.order for step in steps] == [1, 2, 3]
    assert [step.id for step in steps] == ["step-1", "step-2", "step-3"]


def test_empty_block() -> None:
    assert parse_steps("") == []
    assert parse_steps("  \n ") == []
    assert parse_steps(None) == []  # type: ignore[arg-type]


def test_sentences_mentioning_section_words_are_steps() -> None:
    block = "재료를 모두 냄비에 넣는다\n약불에서 5분간 조리한다\n그릇에 담아서 완성합니다"

    assert _descriptions(parse_steps(block)) == [
        "재료를 모두 냄비에 넣는다",
        "약불에서 5분간 조리한다",
        "그릇에 담아서 완성합니다",
    ]


@pytest.mark.parametrize("line", ["재료를 모두 냄비에 넣는다", "약불에서 5분간 조리한다"])
def test_single_sentence_with_section_word(line: str) -> None:
    assert _descriptions(parse_steps(line)) == [line]
