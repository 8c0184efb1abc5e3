from __future__ import annotations

import pytest

from recipe_normalizer.models.recipe import RawSource
from recipe_normalizer.parsers.text_normalizer import combine_sources, normalize

from conftest import SCENARIO_A, generated_texts


def test_removes_links() -> None:
    assert normalize("두부 https://example.com/a?b=1 200g") == "두부 200g"


def test_removes_emoji_and_hashtags() -> None:
    assert normalize("김치찌개 🔥😋 #shorts #레시피") == "김치찌개"


def test_keeps_basic_punctuation() -> None:
    assert normalize("[재료] 두부: 200g, (부침용)") == "[재료] 두부: 200g, (부침용)"


def test_replaces_other_symbols_with_space() -> None:
    assert normalize("1 - 3 ★ 4 ~ 5") == "1 3 4 5"


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("양파 1/2개", "양파 0.5개"),
        ("밀가루 1 1/2컵", "밀가루 1.5컵"),
        ("설탕 1/3컵", "설탕 0.33컵"),
        ("물 1/0컵", "물 1 0컵"),
        ("2024/01/02 업로드", "2024 01 02 업로드"),
    ],
)
def test_fractions_become_decimals(text: str, expected: str) -> None:
    assert normalize(text) == expected


def test_collapses_whitespace_but_keeps_lines() -> None:
    assert normalize("  a   b \n\n\t c \r\n d") == "a b\nc\nd"


def test_empty_and_non_text_input() -> None:
    assert normalize("") == ""
    assert normalize(None) == ""  # type: ignore[arg-type]


def test_only_links_and_emoji() -> None:
    assert normalize("🔗 https://youtu.be/abc 👍 ❤️") == ""


@pytest.mark.parametrize(
    "text",
    [
        "",
        SCENARIO_A,
        "🔗📌⭐ https://a.b/c #tag",
        "Half ½ cup, 1/2 tsp — “quoted” text_with_underscores",
        "  lots   of\n\n\n   blank \t lines  ",
        "제육볶음 만들기!!! 😋😋\n돼지고기 600g / 양파 1개 ~ 대파 1대",
        "가나다 " * 3000,
    ],
)
def test_idempotent(text: str) -> None:
    once = normalize(text)
    assert normalize(once) == once


def test_combine_sources_order() -> None:
    source = RawSource(
        title="된장찌개",
        description="설명",
        pinned_comment="고정 댓글",
        freeform_text="  ",
    )
    assert combine_sources(source) == "된장찌개\n\n고정 댓글\n\n설명"


@pytest.mark.parametrize("text", generated_texts(200))
def test_idempotent_and_clean_on_generated_text(text: str) -> None:
    once = normalize(text)

    assert normalize(once) == once
    assert "/" not in once
    assert "http" not in once
    if once:
        assert all(line and line == line.strip() for line in once.split("\n"))
