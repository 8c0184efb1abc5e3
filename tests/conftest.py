from __future__ import annotations

import json
import random
from typing import Any

import pytest


SCENARIO_A = "된장찌개\n\n[레시피]\n두부 200g, 양파 1개\n\n[조리방법]\n1. 물을 끓인다\n2. 두부를 넣는다"

# Building blocks for generated noisy recipe text
FRAGMENTS = [
    "된장찌개", "[재료]", "[조리방법]", "만드는 법", "두부 200g", "양파 1/2개", "1 1/2컵", "1/0",
    "소금 약간", "300g 돼지고기", "1. 물을 끓인다", "2)", "https://youtu.be/x?a=1", "#shorts",
    "🔥😋", "❤️", "—", "½", "_", ", ", "  ", "\n", "\r\n", "\t", ":", "~", "★", "a/b",
    "2024/01/02", "salt to taste", "ø",
]


def generated_texts(count: int, seed: int = 7) -> list[str]:
    rng = random.Random(seed)
    return [
        "".join(rng.choice(FRAGMENTS) for _ in range(rng.randint(0, 30)))
        for _ in range(count)
    ]


def gemini_body(text: str) -> dict[str, Any]:
    return {"candidates": [{"content": {"parts": [{"text": text}]}}]}


class FakeResponse:
    def __init__(self, status_code: int = 200, body: Any = None, text: str | None = None) -> None:
        self.status_code = status_code
        self._body = body
        if text is None:
            text = json.dumps(body, ensure_ascii=False) if body is not None else ""
        self.text = text

    @property
    def ok(self) -> bool:
        return self.status_code < 400

    def json(self) -> Any:
        if self._body is None:
            raise ValueError("No JSON body")
        return self._body


class FakeSession:
    """Stands in for requests.Session, replaying queued responses."""

    def __init__(self, responses: list[Any]) -> None:
        self.responses = list(responses)
        self.calls: list[dict[str, Any]] = []

    def post(self, url: str, params=None, json=None, timeout=None):
        self.calls.append({"url": url, "params": params, "json": json, "timeout": timeout})
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    @property
    def called_models(self) -> list[str]:
        return [call["url"].rsplit("/", 1)[-1].split(":")[0] for call in self.calls]


@pytest.fixture
def make_session():
    def factory(*responses: Any) -> FakeSession:
        return FakeSession(list(responses))
    return factory
