from __future__ import annotations

from typing import Any, Callable

import pytest

from telegrator.filters import FilterExecutionContext
from telegrator.types import Message


def _message(
    text: str | None = None,
    chat: dict[str, Any] | None = None,
    **extra: Any,
) -> Message:
    payload: dict[str, Any] = {
        "message_id": extra.pop("message_id", 1),
        "date": 1700000000,
        "chat": chat if chat is not None else {"id": 100, "type": "private"},
        **extra,
    }
    if text is not None:
        payload["text"] = text
    return Message.model_validate(payload)


@pytest.fixture
def make_message() -> Callable[..., Message]:
    return _message


@pytest.fixture
def make_context() -> Callable[..., FilterExecutionContext[Message]]:
    def factory(text: str | None = None, chat: dict[str, Any] | None = None, **extra: Any):
        return FilterExecutionContext(target=_message(text, chat, **extra))

    return factory
