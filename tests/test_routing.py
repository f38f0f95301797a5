import pytest

from telegrator.annotations import ChatType, HasText, TextEquals, TextStartsWith
from telegrator.comparison import StringComparison
from telegrator.filters import FilterExecutionContext, MessageFilter
from telegrator.handlers import HandlerRegistry
from telegrator.routing import MessageRouter
from telegrator.types import ChatTypeFlags


def build_router(calls):
    registry = HandlerRegistry()

    @registry.handler("start", TextEquals("/start", StringComparison.ORDINAL_IGNORE_CASE))
    async def start(message):
        calls.append(("start", message.text))

    @registry.handler("group_text", HasText(), ChatType(ChatTypeFlags.GROUP | ChatTypeFlags.SUPERGROUP))
    async def group_text(message):
        calls.append(("group_text", message.text))

    @registry.handler("any_text", HasText())
    async def any_text(message):
        calls.append(("any_text", message.text))

    return MessageRouter(registry)


def test_resolve_picks_first_match(make_message) -> None:
    router = build_router([])
    assert router.resolve(make_message("/START")).handler_id == "start"
    group_msg = make_message("hello", chat={"id": -1, "type": "supergroup"})
    assert router.resolve(group_msg).handler_id == "group_text"
    assert router.resolve(make_message("hello")).handler_id == "any_text"


def test_resolve_returns_none_without_match(make_message) -> None:
    assert build_router([]).resolve(make_message(None)) is None
    assert MessageRouter().resolve(make_message("x")) is None


def test_resolve_stops_at_first_match(make_message) -> None:
    evaluated = []

    class Spy(MessageFilter):
        def __init__(self, name):
            self.name = name

        def can_pass_message(self, message, context):
            evaluated.append(self.name)
            return True

    registry = HandlerRegistry()
    registry.register("a", lambda m: None, Spy("a"))
    registry.register("b", lambda m: None, Spy("b"))
    assert MessageRouter(registry).resolve(make_message("x")).handler_id == "a"
    assert evaluated == ["a"]


def test_resolve_exposes_data_to_filters(make_message) -> None:
    class BotMentioned(MessageFilter):
        def can_pass_message(self, message, context: FilterExecutionContext):
            return f"@{context.data['bot_username']}" in (message.text or "")

    registry = HandlerRegistry()
    registry.register("mention", lambda m: None, BotMentioned())
    router = MessageRouter(registry)
    assert router.resolve(make_message("hi @helper"), {"bot_username": "helper"}) is not None
    assert router.resolve(make_message("hi"), {"bot_username": "helper"}) is None


@pytest.mark.asyncio
async def test_dispatch_invokes_handler(make_message) -> None:
    calls = []
    router = build_router(calls)
    assert await router.dispatch(make_message("/start")) is True
    assert await router.dispatch(make_message(None)) is False
    assert calls == [("start", "/start")]


@pytest.mark.asyncio
async def test_dispatch_propagates_handler_errors(make_message) -> None:
    registry = HandlerRegistry()

    @registry.handler("boom", TextStartsWith("boom"))
    async def boom(message):
        raise RuntimeError("handler failed")

    with pytest.raises(RuntimeError, match="handler failed"):
        await MessageRouter(registry).dispatch(make_message("boom"))
