import dataclasses

import pytest

from telegrator.filters import (
    AllFilter,
    AnyFilter,
    ChatIdFilter,
    FilterExecutionContext,
    NotFilter,
    TextStartsWithFilter,
)


def test_context_is_immutable() -> None:
    ctx = FilterExecutionContext(target="x", data={"a": 1})
    with pytest.raises(dataclasses.FrozenInstanceError):
        ctx.target = "y"
    with pytest.raises(TypeError):
        ctx.data["a"] = 2


def test_create_child_links_parent_and_shares_data() -> None:
    source = {"bot": "me"}
    ctx = FilterExecutionContext(target="message", data=source)
    child = ctx.create_child("chat")
    grandchild = child.create_child("user")

    assert child.target == "chat"
    assert child.parent is ctx
    assert child.data is ctx.data
    assert grandchild.root is ctx
    assert ctx.root is ctx

    source["bot"] = "changed"
    assert ctx.data["bot"] == "me"


def test_and_or_not(make_context) -> None:
    starts = TextStartsWithFilter("/ban")
    in_chat = ChatIdFilter(100)

    assert (starts & in_chat).can_pass(make_context(text="/ban bob")) is True
    assert (starts & ~in_chat).can_pass(make_context(text="/ban bob")) is False
    assert (starts | in_chat).can_pass(make_context(text="hello")) is True
    assert (starts | in_chat).can_pass(make_context(text="hello", chat={"id": 5, "type": "group"})) is False


def test_composites_flatten_and_double_negation_unwraps() -> None:
    a, b, c = TextStartsWithFilter("a"), TextStartsWithFilter("b"), TextStartsWithFilter("c")
    combined = (a & b) & c
    assert isinstance(combined, AllFilter)
    assert combined.filters == (a, b, c)
    assert isinstance(a | b | c, AnyFilter)
    assert isinstance(~a, NotFilter)
    assert ~~a is a


def test_empty_composites(make_context) -> None:
    ctx = make_context(text="x")
    assert AllFilter().can_pass(ctx) is True
    assert AnyFilter().can_pass(ctx) is False


def test_composite_rejects_non_filters() -> None:
    with pytest.raises(TypeError):
        AllFilter(TextStartsWithFilter("a"), "b")


def test_message_filter_rejects_non_message_target() -> None:
    assert TextStartsWithFilter("a").can_pass(FilterExecutionContext(target="abc")) is False
