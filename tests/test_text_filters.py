import pytest

from telegrator.comparison import StringComparison
from telegrator.filters import (
    TextContainsFilter,
    TextEndsWithFilter,
    TextEqualsFilter,
    TextNotNullOrEmptyFilter,
    TextStartsWithFilter,
)

ALL_TEXT_FILTERS = [
    TextStartsWithFilter("a"),
    TextEndsWithFilter("a"),
    TextContainsFilter("a"),
    TextEqualsFilter("a"),
    TextNotNullOrEmptyFilter(),
]


@pytest.mark.parametrize("text_filter", ALL_TEXT_FILTERS, ids=lambda f: type(f).__name__)
def test_missing_text_fails_every_text_filter(make_context, text_filter) -> None:
    assert text_filter.can_pass(make_context(text=None)) is False


def test_starts_with() -> None:
    f = TextStartsWithFilter("foo")
    assert f.can_pass_text("foobar") is True
    assert f.can_pass_text("barfoo") is False


def test_starts_with_through_context(make_context) -> None:
    f = TextStartsWithFilter("/start")
    assert f.can_pass(make_context(text="/start now")) is True
    assert f.can_pass(make_context(text="start")) is False


def test_ends_with_and_contains() -> None:
    assert TextEndsWithFilter("bar").can_pass_text("foobar") is True
    assert TextEndsWithFilter("foo").can_pass_text("foobar") is False
    assert TextContainsFilter("oba").can_pass_text("foobar") is True
    assert TextContainsFilter("xyz").can_pass_text("foobar") is False


def test_equals_ignore_case(make_context) -> None:
    f = TextEqualsFilter("hi", StringComparison.ORDINAL_IGNORE_CASE)
    assert f.can_pass(make_context(text="HI")) is True
    assert f.can_pass(make_context(text="hi there")) is False


def test_default_comparison_is_case_sensitive() -> None:
    f = TextEqualsFilter("hi")
    assert f.comparison is StringComparison.INVARIANT_CULTURE
    assert f.can_pass_text("hi") is True
    assert f.can_pass_text("HI") is False


def test_culture_comparison_normalizes_unicode() -> None:
    composed = "caf\u00e9"
    decomposed = "cafe\u0301"
    assert TextEqualsFilter(composed).can_pass_text(decomposed) is True
    assert TextEqualsFilter(composed, StringComparison.ORDINAL).can_pass_text(decomposed) is False


def test_comparison_accepts_string_value() -> None:
    f = TextStartsWithFilter("HELLO", "ordinal_ignore_case")
    assert f.comparison is StringComparison.ORDINAL_IGNORE_CASE
    assert f.can_pass_text("hello world") is True


def test_has_text(make_context) -> None:
    f = TextNotNullOrEmptyFilter()
    assert f.can_pass(make_context(text="x")) is True
    assert f.can_pass(make_context(text="")) is False


def test_evaluation_is_repeatable(make_context) -> None:
    f = TextContainsFilter("needle")
    ctx = make_context(text="haystack with needle")
    assert f.can_pass(ctx) is f.can_pass(ctx) is True


def test_ordinal_ignore_case_maps_one_character_at_a_time() -> None:
    cmp = StringComparison.ORDINAL_IGNORE_CASE
    assert TextEqualsFilter("STRASSE", cmp).can_pass_text("straße") is False
    assert TextStartsWithFilter("s", cmp).can_pass_text("ßa") is False
    assert TextEqualsFilter("STRAßE", cmp).can_pass_text("straße") is True
    assert TextContainsFilter("ÄR", cmp).can_pass_text("bär") is True


def test_culture_ignore_case_folds_fully() -> None:
    cmp = StringComparison.INVARIANT_CULTURE_IGNORE_CASE
    assert TextEqualsFilter("STRASSE", cmp).can_pass_text("straße") is True
