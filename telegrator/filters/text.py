"""Filters on the text of a message."""

from __future__ import annotations

import abc

from telegrator.comparison import DEFAULT_COMPARISON, StringComparison
from telegrator.filters.base import MessageFilter
from telegrator.filters.context import FilterExecutionContext
from telegrator.types import Message


class MessageTextFilter(MessageFilter):
    """Base for filters that only look at ``message.text``.

    Messages without text fail every text filter.
    """

    def can_pass_message(
        self, message: Message, context: FilterExecutionContext[Message]
    ) -> bool:
        if message.text is None:
            return False
        return self.can_pass_text(message.text)

    @abc.abstractmethod
    def can_pass_text(self, text: str) -> bool:
        ...


class _TextComparisonFilter(MessageTextFilter):
    def __init__(
        self,
        content: str,
        comparison: StringComparison = DEFAULT_COMPARISON,
    ) -> None:
        self.content = content
        self.comparison = StringComparison(comparison)


class TextStartsWithFilter(_TextComparisonFilter):
    """Passes when the text starts with ``content``."""

    def can_pass_text(self, text: str) -> bool:
        return self.comparison.starts_with(text, self.content)


class TextEndsWithFilter(_TextComparisonFilter):
    """Passes when the text ends with ``content``."""

    def can_pass_text(self, text: str) -> bool:
        return self.comparison.ends_with(text, self.content)


class TextContainsFilter(_TextComparisonFilter):
    """Passes when the text contains ``content``."""

    def can_pass_text(self, text: str) -> bool:
        return self.comparison.contains(text, self.content)


class TextEqualsFilter(_TextComparisonFilter):
    """Passes when the text equals ``content``."""

    def can_pass_text(self, text: str) -> bool:
        return self.comparison.equals(text, self.content)


class TextNotNullOrEmptyFilter(MessageTextFilter):
    """Passes when the message carries any non-empty text."""

    def can_pass_text(self, text: str) -> bool:
        return text != ""
