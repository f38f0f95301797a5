"""Declarative filter markers for handler declarations.

Each annotation wraps exactly one filter instance. They are handed to
:meth:`telegrator.handlers.HandlerRegistry.handler` (or ``register``)
when a handler is declared::

    @registry.handler("greet", TextStartsWith("/start"), ChatType(ChatType.PRIVATE))
    async def greet(message): ...
"""

from __future__ import annotations

from telegrator.comparison import DEFAULT_COMPARISON, StringComparison
from telegrator.filters import (
    ChatIdFilter,
    ChatIsForumFilter,
    ChatNameFilter,
    ChatTitleFilter,
    ChatTypeFilter,
    ChatUsernameFilter,
    Filter,
    TextContainsFilter,
    TextEndsWithFilter,
    TextEqualsFilter,
    TextNotNullOrEmptyFilter,
    TextStartsWithFilter,
)
from telegrator.types import ChatType as _ChatType
from telegrator.types import ChatTypeFlags, Message


class FilterAnnotation:
    """Immutable marker binding one filter to a handler."""

    __slots__ = ("_filter",)

    def __init__(self, filter: Filter[Message]) -> None:
        self._filter = filter

    @property
    def filter(self) -> Filter[Message]:
        return self._filter

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._filter!r})"


# -- text ----------------------------------------------------------------

class TextStartsWith(FilterAnnotation):
    """Message text starts with ``content``."""

    __slots__ = ()

    def __init__(
        self, content: str, comparison: StringComparison = DEFAULT_COMPARISON
    ) -> None:
        super().__init__(TextStartsWithFilter(content, comparison))


class TextEndsWith(FilterAnnotation):
    """Message text ends with ``content``."""

    __slots__ = ()

    def __init__(
        self, content: str, comparison: StringComparison = DEFAULT_COMPARISON
    ) -> None:
        super().__init__(TextEndsWithFilter(content, comparison))


class TextContains(FilterAnnotation):
    """Message text contains ``content``."""

    __slots__ = ()

    def __init__(
        self, content: str, comparison: StringComparison = DEFAULT_COMPARISON
    ) -> None:
        super().__init__(TextContainsFilter(content, comparison))


class TextEquals(FilterAnnotation):
    """Message text equals ``content``."""

    __slots__ = ()

    def __init__(
        self, content: str, comparison: StringComparison = DEFAULT_COMPARISON
    ) -> None:
        super().__init__(TextEqualsFilter(content, comparison))


class HasText(FilterAnnotation):
    """Message carries non-empty text."""

    __slots__ = ()

    def __init__(self) -> None:
        super().__init__(TextNotNullOrEmptyFilter())


# -- chat ----------------------------------------------------------------

class ChatIsForum(FilterAnnotation):
    """Chat is a forum."""

    __slots__ = ()

    def __init__(self) -> None:
        super().__init__(ChatIsForumFilter())


class ChatId(FilterAnnotation):
    """Chat id equals ``chat_id``."""

    __slots__ = ()

    def __init__(self, chat_id: int) -> None:
        super().__init__(ChatIdFilter(chat_id))


class ChatType(FilterAnnotation):
    """Chat type equals a :class:`~telegrator.types.ChatType` or is in a flag set."""

    __slots__ = ()

    def __init__(self, chat_type: _ChatType | ChatTypeFlags) -> None:
        super().__init__(ChatTypeFilter(chat_type))


class ChatTitle(FilterAnnotation):
    """Chat title equals ``title``."""

    __slots__ = ()

    def __init__(
        self, title: str | None, comparison: StringComparison = DEFAULT_COMPARISON
    ) -> None:
        super().__init__(ChatTitleFilter(title, comparison))


class ChatUsername(FilterAnnotation):
    """Chat username equals ``username``."""

    __slots__ = ()

    def __init__(
        self, username: str | None, comparison: StringComparison = DEFAULT_COMPARISON
    ) -> None:
        super().__init__(ChatUsernameFilter(username, comparison))


class ChatName(FilterAnnotation):
    """Chat first and/or last name equal the given names."""

    __slots__ = ()

    def __init__(
        self,
        first_name: str | None = None,
        last_name: str | None = None,
        comparison: StringComparison = DEFAULT_COMPARISON,
    ) -> None:
        super().__init__(ChatNameFilter(first_name, last_name, comparison))
