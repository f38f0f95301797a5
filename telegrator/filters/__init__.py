"""Declarative message filters.

A filter answers one question about an incoming message ("does the text
start with /start?", "is this a forum chat?"). Handlers carry an ordered
list of filters and are selected only when all of them pass.

Architecture
------------
Filter
  ├── MessageFilter
  │     ├── MessageTextFilter   – starts-with / ends-with / contains / equals / non-empty
  │     └── MessageChatFilter   – narrows to the chat, then id / type / title / …
  └── AllFilter / AnyFilter / NotFilter – ``&`` / ``|`` / ``~`` composition
"""

from telegrator.filters.base import AllFilter, AnyFilter, Filter, MessageFilter, NotFilter
from telegrator.filters.chat import (
    CHAT_TYPE_FLAGS,
    ChatIdFilter,
    ChatIsForumFilter,
    ChatNameFilter,
    ChatTitleFilter,
    ChatTypeFilter,
    ChatUsernameFilter,
    MessageChatFilter,
)
from telegrator.filters.context import FilterExecutionContext
from telegrator.filters.text import (
    MessageTextFilter,
    TextContainsFilter,
    TextEndsWithFilter,
    TextEqualsFilter,
    TextNotNullOrEmptyFilter,
    TextStartsWithFilter,
)

__all__ = [
    "Filter",
    "MessageFilter",
    "AllFilter",
    "AnyFilter",
    "NotFilter",
    "FilterExecutionContext",
    "MessageTextFilter",
    "TextStartsWithFilter",
    "TextEndsWithFilter",
    "TextContainsFilter",
    "TextEqualsFilter",
    "TextNotNullOrEmptyFilter",
    "MessageChatFilter",
    "ChatIsForumFilter",
    "ChatIdFilter",
    "ChatTypeFilter",
    "ChatTitleFilter",
    "ChatUsernameFilter",
    "ChatNameFilter",
    "CHAT_TYPE_FLAGS",
]
