"""Filters on the chat a message was sent to.

Every filter here narrows the message context to a chat-scoped child
context and only ever reasons about :class:`Chat`.
"""

from __future__ import annotations

import abc

from telegrator.comparison import DEFAULT_COMPARISON, StringComparison
from telegrator.filters.base import MessageFilter
from telegrator.filters.context import FilterExecutionContext
from telegrator.types import Chat, ChatType, ChatTypeFlags, Message

# Chat types outside this table never match a flag filter.
CHAT_TYPE_FLAGS: dict[ChatType, ChatTypeFlags] = {
    ChatType.CHANNEL: ChatTypeFlags.CHANNEL,
    ChatType.GROUP: ChatTypeFlags.GROUP,
    ChatType.SUPERGROUP: ChatTypeFlags.SUPERGROUP,
    ChatType.SENDER: ChatTypeFlags.SENDER,
    ChatType.PRIVATE: ChatTypeFlags.PRIVATE,
}


class MessageChatFilter(MessageFilter):
    """Base class for filters that operate on ``message.chat``."""

    def can_pass_message(
        self, message: Message, context: FilterExecutionContext[Message]
    ) -> bool:
        if message.chat is None:
            return False
        return self.can_pass_chat(context.create_child(message.chat))

    @abc.abstractmethod
    def can_pass_chat(self, context: FilterExecutionContext[Chat]) -> bool:
        """Decide on the chat carried by ``context.target``."""
        ...


class ChatIsForumFilter(MessageChatFilter):
    """Passes for chats that are forums."""

    def can_pass_chat(self, context: FilterExecutionContext[Chat]) -> bool:
        return context.target.is_forum


class ChatIdFilter(MessageChatFilter):
    """Passes for the chat with the given id."""

    def __init__(self, chat_id: int) -> None:
        self.chat_id = int(chat_id)

    def can_pass_chat(self, context: FilterExecutionContext[Chat]) -> bool:
        return context.target.id == self.chat_id


class ChatTypeFilter(MessageChatFilter):
    """Passes for chats of a given type.

    Built either from a single :class:`ChatType` (exact match) or from a
    :class:`ChatTypeFlags` set (membership match)::

        ChatTypeFilter(ChatType.PRIVATE)
        ChatTypeFilter(ChatTypeFlags.GROUP | ChatTypeFlags.SUPERGROUP)
    """

    def __init__(self, chat_type: ChatType | ChatTypeFlags) -> None:
        self.type: ChatType | None = None
        self.flags: ChatTypeFlags | None = None
        if isinstance(chat_type, ChatTypeFlags):
            self.flags = chat_type
        elif isinstance(chat_type, ChatType):
            self.type = chat_type
        else:
            raise TypeError(
                f"Expected ChatType or ChatTypeFlags, got {type(chat_type).__name__}"
            )

    def can_pass_chat(self, context: FilterExecutionContext[Chat]) -> bool:
        chat_type = context.target.type
        if self.type is not None:
            return chat_type == self.type
        flag = CHAT_TYPE_FLAGS.get(chat_type)  # type: ignore[call-overload]
        return flag is not None and flag in self.flags


class ChatTitleFilter(MessageChatFilter):
    """Passes when the chat has a title equal to ``title``."""

    def __init__(
        self,
        title: str | None,
        comparison: StringComparison = DEFAULT_COMPARISON,
    ) -> None:
        self.title = title
        self.comparison = StringComparison(comparison)

    def can_pass_chat(self, context: FilterExecutionContext[Chat]) -> bool:
        return self.comparison.equals(context.target.title, self.title)


class ChatUsernameFilter(MessageChatFilter):
    """Passes when the chat has a username equal to ``username``."""

    def __init__(
        self,
        username: str | None,
        comparison: StringComparison = DEFAULT_COMPARISON,
    ) -> None:
        self.username = username
        self.comparison = StringComparison(comparison)

    def can_pass_chat(self, context: FilterExecutionContext[Chat]) -> bool:
        return self.comparison.equals(context.target.username, self.username)


class ChatNameFilter(MessageChatFilter):
    """Passes when the chat's first and/or last name match.

    Only the names given (not ``None``) are checked; each must be present
    on the chat and equal under ``comparison``. With neither name given the
    filter passes for every chat.
    """

    def __init__(
        self,
        first_name: str | None = None,
        last_name: str | None = None,
        comparison: StringComparison = DEFAULT_COMPARISON,
    ) -> None:
        self.first_name = first_name
        self.last_name = last_name
        self.comparison = StringComparison(comparison)

    def can_pass_chat(self, context: FilterExecutionContext[Chat]) -> bool:
        chat = context.target
        if self.last_name is not None:
            if not self.comparison.equals(chat.last_name, self.last_name):
                return False
        if self.first_name is not None:
            if not self.comparison.equals(chat.first_name, self.first_name):
                return False
        return True
