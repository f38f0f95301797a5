"""Telegram Bot API objects consumed by the filter layer.

Only the fields the filters read are modelled; everything else in the
incoming JSON is ignored.
"""

from __future__ import annotations

import enum

from pydantic import BaseModel, ConfigDict, Field


class ChatType(str, enum.Enum):
    """Type of a Telegram chat, as reported by the Bot API."""

    PRIVATE = "private"
    GROUP = "group"
    SUPERGROUP = "supergroup"
    CHANNEL = "channel"
    SENDER = "sender"


class ChatTypeFlags(enum.IntFlag):
    """Bit-flag form of :class:`ChatType` for set-membership checks."""

    NONE = 0
    CHANNEL = 1
    GROUP = 2
    SUPERGROUP = 4
    SENDER = 8
    PRIVATE = 16


class TelegramObject(BaseModel):
    """Base for immutable API objects."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class User(TelegramObject):
    id: int
    is_bot: bool = False
    first_name: str = ""
    last_name: str | None = None
    username: str | None = None


class Chat(TelegramObject):
    id: int
    # Kept as a plain string when the API reports a type we don't know yet.
    type: ChatType | str = Field(union_mode="left_to_right")
    title: str | None = None
    username: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    is_forum: bool = False


class Message(TelegramObject):
    message_id: int
    date: int = 0
    chat: Chat | None = None
    from_user: User | None = Field(default=None, alias="from")
    message_thread_id: int | None = None
    text: str | None = None
