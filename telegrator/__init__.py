"""
telegrator - declarative message filters and handler routing for Telegram bots.
"""

__version__ = "0.1.0"

from telegrator.comparison import StringComparison
from telegrator.handlers import HandlerDescriptor, HandlerRegistry
from telegrator.routing import MessageRouter
from telegrator.types import Chat, ChatType, ChatTypeFlags, Message, User

__all__ = [
    "StringComparison",
    "HandlerDescriptor",
    "HandlerRegistry",
    "MessageRouter",
    "Chat",
    "ChatType",
    "ChatTypeFlags",
    "Message",
    "User",
]
