"""Route messages to the first handler whose filters pass."""

from __future__ import annotations

from typing import Any, Mapping

from loguru import logger

from telegrator.filters import FilterExecutionContext
from telegrator.handlers import HandlerDescriptor, HandlerRegistry
from telegrator.types import Message


class MessageRouter:
    """Walks a :class:`HandlerRegistry` to pick a handler for a message.

    Handlers are evaluated **in registration order**. The first one whose
    filters all pass wins; later handlers are not evaluated. If none
    matches the message is left unhandled.
    """

    def __init__(self, registry: HandlerRegistry | None = None) -> None:
        self.registry = registry or HandlerRegistry()

    def resolve(
        self, message: Message, data: Mapping[str, Any] | None = None
    ) -> HandlerDescriptor | None:
        """Return the first matching handler, or ``None``.

        ``data`` is exposed read-only to filters through the context.
        """
        context = FilterExecutionContext(target=message, data=data or {})
        for descriptor in self.registry:
            if descriptor.can_handle(context):
                logger.debug(
                    f"Message {message.message_id} routed to {descriptor.handler_id!r}"
                )
                return descriptor
        logger.debug(f"No handler matched message {message.message_id}")
        return None

    async def dispatch(
        self, message: Message, data: Mapping[str, Any] | None = None
    ) -> bool:
        """Invoke the matching handler. Returns False if none matched.

        Exceptions raised by the handler propagate to the caller.
        """
        descriptor = self.resolve(message, data)
        if descriptor is None:
            return False
        await descriptor.callback(message)
        return True
