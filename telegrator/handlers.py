"""Handler registration table.

Handlers are declared explicitly at startup: each entry maps a handler id
to its callback and the ordered filters that must all pass for it to be
selected. Registration order is resolution order.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Awaitable, Callable, Iterator, Mapping

from loguru import logger

from telegrator.annotations import FilterAnnotation
from telegrator.errors import HandlerRegistrationError
from telegrator.filters import Filter, FilterExecutionContext
from telegrator.types import Message

if TYPE_CHECKING:
    from telegrator.config.schema import RouterConfig

HandlerCallback = Callable[[Message], Awaitable[Any]]
FilterLike = Filter[Message] | FilterAnnotation


@dataclass(frozen=True)
class HandlerDescriptor:
    """A registered handler and the filters guarding it."""

    handler_id: str
    callback: HandlerCallback
    filters: tuple[Filter[Message], ...] = ()

    def can_handle(self, context: FilterExecutionContext[Message]) -> bool:
        """True when every filter passes (a handler without filters always does)."""
        return all(f.can_pass(context) for f in self.filters)


def _as_filter(item: FilterLike) -> Filter[Message]:
    if isinstance(item, FilterAnnotation):
        return item.filter
    if isinstance(item, Filter):
        return item
    raise HandlerRegistrationError(
        f"Expected a Filter or FilterAnnotation, got {type(item).__name__}"
    )


class HandlerRegistry:
    """Ordered table of ``handler id -> HandlerDescriptor``."""

    def __init__(self) -> None:
        self._handlers: dict[str, HandlerDescriptor] = {}

    def register(
        self, handler_id: str, callback: HandlerCallback, *filters: FilterLike
    ) -> HandlerDescriptor:
        """
        Add a handler to the table.

        Args:
            handler_id: Unique handler identifier.
            callback: Coroutine function invoked with the matched message.
            *filters: Filters or annotations, evaluated in the given order.

        Returns:
            The stored descriptor.

        Raises:
            HandlerRegistrationError: If the id is taken or a filter is invalid.
        """
        if handler_id in self._handlers:
            raise HandlerRegistrationError(f"Handler {handler_id!r} is already registered")
        if not callable(callback):
            raise HandlerRegistrationError(f"Handler {handler_id!r} callback is not callable")

        descriptor = HandlerDescriptor(
            handler_id=handler_id,
            callback=callback,
            filters=tuple(_as_filter(f) for f in filters),
        )
        self._handlers[handler_id] = descriptor
        logger.debug(
            f"Registered handler {handler_id!r} with {len(descriptor.filters)} filter(s)"
        )
        return descriptor

    def handler(
        self, handler_id: str, *filters: FilterLike
    ) -> Callable[[HandlerCallback], HandlerCallback]:
        """Decorator form of :meth:`register`; returns the function unchanged."""

        def decorator(callback: HandlerCallback) -> HandlerCallback:
            self.register(handler_id, callback, *filters)
            return callback

        return decorator

    def unregister(self, handler_id: str) -> bool:
        """Remove a handler. Returns False if it was not registered."""
        if self._handlers.pop(handler_id, None) is None:
            return False
        logger.debug(f"Unregistered handler {handler_id!r}")
        return True

    def get(self, handler_id: str) -> HandlerDescriptor | None:
        return self._handlers.get(handler_id)

    def __iter__(self) -> Iterator[HandlerDescriptor]:
        return iter(list(self._handlers.values()))

    def __len__(self) -> int:
        return len(self._handlers)

    def __contains__(self, handler_id: object) -> bool:
        return handler_id in self._handlers

    @classmethod
    def from_config(
        cls,
        config: RouterConfig,
        callbacks: Mapping[str, HandlerCallback],
    ) -> HandlerRegistry:
        """
        Build a registry from a :class:`RouterConfig`.

        Args:
            config: Handler declarations, in resolution order.
            callbacks: Callback for every configured handler name.

        Raises:
            HandlerRegistrationError: If a configured handler has no callback.
            UnknownFilterError: If a filter type is not recognised.
        """
        from telegrator.config.loader import build_filter

        registry = cls()
        for entry in config.handlers:
            callback = callbacks.get(entry.name)
            if callback is None:
                raise HandlerRegistrationError(
                    f"No callback provided for configured handler {entry.name!r}"
                )
            filters = [
                build_filter(f, default_comparison=config.default_comparison)
                for f in entry.filters
            ]
            registry.register(entry.name, callback, *filters)
        return registry
