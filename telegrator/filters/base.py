"""Base classes for filters and their boolean composition.

See :mod:`telegrator.filters` package docstring for the overall
architecture.
"""

from __future__ import annotations

import abc
from typing import Any, Generic, TypeVar

from telegrator.filters.context import FilterExecutionContext
from telegrator.types import Message

T = TypeVar("T")


# -----------------------------------------------------------------------
# Filter
# -----------------------------------------------------------------------

class Filter(abc.ABC, Generic[T]):
    """Base class for predicates over a :class:`FilterExecutionContext`.

    Subclasses implement :meth:`can_pass`. Implementations must be a pure
    function of the context and the arguments given at construction time:
    nothing is written to ``self`` during evaluation.

    Filters combine with ``&``, ``|`` and ``~``.
    """

    @abc.abstractmethod
    def can_pass(self, context: FilterExecutionContext[T]) -> bool:
        """Return ``True`` if the context satisfies this filter.

        Missing data makes the filter fail; it never raises.
        """
        ...

    def __and__(self, other: Filter[T]) -> Filter[T]:
        return AllFilter(self, other)

    def __or__(self, other: Filter[T]) -> Filter[T]:
        return AnyFilter(self, other)

    def __invert__(self) -> Filter[T]:
        return NotFilter(self)

    def __repr__(self) -> str:
        params = ", ".join(f"{k}={v!r}" for k, v in vars(self).items())
        return f"{type(self).__name__}({params})"


class MessageFilter(Filter[Message]):
    """Base class for filters evaluated against a :class:`Message`."""

    def can_pass(self, context: FilterExecutionContext[Message]) -> bool:
        if not isinstance(context.target, Message):
            return False
        return self.can_pass_message(context.target, context)

    @abc.abstractmethod
    def can_pass_message(
        self, message: Message, context: FilterExecutionContext[Message]
    ) -> bool:
        ...


# -----------------------------------------------------------------------
# Composition
# -----------------------------------------------------------------------

class AllFilter(Filter[Any]):
    """Passes when every inner filter passes (empty = pass)."""

    def __init__(self, *filters: Filter[Any]) -> None:
        self.filters: tuple[Filter[Any], ...] = _flatten(AllFilter, filters)

    def can_pass(self, context: FilterExecutionContext[Any]) -> bool:
        return all(f.can_pass(context) for f in self.filters)


class AnyFilter(Filter[Any]):
    """Passes when at least one inner filter passes (empty = fail)."""

    def __init__(self, *filters: Filter[Any]) -> None:
        self.filters: tuple[Filter[Any], ...] = _flatten(AnyFilter, filters)

    def can_pass(self, context: FilterExecutionContext[Any]) -> bool:
        return any(f.can_pass(context) for f in self.filters)


class NotFilter(Filter[Any]):
    """Inverts a filter."""

    def __init__(self, inner: Filter[Any]) -> None:
        self.inner = inner

    def can_pass(self, context: FilterExecutionContext[Any]) -> bool:
        return not self.inner.can_pass(context)

    def __invert__(self) -> Filter[Any]:
        return self.inner


def _flatten(
    kind: type[Filter[Any]], filters: tuple[Filter[Any], ...]
) -> tuple[Filter[Any], ...]:
    """Merge nested composites of the same kind: (a & b) & c -> a & b & c."""
    flat: list[Filter[Any]] = []
    for f in filters:
        if not isinstance(f, Filter):
            raise TypeError(f"Expected a Filter, got {type(f).__name__}")
        if type(f) is kind:
            flat.extend(f.filters)  # type: ignore[attr-defined]
        else:
            flat.append(f)
    return tuple(flat)
