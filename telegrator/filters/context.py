"""Evaluation context passed to filters."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Generic, Mapping, TypeVar

T = TypeVar("T")
C = TypeVar("C")


def _frozen(data: Mapping[str, Any] | None) -> Mapping[str, Any]:
    if isinstance(data, MappingProxyType):
        return data
    return MappingProxyType(dict(data or {}))


@dataclass(frozen=True)
class FilterExecutionContext(Generic[T]):
    """
    Immutable wrapper around the value a filter is tested against.

    A context is created per dispatch attempt. Filters that reason about a
    related object (e.g. the chat of a message) derive a child context with
    :meth:`create_child` instead of storing the object on themselves, so a
    single filter instance can be shared between concurrent evaluations.

    Attributes:
        target: The value under test.
        parent: The context this one was derived from, if any.
        data: Read-only values shared along the whole context chain.
    """

    target: T
    parent: FilterExecutionContext[Any] | None = None
    data: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", _frozen(self.data))

    def create_child(self, target: C) -> FilterExecutionContext[C]:
        """Return a context scoped to ``target`` whose parent is this one."""
        return FilterExecutionContext(target=target, parent=self, data=self.data)

    @property
    def root(self) -> FilterExecutionContext[Any]:
        """The outermost context of the chain."""
        ctx: FilterExecutionContext[Any] = self
        while ctx.parent is not None:
            ctx = ctx.parent
        return ctx
