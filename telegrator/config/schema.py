"""Configuration schema for the router."""

from __future__ import annotations

from pydantic import BaseModel, Field

from telegrator.comparison import DEFAULT_COMPARISON, StringComparison
from telegrator.types import ChatType


class FilterConfig(BaseModel):
    """One filter in a handler's chain.

    ``type`` selects the filter; the remaining fields are its parameters
    and only the ones that filter uses are read.
    """

    type: str
    content: str | None = None
    comparison: StringComparison | None = None
    id: int | None = None
    # A single type matches exactly; a list matches any of them.
    chat_type: ChatType | list[ChatType] | None = None
    title: str | None = None
    username: str | None = None
    first_name: str | None = None
    last_name: str | None = None


class HandlerConfig(BaseModel):
    """A handler and the filters guarding it."""

    name: str
    filters: list[FilterConfig] = Field(default_factory=list)


class RouterConfig(BaseModel):
    """Root configuration."""

    default_comparison: StringComparison = DEFAULT_COMPARISON
    handlers: list[HandlerConfig] = Field(default_factory=list)
