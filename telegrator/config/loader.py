"""Configuration loading utilities."""

from __future__ import annotations

import json
from functools import reduce
from operator import or_
from pathlib import Path
from typing import Any, Callable

from loguru import logger
from pydantic import ValidationError

from telegrator.comparison import StringComparison
from telegrator.config.schema import FilterConfig, RouterConfig
from telegrator.errors import ConfigError, UnknownFilterError
from telegrator.filters import (
    CHAT_TYPE_FLAGS,
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
from telegrator.types import Message


def get_telegrator_home() -> Path:
    """Get the telegrator home directory (~/.telegrator)."""
    return Path.home() / ".telegrator"


def get_config_path() -> Path:
    """Get the default router configuration file path."""
    return get_telegrator_home() / "router.json"


def load_config(config_path: Path | None = None) -> RouterConfig:
    """
    Load router configuration from file or create default.

    Args:
        config_path: Optional explicit path to config file.

    Returns:
        Loaded configuration object.

    Raises:
        ConfigError: If the file exists but is not valid JSON or does not
            match the schema.
    """
    path = config_path or get_config_path()

    if not path.exists():
        logger.warning(f"Config file {path} not found, using default configuration")
        return RouterConfig()

    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError, OSError) as e:
        raise ConfigError(f"Failed to read config from {path}: {e}") from e

    try:
        return RouterConfig.model_validate(convert_keys(data))
    except ValidationError as e:
        raise ConfigError(f"Invalid config in {path}: {e}") from e


def save_config(config: RouterConfig, config_path: Path | None = None) -> None:
    """
    Save configuration to file.

    Args:
        config: Configuration to save.
        config_path: Optional explicit path. Uses the default if not provided.
    """
    path = config_path or get_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)

    # Convert to camelCase format
    data = config.model_dump(mode="json", exclude_none=True)
    data = convert_to_camel(data)

    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)


# ---------------------------------------------------------------------------
# Filter construction
# ---------------------------------------------------------------------------


def _require(cfg: FilterConfig, name: str) -> Any:
    value = getattr(cfg, name)
    if value is None:
        raise ConfigError(f"Filter {cfg.type!r} requires {name!r}")
    return value


def _chat_type_filter(cfg: FilterConfig, _: StringComparison) -> Filter[Message]:
    chat_type = _require(cfg, "chat_type")
    if isinstance(chat_type, list):
        if not chat_type:
            raise ConfigError("Filter 'chat_type' requires at least one chat type")
        return ChatTypeFilter(reduce(or_, (CHAT_TYPE_FLAGS[t] for t in chat_type)))
    return ChatTypeFilter(chat_type)


FILTER_BUILDERS: dict[str, Callable[[FilterConfig, StringComparison], Filter[Message]]] = {
    "text_starts_with": lambda c, cmp: TextStartsWithFilter(_require(c, "content"), cmp),
    "text_ends_with": lambda c, cmp: TextEndsWithFilter(_require(c, "content"), cmp),
    "text_contains": lambda c, cmp: TextContainsFilter(_require(c, "content"), cmp),
    "text_equals": lambda c, cmp: TextEqualsFilter(_require(c, "content"), cmp),
    "has_text": lambda c, cmp: TextNotNullOrEmptyFilter(),
    "chat_is_forum": lambda c, cmp: ChatIsForumFilter(),
    "chat_id": lambda c, cmp: ChatIdFilter(_require(c, "id")),
    "chat_type": _chat_type_filter,
    "chat_title": lambda c, cmp: ChatTitleFilter(_require(c, "title"), cmp),
    "chat_username": lambda c, cmp: ChatUsernameFilter(_require(c, "username"), cmp),
    "chat_name": lambda c, cmp: ChatNameFilter(c.first_name, c.last_name, cmp),
}


def build_filter(
    cfg: FilterConfig,
    default_comparison: StringComparison = StringComparison.INVARIANT_CULTURE,
) -> Filter[Message]:
    """
    Instantiate the filter described by ``cfg``.

    Args:
        cfg: Filter declaration.
        default_comparison: Used when ``cfg`` does not set ``comparison``.

    Raises:
        UnknownFilterError: If ``cfg.type`` is not a known filter.
        ConfigError: If a required parameter is missing.
    """
    builder = FILTER_BUILDERS.get(camel_to_snake(cfg.type))
    if builder is None:
        raise UnknownFilterError(cfg.type)
    return builder(cfg, cfg.comparison or default_comparison)


# ---------------------------------------------------------------------------
# Key conversion helpers
# ---------------------------------------------------------------------------


def convert_keys(data: Any) -> Any:
    """Convert camelCase keys to snake_case for Pydantic."""
    if isinstance(data, dict):
        return {camel_to_snake(k): convert_keys(v) for k, v in data.items()}
    if isinstance(data, list):
        return [convert_keys(item) for item in data]
    return data


def convert_to_camel(data: Any) -> Any:
    """Convert snake_case keys to camelCase."""
    if isinstance(data, dict):
        return {snake_to_camel(k): convert_to_camel(v) for k, v in data.items()}
    if isinstance(data, list):
        return [convert_to_camel(item) for item in data]
    return data


def camel_to_snake(name: str) -> str:
    """Convert camelCase to snake_case."""
    result = []
    for i, char in enumerate(name):
        if char.isupper() and i > 0:
            result.append("_")
        result.append(char.lower())
    return "".join(result)


def snake_to_camel(name: str) -> str:
    """Convert snake_case to camelCase."""
    components = name.split("_")
    return components[0] + "".join(x.title() for x in components[1:])
