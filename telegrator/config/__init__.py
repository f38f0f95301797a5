"""Configuration module for telegrator."""

from telegrator.config.loader import (
    FILTER_BUILDERS,
    build_filter,
    get_config_path,
    get_telegrator_home,
    load_config,
    save_config,
)
from telegrator.config.schema import FilterConfig, HandlerConfig, RouterConfig

__all__ = [
    "RouterConfig",
    "HandlerConfig",
    "FilterConfig",
    "load_config",
    "save_config",
    "build_filter",
    "get_config_path",
    "get_telegrator_home",
    "FILTER_BUILDERS",
]
