# src/mockwriter/config/__init__.py

"""Configuration handling for mockwriter.

This module provides configuration loading, validation, and resolution.
"""

from .config_loader import (
    find_config,
    load_and_validate_config,
    load_config,
)
from .config_resolve import default_config, resolve_config
from .config_types import WriterConfig, WriterConfigResolved
from .config_validate import ValidationSummary, validate_config


__all__ = [  # noqa: RUF022
    # config_loader
    "find_config",
    "load_and_validate_config",
    "load_config",
    # config_resolve
    "default_config",
    "resolve_config",
    # config_types
    "WriterConfig",
    "WriterConfigResolved",
    # config_validate
    "ValidationSummary",
    "validate_config",
]
