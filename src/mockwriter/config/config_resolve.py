# src/mockwriter/config/config_resolve.py

import argparse
from pathlib import Path

from mockwriter.constants import (
    DEFAULT_INDENT,
    DEFAULT_LOG_LEVEL,
    DEFAULT_MOCK_SUFFIX,
    DEFAULT_STRICT_CONFIG,
    DEFAULT_STUB_BODY,
)
from mockwriter.logs import get_app_logger

from .config_types import WriterConfig, WriterConfigResolved


# CLI dest → config key
_ARG_KEYS: dict[str, str] = {
    "indent": "indent",
    "stub_body": "stub_body",
    "suffix": "mock_suffix",
    "namespace": "namespace",
    "log_level": "log_level",
}


def default_config() -> WriterConfigResolved:
    return {
        "indent": DEFAULT_INDENT,
        "stub_body": DEFAULT_STUB_BODY,
        "mock_suffix": DEFAULT_MOCK_SUFFIX,
        "namespace": "",
        "log_level": DEFAULT_LOG_LEVEL,
        "strict_config": DEFAULT_STRICT_CONFIG,
    }


def resolve_config(
    config: WriterConfig | None = None,
    args: argparse.Namespace | None = None,
    config_path: Path | None = None,
) -> WriterConfigResolved:
    """Merge CLI args over the config file over defaults."""
    logger = get_app_logger()
    resolved = default_config()

    for key, value in (config or {}).items():
        # unknown keys survive validation only in lenient mode
        if key in resolved:
            resolved[key] = value  # type: ignore[literal-required]

    for dest, key in _ARG_KEYS.items():
        value = getattr(args, dest, None)
        if value is not None:
            logger.trace("[resolve_config] %s overridden by CLI: %r", key, value)
            resolved[key] = value  # type: ignore[literal-required]

    if config_path is not None:
        resolved["config_path"] = config_path

    logger.trace("[resolve_config] resolved: %s", resolved)
    return resolved
