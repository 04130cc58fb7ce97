# src/mockwriter/config/config_loader.py
"""Locate, read and validate ``.mockwriter.jsonc`` files."""

import argparse
from pathlib import Path
from typing import Any

from mockwriter.logs import LEVEL_ORDER, get_app_logger
from mockwriter.meta import PROGRAM_CONFIG
from mockwriter.utils import cast_hint, load_jsonc, plural

from .config_types import WriterConfig
from .config_validate import ValidationSummary, validate_config


CONFIG_CANDIDATES = (f".{PROGRAM_CONFIG}.jsonc", f".{PROGRAM_CONFIG}.json")


def _explicit_config(raw: str) -> Path:
    path = Path(raw).expanduser().resolve()
    get_app_logger().trace("[find_config] explicit %s", path)
    if path.is_dir():
        xmsg = f"Specified config path is a directory, not a file: {path}"
        raise ValueError(xmsg)
    if not path.exists():
        xmsg = f"Specified config file not found: {path}"
        raise FileNotFoundError(xmsg)
    return path


def find_config(args: argparse.Namespace, cwd: Path) -> Path | None:
    """Return the config file to use, or None.

    ``--config`` wins when given and must exist. Otherwise `cwd` and then each
    of its parents is searched for `CONFIG_CANDIDATES`; the closest directory
    wins, and ``.jsonc`` beats ``.json`` within one directory.
    """
    explicit = getattr(args, "config", None)
    if explicit:
        return _explicit_config(explicit)

    for directory in (cwd, *cwd.parents):
        present = [
            directory / name
            for name in CONFIG_CANDIDATES
            if (directory / name).exists()
        ]
        if not present:
            continue
        chosen, *ignored = present
        if ignored:
            get_app_logger().warning(
                "Multiple config files detected in %s; using %s, ignoring %s.",
                directory,
                chosen.name,
                ", ".join(p.name for p in ignored),
            )
        return chosen

    get_app_logger().debug("No config file found in %s or its parents", cwd)
    return None


def load_config(config_path: Path) -> dict[str, Any] | None:
    """Read the raw config object; None when the file is empty.

    Raises:
        ValueError: The file is not valid JSONC.
        TypeError: The top level is not an object.
    """
    get_app_logger().trace("[load_config] %s", config_path)
    try:
        data = load_jsonc(config_path)
    except ValueError as e:
        xmsg = f"Error while loading configuration file '{config_path.name}': {e}"
        raise ValueError(xmsg) from e

    if data is None or isinstance(data, dict):
        return data
    xmsg = f"{config_path.name} must contain a JSON object, not {type(data).__name__}"
    raise TypeError(xmsg)


def _count(items: list[str], noun: str) -> str | None:
    return f"{len(items)} {noun}{plural(items)}" if items else None


def _bullets(title: str, items: list[str]) -> str:
    return "\n".join([f"{title}:", *(f"  • {item}" for item in items)])


def _validation_summary(summary: ValidationSummary, config_path: Path) -> None:
    """Log the outcome of validating `config_path`, one problem per line."""
    logger = get_app_logger()
    mode = "strict" if summary.strict else "lenient"
    counts = [
        c
        for c in (
            _count(summary.errors, "error"),
            _count(summary.strict_warnings, "strict warning"),
            _count(summary.warnings, "warning"),
        )
        if c
    ]

    if not counts:
        logger.debug("Validated %s (%s mode): no problems.", config_path.name, mode)
        return

    found = f"Found {', '.join(counts)}."
    if summary.valid:
        logger.warning(
            "Validated configuration file %s (%s mode) with warnings. %s",
            config_path.name,
            mode,
            found,
        )
    else:
        logger.error(
            "Failed to validate configuration file %s (%s mode). %s",
            config_path.name,
            mode,
            found,
        )

    if summary.errors:
        logger.error("%s", _bullets("Errors", summary.errors))
    if summary.strict_warnings:
        title = "Strict warnings (treated as errors)"
        logger.error("%s", _bullets(title, summary.strict_warnings))
    if summary.warnings:
        logger.warning("%s", _bullets("Warnings", summary.warnings))


def _apply_config_log_level(args: argparse.Namespace, raw: dict[str, Any]) -> None:
    # an unknown name is left for validation to report
    level = raw.get("log_level")
    if not isinstance(level, str) or level.lower() not in LEVEL_ORDER:
        return
    logger = get_app_logger()
    logger.setLevel(logger.determine_log_level(args=args, root_log_level=level))


def load_and_validate_config(
    args: argparse.Namespace,
    cwd: Path | None = None,
) -> tuple[Path, WriterConfig, ValidationSummary] | None:
    """Find, read and validate the config for this run.

    A ``log_level`` in the file takes effect before validation is reported.
    Returns None when there is no config file or it is empty.

    Raises:
        ValueError: Validation failed. The problems were already logged, so
            the exception is marked ``silent``; its ``data`` is the summary.
    """
    config_path = find_config(args, cwd or Path.cwd().resolve())
    raw = None if config_path is None else load_config(config_path)
    if config_path is None or raw is None:
        return None

    _apply_config_log_level(args, raw)
    summary = validate_config(raw)
    _validation_summary(summary, config_path)

    if summary.valid:
        return config_path, cast_hint(WriterConfig, raw), summary
    xmsg = f"Configuration file {config_path.name} contains validation errors."
    exc = ValueError(xmsg)
    exc.silent = True  # type: ignore[attr-defined]
    exc.data = summary  # type: ignore[attr-defined]
    raise exc
