# tests/5_core/test_resolve_config.py
"""Tests for resolve_config precedence."""

import argparse
from pathlib import Path

import mockwriter.config as mod_config
import mockwriter.constants as mod_constants


def _args(**kwargs: object) -> argparse.Namespace:
    for dest in ("indent", "stub_body", "suffix", "namespace", "log_level"):
        kwargs.setdefault(dest, None)
    return argparse.Namespace(**kwargs)


def test_resolve_config_defaults() -> None:
    # --- execute ---
    resolved = mod_config.resolve_config()

    # --- verify ---
    assert resolved == mod_config.default_config()
    assert resolved["indent"] == mod_constants.DEFAULT_INDENT
    assert resolved["stub_body"] == mod_constants.DEFAULT_STUB_BODY
    assert resolved["mock_suffix"] == mod_constants.DEFAULT_MOCK_SUFFIX
    assert resolved["namespace"] == ""
    assert "config_path" not in resolved


def test_resolve_config_file_over_defaults() -> None:
    # --- execute ---
    resolved = mod_config.resolve_config({"indent": 2, "mock_suffix": "Fake"})

    # --- verify ---
    assert resolved["indent"] == 2  # noqa: PLR2004
    assert resolved["mock_suffix"] == "Fake"
    assert resolved["stub_body"] == mod_constants.DEFAULT_STUB_BODY


def test_resolve_config_cli_over_file() -> None:
    # --- execute ---
    resolved = mod_config.resolve_config(
        {"indent": 2, "mock_suffix": "Fake", "stub_body": "pass"},
        _args(indent=8, suffix="Stub"),
    )

    # --- verify ---
    assert resolved["indent"] == 8  # noqa: PLR2004
    assert resolved["mock_suffix"] == "Stub"
    assert resolved["stub_body"] == "pass"


def test_resolve_config_records_path() -> None:
    # --- setup ---
    path = Path("/tmp/.mockwriter.jsonc")  # noqa: S108

    # --- execute ---
    resolved = mod_config.resolve_config({}, None, path)

    # --- verify ---
    assert resolved["config_path"] == path


def test_resolve_config_drops_unknown_keys() -> None:
    # --- execute ---
    resolved = mod_config.resolve_config(
        {"strict_config": False, "colour": "red"},  # type: ignore[typeddict-unknown-key]
    )

    # --- verify ---
    assert "colour" not in resolved
    assert resolved["strict_config"] is False
