# tests/5_core/test_verify_compiles_string.py
"""Tests for verify_compiles_string function."""

import pytest

import mockwriter.loader as mod_loader


def test_verify_compiles_string_valid_python() -> None:
    """Should return quietly for valid Python code."""
    mod_loader.verify_compiles_string("def hello():\n    return 'world'\n")


def test_verify_compiles_string_empty_source() -> None:
    """Should accept empty source (valid Python)."""
    mod_loader.verify_compiles_string("")


def test_verify_compiles_string_invalid_syntax() -> None:
    """Should raise SyntaxError with line information preserved."""
    source = "x = 1\ndef hello(\n    return 'world'\n"

    with pytest.raises(SyntaxError) as exc_info:
        mod_loader.verify_compiles_string(source, filename="<generated>")

    assert exc_info.value.filename == "<generated>"
    assert exc_info.value.lineno is not None
    assert exc_info.value.lineno >= 2  # noqa: PLR2004


def test_verify_compiles_string_logs_failure(
    module_logger: object,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Should log the compilation error at debug level before raising."""
    with pytest.raises(SyntaxError):
        mod_loader.verify_compiles_string("class :\n")

    assert "Compilation error at line 1" in capsys.readouterr().out
