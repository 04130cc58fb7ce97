# src/mockwriter/config/config_validate.py

from dataclasses import dataclass, field
from difflib import get_close_matches
from typing import Any

from mockwriter.constants import DEFAULT_STRICT_CONFIG, STUB_BODIES
from mockwriter.logs import LEVEL_ORDER
from mockwriter.utils import schema_from_typeddict

from .config_types import WriterConfig


@dataclass
class ValidationSummary:
    valid: bool = True
    errors: list[str] = field(default_factory=list)
    strict_warnings: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    strict: bool = DEFAULT_STRICT_CONFIG


def _collect(msg: str, *, summary: ValidationSummary, is_error: bool = False) -> None:
    """Route a message to the appropriate bucket.

    Errors are always fatal. Warnings escalate to strict_warnings in strict mode.
    """
    if is_error:
        summary.errors.append(msg)
    elif summary.strict:
        summary.strict_warnings.append(msg)
    else:
        summary.warnings.append(msg)


def _check_value(key: str, value: Any, summary: ValidationSummary) -> None:
    if key == "indent":
        # bool is an int subclass
        if not isinstance(value, int) or isinstance(value, bool) or value < 1:
            _collect(
                f"'indent' must be a positive integer, got {value!r}",
                summary=summary,
                is_error=True,
            )
    elif key == "stub_body":
        if value not in STUB_BODIES:
            _collect(
                f"'stub_body' must be one of {', '.join(STUB_BODIES)}; got {value!r}",
                summary=summary,
                is_error=True,
            )
    elif key == "mock_suffix":
        if not isinstance(value, str) or not value.isidentifier():
            _collect(
                f"'mock_suffix' must be a non-empty identifier, got {value!r}",
                summary=summary,
                is_error=True,
            )
    elif key == "namespace":
        if not isinstance(value, str):
            _collect(
                f"'namespace' must be a string, got {type(value).__name__}",
                summary=summary,
                is_error=True,
            )
    elif key == "log_level":
        if not isinstance(value, str) or value.lower() not in LEVEL_ORDER:
            _collect(
                f"'log_level' must be one of {', '.join(LEVEL_ORDER)}; got {value!r}",
                summary=summary,
                is_error=True,
            )
    elif key == "strict_config" and not isinstance(value, bool):
        _collect(
            f"'strict_config' must be true or false, got {value!r}",
            summary=summary,
            is_error=True,
        )


def validate_config(raw: dict[str, Any]) -> ValidationSummary:
    """Validate a raw config dict against `WriterConfig`.

    Unknown keys are strict warnings (fatal) unless ``strict_config`` is false.
    """
    strict = raw.get("strict_config", DEFAULT_STRICT_CONFIG)
    summary = ValidationSummary(strict=strict is not False)
    known = list(schema_from_typeddict(WriterConfig))

    for key, value in raw.items():
        if key not in known:
            msg = f"Unknown config key {key!r}"
            close = get_close_matches(key, known, n=1, cutoff=0.6)
            if close:
                msg += f" (did you mean {close[0]!r}?)"
            _collect(msg, summary=summary)
            continue
        _check_value(key, value, summary)

    summary.valid = not summary.errors and not summary.strict_warnings
    return summary
