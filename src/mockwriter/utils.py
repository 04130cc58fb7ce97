# src/mockwriter/utils.py
"""Small shared helpers: typing casts, pluralizing, JSONC loading."""

import json
import re
from pathlib import Path
from typing import Any, TypeVar, cast, get_type_hints

from .logs import get_app_logger


T = TypeVar("T")


def cast_hint(_typ: type[T], value: Any) -> T:
    """`typing.cast` spelled with a class instead of a string. No runtime check."""
    return cast("T", value)


def schema_from_typeddict(td: type[Any]) -> dict[str, Any]:
    """Map each key of TypedDict `td` to its annotation."""
    return get_type_hints(td, include_extras=True)


def plural(obj: Any) -> str:
    """Return ``"s"`` unless `obj` (a number or a sized collection) is one."""
    if isinstance(obj, (int, float)):
        count = obj
    elif hasattr(obj, "__len__"):
        count = len(obj)
    else:
        count = 0
    return "" if count == 1 else "s"


# --- JSONC -------------------------------------------------------------------

# a JSON string literal; group 1 in the patterns below, always kept
_STRING = r'"(?:\\.|[^"\\])*"'

_COMMENT = re.compile(
    rf"({_STRING})"
    r"|//[^\n]*"  # line comment
    r"|#[^\n]*"  # line comment
    r"|/\*.*?(?:\*/|\Z)",  # block comment, possibly unterminated
    re.DOTALL,
)

_TRAILING_COMMA = re.compile(rf"({_STRING})|,(?=\s*[}}\]])")


def _keep_strings(match: re.Match[str]) -> str:
    return match.group(1) or ""


def _strip_jsonc_comments(text: str) -> str:
    """Remove ``//``, ``#`` and ``/* */`` comments outside string literals."""
    return _COMMENT.sub(_keep_strings, text)


def load_jsonc(path: Path) -> dict[str, Any] | list[Any] | None:
    """Parse a JSON file that may contain comments and trailing commas.

    Returns:
        The top-level object or array, or None when the file holds nothing
        but comments and whitespace.

    Raises:
        FileNotFoundError: `path` does not exist.
        ValueError: `path` is not a regular file, is not valid JSONC, or its
            top level is a scalar.
    """
    get_app_logger().trace("[load_jsonc] reading %s", path)

    if not path.is_file():
        if path.exists():
            xmsg = f"Expected a file: {path}"
            raise ValueError(xmsg)
        xmsg = f"JSONC file not found: {path}"
        raise FileNotFoundError(xmsg)

    text = _strip_jsonc_comments(path.read_text(encoding="utf-8"))
    text = _TRAILING_COMMA.sub(_keep_strings, text).strip()
    if not text:
        return None

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        xmsg = (
            f"Invalid JSONC syntax in {path}: "
            f"{e.msg} (line {e.lineno}, column {e.colno})"
        )
        raise ValueError(xmsg) from e

    if isinstance(data, (dict, list)):
        return cast("dict[str, Any] | list[Any]", data)
    xmsg = f"Invalid JSONC root type: {type(data).__name__}"
    raise ValueError(xmsg)
