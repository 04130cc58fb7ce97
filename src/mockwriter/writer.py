# src/mockwriter/writer.py
"""Source writer for generated mock classes.

A writer accumulates lines of Python source in call order:

    __name__ = "some.namespace"
    class FooMock(Foo, MockMarker):
        def bar(self, a: "int" = 1) -> "str":
            ...

Class objects passed as a base, interface or marker are emitted by name and
recorded in `references`. The evaluator seeds the module namespace with
them before executing the built text.
"""

from __future__ import annotations

import ast
import inspect
import json
from typing import Any, Protocol

from .clazz import Method, Parameter
from .constants import DEFAULT_INDENT, DEFAULT_STUB_BODY, STUB_BODIES, StubBody
from .logs import get_app_logger


POSITIONAL_ONLY = inspect.Parameter.POSITIONAL_ONLY
VAR_POSITIONAL = inspect.Parameter.VAR_POSITIONAL
KEYWORD_ONLY = inspect.Parameter.KEYWORD_ONLY
VAR_KEYWORD = inspect.Parameter.VAR_KEYWORD


class Writer(Protocol):
    references: dict[str, Any]

    def write_namespace(self, name: str) -> None: ...

    def write_class_extend(
        self, new_name: str, base_name: str | type, marker_interface: str | type
    ) -> None: ...

    def write_interface_extend(
        self,
        new_name: str,
        base_interface: str | type,
        marker_interface: str | type,
    ) -> None: ...

    def write_method(self, method: Method) -> None: ...

    def write_close(self) -> None: ...

    def build(self) -> str: ...


class DefaultWriter:
    """Line-buffered `Writer` emitting Python source."""

    def __init__(
        self,
        *,
        indent: int = DEFAULT_INDENT,
        stub_body: StubBody = DEFAULT_STUB_BODY,
    ) -> None:
        if indent < 1:
            xmsg = f"indent must be at least 1, got {indent}"
            raise ValueError(xmsg)
        if stub_body not in STUB_BODIES:
            xmsg = (
                f"Unknown stub body {stub_body!r}; "
                f"expected one of: {', '.join(STUB_BODIES)}"
            )
            raise ValueError(xmsg)

        self.references: dict[str, Any] = {}
        self._lines: list[str] = []
        self._pad = " " * indent
        self._stub_body = stub_body
        self._open_class: str | None = None
        self._members = 0

    # --- header/footer -------------------------------------------------------

    def write_namespace(self, name: str) -> None:
        self._lines.append(f"__name__ = {json.dumps(name)}")

    def write_class_extend(
        self, new_name: str, base_name: str | type, marker_interface: str | type
    ) -> None:
        self._open(new_name)
        bases: list[str] = []
        # (object, Marker) has no consistent MRO; object is implied anyway
        if base_name is not object and base_name != "object":
            bases.append(self._reference(base_name))
        bases.append(self._reference(marker_interface))
        self._lines.append(f"class {new_name}({', '.join(bases)}):")

    def write_interface_extend(
        self,
        new_name: str,
        base_interface: str | type,
        marker_interface: str | type,
    ) -> None:
        # interfaces are not extended: register as a virtual subclass instead
        self._open(new_name)
        interface = self._reference(base_interface)
        marker = self._reference(marker_interface)
        self._lines.append(f"@{interface}.register")
        self._lines.append(f"class {new_name}({marker}):")

    def write_close(self) -> None:
        self._require_open("write_close")
        if not self._members:
            self._lines.append(f"{self._pad}pass")
        self._lines.append("")
        get_app_logger().trace(
            "[writer] closed %s (%d member(s))", self._open_class, self._members
        )
        self._open_class = None
        self._members = 0

    # --- members -------------------------------------------------------------

    def write_method(self, method: Method) -> None:
        self._require_open("write_method")
        pad = self._pad

        if method.kind == "class":
            self._lines.append(f"{pad}@classmethod")
        elif method.kind == "static":
            self._lines.append(f"{pad}@staticmethod")

        keyword = "async def" if method.is_async else "def"
        params = self._render_parameters(method)
        returns = (
            f" -> {json.dumps(method.return_type.name)}"
            if method.return_type.name
            else ""
        )
        self._lines.append(f"{pad}{keyword} {method.name}({params}){returns}:")
        self._lines.append(f"{pad}{pad}{self._render_body(method)}")
        self._members += 1

    # --- output --------------------------------------------------------------

    def build(self) -> str:
        return "\n".join(self._lines)

    # --- internals -----------------------------------------------------------

    def _open(self, new_name: str) -> None:
        if self._open_class is not None:
            xmsg = (
                f"Cannot start class {new_name!r}: "
                f"class {self._open_class!r} has not been closed"
            )
            raise RuntimeError(xmsg)
        self._open_class = new_name
        self._members = 0

    def _require_open(self, operation: str) -> None:
        if self._open_class is None:
            xmsg = f"{operation}() called with no open class header"
            raise RuntimeError(xmsg)

    def _reference(self, target: str | type) -> str:
        """Return the source name for `target`, recording class objects."""
        if isinstance(target, str):
            return target
        return self._alias(target.__name__, target)

    def _alias(self, name: str, value: Any) -> str:
        """Bind `value` in `references` under `name`, or `name_N` if taken."""
        alias = name
        suffix = 0
        while alias in self.references and self.references[alias] is not value:
            suffix += 1
            alias = f"{name}_{suffix}"
        self.references[alias] = value
        return alias

    def _render_parameters(self, method: Method) -> str:
        parts: list[str] = []
        if method.kind == "instance":
            parts.append("self")
        elif method.kind == "class":
            parts.append("cls")

        positional_only_open = False
        star_written = False
        for param in method.parameters:
            kind = param.kind
            if positional_only_open and kind != POSITIONAL_ONLY:
                parts.append("/")
                positional_only_open = False

            if kind == POSITIONAL_ONLY:
                positional_only_open = True
            elif kind == VAR_POSITIONAL:
                star_written = True
            elif kind == KEYWORD_ONLY and not star_written:
                parts.append("*")
                star_written = True

            parts.append(self._render_parameter(method, param))

        if positional_only_open:
            parts.append("/")
        return ", ".join(parts)

    def _render_parameter(self, method: Method, param: Parameter) -> str:
        kind = param.kind
        prefix = ""
        if kind == VAR_POSITIONAL:
            prefix = "*"
        elif kind == VAR_KEYWORD:
            prefix = "**"

        text = f"{prefix}{param.name}"
        if param.type.name:
            text += f": {json.dumps(param.type.name)}"
        if param.has_default:
            sep = " = " if param.type.name else "="
            text += sep + self._render_default(method, param)
        return text

    def _render_default(self, method: Method, param: Parameter) -> str:
        value = param.default
        text = repr(value)
        try:
            parsed = ast.literal_eval(text)
            literal = type(parsed) is type(value) and parsed == value
        except Exception:  # noqa: BLE001
            literal = False
        if literal:
            return text

        alias = self._alias(f"_default_{method.name}_{param.name}", value)
        get_app_logger().trace(
            "[writer] default for %s.%s is not a literal, referenced as %s",
            method.name,
            param.name,
            alias,
        )
        return alias

    def _render_body(self, method: Method) -> str:
        if self._stub_body == "pass":
            return "pass"
        if self._stub_body == "none":
            return "return None"
        if self._stub_body == "raise":
            where = f"{self._open_class}.{method.name}"
            return (
                "raise NotImplementedError("
                f"{json.dumps(f'{where} is a generated stub')})"
            )
        return "..."
