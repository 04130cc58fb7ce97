# src/mockwriter/clazz.py
"""Signature model for generated mocks.

`Method`, `Parameter` and `Type` describe just enough of a callable for the
writer to emit a stub with the same signature. They can be built by hand or
reflected from a live class with `reflect_methods()`.
"""

from __future__ import annotations

import inspect
import types
import typing
from dataclasses import dataclass, field
from typing import Any, Literal

from .constants import MOCKABLE_DUNDERS
from .logs import get_app_logger


MethodKind = Literal["instance", "class", "static"]
ParameterKind = inspect._ParameterKind  # noqa: SLF001


class _Empty:
    """Sentinel for "no default value" (``None`` is a real default)."""

    _instance: _Empty | None = None

    def __new__(cls) -> _Empty:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "EMPTY"

    def __bool__(self) -> bool:
        return False


EMPTY: Any = _Empty()


@dataclass(frozen=True)
class Type:
    """Annotation text plus an argument-matcher placeholder.

    ``name == ""`` means the parameter or return value is unannotated.
    ``matcher`` is never read by the writer.
    """

    name: str = ""
    matcher: Any = None

    @classmethod
    def from_annotation(cls, annotation: Any) -> Type:
        return cls(_annotation_text(annotation))


@dataclass(frozen=True)
class Parameter:
    name: str
    type: Type = field(default_factory=Type)
    default: Any = EMPTY
    kind: ParameterKind = inspect.Parameter.POSITIONAL_OR_KEYWORD

    @property
    def has_default(self) -> bool:
        return self.default is not EMPTY

    @classmethod
    def from_inspect(cls, param: inspect.Parameter) -> Parameter:
        default = EMPTY if param.default is inspect.Parameter.empty else param.default
        return cls(
            name=param.name,
            type=Type.from_annotation(param.annotation),
            default=default,
            kind=param.kind,
        )


@dataclass(frozen=True)
class Method:
    name: str
    parameters: list[Parameter] = field(default_factory=list)
    return_type: Type = field(default_factory=Type)
    kind: MethodKind = "instance"
    is_async: bool = False

    @classmethod
    def from_callable(
        cls,
        name: str,
        func: Any,
        *,
        kind: MethodKind = "instance",
        bound: bool = False,
    ) -> Method:
        """Build a Method from a plain function.

        For instance and class methods the first positional parameter is the
        receiver and is dropped, unless `func` is `bound` already.
        """
        try:
            signature = inspect.signature(func)
        except (TypeError, ValueError):
            # builtins without a text signature: accept anything
            signature = inspect.Signature(
                [
                    inspect.Parameter("args", inspect.Parameter.VAR_POSITIONAL),
                    inspect.Parameter("kwargs", inspect.Parameter.VAR_KEYWORD),
                ]
            )
            get_app_logger().trace(
                "[reflect] no signature for %s, using (*args, **kwargs)", name
            )

        params = list(signature.parameters.values())
        if not bound and kind != "static" and params and params[0].kind in (
            inspect.Parameter.POSITIONAL_ONLY,
            inspect.Parameter.POSITIONAL_OR_KEYWORD,
        ):
            params = params[1:]

        return cls(
            name=name,
            parameters=[Parameter.from_inspect(p) for p in params],
            return_type=Type.from_annotation(signature.return_annotation),
            kind=kind,
            is_async=inspect.iscoroutinefunction(func),
        )


# --- reflection --------------------------------------------------------------


def _annotation_text(annotation: Any) -> str:
    """Render an annotation as source text."""
    if annotation is inspect.Parameter.empty or annotation is inspect.Signature.empty:
        return ""
    if isinstance(annotation, str):
        return annotation
    if annotation is None or annotation is type(None):
        return "None"
    if isinstance(annotation, type) and not typing.get_args(annotation):
        if annotation.__module__ in ("builtins", "typing"):
            return annotation.__qualname__
        return f"{annotation.__module__}.{annotation.__qualname__}"
    return repr(annotation).replace("typing.", "")


def _is_mockable_name(name: str) -> bool:
    if name in MOCKABLE_DUNDERS:
        return True
    return not name.startswith("_")


def _reflect_member(klass: type, name: str, raw: Any) -> Method | None:
    if isinstance(raw, staticmethod):
        return Method.from_callable(name, raw.__func__, kind="static")
    if isinstance(raw, classmethod):
        return Method.from_callable(name, raw.__func__, kind="class")
    if isinstance(raw, types.ClassMethodDescriptorType):
        # builtin classmethod (dict.fromkeys); binding strips the receiver
        return Method.from_callable(
            name, raw.__get__(None, klass), kind="class", bound=True
        )
    # cached_property and friends are descriptors too, but not callable
    if inspect.isfunction(raw) or (
        inspect.ismethoddescriptor(raw) and callable(raw)
    ):
        return Method.from_callable(name, raw)
    get_app_logger().trace("[reflect] skipping non-method attribute %s", name)
    return None


def reflect_methods(cls: type) -> list[Method]:
    """Return the mockable methods of `cls`.

    Walks the MRO (most derived first) and keeps the first definition of each
    name, in definition order. Properties, private names and anything only
    defined on `object` are skipped.
    """
    logger = get_app_logger()
    seen: set[str] = set()
    methods: list[Method] = []

    for klass in cls.__mro__:
        if klass is object:
            continue
        for name, raw in vars(klass).items():
            if name in seen or not _is_mockable_name(name):
                continue
            seen.add(name)
            method = _reflect_member(klass, name, raw)
            if method is not None:
                methods.append(method)

    logger.debug(
        "Reflected %d method(s) from %s: %s",
        len(methods),
        cls.__qualname__,
        ", ".join(m.name for m in methods),
    )
    return methods
