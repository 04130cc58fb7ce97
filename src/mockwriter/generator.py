# src/mockwriter/generator.py
"""Drive a writer for a target class and load the result."""

from __future__ import annotations

import abc
import importlib
from typing import Any

from .clazz import Method, reflect_methods
from .config import WriterConfigResolved, default_config
from .loader import load_class
from .logs import get_app_logger
from .marker import MockMarker
from .meta import PROGRAM_DISPLAY
from .writer import DefaultWriter, Writer


def is_interface(cls: type, methods: list[Method] | None = None) -> bool:
    """Return True if `cls` can only be conformed to, not extended.

    That is a `typing.Protocol`, or an ABC whose public methods are all
    abstract.
    """
    if getattr(cls, "_is_protocol", False):
        return True
    if not isinstance(cls, abc.ABCMeta):
        return False

    abstract = getattr(cls, "__abstractmethods__", frozenset())
    if not abstract:
        return False
    if methods is None:
        methods = reflect_methods(cls)
    return all(m.name in abstract for m in methods)


def mock_class_name(cls: type, suffix: str) -> str:
    return f"{cls.__name__}{suffix}"


def import_target(target_path: str) -> type:
    """Resolve ``"package.module:Class"`` (or ``"package.module.Class"``)."""
    module_name, sep, attr = target_path.partition(":")
    if not sep:
        module_name, _, attr = target_path.rpartition(".")
    if not module_name or not attr:
        xmsg = f"Invalid target {target_path!r}; expected 'module:Class'"
        raise ValueError(xmsg)

    module = importlib.import_module(module_name)
    obj: Any = module
    for part in attr.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError:
            xmsg = f"{module_name!r} has no attribute {attr!r}"
            raise ValueError(xmsg) from None

    if not isinstance(obj, type):
        xmsg = f"Target {target_path!r} is a {type(obj).__name__}, not a class"
        raise TypeError(xmsg)
    return obj


def standalone_source(writer: Writer) -> str:
    """Return the writer's source with imports for every class it references.

    Raises:
        ValueError: If a reference cannot be imported by name (local classes,
            non-literal default values).
    """
    imports: list[str] = []
    for alias, obj in writer.references.items():
        module = getattr(obj, "__module__", None)
        qualname = getattr(obj, "__qualname__", "")
        if not isinstance(obj, type) or module is None or "<locals>" in qualname:
            xmsg = (
                f"Reference {alias!r} ({obj!r}) cannot be imported by name; "
                "generate the class in-process instead"
            )
            raise ValueError(xmsg)

        top, _, nested = qualname.partition(".")
        if module == "builtins":
            if alias != qualname:
                imports.append(f"{alias} = {qualname}")
        elif nested:
            imports.append(f"from {module} import {top}")
            imports.append(f"{alias} = {qualname}")
        elif alias == qualname:
            imports.append(f"from {module} import {qualname}")
        else:
            imports.append(f"from {module} import {qualname} as {alias}")

    header = [f"# Generated by {PROGRAM_DISPLAY}. Do not edit.", ""]
    if imports:
        header += [*imports, "", "", ""]
    return "\n".join(header) + writer.build()


class MockGenerator:
    """Generate mock classes for arbitrary target classes.

    Generated classes are cached per (target, name, namespace), so asking for
    the same mock twice returns the same class object.
    """

    def __init__(self, config: WriterConfigResolved | None = None) -> None:
        self.config = config if config is not None else default_config()
        self._cache: dict[tuple[type, str, str], type] = {}

    def new_writer(self) -> DefaultWriter:
        return DefaultWriter(
            indent=self.config["indent"],
            stub_body=self.config["stub_body"],
        )

    def names_for(
        self, cls: type, name: str | None, namespace: str | None
    ) -> tuple[str, str]:
        return (
            name or mock_class_name(cls, self.config["mock_suffix"]),
            namespace or self.config["namespace"] or cls.__module__,
        )

    def write(
        self,
        cls: type,
        writer: Writer | None = None,
        *,
        name: str | None = None,
        namespace: str | None = None,
    ) -> Writer:
        """Write the full mock declaration for `cls` and return the writer."""
        logger = get_app_logger()
        writer = writer if writer is not None else self.new_writer()
        name, namespace = self.names_for(cls, name, namespace)

        methods = reflect_methods(cls)
        interface = is_interface(cls, methods)
        logger.debug(
            "Writing %s.%s as %s of %s",
            namespace,
            name,
            "conformer" if interface else "subclass",
            cls.__qualname__,
        )

        writer.write_namespace(namespace)
        if interface:
            writer.write_interface_extend(name, cls, MockMarker)
        else:
            writer.write_class_extend(name, cls, MockMarker)
        for method in methods:
            writer.write_method(method)
        writer.write_close()
        return writer

    def source_for(
        self,
        cls: type,
        *,
        name: str | None = None,
        namespace: str | None = None,
    ) -> str:
        return self.write(cls, name=name, namespace=namespace).build()

    def generate(
        self,
        cls: type,
        *,
        name: str | None = None,
        namespace: str | None = None,
    ) -> type:
        """Return a live mock class for `cls`."""
        name, namespace = self.names_for(cls, name, namespace)
        key = (cls, name, namespace)
        cached = self._cache.get(key)
        if cached is not None:
            get_app_logger().trace("[generate] cache hit for %s.%s", namespace, name)
            return cached

        writer = self.write(cls, name=name, namespace=namespace)
        mock = load_class(writer, name, module_name=namespace)
        self._cache[key] = mock
        get_app_logger().debug("Generated mock class %s.%s", namespace, name)
        return mock
