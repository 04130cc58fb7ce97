# src/mockwriter/loader.py
"""Evaluate generated source into live classes.

Writer output is compiled and executed inside a fresh module object. Nothing
is written to disk and `sys.modules` is left untouched.
"""

import itertools
import linecache
import weakref
from collections.abc import Mapping
from types import ModuleType
from typing import Any

from .constants import DEFAULT_EVAL_MODULE
from .logs import get_app_logger
from .writer import Writer


_counter = itertools.count(1)


def _filename_for(module_name: str) -> str:
    # unique per evaluation so linecache entries never collide
    return f"<{module_name}#{next(_counter)}>"


def verify_compiles_string(source: str, filename: str = "<string>") -> None:
    """Verify that Python source compiles without syntax errors.

    Args:
        source: Python source text
        filename: Name shown in error messages

    Raises:
        SyntaxError: If the source does not compile (lineno and msg preserved)
    """
    logger = get_app_logger()
    try:
        compile(source, filename, "exec")
    except SyntaxError as e:
        logger.debug("Compilation error at line %s: %s", e.lineno, e.msg)
        raise
    logger.trace("Source compiles successfully: %s", filename)


def evaluate(
    source: str,
    *,
    references: Mapping[str, Any] | None = None,
    module_name: str = DEFAULT_EVAL_MODULE,
) -> ModuleType:
    """Execute `source` in a new module seeded with `references`.

    The source is registered with `linecache` so tracebacks raised from
    generated code show the generated lines. The entry is dropped once
    neither the module nor anything defined in it is reachable.

    Returns:
        The module the source was executed in.

    Raises:
        SyntaxError: If the source does not compile
        Exception: Whatever the generated code raises while executing
    """
    logger = get_app_logger()
    filename = _filename_for(module_name)
    verify_compiles_string(source, filename)

    module = ModuleType(module_name)
    module.__dict__.update(references or {})
    module.__file__ = filename
    # generated functions keep the namespace, which keeps the module and its
    # linecache entry, alive
    module.__dict__["__self_module__"] = module

    linecache.cache[filename] = (
        len(source),
        None,
        [line + "\n" for line in source.splitlines()],
        filename,
    )
    weakref.finalize(module, linecache.cache.pop, filename, None)

    code = compile(source, filename, "exec")
    try:
        exec(code, module.__dict__)  # noqa: S102
    except Exception as e:
        logger.debug("Generated source failed to execute: %s: %s", type(e).__name__, e)
        raise
    logger.trace("[evaluate] executed %s as %s", filename, module_name)
    return module


def load_class(
    writer: Writer,
    class_name: str,
    *,
    module_name: str = DEFAULT_EVAL_MODULE,
) -> type:
    """Build `writer`, evaluate it, and return the class named `class_name`."""
    module = evaluate(
        writer.build(),
        references=writer.references,
        module_name=module_name,
    )
    result = module.__dict__.get(class_name)
    if not isinstance(result, type):
        xmsg = f"Generated source did not define a class named {class_name!r}"
        raise LookupError(xmsg)
    return result
