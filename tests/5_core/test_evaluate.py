# tests/5_core/test_evaluate.py
"""Tests for evaluating generated source into a module."""

import gc
import linecache
import sys
import traceback

import pytest

import mockwriter.constants as mod_constants
import mockwriter.loader as mod_loader


def test_evaluate_returns_module_with_definitions() -> None:
    # --- execute ---
    module = mod_loader.evaluate("class A:\n    x = 1\n")

    # --- verify ---
    assert module.A.x == 1
    assert module.__name__ == mod_constants.DEFAULT_EVAL_MODULE


def test_evaluate_seeds_references() -> None:
    # --- setup ---
    class Base:
        pass

    # --- execute ---
    module = mod_loader.evaluate(
        "class Child(Base):\n    pass\n",
        references={"Base": Base},
    )

    # --- verify ---
    assert issubclass(module.Child, Base)


def test_evaluate_honours_namespace_assignment() -> None:
    # --- execute ---
    module = mod_loader.evaluate('__name__ = "my.pkg"\nclass A:\n    pass\n')

    # --- verify ---
    assert module.A.__module__ == "my.pkg"


def test_evaluate_does_not_touch_sys_modules() -> None:
    # --- setup ---
    before = set(sys.modules)

    # --- execute ---
    mod_loader.evaluate("y = 2\n", module_name="mockwriter_test_isolated")

    # --- verify ---
    assert "mockwriter_test_isolated" not in sys.modules
    assert set(sys.modules) == before


def test_evaluate_syntax_error_propagates() -> None:
    with pytest.raises(SyntaxError):
        mod_loader.evaluate("def broken(:\n")


def test_evaluate_runtime_error_propagates() -> None:
    with pytest.raises(NameError, match="Missing"):
        mod_loader.evaluate("class A(Missing):\n    pass\n")


def test_evaluate_tracebacks_show_generated_lines() -> None:
    # --- setup ---
    module = mod_loader.evaluate(
        "def boom():\n    raise KeyError('generated-line-marker')\n"
    )

    # --- execute ---
    with pytest.raises(KeyError) as exc_info:
        module.boom()
    text = "".join(traceback.format_exception(exc_info.value))

    # --- verify ---
    assert "raise KeyError('generated-line-marker')" in text


def test_evaluate_uses_distinct_filenames() -> None:
    # --- execute ---
    first = mod_loader.evaluate("a = 1\n")
    second = mod_loader.evaluate("a = 2\n")

    # --- verify ---
    assert first.__file__ != second.__file__


def test_evaluate_linecache_entry_follows_generated_code() -> None:
    # --- setup ---
    module = mod_loader.evaluate("class A:\n    def ping(self):\n        pass\n")
    filename = module.__file__
    cls = module.A

    # --- execute ---
    del module
    gc.collect()

    # --- verify ---
    # still reachable through the class's methods
    assert filename in linecache.cache

    del cls
    gc.collect()
    assert filename not in linecache.cache
