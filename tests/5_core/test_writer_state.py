# tests/5_core/test_writer_state.py
"""DefaultWriter rejects out-of-order calls and bad settings."""

import pytest

import mockwriter.writer as mod_writer
from mockwriter.clazz import Method


def test_method_before_header_raises() -> None:
    # --- setup ---
    writer = mod_writer.DefaultWriter()

    # --- execute and verify ---
    with pytest.raises(RuntimeError, match="no open class header"):
        writer.write_method(Method("ping"))


def test_close_before_header_raises() -> None:
    # --- setup ---
    writer = mod_writer.DefaultWriter()

    # --- execute and verify ---
    with pytest.raises(RuntimeError, match="write_close"):
        writer.write_close()


def test_double_close_raises() -> None:
    # --- setup ---
    writer = mod_writer.DefaultWriter()
    writer.write_class_extend("A", "object", "M")
    writer.write_close()

    # --- execute and verify ---
    with pytest.raises(RuntimeError):
        writer.write_close()


def test_second_header_without_close_raises() -> None:
    # --- setup ---
    writer = mod_writer.DefaultWriter()
    writer.write_class_extend("A", "object", "M")

    # --- execute and verify ---
    with pytest.raises(RuntimeError, match="'A' has not been closed"):
        writer.write_interface_extend("B", "Base", "M")


def test_failed_call_leaves_buffer_unchanged() -> None:
    # --- setup ---
    writer = mod_writer.DefaultWriter()
    writer.write_namespace("a.b")
    before = writer.build()

    # --- execute ---
    with pytest.raises(RuntimeError):
        writer.write_method(Method("ping"))

    # --- verify ---
    assert writer.build() == before


def test_namespace_may_be_written_at_any_time() -> None:
    # --- setup ---
    writer = mod_writer.DefaultWriter()

    # --- execute ---
    writer.write_namespace("one")
    writer.write_namespace("two")

    # --- verify ---
    assert writer.build() == '__name__ = "one"\n__name__ = "two"'


def test_empty_writer_builds_empty_string() -> None:
    assert mod_writer.DefaultWriter().build() == ""


@pytest.mark.parametrize("indent", [0, -4])
def test_bad_indent_raises(indent: int) -> None:
    with pytest.raises(ValueError, match="indent"):
        mod_writer.DefaultWriter(indent=indent)


def test_bad_stub_body_raises() -> None:
    with pytest.raises(ValueError, match="Unknown stub body 'todo'"):
        mod_writer.DefaultWriter(stub_body="todo")  # type: ignore[arg-type]
