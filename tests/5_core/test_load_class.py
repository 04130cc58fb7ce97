# tests/5_core/test_load_class.py
"""Tests for load_class."""

import pytest

import mockwriter.loader as mod_loader
import mockwriter.writer as mod_writer
from mockwriter.marker import MockMarker


def _closed_writer(name: str) -> mod_writer.DefaultWriter:
    writer = mod_writer.DefaultWriter()
    writer.write_namespace("tests.generated")
    writer.write_class_extend(name, "object", MockMarker)
    writer.write_close()
    return writer


def test_load_class_returns_named_class() -> None:
    # --- execute ---
    cls = mod_loader.load_class(_closed_writer("ThingMock"), "ThingMock")

    # --- verify ---
    assert cls.__name__ == "ThingMock"
    assert cls.__module__ == "tests.generated"
    assert issubclass(cls, MockMarker)


def test_load_class_missing_name_raises_lookup_error() -> None:
    with pytest.raises(LookupError, match="'Other'"):
        mod_loader.load_class(_closed_writer("ThingMock"), "Other")


def test_load_class_non_class_name_raises_lookup_error() -> None:
    # a namespace-only buffer defines __name__ but no class
    writer = mod_writer.DefaultWriter()
    writer.write_namespace("tests.generated")

    with pytest.raises(LookupError):
        mod_loader.load_class(writer, "__name__")


def test_load_class_each_call_is_a_fresh_class() -> None:
    # --- setup ---
    writer = _closed_writer("ThingMock")

    # --- execute ---
    first = mod_loader.load_class(writer, "ThingMock")
    second = mod_loader.load_class(writer, "ThingMock")

    # --- verify ---
    assert first is not second
