# src/mockwriter/marker.py
"""Marker type carried by every generated mock class."""

from typing import Any


class MockMarker:
    """Empty base class that tags a generated class as a mock."""

    __slots__ = ()


def is_mock(obj: Any) -> bool:
    """Return True for a generated mock class or an instance of one."""
    if isinstance(obj, type):
        return issubclass(obj, MockMarker)
    return isinstance(obj, MockMarker)
