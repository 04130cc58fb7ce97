# src/mockwriter/constants.py
"""Central constants used across the project."""

from typing import Literal


StubBody = Literal["ellipsis", "pass", "none", "raise"]

# --- env keys ---
DEFAULT_ENV_LOG_LEVEL: str = "LOG_LEVEL"

# --- program defaults ---
DEFAULT_LOG_LEVEL: str = "info"

# --- writer defaults ---
DEFAULT_INDENT: int = 4
DEFAULT_STUB_BODY: StubBody = "ellipsis"
DEFAULT_MOCK_SUFFIX: str = "Mock"
DEFAULT_STRICT_CONFIG: bool = True
DEFAULT_EVAL_MODULE: str = "mockwriter.generated"

STUB_BODIES: tuple[str, ...] = ("ellipsis", "pass", "none", "raise")

# --- reflection ---
# Dunders that are part of an object's public protocol and get stubbed.
# Everything else starting with "_" is left to the base class.
MOCKABLE_DUNDERS: frozenset[str] = frozenset(
    {
        "__call__",
        "__contains__",
        "__enter__",
        "__exit__",
        "__aenter__",
        "__aexit__",
        "__getitem__",
        "__setitem__",
        "__delitem__",
        "__iter__",
        "__len__",
        "__next__",
    }
)
