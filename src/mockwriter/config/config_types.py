# src/mockwriter/config/config_types.py

from pathlib import Path
from typing import TypedDict

from typing_extensions import NotRequired

from mockwriter.constants import StubBody


class WriterConfig(TypedDict, total=False):
    """Raw shape of a `.mockwriter.json(c)` file."""

    indent: int
    stub_body: StubBody
    mock_suffix: str
    namespace: str  # "" means: same module as the target class
    log_level: str
    strict_config: bool


class WriterConfigResolved(TypedDict):
    indent: int
    stub_body: StubBody
    mock_suffix: str
    namespace: str
    log_level: str
    strict_config: bool

    # meta only
    config_path: NotRequired[Path]
