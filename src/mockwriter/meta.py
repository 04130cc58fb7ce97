# src/mockwriter/meta.py
"""Program identity and version metadata."""

import re
from dataclasses import dataclass
from importlib import metadata
from pathlib import Path


PROGRAM_PACKAGE = "mockwriter"
PROGRAM_SCRIPT = "mockwriter"
PROGRAM_DISPLAY = "Mockwriter"
PROGRAM_CONFIG = "mockwriter"
PROGRAM_ENV = "MOCKWRITER"


@dataclass(frozen=True)
class Metadata:
    version: str
    source: str  # "pyproject" or "installed"


def get_metadata() -> Metadata:
    """Return version info for this tool.

    - Source checkout → read pyproject.toml next to `src/`
    - Installed distribution → importlib.metadata
    """
    root = Path(__file__).resolve().parents[2]
    pyproject = root / "pyproject.toml"
    if pyproject.exists():
        text = pyproject.read_text(encoding="utf-8")
        match = re.search(r'(?m)^\s*version\s*=\s*["\']([^"\']+)["\']', text)
        if match:
            return Metadata(match.group(1), "pyproject")

    try:
        return Metadata(metadata.version(PROGRAM_PACKAGE), "installed")
    except metadata.PackageNotFoundError:
        return Metadata("unknown", "installed")
