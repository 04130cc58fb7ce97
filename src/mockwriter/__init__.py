# src/mockwriter/__init__.py

"""Mockwriter: write Python source for generated mock classes.

Full developer API
==================
This package re-exports all non-private symbols from its submodules,
making it suitable for programmatic use, custom integrations, or plugins.
Anything prefixed with "_" is considered internal and may change.

Highlights:
    - DefaultWriter       → Append namespace/header/method/close, then build()
    - load_class()        → Evaluate writer output into a live class
    - MockGenerator       → Reflect a class and generate its mock
    - main()              → CLI entrypoint
"""

from .clazz import EMPTY, Method, Parameter, Type, reflect_methods
from .cli import main
from .config import (
    WriterConfig,
    WriterConfigResolved,
    default_config,
    find_config,
    load_and_validate_config,
    load_config,
    resolve_config,
    validate_config,
)
from .constants import (
    DEFAULT_INDENT,
    DEFAULT_LOG_LEVEL,
    DEFAULT_MOCK_SUFFIX,
    DEFAULT_STUB_BODY,
    STUB_BODIES,
)
from .generator import (
    MockGenerator,
    import_target,
    is_interface,
    mock_class_name,
    standalone_source,
)
from .loader import evaluate, load_class, verify_compiles_string
from .logs import get_app_logger
from .marker import MockMarker, is_mock
from .meta import (
    PROGRAM_CONFIG,
    PROGRAM_DISPLAY,
    PROGRAM_ENV,
    PROGRAM_PACKAGE,
    PROGRAM_SCRIPT,
    Metadata,
    get_metadata,
)
from .writer import DefaultWriter, Writer


__all__ = [  # noqa: RUF022
    # clazz
    "EMPTY",
    "Method",
    "Parameter",
    "Type",
    "reflect_methods",
    # cli
    "main",
    # config
    "WriterConfig",
    "WriterConfigResolved",
    "default_config",
    "find_config",
    "load_and_validate_config",
    "load_config",
    "resolve_config",
    "validate_config",
    # constants
    "DEFAULT_INDENT",
    "DEFAULT_LOG_LEVEL",
    "DEFAULT_MOCK_SUFFIX",
    "DEFAULT_STUB_BODY",
    "STUB_BODIES",
    # generator
    "MockGenerator",
    "import_target",
    "is_interface",
    "mock_class_name",
    "standalone_source",
    # loader
    "evaluate",
    "load_class",
    "verify_compiles_string",
    # logs
    "get_app_logger",
    # marker
    "MockMarker",
    "is_mock",
    # meta
    "Metadata",
    "PROGRAM_CONFIG",
    "PROGRAM_DISPLAY",
    "PROGRAM_ENV",
    "PROGRAM_PACKAGE",
    "PROGRAM_SCRIPT",
    "get_metadata",
    # writer
    "DefaultWriter",
    "Writer",
]
