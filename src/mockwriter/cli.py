# src/mockwriter/cli.py
"""Command line entry point: ``mockwriter package.module:Class``."""

import argparse
import platform
import sys
from difflib import get_close_matches
from pathlib import Path

from .config import (
    WriterConfigResolved,
    load_and_validate_config,
    resolve_config,
)
from .constants import STUB_BODIES
from .generator import MockGenerator, import_target, standalone_source
from .loader import load_class, verify_compiles_string
from .logs import LEVEL_ORDER, AppLogger, get_app_logger, safe_log
from .meta import PROGRAM_DISPLAY, PROGRAM_SCRIPT, get_metadata
from .writer import Writer


# errors that end the run with a plain message instead of a crash report
CONTROLLED_ERRORS = (
    FileNotFoundError,
    ImportError,
    LookupError,
    RuntimeError,
    TypeError,
    ValueError,
)

_UNRECOGNIZED = "unrecognized arguments:"


# --- Parser ------------------------------------------------------------------


class HintingArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that suggests the closest option for a mistyped flag."""

    def option_hints(self, message: str) -> list[str]:
        if _UNRECOGNIZED not in message:
            return []
        known = [opt for action in self._actions for opt in action.option_strings]
        unknown = message.partition(_UNRECOGNIZED)[2].split()

        hints: list[str] = []
        for token in unknown:
            if not token.startswith("-"):
                continue
            match = get_close_matches(token, known, n=1, cutoff=0.6)
            if match:
                hints.append(f"Hint: did you mean {match[0]}?")
        return hints

    def error(self, message: str) -> None:  # type: ignore[override]
        self.print_usage(sys.stderr)
        lines = [f"{self.prog}: error: {message}", *self.option_hints(message)]
        self.exit(2, "\n".join(lines) + "\n")


def _setup_parser() -> argparse.ArgumentParser:
    parser = HintingArgumentParser(
        prog=PROGRAM_SCRIPT,
        description="Print the Python source of a mock class for TARGET.",
    )
    parser.add_argument(
        "target",
        nargs="?",
        metavar="TARGET",
        help="Class to mock, as 'package.module:Class'.",
    )
    parser.add_argument("--version", action="store_true", help="Print the version.")
    parser.add_argument("-c", "--config", metavar="FILE", help="Config file to use.")

    naming = parser.add_argument_group("generated class")
    naming.add_argument("--name", help="Class name (default: TARGET name + suffix).")
    naming.add_argument(
        "--namespace",
        help="Module the class claims to live in (default: TARGET's module).",
    )
    naming.add_argument("--suffix", help="Suffix used when --name is omitted.")
    naming.add_argument("--indent", type=int, help="Spaces per indentation level.")
    naming.add_argument(
        "--stub-body",
        dest="stub_body",
        choices=STUB_BODIES,
        help="What every generated method does.",
    )

    output = parser.add_argument_group("output")
    output.add_argument(
        "-o",
        "--out",
        metavar="FILE",
        help="Write the generated module to FILE instead of stdout.",
    )
    output.add_argument(
        "--check",
        action="store_true",
        help="Load the generated class in memory first; fail if it breaks.",
    )
    color = output.add_mutually_exclusive_group()
    color.add_argument("--color", dest="use_color", action="store_true")
    color.add_argument("--no-color", dest="use_color", action="store_false")
    color.set_defaults(use_color=None)

    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument(
        "--log-level",
        dest="log_level",
        choices=LEVEL_ORDER,
        help="Logging verbosity.",
    )
    verbosity.add_argument(
        "-v",
        "--verbose",
        dest="log_level",
        action="store_const",
        const="debug",
        help="Shorthand for --log-level debug.",
    )
    verbosity.add_argument(
        "-q",
        "--quiet",
        dest="log_level",
        action="store_const",
        const="warning",
        help="Shorthand for --log-level warning.",
    )
    return parser


# --- Steps -------------------------------------------------------------------


def _initialize_logger(args: argparse.Namespace) -> AppLogger:
    logger = get_app_logger()
    logger.setLevel(logger.determine_log_level(args=args))
    if args.use_color is None:
        logger.enable_color = logger.determine_color_enabled()
    else:
        logger.enable_color = args.use_color
    logger.trace("[cli] level=%s color=%s", logger.level_name, logger.enable_color)
    logger.debug(
        "%s on Python %s (%s)",
        PROGRAM_DISPLAY,
        platform.python_version(),
        platform.python_implementation(),
    )
    return logger


def _load_and_resolve_config(args: argparse.Namespace) -> WriterConfigResolved:
    loaded = load_and_validate_config(args)
    if loaded is None:
        get_app_logger().trace("[cli] no config file")
        return resolve_config(None, args)
    path, config, _summary = loaded
    get_app_logger().debug("Using config: %s", path)
    return resolve_config(config, args, path)


def _import_target(target_path: str) -> type:
    """`import_target` with the working directory importable."""
    cwd = str(Path.cwd())
    if cwd in sys.path:
        return import_target(target_path)
    sys.path.insert(0, cwd)
    try:
        return import_target(target_path)
    finally:
        if cwd in sys.path:
            sys.path.remove(cwd)


def _check_source(writer: Writer, text: str, name: str, namespace: str) -> bool:
    """Load the class in memory, then compile the module text as emitted."""
    logger = get_app_logger()
    try:
        load_class(writer, name, module_name=namespace)
        verify_compiles_string(text, f"<{namespace}.{name}>")
    except Exception as e:  # noqa: BLE001
        logger.error_if_not_debug(
            "Generated source for %s does not evaluate: %s: %s",
            name,
            type(e).__name__,
            e,
        )
        return False
    logger.debug("Generated source for %s evaluates cleanly", name)
    return True


def _emit(text: str, out: str | None, label: str) -> None:
    if out is None:
        sys.stdout.write(text)
        return
    path = Path(out)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    get_app_logger().info("Wrote %s to %s", label, path)


def _report(logger: AppLogger, e: Exception, *, unexpected: bool) -> int:
    """Log `e` as the reason the run failed and return the exit code."""
    try:
        if unexpected:
            logger.critical_if_not_debug("Unexpected internal error: %s", e)
        elif not getattr(e, "silent", False):
            logger.error_if_not_debug(str(e))
    except Exception:  # noqa: BLE001
        safe_log(f"[FATAL] Logging failed while reporting: {e}")
    return getattr(e, "code", 1)


# --- Entry -------------------------------------------------------------------


def main(argv: list[str] | None = None) -> int:
    logger = get_app_logger()
    try:
        parser = _setup_parser()
        args = parser.parse_args(argv)
        logger = _initialize_logger(args)

        if args.version:
            logger.info("%s %s", PROGRAM_DISPLAY, get_metadata().version)
            return 0
        if not args.target:
            parser.error("the following arguments are required: TARGET")

        generator = MockGenerator(_load_and_resolve_config(args))
        target = _import_target(args.target)
        name, namespace = generator.names_for(target, args.name, None)
        writer = generator.write(target, name=name, namespace=namespace)

        text = standalone_source(writer)
        if args.check and not _check_source(writer, text, name, namespace):
            return 1
        _emit(text, args.out, f"{namespace}.{name}")
    except CONTROLLED_ERRORS as e:
        return _report(logger, e, unexpected=False)
    except Exception as e:  # noqa: BLE001
        return _report(logger, e, unexpected=True)
    return 0


def main_entry() -> None:
    sys.exit(main())
