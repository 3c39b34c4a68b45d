"""Command line interface.

    assistcheck src/myapp                      # validate, dry run
    assistcheck src/myapp --output generated   # validate and write factories
    assistcheck src/myapp --format plain -v

Exit codes: 0 when every candidate is valid, 1 when errors were reported,
2 on unusable input (unparsable source, bad arguments).
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from assistcheck import __version__
from assistcheck.application.emitters.python_factory import PythonFactoryEmitter
from assistcheck.application.reporters.console import ConsoleConfig, ConsoleReporter
from assistcheck.application.reporters.plain_text import PlainTextReporter
from assistcheck.application.services.processor import AssistedInjectProcessor
from assistcheck.domain.exceptions.base import AssistCheckError
from assistcheck.domain.model.configuration import ProcessorConfig
from assistcheck.infrastructure.adapters.ast_symbols import AstSymbolSource
from assistcheck.infrastructure.sinks.collecting import CollectingSink
from assistcheck.infrastructure.writers.directory import DirectorySourceWriter
from assistcheck.infrastructure.writers.memory import MemorySourceWriter

if TYPE_CHECKING:
    from collections.abc import Sequence

    from assistcheck.domain.ports.source_writer import SourceWriterPort

EXIT_OK = 0
EXIT_ERRORS = 1
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    """Argument parser for the assistcheck command."""
    parser = argparse.ArgumentParser(
        prog="assistcheck",
        description="Validate assisted-injection declarations and generate their factories.",
    )
    parser.add_argument("path", type=Path, help="Python file or package directory to check")
    parser.add_argument(
        "--root",
        type=Path,
        default=None,
        help="Directory module names are relative to (default: parent of PATH)",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Write generated factories under this directory (default: dry run)",
    )
    parser.add_argument(
        "--format",
        choices=("console", "plain"),
        default="console",
        help="Report format",
    )
    parser.add_argument(
        "--check-return-type",
        action="store_true",
        help="Require factory methods to return the target type or a declared base",
    )
    parser.add_argument(
        "--qualifier",
        action="append",
        default=None,
        metavar="NAME",
        help="Annotated metadata name treated as a qualifier (repeatable)",
    )
    parser.add_argument("-v", "--verbose", action="count", default=0, help="More logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _configure_logging(verbosity: int) -> None:
    level = {0: logging.WARNING, 1: logging.INFO}.get(verbosity, logging.DEBUG)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _build_config(args: argparse.Namespace) -> ProcessorConfig:
    if args.qualifier:
        return ProcessorConfig(
            qualifier_markers=frozenset(args.qualifier),
            check_return_type=args.check_return_type,
        )
    return ProcessorConfig(check_return_type=args.check_return_type)


def main(argv: Sequence[str] | None = None) -> int:
    """Run one processing round over PATH.

    Args:
        argv: Arguments without program name (default: sys.argv[1:])

    Returns:
        Process exit code
    """
    args = build_parser().parse_args(argv)
    _configure_logging(args.verbose)

    path: Path = args.path.resolve()
    root: Path = args.root.resolve() if args.root else path.parent

    try:
        config = _build_config(args)
        model = AstSymbolSource(root, config).parse(path)
    except AssistCheckError as e:
        print(f"assistcheck: {e}", file=sys.stderr)
        return EXIT_USAGE

    writer: SourceWriterPort = (
        DirectorySourceWriter(args.output) if args.output else MemorySourceWriter()
    )
    sink = CollectingSink()
    processor = AssistedInjectProcessor(sink, PythonFactoryEmitter(writer, config), config)
    result = processor.run_round(model)

    if args.format == "plain":
        PlainTextReporter().report(result, sink.diagnostics)
    else:
        config_console = ConsoleConfig(force_terminal=sys.stdout.isatty())
        sys.stdout.write(ConsoleReporter(config_console).report(result, sink.diagnostics))

    return EXIT_ERRORS if sink.has_errors else EXIT_OK
