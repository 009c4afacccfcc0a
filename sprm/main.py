"""
Module: main.py

Date: 2026-10-18

Command-line entry point for sprm.

Parses the arguments into an immutable RunConfig, sets up logging, then walks
the file arguments in order: each one gets its new name from the name
transformer and is handed to the file operator. A failing file is reported as
"Error: <message>" on stderr and the run continues with the next one.

Functions:
    main: Runs sprm and returns the process exit status.
"""

import argparse
import sys
from collections.abc import Sequence

from sprm.config import (
    APP_DESCRIPTION,
    APP_NAME,
    APP_VERSION,
    DASH_SEPARATOR,
    EXIT_FILE_ERRORS,
    EXIT_OK,
    EXIT_USAGE,
    UNDERSCORE_SEPARATOR,
)
from sprm.core.errors import FileOperationError, UsageError
from sprm.core.rename.data_classes import FileAction, OperationOutcome, RunConfig
from sprm.modules.logic.name_transform_logic import NameTransformLogic
from sprm.services.filesystem_service import SKIP_DRY_RUN, FileOperator
from sprm.services.interfaces import FileOperatorProtocol, LineReaderProtocol
from sprm.utils.logging.logger_factory import get_cached_logger
from sprm.utils.logging.logger_setup import ConfigureLogger

logger = get_cached_logger(__name__)

STRIP_OPTIONS = ("-s", "--strip")


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises UsageError instead of exiting with status 2."""

    def error(self, message):
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog=APP_NAME,
        usage="%(prog)s [OPTION...] FILE...",
        description=APP_DESCRIPTION,
        add_help=False,
        allow_abbrev=False,
    )
    parser.add_argument("files", nargs="*", metavar="FILE", help="File(s) to rename or copy")
    parser.add_argument(
        "-b", "--backup", action="store_true", help="Make a copy instead of renaming in place"
    )
    parser.add_argument(
        "-d", "--dash", action="store_true", help="Replace spaces with dashes/hyphens"
    )
    parser.add_argument(
        "-u", "--underscore", action="store_true", help="Replace spaces with underscores"
    )

    parser.add_argument(
        "-i", "--interactive", action="store_true", help="Prompt before renaming/copying file"
    )
    parser.add_argument(
        "-s",
        "--strip",
        default="",
        metavar="CHARS",
        help="Remove the given characters from the filename",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Verbosely list files processed"
    )
    parser.add_argument(
        "-n", "--dry-run", action="store_true", help="Show what would be done, change nothing"
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help=f"Exit with status {EXIT_FILE_ERRORS} if any file could not be processed",
    )
    parser.add_argument("--log-file", metavar="PATH", help="Write a debug log to PATH")
    parser.add_argument("-?", "-h", "--help", action="store_true", help="Show this help message")
    parser.add_argument("-V", "--version", action="store_true", help="Print program version")
    return parser


def join_strip_values(argv: Sequence[str]) -> list[str]:
    """Bind the token after -s/--strip to it, even when it starts with a dash.

    argparse reads "-s -_" as two options; "--strip=-_" keeps "-_" as CHARS.
    Tokens after a "--" terminator are left alone.
    """
    joined = []
    tokens = iter(argv)
    for token in tokens:
        if token == "--":
            joined.append(token)
            joined.extend(tokens)
            break
        if token in STRIP_OPTIONS:
            value = next(tokens, None)
            joined.append(token if value is None else f"--strip={value}")
            continue
        joined.append(token)
    return joined


def print_usage(stream=None) -> None:
    """Print the short usage message."""
    stream = stream if stream is not None else sys.stderr
    stream.write(f"Usage: {APP_NAME} [OPTION...] FILE...\n")
    stream.write(f"Try `{APP_NAME} --help' or `{APP_NAME} -h' for more information\n")


def build_config(args: argparse.Namespace) -> RunConfig:
    """Turn parsed arguments into the immutable run configuration."""
    if args.dash and args.underscore:
        raise UsageError("--dash and --underscore cannot be used together")

    if args.dash:
        space_replacement = DASH_SEPARATOR
    elif args.underscore:
        space_replacement = UNDERSCORE_SEPARATOR
    else:
        space_replacement = ""

    return RunConfig(
        mode=FileAction.COPY if args.backup else FileAction.RENAME,
        space_replacement=space_replacement,
        strip_chars=frozenset(args.strip),
        interactive=args.interactive,
        verbose=args.verbose,
        dry_run=args.dry_run,
        strict=args.strict,
        log_file=args.log_file,
    )


def process_files(
    config: RunConfig, paths: Sequence[str], operator: FileOperatorProtocol
) -> list[OperationOutcome]:
    """Transform and rename/copy every path in order.

    Args:
        config: Run configuration
        paths: File arguments in command-line order
        operator: Service performing the rename or copy

    Returns:
        One OperationOutcome per path

    """
    outcomes = []
    for path in paths:
        result = NameTransformLogic.apply(config.request_for(path))
        try:
            outcome = operator.apply(path, result.new_path, config.mode, config.interactive)
        except FileOperationError as e:
            outcome = OperationOutcome(path, result.new_path, config.mode, error=e)

        if outcome.error is not None:
            print(f"Error: {outcome.error}", file=sys.stderr)
        elif config.verbose and outcome.skipped and outcome.skip_reason != SKIP_DRY_RUN:
            print(f"skipped file: {path} ({outcome.skip_reason})")

        outcomes.append(outcome)

    failed = sum(1 for o in outcomes if not o.success)
    logger.debug(
        "Processed %d file(s), %d failed", len(outcomes), failed, extra={"dev_only": True}
    )
    return outcomes


def main(
    argv: Sequence[str] | None = None,
    reader: LineReaderProtocol | None = None,
    operator: FileOperatorProtocol | None = None,
) -> int:
    """
    Entry point for sprm.

    Args:
        argv: Arguments without the program name, sys.argv[1:] by default.
        reader: Answer source for --interactive, standard input by default.
        operator: File operator to use instead of a FileOperator.

    Returns:
        int: Process exit status.
    """
    parser = build_parser()
    try:
        if argv is None:
            argv = sys.argv[1:]
        args = parser.parse_intermixed_args(join_strip_values(argv))
        if args.help:
            parser.print_help(sys.stderr)
            return EXIT_OK
        if args.version:
            print(f"{APP_NAME} {APP_VERSION}")
            return EXIT_OK
        if not args.files:
            print_usage()
            return EXIT_USAGE
        config = build_config(args)
    except UsageError as e:
        print(f"{APP_NAME}: {e}", file=sys.stderr)
        print_usage()
        return EXIT_USAGE

    try:
        ConfigureLogger(log_file=config.log_file)
    except OSError as e:
        reason = e.strerror or e
        print(f"{APP_NAME}: cannot open log file '{config.log_file}': {reason}", file=sys.stderr)
        return EXIT_USAGE
    logger.debug("Run configuration: %s", config, extra={"dev_only": True})

    if operator is None:
        operator = FileOperator(reader=reader, verbose=config.verbose, dry_run=config.dry_run)

    outcomes = process_files(config, args.files, operator)

    if config.strict and any(not o.success for o in outcomes):
        return EXIT_FILE_ERRORS
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
