"""Command-line interface for the mdfmt Markdown formatter.

Without flags, each file is formatted and the result printed to standard
output. With no paths, standard input is formatted instead.

Examples
--------
Format a file to stdout::

    $ mdfmt README.md

Rewrite every Markdown file in a tree::

    $ mdfmt -w docs/

List files that are not canonically formatted::

    $ mdfmt -l .

Show what would change, with underlined headings::

    $ mdfmt -d -u CHANGELOG.md

Exit status is 0 on success and 2 if any file could not be read, parsed,
rendered or written. Remaining paths are still processed after a failure.

"""

import argparse
import logging
import sys
from typing import Optional, TextIO

from mdfmt.cli.builder import EXIT_ERROR, EXIT_SUCCESS, build_renderer_options, create_parser
from mdfmt.cli.processors import FormatRun, is_markdown_file, iter_markdown_files
from mdfmt.exceptions import InvalidOptionsError
from mdfmt.logging_utils import configure_logging

logger = logging.getLogger(__name__)

__all__ = [
    "EXIT_ERROR",
    "EXIT_SUCCESS",
    "FormatRun",
    "create_parser",
    "is_markdown_file",
    "iter_markdown_files",
    "main",
]


def _setup_logging_level(parsed_args: argparse.Namespace) -> None:
    """Configure logging from --log-level, --log-file and --trace."""
    configure_logging(parsed_args.log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)


def main(
    args: Optional[list[str]] = None,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
) -> int:
    """Execute the mdfmt command line.

    Parameters
    ----------
    args : list of str, optional
        Command line arguments; ``sys.argv[1:]`` when omitted
    stdout, stderr : TextIO, optional
        Output streams; the process streams when omitted

    Returns
    -------
    int
        Exit code: 0 on success, 2 if any path failed

    """
    parser = create_parser()
    try:
        parsed_args = parser.parse_args(args)
    except SystemExit as e:
        # -h/--version exit 0, usage errors exit 2
        return int(e.code) if isinstance(e.code, int) else EXIT_ERROR

    _setup_logging_level(parsed_args)
    err = stderr or sys.stderr

    try:
        options = build_renderer_options(parsed_args)
    except InvalidOptionsError as e:
        print(f"mdfmt: {e.message}", file=err)
        return EXIT_ERROR

    run = FormatRun.from_args(parsed_args, options, stdout=stdout, stderr=err)

    if not parsed_args.paths:
        run.process_stdin()
    else:
        for raw_path in parsed_args.paths:
            run.process_path(raw_path)

    if run.errors:
        logger.debug("%d path(s) failed", run.errors)
        return EXIT_ERROR
    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
