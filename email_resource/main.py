"""Command-line entry point for the out step.

The CI runner invokes the step with the build-sources directory as the first
argument and the JSON request on stdin. The output record goes to stdout;
logs and error text go to stderr.
"""

import argparse
import sys
from typing import IO, List, Optional

from email_resource import __version__
from email_resource.config.environment import (
    VALID_LOG_FORMATS,
    VALID_LOG_LEVELS,
    load_runtime_settings,
)
from email_resource.config.exceptions import ConfigurationError
from email_resource.logging import get_logger
from email_resource.logging.config import configure_logging
from email_resource.pipeline import OutStep

logger = get_logger(__name__, component="cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="email-resource-out",
        description="Send a build notification email and report it as JSON on stdout",
    )
    parser.add_argument(
        "sources_root",
        nargs="?",
        default=None,
        help="Path to the build sources; relative file paths in params are resolved against it",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=VALID_LOG_LEVELS,
        help="Log level (overrides LOG_LEVEL)",
    )
    parser.add_argument(
        "--log-format",
        default=None,
        choices=VALID_LOG_FORMATS,
        help="Log format (overrides LOG_FORMAT)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(
    argv: Optional[List[str]] = None,
    stdin: Optional[IO[bytes]] = None,
    stdout: Optional[IO[str]] = None,
    stderr: Optional[IO[str]] = None,
    step: Optional[OutStep] = None,
) -> int:
    """
    Main entry point for the out step.

    Returns:
        Exit code (0 when the message was sent, 1 otherwise)
    """
    stdin = stdin or sys.stdin.buffer
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr

    args = build_parser().parse_args(argv)

    try:
        settings = load_runtime_settings()
    except ConfigurationError as e:
        print(f"Configuration Error: {e}", file=stderr)
        return 1

    configure_logging(
        level=args.log_level or settings.log_level,
        format_type=args.log_format or settings.log_format,
        environment=settings.environment,
        stream=stderr,
    )

    raw_input = stdin.read()

    step = step or OutStep()
    result = step.execute(args.sources_root, __version__, raw_input)

    # The record is printed even when the empty-body guard refused to send
    if result.payload is not None:
        stdout.write(result.payload)
        stdout.flush()

    if result.error is not None:
        print(str(result.error), file=stderr)

    return result.exit_code()


if __name__ == "__main__":
    sys.exit(main())
