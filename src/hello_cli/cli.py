"""CLI entrypoint."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import NoReturn, Sequence

from hello_cli.emitter import emit
from hello_cli.errors import UsageError, WriteError
from hello_cli.models.invocation_request import InvocationRequest
from hello_cli.models.output_format import OutputFormat


logger = logging.getLogger(__name__)

PROG = "hello-cli"
EXIT_OK = 0
EXIT_WRITE_ERROR = 1
EXIT_USAGE = 2


class RequestParser(argparse.ArgumentParser):
    """ArgumentParser that raises UsageError instead of exiting the process."""

    def error(self, message: str) -> NoReturn:
        raise UsageError(message, usage=self.format_usage())


def parse_format(value: str) -> OutputFormat:
    try:
        return OutputFormat.parse(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def build_parser() -> RequestParser:
    parser = RequestParser(prog=PROG, description="Write a hello world payload as text, JSON or CSV.")
    parser.add_argument("-o", "--output", type=Path, default=None, help="File to write (default: standard output)")
    parser.add_argument(
        "-f",
        "--format",
        type=parse_format,
        default=OutputFormat.TEXT,
        metavar="{" + ",".join(OutputFormat.choices()) + "}",
        help="Payload format (default: text)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log progress to standard error")
    return parser


def request_from_args(args: argparse.Namespace) -> InvocationRequest:
    return InvocationRequest(output_path=args.output, format=args.format)


def parse_request(argv: Sequence[str] | None = None) -> InvocationRequest:
    args = build_parser().parse_args(argv)
    return request_from_args(args)


def configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )
    # basicConfig is a no-op once root has handlers; the package level still has to follow --verbose.
    logging.getLogger("hello_cli").setLevel(level)


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except UsageError as exc:
        sys.stderr.write(exc.usage)
        print(f"{parser.prog}: error: {exc.message}", file=sys.stderr)
        return EXIT_USAGE

    configure_logging(args.verbose)
    request = request_from_args(args)
    logger.debug("Parsed request: %s", request)

    try:
        emit(request)
    except WriteError as exc:
        print(f"{parser.prog}: error: {exc}", file=sys.stderr)
        return EXIT_WRITE_ERROR
    return EXIT_OK
