"""Output helpers."""

from __future__ import annotations

import errno
import logging
import sys
from pathlib import Path
from typing import BinaryIO

from hello_cli.errors import WriteError


logger = logging.getLogger(__name__)


def write_file(path: Path, payload: bytes) -> None:
    logger.debug("Writing %d bytes to %s", len(payload), path)
    try:
        with path.open("wb") as handle:
            handle.write(payload)
            handle.flush()
    except OSError as exc:
        raise WriteError(path, exc) from exc


def resolve_stdout() -> BinaryIO:
    stdout = sys.stdout
    buffer = getattr(stdout, "buffer", None)
    if buffer is None:
        raise OSError(errno.EBADF, "standard output is closed")
    # Text already queued on sys.stdout must land before the raw bytes.
    stdout.flush()
    return buffer


def write_stream(payload: bytes, stream: BinaryIO | None = None) -> None:
    logger.debug("Writing %d bytes to standard output", len(payload))
    try:
        if stream is None:
            stream = resolve_stdout()
        stream.write(payload)
        stream.flush()
    except OSError as exc:
        raise WriteError(None, exc) from exc


def write_payload(payload: bytes, output_path: Path | None, stream: BinaryIO | None = None) -> None:
    """Write payload to output_path (create or truncate) or, when it is None, to the stream."""
    if output_path is not None:
        write_file(output_path, payload)
    else:
        write_stream(payload, stream)
