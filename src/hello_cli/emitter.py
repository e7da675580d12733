"""Build the payload for a request and send it to its destination."""

from __future__ import annotations

import logging
from typing import BinaryIO

from hello_cli.io_utils import write_payload
from hello_cli.models.invocation_request import InvocationRequest
from hello_cli.payload import build_payload


logger = logging.getLogger(__name__)


def emit(request: InvocationRequest, stream: BinaryIO | None = None) -> bytes:
    payload = build_payload(request.format)
    logger.debug("Built %s payload (%d bytes)", request.format.value, len(payload))
    write_payload(payload, request.output_path, stream)
    return payload
