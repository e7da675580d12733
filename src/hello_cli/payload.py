"""Payload rendering for each output format."""

from __future__ import annotations

import csv
import io

from hello_cli.models.output_format import OutputFormat
from hello_cli.schemas.outputs import DemoMessage


def render_text(message: DemoMessage) -> str:
    return f"{message.msg}\n"


def render_json(message: DemoMessage) -> str:
    # model_dump_json emits minified JSON with no spaces after separators.
    return message.model_dump_json() + "\n"


def render_csv(message: DemoMessage) -> str:
    record = message.model_dump()
    buffer = io.StringIO()
    writer = csv.DictWriter(buffer, fieldnames=list(record), lineterminator="\n")
    writer.writeheader()
    writer.writerow(record)
    return buffer.getvalue()


def build_payload(fmt: OutputFormat, message: DemoMessage | None = None) -> bytes:
    """
    Render the demo message in the selected format.
    The result is fully determined by the format and always ends with a newline.
    """
    message = message or DemoMessage()
    if fmt is OutputFormat.TEXT:
        text = render_text(message)
    elif fmt is OutputFormat.JSON:
        text = render_json(message)
    elif fmt is OutputFormat.CSV:
        text = render_csv(message)
    else:
        raise ValueError(f"Unsupported output format: {fmt!r}")
    return text.encode("utf-8")
