"""Pydantic model for a parsed command-line invocation."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict

from hello_cli.models.output_format import OutputFormat


class InvocationRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    output_path: Path | None = None  # None -> standard output
    format: OutputFormat = OutputFormat.TEXT
