"""Model types for invocations and settings."""

from hello_cli.models.invocation_request import InvocationRequest
from hello_cli.models.output_format import OutputFormat
from hello_cli.models.settings import Settings

__all__ = [
    "InvocationRequest",
    "OutputFormat",
    "Settings",
]
