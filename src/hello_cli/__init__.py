"""Public package exports."""

from hello_cli.cli import main
from hello_cli.cli import parse_request
from hello_cli.config import load_settings
from hello_cli.emitter import emit
from hello_cli.errors import ConfigError
from hello_cli.errors import HelloCliError
from hello_cli.errors import UsageError
from hello_cli.errors import WriteError
from hello_cli.models import InvocationRequest
from hello_cli.models import OutputFormat
from hello_cli.models import Settings
from hello_cli.payload import build_payload
from hello_cli.rectangle import Rectangle

__all__ = [
    "ConfigError",
    "HelloCliError",
    "InvocationRequest",
    "OutputFormat",
    "Rectangle",
    "Settings",
    "UsageError",
    "WriteError",
    "build_payload",
    "emit",
    "load_settings",
    "main",
    "parse_request",
]
