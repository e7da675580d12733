"""Error types raised by the CLI and its helpers."""

from __future__ import annotations

from pathlib import Path


class HelloCliError(Exception):
    pass


class UsageError(HelloCliError):
    def __init__(self, message: str, usage: str = "") -> None:
        super().__init__(message)
        self.message = message
        self.usage = usage


class WriteError(HelloCliError):
    """Raised when the payload cannot be written to its destination."""

    def __init__(self, path: Path | None, cause: OSError) -> None:
        self.path = path
        self.cause = cause
        target = str(path) if path is not None else "<stdout>"
        reason = cause.strerror or str(cause)
        super().__init__(f"cannot write {target}: {reason}")


class ConfigError(HelloCliError):
    pass
