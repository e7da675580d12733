import errno
import io
import logging
import sys
from pathlib import Path

import pytest
from pydantic import ValidationError

from hello_cli.emitter import emit
from hello_cli.errors import WriteError
from hello_cli.io_utils import write_payload
from hello_cli.models import InvocationRequest, OutputFormat


class FailingStream:
    def __init__(self, fail_on: str) -> None:
        self.fail_on = fail_on
        self.written = b""

    def write(self, data: bytes) -> int:
        if self.fail_on == "write":
            raise OSError(errno.EPIPE, "Broken pipe")
        self.written += data
        return len(data)

    def flush(self) -> None:
        if self.fail_on == "flush":
            raise OSError(errno.ENOSPC, "No space left on device")


def test_write_payload_to_stream() -> None:
    stream = io.BytesIO()

    write_payload(b"abc\n", None, stream)

    assert stream.getvalue() == b"abc\n"


def test_write_payload_to_file_does_not_touch_stream(tmp_path: Path) -> None:
    stream = io.BytesIO()
    out_path = tmp_path / "out.bin"

    write_payload(b"abc\n", out_path, stream)

    assert out_path.read_bytes() == b"abc\n"
    assert stream.getvalue() == b""


def test_write_payload_does_not_create_parent_dirs(tmp_path: Path) -> None:
    out_path = tmp_path / "missing" / "out.txt"

    with pytest.raises(WriteError) as excinfo:
        write_payload(b"abc\n", out_path)

    assert excinfo.value.path == out_path
    assert isinstance(excinfo.value.cause, FileNotFoundError)
    assert excinfo.value.__cause__ is excinfo.value.cause
    assert str(out_path) in str(excinfo.value)


def test_write_payload_to_directory_fails(tmp_path: Path) -> None:
    with pytest.raises(WriteError) as excinfo:
        write_payload(b"abc\n", tmp_path)

    assert excinfo.value.path == tmp_path


@pytest.mark.parametrize("fail_on", ["write", "flush"])
def test_write_payload_stream_failure(fail_on: str) -> None:
    with pytest.raises(WriteError) as excinfo:
        write_payload(b"abc\n", None, FailingStream(fail_on))  # type: ignore[arg-type]

    assert excinfo.value.path is None
    assert "<stdout>" in str(excinfo.value)


def test_write_payload_without_stdout(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(sys, "stdout", None)

    with pytest.raises(WriteError) as excinfo:
        write_payload(b"abc\n", None)

    assert excinfo.value.path is None
    assert excinfo.value.cause.errno == errno.EBADF


def test_emit_returns_written_payload(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="hello_cli")
    stream = io.BytesIO()

    payload = emit(InvocationRequest(format=OutputFormat.CSV), stream)

    assert payload == stream.getvalue() == b"msg\nhello world\n"
    assert "Built csv payload" in caplog.text


def test_invocation_request_is_frozen() -> None:
    request = InvocationRequest()

    with pytest.raises(ValidationError):
        request.format = OutputFormat.JSON  # type: ignore[misc]
