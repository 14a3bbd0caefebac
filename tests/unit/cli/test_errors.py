"""Tests for the dispatch-level error boundary."""

import pytest

from norikra_client.cli.console import Console
from norikra_client.cli.errors import error_boundary
from norikra_client.error import ClientError, DecodeError, ServerError, TransportError


def _run_failing(exc: BaseException) -> int:
    with pytest.raises(SystemExit) as exc_info:
        with error_boundary(Console()):
            raise exc
    return exc_info.value.code


class TestErrorBoundary:
    def test_client_error(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert _run_failing(ClientError("query name already exists")) == 1

        captured = capsys.readouterr()
        assert "Failed: query name already exists" in captured.err
        assert captured.out == ""

    def test_server_error_hints_at_server_logs(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert _run_failing(ServerError("NullPointerException")) == 1

        err = capsys.readouterr().err
        assert "ERROR on norikra server: NullPointerException" in err
        assert "see norikra server's logs" in err

    def test_transport_error(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert _run_failing(TransportError("refused", url="http://localhost:26578")) == 1

        assert "Could not connect to norikra server at http://localhost:26578" in capsys.readouterr().err

    def test_decode_error_reports_line(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert _run_failing(DecodeError("malformed JSON", line_number=3)) == 1

        assert "Invalid input (line 3): malformed JSON" in capsys.readouterr().err

    def test_keyboard_interrupt(self) -> None:
        assert _run_failing(KeyboardInterrupt()) == 130

    def test_messages_with_brackets_are_not_markup(self, capsys: pytest.CaptureFixture[str]) -> None:
        _run_failing(ClientError("invalid field [bold]x[/bold]"))

        assert "[bold]x[/bold]" in capsys.readouterr().err

    def test_other_errors_propagate(self) -> None:
        with pytest.raises(ValueError):
            with error_boundary(Console()):
                raise ValueError("not a norikra error")

    def test_success_passes_through(self, capsys: pytest.CaptureFixture[str]) -> None:
        with error_boundary(Console()):
            pass

        assert capsys.readouterr().err == ""

    def test_broken_pipe_exits_quietly(self, capsys: pytest.CaptureFixture[str]) -> None:
        """A reader closing the pipe early (e.g. `| head`) is not an error message."""
        assert _run_failing(BrokenPipeError()) == 141

        assert capsys.readouterr().err == ""
