"""Tests for runner module."""

import subprocess
from collections.abc import Generator
from unittest.mock import MagicMock, patch

import pytest

from certificate_generator.lib.runner import CommandError, CommandRunner


@pytest.fixture
def mock_subprocess_run() -> Generator[MagicMock]:
    with patch("certificate_generator.lib.runner.subprocess.run") as mock:
        mock.return_value = subprocess.CompletedProcess(args=[], returncode=0, stdout="ok\n")
        yield mock


class TestCommandRunner:
    """Tests for CommandRunner.run."""

    def test_returns_combined_output(self, mock_subprocess_run: MagicMock) -> None:
        """Successful command returns captured output."""
        output = CommandRunner().run("Listing", "ls", "-l")
        assert output == "ok\n"

    def test_passes_argument_list_without_shell(self, mock_subprocess_run: MagicMock) -> None:
        """Arguments reach subprocess as a list; stderr is merged into stdout."""
        CommandRunner().run("Request", "openssl", "req", "-subj", "/CN=*.example.com")

        args, kwargs = mock_subprocess_run.call_args
        assert args[0] == ["openssl", "req", "-subj", "/CN=*.example.com"]
        assert kwargs.get("shell", False) is False
        assert kwargs["stdout"] is subprocess.PIPE
        assert kwargs["stderr"] is subprocess.STDOUT

    def test_metacharacters_stay_single_argument(self, mock_subprocess_run: MagicMock) -> None:
        """A domain with shell metacharacters is one argv element."""
        CommandRunner().run("Request", "openssl", "-subj", "/CN=a.com; rm -rf /")
        assert mock_subprocess_run.call_args[0][0][-1] == "/CN=a.com; rm -rf /"

    def test_prints_description_and_command_line(
        self, mock_subprocess_run: MagicMock, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Description and quoted command line are echoed before running."""
        CommandRunner().run("Generating root private key", "openssl", "-subj", "/CN=*.a.com")

        out = capsys.readouterr().out
        assert "# Generating root private key" in out
        assert "-> openssl -subj '/CN=*.a.com'" in out

    def test_non_zero_exit_raises_with_output(self, mock_subprocess_run: MagicMock) -> None:
        """Failure carries the captured output as detail."""
        mock_subprocess_run.return_value = subprocess.CompletedProcess(
            args=[], returncode=1, stdout="unable to load key\n"
        )

        with pytest.raises(CommandError, match="unable to load key") as exc_info:
            CommandRunner().run("Signing", "openssl", "x509")

        assert exc_info.value.returncode == 1
        assert exc_info.value.description == "Signing"
        assert exc_info.value.argv == ["openssl", "x509"]

    def test_missing_executable_raises_command_error(
        self, mock_subprocess_run: MagicMock
    ) -> None:
        """Launch failures are reported as CommandError."""
        mock_subprocess_run.side_effect = FileNotFoundError(2, "No such file", "openssl")

        with pytest.raises(CommandError) as exc_info:
            CommandRunner().run("Signing", "openssl", "x509")

        assert exc_info.value.returncode is None
        assert "No such file" in exc_info.value.output

    def test_no_retry_on_failure(self, mock_subprocess_run: MagicMock) -> None:
        """A failed command is executed exactly once."""
        mock_subprocess_run.return_value = subprocess.CompletedProcess(
            args=[], returncode=2, stdout=""
        )

        with pytest.raises(CommandError):
            CommandRunner().run("Signing", "openssl")

        mock_subprocess_run.assert_called_once()
