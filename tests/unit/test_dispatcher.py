"""Unit tests for argument handling and process replacement."""

import errno
from unittest.mock import patch

import pytest

from rubyexec.dispatcher import build_argv, dispatch, exec_target, parse_args
from rubyexec.errors import (
    ExecError,
    InvalidSpecError,
    UnsupportedImplementationError,
    UsageError,
)
from rubyexec.runtime import TargetInfo


class ProcessReplaced(Exception):
    """Raised by the patched os.execv in place of never returning."""


class TestParseArgs:
    """Test launcher command line parsing."""

    @pytest.mark.parametrize("argv", [[], ["rubyexec"]])
    def test_too_few_arguments(self, argv):
        with pytest.raises(UsageError, match="Invalid number of arguments.") as exc_info:
            parse_args(argv)

        assert exc_info.value.exit_code == 2

    @pytest.mark.parametrize("flag", ["-h", "--help"])
    def test_help(self, flag):
        """Help prints usage with the invoked program name."""
        with pytest.raises(UsageError) as exc_info:
            parse_args(["/usr/bin/rubyexec", flag, "ruby31"])

        assert str(exc_info.value) == "Usage: /usr/bin/rubyexec impl,... [args]"
        assert exc_info.value.exit_code == 2

    def test_help_only_recognized_as_spec_argument(self):
        """-h later on the command line belongs to the script."""
        invocation = parse_args(["rubyexec", "ruby31", "-h"])
        assert invocation.forwarded == ["-h"]

    def test_parses_request_and_forwarded(self):
        invocation = parse_args(["rubyexec", "ruby27,--autopick,ruby31", "script.rb", "--verbose"])

        assert invocation.program == "rubyexec"
        assert invocation.request.implementations == ("ruby27", "ruby31")
        assert invocation.request.autopick is True
        assert invocation.forwarded == ["script.rb", "--verbose"]

    def test_invalid_spec(self):
        with pytest.raises(InvalidSpecError) as exc_info:
            parse_args(["rubyexec", "perl5", "script.rb"])

        assert exc_info.value.exit_code == 1


class TestBuildArgv:
    """Test argument vector reconstruction."""

    def test_target_path_replaces_program_and_spec(self, tmp_path):
        target = TargetInfo("ruby31", tmp_path / "ruby31", "selected")

        argv = build_argv(target, ["script.rb"])

        assert argv == [str(tmp_path / "ruby31"), "script.rb"]

    def test_forwards_arguments_verbatim(self, tmp_path):
        """Order and content of forwarded arguments are preserved exactly."""
        forwarded = ["-e", "puts 1", "", "a  b", "--autopick", "ruby27,ruby31", "ünïcode"]
        target = TargetInfo("ruby31", tmp_path / "ruby31", "selected")

        argv = build_argv(target, forwarded)

        assert argv[1:] == forwarded


class TestExecTarget:
    """Test process replacement."""

    def test_calls_execv(self, tmp_path):
        target = TargetInfo("ruby31", tmp_path / "ruby31", "selected")
        argv = [str(target.path), "script.rb"]

        with patch("os.execv", side_effect=ProcessReplaced) as mock_execv:
            with pytest.raises(ProcessReplaced):
                exec_target(target, argv)

        mock_execv.assert_called_once_with(str(target.path), argv)

    def test_exec_failure(self, tmp_path):
        """Should report the target and the OS error."""
        target = TargetInfo("ruby31", tmp_path / "ruby31", "selected")
        failure = PermissionError(errno.EACCES, "Permission denied")

        with patch("os.execv", side_effect=failure):
            with pytest.raises(ExecError) as exc_info:
                exec_target(target, [str(target.path)])

        assert str(exc_info.value) == f"{target.path} failed to execute: Permission denied"
        assert exc_info.value.errno == errno.EACCES
        assert exc_info.value.exit_code == 1


class TestDispatch:
    """End-to-end selection with process replacement patched out."""

    def test_runs_current_selection(self, launcher_dir, launcher_path, select_ruby):
        """`launcher ruby27,ruby31 script.rb` with ruby -> ruby31."""
        select_ruby("ruby31")
        expected = str(launcher_dir.resolve() / "ruby31")

        with patch("os.execv", side_effect=ProcessReplaced) as mock_execv:
            with pytest.raises(ProcessReplaced):
                dispatch([str(launcher_path), "ruby27,ruby31", "script.rb"])

        mock_execv.assert_called_once_with(expected, [expected, "script.rb"])

    def test_autopicks_installed_implementation(self, launcher_dir, launcher_path, select_ruby, install_ruby):
        """`launcher ruby27,--autopick,ruby31` with ruby -> ruby26, only ruby31 installed."""
        select_ruby("ruby26")
        install_ruby("ruby31")
        expected = str(launcher_dir.resolve() / "ruby31")

        with patch("os.execv", side_effect=ProcessReplaced) as mock_execv:
            with pytest.raises(ProcessReplaced):
                dispatch([str(launcher_path), "ruby27,--autopick,ruby31"])

        mock_execv.assert_called_once_with(expected, [expected])

    def test_unsupported_never_execs(self, launcher_path, select_ruby, install_ruby):
        select_ruby("ruby26")
        install_ruby("ruby31")

        with patch("os.execv") as mock_execv:
            with pytest.raises(UnsupportedImplementationError):
                dispatch([str(launcher_path), "ruby27,ruby31", "script.rb"])

        mock_execv.assert_not_called()

    def test_dry_run_prints_command(self, launcher_dir, launcher_path, select_ruby, capsys):
        """Dry run prints the quoted command and does not exec."""
        select_ruby("ruby31")

        with patch("os.execv") as mock_execv:
            status = dispatch([str(launcher_path), "ruby31", "my script.rb"], dry_run=True)

        assert status == 0
        mock_execv.assert_not_called()
        out = capsys.readouterr().out
        assert str(launcher_dir.resolve() / "ruby31") in out
        assert "'my script.rb'" in out
