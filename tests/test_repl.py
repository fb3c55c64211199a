"""Tests for the read loop and non-interactive runners."""

import pytest

from myshell.config import ShellConfig
from myshell.errors import ShellError
from myshell.shell.interpreter import ExecutionContext
from myshell.shell.repl import REPL, run_command, run_script


def feed(monkeypatch, lines):
    """Make input() return ``lines`` then signal end of input."""
    remaining = list(lines)

    def fake_input(prompt=""):
        if not remaining:
            raise EOFError
        return remaining.pop(0)

    monkeypatch.setattr("builtins.input", fake_input)


@pytest.fixture
def context(tmp_path):
    config = ShellConfig(history_file=tmp_path / "history.txt")
    return ExecutionContext(config, environ={"NAME": "bob"})


class TestREPL:
    """Test the interactive loop."""

    def test_records_and_lists_history(self, monkeypatch, capsys, context):
        """Test that lines are logged and myhistory lists them."""
        feed(monkeypatch, ["echo hi $NAME", "", "myhistory"])

        status = REPL(context).run()

        out = capsys.readouterr().out
        assert status == 0
        assert "hi bob \n" in out
        assert "1. echo hi $NAME\n2. myhistory\n" in out
        assert context.history.entries() == ["echo hi $NAME", "myhistory"]

    def test_exit_ends_loop(self, monkeypatch, capsys, context):
        """Test that exit stops reading and is itself logged."""
        feed(monkeypatch, ["exit", "echo never"])

        status = REPL(context).run()

        assert status == 0
        assert "never" not in capsys.readouterr().out
        assert context.history.entries() == ["exit"]

    def test_errors_are_reported_and_loop_continues(self, monkeypatch, capsys, tmp_path):
        """Test single-line diagnostics on stderr."""
        config = ShellConfig(
            history_file=tmp_path / "history.txt",
            shell_path=str(tmp_path / "no-shell"),
        )
        context = ExecutionContext(config, environ={})
        feed(monkeypatch, ["&", "myshell-no-such-program-xyz", "echo still here"])

        REPL(context).run()

        captured = capsys.readouterr()
        assert captured.err.splitlines() == [
            "Error: empty input",
            "Error: Command not found: myshell-no-such-program-xyz",
        ]
        assert "still here \n" in captured.out

    def test_failing_command_still_logged(self, monkeypatch, capsys, tmp_path):
        """Test that a line is logged before it runs."""
        config = ShellConfig(
            history_file=tmp_path / "history.txt",
            shell_path=str(tmp_path / "no-shell"),
        )
        context = ExecutionContext(config, environ={})
        feed(monkeypatch, ["myshell-no-such-program-xyz", "myhistory"])

        REPL(context).run()

        captured = capsys.readouterr()
        assert "Error: Command not found" in captured.err
        assert captured.out.endswith("1. myshell-no-such-program-xyz\n2. myhistory\n")

    def test_unclassifiable_line_not_logged(self, monkeypatch, context):
        """Test that only classified lines reach the log."""
        feed(monkeypatch, ["&", "echo ok"])
        REPL(context).run()
        assert context.history.entries() == ["echo ok"]

    def test_prompt_from_config(self, context):
        """Test the configured prompt."""
        assert REPL(context).prompt == "myshell> "
        assert REPL(context, prompt="$ ").prompt == "$ "


class TestRunCommand:
    """Test one-shot execution."""

    def test_does_not_touch_history(self, capsys, context):
        """Test that run_command leaves the log alone."""
        run_command("echo $NAME", context)
        assert capsys.readouterr().out == "bob \n"
        assert context.history.entries() == []

    def test_errors_propagate(self, context):
        """Test that failures reach the caller."""
        with pytest.raises(ShellError):
            run_command("&", context)


class TestRunScript:
    """Test script execution."""

    def test_skips_comments_and_blank_lines(self, tmp_path, capsys, context):
        """Test running a script file."""
        script = tmp_path / "script.txt"
        script.write_text("# greeting\n\necho a\necho $NAME\n")

        run_script(script, context)

        assert capsys.readouterr().out == "a \nbob \n"

    def test_stops_at_first_failure(self, tmp_path, capsys, context):
        """Test that the failing line number is reported."""
        script = tmp_path / "script.txt"
        script.write_text("echo a\n&\necho b\n")

        with pytest.raises(ShellError):
            run_script(script, context)

        captured = capsys.readouterr()
        assert captured.out == "a \n"
        assert "Error on line 2: empty input" in captured.err
