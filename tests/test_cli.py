"""Tests for the command-line entry point."""

from myshell.cli import main


class TestMain:
    """Test CLI modes."""

    def test_command(self, tmp_path, capsys, monkeypatch):
        """Test -c with a built-in."""
        monkeypatch.setenv("MYSHELL_CLI_VAR", "ok")
        status = main(["-c", "echo $MYSHELL_CLI_VAR", "--history-file", str(tmp_path / "h")])
        assert status == 0
        assert capsys.readouterr().out == "ok \n"
        assert not (tmp_path / "h").exists()

    def test_command_failure(self, capsys):
        """Test that a failing -c command exits with 1."""
        status = main(["-c", "&"])
        assert status == 1
        assert capsys.readouterr().err == "Error: empty input\n"

    def test_command_with_nul_byte(self, capsys):
        """Test that an unrunnable word is one diagnostic line, not a traceback."""
        status = main(["-c", "ls\x00x"])
        assert status == 1
        assert capsys.readouterr().err == "Error: Command not found: ls\x00x\n"

    def test_command_exit(self):
        """Test that exit from -c returns its status."""
        assert main(["-c", "exit"]) == 0

    def test_script(self, tmp_path, capsys):
        """Test --script."""
        script = tmp_path / "s.txt"
        script.write_text("echo one\necho two\n")
        assert main(["--script", str(script)]) == 0
        assert capsys.readouterr().out == "one \ntwo \n"

    def test_missing_script(self, tmp_path):
        """Test an unreadable script."""
        assert main(["--script", str(tmp_path / "absent.txt")]) == 1

    def test_missing_config(self, tmp_path):
        """Test an explicit config that does not exist."""
        assert main(["--config", str(tmp_path / "absent.yaml"), "-c", "echo"]) == 1

    def test_config_not_a_mapping(self, tmp_path):
        """Test a YAML file whose top level is a list."""
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n")
        assert main(["--config", str(path), "-c", "echo"]) == 1

    def test_interactive(self, tmp_path, capsys, monkeypatch):
        """Test the default REPL mode."""
        lines = ["echo hi", "exit"]
        monkeypatch.setattr("builtins.input", lambda prompt="": lines.pop(0))

        status = main(["--history-file", str(tmp_path / "h.txt")])

        assert status == 0
        assert "hi \n" in capsys.readouterr().out
        assert (tmp_path / "h.txt").read_text() == "echo hi\nexit\n"

    def test_list_builtins(self, capsys):
        """Test --list-builtins."""
        assert main(["--list-builtins"]) == 0
        out = capsys.readouterr().out
        for name in ("exit", "myhistory", "echo"):
            assert name in out
