"""REPL (Read-Eval-Print Loop) for the interactive shell.

Reads one line at a time, records it in the history log and hands it to
the interpreter.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any, Optional

from myshell.errors import ShellError
from myshell.shell.interpreter import ExecutionContext

logger = logging.getLogger(__name__)

try:
    import readline
    HAS_READLINE = True
except ImportError:
    HAS_READLINE = False
    logger.debug("readline not available - line editing disabled")


def report_error(error: Exception) -> None:
    """Write a one-line diagnostic to stderr."""
    print(f"Error: {error}", file=sys.stderr)


class REPL:
    """Read-Eval-Print Loop for interactive shell."""

    def __init__(self, context: Optional[ExecutionContext] = None, prompt: Optional[str] = None):
        """Initialize REPL.

        Args:
            context: Execution context (creates new if None)
            prompt: Command prompt string (defaults to the configured prompt)
        """
        self.context = context or ExecutionContext()
        self.prompt = prompt if prompt is not None else self.context.config.prompt
        self.running = False

        if HAS_READLINE:
            self._setup_readline()

    def _setup_readline(self) -> None:
        """Preload line editing history from the history log."""
        readline.clear_history()
        for entry in self.context.history.entries():
            readline.add_history(entry)

    def run(self) -> int:
        """Run the REPL loop.

        Returns:
            Exit status
        """
        self.running = True
        status = 0
        while self.running:
            try:
                line = input(self.prompt)
            except EOFError:
                # Ctrl+D
                print()
                break
            except KeyboardInterrupt:
                # Ctrl+C
                print()
                continue

            try:
                self._execute_line(line)
            except SystemExit as e:
                status = e.code if isinstance(e.code, int) else 0
                break
            except KeyboardInterrupt:
                print()
        self.running = False
        return status

    def _execute_line(self, line: str) -> None:
        """Execute a single line of input.

        Blank lines are ignored. The line is added to the history log once
        it has been classified, before it runs.

        Args:
            line: Input line
        """
        if not line.strip():
            return

        try:
            command = self.context.parse(line)
            # Logged before it runs: myhistory lists itself, and exit or a
            # failing command still leaves an entry.
            self._record(line)
            self.context.invoker.submit(command)
        except ShellError as e:
            logger.debug(f"Command failed: {e}")
            report_error(e)
        except Exception as e:
            logger.debug("Unexpected failure", exc_info=True)
            report_error(e)

    def _record(self, line: str) -> None:
        try:
            self.context.history.append(line)
        except OSError as e:
            logger.warning(f"Could not write history log: {e}")


def run_repl(context: Optional[ExecutionContext] = None) -> int:
    """Run interactive REPL.

    Args:
        context: Optional execution context

    Returns:
        Exit status
    """
    repl = REPL(context=context)
    return repl.run()


def run_command(command: str, context: Optional[ExecutionContext] = None) -> Any:
    """Run a single command non-interactively.

    The history log is left untouched.

    Args:
        command: Command line to execute
        context: Optional execution context

    Returns:
        Command result

    Raises:
        ShellError: If the command fails
    """
    if context is None:
        context = ExecutionContext()
    return context.execute(command)


def run_script(script_path: Path, context: Optional[ExecutionContext] = None) -> None:
    """Run commands from a script file.

    Blank lines and lines starting with ``#`` are skipped. Execution stops
    at the first failing line.

    Args:
        script_path: Path to script file
        context: Optional execution context

    Raises:
        ShellError: If a command fails
    """
    if context is None:
        context = ExecutionContext()

    with open(script_path) as f:
        for line_num, line in enumerate(f, 1):
            line = line.rstrip('\n')
            if not line.strip() or line.lstrip().startswith('#'):
                continue

            try:
                logger.debug(f"Executing line {line_num}: {line}")
                run_command(line, context)
            except ShellError as e:
                logger.debug(f"Script stopped at line {line_num}")
                print(f"Error on line {line_num}: {e}", file=sys.stderr)
                raise
