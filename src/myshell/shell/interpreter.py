"""Shell interpreter for executing classified commands.

Dispatches each command variant to its built-in or to the process runner,
one command at a time in submission order.
"""

from __future__ import annotations

import logging
import os
from collections import deque
from typing import Any, Deque, Mapping, Optional

from myshell.config import ShellConfig
from myshell.shell.builtins import echo_command, exit_command, history_command
from myshell.shell.commands import (
    Command,
    EchoCommand,
    ExitCommand,
    ExternalCommand,
    HistoryCommand,
)
from myshell.shell.history import HistoryLog
from myshell.shell.parser import parse_line
from myshell.shell.process import ProcessRunner

logger = logging.getLogger(__name__)


def execute_command(command: Command, context: Optional[ExecutionContext] = None) -> Any:
    """Execute a single command.

    Args:
        command: Command variant to execute
        context: Execution context (uses the global context if None)

    Returns:
        Exit status for a foreground external command, None otherwise

    Raises:
        ShellError: If the command fails
        SystemExit: For ``exit``
        TypeError: If ``command`` is not a known variant
    """
    if context is None:
        context = get_context()

    if isinstance(command, ExitCommand):
        return exit_command()
    if isinstance(command, HistoryCommand):
        return history_command(context.history)
    if isinstance(command, EchoCommand):
        return echo_command(command.args, context.environ)
    if isinstance(command, ExternalCommand):
        return context.runner.run(command.args, background=command.background)

    raise TypeError(f"Unknown command type: {type(command).__name__}")


class Invoker:
    """Queue of pending commands, executed strictly one at a time."""

    def __init__(self, context: ExecutionContext):
        """Initialize invoker.

        Args:
            context: Context commands are executed in
        """
        self.context = context
        self._queue: Deque[Command] = deque()

    def submit(self, command: Command) -> Any:
        """Queue a command and run everything pending.

        A command is removed from the queue before it runs, so a failure
        never leaves it behind.

        Args:
            command: Command to run

        Returns:
            Result of the last command executed
        """
        self._queue.append(command)
        result = None
        while self._queue:
            result = execute_command(self._queue.popleft(), self.context)
        return result

    def pending(self) -> int:
        """Number of commands waiting to run."""
        return len(self._queue)


class ExecutionContext:
    """Execution context for shell commands.

    Bundles the settings, the variable lookup, the process runner and the
    history log shared by every command of a session.
    """

    def __init__(
        self,
        config: Optional[ShellConfig] = None,
        environ: Optional[Mapping[str, str]] = None
    ):
        """Initialize execution context.

        Args:
            config: Interpreter settings (defaults if None)
            environ: Variable lookup (defaults to ``os.environ``)
        """
        self.config = config or ShellConfig()
        self.environ = os.environ if environ is None else environ
        self.history = HistoryLog(self.config.history_file)
        self.runner = ProcessRunner(
            shell_path=self.config.shell_path,
            environ=self.environ,
            reap_background=self.config.reap_background,
        )
        self.invoker = Invoker(self)

    def parse(self, line: str) -> Command:
        """Classify a line using this context's delimiters and marker."""
        return parse_line(line, self.config.delimiters, self.config.background_marker)

    def execute(self, line: str) -> Any:
        """Classify a line and run it.

        Args:
            line: Input line

        Returns:
            Execution result
        """
        return self.invoker.submit(self.parse(line))


_context: Optional[ExecutionContext] = None


def get_context() -> ExecutionContext:
    """Get or create global execution context."""
    global _context
    if _context is None:
        _context = ExecutionContext()
    return _context


def reset_context(config: Optional[ShellConfig] = None) -> ExecutionContext:
    """Replace the global execution context.

    Args:
        config: Settings for the new context

    Returns:
        The new context
    """
    global _context
    _context = ExecutionContext(config)
    return _context
