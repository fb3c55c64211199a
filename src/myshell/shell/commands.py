"""Command variants produced by the classifier.

Each variant is constructed from one token sequence, executed once, then
discarded.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Tuple, Union


class _Executable:
    """Mixin giving every variant an ``execute`` shortcut."""

    def execute(self, context: Any = None) -> Any:
        """Execute this command.

        Args:
            context: Execution context (uses the global context if None)

        Returns:
            Command result
        """
        from myshell.shell.interpreter import execute_command
        return execute_command(self, context)


@dataclass(frozen=True)
class ExitCommand(_Executable):
    """Terminate the interpreter with status 0."""


@dataclass(frozen=True)
class HistoryCommand(_Executable):
    """List the persisted history log with 1-based indices."""


@dataclass(frozen=True)
class EchoCommand(_Executable):
    """Print the expanded arguments after the command name."""

    args: Tuple[str, ...]
    background: bool = False

    def __post_init__(self):
        object.__setattr__(self, "args", tuple(self.args))


@dataclass(frozen=True)
class ExternalCommand(_Executable):
    """Run a program in a child process."""

    args: Tuple[str, ...]
    background: bool = False

    def __post_init__(self):
        object.__setattr__(self, "args", tuple(self.args))

    @property
    def program(self) -> str:
        """Program name or path as typed."""
        return self.args[0]


Command = Union[ExitCommand, HistoryCommand, EchoCommand, ExternalCommand]
