"""Built-in commands for the shell.

Provides exit, myhistory and echo, which run in-process instead of in a
child process.
"""

from __future__ import annotations

import logging
import sys
from typing import Callable, Dict, List, Mapping, Optional, Sequence, TextIO, Type

from myshell.shell.commands import EchoCommand, ExitCommand, HistoryCommand
from myshell.shell.expansion import expand_variables
from myshell.shell.history import HistoryLog

logger = logging.getLogger(__name__)


class BuiltinCommand:
    """A named built-in and the command variant it classifies to."""

    def __init__(self, name: str, description: str, command_cls: Type):
        """Initialize builtin command.

        Args:
            name: Command name as typed
            description: Help text
            command_cls: Variant built for this name
        """
        self.name = name
        self.description = description
        self.command_cls = command_cls


class BuiltinRegistry:
    """Registry of built-in shell commands."""

    def __init__(self):
        """Initialize registry."""
        self.commands: Dict[str, BuiltinCommand] = {}

    def register(self, name: str, description: str, command_cls: Type) -> Callable:
        """Decorator to register a built-in command.

        Args:
            name: Command name
            description: Help text
            command_cls: Variant the classifier builds for this name

        Returns:
            Decorator function
        """
        def decorator(func: Callable) -> Callable:
            self.commands[name] = BuiltinCommand(name, description, command_cls)
            logger.debug(f"Registered builtin: {name}")
            return func
        return decorator

    def get(self, name: str) -> Optional[BuiltinCommand]:
        """Get a built-in command, or None if ``name`` is not one."""
        return self.commands.get(name)

    def list_commands(self) -> List[BuiltinCommand]:
        """List all built-in commands."""
        return list(self.commands.values())


_registry = BuiltinRegistry()


def get_registry() -> BuiltinRegistry:
    """Get the global builtin registry."""
    return _registry


@_registry.register("exit", "Exit the shell", ExitCommand)
def exit_command() -> None:
    """Exit the shell.

    Raises:
        SystemExit: Always, with status 0
    """
    logger.info("Exiting shell...")
    raise SystemExit(0)


@_registry.register("myhistory", "Show previously entered lines", HistoryCommand)
def history_command(history: HistoryLog, out: Optional[TextIO] = None) -> None:
    """Print the history log as ``<n>. <line>``, numbered from 1.

    An unreadable or missing log prints nothing.

    Args:
        history: Persisted history log
        out: Output stream (defaults to stdout)
    """
    out = out or sys.stdout
    for i, line in enumerate(history.entries(), 1):
        out.write(f"{i}. {line}\n")


@_registry.register("echo", "Print arguments with $NAME and ${NAME} expanded", EchoCommand)
def echo_command(
    args: Sequence[str],
    environ: Optional[Mapping[str, str]] = None,
    out: Optional[TextIO] = None
) -> None:
    """Print every argument after the command name followed by a space.

    Args:
        args: Full token sequence, command name first
        environ: Variable lookup (defaults to ``os.environ``)
        out: Output stream (defaults to stdout)
    """
    out = out or sys.stdout
    out.write(''.join(expand_variables(arg, environ) + ' ' for arg in args[1:]))
    out.write('\n')


def is_builtin(command: str) -> bool:
    """Check if a command name is a built-in."""
    return _registry.get(command) is not None
