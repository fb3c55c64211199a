"""Shell module for the interactive command interpreter.

Provides the tokenizer and classifier, the built-ins, the process runner
for external programs, and the REPL that drives them.
"""

from __future__ import annotations

from myshell.shell.builtins import is_builtin
from myshell.shell.commands import (
    Command,
    EchoCommand,
    ExitCommand,
    ExternalCommand,
    HistoryCommand,
)
from myshell.shell.expansion import expand_variables
from myshell.shell.history import HistoryLog
from myshell.shell.interpreter import (
    ExecutionContext,
    Invoker,
    execute_command,
    get_context,
    reset_context,
)
from myshell.shell.parser import classify, parse_line, tokenize
from myshell.shell.process import ProcessRunner
from myshell.shell.repl import REPL, run_command, run_repl, run_script

__all__ = [
    "REPL",
    "Command",
    "EchoCommand",
    "ExitCommand",
    "ExternalCommand",
    "HistoryCommand",
    "ExecutionContext",
    "HistoryLog",
    "Invoker",
    "ProcessRunner",
    "classify",
    "parse_line",
    "tokenize",
    "expand_variables",
    "execute_command",
    "run_repl",
    "run_command",
    "run_script",
    "get_context",
    "reset_context",
    "is_builtin",
]
