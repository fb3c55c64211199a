"""Errors raised by the command interpreter.

Every command-level failure derives from ShellError so the read-loop can
report it as a single diagnostic line and carry on.
"""

from __future__ import annotations


class ShellError(Exception):
    """Base class for command-level failures."""
    pass


class EmptyInput(ShellError):
    """Raised when a line yields no tokens to classify."""

    def __init__(self, message: str = "empty input"):
        super().__init__(message)


class ProcessCreationFailed(ShellError):
    """Raised when the operating system refuses to create a child process."""

    def __init__(self, message: str = "Failed to create child process"):
        super().__init__(message)


class ProgramNotFound(ShellError):
    """Raised when neither direct execution nor the shell fallback could run a program."""

    def __init__(self, program: str):
        self.program = program
        super().__init__(f"Command not found: {program}")


CommandNotFound = ProgramNotFound
