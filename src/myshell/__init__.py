"""myshell - A small interactive command interpreter.

Reads a line, classifies it into a built-in or an external command, and
either runs it in-process or spawns a child process for it, optionally in
the background.

Features:
- Built-ins: exit, myhistory, echo (with $NAME / ${NAME} expansion)
- External programs with foreground or background (&) execution
- Fallback delegation to /bin/sh when direct execution fails
- YAML configuration
"""

__version__ = "1.0.0"
__author__ = "myshell contributors"
__license__ = "MIT"

from myshell.cli import main

__all__ = ["main", "__version__"]
