"""Parser for interpreter input lines.

Splits a line into words and classifies it, e.g. ``sleep 5 &`` becomes
``ExternalCommand(('sleep', '5'), background=True)``. There is no quoting:
a delimiter always splits.
"""

from __future__ import annotations

import logging
from typing import List, Sequence

from myshell.errors import EmptyInput
from myshell.shell.builtins import get_registry
from myshell.shell.commands import (
    Command,
    EchoCommand,
    ExitCommand,
    ExternalCommand,
    HistoryCommand,
)

logger = logging.getLogger(__name__)

DEFAULT_DELIMITERS = " \t"
BACKGROUND_MARKER = "&"


def tokenize(line: str, delimiters: str = DEFAULT_DELIMITERS) -> List[str]:
    """Split a line on any delimiter character, dropping empty words.

    Args:
        line: Raw input line
        delimiters: Characters that separate words

    Returns:
        Words in input order
    """
    tokens = []
    current = []

    for char in line:
        if char in delimiters:
            if current:
                tokens.append(''.join(current))
                current = []
        else:
            current.append(char)

    if current:
        tokens.append(''.join(current))

    return tokens


def classify(tokens: Sequence[str], background_marker: str = BACKGROUND_MARKER) -> Command:
    """Turn a token sequence into a command.

    A trailing background marker is removed and recorded. Built-in names
    always win over programs of the same name.

    Args:
        tokens: Words of one input line
        background_marker: Word that requests background execution

    Returns:
        Command variant

    Raises:
        EmptyInput: If no words remain
    """
    words = list(tokens)
    background = False
    if words and words[-1] == background_marker:
        words.pop()
        background = True

    if not words:
        raise EmptyInput()

    builtin = get_registry().get(words[0])
    command_cls = builtin.command_cls if builtin else None
    if command_cls is ExitCommand or command_cls is HistoryCommand:
        command = command_cls()
    elif command_cls is EchoCommand:
        command = EchoCommand(tuple(words), background=background)
    else:
        command = ExternalCommand(tuple(words), background=background)

    logger.debug(f"Classified {words[0]!r} as {command!r}")
    return command


def parse_line(
    line: str,
    delimiters: str = DEFAULT_DELIMITERS,
    background_marker: str = BACKGROUND_MARKER
) -> Command:
    """Tokenize and classify one input line.

    Convenience function combining tokenize() and classify().

    Args:
        line: Raw input line
        delimiters: Characters that separate words
        background_marker: Word that requests background execution

    Returns:
        Command variant

    Raises:
        EmptyInput: If the line holds no words
    """
    return classify(tokenize(line, delimiters), background_marker)
