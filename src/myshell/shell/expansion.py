"""Environment variable expansion for command words.

Rewrites ``$NAME`` and ``${NAME}`` references inside a single word.
"""

from __future__ import annotations

import os
import re
from typing import Mapping, Optional

_NAME_PATTERN = re.compile(r"[A-Za-z0-9_]*")


def expand_variables(text: str, environ: Optional[Mapping[str, str]] = None) -> str:
    """Replace variable references in ``text`` with their values.

    The word is scanned from one ``$`` to the next. ``${`` reads up to the
    following ``}``; a bare ``$`` reads identifier characters, and a ``}``
    directly after a bare name is consumed with it. Unset variables expand
    to an empty string. Anything that is not a reference, including an
    empty name or an unterminated ``${``, is copied through unchanged.

    Args:
        text: Word to expand
        environ: Variable lookup (defaults to ``os.environ``)

    Returns:
        Expanded word

    Example:
        >>> expand_variables("hello $NAME!", {"NAME": "bob"})
        'hello bob!'
        >>> expand_variables("hello ${NAME}!", {"NAME": "bob"})
        'hello bob!'
    """
    env = os.environ if environ is None else environ
    result = []
    pos = 0

    while pos < len(text):
        start = text.find('$', pos)
        if start == -1:
            result.append(text[pos:])
            break
        result.append(text[pos:start])

        if text.startswith('{', start + 1):
            end = text.find('}', start + 2)
            if end == -1:
                result.append(text[start:])
                break
            name = text[start + 2:end]
            pos = end + 1
        else:
            name = _NAME_PATTERN.match(text, start + 1).group()
            pos = start + 1 + len(name)
            if text.startswith('}', pos):
                pos += 1

        if name:
            result.append(env.get(name, ''))
        else:
            result.append(text[start:pos])

    return ''.join(result)
