"""Persisted, append-only log of entered lines."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Union

logger = logging.getLogger(__name__)


class HistoryLog:
    """One line of text per accepted input line, in entry order."""

    def __init__(self, path: Union[str, Path]):
        """Initialize history log.

        Args:
            path: Location of the log file (created on first append)
        """
        self.path = Path(path)

    def append(self, line: str) -> None:
        """Append one entry.

        Args:
            line: Input line as typed
        """
        with open(self.path, 'a') as f:
            f.write(line.rstrip('\n') + '\n')

    def entries(self) -> List[str]:
        """Read all entries.

        Returns:
            Entries in file order, or an empty list if the log cannot be read
        """
        try:
            with open(self.path) as f:
                return [line.rstrip('\n') for line in f]
        except (OSError, UnicodeDecodeError) as e:
            logger.debug(f"History log unavailable: {e}")
            return []
