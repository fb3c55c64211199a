"""Child process execution for external commands.

Spawns the program as typed, waits for it unless it runs in the background,
and falls back to the general-purpose shell when direct execution fails.
"""

from __future__ import annotations

import errno
import logging
import os
import subprocess
import sys
from typing import List, Mapping, Optional, Sequence, TextIO

from myshell.errors import EmptyInput, ProcessCreationFailed, ProgramNotFound
from myshell.shell.expansion import expand_variables

logger = logging.getLogger(__name__)

DEFAULT_SHELL = "/bin/sh"

# Direct attempt plus one delegation to the shell.
MAX_ATTEMPTS = 2

EXEC_FAILURE_ERRNOS = {
    errno.ENOENT,
    errno.EACCES,
    errno.ENOEXEC,
    errno.ENOTDIR,
    errno.EPERM,
}


class ProcessRunner:
    """Runs external commands in child processes.

    Background children are tracked and reaped on later runs when
    ``reap_background`` is set; otherwise they are left to the OS.
    """

    def __init__(
        self,
        shell_path: str = DEFAULT_SHELL,
        environ: Optional[Mapping[str, str]] = None,
        reap_background: bool = True,
        out: Optional[TextIO] = None
    ):
        """Initialize process runner.

        Args:
            shell_path: Interpreter used for the ``-c`` fallback
            environ: Variable lookup for the fallback (defaults to ``os.environ``)
            reap_background: Track and reap background children
            out: Stream for fallback output (defaults to stdout)
        """
        self.shell_path = shell_path
        self.environ = os.environ if environ is None else environ
        self.reap_background = reap_background
        self.out = out
        self._background: List[subprocess.Popen] = []

    def run(self, args: Sequence[str], background: bool = False) -> Optional[int]:
        """Run a program.

        Args:
            args: Program name or path followed by its arguments
            background: Return right after the child is created

        Returns:
            Exit status of a foreground child, None otherwise

        Raises:
            EmptyInput: If ``args`` is empty
            ProcessCreationFailed: If the child could not be created
            ProgramNotFound: If the shell fallback could not be executed either
        """
        if not args:
            raise EmptyInput()
        if self.reap_background:
            self.reap()

        argv = list(args)
        for attempt in range(MAX_ATTEMPTS):
            try:
                process = self._spawn(argv)
            except ValueError as e:
                # words the OS cannot take, e.g. an embedded NUL
                raise ProgramNotFound(args[0]) from e
            except OSError as e:
                if e.errno not in EXEC_FAILURE_ERRNOS:
                    raise ProcessCreationFailed() from e
                if attempt + 1 == MAX_ATTEMPTS:
                    raise ProgramNotFound(args[0]) from e

                logger.debug(f"Direct execution of {argv[0]!r} failed: {e}")
                if self._print_variable(args[0]):
                    return None
                argv = [self.shell_path, "-c", self._strip_dollar(args[0])]
                continue

            return self._finish(process, background)

        # unreachable: the last attempt either returns or raises
        raise ProgramNotFound(args[0])

    def _spawn(self, argv: List[str]) -> subprocess.Popen:
        """Create the child; output written so far is flushed first."""
        sys.stdout.flush()
        if self.out is not None:
            self.out.flush()
        process = subprocess.Popen(argv)
        logger.debug(f"Started {argv[0]!r} as pid {process.pid}")
        return process

    def _finish(self, process: subprocess.Popen, background: bool) -> Optional[int]:
        if background:
            if self.reap_background:
                self._background.append(process)
            logger.debug(f"pid {process.pid} running in background")
            return None

        status = process.wait()
        logger.debug(f"pid {process.pid} exited with status {status}")
        return status

    def _print_variable(self, name: str) -> bool:
        """Print the value ``name`` refers to, if it names a variable.

        The word is looked up as a variable name first. Failing that, a word
        of the form ``$NAME`` is expanded when ``NAME`` is set.

        Returns:
            True if something was printed
        """
        value = self.environ.get(name)
        if value is None and name.startswith('$') and self._strip_dollar(name) in self.environ:
            value = expand_variables(name, self.environ)
        if value is None:
            return False

        out = self.out or sys.stdout
        out.write(value + '\n')
        return True

    @staticmethod
    def _strip_dollar(word: str) -> str:
        return word[1:] if word.startswith('$') else word

    def reap(self) -> int:
        """Collect background children that have finished.

        Returns:
            Number of children still running
        """
        running = []
        for process in self._background:
            status = process.poll()
            if status is None:
                running.append(process)
            else:
                logger.debug(f"Reaped background pid {process.pid} (status {status})")
        self._background = running
        return len(running)

    @property
    def background_processes(self) -> List[subprocess.Popen]:
        """Background children not yet reaped."""
        return list(self._background)
