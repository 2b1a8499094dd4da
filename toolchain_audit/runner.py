"""
External command execution.

A missing executable is an expected outcome (the toolchain simply is not
installed) and is reported as ``None``. Everything else that goes wrong while
running a command is raised as ``CommandError``.
"""

from __future__ import annotations

import logging
import os
import subprocess
from typing import Sequence

logger = logging.getLogger(__name__)


class CommandError(Exception):
    """Raised when a command runs but does not complete successfully."""

    def __init__(
        self,
        program: str,
        args: Sequence[str],
        returncode: int | None = None,
        stderr: str = "",
        reason: str = "",
    ):
        self.program = program
        self.args_list = tuple(args)
        self.returncode = returncode
        self.stderr = stderr
        self.reason = reason
        super().__init__(self._describe())

    @property
    def command_line(self) -> str:
        return " ".join((self.program, *self.args_list))

    def _describe(self) -> str:
        if self.reason:
            return f"'{self.command_line}' failed: {self.reason}"
        detail = self.stderr.strip().splitlines()[-1] if self.stderr.strip() else ""
        message = f"'{self.command_line}' exited with status {self.returncode}"
        return f"{message}: {detail}" if detail else message


class CommandRunner:
    """
    Runs external programs with captured output.

    Attributes:
        timeout: Seconds before a command is abandoned, or None to wait
            indefinitely
    """

    def __init__(self, timeout: float | None = None):
        self.timeout = timeout

    def run(self, program: str, args: Sequence[str] = ()) -> str | None:
        """
        Run a command and return its trimmed standard output.

        Args:
            program: Executable name, resolved through PATH
            args: Argument vector

        Returns:
            Decoded, trimmed stdout, or None if the program cannot be found

        Raises:
            CommandError: On non-zero exit, timeout or other OS failure
        """
        argv = [program, *args]
        logger.debug(f"Running: {' '.join(argv)}")
        try:
            proc = subprocess.run(
                argv,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                stdin=subprocess.DEVNULL,
                text=True,
                timeout=self.timeout,
                check=False,
                env={**os.environ, "TERM": "dumb"},
            )
        except (FileNotFoundError, PermissionError, NotADirectoryError) as e:
            logger.debug(f"{program} not available: {e}")
            return None
        except subprocess.TimeoutExpired as e:
            raise CommandError(program, args, reason=f"timed out after {e.timeout}s") from e
        except OSError as e:
            raise CommandError(program, args, reason=str(e)) from e

        if proc.returncode != 0:
            raise CommandError(program, args, returncode=proc.returncode, stderr=proc.stderr or "")

        return (proc.stdout or "").strip()

    def exists(self, program: str) -> bool:
        """Check whether a program can be started via its --version flag."""
        return self.run(program, ("--version",)) is not None
