"""External command execution for the git command-line client."""

import subprocess
from abc import ABC, abstractmethod
from collections.abc import Sequence
from pathlib import Path

import structlog

from git_build_source.core.exceptions import CommandExecutionError

logger = structlog.get_logger(__name__)


class CommandExecutor(ABC):
    """Runs a command line in a working directory and returns its stdout."""

    @abstractmethod
    def execute(self, command_line: Sequence[str], working_directory: Path) -> str:
        """Execute ``command_line`` inside ``working_directory``.

        Raises:
            CommandExecutionError: the process could not be started, the
                working directory is invalid, or output could not be captured.
        """


class SubprocessCommandExecutor(CommandExecutor):
    """Executes commands with subprocess, blocking until they exit."""

    def __init__(self, timeout: float | None = None) -> None:
        self._timeout = timeout

    def execute(self, command_line: Sequence[str], working_directory: Path) -> str:
        command = list(command_line)
        if not command:
            raise CommandExecutionError("Empty command line", command_line=command)

        cwd = Path(working_directory)
        if not cwd.is_dir():
            raise CommandExecutionError(
                f"Working directory does not exist: {cwd}", command_line=command
            )

        logger.debug("Executing command", command=command, cwd=str(cwd))
        try:
            result = subprocess.run(
                command,
                cwd=cwd,
                capture_output=True,
                text=True,
                check=True,
                timeout=self._timeout,
            )
        except FileNotFoundError as exc:
            logger.warning("Command not found", command=command)
            raise CommandExecutionError(
                f"Command not found: {command[0]}", command_line=command
            ) from exc
        except subprocess.CalledProcessError as exc:
            logger.warning(
                "Command failed",
                command=command,
                returncode=exc.returncode,
                stderr=exc.stderr,
            )
            raise CommandExecutionError(
                f"Command exited with status {exc.returncode}: {' '.join(command)}",
                command_line=command,
                returncode=exc.returncode,
                stderr=exc.stderr or "",
            ) from exc
        except subprocess.TimeoutExpired as exc:
            logger.warning("Command timed out", command=command, timeout=self._timeout)
            raise CommandExecutionError(
                f"Command timed out after {self._timeout}s: {' '.join(command)}",
                command_line=command,
            ) from exc
        except (OSError, UnicodeDecodeError) as exc:
            raise CommandExecutionError(
                f"Could not run command: {exc}", command_line=command
            ) from exc

        return result.stdout
