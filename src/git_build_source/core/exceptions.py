"""Exception hierarchy for git-build-source.

Bad end-user input is never reported through these exceptions; it is
collected in an ErrorCollection instead.
"""

from collections.abc import Sequence


class GitBuildSourceError(Exception):
    """Base exception for all git-build-source errors."""


class ConfigurationError(GitBuildSourceError):
    """Raised when the library itself is misused or misconfigured."""


class CommandExecutionError(GitBuildSourceError, OSError):
    """Raised when an external command cannot be run to completion."""

    def __init__(
        self,
        message: str,
        command_line: Sequence[str] = (),
        returncode: int | None = None,
        stderr: str = "",
    ) -> None:
        super().__init__(message)
        self.command_line = list(command_line)
        self.returncode = returncode
        self.stderr = stderr

    def __str__(self) -> str:
        return self.args[0] if self.args else ""
