"""Core domain models and interfaces for git-build-source."""

from git_build_source.core.exceptions import (
    CommandExecutionError,
    ConfigurationError,
    GitBuildSourceError,
)
from git_build_source.core.models import (
    Commit,
    CommitFile,
    ConfigMode,
    ErrorCollection,
    RepositoryConfig,
)

__all__ = [
    # Models
    "Commit",
    "CommitFile",
    "ConfigMode",
    "ErrorCollection",
    "RepositoryConfig",
    # Exceptions
    "GitBuildSourceError",
    "ConfigurationError",
    "CommandExecutionError",
]
