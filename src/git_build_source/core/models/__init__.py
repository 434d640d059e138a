"""Domain models for git-build-source."""

from git_build_source.core.models.commit import Commit, CommitFile
from git_build_source.core.models.errors import ErrorCollection
from git_build_source.core.models.repository import (
    DEFAULT_BRANCH,
    GIT_BRANCH,
    GIT_REPO_URL,
    REPO_PREFIX,
    UNKNOWN_HOST,
    WEB_REPO_URL,
    ConfigMode,
    RepositoryConfig,
)

__all__ = [
    "Commit",
    "CommitFile",
    "ErrorCollection",
    "ConfigMode",
    "RepositoryConfig",
    "REPO_PREFIX",
    "GIT_REPO_URL",
    "GIT_BRANCH",
    "WEB_REPO_URL",
    "DEFAULT_BRANCH",
    "UNKNOWN_HOST",
]
