"""Git integration module for git-build-source."""

from git_build_source.git.executor import CommandExecutor, SubprocessCommandExecutor
from git_build_source.git.url_resolver import (
    WebURLResolver,
    is_hierarchical_url,
    normalize_remote_url,
)

__all__ = [
    "CommandExecutor",
    "SubprocessCommandExecutor",
    "WebURLResolver",
    "is_hierarchical_url",
    "normalize_remote_url",
]
