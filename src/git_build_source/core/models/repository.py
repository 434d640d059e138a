"""Repository configuration models."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, TypeVar

import structlog
from pydantic import BaseModel, ConfigDict, field_validator

from git_build_source.core.exceptions import ConfigurationError
from git_build_source.git.url_resolver import WebURLResolver, is_hierarchical_url

if TYPE_CHECKING:
    from git_build_source.config.store import ConfigurationStore
    from git_build_source.core.models.commit import Commit, CommitFile
    from git_build_source.core.models.errors import ErrorCollection

logger = structlog.get_logger(__name__)

StoreT = TypeVar("StoreT", bound="ConfigurationStore")

REPO_PREFIX = "repository.github."

GIT_REPO_URL = REPO_PREFIX + "repositoryUrl"
GIT_BRANCH = REPO_PREFIX + "branch"
WEB_REPO_URL = REPO_PREFIX + "webRepositoryUrl"

DEFAULT_BRANCH = "master"
GITHUB_HOST = "github.com"
UNKNOWN_HOST = "unknown-host"
UNKNOWN_REVISION = "UNKNOWN"

MISSING_REPOSITORY_MESSAGE = "Please specify where the repository is located"
MISSING_BRANCH_MESSAGE = "Please specify which branch you want to build"
INVALID_URL_MESSAGE = "This is not a valid url"


class ConfigMode(str, Enum):
    """Which group of settings an operation reads, writes or validates."""

    REPOSITORY = "repository"
    WEB_REPOSITORY = "web_repository"


def _as_mode(mode: ConfigMode | str) -> ConfigMode:
    """Accept a ConfigMode, its value ("repository") or its name ("REPOSITORY")."""
    try:
        return ConfigMode(mode)
    except ValueError:
        pass
    try:
        return ConfigMode[mode]
    except (KeyError, TypeError) as exc:
        raise ConfigurationError(f"Unknown configuration mode: {mode!r}") from exc


class RepositoryConfig(BaseModel):
    """Configuration for a GitHub repository used as a build source.

    The clone URL and branch form the REPOSITORY settings; the browsing URL
    used to link commits and files forms the WEB_REPOSITORY settings.
    """

    model_config = ConfigDict(validate_assignment=True)

    repository_url: str = ""
    branch: str | None = None
    web_repository_url: str = ""

    @field_validator("repository_url", "web_repository_url", mode="before")
    @classmethod
    def trim_url(cls, value: str | None) -> str:
        # None is stored as an empty string
        if value is None:
            return ""
        return value.strip()

    # --- Persistence ---

    def populate_from_config(self, config: ConfigurationStore, mode: ConfigMode) -> None:
        """Load the settings for ``mode`` from a persisted store."""
        mode = _as_mode(mode)
        if mode is ConfigMode.REPOSITORY:
            self._populate_repository(config)
        elif mode is ConfigMode.WEB_REPOSITORY:
            self._populate_web_repository(config)
        logger.debug("Repository config populated", mode=mode.value)

    def _populate_repository(self, config: ConfigurationStore) -> None:
        self.repository_url = config.get(GIT_REPO_URL)
        self.branch = config.get(GIT_BRANCH)

    def _populate_web_repository(self, config: ConfigurationStore) -> None:
        self.web_repository_url = config.get(WEB_REPO_URL)

    def to_configuration(self, configuration: StoreT, mode: ConfigMode) -> StoreT:
        """Write the settings for ``mode`` into ``configuration`` and return it."""
        mode = _as_mode(mode)
        if mode is ConfigMode.REPOSITORY:
            configuration.set(GIT_REPO_URL, self.repository_url)
            configuration.set(GIT_BRANCH, self.branch)
        elif mode is ConfigMode.WEB_REPOSITORY:
            configuration.set(WEB_REPO_URL, self.web_repository_url)
        return configuration

    # --- Accessors ---

    def set_repository_url(self, repository_url: str | None) -> None:
        self.repository_url = repository_url

    def set_branch(self, branch: str | None) -> None:
        self.branch = branch

    def set_web_repository_url(self, web_repository_url: str | None) -> None:
        self.web_repository_url = web_repository_url

    @property
    def host(self) -> str:
        if not self.repository_url:
            return UNKNOWN_HOST
        return GITHUB_HOST

    def get_host(self) -> str:
        return self.host

    def has_web_based_repository_access(self) -> bool:
        url = self.web_repository_url
        return bool(url and url.strip()) and GITHUB_HOST in url

    # --- Validation ---

    def validate(
        self,
        errors: ErrorCollection,
        pending: ConfigurationStore,
        mode: ConfigMode,
    ) -> ErrorCollection:
        """Check the pending (uncommitted) configuration for ``mode``.

        Problems are added to ``errors`` keyed by configuration key; nothing
        is raised for bad input.
        """
        mode = _as_mode(mode)
        errors_before = errors.total_errors
        if mode is ConfigMode.REPOSITORY:
            self._validate_mandatory_field(pending, errors, GIT_REPO_URL, MISSING_REPOSITORY_MESSAGE)
            self._validate_mandatory_field(pending, errors, GIT_BRANCH, MISSING_BRANCH_MESSAGE)
        elif mode is ConfigMode.WEB_REPOSITORY:
            web_repo_url = (pending.get(WEB_REPO_URL) or "").strip()
            if web_repo_url and not is_hierarchical_url(web_repo_url):
                errors.add_error(WEB_REPO_URL, INVALID_URL_MESSAGE)

        if errors.total_errors > errors_before:
            logger.debug(
                "Repository config validation failed",
                mode=mode.value,
                fields=sorted(errors.field_errors),
            )
        return errors

    @staticmethod
    def _validate_mandatory_field(
        pending: ConfigurationStore,
        errors: ErrorCollection,
        field_key: str,
        message: str,
    ) -> None:
        if not pending.get(field_key):
            errors.add_error(field_key, message)

    def add_default_values(
        self,
        pending: ConfigurationStore,
        mode: ConfigMode,
        default_branch: str = DEFAULT_BRANCH,
    ) -> None:
        """Fill in defaults for a new build plan without overwriting input."""
        if _as_mode(mode) is ConfigMode.REPOSITORY and not pending.get(GIT_BRANCH):
            pending.set(GIT_BRANCH, default_branch)

    # --- Web links ---

    @property
    def _links(self) -> WebURLResolver:
        return WebURLResolver(self.web_repository_url)

    def get_web_repository_url_for_file(self, file: CommitFile) -> str:
        return self._links.blob(file.revision, file.name)

    def get_web_repository_url_for_commit(self, commit: Commit) -> str:
        return self._links.commit(commit.first_revision or UNKNOWN_REVISION)

    def get_web_repository_url_for_revision(self, file: CommitFile) -> str:
        return self.get_web_repository_url_for_file(file)

    def get_web_repository_url_for_diff(self, file: CommitFile) -> str:
        # File order within the commit is unknown here, so no diff-<n> anchor
        return self._links.commit(file.revision)
