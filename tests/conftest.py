"""Pytest configuration and fixtures."""

import pytest

from git_build_source.config.store import BuildConfiguration
from git_build_source.core.models.repository import RepositoryConfig


@pytest.fixture
def repository_config() -> RepositoryConfig:
    """Create an empty repository configuration."""
    return RepositoryConfig()


@pytest.fixture
def github_repository_config() -> RepositoryConfig:
    """Create a repository configuration pointing at a GitHub web URL."""
    config = RepositoryConfig()
    config.set_web_repository_url("https://github.com/andypols/git-bamboo-plugin")
    return config


@pytest.fixture
def build_configuration() -> BuildConfiguration:
    """Create an empty pending build configuration."""
    return BuildConfiguration()
