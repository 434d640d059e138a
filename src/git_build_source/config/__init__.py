"""Settings, logging and configuration stores."""

from git_build_source.config.store import (
    BuildConfiguration,
    ConfigurationStore,
    HierarchicalConfiguration,
)

__all__ = ["BuildConfiguration", "ConfigurationStore", "HierarchicalConfiguration"]
