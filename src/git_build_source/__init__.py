"""GitHub build-source configuration for CI servers."""

__version__ = "0.1.0"
