"""Hierarchical key-value configuration stores."""

from __future__ import annotations

import copy
from collections.abc import Iterator, Mapping
from typing import Any, Protocol, runtime_checkable

import structlog

logger = structlog.get_logger(__name__)


@runtime_checkable
class ConfigurationStore(Protocol):
    """The narrow view of a configuration store that RepositoryConfig needs."""

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: Any) -> None: ...


class HierarchicalConfiguration:
    """Nested key-value store addressed by dotted keys.

    ``repository.github.branch`` lives under
    ``{"repository": {"github": {"branch": ...}}}``.
    """

    def __init__(self, data: Mapping[str, Any] | None = None) -> None:
        self._root: dict[str, Any] = copy.deepcopy(dict(data)) if data else {}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> HierarchicalConfiguration:
        """Create a store from an already nested mapping."""
        return cls(data)

    @classmethod
    def from_flat(cls, data: Mapping[str, Any]) -> HierarchicalConfiguration:
        """Create a store from a mapping of dotted keys to values."""
        store = cls()
        for key, value in data.items():
            store.set(key, value)
        return store

    @staticmethod
    def _split(key: str) -> list[str]:
        parts = key.split(".")
        if not all(parts):
            raise KeyError(f"Invalid configuration key: {key!r}")
        return parts

    def _node(self, parts: list[str], create: bool) -> dict[str, Any] | None:
        node = self._root
        for part in parts:
            child = node.get(part)
            if not isinstance(child, dict):
                if not create:
                    return None
                # A scalar on the path is replaced by a subtree
                child = {}
                node[part] = child
            node = child
        return node

    def get_property(self, key: str) -> Any:
        """Return the raw value stored under ``key``, or None."""
        *path, leaf = self._split(key)
        node = self._node(path, create=False)
        if node is None:
            return None
        value = node.get(leaf)
        if isinstance(value, dict):
            return None
        return value

    def get(self, key: str) -> str | None:
        value = self.get_property(key)
        if value is None:
            return None
        return str(value)

    def set(self, key: str, value: Any) -> None:
        *path, leaf = self._split(key)
        node = self._node(path, create=True)
        node[leaf] = value
        logger.debug("Configuration property set", key=key)

    # Aliases matching the host configuration API
    get_string = get
    set_property = set

    def contains(self, key: str) -> bool:
        return self.get_property(key) is not None

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.contains(key)

    def keys(self) -> Iterator[str]:
        """Iterate over the dotted keys of every leaf value."""

        def walk(node: dict[str, Any], prefix: str) -> Iterator[str]:
            for name, value in node.items():
                key = f"{prefix}{name}"
                if isinstance(value, dict):
                    yield from walk(value, f"{key}.")
                else:
                    yield key

        return walk(self._root, "")

    def to_dict(self) -> dict[str, Any]:
        return copy.deepcopy(self._root)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HierarchicalConfiguration):
            return NotImplemented
        return self._root == other._root

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._root!r})"


class BuildConfiguration(HierarchicalConfiguration):
    """Pending configuration collected from the build plan form.

    Values here have not been committed yet; validation and default values
    operate on this store before it is copied into the persisted one.
    """

    def commit(
        self, target: HierarchicalConfiguration | None = None
    ) -> HierarchicalConfiguration:
        """Copy every value into ``target`` (a fresh store by default)."""
        if target is None:
            target = HierarchicalConfiguration()
        for key in self.keys():
            target.set(key, self.get_property(key))
        logger.debug("Build configuration committed", keys=len(list(self.keys())))
        return target
