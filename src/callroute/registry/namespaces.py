# Copyright (c) 2025 - 2026, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Namespace alias registry.

Maps a short alias (the first attribute of a call chain) to the suffix
appended to a module name when building dispatch signatures:

    module="foo", alias="module" -> suffix "Module" -> "fooModule.bar"
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

from callroute.errors import ReservedNameError, ValidationError

logger = logging.getLogger(__name__)

__all__ = (
    "DEFAULT_NAMESPACES",
    "RESERVED_NAMES",
    "NamespaceRegistry",
    "validate_namespace",
)

DEFAULT_NAMESPACES: dict[str, str] = {
    "controller": "Controller",
    "model": "Model",
    "module": "Module",
}

# Names with special meaning in a call chain; never usable as custom aliases.
RESERVED_NAMES: frozenset[str] = frozenset({"session", "data", "http", "component"})


def validate_namespace(
    alias: str, suffix: str, reserved: frozenset[str] = RESERVED_NAMES
) -> None:
    """Check one alias -> suffix entry.

    Raises:
        ValidationError: If alias or suffix is not a non-empty string,
            or alias is not a public identifier.
        ReservedNameError: If alias is in reserved.
    """
    if not isinstance(alias, str) or not alias:
        raise ValidationError(
            "Namespace alias must be a non-empty string",
            details={"alias": alias},
        )
    if not isinstance(suffix, str) or not suffix:
        raise ValidationError(
            f"Namespace suffix for '{alias}' must be a non-empty string",
            details={"alias": alias, "suffix": suffix},
        )
    if alias in reserved:
        raise ReservedNameError(
            f"Namespace alias '{alias}' is reserved",
            details={"alias": alias, "reserved": sorted(reserved)},
        )
    if not alias.isidentifier() or alias.startswith("_"):
        raise ValidationError(
            f"Namespace alias '{alias}' must be a public identifier",
            details={"alias": alias},
        )


class NamespaceRegistry:
    """Map namespace aliases to signature suffixes.

    Default aliases are registered at construction and, together with
    RESERVED_NAMES, can never be remapped or removed.

    Example:
        registry = NamespaceRegistry()
        registry.register("service", "Service")
        registry.resolve("service")   # "Service"
        registry.resolve("missing")   # None
    """

    def __init__(self, defaults: Mapping[str, str] | None = None):
        """Initialize with default aliases (controller/model/module if None)."""
        defaults = DEFAULT_NAMESPACES if defaults is None else defaults
        self._suffixes: dict[str, str] = dict(defaults)
        self._reserved: frozenset[str] = RESERVED_NAMES | frozenset(defaults)

    @property
    def reserved(self) -> frozenset[str]:
        """Aliases that cannot be registered or removed."""
        return self._reserved

    def register(self, alias: str, suffix: str) -> None:
        """Register (or overwrite) a custom alias.

        Args:
            alias: Attribute name used as first step of a chain.
            suffix: String appended to module names in this namespace.

        Raises:
            ValidationError: If alias or suffix is not a non-empty string,
                or alias is not a public identifier.
            ReservedNameError: If alias is reserved.
        """
        validate_namespace(alias, suffix, self._reserved)
        self._suffixes[alias] = suffix
        logger.debug(f"Registered namespace '{alias}' -> '{suffix}'")

    def update(self, aliases: Mapping[str, str] | Iterable[tuple[str, str]]) -> None:
        """Register several aliases; stops at the first invalid one."""
        items = aliases.items() if isinstance(aliases, Mapping) else aliases
        for alias, suffix in items:
            self.register(alias, suffix)

    def resolve(self, alias: str) -> str | None:
        """Return registered suffix, or None if alias is unknown."""
        return self._suffixes.get(alias)

    def unregister(self, alias: str) -> bool:
        """Remove custom alias. Returns True if it existed.

        Raises:
            ReservedNameError: If alias is reserved.
        """
        if alias in self._reserved:
            raise ReservedNameError(
                f"Namespace alias '{alias}' is reserved",
                details={"alias": alias},
            )
        if alias in self._suffixes:
            del self._suffixes[alias]
            logger.debug(f"Unregistered namespace '{alias}'")
            return True
        return False

    def has(self, alias: str) -> bool:
        return alias in self._suffixes

    def list_names(self) -> list[str]:
        """Return all registered aliases."""
        return list(self._suffixes.keys())

    def __contains__(self, alias: str) -> bool:
        return alias in self._suffixes

    def __len__(self) -> int:
        return len(self._suffixes)

    def __repr__(self) -> str:
        return f"NamespaceRegistry(namespaces={self.list_names()})"
