# Copyright (c) 2025 - 2026, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""CallContext: namespace registry, backend slots, and config in one value.

A context is built once at process start and handed to every root call
object. Root objects created without an explicit context share the process
default context, configured through the module-level helpers:

    from callroute import context

    context.set_dispatcher(core)
    context.register_namespace("service", "Service")
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from callroute.core.types import Unset
from callroute.errors import CallRouteError
from callroute.registry import (
    DEFAULT_NAMESPACES,
    RESERVED_NAMES,
    BackendRegistry,
    NamespaceRegistry,
    validate_namespace,
)

__all__ = (
    "CallConfig",
    "CallContext",
    "get_default_context",
    "register_namespace",
    "reset_default_context",
    "set_component_provider",
    "set_dispatcher",
    "set_http_client",
    "set_model_provider",
)

HTTP_METHODS: frozenset[str] = frozenset({"get", "post", "put", "delete"})


class CallConfig(BaseModel):
    """Static routing configuration.

    Attributes:
        default_namespaces: Aliases pre-registered (and reserved) in every
            context, read-only. Must include "model".
        http_methods: Verb names reachable as root.http.<verb>.
        session_signature_field: Session field holding "<module>.<method>",
            consulted by the bare root.data shortcut.
    """

    model_config = ConfigDict(frozen=True)

    default_namespaces: Mapping[str, str] = Field(
        default_factory=lambda: dict(DEFAULT_NAMESPACES), validate_default=True
    )
    http_methods: frozenset[str] = Field(default=HTTP_METHODS)
    session_signature_field: str = Field(default="module_call_signature", min_length=1)

    @field_validator("default_namespaces")
    @classmethod
    def _validate_default_namespaces(cls, value: Mapping[str, str]) -> Mapping[str, str]:
        for alias, suffix in value.items():
            try:
                validate_namespace(alias, suffix, RESERVED_NAMES)
            except CallRouteError as e:
                raise ValueError(e.message) from e
        if "model" not in value:
            raise ValueError("default_namespaces must include 'model'")
        return MappingProxyType(dict(value))

    @field_validator("http_methods")
    @classmethod
    def _validate_http_methods(cls, value: frozenset[str]) -> frozenset[str]:
        if "request" in value:
            raise ValueError("'request' is always available and is not a verb")
        invalid = sorted(m for m in value if not m.isidentifier() or m.startswith("_"))
        if invalid:
            raise ValueError(f"HTTP methods must be public identifiers: {invalid}")
        return value


class CallContext:
    """Owned routing state shared by root call objects.

    Attributes:
        config: Frozen CallConfig.
        namespaces: NamespaceRegistry seeded from config.default_namespaces.
        backends: BackendRegistry with all slots initially unset.
    """

    def __init__(self, config: CallConfig | None = None, **backends: Any):
        """Create context, optionally pre-filling backend slots.

        Args:
            config: Routing config (defaults to CallConfig()).
            **backends: dispatcher, model_provider, http_client,
                component_provider.

        Raises:
            TypeError: If an unknown backend keyword is passed.
        """
        self.config = config or CallConfig()
        self.namespaces = NamespaceRegistry(self.config.default_namespaces)
        self.backends = BackendRegistry()
        for slot, value in backends.items():
            setter = getattr(self.backends, f"set_{slot}", None)
            if setter is None:
                raise TypeError(f"Unknown backend slot '{slot}'")
            setter(value)

    def __repr__(self) -> str:
        return f"CallContext(namespaces={self.namespaces.list_names()}, backends={self.backends.configured()})"


_DEFAULT_CONTEXT: CallContext = CallContext()


def get_default_context() -> CallContext:
    """Return the process default context."""
    return _DEFAULT_CONTEXT


def reset_default_context(config: CallConfig | None = None) -> CallContext:
    """Replace the process default context with a fresh one and return it.

    Root objects created earlier keep the context they were built with.
    """
    global _DEFAULT_CONTEXT
    _DEFAULT_CONTEXT = CallContext(config)
    return _DEFAULT_CONTEXT


def register_namespace(alias: str, suffix: str) -> None:
    """Register alias on the default context."""
    _DEFAULT_CONTEXT.namespaces.register(alias, suffix)


def set_dispatcher(dispatcher: Any = Unset) -> None:
    _DEFAULT_CONTEXT.backends.set_dispatcher(dispatcher)


def set_model_provider(provider: Any = Unset) -> None:
    _DEFAULT_CONTEXT.backends.set_model_provider(provider)


def set_http_client(client: Any = Unset) -> None:
    _DEFAULT_CONTEXT.backends.set_http_client(client)


def set_component_provider(provider: Any = Unset) -> None:
    _DEFAULT_CONTEXT.backends.set_component_provider(provider)
