# Copyright (c) 2025 - 2026, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""callroute - session-bound call routing by attribute chain.

    from callroute import CallProxy, set_dispatcher

    set_dispatcher(core)
    root = CallProxy(session)
    root.module.foo.bar({"x": 1})   # core.resolve("fooModule.bar")({..., "session": session})

Uses lazy loading for fast import.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

# Lazy import mapping
_LAZY_IMPORTS: dict[str, tuple[str, str]] = {
    # call
    "CallPhase": ("callroute.call.state", "CallPhase"),
    "CallProxy": ("callroute.call.proxy", "CallProxy"),
    "CallState": ("callroute.call.state", "CallState"),
    "ComponentDelegate": ("callroute.call.delegates", "ComponentDelegate"),
    "DataAccessor": ("callroute.call.data", "DataAccessor"),
    "HttpDelegate": ("callroute.call.delegates", "HttpDelegate"),
    "route": ("callroute.call.proxy", "route"),
    # context
    "CallConfig": ("callroute.context", "CallConfig"),
    "CallContext": ("callroute.context", "CallContext"),
    "get_default_context": ("callroute.context", "get_default_context"),
    "register_namespace": ("callroute.context", "register_namespace"),
    "reset_default_context": ("callroute.context", "reset_default_context"),
    "set_component_provider": ("callroute.context", "set_component_provider"),
    "set_dispatcher": ("callroute.context", "set_dispatcher"),
    "set_http_client": ("callroute.context", "set_http_client"),
    "set_model_provider": ("callroute.context", "set_model_provider"),
    # errors
    "CallRouteError": ("callroute.errors", "CallRouteError"),
    "ConfigurationError": ("callroute.errors", "ConfigurationError"),
    "ReservedNameError": ("callroute.errors", "ReservedNameError"),
    "ValidationError": ("callroute.errors", "ValidationError"),
    # registry
    "BackendRegistry": ("callroute.registry.backends", "BackendRegistry"),
    "NamespaceRegistry": ("callroute.registry.namespaces", "NamespaceRegistry"),
    # types
    "Unset": ("callroute.core.types", "Unset"),
}

_LOADED: dict[str, object] = {}


def __getattr__(name: str) -> object:
    """Lazy import attributes on first access."""
    if name in _LOADED:
        return _LOADED[name]

    if name in _LAZY_IMPORTS:
        from importlib import import_module

        module_name, attr_name = _LAZY_IMPORTS[name]
        module = import_module(module_name)
        value = getattr(module, attr_name)
        _LOADED[name] = value
        return value

    raise AttributeError(f"module 'callroute' has no attribute {name!r}")


def __dir__() -> list[str]:
    """Return all available attributes for autocomplete."""
    return list(__all__)


# TYPE_CHECKING block for static analysis
if TYPE_CHECKING:
    from callroute.call.data import DataAccessor
    from callroute.call.delegates import ComponentDelegate, HttpDelegate
    from callroute.call.proxy import CallProxy, route
    from callroute.call.state import CallPhase, CallState
    from callroute.context import (
        CallConfig,
        CallContext,
        get_default_context,
        register_namespace,
        reset_default_context,
        set_component_provider,
        set_dispatcher,
        set_http_client,
        set_model_provider,
    )
    from callroute.core.types import Unset
    from callroute.errors import (
        CallRouteError,
        ConfigurationError,
        ReservedNameError,
        ValidationError,
    )
    from callroute.registry.backends import BackendRegistry
    from callroute.registry.namespaces import NamespaceRegistry

__all__ = (
    "BackendRegistry",
    "CallConfig",
    "CallContext",
    "CallPhase",
    "CallProxy",
    "CallRouteError",
    "CallState",
    "ComponentDelegate",
    "ConfigurationError",
    "DataAccessor",
    "HttpDelegate",
    "NamespaceRegistry",
    "ReservedNameError",
    "Unset",
    "ValidationError",
    "get_default_context",
    "register_namespace",
    "reset_default_context",
    "route",
    "set_component_provider",
    "set_dispatcher",
    "set_http_client",
    "set_model_provider",
)
