# Copyright (c) 2025 - 2026, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Validation constraints for call chains.

These functions validate preconditions and resolve routing values for
invocation, data access, and delegate creation. Each either returns the
resolved value or raises ConfigurationError / ValidationError.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from callroute.errors import ConfigurationError, ValidationError

from .state import CallState

if TYPE_CHECKING:
    from callroute.context import CallContext
    from callroute.registry import (
        ComponentProvider,
        Dispatcher,
        HttpClient,
        ModelProvider,
    )

__all__ = (
    "SPECIAL_NAMESPACES",
    "call_must_be_complete",
    "component_provider_must_be_configured",
    "dispatcher_must_be_configured",
    "http_client_must_be_configured",
    "http_method_must_be_supported",
    "model_provider_must_be_configured",
    "namespace_must_be_routable",
    "resolve_namespace_suffix",
    "resolve_session_module_name",
)

# Namespaces handled by delegates rather than the namespace registry.
SPECIAL_NAMESPACES: frozenset[str] = frozenset({"http", "component"})


def _require_slot(context: CallContext, slot: str) -> Any:
    backend = context.backends.get(slot)
    if backend is None:
        raise ConfigurationError(
            f"Configuration error: {slot} required",
            details={"slot": slot, "configured": context.backends.configured()},
        )
    return backend


def dispatcher_must_be_configured(context: CallContext) -> Dispatcher:
    """Return dispatcher or raise ConfigurationError if unset."""
    return _require_slot(context, "dispatcher")


def model_provider_must_be_configured(context: CallContext) -> ModelProvider:
    """Return model provider or raise ConfigurationError if unset."""
    return _require_slot(context, "model_provider")


def http_client_must_be_configured(context: CallContext) -> HttpClient:
    """Return HTTP client or raise ConfigurationError if unset."""
    return _require_slot(context, "http_client")


def component_provider_must_be_configured(context: CallContext) -> ComponentProvider:
    """Return component provider or raise ConfigurationError if unset."""
    return _require_slot(context, "component_provider")


def namespace_must_be_routable(context: CallContext, name: str) -> None:
    """Validate name is a registered alias or a delegate namespace.

    Raises:
        ValidationError: If name is neither.
    """
    if name in SPECIAL_NAMESPACES or context.namespaces.has(name):
        return
    raise ValidationError(
        f"Invalid namespace {name}",
        details={
            "namespace": name,
            "available": sorted([*context.namespaces.list_names(), *SPECIAL_NAMESPACES]),
        },
    )


def resolve_namespace_suffix(context: CallContext, namespace: str) -> str:
    """Return suffix for namespace.

    Raises:
        ValidationError: If alias was unregistered after the chain started.
    """
    suffix = context.namespaces.resolve(namespace)
    if suffix is None:
        raise ValidationError(
            f"Namespace {namespace} is not registered",
            details={"namespace": namespace},
        )
    return suffix


def call_must_be_complete(state: CallState) -> None:
    """Validate namespace, module, and method are all set.

    Raises:
        ValidationError: Naming the first missing part.
    """
    if state.namespace is None:
        message = "Method call without namespace"
    elif state.module is None:
        message = "Method call without module name"
    elif state.method is None:
        message = "Method call without method name"
    else:
        return
    raise ValidationError(message, details=state.triple())


def http_method_must_be_supported(context: CallContext, method: str) -> None:
    """Validate method is a configured HTTP verb or "request".

    Raises:
        ValidationError: If method is neither.
    """
    if method == "request" or method in context.config.http_methods:
        return
    raise ValidationError(
        f"Invalid method {method} for http client",
        details={
            "method": method,
            "available": sorted([*context.config.http_methods, "request"]),
        },
    )


def resolve_session_module_name(session: Any, field: str) -> str:
    """Derive a qualified module name from the session's call signature.

    The field holds "<qualifiedModule>.<method>"; the part before the first
    dot is returned. The field may be a mapping key or an attribute.

    Raises:
        ConfigurationError: If the field is absent or unparsable.
    """
    if isinstance(session, Mapping):
        signature = session.get(field)
    else:
        signature = getattr(session, field, None)

    if not isinstance(signature, str) or "." not in signature:
        raise ConfigurationError(
            f"Cannot determine module name: session {field} missing or invalid",
            details={"field": field, "value": signature},
        )
    module_name = signature.split(".", 1)[0]
    if not module_name:
        raise ConfigurationError(
            f"Cannot determine module name from session {field} '{signature}'",
            details={"field": field, "value": signature},
        )
    return module_name
