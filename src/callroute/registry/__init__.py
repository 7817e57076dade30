# Copyright (c) 2025 - 2026, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Registries: namespace aliases and backend collaborator slots.

Core types:
    NamespaceRegistry: alias -> signature suffix, with reserved aliases.
    BackendRegistry: dispatcher / model provider / HTTP client / component slots.

Protocols:
    Dispatcher, ModelProvider, ModelHandle, HttpClient, ComponentProvider
"""

from __future__ import annotations

from .backends import (
    BACKEND_SLOTS,
    BackendRegistry,
    ComponentProvider,
    Dispatcher,
    HttpClient,
    ModelHandle,
    ModelProvider,
)
from .namespaces import (
    DEFAULT_NAMESPACES,
    RESERVED_NAMES,
    NamespaceRegistry,
    validate_namespace,
)

__all__ = (
    "BACKEND_SLOTS",
    "DEFAULT_NAMESPACES",
    "RESERVED_NAMES",
    "BackendRegistry",
    "ComponentProvider",
    "Dispatcher",
    "HttpClient",
    "ModelHandle",
    "ModelProvider",
    "NamespaceRegistry",
    "validate_namespace",
)
