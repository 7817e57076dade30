# Copyright (c) 2025 - 2026, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Backend slots for the collaborators a call chain hands off to.

Slots start empty and may be set or cleared independently at any time.
Nothing here validates a backend's shape; a missing capability surfaces
when a chain first uses it.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable

from callroute.core.types import Unset, UnsetType

logger = logging.getLogger(__name__)

__all__ = (
    "BACKEND_SLOTS",
    "BackendRegistry",
    "ComponentProvider",
    "Dispatcher",
    "HttpClient",
    "ModelHandle",
    "ModelProvider",
)

BACKEND_SLOTS: tuple[str, ...] = (
    "dispatcher",
    "model_provider",
    "http_client",
    "component_provider",
)


@runtime_checkable
class Dispatcher(Protocol):
    """Resolves signatures to callables and owns module-scoped data."""

    def resolve(self, signature: str) -> Callable[..., Any]: ...

    def get_data(self, name: str) -> Any: ...

    def set_data(self, name: str, value: Any) -> Any: ...


@runtime_checkable
class ModelHandle(Protocol):
    def bind(self, session: Any) -> Any: ...


@runtime_checkable
class ModelProvider(Protocol):
    def model_for(self, name: str) -> ModelHandle: ...


@runtime_checkable
class HttpClient(Protocol):
    """Verb methods take (target, options, session); request takes (options, session)."""

    def get(self, target: Any, options: Any, session: Any) -> Any: ...

    def post(self, target: Any, options: Any, session: Any) -> Any: ...

    def put(self, target: Any, options: Any, session: Any) -> Any: ...

    def delete(self, target: Any, options: Any, session: Any) -> Any: ...

    def request(self, options: Any, session: Any) -> Any: ...


@runtime_checkable
class ComponentProvider(Protocol):
    def component(self, name: str) -> Any: ...


class BackendRegistry:
    """Four independent, optional collaborator slots.

    Passing None or Unset to a setter clears the slot. Readers return the
    current value or None; callers must read at the moment of use.
    """

    def __init__(self):
        self._slots: dict[str, Any] = dict.fromkeys(BACKEND_SLOTS)

    def _set(self, slot: str, value: Any) -> None:
        if isinstance(value, UnsetType):
            value = None
        self._slots[slot] = value
        logger.debug(f"Backend slot '{slot}' {'cleared' if value is None else 'set'}")

    @property
    def dispatcher(self) -> Dispatcher | None:
        return self._slots["dispatcher"]

    @property
    def model_provider(self) -> ModelProvider | None:
        return self._slots["model_provider"]

    @property
    def http_client(self) -> HttpClient | None:
        return self._slots["http_client"]

    @property
    def component_provider(self) -> ComponentProvider | None:
        return self._slots["component_provider"]

    def set_dispatcher(self, dispatcher: Dispatcher | None | UnsetType = Unset) -> None:
        self._set("dispatcher", dispatcher)

    def set_model_provider(self, provider: ModelProvider | None | UnsetType = Unset) -> None:
        self._set("model_provider", provider)

    def set_http_client(self, client: HttpClient | None | UnsetType = Unset) -> None:
        self._set("http_client", client)

    def set_component_provider(
        self, provider: ComponentProvider | None | UnsetType = Unset
    ) -> None:
        self._set("component_provider", provider)

    def get(self, slot: str) -> Any:
        """Read slot by name. Raises KeyError for unknown slot names."""
        if slot not in self._slots:
            raise KeyError(f"Unknown backend slot '{slot}'. Available: {list(BACKEND_SLOTS)}")
        return self._slots[slot]

    def configured(self) -> list[str]:
        """Names of slots currently holding a backend."""
        return [name for name, value in self._slots.items() if value is not None]

    def clear(self) -> None:
        """Clear every slot."""
        for slot in BACKEND_SLOTS:
            self._set(slot, None)

    def __repr__(self) -> str:
        return f"BackendRegistry(configured={self.configured()})"
