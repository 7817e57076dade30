# Copyright (c) 2025 - 2026, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Terminal delegates for the model, http, and component namespaces.

root.model.<name>        -> provider.model_for(name).bind(session)
root.http.<verb>         -> HttpDelegate forwarding to client.<verb>
root.component.<name>    -> ComponentDelegate; .<method>(payload) injects session

Delegates forward calls only: no retries, timeouts, or response parsing.
Results (including awaitables) are returned unchanged.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Any

from .constraints import (
    component_provider_must_be_configured,
    http_client_must_be_configured,
    http_method_must_be_supported,
    model_provider_must_be_configured,
)

if TYPE_CHECKING:
    from callroute.context import CallContext

logger = logging.getLogger(__name__)

__all__ = (
    "ComponentDelegate",
    "HttpDelegate",
    "inject_session",
    "resolve_model",
)


def inject_session(
    session: Any,
    payload: Mapping[str, Any] | None = None,
    extra: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Build call payload: copy of payload, extra kwargs merged, session last.

    Raises:
        TypeError: If payload is not a mapping.
    """
    if payload is not None and not isinstance(payload, Mapping):
        raise TypeError(
            f"Call payload must be a mapping, got {type(payload).__name__}"
        )
    args = dict(payload or {})
    if extra:
        args.update(extra)
    args["session"] = session
    return args


def resolve_model(context: CallContext, session: Any, name: str) -> Any:
    """Return provider's model for name bound to session.

    Raises:
        ConfigurationError: If no model provider is configured.
    """
    provider = model_provider_must_be_configured(context)
    model = provider.model_for(name)
    logger.debug(f"Resolved model '{name}'")
    return model.bind(session)


class HttpDelegate:
    """Session-defaulting forwarder to one HTTP client method.

    Verbs are called as (target, options=None, session=None); "request" as
    (options=None, session=None). A None session falls back to the bound one.
    """

    __slots__ = ("_context", "_session", "method")

    def __init__(self, context: CallContext, session: Any, method: str):
        """Validate client and method at creation.

        Raises:
            ConfigurationError: If no HTTP client is configured.
            ValidationError: If method is not a verb or "request".
        """
        http_client_must_be_configured(context)
        http_method_must_be_supported(context, method)
        self._context = context
        self._session = session
        self.method = method

    def _client_method(self) -> Callable[..., Any]:
        client = http_client_must_be_configured(self._context)
        return getattr(client, self.method)

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        if self.method == "request":
            return self._request(*args, **kwargs)
        return self._verb(*args, **kwargs)

    def _verb(self, target: Any = None, options: Any = None, session: Any = None) -> Any:
        client_method = self._client_method()
        return client_method(target, options, self._session if session is None else session)

    def _request(self, options: Any = None, session: Any = None) -> Any:
        client_method = self._client_method()
        return client_method(options, self._session if session is None else session)

    def __repr__(self) -> str:
        return f"HttpDelegate(method={self.method!r})"


class ComponentDelegate:
    """Component bound to a session; method calls receive the session.

    Example:
        root.component.user.new({"name": "x"})
        # provider.component("user").new({"name": "x", "session": session})
    """

    __slots__ = ("_context", "_session", "name")

    def __init__(self, context: CallContext, session: Any, name: str):
        """Raises ConfigurationError if no component provider is configured."""
        component_provider_must_be_configured(context)
        self._context = context
        self._session = session
        self.name = name

    def __getattr__(self, method: str) -> Callable[..., Any]:
        if method.startswith("_"):
            raise AttributeError(method)
        return self.bind_method(method)

    def bind_method(self, method: str) -> Callable[..., Any]:
        """Return session-injecting caller for method; any name, underscores included."""

        def call(payload: Mapping[str, Any] | None = None, /, **kwargs: Any) -> Any:
            provider = component_provider_must_be_configured(self._context)
            component = provider.component(self.name)
            return getattr(component, method)(inject_session(self._session, payload, kwargs))

        call.__name__ = method
        call.__qualname__ = f"{self.name}.{method}"
        return call

    def __repr__(self) -> str:
        return f"ComponentDelegate(name={self.name!r})"
