# Copyright (c) 2025 - 2026, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""CallProxy: attribute-chain call routing bound to a session.

    root = CallProxy(session)
    root.module.foo.bar({"x": 1})    # dispatcher.resolve("fooModule.bar")(payload)
    root.module.foo.data             # dispatcher.get_data("fooModule")
    root.module.foo.data = value     # dispatcher.set_data("fooModule", value)
    root.data                        # data of the session's own module
    root.model.foo                   # model provider's "foo" bound to session
    root.http.get(url, options)      # http_client.get(url, options, session)
    root.component.foo.new(payload)  # component "foo" .new with session
    root.session                     # the bound session

Every attribute access returns a new chain holding a new CallState, so the
root stays empty and serves any number of independent chains. A chain that
reached a terminal action (call, data read/write, delegate) is consumed and
rejects further use. Attribute access never routes names starting with an
underscore; route() does.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from callroute.context import get_default_context
from callroute.errors import ValidationError

from .constraints import (
    call_must_be_complete,
    dispatcher_must_be_configured,
    namespace_must_be_routable,
    resolve_namespace_suffix,
    resolve_session_module_name,
)
from .data import DataAccessor
from .delegates import ComponentDelegate, HttpDelegate, inject_session, resolve_model
from .state import CallPhase, CallState

if TYPE_CHECKING:
    from callroute.context import CallContext

logger = logging.getLogger(__name__)

__all__ = (
    "CallProxy",
    "is_consumed",
    "phase_of",
    "route",
    "state_of",
)


class CallProxy:
    """Root call object for one session, and every chain built from it.

    The class defines no public attributes so that every public name is
    available for routing. Attribute access never routes names starting
    with an underscore (AttributeError), so Python protocol probes such as
    copy, pickle, and hasattr leave chains untouched; use route() to reach
    modules or methods whose names start with an underscore.
    """

    __slots__ = ("_context", "_state", "_consumed")

    def __init__(self, session: Any, context: CallContext | None = None):
        """Create root call object.

        Args:
            session: Opaque session injected into every call.
            context: Routing context. None uses the process default context
                current at the time of each call.
        """
        object.__setattr__(self, "_context", context)
        object.__setattr__(self, "_state", CallState(session=session))
        object.__setattr__(self, "_consumed", False)

    @classmethod
    def _chain(cls, context: CallContext | None, state: CallState) -> CallProxy:
        chain = cls.__new__(cls)
        object.__setattr__(chain, "_context", context)
        object.__setattr__(chain, "_state", state)
        object.__setattr__(chain, "_consumed", False)
        return chain

    def _ctx(self) -> CallContext:
        return self._context or get_default_context()

    def _advance(self, state: CallState) -> CallProxy:
        return self._chain(self._context, state)

    def _consume(self) -> None:
        """Mark chain consumed; the root (empty state) is never consumed."""
        self._ensure_live()
        if self._state.phase is not CallPhase.EMPTY:
            object.__setattr__(self, "_consumed", True)

    def _ensure_live(self) -> None:
        if self._consumed:
            raise ValidationError(
                "Call chain already consumed",
                details=self._state.triple(),
            )

    def _session_module_name(self, ctx: CallContext) -> str:
        return resolve_session_module_name(
            self._state.session, ctx.config.session_signature_field
        )

    def _qualified_module(self, ctx: CallContext) -> str:
        return self._state.qualified_module(
            resolve_namespace_suffix(ctx, self._state.namespace)
        )

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        return self._step(name)

    def _step(self, name: str) -> Any:
        """Apply one routing step for name; no underscore restriction."""
        self._ensure_live()
        ctx = self._ctx()
        state = self._state
        phase = state.phase

        if phase is CallPhase.EMPTY:
            if name == "session":
                return state.session
            if name == "data":
                return DataAccessor(ctx).get(self._session_module_name(ctx))
            namespace_must_be_routable(ctx, name)
            return self._advance(state.with_namespace(name))

        if phase is CallPhase.NAMESPACE_SET:
            if state.namespace == "model":
                self._consume()
                return resolve_model(ctx, state.session, name)
            if state.namespace == "http":
                self._consume()
                return HttpDelegate(ctx, state.session, name)
            if state.namespace == "component":
                self._consume()
                return ComponentDelegate(ctx, state.session, name)
            return self._advance(state.with_module(name))

        if phase is CallPhase.MODULE_SET:
            if name == "data":
                self._consume()
                return DataAccessor(ctx).get(self._qualified_module(ctx))
            return self._advance(state.with_method(name))

        raise ValidationError(
            "Property accessed with namespace, module, and method already set: "
            f"{name}, {state.namespace}, {state.module}, {state.method}",
            details={"property": name, **state.triple()},
        )

    def __setattr__(self, name: str, value: Any) -> None:
        if name != "data":
            raise ValidationError(
                f"Can only set value for data, not {name}",
                details={"property": name},
            )
        self._ensure_live()
        ctx = self._ctx()
        phase = self._state.phase

        if phase is CallPhase.NAMESPACE_SET:
            raise ValidationError(
                "Cannot set data without module name",
                details=self._state.triple(),
            )
        if phase is CallPhase.METHOD_SET:
            raise ValidationError(
                "Cannot set data in method context",
                details=self._state.triple(),
            )

        self._consume()
        if phase is CallPhase.EMPTY:
            qualified = self._session_module_name(ctx)
        else:
            qualified = self._qualified_module(ctx)
        DataAccessor(ctx).set(qualified, value)

    def __delattr__(self, name: str) -> None:
        raise ValidationError(
            f"Cannot delete {name} from call chain",
            details={"property": name},
        )

    def __call__(self, payload: Mapping[str, Any] | None = None, /, **kwargs: Any) -> Any:
        """Dispatch the chain's method with a session-injected payload.

        Args:
            payload: Mapping of call arguments (copied, never mutated).
            **kwargs: Extra arguments merged over payload.

        Returns:
            The resolved function's result, unchanged (awaitables included).

        Raises:
            ConfigurationError: If no dispatcher is configured.
            ValidationError: If namespace, module, or method is missing.
        """
        self._consume()
        state = self._state
        ctx = self._ctx()
        dispatcher = dispatcher_must_be_configured(ctx)
        call_must_be_complete(state)

        signature = state.signature(resolve_namespace_suffix(ctx, state.namespace))
        # resolution errors belong to the dispatcher; propagate untouched
        method = dispatcher.resolve(signature)
        logger.debug(f"Dispatching {signature}")
        return method(inject_session(state.session, payload, kwargs))

    def __getstate__(self) -> dict[str, Any]:
        return {slot: getattr(self, slot) for slot in self.__slots__}

    def __setstate__(self, state: dict[str, Any]) -> None:
        for slot, value in state.items():
            object.__setattr__(self, slot, value)

    def __repr__(self) -> str:
        consumed = ", consumed" if self._consumed else ""
        return f"CallProxy({self._state!r}{consumed})"


def route(proxy: CallProxy, *names: str) -> Any:
    """Apply routing steps from strings: route(root, "module", "foo", "bar").

    Unlike attribute access, names starting with an underscore are routed.
    """
    result: Any = proxy
    for name in names:
        if isinstance(result, CallProxy):
            result = result._step(name)
        elif isinstance(result, ComponentDelegate):
            result = result.bind_method(name)
        else:
            result = getattr(result, name)
    return result


def state_of(proxy: CallProxy) -> CallState:
    return proxy._state


def phase_of(proxy: CallProxy) -> CallPhase:
    return proxy._state.phase


def is_consumed(proxy: CallProxy) -> bool:
    return proxy._consumed
