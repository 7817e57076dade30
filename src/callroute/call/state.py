# Copyright (c) 2025 - 2026, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""CallState: immutable (namespace, module, method) accumulator.

Fields fill strictly left to right and are never overwritten. Each step
returns a new state, so a state held by one chain is never altered by
another chain built from the same root.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict

from callroute.errors import ValidationError

__all__ = ("CallPhase", "CallState")


class CallPhase(str, Enum):
    EMPTY = "empty"
    NAMESPACE_SET = "namespace_set"
    MODULE_SET = "module_set"
    METHOD_SET = "method_set"


class CallState(BaseModel):
    """Routing descriptor accumulated by one call chain.

    Attributes:
        session: Opaque session value, set once at creation.
        namespace: Namespace alias, or None.
        module: Module name, or None.
        method: Method name, or None.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    session: Any = None
    namespace: str | None = None
    module: str | None = None
    method: str | None = None

    @property
    def phase(self) -> CallPhase:
        if self.namespace is None:
            return CallPhase.EMPTY
        if self.module is None:
            return CallPhase.NAMESPACE_SET
        if self.method is None:
            return CallPhase.MODULE_SET
        return CallPhase.METHOD_SET

    def with_namespace(self, namespace: str) -> CallState:
        if self.phase is not CallPhase.EMPTY:
            raise self._order_error("namespace", namespace)
        return self.model_copy(update={"namespace": namespace})

    def with_module(self, module: str) -> CallState:
        if self.phase is not CallPhase.NAMESPACE_SET:
            raise self._order_error("module", module)
        return self.model_copy(update={"module": module})

    def with_method(self, method: str) -> CallState:
        if self.phase is not CallPhase.MODULE_SET:
            raise self._order_error("method", method)
        return self.model_copy(update={"method": method})

    def qualified_module(self, suffix: str) -> str:
        """Module name plus namespace suffix, e.g. "fooModule"."""
        return f"{self.module}{suffix}"

    def signature(self, suffix: str) -> str:
        """Dispatcher signature, e.g. "fooModule.bar"."""
        return f"{self.qualified_module(suffix)}.{self.method}"

    def triple(self) -> dict[str, str | None]:
        return {"namespace": self.namespace, "module": self.module, "method": self.method}

    def _order_error(self, field: str, value: str) -> ValidationError:
        return ValidationError(
            f"Cannot set {field} '{value}' in phase {self.phase.value}",
            details={"field": field, "value": value, **self.triple()},
        )

    def __repr__(self) -> str:
        parts = [p for p in (self.namespace, self.module, self.method) if p is not None]
        return f"CallState({'.'.join(parts) or '<empty>'})"
