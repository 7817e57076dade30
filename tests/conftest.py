# Copyright (c) 2025 - 2026, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Shared fixtures: session, isolated context, fake backends."""

from __future__ import annotations

from typing import Any

import pytest

from callroute.call import CallProxy
from callroute.context import CallContext, reset_default_context


class FakeDispatcher:
    """Dispatcher double recording resolved signatures and data writes."""

    def __init__(self, functions: dict[str, Any] | None = None):
        self.functions = dict(functions or {})
        self.data: dict[str, Any] = {}
        self.resolved: list[str] = []

    def resolve(self, signature: str):
        self.resolved.append(signature)
        if signature not in self.functions:
            raise KeyError(f"method {signature} not found")
        return self.functions[signature]

    def get_data(self, name: str) -> Any:
        return self.data.get(name)

    def set_data(self, name: str, value: Any) -> None:
        self.data[name] = value


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def session() -> dict[str, Any]:
    return {
        "session_id": "11111111111111111111111111111111",
        "module_call_signature": "fooModule.bar",
    }


@pytest.fixture
def dispatcher_factory() -> type[FakeDispatcher]:
    return FakeDispatcher


@pytest.fixture
def dispatcher() -> FakeDispatcher:
    return FakeDispatcher()


@pytest.fixture
def context(dispatcher) -> CallContext:
    """Isolated context with the fake dispatcher installed."""
    return CallContext(dispatcher=dispatcher)


@pytest.fixture
def root(session, context) -> CallProxy:
    return CallProxy(session, context)


@pytest.fixture
def default_context():
    """Fresh process default context, restored after the test."""
    ctx = reset_default_context()
    yield ctx
    reset_default_context()
