# Copyright (c) 2025 - 2026, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Tests for callroute.call.state - CallState ordering."""

from __future__ import annotations

import pytest
from pydantic import ValidationError as PydanticValidationError

from callroute.call import CallPhase, CallState
from callroute.errors import ValidationError


class TestCallState:
    def test_phases_advance_left_to_right(self):
        state = CallState(session="s")
        assert state.phase is CallPhase.EMPTY

        state = state.with_namespace("module")
        assert state.phase is CallPhase.NAMESPACE_SET

        state = state.with_module("foo")
        assert state.phase is CallPhase.MODULE_SET

        state = state.with_method("bar")
        assert state.phase is CallPhase.METHOD_SET
        assert state.session == "s"

    def test_steps_return_new_state(self):
        empty = CallState(session="s")
        ns = empty.with_namespace("module")

        assert empty.namespace is None
        assert ns.namespace == "module"

    def test_session_is_shared_not_copied(self):
        session = {"id": 1}
        state = CallState(session=session).with_namespace("module").with_module("foo")

        assert state.session is session

    def test_module_before_namespace_rejected(self):
        with pytest.raises(ValidationError, match="Cannot set module"):
            CallState().with_module("foo")

    def test_no_overwrite(self):
        state = CallState().with_namespace("module")
        with pytest.raises(ValidationError, match="Cannot set namespace"):
            state.with_namespace("model")

    def test_method_before_module_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            CallState().with_namespace("module").with_method("bar")
        assert exc_info.value.details["field"] == "method"

    def test_frozen(self):
        with pytest.raises(PydanticValidationError):
            CallState().namespace = "module"

    def test_signature(self):
        state = CallState().with_namespace("module").with_module("foo").with_method("bar")

        assert state.qualified_module("Module") == "fooModule"
        assert state.signature("Module") == "fooModule.bar"

    def test_repr(self):
        state = CallState().with_namespace("module").with_module("foo")
        assert repr(state) == "CallState(module.foo)"
        assert repr(CallState()) == "CallState(<empty>)"
