# Copyright (c) 2025 - 2026, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Tests for callroute.call.constraints - precondition validators."""

from __future__ import annotations

from types import SimpleNamespace

import pytest

from callroute.call import CallState
from callroute.call.constraints import (
    call_must_be_complete,
    dispatcher_must_be_configured,
    http_method_must_be_supported,
    namespace_must_be_routable,
    resolve_namespace_suffix,
    resolve_session_module_name,
)
from callroute.context import CallContext
from callroute.errors import ConfigurationError, ValidationError


class TestBackendConstraints:
    def test_dispatcher_required(self):
        with pytest.raises(ConfigurationError, match="dispatcher required") as exc_info:
            dispatcher_must_be_configured(CallContext())
        assert exc_info.value.details["slot"] == "dispatcher"

    def test_dispatcher_returned(self, context, dispatcher):
        assert dispatcher_must_be_configured(context) is dispatcher


class TestNamespaceConstraints:
    @pytest.mark.parametrize("name", ["module", "model", "controller", "http", "component"])
    def test_routable(self, name):
        namespace_must_be_routable(CallContext(), name)

    def test_invalid_namespace(self):
        with pytest.raises(ValidationError, match="Invalid namespace foo") as exc_info:
            namespace_must_be_routable(CallContext(), "foo")
        assert "module" in exc_info.value.details["available"]

    def test_suffix_of_removed_alias(self):
        ctx = CallContext()
        ctx.namespaces.register("svc", "Service")
        assert resolve_namespace_suffix(ctx, "svc") == "Service"

        ctx.namespaces.unregister("svc")
        with pytest.raises(ValidationError, match="not registered"):
            resolve_namespace_suffix(ctx, "svc")


class TestCallComplete:
    @pytest.mark.parametrize(
        ("state", "message"),
        [
            (CallState(), "without namespace"),
            (CallState(namespace="module"), "without module name"),
            (CallState(namespace="module", module="foo"), "without method name"),
        ],
    )
    def test_incomplete(self, state, message):
        with pytest.raises(ValidationError, match=message):
            call_must_be_complete(state)

    def test_complete(self):
        call_must_be_complete(CallState(namespace="module", module="foo", method="bar"))


class TestHttpMethod:
    @pytest.mark.parametrize("method", ["get", "post", "put", "delete", "request"])
    def test_supported(self, method):
        http_method_must_be_supported(CallContext(), method)

    def test_unsupported(self):
        with pytest.raises(ValidationError, match="Invalid method foo"):
            http_method_must_be_supported(CallContext(), "foo")


class TestSessionModuleName:
    def test_mapping_session(self):
        session = {"module_call_signature": "fooModule.bar"}
        assert resolve_session_module_name(session, "module_call_signature") == "fooModule"

    def test_attribute_session(self):
        session = SimpleNamespace(sig="barController.baz.extra")
        assert resolve_session_module_name(session, "sig") == "barController"

    @pytest.mark.parametrize("value", [None, "", "noDot", ".bar", 12])
    def test_unparsable(self, value):
        with pytest.raises(ConfigurationError):
            resolve_session_module_name({"sig": value}, "sig")

    def test_missing_field(self):
        with pytest.raises(ConfigurationError, match="missing or invalid"):
            resolve_session_module_name(SimpleNamespace(), "sig")
