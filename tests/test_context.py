# Copyright (c) 2025 - 2026, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Tests for callroute.context - CallConfig, CallContext, default context."""

from __future__ import annotations

from unittest.mock import Mock

import pytest
from pydantic import ValidationError as PydanticValidationError

import callroute
from callroute import context as context_module
from callroute.context import CallConfig, CallContext


class TestCallConfig:
    def test_defaults(self):
        config = CallConfig()

        assert config.default_namespaces == {
            "controller": "Controller",
            "model": "Model",
            "module": "Module",
        }
        assert config.http_methods == frozenset({"get", "post", "put", "delete"})
        assert config.session_signature_field == "module_call_signature"

    def test_frozen(self):
        config = CallConfig()
        with pytest.raises(PydanticValidationError):
            config.session_signature_field = "other"

    def test_request_is_not_a_verb(self):
        with pytest.raises(PydanticValidationError):
            CallConfig(http_methods=frozenset({"get", "request"}))

    def test_empty_signature_field_rejected(self):
        with pytest.raises(PydanticValidationError):
            CallConfig(session_signature_field="")

    def test_default_namespaces_read_only(self):
        config = CallConfig()

        with pytest.raises(TypeError):
            config.default_namespaces["service"] = "Service"
        assert "service" not in config.default_namespaces

    def test_default_namespaces_copied_from_input(self):
        source = {"model": "Model", "service": "Service"}
        config = CallConfig(default_namespaces=source)
        source["other"] = "Other"

        assert "other" not in config.default_namespaces

    @pytest.mark.parametrize(
        "namespaces, match",
        [
            ({"model": "Model", "ns": ""}, "non-empty string"),
            ({"model": "Model", "http": "Http"}, "reserved"),
            ({"model": "Model", "_hidden": "Hidden"}, "public identifier"),
            ({"model": "Model", "my-ns": "Mine"}, "public identifier"),
            ({"service": "Service"}, "must include 'model'"),
        ],
    )
    def test_invalid_default_namespaces_rejected(self, namespaces, match):
        """Defaults pass the same alias checks as NamespaceRegistry.register."""
        with pytest.raises(PydanticValidationError, match=match):
            CallConfig(default_namespaces=namespaces)


class TestCallContext:
    def test_namespaces_seeded_from_config(self):
        ctx = CallContext(
            CallConfig(default_namespaces={"model": "Model", "service": "Service"})
        )

        assert ctx.namespaces.list_names() == ["model", "service"]
        assert "service" in ctx.namespaces.reserved

    def test_backend_keywords(self):
        dispatcher = Mock()
        ctx = CallContext(dispatcher=dispatcher)

        assert ctx.backends.dispatcher is dispatcher

    def test_unknown_backend_keyword(self):
        with pytest.raises(TypeError, match="Unknown backend slot"):
            CallContext(database=Mock())

    def test_contexts_are_isolated(self):
        a, b = CallContext(), CallContext()
        a.namespaces.register("svc", "Service")

        assert not b.namespaces.has("svc")


class TestDefaultContext:
    def test_helpers_configure_default_context(self, default_context):
        dispatcher, client, provider, components = Mock(), Mock(), Mock(), Mock()

        callroute.set_dispatcher(dispatcher)
        callroute.set_http_client(client)
        callroute.set_model_provider(provider)
        callroute.set_component_provider(components)
        callroute.register_namespace("svc", "Service")

        assert default_context.backends.dispatcher is dispatcher
        assert default_context.backends.http_client is client
        assert default_context.backends.model_provider is provider
        assert default_context.backends.component_provider is components
        assert default_context.namespaces.resolve("svc") == "Service"

    def test_reset_replaces_default(self, default_context):
        callroute.set_dispatcher(Mock())

        fresh = context_module.reset_default_context()

        assert fresh is not default_context
        assert context_module.get_default_context() is fresh
        assert fresh.backends.dispatcher is None

    def test_lazy_exports(self):
        assert callroute.CallProxy.__name__ == "CallProxy"
        assert "CallProxy" in dir(callroute)
        with pytest.raises(AttributeError):
            callroute.DoesNotExist
