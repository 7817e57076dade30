# Copyright (c) 2025 - 2026, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Tests for callroute.errors."""

from __future__ import annotations

import pytest

from callroute.errors import (
    CallRouteError,
    ConfigurationError,
    ReservedNameError,
    ValidationError,
)


class TestErrors:
    def test_hierarchy(self):
        assert issubclass(ConfigurationError, CallRouteError)
        assert issubclass(ValidationError, CallRouteError)
        assert issubclass(ReservedNameError, ValidationError)

    def test_default_message(self):
        err = ConfigurationError()
        assert err.message == "Configuration error"
        assert str(err) == "Configuration error"
        assert err.details == {}
        assert err.retryable is False

    def test_to_dict(self):
        err = ValidationError("bad chain", details={"property": "baz"}, retryable=True)

        assert err.to_dict() == {
            "error": "ValidationError",
            "message": "bad chain",
            "retryable": True,
            "details": {"property": "baz"},
        }

    def test_to_dict_omits_empty_details(self):
        assert "details" not in ReservedNameError("x").to_dict()

    def test_raise_and_catch_as_base(self):
        with pytest.raises(CallRouteError, match="reserved"):
            raise ReservedNameError("alias is reserved")
