# Copyright (c) 2025 - 2026, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Error taxonomy for call routing.

CallRouteError carries a message, structured details, and a retryable flag.
Errors raised by backend collaborators are never wrapped in these types.
"""

from __future__ import annotations

from typing import Any

__all__ = (
    "CallRouteError",
    "ConfigurationError",
    "ReservedNameError",
    "ValidationError",
)


class CallRouteError(Exception):
    """Base error for callroute.

    Attributes:
        message: Human-readable description.
        details: Structured context (offending names, available values).
        retryable: Whether retrying the same chain could succeed.
    """

    default_message: str = "callroute error"
    default_retryable: bool = False

    def __init__(
        self,
        message: str | None = None,
        *,
        details: dict[str, Any] | None = None,
        retryable: bool | None = None,
    ):
        self.message = message or self.default_message
        self.details = details or {}
        self.retryable = self.default_retryable if retryable is None else retryable
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dict for logging or transport."""
        return {
            "error": type(self).__name__,
            "message": self.message,
            "retryable": self.retryable,
            **({"details": self.details} if self.details else {}),
        }

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r})"


class ConfigurationError(CallRouteError):
    """A required backend is unset or the session cannot supply a module name."""

    default_message = "Configuration error"


class ValidationError(CallRouteError):
    """Malformed or out-of-order call chain."""

    default_message = "Validation error"


class ReservedNameError(ValidationError):
    """Namespace alias is reserved and cannot be registered or removed."""

    default_message = "Namespace alias is reserved"
