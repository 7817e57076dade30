# Copyright (c) 2025 - 2026, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Module-scoped data access through the dispatcher's storage."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from .constraints import dispatcher_must_be_configured

if TYPE_CHECKING:
    from callroute.context import CallContext

logger = logging.getLogger(__name__)

__all__ = ("DataAccessor",)


class DataAccessor:
    """Get/set one opaque value per qualified module name.

    Holds no cache; the dispatcher is read from the context on every call.
    """

    def __init__(self, context: CallContext):
        self._context = context

    def get(self, name: str) -> Any:
        """Return stored value for name (None or provider default if absent)."""
        dispatcher = dispatcher_must_be_configured(self._context)
        return dispatcher.get_data(name)

    def set(self, name: str, value: Any) -> bool:
        """Store value for name. Returns True once the dispatcher accepts it."""
        dispatcher = dispatcher_must_be_configured(self._context)
        dispatcher.set_data(name, value)
        logger.debug(f"Set module data for '{name}'")
        return True

    def __repr__(self) -> str:
        return f"DataAccessor(context={self._context!r})"
