# Copyright (c) 2025 - 2026, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Call chains: session-bound routing from attribute access to dispatch.

Core types:
    CallProxy: Root call object and chain builder.
    CallState / CallPhase: Immutable routing descriptor and its phase.
    DataAccessor: Module-scoped data get/set via the dispatcher.
    HttpDelegate / ComponentDelegate: Terminal forwarders.

Helpers:
    route(), state_of(), phase_of(), is_consumed()
"""

from __future__ import annotations

from .data import DataAccessor
from .delegates import ComponentDelegate, HttpDelegate, inject_session, resolve_model
from .proxy import CallProxy, is_consumed, phase_of, route, state_of
from .state import CallPhase, CallState

__all__ = (
    "CallPhase",
    "CallProxy",
    "CallState",
    "ComponentDelegate",
    "DataAccessor",
    "HttpDelegate",
    "inject_session",
    "is_consumed",
    "phase_of",
    "resolve_model",
    "route",
    "state_of",
)
