# Copyright (c) 2025 - 2026, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Unset: explicit "clear this slot" token, distinct from a missing argument."""

from __future__ import annotations

from typing import Final, Literal

__all__ = ("Unset", "UnsetType")


class UnsetType:
    """Singleton sentinel for a value that was explicitly left unset."""

    __slots__ = ()
    _instance: UnsetType | None = None

    def __new__(cls) -> UnsetType:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> Literal[False]:
        return False

    def __repr__(self) -> str:
        return "Unset"

    def __reduce__(self):
        return (UnsetType, ())


Unset: Final = UnsetType()
