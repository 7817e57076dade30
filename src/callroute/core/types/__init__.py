# Copyright (c) 2025 - 2026, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Shared types: the Unset sentinel."""

from ._sentinel import Unset, UnsetType

__all__ = ("Unset", "UnsetType")
