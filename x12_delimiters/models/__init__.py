#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Typed dataclass model for X12 delimiters

:class:`Delimiters` is the sole output of ISA extraction and the value
callers hand to whatever splits the interchange into segments.
"""

from __future__ import annotations

from x12_delimiters.models.records import DEFAULT_DELIMITERS, Delimiters

__all__ = [
    "DEFAULT_DELIMITERS",
    "Delimiters",
]
