#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Shared utilities for ISA parsing and delimiter validation

This sub-package centralises the ISA layout constants, the low-level
byte-buffer helpers, and the distinctness checks so that the model layer
holds no format-specific logic of its own.
"""

from __future__ import annotations
