#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
ISA segment layout and default delimiter values

The ISA segment that opens every X12 interchange is a fixed-width record:
sixteen elements of fixed length, each preceded by the element separator,
followed by the segment terminator.  Because every field has a fixed width,
the delimiters always sit at the same byte offsets::

    ISA*00*          *00*          *ZZ*SENDERID       *ZZ*RECEIVERID     *250403*0856*U*00501*000000001*0*P*:~
       ^                                                                                                    ^^
       3                                                                                                  104 105

* offset **3**:   element separator (first byte after ``ISA``)
* offset **104**: sub-element separator (ISA16, component element separator)
* offset **105**: segment terminator

References
----------
.. [1] ASC X12 Standard, Interchange Control Structures (ISA/IEA).
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Default delimiters
# ---------------------------------------------------------------------------

DEFAULT_SEGMENT_TERMINATOR: int = 0x7E
"""Standard segment terminator ``~``."""

DEFAULT_ELEMENT_SEPARATOR: int = 0x2A
"""Standard element separator ``*``."""

DEFAULT_SUB_ELEMENT_SEPARATOR: int = 0x3A
"""Standard sub-element (component) separator ``:``."""


# ---------------------------------------------------------------------------
# ISA fixed-width layout
# ---------------------------------------------------------------------------

ISA_SEGMENT_ID: bytes = b"ISA"
"""Literal segment identifier that must open the buffer (case-sensitive)."""

ISA_ELEMENT_SEPARATOR_INDEX: int = 3
"""Byte offset of the element separator (immediately after ``ISA``)."""

ISA_SUB_ELEMENT_SEPARATOR_INDEX: int = 104
"""Byte offset of ISA16, the sub-element separator."""

ISA_SEGMENT_TERMINATOR_INDEX: int = 105
"""Byte offset of the segment terminator closing the ISA segment."""

ISA_MIN_LENGTH: int = ISA_SEGMENT_TERMINATOR_INDEX + 1
"""Smallest buffer (106 bytes) that holds every delimiter offset."""


# ---------------------------------------------------------------------------
# Byte range
# ---------------------------------------------------------------------------

MIN_BYTE: int = 0x00
"""Smallest value a delimiter byte can take."""

MAX_BYTE: int = 0xFF
"""Largest value a delimiter byte can take."""
