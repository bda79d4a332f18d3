#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
x12_delimiters - read and check the delimiters of an X12 EDI interchange

Every X12 interchange opens with a fixed-width ISA segment whose layout
pins the element separator, the sub-element separator (ISA16) and the
segment terminator to known byte offsets.  This package reads those three
bytes out of an in-memory buffer and wraps them in an immutable value.

Modules
-------
models
    The :class:`Delimiters` frozen dataclass.
utils
    ISA layout constants, byte-buffer helpers and distinctness checks.
exceptions
    :class:`X12DelimitersError` and its subclasses.

Examples
--------
>>> from x12_delimiters import Delimiters
>>> isa = (b"ISA*00*          *00*          *ZZ*SENDERID       "
...        b"*ZZ*RECEIVERID     *250403*0856*U*00501*000000001*0*P*:~")
>>> d = Delimiters.from_isa(isa)
>>> d
Delimiters(segment_terminator='~', element_separator='*', sub_element_separator=':')
>>> d == Delimiters.default()
True
"""

from __future__ import annotations

__version__ = "0.1.0"

from x12_delimiters.models.records import DEFAULT_DELIMITERS, Delimiters
from x12_delimiters.utils.constants import (
    ISA_ELEMENT_SEPARATOR_INDEX,
    ISA_MIN_LENGTH,
    ISA_SEGMENT_TERMINATOR_INDEX,
    ISA_SUB_ELEMENT_SEPARATOR_INDEX,
)
from x12_delimiters.exceptions import (
    X12DelimitersError,
    ParseError,
    ParseErrorKind,
    TooShortError,
    InvalidHeaderError,
    ValidationError,
)

__all__ = [
    # Version
    "__version__",
    # Model
    "Delimiters",
    "DEFAULT_DELIMITERS",
    # ISA layout
    "ISA_MIN_LENGTH",
    "ISA_ELEMENT_SEPARATOR_INDEX",
    "ISA_SUB_ELEMENT_SEPARATOR_INDEX",
    "ISA_SEGMENT_TERMINATOR_INDEX",
    # Exceptions
    "X12DelimitersError",
    "ParseError",
    "ParseErrorKind",
    "TooShortError",
    "InvalidHeaderError",
    "ValidationError",
]
