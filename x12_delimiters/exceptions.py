#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Custom exception hierarchy for the x12_delimiters package

Failures fall into two groups.  Reading an ISA segment either succeeds or
raises a :class:`ParseError`, whose two subclasses separate a buffer that
is too short to hold the delimiter offsets from one that is not an ISA
segment at all.  Checking an already-built delimiter set for duplicate
bytes raises :class:`ValidationError`.  Both groups share
:class:`X12DelimitersError`.

Exception Hierarchy
-------------------
::

    X12DelimitersError
    ├── ParseError              # Delimiters could not be read from the ISA
    │   ├── TooShortError       # Buffer shorter than the ISA layout
    │   └── InvalidHeaderError  # Buffer does not start with ``ISA``
    └── ValidationError         # Delimiters are not pairwise distinct
"""

from __future__ import annotations

from enum import Enum

from x12_delimiters.utils.constants import ISA_MIN_LENGTH, ISA_SEGMENT_ID


class ParseErrorKind(Enum):
    """The two ways extracting delimiters from an ISA segment can fail"""

    TOO_SHORT = "TooShort"
    INVALID_HEADER = "InvalidHeader"


class X12DelimitersError(Exception):
    """Common parent of ISA parse failures and delimiter collisions

    Passing something that is not a byte or not bytes-like is a usage
    error and raises the built-in ``TypeError`` or ``ValueError`` instead.
    """


class ParseError(X12DelimitersError):
    """Raised when delimiters cannot be extracted from an ISA segment

    Never raised directly; one of the two subclasses below is raised, and
    :attr:`kind` tells them apart for callers that prefer matching on a
    value rather than on the class.
    """

    kind: ParseErrorKind


class TooShortError(ParseError):
    """Raised when the buffer cannot contain every delimiter offset

    Parameters
    ----------
    length : int
        Length of the buffer that was supplied.
    required : int, optional
        Minimum length needed, :data:`ISA_MIN_LENGTH` (106) by default.
    """

    kind = ParseErrorKind.TOO_SHORT

    def __init__(self, length: int, required: int = ISA_MIN_LENGTH) -> None:
        self.length = length
        self.required = required
        super().__init__(
            f"ISA segment must be at least {required} bytes long to "
            f"extract delimiters (got {length})"
        )


class InvalidHeaderError(ParseError):
    """Raised when the buffer does not begin with the ``ISA`` marker

    Parameters
    ----------
    found : bytes
        The leading bytes that were found in place of ``ISA``.
    """

    kind = ParseErrorKind.INVALID_HEADER

    def __init__(self, found: bytes) -> None:
        self.found = found
        super().__init__(
            f"Expected segment identifier {ISA_SEGMENT_ID!r} at the start "
            f"of the buffer, found {found!r}"
        )


class ValidationError(X12DelimitersError):
    """Raised when a delimiter set fails the distinctness check

    A ``ValidationError`` means the delimiters were *readable* but two or
    more of them share the same byte, which would make segment, element
    and sub-element boundaries ambiguous.

    Parameters
    ----------
    message : str
        Description of the failed check, naming each colliding pair and
        the shared byte.
    """
