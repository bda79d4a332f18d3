#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
The X12 delimiter set model

:class:`Delimiters` is a frozen dataclass holding the three single-byte
delimiters of an X12 interchange.  It can be built from explicit values,
from the standard defaults, or read out of an ISA segment, and it carries
no constraint on its values: whether the three bytes are usable together
is answered separately by :meth:`Delimiters.are_valid`.

Byte values are stored as ``int`` (``0`` to ``255``), the same type Python
yields when indexing ``bytes``, so ``data[i] == delimiters.element_separator``
compares directly.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from x12_delimiters.utils.constants import (
    DEFAULT_ELEMENT_SEPARATOR,
    DEFAULT_SEGMENT_TERMINATOR,
    DEFAULT_SUB_ELEMENT_SEPARATOR,
)
from x12_delimiters.utils.parsing import coerce_byte, format_byte, read_isa_delimiters
from x12_delimiters.utils.validation import delimiters_are_distinct, validate_distinct


@dataclass(frozen=True, repr=False)
class Delimiters:
    """Segment terminator, element separator and sub-element separator

    Parameters
    ----------
    segment_terminator : int | bytes
        Byte that ends a segment (``~`` by default).
    element_separator : int | bytes
        Byte between elements of a segment (``*`` by default).
    sub_element_separator : int | bytes
        Byte between components of a composite element (``:`` by
        default).  Carried in the ISA segment as ISA16.

    Each argument may be an ``int`` in ``[0, 255]`` or a one-byte
    bytes-like object; it is stored as ``int``.  Any byte is accepted,
    including duplicates.

    Examples
    --------
    >>> d = Delimiters(b"~", b"*", b":")
    >>> d.segment_terminator
    126
    >>> d.are_valid()
    True
    >>> Delimiters(b"~", b"~", b":").are_valid()
    False
    """

    segment_terminator: int
    element_separator: int
    sub_element_separator: int

    def __post_init__(self) -> None:
        for name in ("segment_terminator", "element_separator", "sub_element_separator"):
            object.__setattr__(self, name, coerce_byte(getattr(self, name), label=name))

    # -- constructors --------------------------------------------------------

    @classmethod
    def new(
        cls,
        segment_terminator: Any,
        element_separator: Any,
        sub_element_separator: Any,
    ) -> Delimiters:
        """Build a delimiter set from three explicit bytes, unchecked."""
        return cls(segment_terminator, element_separator, sub_element_separator)

    @classmethod
    def default(cls) -> Delimiters:
        """Return the standard X12 delimiters ``~``, ``*`` and ``:``."""
        return cls(
            DEFAULT_SEGMENT_TERMINATOR,
            DEFAULT_ELEMENT_SEPARATOR,
            DEFAULT_SUB_ELEMENT_SEPARATOR,
        )

    @classmethod
    def from_isa(cls, isa_segment: Any) -> Delimiters:
        """Read the delimiters from the fixed offsets of an ISA segment

        The element separator is taken from offset 3, the sub-element
        separator (ISA16) from offset 104 and the segment terminator from
        offset 105.  Offsets, not delimiter identity, drive extraction, so
        any delimiter scheme is read correctly.  Bytes after offset 105
        are ignored.

        Parameters
        ----------
        isa_segment : bytes-like | numpy.ndarray
            Buffer starting with the ISA segment.  Viewed without copying
            and never modified.

        Returns
        -------
        Delimiters
            The three delimiters found in the segment.  They are not
            checked for distinctness; call :meth:`are_valid`.

        Raises
        ------
        TooShortError
            If the buffer holds fewer than 106 bytes.
        InvalidHeaderError
            If the buffer does not start with ``ISA``.
        TypeError
            If *isa_segment* is not bytes-like.
        """
        segment_terminator, element_separator, sub_element_separator = (
            read_isa_delimiters(isa_segment)
        )
        return cls(segment_terminator, element_separator, sub_element_separator)

    # -- checks --------------------------------------------------------------

    def are_valid(self) -> bool:
        """Return ``True`` iff all three delimiters are different bytes."""
        return delimiters_are_distinct(
            self.segment_terminator,
            self.element_separator,
            self.sub_element_separator,
        )

    def validate(self) -> None:
        """Raise :class:`ValidationError` unless :meth:`are_valid` holds."""
        validate_distinct(
            self.segment_terminator,
            self.element_separator,
            self.sub_element_separator,
        )

    # -- views ---------------------------------------------------------------

    def as_bytes(self) -> bytes:
        """Return the delimiters in ISA order: element, sub-element, segment

        >>> Delimiters.default().as_bytes()
        b'*:~'
        """
        return bytes(
            (self.element_separator, self.sub_element_separator, self.segment_terminator)
        )

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}("
            f"segment_terminator={format_byte(self.segment_terminator)}, "
            f"element_separator={format_byte(self.element_separator)}, "
            f"sub_element_separator={format_byte(self.sub_element_separator)})"
        )


DEFAULT_DELIMITERS: Delimiters = Delimiters.default()
"""Shared instance of the standard ``~`` / ``*`` / ``:`` delimiters."""
