#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Distinctness checks for X12 delimiter sets

A delimiter set is usable only when the segment terminator, element
separator and sub-element separator are three different bytes; otherwise
a reader cannot tell where a segment, an element or a component ends.

Two forms of the same check are provided:

* :func:`delimiters_are_distinct`: a predicate that never raises.
* :func:`validate_distinct`: raises
  :class:`~x12_delimiters.exceptions.ValidationError` naming every
  colliding pair.

Design Note
-----------
Both functions accept raw byte values, **not**
:class:`~x12_delimiters.models.records.Delimiters` instances, so that
``utils`` never imports the ``models`` layer built on top of it::

    utils ← models
"""

from __future__ import annotations

import logging

from x12_delimiters.exceptions import ValidationError
from x12_delimiters.utils.parsing import format_byte

logger = logging.getLogger(__name__)


def find_collisions(
    segment_terminator: int,
    element_separator: int,
    sub_element_separator: int,
) -> list[tuple[str, str, int]]:
    """List every pair of delimiters that share a byte

    Returns
    -------
    list[tuple[str, str, int]]
        ``(first_name, second_name, shared_byte)`` for each colliding
        pair, in a fixed order.  Empty when all three are distinct.
    """
    named = (
        ("segment_terminator", segment_terminator),
        ("element_separator", element_separator),
        ("sub_element_separator", sub_element_separator),
    )
    collisions = []
    for i, (first_name, first) in enumerate(named):
        for second_name, second in named[i + 1:]:
            if first == second:
                collisions.append((first_name, second_name, first))
    return collisions


def delimiters_are_distinct(
    segment_terminator: int,
    element_separator: int,
    sub_element_separator: int,
) -> bool:
    """Return ``True`` iff the three delimiter bytes are pairwise distinct

    Examples
    --------
    >>> delimiters_are_distinct(0x7E, 0x2A, 0x3A)
    True
    >>> delimiters_are_distinct(0x7E, 0x7E, 0x3A)
    False
    """
    return (
        segment_terminator != element_separator
        and segment_terminator != sub_element_separator
        and element_separator != sub_element_separator
    )


def validate_distinct(
    segment_terminator: int,
    element_separator: int,
    sub_element_separator: int,
) -> None:
    """Verify that the three delimiter bytes are pairwise distinct

    Parameters
    ----------
    segment_terminator : int
        Segment terminator byte.
    element_separator : int
        Element separator byte.
    sub_element_separator : int
        Sub-element separator byte.

    Raises
    ------
    ValidationError
        If any two delimiters are equal.  The message lists every
        colliding pair and the byte they share.

    Examples
    --------
    >>> validate_distinct(0x7E, 0x2A, 0x3A)
    >>> validate_distinct(0x7E, 0x7E, 0x3A)  # doctest: +ELLIPSIS
    Traceback (most recent call last):
        ...
    x12_delimiters.exceptions.ValidationError: ...
    """
    collisions = find_collisions(
        segment_terminator, element_separator, sub_element_separator
    )
    if collisions:
        details = "; ".join(
            f"{first} and {second} are both {format_byte(value)}"
            for first, second, value in collisions
        )
        raise ValidationError(f"Delimiters must be pairwise distinct: {details}.")
    logger.debug(
        "Delimiters segment=%s element=%s sub-element=%s passed distinctness check.",
        format_byte(segment_terminator),
        format_byte(element_separator),
        format_byte(sub_element_separator),
    )
