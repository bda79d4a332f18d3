#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Low-level byte helpers for reading delimiters out of an ISA segment

All buffer handling lives here so that the model layer never touches raw
offsets.  Callers hand in whatever they already hold in memory (``bytes``,
``bytearray``, ``memoryview``, ``mmap``, a NumPy ``uint8`` array); it is
wrapped in a zero-copy ``uint8`` view, read at the fixed ISA offsets from
:mod:`x12_delimiters.utils.constants`, and released.  The caller's buffer
is never copied, kept, or written to.

Only the first :data:`ISA_MIN_LENGTH` bytes are examined.  Anything after
the segment terminator (a CR/LF pair, the GS segment, the rest of the
interchange) is ignored.
"""

from __future__ import annotations

import logging
import operator
from typing import Any

import numpy as np

from x12_delimiters.exceptions import InvalidHeaderError, TooShortError
from x12_delimiters.utils.constants import (
    ISA_ELEMENT_SEPARATOR_INDEX,
    ISA_MIN_LENGTH,
    ISA_SEGMENT_ID,
    ISA_SEGMENT_TERMINATOR_INDEX,
    ISA_SUB_ELEMENT_SEPARATOR_INDEX,
    MAX_BYTE,
    MIN_BYTE,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Single bytes
# ---------------------------------------------------------------------------

def coerce_byte(value: Any, label: str = "delimiter") -> int:
    """Normalise a delimiter argument to an integer byte value

    Parameters
    ----------
    value : int | bytes
        Either an integer in ``[0, 255]`` or a bytes-like object of
        length one (``b"~"``).
    label : str, optional
        Name of the argument for error messages.

    Returns
    -------
    int
        The byte value.

    Raises
    ------
    TypeError
        If *value* is neither an integer nor bytes-like.  ``str`` and
        ``bool`` are rejected explicitly.
    ValueError
        If an integer is outside ``[0, 255]`` or a bytes-like value is not
        exactly one byte long.

    Examples
    --------
    >>> coerce_byte(b"~")
    126
    >>> coerce_byte(0x2A)
    42
    """
    if isinstance(value, (bytes, bytearray, memoryview)):
        raw = bytes(value)
        if len(raw) != 1:
            raise ValueError(
                f"{label} must be exactly one byte, got {len(raw)} bytes: {raw!r}"
            )
        return raw[0]

    if isinstance(value, (str, bool)):
        raise TypeError(
            f"{label} must be an int or a single byte, got {type(value).__name__} {value!r}"
        )

    try:
        number = operator.index(value)
    except TypeError as exc:
        raise TypeError(
            f"{label} must be an int or a single byte, got {type(value).__name__}"
        ) from exc

    if not (MIN_BYTE <= number <= MAX_BYTE):
        raise ValueError(
            f"{label}={number} is outside the byte range [{MIN_BYTE}, {MAX_BYTE}]."
        )
    return number


def format_byte(value: int) -> str:
    """Render a byte for messages: the character if printable, else hex

    Examples
    --------
    >>> format_byte(0x7E)
    "'~'"
    >>> format_byte(0x0A)
    '0x0A'
    """
    if 0x20 < value < 0x7F:
        return repr(chr(value))
    return f"0x{value:02X}"


# ---------------------------------------------------------------------------
# Buffers
# ---------------------------------------------------------------------------

def as_byte_view(buffer: Any) -> np.ndarray:
    """Return a zero-copy one-dimensional ``uint8`` view of *buffer*

    Parameters
    ----------
    buffer : bytes-like | numpy.ndarray
        Any object supporting the buffer protocol, or a 1-D ``uint8``
        NumPy array (returned unchanged).

    Returns
    -------
    numpy.ndarray
        A ``uint8`` array sharing memory with *buffer*, strided when
        *buffer* is a non-contiguous view.  Read-only when
        the source is read-only (``bytes``).

    Raises
    ------
    TypeError
        If *buffer* is a ``str``, does not support the buffer protocol, or
        is an array (or non-contiguous view) of the wrong dtype or shape.
    """
    if isinstance(buffer, np.ndarray):
        if buffer.ndim != 1 or buffer.dtype != np.uint8:
            raise TypeError(
                f"ISA array must be one-dimensional uint8, got "
                f"{buffer.ndim}-D {buffer.dtype}."
            )
        return buffer

    if isinstance(buffer, str):
        raise TypeError(
            "ISA segment must be bytes-like, not str; encode it first "
            "(e.g. text.encode('ascii'))."
        )

    try:
        view = memoryview(buffer)
    except TypeError as exc:
        raise TypeError(
            f"ISA segment must be a bytes-like object, got {type(buffer).__name__}"
        ) from exc

    if view.nbytes == 0:
        return np.empty(0, dtype=np.uint8)
    if not view.c_contiguous:
        # strided views (e.g. memoryview(data)[::2]) cannot go through frombuffer
        strided = np.asarray(view)
        if strided.ndim != 1 or strided.dtype != np.uint8:
            raise TypeError(
                f"Non-contiguous ISA buffer must be one-dimensional bytes, got "
                f"{strided.ndim}-D {strided.dtype}."
            )
        return strided
    return np.frombuffer(view, dtype=np.uint8)


# ---------------------------------------------------------------------------
# ISA extraction
# ---------------------------------------------------------------------------

def check_isa_header(view: np.ndarray) -> None:
    """Verify that *view* is long enough and opens with ``ISA``

    The length check runs first, so a short buffer is reported as too
    short regardless of its first bytes.

    Parameters
    ----------
    view : numpy.ndarray
        ``uint8`` view produced by :func:`as_byte_view`.

    Raises
    ------
    TooShortError
        If ``len(view) < ISA_MIN_LENGTH``.
    InvalidHeaderError
        If the first three bytes are not exactly ``b"ISA"``.
    """
    if view.size < ISA_MIN_LENGTH:
        raise TooShortError(int(view.size))

    marker = view[: len(ISA_SEGMENT_ID)].tobytes()
    if marker != ISA_SEGMENT_ID:
        raise InvalidHeaderError(marker)


def read_isa_delimiters(buffer: Any) -> tuple[int, int, int]:
    """Read the three delimiter bytes from an ISA segment

    Parameters
    ----------
    buffer : bytes-like | numpy.ndarray
        The ISA segment, optionally followed by further data.

    Returns
    -------
    tuple[int, int, int]
        ``(segment_terminator, element_separator, sub_element_separator)``
        in that order.

    Raises
    ------
    TooShortError
        If *buffer* is shorter than 106 bytes.
    InvalidHeaderError
        If *buffer* does not start with ``ISA``.
    TypeError
        If *buffer* is not bytes-like (see :func:`as_byte_view`).

    Examples
    --------
    >>> isa = (b"ISA*00*          *00*          *ZZ*SENDERID       "
    ...        b"*ZZ*RECEIVERID     *250403*0856*U*00501*000000001*0*P*:~")
    >>> read_isa_delimiters(isa)
    (126, 42, 58)
    """
    view = as_byte_view(buffer)
    check_isa_header(view)

    segment_terminator = int(view[ISA_SEGMENT_TERMINATOR_INDEX])
    element_separator = int(view[ISA_ELEMENT_SEPARATOR_INDEX])
    sub_element_separator = int(view[ISA_SUB_ELEMENT_SEPARATOR_INDEX])

    logger.debug(
        "Read ISA delimiters from %d-byte buffer: segment=%s element=%s sub-element=%s.",
        view.size,
        format_byte(segment_terminator),
        format_byte(element_separator),
        format_byte(sub_element_separator),
    )
    return segment_terminator, element_separator, sub_element_separator
