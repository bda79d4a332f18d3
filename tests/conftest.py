#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Shared pytest fixtures for x12_delimiters tests

Provides synthetic ISA segments in several delimiter schemes, plus
malformed buffers for the error paths, without requiring real EDI files.
"""

from __future__ import annotations

import pytest

ISA_STANDARD = (
    b"ISA*00*          *00*          *ZZ*SENDERID       *ZZ*RECEIVERID     "
    b"*250403*0856*U*00501*000000001*0*P*:~"
)
"""A 106-byte ISA segment using ``*`` / ``:`` / ``~``."""

ISA_CARET = (
    ISA_STANDARD.replace(b"*", b"^").replace(b":", b"&").replace(b"~", b"!")
)
"""The standard segment rewritten with ``^`` / ``&`` / ``!``."""

ISA_ALTERNATE = (
    b"ISA^00^          ^00^          ^ZZ^SENDERID       ^ZZ^RECEIVERID     "
    b"^250403^0856^U^00401^000000002^1^T^>}"
)
"""A 106-byte ISA segment using ``^`` / ``>`` / ``}``."""


@pytest.fixture
def isa_standard() -> bytes:
    """ISA segment with the standard delimiters"""
    return ISA_STANDARD


@pytest.fixture
def isa_caret() -> bytes:
    """ISA segment with ``^`` / ``&`` / ``!`` delimiters"""
    return ISA_CARET


@pytest.fixture
def isa_alternate() -> bytes:
    """ISA segment with ``^`` / ``>`` / ``}`` delimiters"""
    return ISA_ALTERNATE


@pytest.fixture
def isa_with_interchange() -> bytes:
    """ISA segment followed by CR/LF and a GS segment"""
    return ISA_STANDARD + b"\r\nGS*HC*SENDERID*RECEIVERID*20250403*0856*1*X*005010X222A1~"


@pytest.fixture
def isa_too_short() -> bytes:
    """A truncated ISA segment"""
    return b"ISA*00*"


@pytest.fixture
def isa_wrong_marker() -> bytes:
    """A full-length buffer that starts with ``GSX`` instead of ``ISA``"""
    return b"GSX" + ISA_STANDARD[3:]


def build_isa(
    element_separator: int,
    sub_element_separator: int,
    segment_terminator: int,
    trailing: bytes = b"",
) -> bytes:
    """Rewrite the standard ISA segment with the given delimiter bytes"""
    isa = bytearray(ISA_STANDARD)
    for index, value in enumerate(ISA_STANDARD[:-2]):
        if value == ord("*"):
            isa[index] = element_separator
    isa[-2] = sub_element_separator
    isa[-1] = segment_terminator
    return bytes(isa) + trailing


@pytest.fixture
def isa_builder():
    """Factory for synthetic ISA segments with arbitrary delimiters"""
    return build_isa
