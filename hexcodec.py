"""Hex rendering and parsing of digests.

Encoding is lowercase with no separators. Decoding is strict: both cases of
hex digit are accepted, anything else (whitespace included) is rejected, and
so is an odd number of characters.
"""

from __future__ import annotations

import string

from errors import MalformedHexInputError


DIGEST_HEX_LENGTH = 64

_HEX_DIGITS = frozenset(string.hexdigits)


def bytes_to_hex(data) -> str:
    """Return the lowercase hex form of `data`, two characters per byte."""
    return bytes(data).hex()


def hex_to_bytes(text: str) -> bytes:
    """Parse a string of hex digit pairs into bytes."""
    if len(text) % 2 != 0:
        raise MalformedHexInputError(
            f"Hex string must have an even number of characters, got {len(text)}"
        )
    for pos, char in enumerate(text):
        if char not in _HEX_DIGITS:
            raise MalformedHexInputError(
                f"Invalid hex character {char!r} at position {pos}"
            )
    return bytes.fromhex(text)


def hex_to_digest(text: str) -> bytes:
    """Parse a 64-character hex string into a 32-byte digest."""
    if len(text) != DIGEST_HEX_LENGTH:
        raise MalformedHexInputError(
            f"SHA-256 hex digest must be {DIGEST_HEX_LENGTH} characters, got {len(text)}"
        )
    return hex_to_bytes(text)
