"""SHA-256 message padding.

The padded buffer is `message || 0x80 || 0x00 * k || L`, where `L` is the
original message length in bits as a 64-bit big-endian integer and `k` is the
smallest count making the total a multiple of 64 bytes. Messages whose length
is more than 55 modulo 64 do not leave room for the 9 trailer bytes in their
last block, so they get one extra block.
"""

from __future__ import annotations

from typing import Iterator

from errors import OversizedMessageError


BLOCK_SIZE = 64
LENGTH_FIELD_SIZE = 8
MAX_MESSAGE_BITS = 2**64 - 1

# 0x80 terminator plus the length field.
_TRAILER_SIZE = 1 + LENGTH_FIELD_SIZE


def _as_bytes(message) -> bytes:
    if isinstance(message, str):
        raise TypeError("SHA-256 operates on bytes; encode text before hashing")
    return memoryview(message).tobytes()


def message_bit_length(message_length: int) -> int:
    """Return the bit-length of a `message_length`-byte message.

    Raises `OversizedMessageError` if it does not fit the 64-bit length field.
    """
    bits = message_length * 8
    if bits > MAX_MESSAGE_BITS:
        raise OversizedMessageError(
            f"Message of {message_length} bytes exceeds the SHA-256 limit of "
            f"{MAX_MESSAGE_BITS} bits"
        )
    return bits


def padded_length(message_length: int) -> int:
    """Return the length in bytes of the padded form of a message."""
    if message_length < 0:
        raise ValueError(f"Message length must be non-negative, got {message_length}")
    blocks = (message_length + _TRAILER_SIZE + BLOCK_SIZE - 1) // BLOCK_SIZE
    return blocks * BLOCK_SIZE


def pad_message(message) -> bytes:
    """Pad `message` to a multiple of 64 bytes according to FIPS 180-4."""
    data = _as_bytes(message)
    bit_length = message_bit_length(len(data))

    zero_fill = padded_length(len(data)) - len(data) - _TRAILER_SIZE

    padded = bytearray(data)
    padded.append(0x80)
    padded.extend(b"\x00" * zero_fill)
    padded.extend(bit_length.to_bytes(LENGTH_FIELD_SIZE, byteorder="big"))
    return bytes(padded)


def split_into_blocks(padded: bytes) -> Iterator[bytes]:
    """Yield successive 64-byte blocks of an already padded buffer."""
    if len(padded) % BLOCK_SIZE != 0:
        raise ValueError(
            f"Padded message length must be a multiple of {BLOCK_SIZE} bytes, "
            f"got {len(padded)}"
        )
    for i in range(0, len(padded), BLOCK_SIZE):
        yield padded[i : i + BLOCK_SIZE]
