"""SHA-256 digest of a complete in-memory message.

High-level flow:

1. Pad the message to a whole number of 512-bit blocks (`padding.py`).
2. For each block, in message order, expand its schedule (`schedule.py`)
   and fold it into the running hash state (`compress.py`).
3. Serialize the final 8-word state big-endian into the 32-byte digest.

The hash state is created inside each call, so concurrent calls do not
share anything mutable.
"""

from __future__ import annotations

from typing import List, Sequence, Tuple

from compress import STATE_WORDS, compress
from hexcodec import bytes_to_hex
from padding import pad_message, split_into_blocks
from schedule import expand_message_schedule


DIGEST_SIZE = 32

# Initial hash values (first 32 bits of the fractional parts of the
# square roots of the first 8 primes 2..19), as per FIPS 180-4.
H_INITIAL: Tuple[int, ...] = (
    0x6A09E667,
    0xBB67AE85,
    0x3C6EF372,
    0xA54FF53A,
    0x510E527F,
    0x9B05688C,
    0x1F83D9AB,
    0x5BE0CD19,
)


def finalize_digest(state: Sequence[int]) -> bytes:
    """Convert a final 8-word hash state into the 32-byte digest."""
    if len(state) != STATE_WORDS:
        raise ValueError(
            f"Hash state must contain {STATE_WORDS} words, got {len(state)}"
        )
    word_size = DIGEST_SIZE // STATE_WORDS
    return b"".join(word.to_bytes(word_size, byteorder="big") for word in state)


def compute_digest(message) -> bytes:
    """Compute the 32-byte SHA-256 digest of `message`.

    `message` may be any bytes-like object; text must be encoded first.
    """
    state: List[int] = list(H_INITIAL)

    # Each block depends on the state left by the previous one.
    for block in split_into_blocks(pad_message(message)):
        compress(state, expand_message_schedule(block))

    return finalize_digest(state)


def compute_hash_hex(message) -> str:
    """Return the SHA-256 digest of `message` as 64 lowercase hex characters."""
    return bytes_to_hex(compute_digest(message))
