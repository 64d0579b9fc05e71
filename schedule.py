"""SHA-256 message schedule expansion."""

from __future__ import annotations

from typing import List

from compress import MASK32, NUM_ROUNDS, rotr


def _shr(x: int, n: int) -> int:
    """Right-shift a 32-bit word `x` by `n` bits."""
    x &= MASK32
    return x >> n


def small_sigma0(x: int) -> int:
    """SHA-256 function σ0 used in the message schedule."""
    return (rotr(x, 7) ^ rotr(x, 18) ^ _shr(x, 3)) & MASK32


def small_sigma1(x: int) -> int:
    """SHA-256 function σ1 used in the message schedule."""
    return (rotr(x, 17) ^ rotr(x, 19) ^ _shr(x, 10)) & MASK32


def expand_message_schedule(block: bytes) -> List[int]:
    """Given a 512-bit block, build the 64-word message schedule w[0..63].

    Words 0..15 are the big-endian 4-byte groups of the block; the rest follow
    the recurrence `w[i] = w[i-16] + σ0(w[i-15]) + w[i-7] + σ1(w[i-2])`.
    """
    if len(block) != 64:
        raise ValueError(f"Expected 64-byte block, got {len(block)}")

    w: List[int] = [0] * NUM_ROUNDS

    for i in range(16):
        w[i] = int.from_bytes(block[4 * i : 4 * (i + 1)], byteorder="big")

    for i in range(16, NUM_ROUNDS):
        s0 = small_sigma0(w[i - 15])
        s1 = small_sigma1(w[i - 2])
        w[i] = (w[i - 16] + s0 + w[i - 7] + s1) & MASK32

    return w
