"""SHA-256 compression function.

One round mixes the schedule word `w` and round constant `k` into the working
state `(a, b, c, d, e, f, g, h)`:

    S1    = (e >>> 6) ^ (e >>> 11) ^ (e >>> 25)
    ch    = (e & f) ^ (~e & g)
    temp1 = h + S1 + ch + k + w

    S0    = (a >>> 2) ^ (a >>> 13) ^ (a >>> 22)
    maj   = (a & b) ^ (a & c) ^ (b & c)
    temp2 = S0 + maj

    h, g, f, e = g, f, e, d + temp1
    d, c, b, a = c, b, a, temp1 + temp2

After 64 rounds each hash word is incremented by the matching working
variable (the Davies-Meyer feed-forward). All additions are modulo 2**32.
"""

from __future__ import annotations

from typing import List, Sequence, Tuple


MASK32 = 0xFFFFFFFF

NUM_ROUNDS = 64
STATE_WORDS = 8

# FIPS 180-4 round constants k[0..63]: first 32 bits of the fractional parts
# of the cube roots of the first 64 primes.
K_VALUES: Tuple[int, ...] = (
    0x428A2F98, 0x71374491, 0xB5C0FBCF, 0xE9B5DBA5,
    0x3956C25B, 0x59F111F1, 0x923F82A4, 0xAB1C5ED5,
    0xD807AA98, 0x12835B01, 0x243185BE, 0x550C7DC3,
    0x72BE5D74, 0x80DEB1FE, 0x9BDC06A7, 0xC19BF174,
    0xE49B69C1, 0xEFBE4786, 0x0FC19DC6, 0x240CA1CC,
    0x2DE92C6F, 0x4A7484AA, 0x5CB0A9DC, 0x76F988DA,
    0x983E5152, 0xA831C66D, 0xB00327C8, 0xBF597FC7,
    0xC6E00BF3, 0xD5A79147, 0x06CA6351, 0x14292967,
    0x27B70A85, 0x2E1B2138, 0x4D2C6DFC, 0x53380D13,
    0x650A7354, 0x766A0ABB, 0x81C2C92E, 0x92722C85,
    0xA2BFE8A1, 0xA81A664B, 0xC24B8B70, 0xC76C51A3,
    0xD192E819, 0xD6990624, 0xF40E3585, 0x106AA070,
    0x19A4C116, 0x1E376C08, 0x2748774C, 0x34B0BCB5,
    0x391C0CB3, 0x4ED8AA4A, 0x5B9CCA4F, 0x682E6FF3,
    0x748F82EE, 0x78A5636F, 0x84C87814, 0x8CC70208,
    0x90BEFFFA, 0xA4506CEB, 0xBEF9A3F7, 0xC67178F2,
)


def rotr(x: int, n: int) -> int:
    """Right-rotate a 32-bit word `x` by `n` bits."""
    x &= MASK32
    return ((x >> n) | (x << (32 - n))) & MASK32


def big_sigma0(a: int) -> int:
    """SHA-256 function Σ0 applied to working word `a`."""
    return rotr(a, 2) ^ rotr(a, 13) ^ rotr(a, 22)


def big_sigma1(e: int) -> int:
    """SHA-256 function Σ1 applied to working word `e`."""
    return rotr(e, 6) ^ rotr(e, 11) ^ rotr(e, 25)


def choose(e: int, f: int, g: int) -> int:
    """Bitwise select: bits of `f` where `e` is set, bits of `g` elsewhere."""
    return ((e & f) ^ (~e & g)) & MASK32


def majority(a: int, b: int, c: int) -> int:
    """Bitwise majority vote of `a`, `b` and `c`."""
    return (a & b) ^ (a & c) ^ (b & c)


def compression_round(
    a: int,
    b: int,
    c: int,
    d: int,
    e: int,
    f: int,
    g: int,
    h: int,
    w: int,
    k: int,
) -> Tuple[int, int, int, int, int, int, int, int]:
    """Perform one SHA-256 compression round.

    Parameters
    ----------
    a, b, c, d, e, f, g, h : int
        32-bit words of the current working state.
    w : int
        Message schedule word `w[i]`.
    k : int
        Round constant `k[i]`.

    Returns
    -------
    tuple[int, ...]
        The working state after the round, every word reduced modulo 2**32.
    """
    temp1 = (h + big_sigma1(e) + choose(e, f, g) + k + w) & MASK32
    temp2 = (big_sigma0(a) + majority(a, b, c)) & MASK32

    return (
        (temp1 + temp2) & MASK32,
        a,
        b,
        c,
        (d + temp1) & MASK32,
        e,
        f,
        g,
    )


def compress64(
    a: int,
    b: int,
    c: int,
    d: int,
    e: int,
    f: int,
    g: int,
    h: int,
    ws: Sequence[int],
) -> Tuple[int, int, int, int, int, int, int, int]:
    """Run all 64 rounds for one block and return the final working state.

    The feed-forward into the hash state is not applied here; see `compress`.
    """
    if len(ws) != NUM_ROUNDS:
        raise ValueError(
            f"compress64 expects {NUM_ROUNDS} message schedule words, got {len(ws)}"
        )

    work = (a, b, c, d, e, f, g, h)
    for i in range(NUM_ROUNDS):
        work = compression_round(*work, ws[i] & MASK32, K_VALUES[i])
    return work


def compress(state: List[int], schedule: Sequence[int]) -> None:
    """Fold one block's 64-word schedule into the 8-word hash `state` in place."""
    if len(state) != STATE_WORDS:
        raise ValueError(
            f"Hash state must contain {STATE_WORDS} words, got {len(state)}"
        )

    work = compress64(*state, schedule)
    for j in range(STATE_WORDS):
        state[j] = (state[j] + work[j]) & MASK32
