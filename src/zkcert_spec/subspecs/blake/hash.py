"""
A minimal Python specification of the BLAKE-512 hash function.

BLAKE is the SHA-3 finalist by Aumasson, Henzen, Meier and Phan
(https://www.aumasson.jp/blake/blake.pdf). This is the final-round version
with 16 rounds and no salt, which is what Baby Jubjub EdDSA implementations
use to expand private keys. It is unrelated to BLAKE2.

### Compression

The chaining value `h` (8 words), the bit counter `t` (128 bits) and a
1024-bit message block are loaded into a 16-word state:

    v[0..7]   = h
    v[8..11]  = C[0..3]
    v[12..13] = t_lo ^ C[4], t_lo ^ C[5]
    v[14..15] = t_hi ^ C[6], t_hi ^ C[7]

Each round applies `G` to the four columns and then the four diagonals of the
4x4 state, selecting message words through the round's `SIGMA` permutation.
The new chaining value is `h[i] ^ v[i] ^ v[i + 8]`.

### Padding

The message is followed by a `1` bit, zeros up to 895 bits modulo 1024, a
final `1` bit and the 128-bit big-endian message length. The counter of a
block is the number of message bits up to and including that block, or 0 for
a block that holds padding only.
"""

from __future__ import annotations

from typing import List

from typing_extensions import Final

BLOCK_BYTES: Final = 128
"""Size of a message block in bytes."""

DIGEST_BYTES: Final = 64
"""Size of the digest in bytes."""

ROUNDS: Final = 16
"""Number of rounds of the compression function."""

_MASK: Final = (1 << 64) - 1

IV: Final = (
    0x6A09E667F3BCC908,
    0xBB67AE8584CAA73B,
    0x3C6EF372FE94F82B,
    0xA54FF53A5F1D36F1,
    0x510E527FADE682D1,
    0x9B05688C2B3E6C1F,
    0x1F83D9ABFB41BD6B,
    0x5BE0CD19137E2179,
)
"""Initial chaining value, shared with SHA-512."""

C: Final = (
    0x243F6A8885A308D3,
    0x13198A2E03707344,
    0xA4093822299F31D0,
    0x082EFA98EC4E6C89,
    0x452821E638D01377,
    0xBE5466CF34E90C6C,
    0xC0AC29B7C97C50DD,
    0x3F84D5B5B5470917,
    0x9216D5D98979FB1B,
    0xD1310BA698DFB5AC,
    0x2FFD72DBD01ADFB7,
    0xB8E1AFED6A267E96,
    0xBA7C9045F12C7F99,
    0x24A19947B3916CF7,
    0x0801F2E2858EFC16,
    0x636920D871574E69,
)
"""Round constants: the leading fractional digits of pi."""

SIGMA: Final = (
    (0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 15),
    (14, 10, 4, 8, 9, 15, 13, 6, 1, 12, 0, 2, 11, 7, 5, 3),
    (11, 8, 12, 0, 5, 2, 15, 13, 10, 14, 3, 6, 7, 1, 9, 4),
    (7, 9, 3, 1, 13, 12, 11, 14, 2, 6, 5, 10, 4, 0, 15, 8),
    (9, 0, 5, 7, 2, 4, 10, 15, 14, 1, 11, 12, 6, 8, 3, 13),
    (2, 12, 6, 10, 0, 11, 8, 3, 4, 13, 7, 5, 15, 14, 1, 9),
    (12, 5, 1, 15, 14, 13, 4, 10, 0, 7, 6, 3, 9, 2, 8, 11),
    (13, 11, 7, 14, 12, 1, 3, 9, 5, 0, 15, 4, 8, 6, 2, 10),
    (6, 15, 14, 9, 11, 3, 0, 8, 12, 2, 13, 7, 1, 4, 10, 5),
    (10, 2, 8, 4, 7, 6, 1, 5, 15, 11, 9, 14, 3, 12, 13, 0),
)
"""Message word permutations; round `r` uses `SIGMA[r % 10]`."""

# (a, b, c, d) state indices of the eight G applications of a round:
# four columns, then four diagonals.
_G_LANES: Final = (
    (0, 4, 8, 12),
    (1, 5, 9, 13),
    (2, 6, 10, 14),
    (3, 7, 11, 15),
    (0, 5, 10, 15),
    (1, 6, 11, 12),
    (2, 7, 8, 13),
    (3, 4, 9, 14),
)


def _rotr(x: int, n: int) -> int:
    return ((x >> n) | (x << (64 - n))) & _MASK


def _compress(h: List[int], block: bytes, counter: int) -> List[int]:
    """Run the compression function on one block and return the new chaining value."""
    m = [int.from_bytes(block[8 * i : 8 * i + 8], byteorder="big") for i in range(16)]

    t_lo = counter & _MASK
    t_hi = counter >> 64
    v = [
        *h,
        C[0],
        C[1],
        C[2],
        C[3],
        t_lo ^ C[4],
        t_lo ^ C[5],
        t_hi ^ C[6],
        t_hi ^ C[7],
    ]

    for r in range(ROUNDS):
        sigma = SIGMA[r % 10]
        for i, (a, b, c, d) in enumerate(_G_LANES):
            x, y = sigma[2 * i], sigma[2 * i + 1]

            v[a] = (v[a] + v[b] + (m[x] ^ C[y])) & _MASK
            v[d] = _rotr(v[d] ^ v[a], 32)
            v[c] = (v[c] + v[d]) & _MASK
            v[b] = _rotr(v[b] ^ v[c], 25)

            v[a] = (v[a] + v[b] + (m[y] ^ C[x])) & _MASK
            v[d] = _rotr(v[d] ^ v[a], 16)
            v[c] = (v[c] + v[d]) & _MASK
            v[b] = _rotr(v[b] ^ v[c], 11)

    return [h[i] ^ v[i] ^ v[i + 8] for i in range(8)]


def _pad(data: bytes) -> bytes:
    bit_length = 8 * len(data)
    padded = bytearray(data)
    padded.append(0x80)
    while len(padded) % BLOCK_BYTES != BLOCK_BYTES - 16:
        padded.append(0x00)
    padded[-1] |= 0x01
    padded += bit_length.to_bytes(16, byteorder="big")
    return bytes(padded)


def blake512(data: bytes) -> bytes:
    """
    Hash `data` with BLAKE-512.

    Returns:
        The 64-byte digest.
    """
    bit_length = 8 * len(data)
    padded = _pad(data)

    h = list(IV)
    for offset in range(0, len(padded), BLOCK_BYTES):
        start = 8 * offset
        counter = min(bit_length, start + 8 * BLOCK_BYTES) if start < bit_length else 0
        h = _compress(h, padded[offset : offset + BLOCK_BYTES], counter)

    return b"".join(word.to_bytes(8, byteorder="big") for word in h)
