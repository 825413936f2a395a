"""
EdDSA over Baby Jubjub with Poseidon as the challenge hash.

### Signing

1.  `h = H512(private_key)`; the first half, pruned, gives the scalar `s`
    and the public key `A = s * BASE8`.
2.  The nonce is `r = H512(h[32:] || msg) mod SUBORDER` and `R8 = r * BASE8`.
3.  The challenge is `hm = Poseidon(R8.x, R8.y, A.x, A.y, msg)`.
4.  `S = r + hm * 8 * s mod SUBORDER`.

### Verification

`S * BASE8 == R8 + (8 * hm) * A`.

Only the nonce and scalar derivation use the byte-oriented hash `H512`
(BLAKE-512); everything a circuit checks uses Poseidon. Keys and signatures
are interchangeable with the iden3 implementations.
"""

from __future__ import annotations

import secrets

from pydantic import Field

from zkcert_spec.types import StrictBaseModel

from ..blake import blake512
from ..bn254 import Fr
from ..poseidon import poseidon_hash
from .curve import BASE8, SUBORDER, Point

PRIVATE_KEY_LENGTH = 32
"""Length of a private key in bytes."""


def _prune(buf: bytes) -> bytes:
    """Clamp a 32-byte scalar buffer: clear the 3 low bits, clear bit 255, set bit 254."""
    pruned = bytearray(buf[:32])
    pruned[0] &= 0xF8
    pruned[31] &= 0x7F
    pruned[31] |= 0x40
    return bytes(pruned)


class PublicKey(Point):
    """A Baby Jubjub public key `A = s * BASE8`."""

    @classmethod
    def from_point(cls, point: Point) -> PublicKey:
        """Wrap an affine point."""
        return cls(x=point.x, y=point.y)

    def point(self) -> Point:
        """Return the key as a plain curve point."""
        return Point(x=self.x, y=self.y)

    def verify_poseidon(self, msg: Fr, signature: Signature) -> bool:
        """
        Verify a Poseidon EdDSA signature over `msg`.

        Malformed signatures (scalar not below `SUBORDER`, nonce point off the
        curve) verify as `False`.
        """
        if int(signature.s) >= SUBORDER:
            return False
        if not signature.r8.in_curve():
            return False

        hm = poseidon_hash([signature.r8.x, signature.r8.y, self.x, self.y, msg])

        left = BASE8.mul(int(signature.s))
        right = signature.r8 + self.point().mul(8 * int(hm))
        return left == right


class Signature(StrictBaseModel):
    """An EdDSA signature: the nonce point `R8` and the scalar `S`."""

    r8: Point
    s: Fr


class PrivateKey(StrictBaseModel):
    """A 32-byte Baby Jubjub private key."""

    key: bytes = Field(min_length=PRIVATE_KEY_LENGTH, max_length=PRIVATE_KEY_LENGTH, repr=False)

    @classmethod
    def generate(cls) -> PrivateKey:
        """Draw a fresh key from the operating system CSPRNG."""
        return cls(key=secrets.token_bytes(PRIVATE_KEY_LENGTH))

    def scalar(self) -> int:
        """The secret scalar `s` derived from the key."""
        pruned = _prune(blake512(self.key))
        return int.from_bytes(pruned, byteorder="little") >> 3

    def public(self) -> PublicKey:
        """The public key `A = s * BASE8`."""
        return PublicKey.from_point(BASE8.mul(self.scalar()))

    def sign_poseidon(self, msg: Fr) -> Signature:
        """Sign a field element with the Poseidon challenge hash."""
        h = blake512(self.key)
        r = int.from_bytes(blake512(h[32:] + bytes(Fr(msg))), byteorder="little") % SUBORDER
        r8 = BASE8.mul(r)

        public = self.public()
        hm = poseidon_hash([r8.x, r8.y, public.x, public.y, msg])

        s = (r + int(hm) * (self.scalar() << 3)) % SUBORDER
        return Signature(r8=r8, s=Fr(s))
