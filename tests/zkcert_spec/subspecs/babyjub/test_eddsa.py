"""Tests for EdDSA-Poseidon signatures on Baby Jubjub."""

import pytest
from pydantic import ValidationError

from zkcert_spec.subspecs.babyjub import eddsa

from zkcert_spec.subspecs.babyjub import (
    BASE8,
    PRIVATE_KEY_LENGTH,
    SUBORDER,
    Point,
    PrivateKey,
    PublicKey,
    Signature,
)
from zkcert_spec.subspecs.bn254 import Fr, P
from zkcert_spec.types import HashComputationError
from tests.zkcert_spec.helpers import make_private_key


def test_private_key_length_is_enforced() -> None:
    """Keys are exactly 32 bytes."""
    with pytest.raises(ValidationError):
        PrivateKey(key=b"\x00" * (PRIVATE_KEY_LENGTH - 1))


def test_generate_yields_distinct_keys() -> None:
    """Fresh keys come from the CSPRNG."""
    assert PrivateKey.generate().key != PrivateKey.generate().key


def test_key_is_hidden_from_repr() -> None:
    """The raw key bytes never show up in logs."""
    key = make_private_key(9)
    assert key.key.hex() not in repr(key)


def test_scalar_is_pruned() -> None:
    """The derived scalar has bit 251 set and fits below 2^252."""
    scalar = make_private_key(3).scalar()
    assert scalar >> 251 == 1


def test_public_key_is_in_subgroup() -> None:
    """A = s * BASE8 lies in the prime-order subgroup."""
    public = make_private_key(5).public()
    assert isinstance(public, PublicKey)
    assert public.in_curve()
    assert public.point() == BASE8.mul(make_private_key(5).scalar())


def test_sign_and_verify() -> None:
    """A signature verifies for its own key and message."""
    key = make_private_key(1)
    msg = Fr(1234)
    signature = key.sign_poseidon(msg)

    assert 0 <= int(signature.s) < SUBORDER
    assert signature.r8.in_curve()
    assert key.public().verify_poseidon(msg, signature)


def test_signing_is_deterministic() -> None:
    """The nonce is derived from the key and message."""
    key = make_private_key(1)
    assert key.sign_poseidon(Fr(7)) == key.sign_poseidon(Fr(7))
    assert key.sign_poseidon(Fr(7)) != key.sign_poseidon(Fr(8))


def test_verify_rejects_other_message() -> None:
    """A signature does not transfer to another message."""
    key = make_private_key(1)
    signature = key.sign_poseidon(Fr(1))
    assert not key.public().verify_poseidon(Fr(2), signature)


def test_verify_rejects_other_key() -> None:
    """A signature does not verify under another public key."""
    signature = make_private_key(1).sign_poseidon(Fr(1))
    assert not make_private_key(2).public().verify_poseidon(Fr(1), signature)


def test_verify_rejects_malleated_s() -> None:
    """S + SUBORDER satisfies the equation but is outside the canonical range."""
    key = make_private_key(1)
    signature = key.sign_poseidon(Fr(1))
    malleated = Signature(r8=signature.r8, s=Fr(int(signature.s) + SUBORDER))
    assert int(malleated.s) < P
    assert not key.public().verify_poseidon(Fr(1), malleated)


def test_verify_rejects_off_curve_nonce() -> None:
    """An R8 that is not a curve point fails verification instead of raising."""
    key = make_private_key(1)
    signature = key.sign_poseidon(Fr(1))
    forged = Signature(r8=Point(x=Fr(1), y=Fr(2)), s=signature.s)
    assert not key.public().verify_poseidon(Fr(1), forged)


def test_signature_json_roundtrip() -> None:
    """Signatures serialize with decimal coordinates."""
    signature = make_private_key(1).sign_poseidon(Fr(1))
    assert Signature.from_json(signature.to_json()) == signature


# Reference vector shared by the iden3 Go and JavaScript libraries:
# key 0x0001..0001, message = the 10 bytes 00..09 read little-endian.
IDEN3_KEY = bytes.fromhex("0001020304050607080900010203040506070809000102030405060708090001")
IDEN3_MSG = Fr(int.from_bytes(bytes.fromhex("00010203040506070809"), byteorder="little"))


def test_public_key_matches_iden3() -> None:
    """Key expansion agrees with the iden3 implementations."""
    public = PrivateKey(key=IDEN3_KEY).public()
    assert public.x == 13277427435165878497778222415993513565335242147425444199013288855685581939618
    assert public.y == 13622229784656158136036771217484571176836296686641868549125388198837476602820


def test_sign_poseidon_matches_iden3() -> None:
    """Nonce derivation and the Poseidon challenge agree with the iden3 implementations."""
    key = PrivateKey(key=IDEN3_KEY)
    signature = key.sign_poseidon(IDEN3_MSG)

    assert signature.r8.x == 11384336176656855268977457483345535180380036354188103142384839473266348197733
    assert signature.r8.y == 15383486972088797283337779941324724402501462225528836549661220478783371668959
    assert signature.s == 1672775540645840396591609181675628451599263765380031905495115170613215233181
    assert key.public().verify_poseidon(IDEN3_MSG, signature)


def test_verify_propagates_hash_failures(monkeypatch: pytest.MonkeyPatch) -> None:
    """A failing challenge hash is an error, not a rejected signature."""
    key = make_private_key(1)
    signature = key.sign_poseidon(Fr(1))

    def failing_hash(inputs: object) -> Fr:
        raise HashComputationError("hash unavailable")

    monkeypatch.setattr(eddsa, "poseidon_hash", failing_hash)
    with pytest.raises(HashComputationError, match="hash unavailable"):
        key.public().verify_poseidon(Fr(1), signature)
