import os

import pytest

from file_encryptor.crypto.aead import AeadCipher
from file_encryptor.utils.errors import AuthenticationFailure, InvalidInput


@pytest.fixture
def cipher():
    return AeadCipher(os.urandom(32))


def test_roundtrip_and_layout(cipher):
    plaintext = os.urandom(1000)
    out = cipher.encrypt(plaintext)
    assert len(out) == 12 + len(plaintext) + 16
    assert cipher.decrypt(out) == plaintext


def test_empty_plaintext(cipher):
    out = cipher.encrypt(b"")
    assert len(out) == 28
    assert cipher.decrypt(out) == b""


def test_fresh_nonce_per_call(cipher):
    nonces = set()
    for _ in range(200):
        nonces.add(cipher.encrypt(b"x")[:12])
    assert len(nonces) == 200


@pytest.mark.parametrize("position", [0, 11, 12, 20, -1])
def test_single_bit_flip_is_rejected(cipher, position):
    out = bytearray(cipher.encrypt(b"attack at dawn"))
    out[position] ^= 0x01
    with pytest.raises(AuthenticationFailure):
        cipher.decrypt(bytes(out))


def test_wrong_key_is_authentication_failure(cipher):
    out = cipher.encrypt(b"secret")
    with pytest.raises(AuthenticationFailure):
        AeadCipher(os.urandom(32)).decrypt(out)


def test_too_short_input(cipher):
    with pytest.raises(InvalidInput):
        cipher.decrypt(b"\x00" * 11)


def test_nonce_only_input_fails_authentication(cipher):
    with pytest.raises(AuthenticationFailure):
        cipher.decrypt(b"\x00" * 12)


@pytest.mark.parametrize("length", [16, 24, 31, 64])
def test_key_must_be_256_bits(length):
    with pytest.raises(InvalidInput):
        AeadCipher(b"k" * length)


def test_cipher_is_immutable(cipher):
    with pytest.raises(AttributeError):
        cipher._aesgcm = None


def test_from_password_matches_derived_key():
    salt = os.urandom(32)
    a = AeadCipher.from_password("pw", salt)
    b = AeadCipher.from_password("pw", salt)
    assert b.decrypt(a.encrypt(b"shared")) == b"shared"
