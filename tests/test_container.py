import os

import pytest

from file_encryptor.storage.container import decode_container, encode_container, load_container, save_container
from file_encryptor.utils.errors import (
    ArgumentError,
    BadMagicError,
    FormatError,
    IoError,
    TooShortError,
    UnsupportedVersionError,
)


def test_encode_layout():
    salt = bytes(range(32))
    payload = b"nonce-and-ciphertext"
    data = encode_container(salt, payload)
    assert data[:4] == b"ENCR"
    assert data[:5] == bytes([0x45, 0x4E, 0x43, 0x52, 0x01])
    assert data[5:37] == salt
    assert data[37:] == payload


def test_decode_splits_salt_and_payload():
    salt = os.urandom(32)
    payload = os.urandom(60)
    assert decode_container(encode_container(salt, payload)) == (salt, payload)


def test_decode_accepts_exactly_header_length():
    salt, payload = decode_container(b"ENCR\x01" + b"\x07" * 32)
    assert salt == b"\x07" * 32
    assert payload == b""


@pytest.mark.parametrize("length", [0, 4, 5, 36])
def test_decode_too_short(length):
    data = (b"ENCR\x01" + b"\x00" * 40)[:length]
    with pytest.raises(TooShortError):
        decode_container(data)


@pytest.mark.parametrize("magic", [b"ENCS", b"encr", b"\x00\x00\x00\x00", b"EFS1"])
def test_decode_bad_magic(magic):
    with pytest.raises(BadMagicError):
        decode_container(magic + b"\x01" + b"\x00" * 60)


@pytest.mark.parametrize("version", [0, 2, 255])
def test_decode_unsupported_version(version):
    with pytest.raises(UnsupportedVersionError) as excinfo:
        decode_container(b"ENCR" + bytes([version]) + b"\x00" * 60)
    assert excinfo.value.version == version


def test_format_errors_share_a_base():
    for exc in (TooShortError, BadMagicError, UnsupportedVersionError):
        assert issubclass(exc, FormatError)


def test_encode_rejects_wrong_salt_length():
    with pytest.raises(ArgumentError):
        encode_container(b"\x00" * 16, b"payload")


def test_save_and_load_container(tmp_path):
    path = tmp_path / "blob.encrypted"
    salt = os.urandom(32)
    save_container(path, salt, b"payload")
    assert path.read_bytes()[:5] == b"ENCR\x01"
    assert load_container(path) == (salt, b"payload")
    assert [p.name for p in tmp_path.iterdir()] == ["blob.encrypted"]


def test_load_missing_container_carries_path(tmp_path):
    path = tmp_path / "missing.encrypted"
    with pytest.raises(IoError) as excinfo:
        load_container(path)
    assert excinfo.value.path == path
