import struct

from pathlib import Path
from typing import Tuple

from file_encryptor.storage.files import read_file, write_file
from file_encryptor.utils.dataModels import (
    CONTAINER_HDR_FMT,
    CONTAINER_HDR_SIZE,
    CONTAINER_MAGIC,
    CONTAINER_VERSION,
    SALT_LEN,
    SUPPORTED_VERSIONS,
)
from file_encryptor.utils.errors import ArgumentError, BadMagicError, TooShortError, UnsupportedVersionError


def encode_container(salt: bytes, payload: bytes) -> bytes:
    """magic || version || salt || payload, where payload is the cipher's nonce || ciphertext."""
    if len(salt) != SALT_LEN:
        raise ArgumentError(f"Salt must be {SALT_LEN} bytes, got {len(salt)}")
    header = struct.pack(CONTAINER_HDR_FMT, CONTAINER_MAGIC, CONTAINER_VERSION, salt)
    return header + payload


def decode_container(data: bytes) -> Tuple[bytes, bytes]:
    """Split a container into (salt, payload). Does no cryptographic checks."""
    if len(data) < CONTAINER_HDR_SIZE:
        raise TooShortError(f"Invalid encrypted file: too short ({len(data)} bytes)")
    magic, ver, salt = struct.unpack(CONTAINER_HDR_FMT, data[:CONTAINER_HDR_SIZE])
    if magic != CONTAINER_MAGIC:
        raise BadMagicError("Invalid encrypted file: wrong magic bytes")
    if ver not in SUPPORTED_VERSIONS:
        raise UnsupportedVersionError(ver)
    return salt, bytes(data[CONTAINER_HDR_SIZE:])


def save_container(path: Path, salt: bytes, payload: bytes) -> None:
    write_file(path, encode_container(salt, payload))


def load_container(path: Path) -> Tuple[bytes, bytes]:
    return decode_container(read_file(path))
