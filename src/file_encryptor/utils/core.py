import logging

from pathlib import Path
from typing import Optional

from file_encryptor.crypto.aead import AeadCipher
from file_encryptor.crypto.kdf import generate_salt
from file_encryptor.storage.container import decode_container, encode_container
from file_encryptor.storage.files import ByteProgress, read_file, write_file
from file_encryptor.utils.dataModels import FileResult
from file_encryptor.utils.errors import ArgumentError
from file_encryptor.utils.helper import decrypted_name, encrypted_name

logger = logging.getLogger(__name__)


def encrypt_bytes(password: str | bytes, plaintext: bytes) -> bytes:
    """Encrypt ``plaintext`` under a fresh salt and return the full container."""
    salt = generate_salt()
    cipher = AeadCipher.from_password(password, salt)
    return encode_container(salt, cipher.encrypt(plaintext))


def decrypt_bytes(password: str | bytes, container: bytes) -> bytes:
    """Parse a container, derive its key from the embedded salt and decrypt.

    Raises a FormatError for a malformed header and AuthenticationFailure
    for a wrong password or tampered payload.
    """
    salt, payload = decode_container(container)
    cipher = AeadCipher.from_password(password, salt)
    return cipher.decrypt(payload)


def _require_file_input(path: Path) -> None:
    if path.is_dir():
        raise ArgumentError(f"Input is a directory, expected a file: {path}")


def encrypt_file(
    input_path: Path,
    password: str | bytes,
    output_path: Optional[Path] = None,
    progress: Optional[ByteProgress] = None,
) -> FileResult:
    src = Path(input_path)
    _require_file_input(src)
    out = Path(output_path) if output_path is not None else encrypted_name(src)

    plaintext = read_file(src, progress)
    container = encrypt_bytes(password, plaintext)
    write_file(out, container, progress)

    logger.info("Encrypted %s -> %s", src, out)
    return FileResult(source=src, destination=out, bytes_in=len(plaintext), bytes_out=len(container))


def decrypt_file(
    input_path: Path,
    password: str | bytes,
    output_path: Optional[Path] = None,
    progress: Optional[ByteProgress] = None,
) -> FileResult:
    src = Path(input_path)
    _require_file_input(src)
    out = Path(output_path) if output_path is not None else decrypted_name(src)

    container = read_file(src, progress)
    plaintext = decrypt_bytes(password, container)
    write_file(out, plaintext, progress)

    logger.info("Decrypted %s -> %s", src, out)
    return FileResult(source=src, destination=out, bytes_in=len(container), bytes_out=len(plaintext))
