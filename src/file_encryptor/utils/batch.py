"""Directory-tree encryption and decryption.

Key policy for ``encrypt_dir``: by default one salt (and therefore one
Argon2id derivation) serves the whole batch, since the derivation is the
expensive part. Every file still gets its own random nonce, which is what
AES-GCM needs to stay secure under a shared key. ``per_file_salt=True``
trades speed for a distinct salt and key per file.

``decrypt_dir`` never relies on that policy: each file's embedded salt is
the only input to its key derivation.

Batches are fail-fast and not transactional. The first error stops the
walk; outputs already written stay where they are.
"""

import logging
import os

from pathlib import Path
from typing import Callable, Iterable, List, Optional

from file_encryptor.crypto.aead import AeadCipher
from file_encryptor.crypto.kdf import generate_salt
from file_encryptor.storage.container import decode_container, encode_container
from file_encryptor.storage.files import create_parent_dirs, notify, read_file, write_file
from file_encryptor.utils.dataModels import ENCRYPTED_SUFFIX, BatchResult
from file_encryptor.utils.errors import ArgumentError, BatchError, IoError
from file_encryptor.utils.helper import (
    decrypted_name,
    default_decrypt_dir_output,
    default_encrypt_dir_output,
    encrypted_name,
    is_encrypted_name,
)

logger = logging.getLogger(__name__)

Enumerator = Callable[[Path], Iterable[Path]]
# on_file(done, total, source_path), called after each finished file
FileProgress = Callable[[int, int, Path], None]


def collect_files(root: Path) -> List[Path]:
    """All regular files under ``root``, symlinks excluded, sorted per directory."""
    root = Path(root)

    def _raise(err: OSError) -> None:
        raise IoError(f"Failed to walk directory ({err.strerror or err})", err.filename) from err

    files: List[Path] = []
    for dirpath, dirnames, filenames in os.walk(root, onerror=_raise, followlinks=False):
        dirnames.sort()
        for name in sorted(filenames):
            path = Path(dirpath) / name
            if path.is_symlink() or not path.is_file():
                continue
            files.append(path)
    return files


def _require_dir(path: Path) -> Path:
    path = Path(path)
    if not path.is_dir():
        raise ArgumentError(f"Input is not a directory: {path}")
    return path


def _make_output_dir(path: Path) -> None:
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise IoError(f"Failed to create output directory ({e.strerror or e})", path) from e


class BatchProcessor:
    def __init__(
        self,
        enumerator: Enumerator = collect_files,
        progress: Optional[FileProgress] = None,
        per_file_salt: bool = False,
    ) -> None:
        self.enumerator = enumerator
        self.progress = progress
        self.per_file_salt = per_file_salt

    def _manifest(self, root: Path, only_encrypted: bool = False) -> List[Path]:
        files = list(self.enumerator(root))
        if only_encrypted:
            files = [f for f in files if is_encrypted_name(f)]
        return files

    def encrypt_dir(
        self, input_dir: Path, password: str | bytes, output_dir: Optional[Path] = None
    ) -> BatchResult:
        root = _require_dir(input_dir)
        out_root = Path(output_dir) if output_dir is not None else default_encrypt_dir_output(root)

        files = self._manifest(root)
        _make_output_dir(out_root)
        result = BatchResult(input_root=root, output_root=out_root, per_file_salt=self.per_file_salt)
        if not files:
            logger.info("No files found in directory: %s", root)
            return result

        salt = cipher = None
        if not self.per_file_salt:
            salt = generate_salt()
            cipher = AeadCipher.from_password(password, salt)
            logger.debug("Derived one key for %d file(s)", len(files))

        for src in files:
            try:
                dest = encrypted_name(out_root / src.relative_to(root))
                plaintext = read_file(src)
                if self.per_file_salt:
                    salt = generate_salt()
                    cipher = AeadCipher.from_password(password, salt)
                container = encode_container(salt, cipher.encrypt(plaintext))
                create_parent_dirs(dest)
                write_file(dest, container)
            except Exception as e:
                logger.error("Encryption aborted at %s after %d file(s)", src, result.count)
                raise BatchError(src, result.count, e) from e
            result.files.append((src, dest))
            logger.debug("Encrypted %s -> %s", src, dest)
            notify(self.progress, result.count, len(files), src)

        logger.info("Encrypted %d file(s) into %s", result.count, out_root)
        return result

    def decrypt_dir(
        self, input_dir: Path, password: str | bytes, output_dir: Optional[Path] = None
    ) -> BatchResult:
        root = _require_dir(input_dir)
        out_root = Path(output_dir) if output_dir is not None else default_decrypt_dir_output(root)

        files = self._manifest(root, only_encrypted=True)
        _make_output_dir(out_root)
        result = BatchResult(input_root=root, output_root=out_root)
        if not files:
            logger.info("No %s files found in directory: %s", ENCRYPTED_SUFFIX, root)
            return result

        for src in files:
            try:
                dest = decrypted_name(out_root / src.relative_to(root))
                salt, payload = decode_container(read_file(src))
                # each file's own salt decides its key
                plaintext = AeadCipher.from_password(password, salt).decrypt(payload)
                create_parent_dirs(dest)
                write_file(dest, plaintext)
            except Exception as e:
                logger.error("Decryption aborted at %s after %d file(s)", src, result.count)
                raise BatchError(src, result.count, e) from e
            result.files.append((src, dest))
            logger.debug("Decrypted %s -> %s", src, dest)
            notify(self.progress, result.count, len(files), src)

        logger.info("Decrypted %d file(s) into %s", result.count, out_root)
        return result


def encrypt_dir(input_dir: Path, password: str | bytes, output_dir: Optional[Path] = None, **kwargs) -> BatchResult:
    return BatchProcessor(**kwargs).encrypt_dir(input_dir, password, output_dir)


def decrypt_dir(input_dir: Path, password: str | bytes, output_dir: Optional[Path] = None, **kwargs) -> BatchResult:
    return BatchProcessor(**kwargs).decrypt_dir(input_dir, password, output_dir)
