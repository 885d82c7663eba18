"""Exception hierarchy for file_encryptor.

Library errors (``OSError``, ``InvalidTag``, ``HashingError``) are translated
into these classes by the module that calls the library, chained with
``raise ... from`` so the original is still reachable.
"""

from __future__ import annotations

from pathlib import Path

__all__ = [
    "FileEncryptorError",
    "IoError",
    "FormatError",
    "TooShortError",
    "BadMagicError",
    "UnsupportedVersionError",
    "CryptoError",
    "KeyDerivationError",
    "AuthenticationFailure",
    "InvalidInput",
    "ArgumentError",
    "BatchError",
]


class FileEncryptorError(Exception):
    """Base class for every error raised by this package."""


class IoError(FileEncryptorError):
    """Opening, reading, writing or walking a path failed."""

    def __init__(self, message: str, path: Path | str | None = None) -> None:
        self.path = Path(path) if path is not None else None
        if self.path is not None:
            message = f"{message}: {self.path}"
        super().__init__(message)


class FormatError(FileEncryptorError):
    """The bytes are not a container this version can parse."""


class TooShortError(FormatError):
    pass


class BadMagicError(FormatError):
    pass


class UnsupportedVersionError(FormatError):
    def __init__(self, version: int) -> None:
        self.version = version
        super().__init__(f"Unsupported container version: {version}")


class CryptoError(FileEncryptorError):
    """Key derivation or authenticated encryption failed."""


class KeyDerivationError(CryptoError):
    pass


class AuthenticationFailure(CryptoError):
    """Tag did not verify: wrong password or corrupted data (deliberately not told apart)."""

    def __init__(self, message: str = "Decryption failed - wrong password or corrupted data") -> None:
        super().__init__(message)


class InvalidInput(CryptoError):
    """Malformed cipher input, e.g. a payload shorter than a nonce."""


class ArgumentError(FileEncryptorError, ValueError):
    """A caller-supplied argument is unusable (e.g. not a directory)."""


class BatchError(FileEncryptorError):
    """First failure inside a directory batch.

    ``completed`` counts files finished before ``path`` failed; their outputs
    are left on disk.
    """

    def __init__(self, path: Path, completed: int, error: BaseException) -> None:
        self.path = Path(path)
        self.completed = completed
        self.error = error
        super().__init__(f"{error} (while processing {self.path}; {completed} file(s) completed before failure)")
