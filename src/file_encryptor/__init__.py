"""Password-based file encryption: Argon2id key derivation, AES-256-GCM, ENCR containers."""

__version__ = "0.1.0"

from file_encryptor.utils.core import decrypt_bytes, decrypt_file, encrypt_bytes, encrypt_file  # noqa: E402
from file_encryptor.utils.batch import BatchProcessor, decrypt_dir, encrypt_dir  # noqa: E402

__all__ = [
    "__version__",
    "encrypt_bytes",
    "decrypt_bytes",
    "encrypt_file",
    "decrypt_file",
    "encrypt_dir",
    "decrypt_dir",
    "BatchProcessor",
]
