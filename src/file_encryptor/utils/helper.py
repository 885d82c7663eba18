import os

from pathlib import Path

from file_encryptor.utils.dataModels import DECRYPTED_DIR_SUFFIX, DECRYPTED_SUFFIX, ENCRYPTED_SUFFIX
from file_encryptor.utils.errors import ArgumentError


def encrypted_name(path: Path) -> Path:
    """report.txt -> report.txt.encrypted, README -> README.encrypted"""
    path = Path(path)
    return path.with_name(path.name + ENCRYPTED_SUFFIX)


def decrypted_name(path: Path) -> Path:
    """Strip a final .encrypted; anything else gets .decrypted appended."""
    path = Path(path)
    if is_encrypted_name(path):
        return path.with_suffix("")
    return path.with_name(path.name + DECRYPTED_SUFFIX)


def is_encrypted_name(path: Path) -> bool:
    # Path(".encrypted").suffix is "", so a bare dotfile of that name is not a match
    return Path(path).suffix == ENCRYPTED_SUFFIX


def _absolute(path: Path) -> Path:
    root = Path(os.path.abspath(path))
    if not root.name:
        # filesystem root has no name to derive a sibling from
        raise ArgumentError(f"Cannot derive a default output next to {root}; pass an output directory")
    return root


def default_encrypt_dir_output(input_dir: Path) -> Path:
    root = _absolute(input_dir)
    return root.with_name(root.name + ENCRYPTED_SUFFIX)


def default_decrypt_dir_output(input_dir: Path) -> Path:
    root = _absolute(input_dir)
    if root.name.endswith(ENCRYPTED_SUFFIX) and root.name != ENCRYPTED_SUFFIX:
        return root.with_name(root.name[: -len(ENCRYPTED_SUFFIX)])
    return root.with_name(root.name + DECRYPTED_DIR_SUFFIX)
