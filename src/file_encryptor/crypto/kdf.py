import logging
import os

from argon2.exceptions import HashingError
from argon2.low_level import hash_secret_raw, Type as Argon2Type

from file_encryptor.utils.dataModels import (
    ARGON2_M_COST_KiB,
    ARGON2_PARALLELISM,
    ARGON2_T_COST,
    ARGON2_VERSION,
    KEY_LEN,
    SALT_LEN,
)
from file_encryptor.utils.errors import KeyDerivationError

logger = logging.getLogger(__name__)


def _password_bytes(password: str | bytes) -> bytes:
    if isinstance(password, str):
        return password.encode("utf-8")
    return bytes(password)


def derive_key(password: str | bytes, salt: bytes) -> bytes:
    """key = Argon2id(password, salt) -> 32 bytes, fixed format parameters.

    The password goes in as raw UTF-8 with no pre-hash so other
    implementations of the container format derive the same key.
    """
    if len(salt) != SALT_LEN:
        raise KeyDerivationError(f"Salt must be {SALT_LEN} bytes, got {len(salt)}")
    logger.debug(
        "Deriving key: argon2id t=%d m=%dKiB p=%d", ARGON2_T_COST, ARGON2_M_COST_KiB, ARGON2_PARALLELISM
    )
    try:
        return hash_secret_raw(
            secret=_password_bytes(password),
            salt=salt,
            time_cost=ARGON2_T_COST,
            memory_cost=ARGON2_M_COST_KiB,
            parallelism=ARGON2_PARALLELISM,
            hash_len=KEY_LEN,
            type=Argon2Type.ID,
            version=ARGON2_VERSION,
        )
    except (HashingError, MemoryError) as e:
        raise KeyDerivationError(f"Failed to derive key from password: {e}") from e


def generate_salt() -> bytes:
    return os.urandom(SALT_LEN)
