import struct

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Tuple

# Argon2id parameters are part of the container format: every reader must
# derive the same key from the same (password, salt).
ARGON2_T_COST = 3
ARGON2_M_COST_KiB = 65536  # 64 MiB
ARGON2_PARALLELISM = 4
ARGON2_VERSION = 0x13

KEY_LEN = 32  # AES-256
SALT_LEN = 32
NONCE_LEN = 12
TAG_LEN = 16

CONTAINER_MAGIC = b"ENCR"
CONTAINER_VERSION = 1
SUPPORTED_VERSIONS = frozenset({CONTAINER_VERSION})
CONTAINER_HDR_FMT = ">4sB32s"  # magic, ver, salt(32)
CONTAINER_HDR_SIZE = struct.calcsize(CONTAINER_HDR_FMT)
MIN_CONTAINER_SIZE = CONTAINER_HDR_SIZE + NONCE_LEN + TAG_LEN

ENCRYPTED_SUFFIX = ".encrypted"
DECRYPTED_SUFFIX = ".decrypted"
DECRYPTED_DIR_SUFFIX = "_decrypted"

PROGRESS_CHUNK_SIZE = 64 * 1024
LARGE_FILE_THRESHOLD = 1024 * 1024  # progress bars only above this size


@dataclass(frozen=True)
class FileResult:
    source: Path
    destination: Path
    bytes_in: int
    bytes_out: int


@dataclass
class BatchResult:
    input_root: Path
    output_root: Path
    per_file_salt: bool = False
    files: List[Tuple[Path, Path]] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.files)
