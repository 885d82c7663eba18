import logging
import os
import stat
import tempfile

from pathlib import Path
from typing import Callable, Optional

from file_encryptor.utils.dataModels import PROGRESS_CHUNK_SIZE
from file_encryptor.utils.errors import IoError

logger = logging.getLogger(__name__)

# on_progress(done_bytes, total_bytes)
ByteProgress = Callable[[int, int], None]


def notify(callback: Optional[Callable[..., None]], *args) -> None:
    """Call a progress observer; its failures are logged, never propagated."""
    if callback is None:
        return
    try:
        callback(*args)
    except Exception:
        logger.warning("Progress callback %r raised; ignoring", callback, exc_info=True)


def read_file(path: Path, progress: Optional[ByteProgress] = None) -> bytes:
    """Read the whole file into memory, reporting every chunk when asked."""
    path = Path(path)
    try:
        if progress is None:
            return path.read_bytes()
        total = path.stat().st_size
        buf = bytearray()
        with path.open("rb") as f:
            while chunk := f.read(PROGRESS_CHUNK_SIZE):
                buf += chunk
                notify(progress, len(buf), total)
        return bytes(buf)
    except OSError as e:
        raise IoError(f"Failed to read file ({e.strerror or e})", path) from e


def _target_mode(path: Path) -> int:
    """Mode a plain open() would give: the existing file's, else 0o666 minus umask."""
    try:
        return stat.S_IMODE(os.stat(path).st_mode)
    except FileNotFoundError:
        pass
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def write_file(path: Path, data: bytes, progress: Optional[ByteProgress] = None) -> None:
    """Write ``data`` to ``path`` atomically.

    Bytes go to a temp file next to the target which is then renamed over it;
    if anything fails the temp file is removed and ``path`` is untouched.
    """
    path = Path(path)
    total = len(data)
    tmp_name = None
    try:
        fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".part", dir=path.parent)
        with os.fdopen(fd, "wb") as f:
            if progress is None:
                f.write(data)
            else:
                view = memoryview(data)
                for offset in range(0, total, PROGRESS_CHUNK_SIZE):
                    chunk = view[offset:offset + PROGRESS_CHUNK_SIZE]
                    f.write(chunk)
                    notify(progress, offset + len(chunk), total)
        # mkstemp creates 0600
        os.chmod(tmp_name, _target_mode(path))
        os.replace(tmp_name, path)
        tmp_name = None
    except OSError as e:
        raise IoError(f"Failed to write file ({e.strerror or e})", path) from e
    finally:
        if tmp_name is not None:
            try:
                os.unlink(tmp_name)
            except FileNotFoundError:
                pass
    logger.debug("Wrote %d bytes to %s", total, path)


def create_parent_dirs(path: Path) -> None:
    parent = Path(path).parent
    try:
        parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise IoError(f"Failed to create directory ({e.strerror or e})", parent) from e
