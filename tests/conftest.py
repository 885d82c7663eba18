from pathlib import Path

import pytest

PASSWORD = "correct-horse"


@pytest.fixture
def password() -> str:
    return PASSWORD


@pytest.fixture
def sample_tree(tmp_path) -> Path:
    """Nested tree with an empty file and a file without extension.

    Layout:
        data/report.txt
        data/README
        data/empty.bin        (0 bytes)
        data/sub/deeper/notes.md
        data/sub/image.tar.gz
    """
    root = tmp_path / "data"
    (root / "sub" / "deeper").mkdir(parents=True)
    (root / "report.txt").write_bytes(b"quarterly numbers\n")
    (root / "README").write_bytes(b"read me first")
    (root / "empty.bin").write_bytes(b"")
    (root / "sub" / "deeper" / "notes.md").write_bytes(b"# notes\n" * 50)
    (root / "sub" / "image.tar.gz").write_bytes(bytes(range(256)) * 4)
    return root


def snapshot(root: Path) -> dict:
    """Map of relative path -> bytes for every file under root."""
    return {p.relative_to(root).as_posix(): p.read_bytes() for p in sorted(root.rglob("*")) if p.is_file()}
