import os

from pathlib import Path

import pytest

from file_encryptor.utils.errors import ArgumentError
from file_encryptor.utils.helper import (
    decrypted_name,
    default_decrypt_dir_output,
    default_encrypt_dir_output,
    encrypted_name,
    is_encrypted_name,
)


@pytest.mark.parametrize(
    "name, expected",
    [
        ("report.txt", "report.txt.encrypted"),
        ("README", "README.encrypted"),
        ("archive.tar.gz", "archive.tar.gz.encrypted"),
        (".bashrc", ".bashrc.encrypted"),
    ],
)
def test_encrypted_name(name, expected):
    assert encrypted_name(Path("d") / name) == Path("d") / expected


@pytest.mark.parametrize(
    "name, expected",
    [
        ("report.txt.encrypted", "report.txt"),
        ("README.encrypted", "README"),
        ("notes.bin", "notes.bin.decrypted"),
        ("report.encrypted.txt", "report.encrypted.txt.decrypted"),
    ],
)
def test_decrypted_name(name, expected):
    assert decrypted_name(Path("d") / name) == Path("d") / expected


def test_is_encrypted_name():
    assert is_encrypted_name(Path("a.txt.encrypted"))
    assert not is_encrypted_name(Path("a.txt"))
    assert not is_encrypted_name(Path(".encrypted"))
    assert not is_encrypted_name(Path("a.ENCRYPTED"))


def test_default_dir_outputs(tmp_path):
    data = tmp_path / "data"
    assert default_encrypt_dir_output(data) == tmp_path / "data.encrypted"
    assert default_decrypt_dir_output(tmp_path / "data.encrypted") == data
    assert default_decrypt_dir_output(data) == tmp_path / "data_decrypted"


def test_default_dir_output_for_relative_dot(tmp_path, monkeypatch):
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.chdir(work)
    assert default_encrypt_dir_output(Path(".")) == Path(os.getcwd()).with_name("work.encrypted")


def test_filesystem_root_has_no_default_output():
    root = Path(os.path.abspath(os.sep))
    with pytest.raises(ArgumentError):
        default_encrypt_dir_output(root)
    with pytest.raises(ArgumentError):
        default_decrypt_dir_output(root)
