import argparse
import sys

from getpass import getpass
from pathlib import Path
from typing import Callable, Optional

from tqdm import tqdm

from file_encryptor.utils.batch import BatchProcessor
from file_encryptor.utils.core import decrypt_file, encrypt_file
from file_encryptor.utils.dataModels import LARGE_FILE_THRESHOLD
from file_encryptor.utils.errors import BatchError, FileEncryptorError


def _fail(message: str) -> None:
    print(f"[!] {message}", file=sys.stderr)
    sys.exit(1)


def read_password(args: argparse.Namespace, confirm: bool = False) -> str:
    """--passphrase if given, otherwise a non-echoing prompt."""
    if getattr(args, "passphrase", None) is not None:
        return args.passphrase
    try:
        password = getpass("Enter password: ")
        if confirm and getpass("Confirm password: ") != password:
            _fail("Passwords do not match")
    except (EOFError, KeyboardInterrupt):
        _fail("Failed to read password")
    return password


class _ByteBar:
    """tqdm bar for one read or write pass, created on first callback."""

    def __init__(self, desc: str, enabled: bool) -> None:
        self.desc = desc
        self.enabled = enabled
        self.bar: Optional[tqdm] = None

    def __call__(self, done: int, total: int) -> None:
        if self.bar is None:
            self.bar = tqdm(total=total, unit="B", unit_scale=True, desc=self.desc, leave=False, disable=not self.enabled)
        self.bar.update(done - self.bar.n)
        if done >= total:
            self.close()

    def close(self) -> None:
        if self.bar is not None:
            self.bar.close()
            self.bar = None


class _FileBar:
    def __init__(self, desc: str, enabled: bool) -> None:
        self.desc = desc
        self.enabled = enabled
        self.bar: Optional[tqdm] = None

    def __call__(self, done: int, total: int, path: Path) -> None:
        if self.bar is None:
            self.bar = tqdm(total=total, unit="file", desc=self.desc, disable=not self.enabled)
        self.bar.set_postfix_str(path.name, refresh=False)
        self.bar.update(done - self.bar.n)

    def close(self) -> None:
        if self.bar is not None:
            self.bar.close()
            self.bar = None


def _byte_progress(path: Path, desc: str, args: argparse.Namespace) -> Optional[Callable[[int, int], None]]:
    if args.no_progress:
        return None
    try:
        size = path.stat().st_size
    except OSError:
        return None  # read_file reports the real error
    if size < LARGE_FILE_THRESHOLD:
        return None
    return _ByteBar(desc, enabled=True)


def cmd_encrypt(args: argparse.Namespace) -> None:
    src = Path(args.input)
    password = read_password(args, confirm=True)
    bar = _byte_progress(src, "Encrypting", args)
    try:
        res = encrypt_file(src, password, args.output, progress=bar)
    except FileEncryptorError as e:
        _fail(str(e))
    finally:
        if bar is not None:
            bar.close()
    print(f"[+] File encrypted successfully: {res.destination}")


def cmd_decrypt(args: argparse.Namespace) -> None:
    src = Path(args.input)
    password = read_password(args)
    bar = _byte_progress(src, "Decrypting", args)
    try:
        res = decrypt_file(src, password, args.output, progress=bar)
    except FileEncryptorError as e:
        _fail(str(e))
    finally:
        if bar is not None:
            bar.close()
    print(f"[+] File decrypted successfully: {res.destination}")


def _run_batch(args: argparse.Namespace, encrypting: bool) -> None:
    password = read_password(args, confirm=encrypting)
    bar = _FileBar("Encrypting directory" if encrypting else "Decrypting directory", enabled=not args.no_progress)
    processor = BatchProcessor(progress=bar, per_file_salt=getattr(args, "per_file_salt", False))
    run = processor.encrypt_dir if encrypting else processor.decrypt_dir
    try:
        res = run(Path(args.input), password, args.output)
    except BatchError as e:
        _fail(f"{e.error} ({e.path}); {e.completed} file(s) were written before the failure")
    except FileEncryptorError as e:
        _fail(str(e))
    finally:
        bar.close()

    if res.count == 0:
        what = "files" if encrypting else ".encrypted files"
        print(f"[+] No {what} found in directory: {res.input_root}")
        return
    verb = "encrypted" if encrypting else "decrypted"
    print(f"[+] Directory {verb} successfully: {res.output_root} ({res.count} files)")


def cmd_encrypt_dir(args: argparse.Namespace) -> None:
    _run_batch(args, encrypting=True)


def cmd_decrypt_dir(args: argparse.Namespace) -> None:
    _run_batch(args, encrypting=False)
