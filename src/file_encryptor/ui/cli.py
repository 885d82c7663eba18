import argparse

from file_encryptor import __version__
from file_encryptor.ui.commands import cmd_decrypt, cmd_decrypt_dir, cmd_encrypt, cmd_encrypt_dir


def _add_common(p: argparse.ArgumentParser, kind: str, default_out: str) -> None:
    p.add_argument("-i", "--input", required=True, help=f"Input {kind} path")
    p.add_argument("-o", "--output", help=f"Output {kind} path (default: {default_out})")
    p.add_argument("--passphrase", help="Password (default: prompt without echo)")
    p.add_argument("--no-progress", action="store_true", help="Do not draw progress bars")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="file-encryptor", description="A secure file encryption tool")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_enc = sub.add_parser("encrypt", help="Encrypt a file")
    _add_common(p_enc, "file", "<input>.encrypted")
    p_enc.set_defaults(func=cmd_encrypt)

    p_dec = sub.add_parser("decrypt", help="Decrypt a file")
    _add_common(p_dec, "file", "<input> with .encrypted stripped")
    p_dec.set_defaults(func=cmd_decrypt)

    p_encd = sub.add_parser("encrypt-dir", help="Encrypt all files in a directory (preserves structure)")
    _add_common(p_encd, "directory", "<input>.encrypted")
    p_encd.add_argument(
        "--per-file-salt",
        action="store_true",
        help="Derive a separate key for every file instead of one key for the batch (slower)",
    )
    p_encd.set_defaults(func=cmd_encrypt_dir)

    p_decd = sub.add_parser("decrypt-dir", help="Decrypt all .encrypted files in a directory (preserves structure)")
    _add_common(p_decd, "directory", "<input> with .encrypted stripped, or <input>_decrypted")
    p_decd.set_defaults(func=cmd_decrypt_dir)

    return p
