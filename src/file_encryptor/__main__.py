#!/usr/bin/env python3
"""
file-encryptor: password-based file and directory encryption

Every encrypted file is a self-contained binary container:

    magic     : 4 bytes   -> b"ENCR"
    version   : 1 byte    -> 0x01
    salt      : 32 bytes  (Argon2id salt)
    nonce     : 12 bytes  (AES-256-GCM nonce)
    ciphertext: remaining bytes, ending in the 16-byte GCM tag

Key = Argon2id(password, salt), m=64 MiB, t=3, p=4, 32 bytes. The
parameters are fixed so any implementation of the format derives the same
key.

Commands:
  encrypt -i FILE [-o OUT]       Encrypt one file (default OUT: FILE.encrypted)
  decrypt -i FILE [-o OUT]       Decrypt one file (default OUT: FILE minus .encrypted)
  encrypt-dir -i DIR [-o OUT]    Encrypt every regular file under DIR, mirrored into OUT
  decrypt-dir -i DIR [-o OUT]    Decrypt every *.encrypted file under DIR, mirrored into OUT

Directory encryption derives one key for the whole batch and draws a fresh
nonce per file (--per-file-salt derives one key per file instead).
Directory decryption always derives from each file's own salt.
"""
from __future__ import annotations

import logging

from file_encryptor.ui.cli import build_parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    args.func(args)


if __name__ == "__main__":
    main()
