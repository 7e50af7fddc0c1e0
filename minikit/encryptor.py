"""Authenticated file encryption with a secret key stored on disk."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

import nacl.exceptions
import nacl.secret
import nacl.utils

KEY_FILE = "key.bin"
KEY_SIZE = nacl.secret.SecretBox.KEY_SIZE
NONCE_SIZE = nacl.secret.SecretBox.NONCE_SIZE
MAC_SIZE = nacl.secret.SecretBox.MACBYTES


class EncryptorError(Exception):
    """Raised when a key or file cannot be processed."""


def generate_key(key_file: str | Path = KEY_FILE) -> Path:
    """Create a random secret key and write it to ``key_file``."""
    path = Path(key_file)
    key = nacl.utils.random(KEY_SIZE)
    try:
        path.write_bytes(key)
    except OSError as exc:
        raise EncryptorError("Could not write key file.") from exc
    return path


def load_key(key_file: str | Path = KEY_FILE) -> bytes:
    """Read the secret key from ``key_file``."""
    try:
        key = Path(key_file).read_bytes()[:KEY_SIZE]
    except OSError as exc:
        raise EncryptorError("Key file not found. Please run 'genkey' first.") from exc
    if len(key) != KEY_SIZE:
        raise EncryptorError("Key file is too short or corrupted.")
    return key


def _read_input(input_file: str | Path) -> bytes:
    try:
        return Path(input_file).read_bytes()
    except OSError as exc:
        raise EncryptorError(f"Cannot open input file: {input_file}") from exc


def _write_output(output_file: str | Path, data: bytes) -> Path:
    path = Path(output_file)
    try:
        path.write_bytes(data)
    except OSError as exc:
        raise EncryptorError("Could not write output file.") from exc
    return path


def encrypt_file(
    input_file: str | Path, output_file: str | Path, key_file: str | Path = KEY_FILE
) -> Path:
    """Encrypt ``input_file`` into ``output_file`` as nonce followed by ciphertext."""
    box = nacl.secret.SecretBox(load_key(key_file))
    plaintext = _read_input(input_file)
    nonce = nacl.utils.random(NONCE_SIZE)
    encrypted = box.encrypt(plaintext, nonce)
    return _write_output(output_file, encrypted.nonce + encrypted.ciphertext)


def decrypt_file(
    input_file: str | Path, output_file: str | Path, key_file: str | Path = KEY_FILE
) -> Path:
    """Decrypt a file written by :func:`encrypt_file` into ``output_file``."""
    box = nacl.secret.SecretBox(load_key(key_file))
    data = _read_input(input_file)
    nonce, ciphertext = data[:NONCE_SIZE], data[NONCE_SIZE:]
    if len(nonce) < NONCE_SIZE or len(ciphertext) < MAC_SIZE:
        raise EncryptorError("Ciphertext too short or corrupted!")
    try:
        plaintext = box.decrypt(ciphertext, nonce)
    except nacl.exceptions.CryptoError as exc:
        raise EncryptorError(
            "Decryption failed: Wrong key, nonce, or corrupted data."
        ) from exc
    return _write_output(output_file, plaintext)


def main(argv: list[str] | None = None) -> int:
    """Command line entry point: genkey, encrypt and decrypt."""
    parser = argparse.ArgumentParser(prog="encryptor", description="Encrypt and decrypt files.")
    parser.add_argument("--key-file", default=KEY_FILE, help="path of the key file")
    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("genkey", help="generate a new key")
    for name in ("encrypt", "decrypt"):
        sub = commands.add_parser(name, help=f"{name} a file")
        sub.add_argument("input")
        sub.add_argument("output")
    args = parser.parse_args(argv)

    try:
        if args.command == "genkey":
            path = generate_key(args.key_file)
            print(f"Key generated and saved to {path}")
        elif args.command == "encrypt":
            path = encrypt_file(args.input, args.output, args.key_file)
            print(f"File encrypted: {path}")
        else:
            path = decrypt_file(args.input, args.output, args.key_file)
            print(f"File decrypted: {path}")
    except EncryptorError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())