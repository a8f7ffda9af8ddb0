"""Encrypted on-disk storage of a vault."""

from __future__ import annotations

import base64
import binascii
import json
import os
from pathlib import Path
from typing import Union

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from pwvault.models import Vault

PathLike = Union[str, "os.PathLike[str]"]

KEY_LENGTH = 32
SALT_LENGTH = 16
NONCE_LENGTH = 12


class VaultFormatError(ValueError):
    """The vault file is malformed or cannot be decrypted."""


def _check_key(key: bytes) -> None:
    if len(key) != KEY_LENGTH:
        raise ValueError(f"key must be {KEY_LENGTH} bytes")


def save_vault_encrypted(path: PathLike, vault: Vault, key: bytes, salt: bytes) -> None:
    """Encrypt the vault with AES-256-GCM and write it to ``path``."""
    _check_key(key)
    nonce = os.urandom(NONCE_LENGTH)
    ciphertext = AESGCM(bytes(key)).encrypt(nonce, vault.to_json().encode("utf-8"), None)
    document = {
        "ciphertext": base64.b64encode(ciphertext).decode("ascii"),
        "nonce": base64.b64encode(nonce).decode("ascii"),
        "salt": base64.b64encode(bytes(salt)).decode("ascii"),
    }
    Path(path).write_text(json.dumps(document, separators=(",", ":")), encoding="utf-8")


def _field(document: object, name: str) -> bytes:
    value = document.get(name) if isinstance(document, dict) else None
    if not isinstance(value, str):
        raise VaultFormatError(f"{name} is missing")
    try:
        return base64.b64decode(value, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise VaultFormatError(str(exc)) from exc


def load_vault_encrypted(path: PathLike, key: bytes) -> Vault:
    """Read and decrypt the vault at ``path``."""
    _check_key(key)
    text = Path(path).read_text(encoding="utf-8")
    try:
        document = json.loads(text)
    except json.JSONDecodeError as exc:
        raise VaultFormatError(str(exc)) from exc

    salt = _field(document, "salt")
    nonce = _field(document, "nonce")
    ciphertext = _field(document, "ciphertext")

    if len(salt) != SALT_LENGTH or len(nonce) != NONCE_LENGTH:
        raise VaultFormatError("Invalid salt or Nonce length")

    try:
        plaintext = AESGCM(bytes(key)).decrypt(nonce, ciphertext, None)
    except InvalidTag as exc:
        raise VaultFormatError("Decryption Failed") from exc

    try:
        return Vault.from_json(plaintext)
    except ValueError as exc:
        raise VaultFormatError(str(exc)) from exc