"""Derivation of the vault encryption key from the master password."""

from __future__ import annotations

import base64
import binascii
import json
import os
from pathlib import Path

from cryptography.hazmat.primitives.kdf.argon2 import Argon2id

from pwvault.storage import KEY_LENGTH, SALT_LENGTH, PathLike, VaultFormatError

# Argon2id defaults: 19 MiB of memory, two passes, one lane.
_MEMORY_COST_KIB = 19 * 1024
_ITERATIONS = 2
_LANES = 1


def _stored_salt(path: PathLike) -> bytes | None:
    try:
        text = Path(path).read_text(encoding="utf-8")
    except FileNotFoundError:
        return None
    try:
        document = json.loads(text)
    except json.JSONDecodeError as exc:
        raise VaultFormatError(str(exc)) from exc
    value = document.get("salt") if isinstance(document, dict) else None
    if not isinstance(value, str):
        return None
    try:
        return base64.b64decode(value, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise VaultFormatError(str(exc)) from exc


def derive_key_from_password(path: PathLike, password: str) -> tuple[bytes, bytes]:
    """Return ``(key, salt)``, reusing the salt stored in the vault at ``path``.

    A fresh random salt is made when the vault does not exist or holds none.
    """
    salt = _stored_salt(path)
    if salt is None:
        salt = os.urandom(SALT_LENGTH)
    try:
        kdf = Argon2id(
            salt=salt,
            length=KEY_LENGTH,
            iterations=_ITERATIONS,
            lanes=_LANES,
            memory_cost=_MEMORY_COST_KIB,
        )
        key = kdf.derive(password.encode("utf-8"))
    except ValueError as exc:
        raise ValueError("Encryption key derivation failed") from exc
    return key, salt