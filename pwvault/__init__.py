"""Encrypted credential vault: Argon2id key derivation and AES-256-GCM file storage."""

__version__ = "0.1.0"
__all__ = ["models", "storage", "keys", "commands"]