"""Credential and vault records and their JSON form."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

_CREDENTIAL_FIELDS = ("service", "username", "password")


@dataclass
class Credential:
    """A stored login for one service."""

    service: str
    username: str
    password: str

    def to_dict(self) -> dict[str, str]:
        """Return the credential as a plain mapping."""
        return {
            "service": self.service,
            "username": self.username,
            "password": self.password,
        }

    @classmethod
    def from_dict(cls, data: Any) -> Credential:
        """Build a credential from a mapping, rejecting malformed data."""
        if not isinstance(data, dict):
            raise ValueError("credential must be an object")
        values = {}
        for name in _CREDENTIAL_FIELDS:
            if name not in data:
                raise ValueError(f"missing field `{name}`")
            value = data[name]
            if not isinstance(value, str):
                raise ValueError(f"field `{name}` must be a string")
            values[name] = value
        return cls(**values)


@dataclass
class Vault:
    """All credentials, keyed by service name."""

    credentials: dict[str, Credential] = field(default_factory=dict)

    def to_json(self) -> str:
        """Serialise the vault to compact JSON."""
        payload = {
            "credentials": {
                name: credential.to_dict()
                for name, credential in self.credentials.items()
            }
        }
        return json.dumps(payload, separators=(",", ":"), ensure_ascii=False)

    @classmethod
    def from_json(cls, text: str | bytes) -> Vault:
        """Parse a vault from JSON text, raising ValueError on bad input."""
        try:
            data = json.loads(text)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise ValueError(f"invalid vault JSON: {exc}") from exc
        if not isinstance(data, dict):
            raise ValueError("vault must be an object")
        if "credentials" not in data:
            raise ValueError("missing field `credentials`")
        raw = data["credentials"]
        if not isinstance(raw, dict):
            raise ValueError("field `credentials` must be an object")
        return cls(
            credentials={
                name: Credential.from_dict(entry) for name, entry in raw.items()
            }
        )