"""Vault commands: add, get, delete and list credentials."""

from __future__ import annotations

from pwvault.models import Credential, Vault
from pwvault.storage import PathLike, load_vault_encrypted, save_vault_encrypted


def add_credential(
    vault_path: PathLike,
    key: bytes,
    salt: bytes,
    service: str,
    username: str,
    password: str,
) -> Credential:
    """Store a credential, replacing any existing one for the service.

    A vault that is missing or cannot be opened is replaced by a new one.
    """
    credential = Credential(service=service, username=username, password=password)
    try:
        vault = load_vault_encrypted(vault_path, key)
    except (OSError, ValueError):
        vault = Vault()
    vault.credentials[service] = credential
    save_vault_encrypted(vault_path, vault, key, salt)
    print("\nCredential added")
    return credential


def get_credential(vault_path: PathLike, key: bytes, service_name: str) -> Credential | None:
    """Show and return the credential for a service, or None if absent."""
    vault = load_vault_encrypted(vault_path, key)
    credential = vault.credentials.get(service_name)
    if credential is None:
        print("\nNo credential found")
        return None
    print(f"\nFound credential for {credential.service}:")
    print(f"Username: {credential.username}")
    print(f"Password: {credential.password}")
    return credential


def delete_credential(
    vault_path: PathLike, key: bytes, salt: bytes, service_name: str
) -> bool:
    """Remove a service's credential; return whether one was removed."""
    vault = load_vault_encrypted(vault_path, key)
    if vault.credentials.pop(service_name, None) is None:
        print(f"\nCredential not found for service: {service_name}")
        return False
    save_vault_encrypted(vault_path, vault, key, salt)
    print(f"\nCredential removed for service: {service_name}")
    return True


def list_services(vault_path: PathLike, key: bytes) -> list[str]:
    """Show and return the stored service names.

    A vault that is missing or cannot be opened counts as empty.
    """
    try:
        vault = load_vault_encrypted(vault_path, key)
    except (OSError, ValueError):
        vault = Vault()
    services = list(vault.credentials)
    if not services:
        print("\nNo credentials stored.")
    else:
        print("\nStored services:")
        for service in services:
            print(service)
    return services