import base64
import json

import pytest

from pwvault.keys import derive_key_from_password
from pwvault.models import Vault
from pwvault.storage import VaultFormatError, load_vault_encrypted, save_vault_encrypted

SALT = bytes(range(16))


def _vault_with_salt(path, salt=SALT):
    save_vault_encrypted(path, Vault(), bytes(32), salt)
    return path


def test_missing_file_gives_random_salt(tmp_path):
    path = tmp_path / "vault.json"
    key_a, salt_a = derive_key_from_password(path, "password")
    key_b, salt_b = derive_key_from_password(path, "password")
    assert len(key_a) == 32
    assert len(salt_a) == 16
    assert salt_a != salt_b
    assert key_a != key_b


def test_stored_salt_is_reused(tmp_path):
    path = _vault_with_salt(tmp_path / "vault.json")
    key, salt = derive_key_from_password(path, "password")
    assert salt == SALT
    assert len(key) == 32


def test_derivation_is_deterministic(tmp_path):
    path = _vault_with_salt(tmp_path / "vault.json")
    first, _ = derive_key_from_password(path, "password")
    second, _ = derive_key_from_password(path, "password")
    assert first == second


def test_different_passwords_give_different_keys(tmp_path):
    path = _vault_with_salt(tmp_path / "vault.json")
    first, _ = derive_key_from_password(path, "password")
    second, _ = derive_key_from_password(path, "secret")
    assert first != second


def test_salt_absent_in_document(tmp_path):
    path = tmp_path / "vault.json"
    path.write_text(json.dumps({"nonce": "AAAA"}))
    _, salt = derive_key_from_password(path, "password")
    assert len(salt) == 16


def test_invalid_json(tmp_path):
    path = tmp_path / "vault.json"
    path.write_text("{oops")
    with pytest.raises(VaultFormatError):
        derive_key_from_password(path, "password")


def test_invalid_base64_salt(tmp_path):
    path = tmp_path / "vault.json"
    path.write_text(json.dumps({"salt": "!!!"}))
    with pytest.raises(VaultFormatError):
        derive_key_from_password(path, "password")


def test_too_short_salt(tmp_path):
    path = tmp_path / "vault.json"
    path.write_text(json.dumps({"salt": base64.b64encode(b"abc").decode()}))
    with pytest.raises(ValueError, match="Encryption key derivation failed"):
        derive_key_from_password(path, "password")


def test_key_opens_vault_saved_with_it(tmp_path):
    path = tmp_path / "vault.json"
    key, salt = derive_key_from_password(path, "password")
    save_vault_encrypted(path, Vault(), key, salt)
    key_again, salt_again = derive_key_from_password(path, "password")
    assert (key_again, salt_again) == (key, salt)
    assert load_vault_encrypted(path, key_again) == Vault()