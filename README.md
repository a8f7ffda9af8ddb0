# pwvault

`pwvault` stores service credentials (service, username, password) in one
encrypted vault file. The vault is serialised to JSON and then encrypted with
AES-256-GCM. The 32-byte key is derived from a master password with Argon2id,
using 19 MiB of memory, 2 passes and 1 lane. The file keeps the salt and the
nonce in base64 next to the ciphertext.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install ".[test]"
```

Argon2id support requires `cryptography` 44 or later.

## Vault file format

The vault file is a JSON object with three base64 fields:

```json
{"ciphertext": "...", "nonce": "...", "salt": "..."}
```

The salt must be 16 bytes and the nonce 12 bytes. Each save uses a fresh random
nonce. Once decrypted, the plaintext is a JSON object:
`{"credentials": {"<service>": {"service": ..., "username": ..., "password": ...}}}`.

## Usage

```python
from pwvault.keys import derive_key_from_password
from pwvault.commands import add_credential, get_credential, list_services, delete_credential

vault_path = "vault.json"
master_password = "password"

# Reuses the salt stored in the vault; makes a random 16-byte salt if the file
# does not exist or has no salt.
key, salt = derive_key_from_password(vault_path, master_password)

password = "secret"
add_credential(vault_path, key, salt, "mail", "alice@example.com", password)

credential = get_credential(vault_path, key, "mail")   # Credential or None
services = list_services(vault_path, key)              # ["mail"]
removed = delete_credential(vault_path, key, salt, "mail")  # True
```

Each command prints a short message and also returns its result:

* `add_credential(vault_path, key, salt, service, username, password)` stores
  the credential and returns it. Any existing entry for the same service is
  replaced. If the vault is missing **or cannot be opened** (for example because
  the key is wrong), the function starts a new empty vault and overwrites the
  file.
* `get_credential(vault_path, key, service_name)` prints the username and the
  password and returns the `Credential`. If the service is not stored, it
  returns `None`.
* `delete_credential(vault_path, key, salt, service_name)` returns `True` when
  an entry was removed and `False` when there was none to remove.
* `list_services(vault_path, key)` returns the stored service names. A vault
  that is missing or unreadable counts as empty.

`get_credential` and `delete_credential` raise `FileNotFoundError` when the
vault file does not exist. When it cannot be decrypted they raise
`VaultFormatError`.

## Lower-level pieces

```python
from pwvault.models import Credential, Vault
from pwvault.storage import save_vault_encrypted, load_vault_encrypted, VaultFormatError
```

* `Credential` is a dataclass with the fields `service`, `username` and
  `password`, plus `to_dict()` and `Credential.from_dict(data)`.
* `Vault` holds `credentials`, a dict that maps each service name to its
  `Credential`, plus `to_json()` and `Vault.from_json(text)`. Malformed input
  raises `ValueError`.
* `save_vault_encrypted(path, vault, key, salt)` encrypts a `Vault` and writes
  it.
* `load_vault_encrypted(path, key)` reads a `Vault` and decrypts it.
  `VaultFormatError`, a subclass of `ValueError`, is raised in these cases: the
  JSON is malformed, a field is missing, the base64 is invalid, the salt or
  nonce length is wrong, authentication fails, or the decrypted contents are
  malformed.

Both storage functions raise `ValueError` when the key is not 32 bytes.

## What this package does not do

`pwvault` is a library only. It has no command-line program and no interactive
prompt. It does not store a hash of the master password and does not check it.
If the master password is wrong, the derived key is wrong too, so decryption
fails with `VaultFormatError`. `add_credential` is the exception: it replaces
the vault, as described above. The caller decides where the vault file lives.

## Running the tests

```
pytest
```