"""Password handling for the persisted share settings.

Passwords live in memory as Secret handles and reach storage only as
Fernet tokens produced by SecretCipher.
"""

import hmac
from pathlib import Path

from cryptography.fernet import Fernet, InvalidToken
from loguru import logger

from ..config import SettingsManager
from .azure_key_vault import get_secret

MASK = "********"


class SecretError(Exception):
    """Raised when a stored secret cannot be decrypted."""


class Secret:
    """Opaque holder for a password.

    The plain value is only available through reveal(); repr and str are
    masked so it never ends up in logs or exported snapshots.
    """

    __slots__ = ("_value",)

    def __init__(self, value: str):
        if isinstance(value, Secret):
            value = value.reveal()
        self._value = value

    def reveal(self) -> str:
        return self._value

    def matches(self, other) -> bool:
        """Constant-time comparison against another Secret or a plain string."""
        if isinstance(other, Secret):
            other = other.reveal()
        if not isinstance(other, str):
            return False
        return hmac.compare_digest(self._value.encode("utf-8"), other.encode("utf-8"))

    def __eq__(self, other) -> bool:
        if not isinstance(other, Secret):
            return NotImplemented
        return self.matches(other)

    def __hash__(self) -> int:
        return hash(Secret)

    def __bool__(self) -> bool:
        return bool(self._value)

    def __repr__(self) -> str:
        return f"Secret({MASK})"

    __str__ = __repr__


def reveal(secret: "Secret | None") -> str | None:
    """Plain value of a possibly missing secret."""
    return None if secret is None else secret.reveal()


class SecretCipher:
    """Encrypts secrets for storage with a Fernet key."""

    def __init__(self, key: bytes | str):
        if isinstance(key, str):
            key = key.encode("utf-8")
        self._fernet = Fernet(key)

    def encrypt(self, secret: "Secret | str | None") -> str | None:
        if secret is None:
            return None
        value = secret.reveal() if isinstance(secret, Secret) else secret
        return self._fernet.encrypt(value.encode("utf-8")).decode("ascii")

    def decrypt(self, token: str | None) -> Secret | None:
        if token is None:
            return None
        try:
            return Secret(self._fernet.decrypt(token.encode("ascii")).decode("utf-8"))
        except InvalidToken as e:
            raise SecretError("Stored secret cannot be decrypted with the configured key") from e


def _load_or_create_key_file(path: Path) -> bytes:
    if path.exists():
        return path.read_bytes().strip()
    logger.warning("No encryption key found, generating a new one at {}", path)
    path.parent.mkdir(parents=True, exist_ok=True)
    key = Fernet.generate_key()
    tmp = path.with_suffix(".tmp")
    tmp.write_bytes(key)
    tmp.replace(path)
    return key


def resolve_secret_key(settings: SettingsManager) -> bytes:
    """Find the encryption key: explicit setting, Key Vault, then key file."""
    if settings.secrets.key:
        logger.debug("Using encryption key from settings")
        return settings.secrets.key.encode("utf-8")
    if settings.azure.key_vault_url and settings.azure.secret_key_name:
        logger.debug("Using encryption key from Key Vault")
        return get_secret(settings.azure.secret_key_name, settings).encode("utf-8")
    logger.debug("Using encryption key file {}", settings.secrets.key_file)
    return _load_or_create_key_file(Path(settings.secrets.key_file))
