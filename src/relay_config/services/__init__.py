from .azure_identity import get_credentials
from .azure_key_vault import get_secret
from .secrets import Secret, SecretCipher, SecretError, resolve_secret_key, reveal

__all__ = [
    "get_credentials",
    "get_secret",
    "Secret",
    "SecretCipher",
    "SecretError",
    "resolve_secret_key",
    "reveal",
]
