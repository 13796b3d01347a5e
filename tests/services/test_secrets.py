"""Unit tests for secret handles, encryption and key resolution."""

from unittest.mock import patch

import pytest
from cryptography.fernet import Fernet

from relay_config.config import SettingsManager
from relay_config.services import Secret, SecretCipher, SecretError, resolve_secret_key, reveal


@pytest.mark.unit
class TestSecret:

    def test_reveal_returns_plain_value(self):
        assert Secret("hunter2").reveal() == "hunter2"

    def test_repr_and_str_are_masked(self):
        secret = Secret("hunter2")
        assert "hunter2" not in repr(secret)
        assert "hunter2" not in str(secret)
        assert "hunter2" not in f"{secret}"

    def test_matches(self):
        secret = Secret("hunter2")
        assert secret.matches("hunter2")
        assert secret.matches(Secret("hunter2"))
        assert not secret.matches("hunter3")
        assert not secret.matches(None)

    def test_equality(self):
        assert Secret("a") == Secret("a")
        assert Secret("a") != Secret("b")
        assert Secret("a") != "a"

    def test_hash_does_not_depend_on_value(self):
        assert hash(Secret("a")) == hash(Secret("b"))
        assert len({Secret("a"), Secret("a"), Secret("b")}) == 2

    def test_wrapping_a_secret_does_not_nest(self):
        assert Secret(Secret("a")).reveal() == "a"

    def test_truthiness_follows_value(self):
        assert Secret("a")
        assert not Secret("")

    def test_reveal_helper(self):
        assert reveal(None) is None
        assert reveal(Secret("a")) == "a"


@pytest.mark.unit
class TestSecretCipher:

    def test_encrypt_does_not_store_plaintext(self, cipher):
        token = cipher.encrypt(Secret("hunter2"))
        assert "hunter2" not in token
        assert cipher.decrypt(token) == Secret("hunter2")

    def test_encrypt_accepts_plain_strings(self, cipher):
        assert cipher.decrypt(cipher.encrypt("abc")).reveal() == "abc"

    def test_none_passes_through(self, cipher):
        assert cipher.encrypt(None) is None
        assert cipher.decrypt(None) is None

    def test_wrong_key_raises_secret_error(self, cipher):
        token = cipher.encrypt("abc")
        other = SecretCipher(Fernet.generate_key())

        with pytest.raises(SecretError):
            other.decrypt(token)

    def test_key_may_be_given_as_str(self, secret_key):
        cipher = SecretCipher(secret_key.decode("ascii"))
        assert cipher.decrypt(cipher.encrypt("abc")).reveal() == "abc"


@pytest.mark.unit
class TestResolveSecretKey:

    def test_explicit_key_wins(self, tmp_path):
        settings = SettingsManager()
        settings.secrets.key = "explicit"
        settings.secrets.key_file = str(tmp_path / "secret.key")

        assert resolve_secret_key(settings) == b"explicit"
        assert not (tmp_path / "secret.key").exists()

    def test_key_vault_used_when_configured(self, tmp_path):
        settings = SettingsManager()
        settings.secrets.key_file = str(tmp_path / "secret.key")
        settings.azure.key_vault_url = "https://test-vault.vault.azure.net/"
        settings.azure.secret_key_name = "relay-key"

        with patch("relay_config.services.secrets.get_secret", return_value="from-vault") as mock_get:
            assert resolve_secret_key(settings) == b"from-vault"

        mock_get.assert_called_once_with("relay-key", settings)

    def test_key_file_created_then_reused(self, tmp_path):
        settings = SettingsManager()
        settings.secrets.key_file = str(tmp_path / "nested" / "secret.key")

        first = resolve_secret_key(settings)
        second = resolve_secret_key(settings)

        assert first == second
        assert (tmp_path / "nested" / "secret.key").read_bytes() == first
        SecretCipher(first)  # a usable Fernet key
