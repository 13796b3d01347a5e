"""Settings manager for process-level configuration.

This module provides the settings the service needs before the global
TeamForge/ActionHub configuration can be loaded:
- Load from environment variables
- Be modified at runtime
- Validate settings
- Support different environments (dev, test, prod)
"""

import os
from dataclasses import asdict, dataclass
from enum import Enum
from threading import Lock
from typing import Any, Dict, List

from loguru import logger


class Environment(str, Enum):
    """Application environment."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    PRODUCTION = "production"


LOG_LEVELS = ["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]
TRUE_VALUES = ["true", "1", "yes"]


@dataclass
class Settings:
    """Base class for settings dataclasses."""

    def to_dict(self) -> Dict[str, Any]:
        """Convert settings to dictionary."""
        return asdict(self)


@dataclass
class ApplicationSettings(Settings):
    """Application-level settings."""

    name: str = "relay-config"
    version: str = "dev"
    environment: Environment = Environment.DEVELOPMENT
    debug: bool = False
    log_level: str = "INFO"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        data = super().to_dict()
        data["environment"] = self.environment.value
        return data


@dataclass
class DatabaseSettings(Settings):
    """Storage for the persisted share settings record."""

    url: str = "sqlite:///relay_config.db"
    echo: bool = False


@dataclass
class SecretSettings(Settings):
    """Encryption key used for passwords at rest."""

    key: str = ""
    key_file: str = ".relay_config/secret.key"


@dataclass
class AzureSettings(Settings):
    """Azure Key Vault location of the encryption key, if any."""

    key_vault_url: str = ""
    secret_key_name: str = ""


class SettingsManager:
    """Process configuration, built once at startup and passed around.

    Usage:
        settings = SettingsManager.from_env()
        url = settings.database.url
    """

    def __init__(self):
        self.application = ApplicationSettings()
        self.database = DatabaseSettings()
        self.secrets = SecretSettings()
        self.azure = AzureSettings()
        self._change_lock = Lock()

    @classmethod
    def from_env(cls, prefix: str = "") -> "SettingsManager":
        """Create a settings manager populated from the environment."""
        settings = cls()
        settings.load_from_env(prefix=prefix)
        return settings

    def load_from_env(self, prefix: str = "") -> None:
        """Load settings from environment variables.

        Args:
            prefix: Optional prefix for environment variables (e.g., "RELAY_")
        """
        with self._change_lock:

            env_vars = os.environ

            logger.info(
                "Loading settings from environment variables" + (f" with prefix={prefix}" if prefix else "")
            )

            app_mapping = {
                f"{prefix}APP_NAME": "name",
                f"{prefix}APP_VERSION": "version",
                f"{prefix}APP_ENVIRONMENT": "environment",
                f"{prefix}APP_DEBUG": "debug",
                f"{prefix}APP_LOG_LEVEL": "log_level",
            }

            for env_key, attr_name in app_mapping.items():
                if env_key in env_vars:
                    value = env_vars[env_key]
                    if attr_name == "environment":
                        value = Environment(value.lower())
                    elif attr_name == "debug":
                        value = value.lower() in TRUE_VALUES
                    elif attr_name == "log_level":
                        value = value.upper()
                    setattr(self.application, attr_name, value)

            db_mapping = {
                f"{prefix}DATABASE_URL": "url",
                f"{prefix}DATABASE_ECHO": "echo",
            }

            for env_key, attr_name in db_mapping.items():
                if env_key in env_vars:
                    value = env_vars[env_key]
                    if attr_name == "echo":
                        value = value.lower() in TRUE_VALUES
                    setattr(self.database, attr_name, value)

            secret_mapping = {
                f"{prefix}SECRET_KEY": "key",
                f"{prefix}SECRET_KEY_FILE": "key_file",
            }
            for env_key, attr_name in secret_mapping.items():
                if env_key in env_vars:
                    setattr(self.secrets, attr_name, env_vars[env_key])

            azure_mapping = {
                f"{prefix}AZURE_KEY_VAULT_URL": "key_vault_url",
                f"{prefix}AZURE_KEY_VAULT_SECRET_KEY_NAME": "secret_key_name",
            }
            for env_key, attr_name in azure_mapping.items():
                if env_key in env_vars:
                    setattr(self.azure, attr_name, env_vars[env_key])

            logger.info("Settings successfully loaded from environment")

    def export_settings(self, mask_secrets: bool = True) -> Dict[str, Any]:
        """Export all settings as a dictionary.

        Args:
            mask_secrets: If True, mask the encryption key

        Returns:
            Dictionary containing all settings
        """
        settings = {
            "application": self.application.to_dict(),
            "database": self.database.to_dict(),
            "secrets": self.secrets.to_dict(),
            "azure": self.azure.to_dict(),
        }

        if mask_secrets and settings["secrets"]["key"]:
            settings["secrets"]["key"] = "***MASKED***"

        return settings

    def validate(self) -> Dict[str, List[str]]:
        """Validate current settings.

        Returns:
            Dictionary with validation errors by category
        """
        errors: Dict[str, List[str]] = {
            "application": [],
            "database": [],
            "secrets": [],
            "azure": [],
        }

        if not self.application.name:
            errors["application"].append("Application name is required")
        if self.application.log_level not in LOG_LEVELS:
            errors["application"].append("Invalid log level")

        if not self.database.url:
            errors["database"].append("Database URL is required")

        if not self.secrets.key and not self.secrets.key_file and not self.azure.key_vault_url:
            errors["secrets"].append("One of secret key, key file or Key Vault must be configured")

        if self.azure.key_vault_url and not self.azure.secret_key_name:
            errors["azure"].append("Key Vault secret name is required when a Key Vault URL is set")

        errors = {k: v for k, v in errors.items() if v}

        return errors
