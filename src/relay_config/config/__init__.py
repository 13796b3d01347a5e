"""Process configuration.

Responsibilities:
- Settings sections for application, storage and encryption key
- Settings loading from environment variables
- Validation and masked export
"""

from .settings_manager import (
    ApplicationSettings,
    AzureSettings,
    DatabaseSettings,
    Environment,
    SecretSettings,
    SettingsManager,
)

__all__ = [
    "SettingsManager",
    "ApplicationSettings",
    "DatabaseSettings",
    "SecretSettings",
    "AzureSettings",
    "Environment",
]
