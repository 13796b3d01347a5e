"""Global TeamForge/ActionHub configuration.

Responsibilities:
- Per-field validation of the ActionHub form
- The settings store and its persistence
- Applying submitted forms and reinitializing the event relay
"""

from .constants import DISPLAY_NAME
from .controller import ConfigurationController, SubmissionResult
from .models import ConnectionFactory, EventFilterSettings, RelayMessagingSettings, ShareSettings
from .relay import ActionHubRelay, RelayBootstrapper
from .store import SettingsStore
from .submission import FormError, bind_connection_factory
from .validation import FormValidation, check_field, validate_relay_fields

__all__ = [
    "DISPLAY_NAME",
    "ActionHubRelay",
    "ConfigurationController",
    "ConnectionFactory",
    "EventFilterSettings",
    "FormError",
    "FormValidation",
    "RelayBootstrapper",
    "RelayMessagingSettings",
    "SettingsStore",
    "ShareSettings",
    "SubmissionResult",
    "bind_connection_factory",
    "check_field",
    "validate_relay_fields",
]
