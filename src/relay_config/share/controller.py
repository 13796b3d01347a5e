from dataclasses import dataclass, field, replace
from typing import Any, Mapping

from loguru import logger

from . import constants
from .relay import RelayBootstrapper
from .store import SettingsStore
from .submission import (
    FormError,
    bind_connection_factory,
    read_event_filters,
    read_relay_settings,
)
from .validation import validate_relay_fields


@dataclass
class SubmissionResult:
    """Outcome of applying a configuration form."""

    saved: bool
    relay_configured: bool = False
    reinitialized: bool = False
    field_errors: dict[str, str] = field(default_factory=dict)
    reinit_warning: str | None = None

    def to_dict(self) -> dict:
        return {
            "saved": self.saved,
            "relay_configured": self.relay_configured,
            "reinitialized": self.reinitialized,
            "field_errors": dict(self.field_errors),
            "reinit_warning": self.reinit_warning,
        }


class ConfigurationController:
    """Applies submitted global configuration to the settings store."""

    def __init__(self, store: SettingsStore, relay: RelayBootstrapper):
        self.store = store
        self.relay = relay

    def apply_submission(self, submission: Mapping[str, Any]) -> SubmissionResult:
        """Bind, store and persist a configuration form, then reinit the relay.

        Field checks are reported in the result but do not block the save;
        incomplete relay settings are caught later by are_settings_valid().
        A failing reinit is logged and returned as a warning.

        Raises:
            FormError: if the form is structurally unusable.
            SQLAlchemyError: if the settings cannot be persisted.
        """
        if not isinstance(submission, Mapping):
            raise FormError("Configuration form must be an object")

        relay_configured = constants.MQ_HOST in submission
        field_errors: dict[str, str] = {}

        with self.store.lock:
            updated = self.store.snapshot()

            if constants.CONNECTION_FACTORY in submission:
                connection_factory = bind_connection_factory(submission[constants.CONNECTION_FACTORY])
            else:
                connection_factory = None
            updated = replace(updated, connection_factory=connection_factory)

            if relay_configured:
                field_errors = validate_relay_fields(submission)
                if field_errors:
                    logger.warning(
                        "ActionHub settings accepted with invalid fields: {}",
                        ", ".join(sorted(field_errors)),
                    )
                updated = replace(
                    updated,
                    relay=read_relay_settings(submission),
                    filters=read_event_filters(submission),
                )

            self.store.replace(updated)

        result = SubmissionResult(
            saved=True,
            relay_configured=relay_configured,
            field_errors=field_errors,
        )
        if not relay_configured:
            logger.info("Global TeamForge settings saved.")
            return result

        logger.info("ActionHub Connection Settings saved.")
        try:
            self.relay.reinit()
            result.reinitialized = True
        except Exception as e:
            logger.exception("ActionHub relay reinitialization failed")
            result.reinit_warning = f"Settings saved, but the event relay could not be reinitialized: {e}"
        return result
