"""Binding of the global configuration form into settings records."""

from typing import Any, Mapping

from ..services.secrets import Secret
from . import constants
from .models import ConnectionFactory, EventFilterSettings, RelayMessagingSettings
from .validation import parse_port


class FormError(ValueError):
    """The submitted form is structurally unusable."""


def _as_string(value: Any) -> str | None:
    if value is None:
        return None
    return value if isinstance(value, str) else str(value)


def _as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("true", "on", "1", "yes")
    return bool(value)


def _as_secret(value: Any) -> Secret | None:
    if value is None:
        return None
    if isinstance(value, Secret):
        return value
    return Secret(_as_string(value))


def bind_connection_factory(data: Any) -> ConnectionFactory:
    """Bind the connectionFactory sub-object of the form."""
    if not isinstance(data, Mapping):
        raise FormError(f"{constants.CONNECTION_FACTORY} must be an object")
    missing = [name for name in ("url", "username", "password") if not data.get(name)]
    if missing:
        raise FormError(f"{constants.CONNECTION_FACTORY} is missing: {', '.join(missing)}")
    return ConnectionFactory(
        url=_as_string(data["url"]),
        username=_as_string(data["username"]),
        password=_as_secret(data["password"]),
    )


def read_relay_settings(submission: Mapping[str, Any]) -> RelayMessagingSettings:
    """Message queue fields, stored as submitted."""
    return RelayMessagingSettings(
        host=_as_string(submission.get(constants.MQ_HOST)),
        port=parse_port(submission.get(constants.MQ_PORT)),
        username=_as_string(submission.get(constants.MQ_USERNAME)),
        password=_as_secret(submission.get(constants.MQ_PASSWORD)),
        exchange=_as_string(submission.get(constants.MQ_EXCHANGE)),
        workflow_queue=_as_string(submission.get(constants.MQ_WORKFLOW_QUEUE)),
        actions_queue=_as_string(submission.get(constants.MQ_ACTIONS_QUEUE)),
    )


def read_event_filters(submission: Mapping[str, Any]) -> EventFilterSettings:
    return EventFilterSettings(
        include_mode=_as_string(submission.get(constants.MSG_INCLUDE_RADIO)),
        manual=_as_bool(submission.get(constants.MSG_MANUAL)),
        workitem=_as_bool(submission.get(constants.MSG_WORKITEM)),
        commit=_as_bool(submission.get(constants.MSG_COMMIT)),
        build=_as_bool(submission.get(constants.MSG_BUILD)),
        review=_as_bool(submission.get(constants.MSG_REVIEW)),
        custom=_as_bool(submission.get(constants.MSG_CUSTOM)),
        custom_text=_as_string(submission.get(constants.MSG_CUSTOM_TXT)),
    )
