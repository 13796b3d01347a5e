"""On-the-fly validation of the ActionHub form fields.

Each check takes the raw submitted value and returns a FormValidation.
Checks are pure: they never touch the settings store.
"""

from dataclasses import dataclass
from typing import Any, Callable, Mapping

from . import constants


@dataclass(frozen=True)
class FormValidation:
    """Outcome of a single field check."""

    kind: str
    message: str | None = None

    @classmethod
    def ok(cls) -> "FormValidation":
        return cls("ok")

    @classmethod
    def error(cls, message: str) -> "FormValidation":
        return cls("error", message)

    @property
    def is_ok(self) -> bool:
        return self.kind == "ok"

    def to_dict(self) -> dict:
        return {"status": self.kind, "message": self.message}


def parse_port(value: Any) -> int:
    """Port number from a form value; unparseable or out-of-range counts as 0."""
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        port = value
    else:
        try:
            port = int(str(value).strip())
        except (TypeError, ValueError):
            return 0
    return port if 1 <= port <= constants.MAX_PORT else 0


def _required(message: str) -> Callable[[Any], FormValidation]:
    def check(value: Any) -> FormValidation:
        if value is None or len(str(value).strip()) == 0:
            return FormValidation.error(message)
        return FormValidation.ok()

    return check


check_host = _required(constants.ERROR_MSG_HOST)
check_username = _required(constants.ERROR_MSG_USERNAME)
check_password = _required(constants.ERROR_MSG_PASSWORD)
check_exchange = _required(constants.ERROR_MSG_EXCHANGE)
check_workflow_queue = _required(constants.ERROR_MSG_ROUTING_KEY_WF)
check_actions_queue = _required(constants.ERROR_MSG_ROUTING_KEY_ACTIONS)


def check_port(value: Any) -> FormValidation:
    if parse_port(value) < 1:
        return FormValidation.error(constants.ERROR_MSG_PORT)
    return FormValidation.ok()


FIELD_VALIDATORS: dict[str, Callable[[Any], FormValidation]] = {
    constants.MQ_HOST: check_host,
    constants.MQ_PORT: check_port,
    constants.MQ_USERNAME: check_username,
    constants.MQ_PASSWORD: check_password,
    constants.MQ_EXCHANGE: check_exchange,
    constants.MQ_WORKFLOW_QUEUE: check_workflow_queue,
    constants.MQ_ACTIONS_QUEUE: check_actions_queue,
}


def check_field(field: str, value: Any) -> FormValidation:
    """Run the check registered for a submission field name.

    Raises:
        KeyError: if the field has no live check.
    """
    return FIELD_VALIDATORS[field](value)


def validate_relay_fields(submission: Mapping[str, Any]) -> dict[str, str]:
    """Messages of every failing relay field, keyed by field name."""
    failures = {}
    for field, check in FIELD_VALIDATORS.items():
        result = check(submission.get(field))
        if not result.is_ok:
            failures[field] = result.message
    return failures
