from dataclasses import dataclass, field

from ..services.secrets import Secret
from .constants import INCLUDE_ALL, MAX_PORT


@dataclass(frozen=True)
class ConnectionFactory:
    """URL and credentials of the TeamForge server."""

    url: str | None
    username: str | None
    password: Secret | None


@dataclass(frozen=True)
class RelayMessagingSettings:
    """ActionHub message broker connection."""

    host: str | None = None
    port: int = 0
    username: str | None = None
    password: Secret | None = None
    exchange: str | None = None
    workflow_queue: str | None = None
    actions_queue: str | None = None

    def is_valid(self) -> bool:
        """True when every field is populated and the port is usable."""
        if not 1 <= self.port <= MAX_PORT:
            return False
        return all(
            value
            for value in (
                self.host,
                self.username,
                self.password,
                self.exchange,
                self.workflow_queue,
                self.actions_queue,
            )
        )


@dataclass(frozen=True)
class EventFilterSettings:
    """Which event types are relayed to ActionHub."""

    include_mode: str | None = None
    manual: bool = False
    workitem: bool = False
    commit: bool = False
    build: bool = False
    review: bool = False
    custom: bool = False
    custom_text: str | None = None

    def custom_types(self) -> list[str]:
        if not self.custom or not self.custom_text:
            return []
        return [part.strip() for part in self.custom_text.split(",") if part.strip()]

    def accepts(self, event_type: str) -> bool:
        """Whether an event of this type should be relayed."""
        if self.include_mode == INCLUDE_ALL:
            return True
        category = event_type.strip().lower()
        if category in ("manual", "workitem", "commit", "build", "review"):
            return getattr(self, category)
        return event_type.strip() in self.custom_types()


@dataclass(frozen=True)
class ShareSettings:
    """The complete global configuration record."""

    connection_factory: ConnectionFactory | None = None
    relay: RelayMessagingSettings = field(default_factory=RelayMessagingSettings)
    filters: EventFilterSettings = field(default_factory=EventFilterSettings)

    @property
    def use_global(self) -> bool:
        return self.connection_factory is not None
