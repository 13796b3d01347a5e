from typing import TYPE_CHECKING, Callable, Protocol

from loguru import logger

from .models import RelayMessagingSettings

if TYPE_CHECKING:
    from .store import SettingsStore


class RelayBootstrapper(Protocol):
    """Reinitializes the event relay from whatever the store holds now."""

    def reinit(self) -> None:
        ...


class ActionHubRelay:
    """Default bootstrapper for the ActionHub event relay.

    Pulls the current settings from the store on every reinit and hands
    complete ones to the connector; incomplete ones leave the relay
    disconnected.
    """

    def __init__(
        self,
        store: "SettingsStore",
        connector: Callable[[RelayMessagingSettings], None] | None = None,
    ):
        self.store = store
        self.connector = connector
        self.active: RelayMessagingSettings | None = None

    def reinit(self) -> None:
        relay = self.store.snapshot().relay
        if not relay.is_valid():
            logger.warning("ActionHub settings incomplete, event relay stays disconnected")
            self.active = None
            return

        logger.info(
            "Reinitializing ActionHub relay: host={}, port={}, exchange={}",
            relay.host,
            relay.port,
            relay.exchange,
        )
        if self.connector is not None:
            self.connector(relay)
        self.active = relay
