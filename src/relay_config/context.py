"""Process wiring.

The service builds one AppContext at startup and hands it to every
handler; nothing looks the settings store up globally.
"""

import sys
from dataclasses import dataclass
from typing import Callable

from loguru import logger

from .config import SettingsManager
from .database import SessionManager, init_database
from .services import SecretCipher, resolve_secret_key
from .share import ActionHubRelay, ConfigurationController, RelayBootstrapper, SettingsStore

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)


@dataclass
class AppContext:
    settings: SettingsManager
    session_manager: SessionManager
    store: SettingsStore
    relay: RelayBootstrapper
    controller: ConfigurationController

    def close(self) -> None:
        self.session_manager.close()


def configure_logging(settings: SettingsManager) -> None:
    logger.remove()
    logger.add(sys.stderr, level=settings.application.log_level, format=LOG_FORMAT)


def build_context(
    settings: SettingsManager | None = None,
    session_manager: SessionManager | None = None,
    relay_factory: Callable[[SettingsStore], RelayBootstrapper] | None = None,
) -> AppContext:
    """Create the store, load persisted settings and wire the controller."""
    settings = settings or SettingsManager.from_env()

    session_manager = session_manager or SessionManager.from_settings(settings)
    init_database(session_manager)

    store = SettingsStore(session_manager, SecretCipher(resolve_secret_key(settings)))
    store.load()

    relay = (relay_factory or ActionHubRelay)(store)
    controller = ConfigurationController(store, relay)
    logger.info("{} ready (relay settings valid: {})", store.display_name, store.are_settings_valid())

    return AppContext(
        settings=settings,
        session_manager=session_manager,
        store=store,
        relay=relay,
        controller=controller,
    )
