"""Holder of the global TeamForge/ActionHub configuration.

The store keeps one immutable ShareSettings record in memory and mirrors
it to a single database row. Mutations build a new record, persist it and
only then swap it in, so readers never observe a half-applied update.
"""

import dataclasses
import threading

from loguru import logger
from sqlalchemy.exc import SQLAlchemyError

from ..database import SessionManager
from ..models import SHARE_SETTINGS_ID, ShareSettingsRecord
from ..repositories import ShareSettingsRepository
from ..services.secrets import SecretCipher, SecretError, reveal
from .constants import DISPLAY_NAME
from .models import ConnectionFactory, EventFilterSettings, RelayMessagingSettings, ShareSettings


class SettingsStore:
    """Owner of the in-memory settings record and its persistence."""

    display_name = DISPLAY_NAME

    def __init__(
        self,
        session_manager: SessionManager,
        cipher: SecretCipher,
        record_id: str = SHARE_SETTINGS_ID,
    ):
        self._session_manager = session_manager
        self._cipher = cipher
        self._record_id = record_id
        self._settings = ShareSettings()
        self.lock = threading.RLock()

    @staticmethod
    def is_applicable(job_type) -> bool:
        """Global configuration only; never attached to a job."""
        return False

    # Persistence

    def load(self) -> ShareSettings:
        """Read the persisted record; missing state means first run."""
        try:
            with self._session_manager.session() as session:
                record = ShareSettingsRepository(session, self._record_id).load()
                settings = self._from_record(record) if record else None
        except SQLAlchemyError as e:
            logger.warning("Share settings could not be read, starting from defaults: {}", e)
            settings = None

        if settings is None:
            logger.info("No persisted share settings found, using defaults")
            settings = ShareSettings()
        else:
            logger.info("Share settings loaded (use_global={})", settings.use_global)

        with self.lock:
            self._settings = settings
        return settings

    def save(self) -> None:
        """Write the complete current record in one transaction."""
        with self.lock:
            self._persist(self._settings)

    def replace(self, settings: ShareSettings) -> None:
        """Persist a complete new record, then make it current."""
        with self.lock:
            self._persist(settings)
            self._settings = settings

    def _persist(self, settings: ShareSettings) -> None:
        with self._session_manager.session() as session:
            ShareSettingsRepository(session, self._record_id).store(**self._to_columns(settings))
        logger.debug("Share settings saved")

    def _to_columns(self, settings: ShareSettings) -> dict:
        cf = settings.connection_factory
        relay = settings.relay
        filters = settings.filters
        return {
            "collabnet_url": cf.url if cf else None,
            "username": cf.username if cf else None,
            "password": self._cipher.encrypt(cf.password) if cf else None,
            "use_global": settings.use_global,
            "action_hub_mq_host": relay.host,
            "action_hub_mq_port": relay.port,
            "action_hub_mq_username": relay.username,
            "action_hub_mq_password": self._cipher.encrypt(relay.password),
            "action_hub_mq_exchange": relay.exchange,
            "action_hub_mq_workflow_queue": relay.workflow_queue,
            "action_hub_mq_actions_queue": relay.actions_queue,
            "action_hub_msg_include_radio": filters.include_mode,
            "action_hub_msg_manual": filters.manual,
            "action_hub_msg_workitem": filters.workitem,
            "action_hub_msg_commit": filters.commit,
            "action_hub_msg_build": filters.build,
            "action_hub_msg_review": filters.review,
            "action_hub_msg_custom": filters.custom,
            "action_hub_msg_custom_txt": filters.custom_text,
        }

    def _decrypt(self, token: str | None, column: str):
        try:
            return self._cipher.decrypt(token)
        except SecretError:
            logger.error("Stored {} cannot be decrypted, treating it as unset", column)
            return None

    def _from_record(self, record: ShareSettingsRecord) -> ShareSettings:
        connection_factory = None
        if record.use_global:
            password = self._decrypt(record.password, "password")
            if password is None and record.password is not None:
                logger.error("Connection factory settings dropped, global TeamForge settings disabled")
            else:
                connection_factory = ConnectionFactory(
                    url=record.collabnet_url,
                    username=record.username,
                    password=password,
                )
        return ShareSettings(
            connection_factory=connection_factory,
            relay=RelayMessagingSettings(
                host=record.action_hub_mq_host,
                port=record.action_hub_mq_port or 0,
                username=record.action_hub_mq_username,
                password=self._decrypt(record.action_hub_mq_password, "action_hub_mq_password"),
                exchange=record.action_hub_mq_exchange,
                workflow_queue=record.action_hub_mq_workflow_queue,
                actions_queue=record.action_hub_mq_actions_queue,
            ),
            filters=EventFilterSettings(
                include_mode=record.action_hub_msg_include_radio,
                manual=record.action_hub_msg_manual,
                workitem=record.action_hub_msg_workitem,
                commit=record.action_hub_msg_commit,
                build=record.action_hub_msg_build,
                review=record.action_hub_msg_review,
                custom=record.action_hub_msg_custom,
                custom_text=record.action_hub_msg_custom_txt,
            ),
        )

    # Connection factory

    def set_connection_factory(self, cf: ConnectionFactory | None) -> None:
        with self.lock:
            if cf is not None:
                cf = ConnectionFactory(url=cf.url, username=cf.username, password=cf.password)
            self.replace(dataclasses.replace(self._settings, connection_factory=cf))

    def get_connection_factory(self) -> ConnectionFactory | None:
        return self._settings.connection_factory

    def use_global(self) -> bool:
        return self._settings.use_global

    # Readers

    def snapshot(self) -> ShareSettings:
        """The current record; immutable, so safe to read field by field."""
        return self._settings

    def are_settings_valid(self) -> bool:
        return self._settings.relay.is_valid()

    def get_collabnet_url(self) -> str | None:
        cf = self._settings.connection_factory
        return cf.url if cf else None

    def get_username(self) -> str | None:
        cf = self._settings.connection_factory
        return cf.username if cf else None

    def get_password(self) -> str | None:
        cf = self._settings.connection_factory
        return reveal(cf.password) if cf else None

    def get_action_hub_mq_host(self) -> str | None:
        return self._settings.relay.host

    def get_action_hub_mq_port(self) -> int:
        return self._settings.relay.port

    def get_action_hub_mq_username(self) -> str | None:
        return self._settings.relay.username

    def get_action_hub_mq_password(self) -> str | None:
        return reveal(self._settings.relay.password)

    def get_action_hub_mq_exchange(self) -> str | None:
        return self._settings.relay.exchange

    def get_action_hub_mq_workflow_queue(self) -> str | None:
        return self._settings.relay.workflow_queue

    def get_action_hub_mq_actions_queue(self) -> str | None:
        return self._settings.relay.actions_queue

    def get_action_hub_msg_include_radio(self) -> str | None:
        return self._settings.filters.include_mode

    def is_action_hub_msg_manual(self) -> bool:
        return self._settings.filters.manual

    def is_action_hub_msg_workitem(self) -> bool:
        return self._settings.filters.workitem

    def is_action_hub_msg_commit(self) -> bool:
        return self._settings.filters.commit

    def is_action_hub_msg_build(self) -> bool:
        return self._settings.filters.build

    def is_action_hub_msg_review(self) -> bool:
        return self._settings.filters.review

    def is_action_hub_msg_custom(self) -> bool:
        return self._settings.filters.custom

    def get_action_hub_msg_custom_txt(self) -> str | None:
        return self._settings.filters.custom_text

    def export_settings(self, mask_secrets: bool = True) -> dict:
        """Current record as plain data, passwords masked unless asked."""
        settings = self._settings
        cf = settings.connection_factory
        relay = settings.relay
        filters = settings.filters

        def secret_value(secret):
            if secret is None:
                return None
            return "***MASKED***" if mask_secrets else secret.reveal()

        return {
            "use_global": settings.use_global,
            "connection_factory": {
                "url": cf.url,
                "username": cf.username,
                "password": secret_value(cf.password),
            } if cf else None,
            "relay": {
                "host": relay.host,
                "port": relay.port,
                "username": relay.username,
                "password": secret_value(relay.password),
                "exchange": relay.exchange,
                "workflow_queue": relay.workflow_queue,
                "actions_queue": relay.actions_queue,
            },
            "filters": {
                "include_mode": filters.include_mode,
                "manual": filters.manual,
                "workitem": filters.workitem,
                "commit": filters.commit,
                "build": filters.build,
                "review": filters.review,
                "custom": filters.custom,
                "custom_text": filters.custom_text,
            },
            "valid": relay.is_valid(),
        }
