from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from ..database.base import Base

SHARE_SETTINGS_ID = "teamforge-share"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ShareSettingsRecord(Base):
    """Persisted global TeamForge/ActionHub configuration.

    A single row keyed by SHARE_SETTINGS_ID. Password columns hold
    ciphertext only.
    """

    __tablename__ = "share_settings"

    id: Mapped[str] = mapped_column(String(64), primary_key=True, default=SHARE_SETTINGS_ID)

    # Connection factory
    collabnet_url: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    username: Mapped[str | None] = mapped_column(String(256), nullable=True)
    password: Mapped[str | None] = mapped_column(Text, nullable=True)
    use_global: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    # ActionHub message queue
    action_hub_mq_host: Mapped[str | None] = mapped_column(String(256), nullable=True)
    action_hub_mq_port: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    action_hub_mq_username: Mapped[str | None] = mapped_column(String(256), nullable=True)
    action_hub_mq_password: Mapped[str | None] = mapped_column(Text, nullable=True)
    action_hub_mq_exchange: Mapped[str | None] = mapped_column(String(256), nullable=True)
    action_hub_mq_workflow_queue: Mapped[str | None] = mapped_column(String(256), nullable=True)
    action_hub_mq_actions_queue: Mapped[str | None] = mapped_column(String(256), nullable=True)

    # ActionHub event filters
    action_hub_msg_include_radio: Mapped[str | None] = mapped_column(String(64), nullable=True)
    action_hub_msg_manual: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    action_hub_msg_workitem: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    action_hub_msg_commit: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    action_hub_msg_build: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    action_hub_msg_review: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    action_hub_msg_custom: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    action_hub_msg_custom_txt: Mapped[str | None] = mapped_column(String(4096), nullable=True)

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, onupdate=_utcnow, nullable=False
    )

    def __repr__(self) -> str:
        return f"<ShareSettingsRecord(id='{self.id}', use_global={self.use_global})>"
