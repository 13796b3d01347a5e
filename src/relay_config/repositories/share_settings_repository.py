from loguru import logger
from sqlalchemy.orm import Session

from ..models import SHARE_SETTINGS_ID, ShareSettingsRecord
from .base import BaseRepository


class ShareSettingsRepository(BaseRepository[ShareSettingsRecord]):
    """Repository for the singleton share settings row."""

    def __init__(self, session: Session, record_id: str = SHARE_SETTINGS_ID):
        super().__init__(ShareSettingsRecord, session)
        self.record_id = record_id

    def load(self) -> ShareSettingsRecord | None:
        """Get the persisted record, or None on first run."""
        return self.get_by_id(self.record_id)

    def store(self, **fields) -> ShareSettingsRecord:
        """Write every given column of the persisted record."""
        record = self.upsert(self.record_id, **fields)
        logger.debug("Share settings record {} written", self.record_id)
        return record
