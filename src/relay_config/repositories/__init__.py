from .base import BaseRepository
from .share_settings_repository import ShareSettingsRepository

__all__ = [
    "BaseRepository",
    "ShareSettingsRepository",
]
