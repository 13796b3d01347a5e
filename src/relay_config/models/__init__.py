from .share_settings import SHARE_SETTINGS_ID, ShareSettingsRecord

__all__ = [
    "SHARE_SETTINGS_ID",
    "ShareSettingsRecord",
]
