from .checks import check
from .configure import configure
from .health import health
from .settings import current_settings

__all__ = [
    "check",
    "configure",
    "current_settings",
    "health",
]
