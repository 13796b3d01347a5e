from .base import Base
from .migrations import init_database, verify_schema
from .session import SessionManager

__all__ = [
    "Base",
    "SessionManager",
    "init_database",
    "verify_schema",
]
