from contextlib import contextmanager
from typing import Generator

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from ..config import SettingsManager
from .base import Base


class SessionManager:
    """Manages database sessions and engine lifecycle."""

    _engine: Engine
    _session_factory: sessionmaker

    def __init__(
        self,
        connection_string: str,
        echo: bool = False,
    ):
        """Initialize session manager."""
        engine_options = {"echo": echo}
        if connection_string.startswith("sqlite"):
            # Request threads share the engine; an in-memory database must
            # also share its single connection or each thread sees its own.
            engine_options["connect_args"] = {"check_same_thread": False}
            if ":memory:" in connection_string or connection_string in ("sqlite://", "sqlite+pysqlite://"):
                engine_options["poolclass"] = StaticPool
        self._engine = create_engine(connection_string, **engine_options)
        self._session_factory = sessionmaker(bind=self._engine, expire_on_commit=False)

    @classmethod
    def from_settings(cls, settings: SettingsManager) -> "SessionManager":
        """Build a session manager from the database settings section."""
        return cls(
            connection_string=settings.database.url,
            echo=settings.database.echo,
        )

    @property
    def engine(self) -> Engine:
        """Get the database engine."""
        return self._engine

    def create_all(self):
        """Create all tables in the database."""
        Base.metadata.create_all(self._engine)

    @contextmanager
    def session(self) -> Generator[Session, None, None]:
        """Provide a transactional scope around a series of operations."""
        session = self._session_factory()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def close(self):
        """Close the engine and cleanup resources."""
        self._engine.dispose()
