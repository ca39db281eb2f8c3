"""Database connection manager for Student Store."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from sqlalchemy import create_engine, event, make_url, text
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from studentapi.student_store.models import Base

if TYPE_CHECKING:
    from sqlalchemy import Engine

MEMORY_URL = ":memory:"


class Database:
    """Database connection manager.

    Accepts any SQLAlchemy URL. SQLite databases get WAL mode enabled; the
    shorthand ":memory:" selects a shared in-memory SQLite database.
    """

    def __init__(self, url: str = "sqlite:///students.db") -> None:
        """Initialize database connection.

        Args:
            url: SQLAlchemy database URL, or ":memory:" for in-memory SQLite.
        """
        self.url = url
        self._engine: Engine | None = None
        self._session_factory: sessionmaker[Session] | None = None

    @property
    def is_memory(self) -> bool:
        """Whether the URL selects an in-memory SQLite database."""
        return self.url in (MEMORY_URL, "sqlite://", "sqlite:///:memory:")

    @property
    def is_sqlite(self) -> bool:
        """Whether the URL points at a SQLite database."""
        return self.is_memory or make_url(self.url).get_backend_name() == "sqlite"

    @property
    def engine(self) -> Engine:
        """Get or create the database engine."""
        if self._engine is None:
            if self.is_memory:
                # Share one connection across threads (needed for TestClient)
                self._engine = create_engine(
                    "sqlite:///:memory:",
                    echo=False,
                    poolclass=StaticPool,
                    connect_args={"check_same_thread": False},
                )
            elif self.is_sqlite:
                database = make_url(self.url).database
                if database:
                    Path(database).parent.mkdir(parents=True, exist_ok=True)
                self._engine = create_engine(
                    self.url,
                    echo=False,
                    connect_args={"check_same_thread": False},
                )
            else:
                self._engine = create_engine(self.url, echo=False, pool_pre_ping=True)

            if self.is_sqlite:

                @event.listens_for(self._engine, "connect")
                def set_sqlite_pragma(dbapi_connection: object, _connection_record: object) -> None:
                    cursor = dbapi_connection.cursor()  # type: ignore[attr-defined]
                    cursor.execute("PRAGMA journal_mode=WAL")
                    cursor.close()

        return self._engine

    @property
    def session_factory(self) -> sessionmaker[Session]:
        """Get or create the session factory."""
        if self._session_factory is None:
            self._session_factory = sessionmaker(
                bind=self.engine,
                expire_on_commit=False,
            )
        return self._session_factory

    def create_tables(self) -> None:
        """Create all tables if they don't exist."""
        Base.metadata.create_all(self.engine)

    def get_session(self) -> Session:
        """Get a new database session.

        Returns:
            A new SQLAlchemy session.
        """
        return self.session_factory()

    def is_wal_mode(self) -> bool:
        """Check if WAL mode is enabled (SQLite only).

        Returns:
            True if WAL mode is enabled.
        """
        if not self.is_sqlite:
            return False
        with self.engine.connect() as conn:
            result = conn.execute(text("PRAGMA journal_mode"))
            mode = result.scalar()
            return mode == "wal"

    def close(self) -> None:
        """Close the database connection."""
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None
            self._session_factory = None
