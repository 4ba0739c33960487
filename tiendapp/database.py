"""
Embedded database store and the process-wide store handle
"""
import logging
import threading
from contextlib import contextmanager
from typing import Iterator, Optional

from sqlalchemy import create_engine, text
from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from tiendapp.config import settings
from tiendapp.exceptions import SchemaVersionError, StorageError
from tiendapp.reactive import ChangeNotifier

logger = logging.getLogger(__name__)

Base = declarative_base()


def _is_memory_url(database_url: str) -> bool:
    url = make_url(database_url)
    return url.get_backend_name() == "sqlite" and url.database in (None, "", ":memory:")


class Store:
    """
    Embedded relational store holding the contacts, users, products and
    orders tables

    Session work is serialized through one re-entrant lock, so a single
    SQLite connection can be shared by worker threads. Every committed
    mutation is announced through ``notifier`` by the access objects.
    """

    def __init__(
        self,
        database_url: Optional[str] = None,
        schema_version: Optional[int] = None,
        destructive_migration: Optional[bool] = None,
        echo: Optional[bool] = None,
    ):
        self.database_url = database_url or settings.DATABASE_URL
        self.schema_version = schema_version if schema_version is not None else settings.SCHEMA_VERSION
        self.destructive_migration = (
            destructive_migration if destructive_migration is not None else settings.DESTRUCTIVE_MIGRATION
        )

        engine_kwargs = {}
        if make_url(self.database_url).get_backend_name() == "sqlite":
            engine_kwargs["connect_args"] = {"check_same_thread": False}
            if _is_memory_url(self.database_url):
                engine_kwargs["poolclass"] = StaticPool

        self.engine = create_engine(
            self.database_url,
            echo=settings.SQL_ECHO if echo is None else echo,
            **engine_kwargs
        )
        self.SessionLocal = sessionmaker(bind=self.engine, autoflush=False, expire_on_commit=False)
        self.notifier = ChangeNotifier()
        self._lock = threading.RLock()
        self._opened = False

    @property
    def is_open(self) -> bool:
        return self._opened

    def open(self) -> "Store":
        """Create missing tables and check the schema version"""
        with self._lock:
            if self._opened:
                return self

            # Register table metadata
            import tiendapp.models  # noqa: F401

            try:
                with self.engine.begin() as conn:
                    if conn.dialect.name == "sqlite":
                        self._check_schema_version(conn)
                    Base.metadata.create_all(conn)
            except SQLAlchemyError as e:
                raise StorageError(f"Could not open database {self.database_url}: {e}") from e

            self._opened = True
            logger.info("Database opened: %s (schema version %d)", self.database_url, self.schema_version)
            return self

    def _check_schema_version(self, conn) -> None:
        found = conn.execute(text("PRAGMA user_version")).scalar() or 0
        if found == self.schema_version:
            return
        if found:
            if not self.destructive_migration:
                raise SchemaVersionError(found, self.schema_version)
            logger.warning(
                "Schema version %d found, expected %d; recreating all tables",
                found,
                self.schema_version,
            )
            Base.metadata.drop_all(conn)
        conn.execute(text(f"PRAGMA user_version = {int(self.schema_version)}"))

    @contextmanager
    def session(self) -> Iterator[Session]:
        """
        Yield a session holding the store lock

        Store failures are rolled back and re-raised as StorageError.
        Callers commit explicitly.
        """
        if not self._opened:
            self.open()
        with self._lock:
            db = self.SessionLocal()
            try:
                yield db
            except SQLAlchemyError as e:
                db.rollback()
                raise StorageError(str(e)) from e
            finally:
                db.close()

    def close(self) -> None:
        with self._lock:
            self.engine.dispose()
            self._opened = False
            logger.info("Database closed: %s", self.database_url)

    def __repr__(self):
        return f"<Store(url='{self.database_url}', open={self._opened})>"


_store: Optional[Store] = None
_store_lock = threading.Lock()


def get_store() -> Store:
    """Return the shared store, constructing and opening it exactly once"""
    global _store
    if _store is None:
        with _store_lock:
            if _store is None:
                _store = Store().open()
    return _store


def reset_store() -> None:
    """Dispose the shared store; the next get_store() builds a new one"""
    global _store
    with _store_lock:
        if _store is not None:
            _store.close()
            _store = None
