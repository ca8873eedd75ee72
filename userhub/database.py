"""
SQLite storage: file bootstrap, bounded connection pool and session management.
"""
from __future__ import annotations

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Generator, Union

from sqlalchemy import create_engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import QueuePool

from userhub.errors import StorageInitError

logger = logging.getLogger(__name__)

Base = declarative_base()


class Database:
    """
    Owns the engine and session factory for one database file.

    The pool never hands out more than ``pool_size`` connections; a caller that
    waits longer than ``pool_timeout`` seconds gets ``sqlalchemy.exc.TimeoutError``.
    """

    def __init__(self, path: Union[str, Path], pool_size: int = 5, pool_timeout: float = 5):
        self.path = Path(path)
        self.url = f"sqlite:///{self.path}"
        self.engine = create_engine(
            self.url,
            poolclass=QueuePool,
            pool_size=pool_size,
            max_overflow=0,
            pool_timeout=pool_timeout,
            pool_pre_ping=True,
            echo=False,
            # Connections are shared across the server's worker threads.
            connect_args={"check_same_thread": False},
        )
        self.SessionLocal = sessionmaker(
            bind=self.engine,
            autoflush=False,
            expire_on_commit=False,
        )

    @classmethod
    def from_config(cls, config) -> "Database":
        return cls(
            config["DATABASE_PATH"],
            pool_size=config["DB_POOL_SIZE"],
            pool_timeout=config["DB_POOL_TIMEOUT"],
        )

    def init(self) -> None:
        """
        Make sure the database file and the users table exist.
        Safe to call on every startup; existing data is left untouched.
        """
        try:
            if not self.path.exists():
                self.path.parent.mkdir(parents=True, exist_ok=True)
                self.path.touch()
                logger.info(f"Created empty database file at {self.path}")

            from userhub import models  # noqa: F401  (side-effect import)
            Base.metadata.create_all(bind=self.engine)
        except (OSError, SQLAlchemyError) as e:
            logger.error(f"Error initializing database at {self.path}: {e}", exc_info=True)
            raise StorageInitError(f"failed to initialize database at {self.path}: {e}") from e

    @contextmanager
    def session(self) -> Generator[Session, None, None]:
        """
        One unit of work: commit when the block exits cleanly, roll back when
        it raises. Either way the session closes and its connection goes back
        to the pool.
        """
        with self.SessionLocal.begin() as session:
            yield session

    def dispose(self) -> None:
        self.engine.dispose()
