"""
User list/create operations backed by SQLAlchemy.
"""
from __future__ import annotations

import logging
from typing import List

from flask import current_app
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError, TimeoutError as PoolTimeoutError

from userhub.database import Database
from userhub.errors import StorageError, StorageUnavailableError
from userhub.models import User

logger = logging.getLogger(__name__)


class UserService:
    """
    Stateless access to the users table. Every call checks a connection out of
    the pool for the duration of a single statement and hands it back afterwards.
    """

    def __init__(self, database: Database):
        self.database = database

    def list_users(self) -> List[dict]:
        """
        Return every user in storage order (ascending primary key).
        """
        try:
            with self.database.session() as session:
                rows = session.execute(select(User).order_by(User.id)).scalars().all()
                return [row.to_dict() for row in rows]
        except PoolTimeoutError as exc:
            logger.warning(f"UserService: no connection available to list users -> {exc}")
            raise StorageUnavailableError("Database is busy, try again later") from exc
        except SQLAlchemyError as exc:
            logger.error(f"UserService: failed to load users: {exc}", exc_info=True)
            raise StorageError("Failed to load users") from exc

    def create_user(self, username: str) -> dict:
        """
        Insert a user and return it with the primary key storage assigned.
        """
        try:
            with self.database.session() as session:
                user = User(username=username)
                session.add(user)
                session.flush()
                created = user.to_dict()
        except PoolTimeoutError as exc:
            logger.warning(f"UserService: no connection available to create user -> {exc}")
            raise StorageUnavailableError("Database is busy, try again later") from exc
        except SQLAlchemyError as exc:
            logger.error(f"UserService: failed to insert user '{username}': {exc}", exc_info=True)
            raise StorageError("Failed to create user") from exc

        logger.info(f"UserService: created user id={created['id']}")
        return created


def get_user_service() -> UserService:
    """Service bound to the running application."""
    return current_app.extensions["userhub.user_service"]
