"""
Business logic for users.

Every operation runs in its own transaction.  Lookups return ``None``
for unknown ids; writes that cannot be accepted raise
``InvalidRecordError``.  Deleting a user also deletes the wishlist the
user owns.
"""

import logging
import sqlite3
from typing import List, Optional

from ..core.db import transaction
from ..core.exceptions import FieldError, InvalidRecordError
from ..models.user import User
from ..repositories.subscription_repository import SubscriptionRepository
from ..repositories.user_repository import UserRepository
from ..schemas.user import UserCreate, UserRead, UserUpdate
from .validation import ensure_valid, validate_user


def integrity_error(exc: sqlite3.IntegrityError) -> InvalidRecordError:
    """Translate a constraint violation into an ``InvalidRecordError``."""
    message = str(exc)
    if "users.email" in message:
        return InvalidRecordError([FieldError("email", "is already registered")])
    return InvalidRecordError([FieldError("record", message)])


class UserService:
    """Service class for managing users."""

    @classmethod
    def _check(cls, conn: sqlite3.Connection, user: User) -> None:
        """Run the validation pass plus the checks that need the database."""
        errors = validate_user(user)
        if user.subscription_id is not None and not SubscriptionRepository(conn).exists(user.subscription_id):
            errors.append(FieldError("subscription_id", f"subscription {user.subscription_id} does not exist"))
        if user.email:
            other = UserRepository(conn).find_by_email(user.email)
            if other is not None and other != user:
                errors.append(FieldError("email", "is already registered"))
        ensure_valid(errors)

    @classmethod
    async def create_user(cls, data: UserCreate) -> UserRead:
        """Register a new user and return the stored record."""
        logger = logging.getLogger(__name__)
        user = User(**data.model_dump())
        with transaction() as conn:
            try:
                cls._check(conn, user)
                UserRepository(conn).save(user)
            except InvalidRecordError as exc:
                logger.warning("Rejected user %s: %s", data.email, exc)
                raise
            except sqlite3.IntegrityError as exc:
                logger.warning("Rejected user %s: %s", data.email, exc)
                raise integrity_error(exc) from exc
        logger.info("Created user %s", user.id)
        return UserRead.model_validate(user)

    @classmethod
    async def list_users(cls) -> List[UserRead]:
        """Return all users ordered by id."""
        with transaction() as conn:
            users = UserRepository(conn).find_all()
        return [UserRead.model_validate(user) for user in users]

    @classmethod
    async def get_user(cls, user_id: int) -> Optional[UserRead]:
        with transaction() as conn:
            user = UserRepository(conn).find_by_id(user_id)
        return UserRead.model_validate(user) if user else None

    @classmethod
    async def update_user(cls, user_id: int, data: UserUpdate) -> Optional[UserRead]:
        """Update an existing user.

        Only fields present in the request body are changed.  Returns
        the updated user or ``None`` if the user does not exist.
        """
        logger = logging.getLogger(__name__)
        with transaction() as conn:
            repo = UserRepository(conn)
            user = repo.find_by_id(user_id)
            if user is None:
                return None
            for field, value in data.model_dump(exclude_unset=True).items():
                setattr(user, field, value)
            cls._check(conn, user)
            try:
                repo.save(user)
            except sqlite3.IntegrityError as exc:
                raise integrity_error(exc) from exc
        logger.info("Updated user %s", user_id)
        return UserRead.model_validate(user)

    @classmethod
    async def delete_user(cls, user_id: int) -> Optional[UserRead]:
        """Delete a user and their wishlist.

        Returns the deleted user, or ``None`` if there was none.
        """
        logger = logging.getLogger(__name__)
        with transaction() as conn:
            repo = UserRepository(conn)
            user = repo.find_by_id(user_id)
            if user is None:
                return None
            repo.delete_by_id(user_id)
        logger.info("Deleted user %s", user_id)
        return UserRead.model_validate(user)
