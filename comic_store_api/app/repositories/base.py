"""
Data-access interface shared by all repositories.

A repository works on an open ``sqlite3.Connection`` owned by the
caller.  It never commits: the service wraps one or more repository
calls in ``core.db.transaction()`` so that they succeed or fail
together.
"""

import sqlite3
from abc import ABC, abstractmethod
from datetime import date
from typing import Generic, List, Optional, TypeVar

from ..models.entity import Entity

T = TypeVar("T", bound=Entity)


class Repository(ABC, Generic[T]):
    """CRUD access to one entity type."""

    def __init__(self, conn: sqlite3.Connection):
        self.conn = conn

    @abstractmethod
    def save(self, entity: T) -> T:
        """Insert ``entity`` when it has no id, update it otherwise.

        On insert the generated id is assigned to ``entity.id``.  The
        same instance is returned.
        """

    @abstractmethod
    def find_by_id(self, entity_id: int) -> Optional[T]:
        """Return the entity with the given id or ``None``."""

    @abstractmethod
    def find_all(self) -> List[T]:
        """Return every entity ordered by id."""

    @abstractmethod
    def delete_by_id(self, entity_id: int) -> bool:
        """Delete the entity; return ``True`` if a row was removed."""

    def exists(self, entity_id: int) -> bool:
        return self.find_by_id(entity_id) is not None


# Range of a SQLite INTEGER; sqlite3 raises OverflowError outside it.
SQLITE_MIN_INTEGER = -(2 ** 63)
SQLITE_MAX_INTEGER = 2 ** 63 - 1


def storable_id(entity_id: int) -> bool:
    """Return ``True`` if ``entity_id`` fits in an INTEGER column.

    Ids outside that range cannot name a stored row, so lookups treat
    them as absent.
    """
    return SQLITE_MIN_INTEGER <= entity_id <= SQLITE_MAX_INTEGER


def to_iso(value: Optional[date]) -> Optional[str]:
    return value.isoformat() if value is not None else None


def from_iso(value: Optional[str]) -> Optional[date]:
    return date.fromisoformat(value) if value else None
