import logging
import sqlite3
from typing import List, Optional

from ..models.enums import UserRole
from ..models.user import User
from .base import Repository, from_iso, storable_id, to_iso


class UserRepository(Repository[User]):
    def save(self, entity: User) -> User:
        values = (
            entity.first_name,
            entity.last_name,
            entity.email,
            entity.password,
            entity.address,
            to_iso(entity.registration_date),
            to_iso(entity.subscription_start),
            to_iso(entity.subscription_end),
            entity.role.value,
            entity.subscription_id,
        )
        cursor = self.conn.cursor()
        if entity.id is None:
            cursor.execute(
                """
                INSERT INTO users (
                    first_name, last_name, email, password, address, registration_date,
                    subscription_start, subscription_end, role, subscription_id
                )
                VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                """,
                values,
            )
            entity.id = cursor.lastrowid
        else:
            cursor.execute(
                """
                UPDATE users
                SET first_name = ?, last_name = ?, email = ?, password = ?, address = ?,
                    registration_date = ?, subscription_start = ?, subscription_end = ?,
                    role = ?, subscription_id = ?
                WHERE id = ?
                """,
                values + (entity.id,),
            )
        return entity

    def find_by_id(self, entity_id: int) -> Optional[User]:
        if not storable_id(entity_id):
            return None
        row = self.conn.execute("SELECT * FROM users WHERE id = ?", (entity_id,)).fetchone()
        return self._row_to_entity(row) if row else None

    def find_by_email(self, email: str) -> Optional[User]:
        row = self.conn.execute("SELECT * FROM users WHERE email = ?", (email,)).fetchone()
        return self._row_to_entity(row) if row else None

    def find_all(self) -> List[User]:
        rows = self.conn.execute("SELECT * FROM users ORDER BY id").fetchall()
        return [self._row_to_entity(row) for row in rows]

    def delete_by_id(self, entity_id: int) -> bool:
        """Delete a user together with the wishlist they own.

        The wishlist row is removed explicitly so the cascade does not
        depend on foreign key enforcement being enabled; its join table
        rows go with it.
        """
        if not storable_id(entity_id):
            return False
        cursor = self.conn.cursor()
        cursor.execute(
            "DELETE FROM comics_in_wishlist WHERE wishlist_id IN "
            "(SELECT id FROM wishlists WHERE owner_id = ?)",
            (entity_id,),
        )
        cursor.execute("DELETE FROM wishlists WHERE owner_id = ?", (entity_id,))
        if cursor.rowcount:
            logging.getLogger(__name__).info("Removed wishlist of user %s", entity_id)
        cursor.execute("DELETE FROM users WHERE id = ?", (entity_id,))
        return cursor.rowcount > 0

    @staticmethod
    def _row_to_entity(row: sqlite3.Row) -> User:
        return User(
            id=row["id"],
            first_name=row["first_name"],
            last_name=row["last_name"],
            email=row["email"],
            password=row["password"],
            address=row["address"],
            registration_date=from_iso(row["registration_date"]),
            subscription_start=from_iso(row["subscription_start"]),
            subscription_end=from_iso(row["subscription_end"]),
            role=UserRole(row["role"]),
            subscription_id=row["subscription_id"],
        )
