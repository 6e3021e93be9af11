import sqlite3
from typing import List, Optional

from ..models.enums import SubscriptionPlan
from ..models.subscription import Subscription
from .base import Repository, storable_id


class SubscriptionRepository(Repository[Subscription]):
    def save(self, entity: Subscription) -> Subscription:
        cursor = self.conn.cursor()
        if entity.id is None:
            cursor.execute(
                "INSERT INTO subscriptions (plan) VALUES (?)",
                (entity.plan.value,),
            )
            entity.id = cursor.lastrowid
        else:
            cursor.execute(
                "UPDATE subscriptions SET plan = ? WHERE id = ?",
                (entity.plan.value, entity.id),
            )
        return entity

    def find_by_id(self, entity_id: int) -> Optional[Subscription]:
        if not storable_id(entity_id):
            return None
        row = self.conn.execute(
            "SELECT * FROM subscriptions WHERE id = ?", (entity_id,)
        ).fetchone()
        return self._row_to_entity(row) if row else None

    def find_all(self) -> List[Subscription]:
        rows = self.conn.execute("SELECT * FROM subscriptions ORDER BY id").fetchall()
        return [self._row_to_entity(row) for row in rows]

    def delete_by_id(self, entity_id: int) -> bool:
        if not storable_id(entity_id):
            return False
        # users.subscription_id is cleared by ON DELETE SET NULL
        cursor = self.conn.execute("DELETE FROM subscriptions WHERE id = ?", (entity_id,))
        return cursor.rowcount > 0

    @staticmethod
    def _row_to_entity(row: sqlite3.Row) -> Subscription:
        return Subscription(id=row["id"], plan=SubscriptionPlan(row["plan"]))
