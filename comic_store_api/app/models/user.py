from dataclasses import dataclass
from datetime import date
from typing import Optional

from .entity import Entity
from .enums import UserRole


@dataclass(eq=False)
class User(Entity):
    """A registered customer or administrator.

    A user owns at most one wishlist.  The relation is stored on the
    wishlist side (``wishlists.owner_id``) and removing the user removes
    the wishlist with it.
    """

    first_name: str
    last_name: str
    email: str
    password: str
    registration_date: date
    role: UserRole = UserRole.CLIENTE
    address: Optional[str] = None
    subscription_start: Optional[date] = None
    subscription_end: Optional[date] = None
    subscription_id: Optional[int] = None
    id: Optional[int] = None

    def __repr__(self) -> str:
        # The password never ends up in logs.
        return f"User(id={self.id!r}, email={self.email!r}, role={self.role.value})"
