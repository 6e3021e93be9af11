"""
Identity semantics shared by all persisted records.

Entities are compared by their database identity.  An entity that has
not been saved yet (``id is None``) is equal only to itself.  The hash
is the same for every instance of a class, so an entity keeps its hash
when the repository assigns its id after it was put in a set or used
as a dict key.
"""

from typing import Optional


class Entity:
    """Mixin for records identified by an integer ``id``."""

    id: Optional[int]

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if other is None or type(other) is not type(self):
            return False
        return self.id is not None and self.id == other.id

    def __hash__(self) -> int:
        return hash(type(self).__name__)
