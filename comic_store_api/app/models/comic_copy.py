from dataclasses import dataclass
from typing import Optional

from .entity import Entity
from .enums import CopyCondition


@dataclass(eq=False)
class ComicCopy(Entity):
    """A physical copy of a catalogue comic, offered for sale."""

    condition: CopyCondition
    price: float
    comic_id: int
    available: bool = True
    id: Optional[int] = None
