from dataclasses import dataclass
from datetime import date
from typing import Optional

from .entity import Entity
from .enums import ComicCategory


@dataclass(eq=False)
class Comic(Entity):
    """A comic book in the catalogue."""

    title: str
    author: str
    publisher: str
    publication_date: date
    category: ComicCategory
    description: Optional[str] = None
    available_for_auction: bool = False
    id: Optional[int] = None
