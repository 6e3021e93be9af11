"""Pydantic schemas for comic books."""

from datetime import date
from typing import Optional

from pydantic import BaseModel, Field

from ..models.enums import ComicCategory


class ComicBase(BaseModel):
    title: str = Field(..., description="Titolo")
    author: str = Field(..., description="Autore")
    publisher: str = Field(..., description="Editore")
    description: Optional[str] = None
    publication_date: date = Field(..., description="Publication date, not in the future")
    available_for_auction: bool = Field(False, description="Whether copies may be auctioned")
    category: ComicCategory


class ComicCreate(ComicBase):
    """Schema for adding a comic to the catalogue."""


class ComicUpdate(BaseModel):
    """Schema for updating a comic; only provided values are updated."""

    title: Optional[str] = None
    author: Optional[str] = None
    publisher: Optional[str] = None
    description: Optional[str] = None
    publication_date: Optional[date] = None
    available_for_auction: Optional[bool] = None
    category: Optional[ComicCategory] = None


class ComicRead(ComicBase):
    id: int

    model_config = {
        "from_attributes": True,
    }
