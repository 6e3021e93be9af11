"""Pydantic schemas for comic copies."""

from typing import Optional

from pydantic import BaseModel, Field

from ..models.enums import CopyCondition


class ComicCopyBase(BaseModel):
    condition: CopyCondition = Field(..., description="NUOVO or USATO")
    price: float = Field(..., description="Prezzo")
    available: bool = True
    comic_id: int = Field(..., description="Catalogue comic this is a copy of")


class ComicCopyCreate(ComicCopyBase):
    pass


class ComicCopyUpdate(BaseModel):
    condition: Optional[CopyCondition] = None
    price: Optional[float] = None
    available: Optional[bool] = None
    comic_id: Optional[int] = None


class ComicCopyRead(ComicCopyBase):
    id: int

    model_config = {
        "from_attributes": True,
    }
