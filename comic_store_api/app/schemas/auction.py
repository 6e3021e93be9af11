"""Pydantic schemas for auctions."""

from datetime import date
from typing import Optional

from pydantic import BaseModel, Field

from ..models.enums import AuctionStatus


class AuctionBase(BaseModel):
    start_date: date
    end_date: date = Field(..., description="Not before start_date")
    current_offer: float = Field(..., description="Offerta corrente")
    status: AuctionStatus = AuctionStatus.IN_CORSO
    copy_id: int = Field(..., description="Comic copy being auctioned")
    best_bidder_id: Optional[int] = Field(None, description="User holding the current offer")


class AuctionCreate(AuctionBase):
    """Schema for opening an auction."""


class AuctionUpdate(BaseModel):
    """Schema for updating an auction; only provided values are updated."""

    start_date: Optional[date] = None
    end_date: Optional[date] = None
    current_offer: Optional[float] = None
    status: Optional[AuctionStatus] = None
    copy_id: Optional[int] = None
    best_bidder_id: Optional[int] = None


class AuctionRead(AuctionBase):
    id: int

    model_config = {
        "from_attributes": True,
    }
