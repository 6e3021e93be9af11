from dataclasses import dataclass
from datetime import date
from typing import Optional

from .entity import Entity
from .enums import AuctionStatus


@dataclass(eq=False)
class Auction(Entity):
    """An auction of a single comic copy.

    ``best_bidder_id`` names the user holding ``current_offer``; it is
    ``None`` until someone bids and is cleared if that user is deleted.
    """

    start_date: date
    end_date: date
    current_offer: float
    copy_id: int
    status: AuctionStatus = AuctionStatus.IN_CORSO
    best_bidder_id: Optional[int] = None
    id: Optional[int] = None
