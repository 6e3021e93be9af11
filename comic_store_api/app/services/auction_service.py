"""
Service layer for auctions.

An auction refers to the copy on sale and, once someone has bid, to
the user holding the best offer.  Deleting that user keeps the
auction and clears ``best_bidder_id``.
"""

import logging
import sqlite3
from typing import List, Optional

from ..core.db import transaction
from ..core.exceptions import InvalidRecordError
from ..models.auction import Auction
from ..repositories.auction_repository import AuctionRepository
from ..repositories.comic_copy_repository import ComicCopyRepository
from ..repositories.user_repository import UserRepository
from ..schemas.auction import AuctionCreate, AuctionRead, AuctionUpdate
from .validation import check_reference, ensure_valid, validate_auction


class AuctionService:
    """Service class for managing auctions."""

    @classmethod
    def _check(cls, conn: sqlite3.Connection, auction: Auction) -> None:
        errors = validate_auction(auction)
        check_reference(errors, ComicCopyRepository(conn), "copy_id", auction.copy_id, "comic copy")
        check_reference(errors, UserRepository(conn), "best_bidder_id", auction.best_bidder_id, "user")
        ensure_valid(errors)

    @classmethod
    async def create_auction(cls, data: AuctionCreate) -> AuctionRead:
        logger = logging.getLogger(__name__)
        auction = Auction(**data.model_dump())
        with transaction() as conn:
            try:
                cls._check(conn, auction)
            except InvalidRecordError as exc:
                logger.warning("Rejected auction of copy %s: %s", data.copy_id, exc)
                raise
            AuctionRepository(conn).save(auction)
        logger.info("Opened auction %s for copy %s", auction.id, auction.copy_id)
        return AuctionRead.model_validate(auction)

    @classmethod
    async def list_auctions(cls) -> List[AuctionRead]:
        with transaction() as conn:
            auctions = AuctionRepository(conn).find_all()
        return [AuctionRead.model_validate(auction) for auction in auctions]

    @classmethod
    async def get_auction(cls, auction_id: int) -> Optional[AuctionRead]:
        with transaction() as conn:
            auction = AuctionRepository(conn).find_by_id(auction_id)
        return AuctionRead.model_validate(auction) if auction else None

    @classmethod
    async def update_auction(cls, auction_id: int, data: AuctionUpdate) -> Optional[AuctionRead]:
        """Update the fields present in ``data``; ``None`` if not found."""
        logger = logging.getLogger(__name__)
        with transaction() as conn:
            repo = AuctionRepository(conn)
            auction = repo.find_by_id(auction_id)
            if auction is None:
                return None
            for field, value in data.model_dump(exclude_unset=True).items():
                setattr(auction, field, value)
            cls._check(conn, auction)
            repo.save(auction)
        logger.info("Updated auction %s", auction_id)
        return AuctionRead.model_validate(auction)

    @classmethod
    async def delete_auction(cls, auction_id: int) -> Optional[AuctionRead]:
        logger = logging.getLogger(__name__)
        with transaction() as conn:
            repo = AuctionRepository(conn)
            auction = repo.find_by_id(auction_id)
            if auction is None:
                return None
            repo.delete_by_id(auction_id)
        logger.info("Deleted auction %s", auction_id)
        return AuctionRead.model_validate(auction)
