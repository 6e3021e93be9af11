"""
Service layer for the comic catalogue.

Removing a comic also removes it from every wishlist that lists it.
"""

import logging
from typing import List, Optional

from ..core.db import transaction
from ..core.exceptions import InvalidRecordError
from ..models.comic import Comic
from ..repositories.comic_repository import ComicRepository
from ..schemas.comic import ComicCreate, ComicRead, ComicUpdate
from .validation import ensure_valid, validate_comic


class ComicService:
    """Service class for managing comics."""

    @classmethod
    async def create_comic(cls, data: ComicCreate) -> ComicRead:
        logger = logging.getLogger(__name__)
        comic = Comic(**data.model_dump())
        try:
            ensure_valid(validate_comic(comic))
        except InvalidRecordError as exc:
            logger.warning("Rejected comic %r: %s", data.title, exc)
            raise
        with transaction() as conn:
            ComicRepository(conn).save(comic)
        logger.info("Created comic %s", comic.id)
        return ComicRead.model_validate(comic)

    @classmethod
    async def list_comics(cls) -> List[ComicRead]:
        with transaction() as conn:
            comics = ComicRepository(conn).find_all()
        return [ComicRead.model_validate(comic) for comic in comics]

    @classmethod
    async def get_comic(cls, comic_id: int) -> Optional[ComicRead]:
        with transaction() as conn:
            comic = ComicRepository(conn).find_by_id(comic_id)
        return ComicRead.model_validate(comic) if comic else None

    @classmethod
    async def update_comic(cls, comic_id: int, data: ComicUpdate) -> Optional[ComicRead]:
        """Update the fields present in ``data``; ``None`` if not found."""
        logger = logging.getLogger(__name__)
        with transaction() as conn:
            repo = ComicRepository(conn)
            comic = repo.find_by_id(comic_id)
            if comic is None:
                return None
            for field, value in data.model_dump(exclude_unset=True).items():
                setattr(comic, field, value)
            ensure_valid(validate_comic(comic))
            repo.save(comic)
        logger.info("Updated comic %s", comic_id)
        return ComicRead.model_validate(comic)

    @classmethod
    async def delete_comic(cls, comic_id: int) -> Optional[ComicRead]:
        logger = logging.getLogger(__name__)
        with transaction() as conn:
            repo = ComicRepository(conn)
            comic = repo.find_by_id(comic_id)
            if comic is None:
                return None
            repo.delete_by_id(comic_id)
        logger.info("Deleted comic %s", comic_id)
        return ComicRead.model_validate(comic)
