"""
Service layer for comic copies.

A copy always belongs to a catalogue comic.  Removing a copy also
removes its auctions and the order lines that reference it.
"""

import logging
import sqlite3
from typing import List, Optional

from ..core.db import transaction
from ..core.exceptions import InvalidRecordError
from ..models.comic_copy import ComicCopy
from ..repositories.comic_copy_repository import ComicCopyRepository
from ..repositories.comic_repository import ComicRepository
from ..schemas.comic_copy import ComicCopyCreate, ComicCopyRead, ComicCopyUpdate
from .validation import check_reference, ensure_valid, validate_comic_copy


class ComicCopyService:
    """Service class for managing comic copies."""

    @classmethod
    def _check(cls, conn: sqlite3.Connection, copy: ComicCopy) -> None:
        errors = validate_comic_copy(copy)
        check_reference(errors, ComicRepository(conn), "comic_id", copy.comic_id, "comic")
        ensure_valid(errors)

    @classmethod
    async def create_copy(cls, data: ComicCopyCreate) -> ComicCopyRead:
        logger = logging.getLogger(__name__)
        copy = ComicCopy(**data.model_dump())
        with transaction() as conn:
            try:
                cls._check(conn, copy)
            except InvalidRecordError as exc:
                logger.warning("Rejected copy of comic %s: %s", data.comic_id, exc)
                raise
            ComicCopyRepository(conn).save(copy)
        logger.info("Created copy %s of comic %s", copy.id, copy.comic_id)
        return ComicCopyRead.model_validate(copy)

    @classmethod
    async def list_copies(cls) -> List[ComicCopyRead]:
        with transaction() as conn:
            copies = ComicCopyRepository(conn).find_all()
        return [ComicCopyRead.model_validate(copy) for copy in copies]

    @classmethod
    async def get_copy(cls, copy_id: int) -> Optional[ComicCopyRead]:
        with transaction() as conn:
            copy = ComicCopyRepository(conn).find_by_id(copy_id)
        return ComicCopyRead.model_validate(copy) if copy else None

    @classmethod
    async def update_copy(cls, copy_id: int, data: ComicCopyUpdate) -> Optional[ComicCopyRead]:
        logger = logging.getLogger(__name__)
        with transaction() as conn:
            repo = ComicCopyRepository(conn)
            copy = repo.find_by_id(copy_id)
            if copy is None:
                return None
            for field, value in data.model_dump(exclude_unset=True).items():
                setattr(copy, field, value)
            cls._check(conn, copy)
            repo.save(copy)
        logger.info("Updated copy %s", copy_id)
        return ComicCopyRead.model_validate(copy)

    @classmethod
    async def delete_copy(cls, copy_id: int) -> Optional[ComicCopyRead]:
        logger = logging.getLogger(__name__)
        with transaction() as conn:
            repo = ComicCopyRepository(conn)
            copy = repo.find_by_id(copy_id)
            if copy is None:
                return None
            repo.delete_by_id(copy_id)
        logger.info("Deleted copy %s", copy_id)
        return ComicCopyRead.model_validate(copy)
