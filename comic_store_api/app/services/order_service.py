"""
Service layer for orders and their lines.

An order belongs to a user and is deleted with them.  Each order line
(``OrderDetail``) names a comic copy and a quantity; lines are deleted
with their order or their copy.
"""

import logging
import sqlite3
from typing import List, Optional

from ..core.db import transaction
from ..core.exceptions import InvalidRecordError
from ..models.order import Order
from ..models.order_detail import OrderDetail
from ..repositories.comic_copy_repository import ComicCopyRepository
from ..repositories.order_detail_repository import OrderDetailRepository
from ..repositories.order_repository import OrderRepository
from ..repositories.user_repository import UserRepository
from ..schemas.order import (
    OrderCreate,
    OrderDetailCreate,
    OrderDetailRead,
    OrderDetailUpdate,
    OrderRead,
    OrderUpdate,
)
from .validation import check_reference, ensure_valid, validate_order, validate_order_detail


class OrderService:
    """Service class for managing orders."""

    @classmethod
    def _check(cls, conn: sqlite3.Connection, order: Order) -> None:
        errors = validate_order(order)
        check_reference(errors, UserRepository(conn), "user_id", order.user_id, "user")
        ensure_valid(errors)

    @classmethod
    async def create_order(cls, data: OrderCreate) -> OrderRead:
        logger = logging.getLogger(__name__)
        order = Order(**data.model_dump())
        with transaction() as conn:
            try:
                cls._check(conn, order)
            except InvalidRecordError as exc:
                logger.warning("Rejected order of user %s: %s", data.user_id, exc)
                raise
            OrderRepository(conn).save(order)
        logger.info("Created order %s for user %s", order.id, order.user_id)
        return OrderRead.model_validate(order)

    @classmethod
    async def list_orders(cls) -> List[OrderRead]:
        with transaction() as conn:
            orders = OrderRepository(conn).find_all()
        return [OrderRead.model_validate(order) for order in orders]

    @classmethod
    async def get_order(cls, order_id: int) -> Optional[OrderRead]:
        with transaction() as conn:
            order = OrderRepository(conn).find_by_id(order_id)
        return OrderRead.model_validate(order) if order else None

    @classmethod
    async def update_order(cls, order_id: int, data: OrderUpdate) -> Optional[OrderRead]:
        logger = logging.getLogger(__name__)
        with transaction() as conn:
            repo = OrderRepository(conn)
            order = repo.find_by_id(order_id)
            if order is None:
                return None
            for field, value in data.model_dump(exclude_unset=True).items():
                setattr(order, field, value)
            cls._check(conn, order)
            repo.save(order)
        logger.info("Updated order %s", order_id)
        return OrderRead.model_validate(order)

    @classmethod
    async def delete_order(cls, order_id: int) -> Optional[OrderRead]:
        """Delete an order together with its lines."""
        logger = logging.getLogger(__name__)
        with transaction() as conn:
            repo = OrderRepository(conn)
            order = repo.find_by_id(order_id)
            if order is None:
                return None
            repo.delete_by_id(order_id)
        logger.info("Deleted order %s", order_id)
        return OrderRead.model_validate(order)


class OrderDetailService:
    """Service class for managing order lines."""

    @classmethod
    def _check(cls, conn: sqlite3.Connection, detail: OrderDetail) -> None:
        errors = validate_order_detail(detail)
        check_reference(errors, ComicCopyRepository(conn), "copy_id", detail.copy_id, "comic copy")
        check_reference(errors, OrderRepository(conn), "order_id", detail.order_id, "order")
        ensure_valid(errors)

    @classmethod
    async def create_detail(cls, data: OrderDetailCreate) -> OrderDetailRead:
        logger = logging.getLogger(__name__)
        detail = OrderDetail(**data.model_dump())
        with transaction() as conn:
            try:
                cls._check(conn, detail)
            except InvalidRecordError as exc:
                logger.warning("Rejected line for order %s: %s", data.order_id, exc)
                raise
            OrderDetailRepository(conn).save(detail)
        logger.info("Added line %s to order %s", detail.id, detail.order_id)
        return OrderDetailRead.model_validate(detail)

    @classmethod
    async def list_details(cls) -> List[OrderDetailRead]:
        with transaction() as conn:
            details = OrderDetailRepository(conn).find_all()
        return [OrderDetailRead.model_validate(detail) for detail in details]

    @classmethod
    async def get_detail(cls, detail_id: int) -> Optional[OrderDetailRead]:
        with transaction() as conn:
            detail = OrderDetailRepository(conn).find_by_id(detail_id)
        return OrderDetailRead.model_validate(detail) if detail else None

    @classmethod
    async def update_detail(
        cls, detail_id: int, data: OrderDetailUpdate
    ) -> Optional[OrderDetailRead]:
        logger = logging.getLogger(__name__)
        with transaction() as conn:
            repo = OrderDetailRepository(conn)
            detail = repo.find_by_id(detail_id)
            if detail is None:
                return None
            for field, value in data.model_dump(exclude_unset=True).items():
                setattr(detail, field, value)
            cls._check(conn, detail)
            repo.save(detail)
        logger.info("Updated order line %s", detail_id)
        return OrderDetailRead.model_validate(detail)

    @classmethod
    async def delete_detail(cls, detail_id: int) -> Optional[OrderDetailRead]:
        logger = logging.getLogger(__name__)
        with transaction() as conn:
            repo = OrderDetailRepository(conn)
            detail = repo.find_by_id(detail_id)
            if detail is None:
                return None
            repo.delete_by_id(detail_id)
        logger.info("Deleted order line %s", detail_id)
        return OrderDetailRead.model_validate(detail)
