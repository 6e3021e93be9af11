"""
Service layer for subscription plans.

Deleting a plan leaves its users in place; their ``subscription_id``
is cleared by the database.
"""

import logging
from typing import List, Optional

from ..core.db import transaction
from ..models.subscription import Subscription
from ..repositories.subscription_repository import SubscriptionRepository
from ..schemas.subscription import SubscriptionCreate, SubscriptionRead, SubscriptionUpdate
from .validation import ensure_valid, validate_subscription


class SubscriptionService:
    """Service class for managing subscription plans."""

    @classmethod
    async def create_subscription(cls, data: SubscriptionCreate) -> SubscriptionRead:
        logger = logging.getLogger(__name__)
        subscription = Subscription(plan=data.plan)
        ensure_valid(validate_subscription(subscription))
        with transaction() as conn:
            SubscriptionRepository(conn).save(subscription)
        logger.info("Created subscription %s (%s)", subscription.id, subscription.plan.value)
        return SubscriptionRead.model_validate(subscription)

    @classmethod
    async def list_subscriptions(cls) -> List[SubscriptionRead]:
        with transaction() as conn:
            subscriptions = SubscriptionRepository(conn).find_all()
        return [SubscriptionRead.model_validate(s) for s in subscriptions]

    @classmethod
    async def get_subscription(cls, subscription_id: int) -> Optional[SubscriptionRead]:
        with transaction() as conn:
            subscription = SubscriptionRepository(conn).find_by_id(subscription_id)
        return SubscriptionRead.model_validate(subscription) if subscription else None

    @classmethod
    async def update_subscription(
        cls, subscription_id: int, data: SubscriptionUpdate
    ) -> Optional[SubscriptionRead]:
        logger = logging.getLogger(__name__)
        with transaction() as conn:
            repo = SubscriptionRepository(conn)
            subscription = repo.find_by_id(subscription_id)
            if subscription is None:
                return None
            for field, value in data.model_dump(exclude_unset=True).items():
                setattr(subscription, field, value)
            ensure_valid(validate_subscription(subscription))
            repo.save(subscription)
        logger.info("Updated subscription %s", subscription_id)
        return SubscriptionRead.model_validate(subscription)

    @classmethod
    async def delete_subscription(cls, subscription_id: int) -> Optional[SubscriptionRead]:
        logger = logging.getLogger(__name__)
        with transaction() as conn:
            repo = SubscriptionRepository(conn)
            subscription = repo.find_by_id(subscription_id)
            if subscription is None:
                return None
            repo.delete_by_id(subscription_id)
        logger.info("Deleted subscription %s", subscription_id)
        return SubscriptionRead.model_validate(subscription)
