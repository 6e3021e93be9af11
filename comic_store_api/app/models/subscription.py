from dataclasses import dataclass
from typing import Optional

from .entity import Entity
from .enums import SubscriptionPlan


@dataclass(eq=False)
class Subscription(Entity):
    """A subscription plan users can be enrolled in."""

    plan: SubscriptionPlan
    id: Optional[int] = None
