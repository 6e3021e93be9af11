"""Pydantic schemas for subscription plans."""

from typing import Optional

from pydantic import BaseModel, Field

from ..models.enums import SubscriptionPlan


class SubscriptionCreate(BaseModel):
    plan: SubscriptionPlan = Field(..., description="MENSILE, TRIMESTRALE, SEMESTRALE or ANNUALE")


class SubscriptionUpdate(BaseModel):
    plan: Optional[SubscriptionPlan] = None


class SubscriptionRead(BaseModel):
    id: int
    plan: SubscriptionPlan

    model_config = {
        "from_attributes": True,
    }
