from datetime import datetime

from pydantic import Field

from hoopers_api.utils.model_utils import BaseModel


class SubscriptionEntity(BaseModel):
    subscription_id: str | None = Field(None, description="Backend-assigned ID")
    profile_id: str | None = None
    product_id: str | None = None
    plan: str | None = None
    status: str | None = None
    amount: float | None = None
    start_date: datetime | None = None
    end_date: datetime | None = None
    created_date: datetime | None = None
