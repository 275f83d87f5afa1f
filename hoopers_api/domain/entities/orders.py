from datetime import datetime

from pydantic import Field

from hoopers_api.domain.entities.profiles import ProfileEntity
from hoopers_api.domain.entities.runs import RunEntity
from hoopers_api.utils.model_utils import BaseModel


class OrderEntity(BaseModel):
    order_id: str | None = Field(None, description="Backend-assigned order ID")
    profile_id: str | None = Field(None, description="The buyer's profile")
    run_id: str | None = Field(None, description="Set when the order pays for a run")
    joined_run_id: str | None = None
    name: str | None = None
    order_number: str | None = None
    confirmation_code: str | None = None
    status: str | None = None
    order_date: datetime | None = None
    completed_order_date: datetime | None = None
    trans_id: str | None = None
    notes: str | None = None
    comments: str | None = None
    payment: float | None = None
    payment_method: str | None = None
    points_used: str | None = None
    type: str | None = None
    tracking_number: str | None = None
    shipping_address: str | None = None
    shipping_first_name: str | None = None
    shipping_last_name: str | None = None
    shipping_city: str | None = None
    shipping_state: str | None = None
    shipping_zip: str | None = None


class OrderDetailEntity(OrderEntity):
    """An order with its buyer and, for run payments, the run."""

    total: float | None = None
    profile: ProfileEntity | None = None
    run: RunEntity | None = None
