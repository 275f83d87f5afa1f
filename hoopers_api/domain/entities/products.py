from datetime import datetime

from pydantic import Field

from hoopers_api.utils.model_utils import BaseModel


class ProductEntity(BaseModel):
    product_id: str | None = Field(None, description="Backend-assigned product ID")
    title: str | None = None
    description: str | None = None
    type: str | None = None
    status: str | None = None
    points: int | None = Field(None, description="Points needed to redeem the product")
    price: float | None = None
    category: str | None = None
    tag: str | None = None
    image_url: str | None = None
    created_date: datetime | None = None
