from datetime import datetime

from pydantic import Field

from hoopers_api.utils.model_utils import BaseModel


class CourtEntity(BaseModel):
    court_id: str | None = Field(None, description="Backend-assigned court ID")
    client_id: str | None = Field(None, description="The client that owns the court")
    name: str | None = None
    court_number: str | None = None
    address: str | None = None
    city: str | None = None
    state: str | None = None
    zip: str | None = None
    image_url: str | None = None
    status: str | None = None
    created_date: datetime | None = None
