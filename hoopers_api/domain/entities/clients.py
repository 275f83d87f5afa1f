from datetime import datetime

from pydantic import Field

from hoopers_api.domain.entities.courts import CourtEntity
from hoopers_api.utils.model_utils import BaseModel


class ClientEntity(BaseModel):
    """A gym or organization that hosts runs."""

    client_id: str | None = Field(None, description="Backend-assigned client ID")
    client_number: str | None = None
    name: str | None = None
    address: str | None = None
    city: str | None = None
    state: str | None = None
    zip: str | None = None
    phone_number: str | None = None
    point_of_contact: str | None = None
    status: str | None = None
    created_date: datetime | None = None


class ClientDetailEntity(ClientEntity):
    court_list: list[CourtEntity] = Field(default_factory=list)
