from datetime import datetime

from pydantic import Field

from hoopers_api.domain.entities.profiles import ProfileEntity
from hoopers_api.utils.model_utils import BaseModel


class RequestEntity(BaseModel):
    """A player's request to join a run."""

    request_id: str | None = Field(None, description="Backend-assigned request ID")
    run_id: str | None = None
    profile_id: str | None = None
    status: str | None = None
    created_date: datetime | None = None


class RequestDetailEntity(RequestEntity):
    run_name: str | None = None
    profile: ProfileEntity | None = None
