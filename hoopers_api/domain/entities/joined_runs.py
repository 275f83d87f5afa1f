from datetime import datetime

from pydantic import Field

from hoopers_api.domain.entities.profiles import ProfileEntity
from hoopers_api.utils.model_utils import BaseModel


class JoinedRunEntity(BaseModel):
    joined_run_id: str | None = Field(None, description="Backend-assigned ID")
    profile_id: str | None = Field(None, description="The player who joined")
    run_id: str | None = Field(None, description="The run that was joined")
    status: str | None = Field(None, description="Invite status, e.g. Accepted")
    type: str | None = None
    invite_date: datetime | None = None
    present: bool | None = None
    created_date: datetime | None = None


class JoinedRunDetailEntity(JoinedRunEntity):
    """A joined run with the run's schedule flattened in, as listed for a player."""

    run_name: str | None = None
    run_date: datetime | None = None
    start_time: str | None = None
    end_time: str | None = None
    address: str | None = None
    city: str | None = None
    court_name: str | None = None
    profile: ProfileEntity | None = None
