from datetime import datetime

from pydantic import Field

from hoopers_api.domain.entities.courts import CourtEntity
from hoopers_api.domain.entities.joined_runs import JoinedRunEntity
from hoopers_api.utils.model_utils import BaseModel


class RunEntity(BaseModel):
    run_id: str | None = Field(None, description="Backend-assigned run ID")
    court_id: str | None = Field(None, description="The court the run is played at")
    profile_id: str | None = Field(None, description="The organizer's profile")
    client_id: str | None = None
    name: str | None = None
    status: str | None = None
    run_date: datetime | None = None
    start_time: str | None = Field(None, description="Local start time, HH:MM:SS")
    end_time: str | None = Field(None, description="Local end time, HH:MM:SS")
    cost: float | None = None
    points: int | None = Field(None, description="Points awarded for attending")
    address: str | None = None
    city: str | None = None
    state: str | None = None
    zip: str | None = None
    description: str | None = None
    type: str | None = None
    run_number: str | None = None
    skill_level: str | None = None
    payment_method: str | None = None
    team_type: str | None = None
    player_limit: int | None = None
    image_url: str | None = None
    created_date: datetime | None = None


class RunDetailEntity(RunEntity):
    court: CourtEntity | None = None
    joined_run_list: list[JoinedRunEntity] = Field(default_factory=list)
