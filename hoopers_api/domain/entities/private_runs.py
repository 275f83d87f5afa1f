from datetime import datetime

from pydantic import Field

from hoopers_api.utils.model_utils import BaseModel


class PrivateRunEntity(BaseModel):
    private_run_id: str | None = Field(None, description="Backend-assigned ID")
    court_id: str | None = None
    profile_id: str | None = Field(None, description="The host's profile")
    name: str | None = None
    title: str | None = None
    description: str | None = None
    status: str | None = None
    run_date: datetime | None = None
    start_time: str | None = None
    end_time: str | None = None
    cost: float | None = None
    type: str | None = None
    skill_level: str | None = None
    player_limit: int | None = None
    created_date: datetime | None = None
