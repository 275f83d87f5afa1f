from datetime import datetime

from pydantic import Field

from hoopers_api.domain.entities.profiles import ProfileEntity
from hoopers_api.utils.model_utils import BaseModel


class PrivateRunInviteEntity(BaseModel):
    private_run_invite_id: str | None = Field(None, description="Backend-assigned ID")
    profile_id: str | None = Field(None, description="The invited player")
    private_run_id: str | None = Field(None, description="The private run invited to")
    invited_date: datetime | None = None
    accepted_invite: str | None = Field(
        None, description="Accepted, Declined or Undecided"
    )
    type: str | None = None
    present: bool | None = None
    squad_id: str | None = None


class PrivateRunInviteDetailEntity(PrivateRunInviteEntity):
    invited_profiles: list[ProfileEntity] = Field(default_factory=list)
