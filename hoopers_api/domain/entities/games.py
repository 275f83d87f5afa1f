from datetime import datetime

from pydantic import Field

from hoopers_api.domain.entities.courts import CourtEntity
from hoopers_api.domain.entities.profiles import ProfileEntity
from hoopers_api.utils.model_utils import BaseModel


class GameEntity(BaseModel):
    game_id: str | None = Field(None, description="Backend-assigned game ID")
    run_id: str | None = Field(None, description="The run the game was played in")
    court_id: str | None = None
    client_id: str | None = None
    profile_id: str | None = None
    run_number: str | None = None
    game_number: str | None = None
    status: str | None = None
    created_date: datetime | None = None


class GameDetailEntity(GameEntity):
    court: CourtEntity | None = None
    profile_list: list[ProfileEntity] = Field(default_factory=list)
