from datetime import datetime

from pydantic import Field

from hoopers_api.utils.model_utils import BaseModel


class ScoutingReportEntity(BaseModel):
    scouting_report_id: str | None = Field(None, description="Backend-assigned report ID")
    profile_id: str | None = Field(None, description="The profile the report describes")
    strengths: str | None = None
    weaknesses: str | None = None
    notes: str | None = None
    created_date: datetime | None = None
    last_modified_date: datetime | None = None


class ProfileEntity(BaseModel):
    profile_id: str | None = Field(None, description="Backend-assigned profile ID")
    user_id: str | None = Field(None, description="The user that owns the profile")
    user_name: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    height: str | None = None
    weight: str | None = None
    position: str | None = None
    ranking: str | None = None
    star_rating: str | None = None
    bio: str | None = None
    image_url: str | None = None
    player_archetype: str | None = None
    city: str | None = None
    zip: str | None = None
    player_number: str | None = None
    points: int | None = Field(None, description="Leaderboard points")
    status: str | None = None
    total_wins: int | None = None
    total_losses: int | None = None
    win_percentage: str | None = None
    scouting_report: ScoutingReportEntity | None = None
    created_date: datetime | None = None
    last_modified_date: datetime | None = None
