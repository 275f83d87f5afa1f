from datetime import datetime

from pydantic import Field

from hoopers_api.utils.model_utils import BaseModel


class VideoEntity(BaseModel):
    video_id: str | None = Field(None, description="Backend-assigned video ID")
    client_id: str | None = None
    video_url: str | None = None
    video_name: str | None = None
    video_thumbnail_url: str | None = None
    status: str | None = None
    video_date: datetime | None = None
    created_date: datetime | None = None
