from datetime import datetime

from pydantic import Field

from hoopers_api.utils.model_utils import BaseModel


class PostEntity(BaseModel):
    post_id: str | None = Field(None, description="Backend-assigned post ID")
    user_id: str | None = None
    profile_id: str | None = None
    title: str | None = None
    caption: str | None = None
    post_text: str | None = None
    post_file_url: str | None = None
    thumbnail_url: str | None = None
    type: str | None = None
    post_type: str | None = None
    category: str | None = None
    status: str | None = None
    likes: int | None = None
    dis_likes: int | None = None
    hearted: int | None = None
    views: int | None = None
    shared: str | None = None
    mention: str | None = None
    mention_user_names: str | None = None
    posted_date: datetime | None = None
