from datetime import datetime

from pydantic import Field

from hoopers_api.domain.entities.joined_runs import JoinedRunEntity
from hoopers_api.domain.entities.profiles import ProfileEntity
from hoopers_api.utils.model_utils import BaseModel


class UserEntity(BaseModel):
    user_id: str | None = Field(None, description="Backend-assigned user ID")
    client_id: str | None = None
    profile_id: str | None = None
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    phone_number: str | None = None
    password: str | None = Field(
        None, repr=False, description="Only sent when creating a user"
    )
    access_level: str | None = None
    role: str | None = None
    status: str | None = None
    subscription: str | None = None
    sub_id: str | None = None
    address: str | None = None
    city: str | None = None
    state: str | None = None
    zip: str | None = None
    country: str | None = None
    sign_up_date: datetime | None = None
    last_login_date: datetime | None = None
    created_date: datetime | None = None
    last_modified_date: datetime | None = None


class UserDetailEntity(UserEntity):
    profile: ProfileEntity | None = None
    joined_run_list: list[JoinedRunEntity] = Field(default_factory=list)
