from datetime import datetime

from hoopers_api.utils.model_utils import BaseModel


class FileMetadata(BaseModel):
    name: str
    container: str
    size: int
    content_type: str | None = None
    last_modified: datetime | None = None
    url: str
