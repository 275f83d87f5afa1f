from pydantic import Field

from hoopers_api.utils.model_utils import BaseModel


class ReportCounts(BaseModel):
    """Dashboard totals for the admin console."""

    total_users: int = Field(0, description="Registered users")
    total_runs: int = 0
    total_games: int = 0
    total_products: int = 0
    total_videos: int = 0
    total_posts: int = 0
    total_clients: int = 0
    total_private_runs: int = 0
