"""Project - the parent record every milestone is attached to."""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class Project(BaseModel):
    """Project as returned by GET /api/projects/{id} and POST /api/projects.

    Only id and name are relied on here; any other columns the API
    returns are kept as extra attributes.
    """

    model_config = ConfigDict(extra="allow")

    id: int = Field(..., description="Project id")
    name: str = Field(default="", description="Project name")
    description: Optional[str] = None
    status: Optional[str] = None


class ProjectCreateRequest(BaseModel):
    """Body for POST /api/projects."""

    # Core columns
    name: str
    description: str = ""
    status: str = ""
    github_repo: str = ""
    discord_channel: str = ""
    funding_amount: float = 0.0
    start_date: str
    end_date: Optional[str] = None

    # Extended metadata
    creator_username: str = ""
    grantee_email: str = ""
    mission_expertise: str = ""
    campaign_goals: str = ""
    website_links: str = ""
    program_type: str = ""
    category: str = ""
    creator_stat_1_name: str = ""
    creator_stat_1_number: str = ""
    creator_stat_2_name: str = ""
    creator_stat_2_number: str = ""
    youtube_link: str = ""
    tiktok_link: str = ""
    twitter_link: str = ""
    twitch_link: str = ""
