"""Repository data model."""

from pydantic import Field

from github_insights.models.base import ApiModel


class Repository(ApiModel):
    """GitHub repository as listed on a user's profile."""

    id: int
    name: str
    html_url: str
    description: str | None = None
    stargazers_count: int = Field(ge=0)
    forks_count: int = Field(ge=0)
    language: str | None = None  # Primary language, as detected by GitHub
