"""User profile model."""

from pydantic import Field

from github_insights.models.base import ApiModel


class UserProfile(ApiModel):
    """Snapshot of a GitHub user's public profile."""

    username: str = Field(alias="login")
    name: str | None = None
    avatar_url: str
    bio: str | None = None
    public_repos: int = Field(ge=0)
    followers: int = Field(ge=0)
    following: int = Field(ge=0)

    @property
    def display_name(self) -> str:
        """Name if the user set one, otherwise the login."""
        return self.name or self.username
