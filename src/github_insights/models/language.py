"""Language distribution models."""

from pydantic import BaseModel, ConfigDict, Field

UNKNOWN_LANGUAGE = "Unknown"  # Repositories with no detected language
OTHER_LANGUAGE = "Other"  # Long-tail rollup beyond the display limit


class LanguageStat(BaseModel):
    """Number of repositories whose primary language is ``language``."""

    model_config = ConfigDict(frozen=True)

    language: str
    count: int = Field(ge=0)

    @property
    def display_label(self) -> str:
        if self.language == UNKNOWN_LANGUAGE:
            return "Other/Unknown"
        return self.language


class LanguageSummary(BaseModel):
    """Ranked language counts plus the capped view shown in charts."""

    model_config = ConfigDict(frozen=True)

    ranked: tuple[LanguageStat, ...] = ()
    capped: tuple[LanguageStat, ...] = ()

    @property
    def total(self) -> int:
        """Number of repositories counted."""
        return sum(stat.count for stat in self.ranked)
