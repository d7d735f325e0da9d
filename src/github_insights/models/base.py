"""Shared base for models decoded from GitHub API payloads."""

from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError

from github_insights.exceptions import DecodeError

ModelT = TypeVar("ModelT", bound="ApiModel")


class ApiModel(BaseModel):
    """Immutable model decoded strictly from an API payload.

    Unknown fields are ignored; missing or ill-typed required fields raise
    DecodeError rather than falling back to defaults.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    @classmethod
    def from_api(cls: type[ModelT], data: Any) -> ModelT:
        """Create from a decoded GitHub REST API response."""
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            fields = ", ".join(
                ".".join(str(part) for part in error["loc"]) or "<root>"
                for error in e.errors()
            )
            raise DecodeError(
                f"Unexpected {cls.__name__} payload (invalid: {fields})",
                payload=data,
            ) from e
