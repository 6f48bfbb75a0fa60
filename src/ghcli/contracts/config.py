"""Configuration contracts."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

DEFAULT_API_URL = "https://api.github.com"


class Authentication(BaseModel):
    username: str
    token: str

    model_config = {"frozen": True}


class GitHubSettings(BaseModel):
    repositories: list[str] = Field(default_factory=list)
    auth: Authentication | None = None
    api_url: str = DEFAULT_API_URL

    model_config = {"frozen": True}

    @field_validator("repositories")
    @classmethod
    def validate_repositories(cls, value: list[str]) -> list[str]:
        for repository in value:
            if not repository.strip():
                raise ValueError("repository identifiers must be non-empty")
        return value

    @field_validator("api_url")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")


class Settings(BaseModel):
    github: GitHubSettings = Field(default_factory=GitHubSettings)

    model_config = {"frozen": True}
