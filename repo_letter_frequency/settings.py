"""Application settings loaded from environment variables and .env file."""

from functools import lru_cache
from urllib.parse import quote

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_EXTENSIONS = [".js", ".ts"]


class Settings(BaseSettings):
    """Settings for a letter-frequency run."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    github_token: str | None = None
    github_repo: str = "lodash/lodash"
    github_ref: str = "master"
    api_base: str = "https://api.github.com"
    raw_base: str = "https://raw.githubusercontent.com"
    user_agent: str = "repo-letter-frequency"
    extensions: list[str] = DEFAULT_EXTENSIONS

    @field_validator("github_repo")
    @classmethod
    def _check_repo(cls, value: str) -> str:
        owner, _, name = value.partition("/")
        if not owner or not name or "/" in name:
            raise ValueError(f"github_repo must look like owner/name, got {value!r}")
        return value

    @property
    def contents_url(self) -> str:
        """Root listing URL for the configured repository and ref."""
        return f"{self.api_base.rstrip('/')}/repos/{self.github_repo}/contents?ref={quote(self.github_ref, safe='')}"

    def raw_url(self, path: str) -> str:
        """Raw-content URL for a repository-relative path."""
        return f"{self.raw_base.rstrip('/')}/{self.github_repo}/{quote(self.github_ref, safe='/')}/{quote(path.lstrip('/'), safe='/')}"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
