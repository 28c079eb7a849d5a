from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


def choose_env_file() -> str:
    return ".env.local" if Path(".env.local").exists() else ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=choose_env_file(),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",  # tolerate unrelated env vars
    )

    # CouchDB
    COUCHDB_HOST: str = "localhost"
    COUCHDB_PORT: int = 5984
    COUCHDB_USERNAME: str = "admin"
    COUCHDB_PASSWORD: str = ""
    COUCHDB_DATABASE: str = "posts"

    # Logging
    LOG_LEVEL: str = "INFO"

    # Token signing
    USER_SECRET_KEY: str = ""
    TOKEN_AUDIENCE: str = ""
    TOKEN_ISSUER: str = ""
    TOKEN_DISPLAY_NAME: str = "Blog"
    TOKEN_TTL_MINUTES: int = 300
    # "reject" refuses a token for a wrong secret, "warn" logs and issues anyway
    TOKEN_ISSUE_POLICY: Literal["reject", "warn"] = "reject"

    # Posts
    # "scan" keeps the store's delivery order, "chronological" sorts by createDate
    NEIGHBOR_ORDER: Literal["scan", "chronological"] = "scan"
    UPDATE_REQUIRES_EXISTING: bool = True

    @property
    def couchdb_url(self) -> str:
        return f"http://{self.COUCHDB_USERNAME}:{self.COUCHDB_PASSWORD}@{self.COUCHDB_HOST}:{self.COUCHDB_PORT}"


# Global settings instance (evaluated at import, but reads env on construction)
settings = Settings()
