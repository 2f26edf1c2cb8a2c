"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables or .env (never hardcoded)
    - get_settings() is cached (lru_cache) — single instance per process
    - resolved_mongo_uri() percent-encodes user and password
    - Exactly one "@" separates credentials from host, whether or not MONGO_HOST
      starts with one (the db.properties dbUrl form)

Design Decisions:
    - MONGO_URI wins when set; otherwise the URI is assembled from
      prefix/user/password/host/params, the layout of the old db.properties file
"""

from functools import lru_cache
from urllib.parse import quote_plus

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Document store
    mongo_uri: str = ""
    mongo_prefix: str = "mongodb://"
    mongo_user: str = ""
    mongo_password: str = ""
    mongo_host: str = "localhost:27017"
    mongo_params: str = "/"
    mongo_db_name: str = "afterschool"
    mongo_timeout_ms: int = 5000

    # Server
    host: str = "0.0.0.0"
    port: int = 3000
    cors_origins: list[str] = ["*"]
    static_dir: str = "images"

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    def resolved_mongo_uri(self) -> str:
        if self.mongo_uri:
            return self.mongo_uri
        credentials = ""
        if self.mongo_user:
            credentials = (
                quote_plus(self.mongo_user) + ":" + quote_plus(self.mongo_password) + "@"
            )
        host = self.mongo_host.lstrip("@")
        return self.mongo_prefix + credentials + host + self.mongo_params


@lru_cache
def get_settings() -> Settings:
    return Settings()
