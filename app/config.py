"""Prompt Builder configuration — loaded from environment / .env file."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_prefix="PROMPTBUILDER_", extra="ignore")

    env: str = "development"
    database_url: str = "sqlite+aiosqlite:///./promptbuilder.db"

    # Identity resolved by the upstream auth layer (proxy or middleware)
    user_id_header: str = "X-User-Id"

    cors_origins: list[str] = ["http://localhost:4321"]

    @property
    def echo_sql(self) -> bool:
        return self.env == "development"


settings = Settings()
