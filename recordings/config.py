"""
Configuration settings for the recordings client.

Uses Pydantic Settings to load the database credentials and connection
parameters from the environment (or a local `.env` file). Credentials have no
defaults: `Settings.require_credentials()` must pass before a connection is
attempted.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from recordings.errors import ConfigurationError


class Settings(BaseSettings):
    # Credentials
    db_user: Optional[str] = Field(None, alias="DBUSER")
    db_password: Optional[str] = Field(None, alias="DBPASS")

    # Database
    db_host: str = Field("127.0.0.1", alias="DB_HOST")
    db_port: int = Field(5432, alias="DB_PORT")
    db_name: str = Field("recordings", alias="DB_NAME")
    db_connect_timeout: int = Field(10, alias="DB_CONNECT_TIMEOUT")
    db_allow_native_passwords: bool = Field(True, alias="DB_ALLOW_NATIVE_PASSWORDS")

    # Application
    app_env: str = Field("development", alias="APP_ENV")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_json: bool = Field(False, alias="LOG_JSON")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    def require_credentials(self) -> None:
        """
        Fail fast when the database credentials were not supplied.

        The user must be a non-empty string. The password must be present but
        may be empty (trust-authenticated servers).

        Raises
        ------
        ConfigurationError
            If DBUSER is unset/empty or DBPASS is unset.
        """
        missing = []
        if not self.db_user:
            missing.append("DBUSER")
        if self.db_password is None:
            missing.append("DBPASS")
        if missing:
            raise ConfigurationError(
                f"missing database credentials: {', '.join(missing)} must be set"
            )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = ["Settings", "get_settings"]
