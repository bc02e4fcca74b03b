# src/inventory_backend/config/settings.py
from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


@dataclass(frozen=True)
class Credential:
    """The single user allowed through Basic authentication (demo only)."""

    username: str
    password: str
    role: str


class AppSettings(BaseSettings):
    """
    Application settings, read once from the environment and `.env`.
    Instances are frozen; the credential they describe cannot change at runtime.
    """

    app_name: str = "Inventory Backend"
    database_url: str = "sqlite+aiosqlite:///./inventory.db"
    create_schema: bool = True
    cors_allow_origins: str | None = "*"
    enable_request_logging: bool = True

    # plaintext demo user, never use outside local development
    auth_username: str = "demo"
    auth_password: str = "password"
    auth_role: str = "USER"

    host: str = "127.0.0.1"
    port: int = 8080

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    def credential(self) -> Credential:
        return Credential(
            username=self.auth_username,
            password=self.auth_password,
            role=self.auth_role,
        )

    @property
    def cors_origins(self) -> List[str]:
        if not self.cors_allow_origins:
            return []
        return [o.strip() for o in self.cors_allow_origins.split(",") if o.strip()]


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    # singleton (reads env once)
    return AppSettings()
