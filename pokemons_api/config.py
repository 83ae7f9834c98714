"""
Configuration management using Pydantic Settings
"""
from typing import List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL


class Settings(BaseSettings):
    """Environment-sourced configuration (a ``.env`` file is read too)."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
        frozen=True,
    )

    db_host: str = Field(default="localhost", alias="DB_HOST", description="Store host")
    db_port: int = Field(default=3306, ge=1, le=65535, alias="DB_PORT", description="Store port")
    db_user: str = Field(default="root", alias="DB_USER", description="Store user")
    db_password: str = Field(default="", alias="DB_PASSWORD", description="Store password")
    db_database: str = Field(default="pokemons", alias="DB_DATABASE", description="Database name")
    database_url: Optional[str] = Field(
        default=None,
        alias="DATABASE_URL",
        description="Full SQLAlchemy async URL; overrides the DB_* values",
    )
    port: int = Field(default=3000, ge=1, le=65535, alias="PORT", description="Listening port")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL", description="Logging level")
    cors_origins: str = Field(
        default="*",
        alias="CORS_ORIGINS",
        description="Allowed CORS origins (comma-separated)",
    )

    @field_validator("db_port", "port", mode="before")
    @classmethod
    def empty_port_is_default(cls, v, info):
        if v == "":
            return cls.model_fields[info.field_name].default
        return v

    @field_validator("database_url", mode="before")
    @classmethod
    def empty_url_is_unset(cls, v):
        return v or None

    @field_validator("log_level")
    @classmethod
    def upper_log_level(cls, v: str) -> str:
        return v.upper()

    @classmethod
    def from_env(cls) -> "Settings":
        return cls()

    @property
    def cors_origins_list(self) -> List[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

    @property
    def sqlalchemy_url(self):
        # DATABASE_URL wins over the individual DB_* values
        if self.database_url:
            return self.database_url
        return URL.create(
            "mysql+aiomysql",
            username=self.db_user,
            password=self.db_password or None,
            host=self.db_host,
            port=self.db_port,
            database=self.db_database,
        )
