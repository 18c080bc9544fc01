import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    @field_validator("USER_MANAGEMENT_URL_PREFIX", mode="before")
    @classmethod
    def normalize_prefix(cls, value: str | None) -> str:
        cleaned = (value or "").strip().rstrip("/")
        if cleaned and not cleaned.startswith("/"):
            cleaned = f"/{cleaned}"
        return cleaned

    @field_validator("USER_MANAGEMENT_API_KEY", "USER_MANAGEMENT_API_KEY_HEADER")
    @classmethod
    def require_non_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def known_level(cls, value: str) -> str:
        level = str(value).strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level {value!r}")
        return level

    USER_MANAGEMENT_URL_PREFIX: str = Field(default="/api", description="API URL prefix")
    USER_MANAGEMENT_API_KEY: str = Field(
        default="your-secret-api-key-12345", description="Shared secret for the protected route"
    )
    USER_MANAGEMENT_API_KEY_HEADER: str = Field(default="X-API-Key", description="Header carrying the API key")
    USER_MANAGEMENT_SEED_USERS: bool = Field(default=True, description="Load demo users on start")
    USER_MANAGEMENT_MAX_PAGE_SIZE: int = Field(default=100, ge=1, description="Largest allowed pageSize")
    USER_MANAGEMENT_DEFAULT_PAGE_SIZE: int = Field(default=10, ge=1, description="pageSize when omitted")
    LOG_LEVEL: str = Field(default="INFO", description="Root log level")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"
        frozen = True


settings = Settings()
