"""Application settings via Pydantic Settings."""

from functools import lru_cache
import json
from typing import Literal

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # App
    app_name: str = "Catalog API"
    app_version: str = "0.1.0"
    debug: bool = False

    # Server
    host: str = "0.0.0.0"
    port: int = 3000

    # CORS
    cors_origins: list[str] = Field(
        default_factory=lambda: ["*"],
        validation_alias=AliasChoices("CORS_ORIGINS", "ALLOWED_ORIGINS"),
    )

    @field_validator("cors_origins", mode="before")
    @classmethod
    def _parse_cors_origins(cls, v: object) -> list[str]:
        """
        Accept either:
        - JSON array string: '["https://a.com","http://localhost:3000"]'
        - Comma-separated string: "https://a.com,http://localhost:3000"
        - Already-parsed list[str]
        """
        if v is None:
            return []
        if isinstance(v, list):
            return [str(x).strip() for x in v if str(x).strip()]
        if isinstance(v, str):
            s = v.strip()
            if not s:
                return []
            if s.startswith("["):
                try:
                    parsed = json.loads(s)
                except json.JSONDecodeError:
                    parsed = s.split(",")
                if isinstance(parsed, list):
                    return [str(x).strip() for x in parsed if str(x).strip()]
                return [str(parsed).strip()]
            return [part.strip() for part in s.split(",") if part.strip()]
        return [str(v).strip()] if str(v).strip() else []

    # Data files (categories.json, products.json, collections.json, settings.json)
    data_dir: str = Field(
        default="data",
        validation_alias=AliasChoices("DATA_DIR", "CATALOG_DATA_DIR"),
    )
    write_mode: Literal["background", "sync"] = Field(
        default="background",
        validation_alias=AliasChoices("CATALOG_WRITE_MODE", "WRITE_MODE"),
        description="background: respond before the write lands; sync: respond after it",
    )

    # Static images
    images_dir: str = Field(
        default="public/images",
        validation_alias=AliasChoices("IMAGES_DIR"),
    )
    images_url_path: str = "/images"

    # Admin
    admin_password: str = Field(
        default="",
        validation_alias=AliasChoices("ADMIN_PASSWORD"),
    )

    # Object storage (image uploads)
    storage_endpoint: str = Field(
        default="",
        validation_alias=AliasChoices("STORAGE_ENDPOINT", "S3_ENDPOINT"),
    )
    storage_bucket: str = Field(
        default="",
        validation_alias=AliasChoices("STORAGE_BUCKET", "S3_BUCKET"),
    )
    storage_access_token: str = Field(
        default="",
        validation_alias=AliasChoices("STORAGE_ACCESS_TOKEN", "STORAGE_TOKEN"),
    )
    storage_public_url: str = Field(
        default="",
        validation_alias=AliasChoices("STORAGE_PUBLIC_URL", "S3_PUBLIC_URL"),
    )
    storage_key_prefix: str = Field(
        default="images/",
        validation_alias=AliasChoices("STORAGE_KEY_PREFIX"),
    )
    upload_max_bytes: int = Field(
        default=5 * 1024 * 1024,
        validation_alias=AliasChoices("UPLOAD_MAX_BYTES"),
        ge=1,
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
