"""Application configuration via Pydantic settings."""

from functools import lru_cache
from pathlib import Path
from typing import Any
from urllib.parse import urlparse

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

ROOT_DIR = Path(__file__).resolve().parents[3]
ENV_FILE = ROOT_DIR / ".env"


class AppSettings(BaseSettings):
    """Global application configuration."""

    environment: str = Field(default="development")
    mongodb_uri: str = Field(alias="DATABASE_HOST", default="127.0.0.1:27017")
    mongodb_user: str | None = Field(alias="DATABASE_USER", default=None)
    mongodb_password: str | None = Field(alias="DATABASE_PASSWORD", default=None)
    mongo_database: str = Field(alias="MONGO_DATABASE", default="pdf_annotations_demo")
    annotations_collection: str = Field(default="pdf_annotations")
    files_collection: str = Field(default="pdf_files")
    counters_collection: str = Field(default="counters")
    upload_dir: Path = Field(alias="UPLOAD_DIR", default=ROOT_DIR / "uploads")
    public_upload_prefix: str = Field(default="/uploads")
    log_level: str = Field(alias="LOG_LEVEL", default="INFO")
    log_format: str = Field(alias="LOG_FORMAT", default="console")

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        extra="ignore",
        env_file_encoding="utf-8",
        populate_by_name=True,
    )

    def snapshot(self) -> dict[str, Any]:
        """Return a sanitized dictionary of public settings."""
        return {
            "environment": self.environment,
            "mongodb_host": self.sanitize_uri(self.mongodb_uri),
            "mongo_database": self.mongo_database,
            "annotations_collection": self.annotations_collection,
            "files_collection": self.files_collection,
            "public_upload_prefix": self.public_upload_prefix,
        }

    @staticmethod
    def sanitize_uri(uri: str) -> str:
        """Remove credentials from connection URIs for public display."""
        if "://" not in uri:
            return uri.rsplit("@", 1)[-1]
        parsed = urlparse(uri)
        netloc = parsed.netloc.split("@")[-1] if parsed.netloc else uri
        return f"{parsed.scheme}://{netloc}" if parsed.scheme else netloc


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    """Load settings once per process."""
    return AppSettings()
