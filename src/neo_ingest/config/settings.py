"""
Ingestion settings for neo-ingest.

Deployment-wide defaults for upload validation, name resolution and local
content storage, loaded from environment variables (``INGEST_`` prefix) or
a ``.env`` file.
"""
from functools import lru_cache
from typing import Dict, List, Union

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..assets.core.value_objects.file_size import FileSize


DEFAULT_ALLOWED_EXTENSIONS = [
    # Extensionless files
    "",
    # Text and data
    "txt", "csv", "json", "xml", "md",
    # Documents
    "pdf", "doc", "docx", "xls", "xlsx", "ppt", "pptx", "odt", "ods", "rtf",
    # Images
    "jpg", "jpeg", "png", "gif", "webp", "svg", "bmp", "tif", "tiff", "ico",
    # Video
    "mp4", "avi", "mov", "wmv", "webm", "mkv",
    # Audio
    "mp3", "wav", "ogg", "flac", "aac", "m4a",
    # Archives
    "zip", "gz", "tar", "tar.gz", "tgz", "bz2", "7z",
]


class IngestSettings(BaseSettings):
    """Ingestion pipeline settings."""

    model_config = SettingsConfigDict(
        env_prefix="INGEST_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Validation
    default_max_file_size: Dict[str, Union[int, str]] = Field(
        default_factory=dict,
        description="Selector -> size literal ('*', 'txt', '[image]')",
    )
    allowed_extensions: List[str] = Field(default_factory=lambda: list(DEFAULT_ALLOWED_EXTENSIONS))
    use_is_uploaded_file: bool = Field(
        default=True,
        description="Reject descriptors the transport did not flag as genuine uploads",
    )

    # Name resolution
    version_prefix: str = Field(default="-v")
    max_name_attempts: int = Field(default=10000, ge=1)
    replace_existing: bool = Field(default=False)

    # Local content storage
    storage_root: str = Field(default="assets")
    protected_directory: str = Field(default=".protected")
    derived_directory: str = Field(default=".derived")

    # Record storage
    database_schema: str = Field(default="public")

    @field_validator("default_max_file_size")
    @classmethod
    def _validate_size_literals(cls, value: Dict[str, Union[int, str]]) -> Dict[str, Union[int, str]]:
        for selector, literal in value.items():
            try:
                FileSize.parse(literal)
            except ValueError as e:
                raise ValueError(f"Invalid max file size for '{selector}': {e}") from e
        return value

    @field_validator("allowed_extensions")
    @classmethod
    def _normalize_extensions(cls, value: List[str]) -> List[str]:
        return [extension.strip().lstrip(".").lower() for extension in value]

    @field_validator("database_schema")
    @classmethod
    def _validate_schema(cls, value: str) -> str:
        if not value.replace("_", "").isalnum():
            raise ValueError(f"Invalid database schema name: {value}")
        return value


@lru_cache()
def get_settings() -> IngestSettings:
    """Get cached ingestion settings instance."""
    return IngestSettings()
