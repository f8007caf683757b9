"""Core configuration settings for documentation runs.

Settings are loaded from environment variables with .env file support via
pydantic-settings. Command-line flags take precedence over these values.

Environment variables:
    CONTENT_AUTODOC_REPO_PATH: Root of the codebase that holds the content types
    CONTENT_AUTODOC_OUTPUT_DIR: Directory the generated pages are written to
    CONTENT_AUTODOC_SOURCE_FORMAT: ``python`` (scan sources) or ``manifest`` (read YAML/JSON)

Example:
    >>> from content_autodoc.settings import settings
    >>> print(settings.repo_path)
"""

from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

SourceFormat = Literal["python", "manifest"]


class Settings(BaseSettings):
    """Configuration for a documentation run.

    Attributes:
        repo_path: Repository the family's source roots are resolved against.
        output_dir: Where ``<Key>.md`` pages are written.
        source_format: Which declaration source feeds the model builder.
    """

    model_config = SettingsConfigDict(
        env_prefix="CONTENT_AUTODOC_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    repo_path: Path = Path(".")
    output_dir: Path = Path(".")
    source_format: SourceFormat = "python"


settings = Settings()
"""Global settings instance, created at import."""
