"""hicframe configuration using pydantic-settings.

All configuration is strongly typed and supports environment variables
and .env files. These values form the last tier of parameter resolution:
an explicit argument wins over a ``Params`` bundle, which wins over the
settings defined here.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables or .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
    )

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "console"  # "console" or "json"

    # Page layout
    PAGE_UNITS: str = "inches"
    DEFAULT_UNITS: str | None = "inches"  # None forces explicit units

    # Loop annotation
    DEFAULT_SHIFT: float = 4.0  # matrix cells
    DEFAULT_ANNOTATION_TYPE: str = "box"
    DEFAULT_HALF: str = "inherit"
    DEFAULT_ASSEMBLY: str = "hg19"
    ARROW_HEAD_LENGTH: float = 0.1  # inches

    # Rendering
    RENDER_DPI: int = 150


# Singleton instance for import convenience
settings = Settings()
