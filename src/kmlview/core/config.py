"""
Configuration settings for the KML Viewer application.
"""

from pathlib import Path
from typing import Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    Attributes:
        max_upload_size_mb: Maximum KML upload size in megabytes
        allowed_extensions: Tuple of accepted file extensions
        log_file: Optional path for the rotating log file
        map_center_lat: Initial latitude of the map view
        map_center_lon: Initial longitude of the map view
        map_zoom: Initial zoom level of the map view
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_prefix="KMLVIEW_",
    )

    # Upload settings
    max_upload_size_mb: int = 10
    allowed_extensions: tuple[str, ...] = (".kml",)

    # API settings
    api_v1_prefix: str = "/api/v1"
    port: int = 8000

    # CORS settings
    cors_origins: str = "http://localhost:5173,http://localhost:3000"

    # Logging
    log_file: Optional[Path] = None

    # Map view
    map_center_lat: float = 20.0
    map_center_lon: float = 0.0
    map_zoom: int = 2

    # Environment
    environment: Literal["development", "staging", "production"] = "development"

    @property
    def cors_origins_list(self) -> list[str]:
        """Get CORS origins as a list."""
        return [origin.strip() for origin in self.cors_origins.split(",")]

    @property
    def max_upload_size_bytes(self) -> int:
        """Get max upload size in bytes."""
        return self.max_upload_size_mb * 1024 * 1024


# Global settings instance
settings = Settings()
