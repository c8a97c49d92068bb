"""Application configuration and environment settings"""
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    """Application settings loaded from environment variables"""
    # Input/Output directories with defaults
    INPUT_DIR: str = Field("/input", description="Directory containing streaming history exports")
    OUTPUT_DIR: str = Field("/output", description="Directory for output files")
    HISTORY_FILE_PATTERN: str = Field("StreamingHistory*.json", description="Glob pattern for history files")

    # Chart settings
    TOP_ARTISTS: int = Field(5, ge=1, description="Number of artists shown before the catch-all slice")
    OTHER_LABEL: str = Field("Other", description="Label of the catch-all chart slice")

    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field("INFO", description="Root logging level")

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def _upper_log_level(cls, value):
        # accept "debug", "Info", ...
        return value.upper() if isinstance(value, str) else value

    model_config = SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8',
        case_sensitive=True,
        extra='ignore'
    )

settings = Settings()

# Constants
MIN_PLAY_MS = 30 * 1000 # plays shorter than this are ignored
SONG_KEY_SEPARATOR = "___"
MS_PER_MINUTE = 60 * 1000
