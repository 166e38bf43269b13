"""
Configuration management using Pydantic Settings.

Environment variables:
- DATA_DIR: Directory holding the OCR JSON (.txt) and rotated images (.rot.png)
- OUTPUT_DIR: Directory receiving transcripts and crops
- SKIP_LIST: JSON list of identifiers excluded from batch runs
- DICTIONARY_PATH: Word list used by the dictionary fallback
- CROPPER_BACKEND: 'graphicsmagick' or 'pillow'
- MAX_WORKERS: Worker pool size (defaults to CPU count)
- DEBUG: Presence flag enabling per-fragment diagnostics (0/false/no/off disable it)
"""
from typing import List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.constants import (
    ANNOTATION_EXTENSION,
    DEFAULT_DICTIONARY_PATH,
    DEFAULT_EXTRA_WORDS,
    DEFAULT_SKIP_LIST,
    IMAGE_SUFFIX,
    TRANSCRIPT_SUFFIX,
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Locations
    data_dir: str = Field(default="data")
    output_dir: str = Field(default=".")

    # Batch discovery
    skip_list: List[str] = Field(default_factory=lambda: list(DEFAULT_SKIP_LIST))
    annotation_extension: str = Field(default=ANNOTATION_EXTENSION)
    image_suffix: str = Field(default=IMAGE_SUFFIX)
    transcript_suffix: str = Field(default=TRANSCRIPT_SUFFIX)
    max_workers: Optional[int] = Field(default=None)

    # Dictionary fallback
    dictionary_path: str = Field(default=DEFAULT_DICTIONARY_PATH)
    extra_words: List[str] = Field(default_factory=lambda: list(DEFAULT_EXTRA_WORDS))

    # Cropping
    cropper_backend: str = Field(default="graphicsmagick")
    graphicsmagick_binary: str = Field(default="gm")

    # Diagnostics
    debug: bool = Field(default=False)
    log_level: str = Field(default="INFO")

    @field_validator("debug", mode="before")
    @classmethod
    def parse_debug_flag(cls, value):
        """DEBUG is a presence flag: any value other than 0/false/no/off enables it."""
        if isinstance(value, str):
            return value.strip().lower() not in ("0", "false", "no", "off")
        return value

    def get_effective_log_level(self) -> str:
        """DEBUG overrides the configured level."""
        return "DEBUG" if self.debug else self.log_level.upper()

    def get_lexicon_config(self) -> dict:
        """Get lexicon configuration as dictionary."""
        return {
            'words_path': self.dictionary_path,
            'extra_words': tuple(self.extra_words),
        }


# Global settings instance
settings = Settings()
