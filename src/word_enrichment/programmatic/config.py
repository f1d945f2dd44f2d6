"""
Configuration for the word enrichment pipeline.
Values can be overridden with WORD_ENRICHMENT_* environment variables or a .env file.
"""

import logging
from pathlib import Path

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from word_enrichment.api_helpers.dictionary_client import DEFAULT_DICTIONARY_API_URL
from word_enrichment.api_helpers.request_pacer import DEFAULT_INTERVAL_SECONDS
from word_enrichment.api_helpers.translation_client import (
    DEFAULT_TRANSLATION_API_URL,
)

logger = logging.getLogger(__name__)

DEFAULT_BACKUP_NAME = "words_backup.json"
DEFAULT_OUTPUT_NAME = "words_improved.json"


class EnrichmentConfig(BaseSettings):
    """
    Enrichment pipeline configuration with validation.
    """

    model_config = SettingsConfigDict(
        env_prefix="WORD_ENRICHMENT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # API Configuration
    dictionary_api_url: str = Field(
        default=DEFAULT_DICTIONARY_API_URL,
        description="Dictionary entries endpoint (word is appended to the path)",
    )
    translation_api_url: str = Field(
        default=DEFAULT_TRANSLATION_API_URL,
        description="MyMemory translation endpoint",
    )
    source_language: str = Field(default="en", description="Source language code")
    target_language: str = Field(default="tr", description="Target language code")
    request_delay: float = Field(
        default=DEFAULT_INTERVAL_SECONDS,
        description="Pause in seconds before every external API call",
    )

    # Data Paths
    source_path: str = Field(
        default="data/words.json", description="Source vocabulary dataset"
    )
    backup_path: str | None = Field(
        default=None,
        description="Verbatim copy of the source; defaults to words_backup.json next to the source",
    )
    output_path: str | None = Field(
        default=None,
        description="Improved dataset; defaults to words_improved.json next to the source",
    )
    timestamped_backup: bool = Field(
        default=False,
        description="Append a timestamp to the backup file name",
    )

    # Reporting
    progress_interval: int = Field(
        default=10, description="Log a progress line every N entries"
    )
    verbose_logging: bool = Field(default=False, description="Enable verbose logging")

    @field_validator("request_delay")
    def validate_request_delay(cls, v):
        """
        Validate that the request delay is between 0 and 60 seconds.

        Parameters:
            v (float): The delay in seconds to validate.

        Returns:
            float: The validated delay.

        Raises:
            ValueError: If `v` is negative or greater than 60.
        """
        if v < 0 or v > 60:
            raise ValueError("Request delay must be between 0 and 60 seconds")
        return v

    @field_validator("progress_interval")
    def validate_progress_interval(cls, v):
        if v < 1:
            raise ValueError("Progress interval must be at least 1")
        return v

    @model_validator(mode="after")
    def derive_artifact_paths(self) -> "EnrichmentConfig":
        """Place unset backup and output paths alongside the source dataset."""
        source = Path(self.source_path)
        if self.backup_path is None:
            self.backup_path = str(source.with_name(DEFAULT_BACKUP_NAME))
        if self.output_path is None:
            self.output_path = str(source.with_name(DEFAULT_OUTPUT_NAME))
        return self

    def log_configuration(self) -> None:
        """Log current configuration for debugging."""
        logger.info("Word Enrichment Configuration:")
        logger.info(f"  Dictionary API: {self.dictionary_api_url}")
        logger.info(
            f"  Translation API: {self.translation_api_url} "
            f"({self.source_language}|{self.target_language})"
        )
        logger.info(f"  Request delay: {self.request_delay}s")
        logger.info(f"  Source: {self.source_path}")
        logger.info(f"  Backup: {self.backup_path}")
        logger.info(f"  Output: {self.output_path}")
        logger.info(
            f"  Timestamped backup: {'Enabled' if self.timestamped_backup else 'Disabled'}"
        )
