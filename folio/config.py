"""Paging configuration using pydantic-settings."""

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class PagingSettings(BaseSettings):
    """Default settings for paged sources.

    All settings can be configured via environment variables with the
    FOLIO_ prefix. For example:
    - FOLIO_PAGE_SIZE=100
    - FOLIO_LOG_LEVEL=INFO

    Attributes:
        page_size: Number of items requested per page.
        log_level: Level at which fetches and exhaustion are logged.

    Example:
        >>> settings = PagingSettings()
        >>> source = PagedSource.from_settings(fetch, settings)
        >>> source.page_size
        50
    """

    page_size: int = Field(default=50, gt=0)
    log_level: str = "DEBUG"

    model_config = {"env_prefix": "FOLIO_"}

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level

    @property
    def level(self) -> int:
        """The numeric logging level."""
        return logging.getLevelName(self.log_level)
