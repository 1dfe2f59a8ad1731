"""Application configuration."""

from pydantic import ConfigDict
from pydantic_settings import BaseSettings

from .organization.strategy import DirectoryLayout, MonthLanguage


class Settings(BaseSettings):
    """Defaults loaded from DATE_SORTER_* environment variables."""

    minimum_year: int = 1950
    layout: DirectoryLayout = DirectoryLayout.PLAIN
    month_language: MonthLanguage = MonthLanguage.NONE
    follow_symlinks: bool = True

    model_config = ConfigDict(
        env_prefix="DATE_SORTER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # Ignore extra fields from .env
    )
