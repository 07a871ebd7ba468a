"""Application configuration and settings."""
import logging
from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

DRIVE_FOLDER_ID = "16E5IHs55NHydlC7qtNFRFcaI-ujvTV-i"
SPREADSHEET_ID = "1Ufx8chsZzW2SKYPc_AHueDwJI9B7G6xbzYhk8lJgF5Y"

CANDIDATE_SHEET_RANGE = "Sheet1!A1"
ASSESSMENT_SHEET_RANGE = "Sheet2"
SURVEY_SHEET_RANGE = "Sheet3"


class Settings(BaseSettings):
    """Central configuration for the hiring backend."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    database_url: str = "sqlite+aiosqlite:///./data/hiring.db"
    data_directory: Path = Path("data")
    google_credentials: Path | None = None

    host: str = "0.0.0.0"
    port: int = 5000
    cors_origins: list[str] = ["*"]
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Return a cached settings instance."""

    return Settings()


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
