"""Engine defaults from environment."""
from datetime import date
from pathlib import Path

from dotenv import load_dotenv
from pydantic import field_validator
from pydantic_settings import BaseSettings
from functools import lru_cache

# Load .env from project root (parent of schengen/) so env vars are available everywhere
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(dotenv_path=_env_path)


class Settings(BaseSettings):
    # Trips before this date are never counted
    compliance_start_date: date = date(2025, 10, 12)

    day_limit: int = 90

    # Days-remaining scheme (green/amber/red)
    risk_green_days: int = 16
    risk_amber_days: int = 1

    # Days-used scheme (green/amber/red/breach)
    status_green_max: int = 60
    status_amber_max: int = 75
    status_red_max: int = 89

    default_mode: str = "audit"

    @field_validator("default_mode", mode="before")
    @classmethod
    def normalize_mode(cls, v: str) -> str:
        return (v or "audit").strip().lower()

    class Config:
        env_file = str(_env_path)
        env_prefix = "SCHENGEN_"
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    return Settings()
