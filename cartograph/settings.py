"""Runtime settings for the command-line tools, overridable via environment variables."""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    LOG_LEVEL: str = "INFO"
    SEED: int | None = None
    DEFAULT_ECOSYSTEM: str = "Forest"
    GOLDEN_PATH: Path = Path("runs/region_golden.json")

    model_config = SettingsConfigDict(env_prefix="CARTOGRAPH_", env_file=".env", extra="ignore")


settings = Settings()
