import os
from pathlib import Path
from typing import Optional

from dotenv import dotenv_values
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_PREFIX = "FAULT_TERRAIN_"

# Load .env for local/dev runs only for keys missing from the environment
BASE_DIR = Path(__file__).resolve().parent.parent.parent
env_file = BASE_DIR / ".env"

if env_file.exists():
    file_env = dotenv_values(env_file)
    missing_keys = {k: v for k, v in file_env.items() if k not in os.environ and v is not None}
    for k, v in missing_keys.items():
        os.environ[k] = v


class Settings(BaseSettings):
    """Generation defaults pulled from FAULT_TERRAIN_* environment variables."""

    # Map defaults
    default_width: int = Field(default=3000, gt=0, description="Default map width in cells")
    default_height: int = Field(default=1500, gt=0, description="Default map height in cells")
    default_percent_water: float = Field(
        default=0.6, ge=0.0, le=1.0, description="Default share of cells below the water line"
    )
    default_fault_count: int = Field(default=2000, ge=0, description="Faults sampled per map")

    # Quantization
    water_buckets: int = Field(default=16, gt=0, description="Palette shades used for water")
    land_buckets: int = Field(default=15, gt=0, description="Palette shades used for land")

    # Performance
    max_workers: Optional[int] = Field(
        default=None, gt=0, description="Height-field worker threads, None for CPU count"
    )
    chunk_columns: int = Field(default=256, gt=0, description="Columns per worker task")

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="json", description="Logging format (plain or json)")

    model_config = SettingsConfigDict(env_prefix=ENV_PREFIX, extra="ignore")

    @property
    def workers(self) -> int:
        """Resolved worker count."""
        return self.max_workers or os.cpu_count() or 1


def get_settings() -> Settings:
    """Build a fresh settings object from the current environment."""
    return Settings()


settings = get_settings()
