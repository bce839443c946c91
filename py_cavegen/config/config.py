"""Process-wide settings loaded from the environment and an optional .env file."""

from pathlib import Path
from dotenv import dotenv_values
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

import os

# Explicitly load .env for local/dev environments only if values are missing from the environment
BASE_DIR = Path(__file__).resolve().parent.parent.parent
env_file = BASE_DIR / ".env"

if env_file.exists():
    file_env = dotenv_values(env_file)
    missing_keys = {k: v for k, v in file_env.items() if k not in os.environ and v is not None}
    for k, v in missing_keys.items():
        os.environ[k] = v


class Settings(BaseSettings):
    """Process-wide settings pulled from CAVEGEN_* environment variables."""

    model_config = SettingsConfigDict(env_prefix="CAVEGEN_", extra="ignore")

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="json", description="Logging format (json or console)")

    # Map Generation Limits
    max_map_width: int = Field(default=2000, gt=0, description="Max allowed map width")
    max_map_height: int = Field(default=2000, gt=0, description="Max allowed map height")


# Instantiate singleton settings object
settings = Settings()
