# roi_calculator/core/config.py
# -----------------------------------------------------------------------------
# Global settings (pydantic-settings v2)
# - Reads the .env file and OS environment into a Settings object
# - Types, defaults and short notes live next to each field
# -----------------------------------------------------------------------------
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # basics
    APP_NAME: str = "ROI Calculator"
    ENV: str = "dev"
    DATABASE_URL: str = "sqlite+aiosqlite:///./roi.db"

    # logging
    LOG_DIR: str = "logs"
    LOG_LEVEL: str = "INFO"

    # browsers calling the API directly (frontend dev servers etc.)
    CORS_ORIGINS: list[str] = ["*"]

    model_config = SettingsConfigDict(
        env_file=".env", extra="ignore"  # ignore unrelated keys in .env
    )


settings = Settings()
