from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="SOCIALQ_", env_file=".env", extra="ignore")

    # Data store settings
    local_store_path: Path = Path("data/store.json")

    # Insights settings
    needs_attention_days: int = 30
    due_reminder_days: int = 7

    # Log parser settings
    date_languages: list[str] = ["en"]

    log_level: str = "INFO"  # Can be DEBUG, INFO, WARNING, ERROR, CRITICAL


settings = Settings()
