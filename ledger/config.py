"""Application configuration via environment variables."""

from pathlib import Path
from pydantic_settings import BaseSettings

PROJECT_ROOT = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    database_url: str = f"sqlite:///{PROJECT_ROOT / 'ledger.db'}"
    echo_sql: bool = False
    log_level: str = "INFO"
    cors_origins: list[str] = ["http://localhost:5173"]  # Vite dev server

    # Query defaults
    default_page_size: int = 20

    model_config = {"env_prefix": "LEDGER_", "env_file": ".env"}


settings = Settings()
