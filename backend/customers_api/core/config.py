"""
Database, data-access and server configuration.
All values are overridable via env; suitable for deployment (no localhost assumptions).
"""
from __future__ import annotations

from pathlib import Path
from typing import Literal, Optional

from pydantic_settings import BaseSettings

# Prefer backend/.env so scripts work regardless of CWD (run from backend/ or repo root)
_BACKEND_DIR = Path(__file__).resolve().parent.parent.parent
_ENV_PATH = _BACKEND_DIR / ".env"


class Settings(BaseSettings):
    """Application settings; override via env or .env for deployment."""

    # SQLAlchemy connection string; a single-file SQLite database by default
    database_url: str = "sqlite:///./customers.db"

    # "development" enables /docs, /redoc and /openapi.json
    environment: str = "production"

    # Repository used for every request; the other one serves useAltPath=true
    data_access: Literal["orm", "sql"] = "orm"
    alt_path_enabled: bool = True

    # Off: type binding only. On: required fields non-blank, text within bound
    strict_validation: bool = False
    max_text_length: int = 50

    log_level: str = "INFO"

    # Server (for deployment: bind to 0.0.0.0, set PORT via env)
    host: str = "0.0.0.0"
    port: int = 8000

    # CORS: comma-separated origins, or "*" for allow-all (e.g. "https://app.example.com")
    cors_origins: str = "*"

    # Pool settings; ignored for SQLite
    pool_size: int = 5
    max_overflow: int = 10

    model_config = {
        "env_file": str(_ENV_PATH) if _ENV_PATH.exists() else ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    def is_development(self) -> bool:
        return self.environment.strip().lower() == "development"

    def cors_origins_list(self) -> list[str]:
        if not self.cors_origins or self.cors_origins.strip() == "*":
            return ["*"]
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
