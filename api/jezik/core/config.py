"""
Application settings, read from the environment and an optional .env file.
"""
from pydantic_settings import BaseSettings
from dotenv import load_dotenv
import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)


def load_env_file() -> None:
    """
    Load api/.env (or ./.env) into the process environment if one exists.

    Values from the file win over variables already set.
    """
    api_dir = Path(__file__).parent.parent.parent
    for env_path in (api_dir / ".env", Path(".env")):
        if env_path.exists():
            load_dotenv(env_path, override=True)
            logger.info(f"Loaded .env file from: {env_path.absolute()}")
            return


load_env_file()

STORAGE_BACKENDS = ("memory", "database")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Runtime environment ('development', 'production', ...)
    environment: str = "production"

    # Storage - 'memory' keeps everything in-process, 'database' uses DATABASE_URL
    storage_backend: str = "memory"
    database_url: str = ""

    # Seed the base lesson catalog on startup
    seed_catalog: bool = True

    # API
    api_prefix: str = "/api"

    # CORS
    cors_origins: list[str] = ["*"]

    # Google Generative AI (Gemini) API
    google_gemini_api_key: str = ""
    gemini_model: str = "gemini-2.5-flash"
    llm_timeout_seconds: int = 60

    class Config:
        env_file = ".env"
        case_sensitive = False

    def __init__(self, **kwargs):
        # Railway and friends provide DATABASE_URL uppercase
        if not kwargs.get("database_url"):
            kwargs["database_url"] = os.getenv("DATABASE_URL", "")
        if not kwargs.get("google_gemini_api_key"):
            kwargs["google_gemini_api_key"] = os.getenv("GOOGLE_GEMINI_API_KEY", "")
        super().__init__(**kwargs)

    @property
    def is_development(self) -> bool:
        return self.environment.lower() in ("development", "dev", "local")

    @property
    def sqlalchemy_database_url(self) -> str:
        """DATABASE_URL with postgres:// rewritten to postgresql:// for SQLAlchemy."""
        db_url = self.database_url
        if db_url.startswith("postgres://"):
            db_url = db_url.replace("postgres://", "postgresql://", 1)
        return db_url


# Create settings instance
settings = Settings()
