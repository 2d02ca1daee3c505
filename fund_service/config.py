"""Application configuration settings."""
import os
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables
load_dotenv(Path(__file__).parent.parent / ".env")


class Settings:
    """Application settings loaded from environment variables."""

    # Server Configuration
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "3000"))
    CORS_ORIGINS: list = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    # Database Configuration
    DB_HOST: str = os.getenv("DB_HOST", "localhost")
    DB_PORT: int = int(os.getenv("DB_PORT", "3306"))
    DB_USER: str = os.getenv("DB_USER", "root")
    DB_PASSWORD: str = os.getenv("DB_PASSWORD", "")
    DB_NAME: str = os.getenv("DB_NAME", "fund_db")
    DB_POOL_MINSIZE: int = int(os.getenv("DB_POOL_MINSIZE", "1"))
    DB_POOL_MAXSIZE: int = int(os.getenv("DB_POOL_MAXSIZE", "10"))

    @property
    def db_config(self) -> dict:
        """Return database configuration dictionary."""
        return {
            "host": self.DB_HOST,
            "port": self.DB_PORT,
            "user": self.DB_USER,
            "password": self.DB_PASSWORD,
            "db": self.DB_NAME,
            "autocommit": True
        }

    @property
    def database_label(self) -> str:
        """Database location without credentials, for logs and health output."""
        return f"{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"


settings = Settings()
