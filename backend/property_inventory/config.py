"""Application configuration using pydantic-settings"""
from functools import lru_cache
from typing import Optional, List
from pydantic_settings import BaseSettings
from pydantic import field_validator
from sqlalchemy.engine import URL
import logging

logger = logging.getLogger(__name__)

# Used when neither DATABASE_URL nor the MySQL variables are provided
_LOCAL_DATABASE_URL = "sqlite+aiosqlite:///./properties.db"


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # Application
    APP_NAME: str = "Property Inventory API"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    ENVIRONMENT: str = "development"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # API
    DOCS_ENABLED: bool = True
    ALLOWED_ORIGINS: str = "http://localhost:3000"

    # Database
    # An explicit URL overrides the MySQL variables below
    DATABASE_URL: Optional[str] = None
    DATABASE_ECHO: bool = False

    # MySQL (same variable names the container platform injects)
    MYSQL_SERVICE_HOST: Optional[str] = None
    MYSQL_PORT: int = 3306
    MYSQL_USER: Optional[str] = None
    MYSQL_PASSWORD: Optional[str] = None
    MYSQL_DATABASE: Optional[str] = None

    # Connection pool (ignored for SQLite)
    DATABASE_POOL_SIZE: int = 5
    DATABASE_MAX_OVERFLOW: int = 10
    DATABASE_POOL_TIMEOUT: int = 30

    # Upper bound for a single storage round-trip, in seconds
    STORAGE_TIMEOUT_SECONDS: float = 10.0

    @field_validator("STORAGE_TIMEOUT_SECONDS")
    @classmethod
    def validate_storage_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("STORAGE_TIMEOUT_SECONDS must be positive")
        return v

    @property
    def database_url(self) -> str:
        """Resolve the SQLAlchemy URL the engine should connect to"""
        if self.DATABASE_URL:
            return self.DATABASE_URL

        if self.MYSQL_SERVICE_HOST:
            url = URL.create(
                "mysql+aiomysql",
                username=self.MYSQL_USER,
                password=self.MYSQL_PASSWORD,
                host=self.MYSQL_SERVICE_HOST,
                port=self.MYSQL_PORT,
                database=self.MYSQL_DATABASE,
            )
            return url.render_as_string(hide_password=False)

        logger.warning(
            "No DATABASE_URL or MYSQL_SERVICE_HOST configured, "
            f"falling back to {_LOCAL_DATABASE_URL}"
        )
        return _LOCAL_DATABASE_URL

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")

    @property
    def allowed_origins_list(self) -> List[str]:
        return [origin.strip() for origin in self.ALLOWED_ORIGINS.split(",") if origin.strip()]

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
