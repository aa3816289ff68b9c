# norte_api/config.py
"""Runtime settings loaded from the environment and an optional `.env` file."""
from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv()


class Settings(BaseSettings):
    # Store
    DATABASE_URL: str = Field(default="", description="SQLAlchemy/Postgres connection URL.")
    ENVIRONMENT: str = Field(default="development", description="'production' turns on sslmode=require.")
    DB_POOL_SIZE: int = 5
    DB_MAX_OVERFLOW: int = 10
    DB_CONNECT_TIMEOUT: int = Field(default=5, description="Seconds to wait for a new connection.")
    DB_STATEMENT_TIMEOUT_MS: int = Field(default=5000, description="Server-side statement timeout.")

    # Previews and static bundle
    PUBLIC_BASE_URL: str = Field(default="", description="Canonical front-end URL used in og:url and redirects.")
    STATIC_DIR: str = Field(default="dist", description="Directory of the prebuilt client bundle.")
    SITE_NAME: str = "Norte Automotores"
    PREVIEW_IMAGE_WIDTH: int = 800
    DEFAULT_CURRENCY: str = "U$S"

    # HTTP
    CORS_ORIGINS: str = "*"
    HOST: str = "0.0.0.0"
    PORT: int = 5001
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT.lower() == "production"

    @property
    def cors_origins(self):
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]
