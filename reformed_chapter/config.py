"""Configuration management for the Reformed Chapter API."""
import os
from urllib.parse import urlparse
from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    # API Configuration
    app_name: str = Field(default="Reformed Chapter API", env="APP_NAME")
    debug: bool = Field(default=False, env="DEBUG")
    site_url: str = Field(default="https://reformedchapter.com", env="SITE_URL")

    # Database Configuration (Heroku compatible)
    database_url: str = Field(default="", env="DATABASE_URL")
    db_name: str = Field(default="", env="DB_NAME")
    db_user: str = Field(default="", env="DB_USER")
    db_password: str = Field(default="", env="DB_PASSWORD")
    db_host: str = Field(default="localhost", env="DB_HOST")
    db_port: int = Field(default=5432, env="DB_PORT")

    # Cache Configuration
    redis_url: str = Field(default="redis://localhost:6379/0", env="REDIS_URL")
    cache_enabled: bool = Field(default=True, env="CACHE_ENABLED")
    cache_ttl_resources: int = Field(default=300, env="CACHE_TTL_RESOURCES")

    # Payments Configuration
    stripe_secret_key: str = Field(default="", env="STRIPE_SECRET_KEY")
    stripe_api_base: str = Field(default="https://api.stripe.com/v1", env="STRIPE_API_BASE")
    payment_request_timeout: int = Field(default=10, env="PAYMENT_REQUEST_TIMEOUT")
    donation_minimum_amount: int = Field(default=50, env="DONATION_MINIMUM_AMOUNT")  # cents
    donation_source: str = Field(default="reformed-chapter-donation", env="DONATION_SOURCE")

    # CORS Configuration
    @computed_field
    @property
    def allowed_origins(self) -> list[str]:
        """Parse allowed origins from environment variable or use defaults."""
        allowed_origins_str = os.getenv(
            "ALLOWED_ORIGINS",
            "https://reformedchapter.com,http://localhost:3000"
        )
        origins = [origin.strip() for origin in allowed_origins_str.split(",") if origin.strip()]

        # Add bare/WWW variants for each https origin
        normalized = set(origins)
        for origin in list(origins):
            if origin.startswith("https://www."):
                normalized.add(origin.replace("https://www.", "https://", 1))
            elif origin.startswith("https://") and not origin.split("//", 1)[1].startswith("www."):
                host = origin.split("//", 1)[1]
                normalized.add(f"https://www.{host}")

        return sorted(normalized)

    @property
    def db_config(self) -> dict:
        """Get database configuration, preferring DATABASE_URL for hosted Postgres."""
        if self.database_url and self.database_url.strip():
            parsed = urlparse(self.database_url)
            return {
                'dbname': parsed.path[1:],  # Remove leading slash
                'user': parsed.username,
                'password': parsed.password,
                'host': parsed.hostname,
                'port': parsed.port or 5432
            }
        elif self.db_name.strip() and self.db_user.strip():
            return {
                'dbname': self.db_name,
                'user': self.db_user,
                'password': self.db_password,
                'host': self.db_host,
                'port': self.db_port
            }
        else:
            # Fallback configuration for development
            return {
                'dbname': 'reformed_chapter',
                'user': 'postgres',
                'password': 'postgres',
                'host': 'localhost',
                'port': 5432
            }

    model_config = SettingsConfigDict(
        env_file=None,  # Don't load from .env file
        case_sensitive=False,
        extra="ignore"
    )

def get_settings() -> Settings:
    """Get settings instance."""
    return Settings()
