"""Module: config."""

from pydantic_settings import BaseSettings


# Centralized runtime configuration loaded from environment variables.
class Settings(BaseSettings):
    # SQLAlchemy connection string; SQLite file by default, PostgreSQL supported.
    database_url: str = "sqlite:///./petclinic.db"

    # Listing page sizes.
    owners_page_size: int = 5
    vets_page_size: int = 5

    # Last-name filter policy for the owner search.
    owner_search_trim_whitespace: bool = False
    owner_search_case_sensitive: bool = True

    # Load the reference dataset when the app starts. Tables are created either way.
    seed_on_startup: bool = True

    log_level: str = "INFO"

    # Browser origins allowed to call the JSON endpoints (JSON list in the environment).
    cors_origins: list[str] = []

    # Configure pydantic-settings to also load values from local .env file.
    class Config:
        env_file = ".env"


# Global settings instance imported by app modules at runtime.
settings = Settings()
