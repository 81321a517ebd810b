from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables (or a .env file)."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    APP_NAME: str = "Product Catalog Service"
    APP_VERSION: str = "1.0.0"

    # Storage backend: "sql" or "dynamodb"
    STORE_BACKEND: str = "sql"

    # SQL backend
    DATABASE_URL: str = "sqlite:///./products.db"

    # DynamoDB backend
    PRODUCTS_TABLE: str = "ProductsTable"
    AWS_REGION: Optional[str] = None
    DYNAMODB_ENDPOINT_URL: Optional[str] = None

    LOG_LEVEL: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    return Settings()
