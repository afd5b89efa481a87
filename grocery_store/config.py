"""
Configuration settings for the Grocery Store order directory
"""
from decimal import Decimal
from pathlib import Path
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict

DATA_DIR = Path(__file__).resolve().parent / "data"


class Settings(BaseSettings):
    """Application settings"""

    # Source data
    CUSTOMERS_CSV_PATH: Path = DATA_DIR / "customers.csv"
    ORDERS_CSV_PATH: Path = DATA_DIR / "orders.csv"

    # Pricing
    TAX_RATE: Decimal = Decimal("0.075")

    # Service
    SERVICE_NAME: str = "grocery-store"
    SERVICE_PORT: int = 8000
    LOG_LEVEL: str = "INFO"

    # CORS
    ALLOWED_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://localhost:8080"
    ]

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True)


# Create global settings instance
settings = Settings()
