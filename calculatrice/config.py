"""
Application configuration using Pydantic Settings.
"""

from functools import lru_cache
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from CALCULATRICE_* environment variables or .env."""

    model_config = SettingsConfigDict(
        env_prefix="CALCULATRICE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = "INFO"
    cors_origins: List[str] = [
        "http://localhost:3000",
        "http://localhost:5173",
        "http://127.0.0.1:3000",
        "http://127.0.0.1:5173",
    ]

    # Loan card seed
    default_loan_amount: float = 100000
    default_interest_rate: float = 5
    default_loan_term: int = 15

    # Investment card seed
    default_current_age: int = 45
    # when set, currentAge = this year - default_birth_year
    default_birth_year: Optional[int] = None
    default_retirement_age: int = 56
    default_current_balance: float = 300000
    default_monthly_contribution: float = 2000
    default_annual_return: float = 6


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
