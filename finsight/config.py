"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "finsight-engine"
    log_level: str = "INFO"

    # Projections
    default_annual_return_rate: float = 0.10
    freedom_max_months: int = 600  # 50 years

    # Aggregation fallbacks when the user has no recorded data
    default_monthly_income: float = 50_000.0
    default_monthly_expenses: float = 30_000.0


settings = Settings()
