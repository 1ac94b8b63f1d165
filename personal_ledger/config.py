"""Configuration management using Pydantic Settings"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Ledger configuration loaded from environment variables (LEDGER_*)"""

    model_config = SettingsConfigDict(
        env_prefix="LEDGER_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # Service
    service_name: str = "personal-ledger"
    log_level: str = "INFO"

    # Expected range for a bank's rate on current-account balances, in percent
    bank_rate_min: float = Field(default=0.1, ge=0)
    bank_rate_max: float = Field(default=2.0, ge=0)


settings = Settings()
