"""
Configuration Management Module

Provides centralized configuration using pydantic-settings for environment-based configuration.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class LedgerConfig(BaseSettings):
    """Account ledger configuration"""
    
    model_config = SettingsConfigDict(
        env_prefix="LEDGER_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore"
    )
    
    # Business rules configuration
    min_balance: str = "1"  # Balance must stay strictly above this after transfers
    daily_withdraw_limit: str = "10000"
    interest_rate: str = "0.02"  # Annual, simple interest
    days_per_year: int = 365
    
    # Notification thresholds (alerts fire strictly above these)
    large_deposit_threshold: str = "50000"
    large_withdrawal_threshold: str = "5000"
    owner_email: str = "owner@example.com"
    owner_phone: str = "+40712345678"
    
    # Currency configuration
    local_currency: str = "RON"
    foreign_currency: str = "EUR"
    default_exchange_rate: str = "4.97"  # Local units per one foreign unit
    
    # Logging configuration
    log_level: str = "INFO"
    log_format: str = "json"  # json or text
    
    # Webhook notifier configuration
    webhook_url: str = ""  # Empty = disabled
    webhook_timeout: int = 30


# Global configuration instance
config = LedgerConfig()


def get_config() -> LedgerConfig:
    """Get global configuration instance"""
    return config


def reload_config() -> LedgerConfig:
    """Reload configuration from environment"""
    global config
    config = LedgerConfig()
    return config
