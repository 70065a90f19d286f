"""
Expense Tracker Settings

Logging settings read from EXPENSE_TRACKER_* environment variables or a
local .env file. setup_logging falls back to these for any argument it is
not given.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional


class ExpenseTrackerConfig(BaseSettings):
    """Expense tracker configuration"""
    
    model_config = SettingsConfigDict(
        env_prefix="EXPENSE_TRACKER_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )
    
    # Logging configuration
    log_level: str = "INFO"
    log_format: str = "json"  # json or text
    log_file: Optional[str] = None  # If None, logs to stderr


# Global configuration instance
config = ExpenseTrackerConfig()


def get_config() -> ExpenseTrackerConfig:
    """Get global configuration instance"""
    return config


def reload_config() -> ExpenseTrackerConfig:
    """Reload configuration from environment"""
    global config
    config = ExpenseTrackerConfig()
    return config
