"""Configuration management using python-dotenv."""
import os
from pathlib import Path
from dotenv import load_dotenv

# Load .env file from project root
env_path = Path(__file__).parent.parent / '.env'
load_dotenv(dotenv_path=env_path)


def _as_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


class DatabaseConfig:
    """Relational store connection configuration."""
    URL: str = os.getenv("STOCKCALC_DATABASE_URL", "sqlite:///stockcalc.db")
    ECHO: bool = _as_bool(os.getenv("STOCKCALC_DATABASE_ECHO", "false"))


class CalcValueDefaultsConfig:
    """Placeholder audit values stamped onto inserted calculated values."""
    LOCALE_ID: str = os.getenv("STOCKCALC_LOCALE_ID", "ja")
    CREATOR: str = os.getenv("STOCKCALC_CREATOR", "TSSTS_MAIN_USER")
    UPDATER: str = os.getenv("STOCKCALC_UPDATER", "TSSTS_MAIN_USER")


class AppConfig:
    """Application configuration."""
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")


# Singleton instances
database_config = DatabaseConfig()
calc_value_defaults_config = CalcValueDefaultsConfig()
app_config = AppConfig()
