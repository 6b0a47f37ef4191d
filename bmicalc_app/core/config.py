"""Configuration settings for the BMI calculator."""
import logging
from functools import lru_cache
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    """Application settings."""
    APP_NAME: str = "BMICalc"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    # Where log_evaluation writes by default: 'stdout' or 'logger'
    LOG_SINK: str = "stdout"

    # Allow extra environment variables so a shared .env can be reused
    model_config = {
        "env_file": ".env",
        "extra": "ignore",
    }

@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def configure_logging(settings: Settings = None) -> None:
    """Configure root logging from settings (DEBUG forces the debug level)."""
    settings = settings or get_settings()
    level = logging.DEBUG if settings.DEBUG else getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logging.getLogger().setLevel(level)
