from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Package settings, read from ASTRID_* environment variables."""
    model_config = {
        "env_prefix": "ASTRID_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    # "console" for coloured key=value diagnostics, "json" for one JSON object per line
    LOG_FORMAT: str = "console"
    LOG_LEVEL: str = "INFO"

    # Logger configuration file used by scripts/example.py
    CONFIG_FILE: str = "config.json"

    # Outbound webhook calls
    WEBHOOK_TIMEOUT: float = 30


settings = Settings()
