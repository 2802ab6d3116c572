"""Configuration settings for CronKeeper."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Crontab
    crontab_command: str = "crontab"
    crontab_user: str = ""  # Empty means the user running the process
    crontab_timeout: int = 30
    allow_user_switch: bool = True

    # API
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    api_reload: bool = False

    # Logging
    log_level: str = "INFO"
    log_file: str = ""  # Empty disables file logging

    class Config:
        env_prefix = "CRONKEEPER_"
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
