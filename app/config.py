# app/config.py

from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Chosen default greeting target ("Hello World"); override with HELLO_MSG.
DEFAULT_MSG = "World"

LogLevel = Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]


class Settings(BaseSettings):
    """
    Runtime settings, read from HELLO_* environment variables.
    """

    model_config = SettingsConfigDict(env_prefix="HELLO_")

    msg: str = DEFAULT_MSG
    host: str = "127.0.0.1"
    port: int = 8000
    log_level: LogLevel = "INFO"

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value):
        if isinstance(value, str):
            return value.strip().upper()
        return value
