from __future__ import annotations

from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

from . import constants as cs

load_dotenv()


class AppConfig(BaseSettings):
    """
    (H) All settings are loaded from environment variables or a .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    JAVA_GRAMMAR_MODULE: str = cs.JAVA_GRAMMAR_MODULE
    JAVA_GRAMMAR_ATTR: str = cs.JAVA_GRAMMAR_ATTR


settings = AppConfig()
