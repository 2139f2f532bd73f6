"""Application configuration and LLM client initialization.

Defines `Settings` with environment variables and creates an `OPENAI_CLIENT'.
"""
# app/core/config.py
from pydantic_settings import BaseSettings, SettingsConfigDict
from openai import AsyncOpenAI

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    OPENAI_BASE_URL: str = "https://api.openai.com/v1"
    OPENAI_API_KEY: str = ""
    MODEL_NAME: str = "gpt-4o-mini"

    APP_NAME: str = "WorkaCare Core"
    DEBUG: bool = True
    LOG_PATH: str = "logging"
    SECRET_KEY: str = "change-me-in-env"
    DATABASE_URL: str = "sqlite:///./workacare.db"

    ACCESS_TOKEN_TTL: int = 60 * 60 * 12  # 12h
    REPORT_DEFAULT_DAYS: int = 30


settings = Settings()
OPENAI_CLIENT = AsyncOpenAI(base_url=settings.OPENAI_BASE_URL, api_key=settings.OPENAI_API_KEY or "missing")
