# teenhealth/core/config.py
from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Service account JSON for Firebase Admin / Firestore
    FIREBASE_CREDENTIALS: str = "teenhealth/core/firebase_key.json"

    # Session tokens
    JWT_SECRET_KEY: str = "change-me"
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60

    # Payment processor (pass-through only)
    PAYMENT_API_URL: str = "https://payments.example.com/v1"
    PAYMENT_API_KEY: str = ""
    PAYMENT_TIMEOUT_SECONDS: float = 10.0

    LOG_LEVEL: str = "INFO"
    # Structured debug payloads via log_debug()
    DEBUG_MODE: bool = False

    # If you want to read from a .env file, keep this:
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")


settings = Settings()


def get_settings() -> Settings:
    return settings
