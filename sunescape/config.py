"""Application configuration from environment."""
from pathlib import Path

from dotenv import load_dotenv
from pydantic import field_validator
from pydantic_settings import BaseSettings
from functools import lru_cache

# Load .env from project root (parent of sunescape/) so env vars are available everywhere
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(dotenv_path=_env_path)


class Settings(BaseSettings):
    app_name: str = "SunEscape"
    app_env: str = "development"
    debug: bool = True

    database_url: str = "sqlite:///./sunescape.db"

    jwt_secret_key: str = "jwt-secret-change-me"
    jwt_algorithm: str = "HS256"

    @field_validator("jwt_secret_key", "database_url")
    @classmethod
    def strip_value(cls, v: str) -> str:
        return (v or "").strip()

    jwt_access_token_expire_minutes: int = 60 * 24 * 7

    # Seed value for the singleton settings row; admins change it at runtime
    total_rooms_default: int = 5

    # Links in emails and push payloads point here
    app_base_url: str = "http://localhost:8000"

    sendgrid_api_key: str = ""
    sendgrid_from_email: str = "noreply@sunescape.app"
    sendgrid_from_name: str = "SunEscape"

    mailgun_api_key: str = ""
    mailgun_domain: str = ""
    mailgun_base_url: str = "https://api.mailgun.net"
    mailgun_from_email: str = "noreply@sunescape.app"
    mailgun_from_name: str = "SunEscape"

    @field_validator("mailgun_api_key", "mailgun_domain", "mailgun_base_url", "mailgun_from_email", mode="before")
    @classmethod
    def strip_mailgun(cls, v: str) -> str:
        return (v or "").strip()

    vapid_public_key: str = ""
    vapid_private_key: str = ""
    vapid_subject: str = "mailto:admin@sunescape.app"

    class Config:
        env_file = str(_env_path)
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    return Settings()
