# steamvision/core/config.py
import os
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict
DOTENV = os.path.join(os.path.dirname(os.path.dirname(os.path.dirname(__file__))), ".env")


class Settings(BaseSettings):
    SECRET_KEY: str = "secret_key"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24
    DATABASE_URL: str = "sqlite:///./steamvision.db"

    SMTP_SERVER: str = ""
    SMTP_PORT: int = 587
    SMTP_USER: str = ""
    SMTP_PASSWORD: str = ""
    MAIL_FROM: str = "noreply@steamvision.app"

    # Lifetime of a password reset code
    VERIFICATION_CODE_TTL_SECONDS: int = 550
    CODE_SWEEP_INTERVAL_SECONDS: int = 60

    CORS_ORIGINS: List[str] = ["http://localhost:3000"]
    ALLOWED_HOSTS: List[str] = ["*"]

    LOG_LEVEL: str = "INFO"
    LOG_DIR: str = "logs"
    DEBUG: bool = False

    model_config = SettingsConfigDict(
        env_file=DOTENV,
        env_ignore_empty=True,
        extra="ignore"
    )

    @property
    def smtp_enabled(self) -> bool:
        return bool(self.SMTP_SERVER and self.SMTP_USER and self.SMTP_PASSWORD)


settings = Settings()
