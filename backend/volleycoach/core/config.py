"""
Application configuration.
All sensitive values loaded from environment variables.
"""
from typing import List, Optional
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    APP_NAME: str = "Volleyball Training Planner"
    ENVIRONMENT: str = "development"  # development or production

    # Storage
    # memory: in-process rows, lost on restart
    # database: SQLAlchemy async engine on DATABASE_URL
    # auto: database when DATABASE_URL is set, memory otherwise
    STORAGE_BACKEND: str = "auto"
    DATABASE_URL: str = ""
    DATABASE_ECHO: bool = False

    # Auth
    JWT_SECRET: str = "dev-secret-change-this-in-production-0000"
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 7 * 24 * 60

    # CORS
    CORS_ORIGINS: List[str] = ["http://localhost:5173", "http://127.0.0.1:5173"]

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "console"  # json or console

    # Notifications
    MOCK_NOTIFICATIONS: bool = False
    SMTP_HOST: Optional[str] = None
    SMTP_PORT: int = 587
    SMTP_USERNAME: Optional[str] = None
    SMTP_PASSWORD: Optional[str] = None
    SMTP_FROM: str = "noreply@volleyball-planner.local"
    TWILIO_ACCOUNT_SID: Optional[str] = None
    TWILIO_AUTH_TOKEN: Optional[str] = None
    TWILIO_PHONE_NUMBER: Optional[str] = None
    TWILIO_API_URL: str = "https://api.twilio.com/2010-04-01"

    # Plans without an end date are scheduled over this many weeks
    DEFAULT_PLAN_WEEKS: int = 4

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT.lower() == "production"

    def storage_backend(self) -> str:
        """Resolve the storage backend name, expanding "auto"."""
        backend = self.STORAGE_BACKEND.lower()
        if backend == "auto":
            return "database" if self.DATABASE_URL else "memory"
        return backend

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
