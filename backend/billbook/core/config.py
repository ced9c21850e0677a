from pydantic_settings import BaseSettings
from typing import List, Optional
from datetime import timedelta


class Settings(BaseSettings):
    ENV: str = "development"
    LOG_LEVEL: Optional[str] = None

    # Both required: the app refuses to start without them
    SECRET_KEY: str
    DATABASE_URL: str

    # CORS
    CORS_ORIGINS: str = "http://localhost:3000,http://localhost:8080"

    # JWT
    JWT_ACCESS_EXPIRES_DAYS: int = 1

    # Admin seed
    ADMIN_USERNAME: Optional[str] = "admin"
    ADMIN_PHONE: Optional[str] = "000-0"
    ADMIN_PASSWORD: Optional[str] = None

    @property
    def cors_origins_list(self) -> List[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    @property
    def jwt_expires_delta(self) -> timedelta:
        return timedelta(days=self.JWT_ACCESS_EXPIRES_DAYS)

    class Config:
        env_file = ".env"
