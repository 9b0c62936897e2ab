from functools import lru_cache
from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # App
    app_name: str = "learning-service"
    app_version: str = "1.0.0"
    app_host: str = "127.0.0.1"
    app_port: int = 4000
    environment: str = "development"
    cors_origins: List[str] = ["*"]

    # Database
    database_url: str = "sqlite+aiosqlite:///./data/learning.sqlite"
    database_echo: bool = False
    seed_demo_data: bool = False

    # Auth
    jwt_secret: str = "dev-secret-change-me"
    jwt_algorithm: str = "HS256"
    access_token_expire_days: int = 7
    bcrypt_rounds: int = 10

    # Logging
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        case_sensitive = False


@lru_cache()
def get_settings() -> Settings:
    return Settings()
