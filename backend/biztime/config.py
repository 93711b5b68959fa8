from pydantic_settings import BaseSettings
from typing import List

class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./biztime.db"
    APP_HOST: str = "127.0.0.1"
    APP_PORT: int = 8000
    FRONTEND_ORIGINS: List[str] = ["http://localhost:3000"]
    DB_TIMEOUT_SECONDS: float = 5.0
    LOCK_TIMEOUT_SECONDS: float = 10.0
    LOG_LEVEL: str = "INFO"
    RESET_DB: bool = False

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"

settings = Settings()
