# backend/config.py
from pydantic_settings import BaseSettings
from typing import ClassVar, Optional
from pathlib import Path
from dotenv import load_dotenv

# Resolve absolute path to the .env file for reliable loading
env_path = Path(__file__).parent.parent / ".env"
load_dotenv(env_path)

class Settings(BaseSettings):
    SECRET_KEY: str = "dev-secret-change-me"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60
    DATABASE_URL: str = "sqlite:///./feedback_app.db"

    # Extra origin allowed by CORS (deployed frontend)
    FRONTEND_URL: Optional[str] = None

    LOG_LEVEL: str = "INFO"
    DEFAULT_PAGE_SIZE: int = 10

    class Config:
        env_file: ClassVar[str] = str(env_path)
        extra: ClassVar[str] = "ignore"

settings = Settings()
