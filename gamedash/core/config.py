"""
Application configuration using Pydantic Settings.
Loads from environment variables / .env file.
"""

from functools import lru_cache
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""
    
    # App
    APP_NAME: str = "Gamification Dashboard API"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = True
    LOG_LEVEL: str = "INFO"
    
    # Profile provider: "mock" serves the fixed template, "mongo" reads storage
    PROFILE_BACKEND: str = "mock"
    MOCK_LATENCY_SECONDS: float = 1.0
    
    # MongoDB
    MONGO_URI: str = "mongodb://localhost:27017"
    MONGO_DB_NAME: str = "gamedash"
    GAMIFICATION_COLLECTION: str = "user_gamification"
    
    # Dashboard view
    API_BASE_URL: str = "http://localhost:8000"
    FETCH_TIMEOUT_SECONDS: float = 10.0
    NOTIFICATION_DURATION_SECONDS: float = 3.0
    
    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance."""
    return Settings()
