"""
Application configuration settings
"""
import os
from pydantic_settings import BaseSettings
from typing import List, Optional


class Settings(BaseSettings):
    """Application settings"""
    
    # App Configuration
    DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    HOST: str = "0.0.0.0"
    PORT: int = int(os.getenv("PORT", "8000"))
    API_PREFIX: str = "/api"
    
    # Identity (no auth yet, a demo user is used when the header is missing)
    USER_ID_HEADER: str = "x-user-id"
    DEMO_USER_ID: str = "demo-user"
    
    # Reading plan
    DEFAULT_SESSIONS_PER_WEEK: int = 3
    
    # Firebase Configuration
    FIREBASE_PROJECT_ID: Optional[str] = None
    FIREBASE_PRIVATE_KEY_ID: Optional[str] = None
    FIREBASE_PRIVATE_KEY: Optional[str] = None
    FIREBASE_CLIENT_EMAIL: Optional[str] = None
    FIREBASE_CLIENT_ID: Optional[str] = None
    FIREBASE_AUTH_URI: str = "https://accounts.google.com/o/oauth2/auth"
    FIREBASE_TOKEN_URI: str = "https://oauth2.googleapis.com/token"
    
    # CORS
    CORS_ALLOW_METHODS: List[str] = ["GET", "POST", "OPTIONS"]
    CORS_ALLOW_HEADERS: List[str] = ["Content-Type", "X-User-Id"]
    
    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = 'ignore'
    
    @property
    def has_service_account(self) -> bool:
        """Check if a full service account key is configured"""
        return bool(self.FIREBASE_PRIVATE_KEY and self.FIREBASE_CLIENT_EMAIL)


# Global settings instance
settings = Settings()
