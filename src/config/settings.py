"""
Application settings and configuration
"""

import os
from pathlib import Path
from dotenv import load_dotenv
from typing import Optional

# Load environment variables from .env file
env_path = Path(__file__).parent.parent.parent / ".env"
load_dotenv(dotenv_path=env_path)


class Settings:
    """Application settings loaded from environment variables"""
    
    # Backend REST API
    DASHBOARD_API_BASE_URL: str = os.getenv("DASHBOARD_API_BASE_URL", "http://127.0.0.1:5000")
    DASHBOARD_API_TIMEOUT: int = int(os.getenv("DASHBOARD_API_TIMEOUT", "30"))
    DASHBOARD_SESSION_COOKIE: Optional[str] = os.getenv("DASHBOARD_SESSION_COOKIE", None)
    
    # Local storage (notifications, preferences, imported spreadsheets)
    STORAGE_FILE_PATH: str = os.getenv("STORAGE_FILE_PATH", "/tmp/schedule_dashboard_store.json")
    
    # Locale
    DEFAULT_LANGUAGE: str = os.getenv("DEFAULT_LANGUAGE", "pt")
    DEFAULT_TIMEZONE: str = os.getenv("DEFAULT_TIMEZONE", "America/Sao_Paulo")
    
    # Application
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    WEB_PORT: int = int(os.getenv("WEB_PORT", "8000"))
    
    @classmethod
    def validate(cls) -> bool:
        """Validate that all required settings are present"""
        required = {
            "DASHBOARD_API_BASE_URL": cls.DASHBOARD_API_BASE_URL,
            "STORAGE_FILE_PATH": cls.STORAGE_FILE_PATH,
        }
        
        missing = [name for name, value in required.items() if not value]
        
        if missing:
            raise ValueError(
                f"Missing required environment variables: {', '.join(missing)}"
            )
        
        return True


# Global settings instance
settings = Settings()
