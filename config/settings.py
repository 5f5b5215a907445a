"""Application settings using Pydantic Settings."""

from pydantic import Field
from pydantic_settings import BaseSettings
from typing import List


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""
    
    # Database Configuration
    mongodb_url: str = "mongodb://localhost:27017/athlete_tracker"
    
    # Authentication
    jwt_secret: str = "change-me-athlete-tracker-dev-secret-key"
    jwt_algorithm: str = "HS256"
    
    # Application Configuration
    app_name: str = "Athlete Performance Tracker"
    app_version: str = "1.0.0"
    debug: bool = True
    log_level: str = "INFO"
    
    # Server Configuration
    host: str = "0.0.0.0"
    port: int = 8000
    
    # CORS Configuration
    cors_origins: List[str] = ["http://localhost:3000", "http://localhost:5173"]
    
    # Reporting
    report_default_days: int = Field(90, ge=1)
    team_report_default_days: int = Field(30, ge=1)
    summary_window_days: int = Field(30, ge=1)
    recent_games_limit: int = Field(10, ge=1)
    page_size_default: int = Field(20, ge=1, le=100)
    
    class Config:
        env_file = ".env"
        case_sensitive = False


# Global settings instance
settings = Settings()
