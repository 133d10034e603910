from pydantic_settings import BaseSettings
from typing import Optional
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

class Settings(BaseSettings):
    """
    Application settings.
    """
    # API Config
    API_V1_STR: str = "/api/v1"
    PROJECT_NAME: str = "FitTracker"
    
    # Classification Config
    MIN_LANDMARK_VISIBILITY: float = 0.5  # Below this a landmark is treated as absent
    
    # Session Config
    MAX_ACTIVE_SESSIONS: int = 100
    
    # Logging Config
    LOG_LEVEL: str = "INFO"
    LOG_DIR: Optional[str] = "logs"  # None disables the file handler
    
    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"

# Create global settings object
settings = Settings()
