from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings

BASE_DIR = Path(__file__).resolve().parent

class Settings(BaseSettings):
    DB_PATH: str = str(BASE_DIR / "data" / "foodrescue.db")
    LOVABLE_API_KEY: Optional[str] = None  # secret for the AI gateway, never commit it
    AI_GATEWAY_URL: str = "https://ai.gateway.lovable.dev/v1/chat/completions"
    AI_MODEL: str = "google/gemini-2.5-flash"
    AI_GATEWAY_TIMEOUT: float = 60.0
    RECENT_SUBMISSIONS_LIMIT: int = 10
    API_BASE_URL: str = "http://localhost:8001/api/v1"

    class Config:
        env_file = ".env"

settings = Settings()
