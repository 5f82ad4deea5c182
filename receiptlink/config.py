"""
Application settings
"""
from typing import List, Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # External store. Unset -> receipts live in process memory only.
    DATABASE_URL: Optional[str] = None

    # Base used for viewer links; derived from the request when unset
    PUBLIC_BASE_URL: Optional[str] = None
    TRUST_PROXY: bool = True

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # Environment
    ENVIRONMENT: str = "development"
    DEBUG: bool = False

    # CORS
    CORS_ORIGINS: List[str] = ["*"]

    # Receipt ids
    RECEIPT_ID_LENGTH: int = 21

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
