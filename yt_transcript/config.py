from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional

class Settings(BaseSettings):
    # Retrieval defaults
    TRANSCRIPT_LANG: Optional[str] = None
    PROXY_URL: Optional[str] = None

    # Network
    IP_CHECK_URL: str = "https://checkip.amazonaws.com"
    CHECK_IP_BEFORE_FETCH: bool = True
    REQUEST_TIMEOUT: Optional[float] = None

    # System Settings
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

settings = Settings()
