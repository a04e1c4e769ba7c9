from typing import Optional
from pydantic import BaseModel, ConfigDict
from yt_transcript.config import settings

class RetrievalConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    language: Optional[str] = None
    proxy: Optional[str] = None

    @classmethod
    def from_settings(cls, language: Optional[str] = None, proxy: Optional[str] = None) -> "RetrievalConfig":
        """Explicit arguments win; unset ones fall back to TRANSCRIPT_LANG / PROXY_URL."""
        return cls(
            language=language or settings.TRANSCRIPT_LANG or None,
            proxy=proxy or settings.PROXY_URL or None,
        )
