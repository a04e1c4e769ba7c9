from abc import ABC, abstractmethod
from typing import Optional
from yt_transcript.models.request import RetrievalConfig
from yt_transcript.models.transcript import Transcript

class TranscriptSource(ABC):
    @abstractmethod
    def resolve_video_id(self, value: str) -> str:
        """Normalize a bare ID or URL into the platform's video ID."""
        pass

    @abstractmethod
    def get_transcript(self, video: str, config: Optional[RetrievalConfig] = None) -> Transcript:
        """Get video transcript."""
        pass
