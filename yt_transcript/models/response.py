from typing import List, Literal
from pydantic import BaseModel, ConfigDict, Field
from yt_transcript.core.errors import status_for_error
from yt_transcript.models.transcript import Transcript

class SegmentPayload(BaseModel):
    text: str
    duration: float
    offset: float
    lang: str

class TranscriptResponse(BaseModel):
    """Body a serving wrapper returns for a successful lookup."""
    model_config = ConfigDict(populate_by_name=True)

    success: Literal[True] = True
    video_id: str = Field(alias="videoId")
    transcript: List[SegmentPayload]
    segments: int

    @classmethod
    def from_transcript(cls, video_id: str, transcript: Transcript) -> "TranscriptResponse":
        payload = [SegmentPayload(**seg.model_dump()) for seg in transcript.segments]
        return cls(video_id=video_id, transcript=payload, segments=len(payload))

class ErrorResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: Literal[False] = False
    error: str
    video_id: str = Field(alias="videoId")
    status_code: int = Field(default=500, exclude=True)

    @classmethod
    def from_error(cls, video_id: str, error: Exception) -> "ErrorResponse":
        return cls(video_id=video_id, error=str(error), status_code=status_for_error(error))
