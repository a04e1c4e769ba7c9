"""Fetch YouTube transcripts from a video ID or URL."""
from typing import Optional
from yt_transcript.core.errors import (
    CaptionsDisabledError,
    ErrorKind,
    IdentifierResolutionError,
    IpCheckError,
    LanguageNotAvailableError,
    NetworkError,
    TooManyRequestsError,
    TranscriptError,
    TranscriptsNotAvailableError,
    VideoUnavailableError,
)
from yt_transcript.models.request import RetrievalConfig
from yt_transcript.models.response import ErrorResponse, TranscriptResponse
from yt_transcript.models.transcript import Segment, Transcript
from yt_transcript.providers.ipcheck import check_ip_address
from yt_transcript.providers.youtube import YouTubeProvider

__version__ = "1.0.0"


def fetch_transcript(
    video: str,
    language: Optional[str] = None,
    proxy: Optional[str] = None,
    config: Optional[RetrievalConfig] = None,
) -> Transcript:
    """Fetch the transcript of ``video`` (an 11 character ID or any YouTube URL).

    ``language`` picks a caption track by exact language code, otherwise the
    video's default track is used. ``proxy`` routes every request through an
    HTTP(S) proxy. Unset values fall back to TRANSCRIPT_LANG and PROXY_URL.
    An explicit ``config`` is used as given.
    """
    if config is None:
        config = RetrievalConfig.from_settings(language=language, proxy=proxy)
    return YouTubeProvider().get_transcript(video, config)


__all__ = [
    "CaptionsDisabledError",
    "ErrorKind",
    "ErrorResponse",
    "IdentifierResolutionError",
    "IpCheckError",
    "LanguageNotAvailableError",
    "NetworkError",
    "RetrievalConfig",
    "Segment",
    "TooManyRequestsError",
    "Transcript",
    "TranscriptError",
    "TranscriptResponse",
    "TranscriptsNotAvailableError",
    "VideoUnavailableError",
    "YouTubeProvider",
    "check_ip_address",
    "fetch_transcript",
]
