from enum import Enum
from typing import List, Optional


class ErrorKind(str, Enum):
    IDENTIFIER_RESOLUTION = "identifier_resolution"
    TOO_MANY_REQUESTS = "too_many_requests"
    VIDEO_UNAVAILABLE = "video_unavailable"
    CAPTIONS_DISABLED = "captions_disabled"
    TRANSCRIPTS_NOT_AVAILABLE = "transcripts_not_available"
    LANGUAGE_NOT_AVAILABLE = "language_not_available"
    NETWORK = "network"
    IP_CHECK = "ip_check"


# Status class a serving wrapper answers with; anything not listed is a 500.
HTTP_STATUS = {
    ErrorKind.IDENTIFIER_RESOLUTION: 400,
    ErrorKind.CAPTIONS_DISABLED: 404,
    ErrorKind.TRANSCRIPTS_NOT_AVAILABLE: 404,
    ErrorKind.LANGUAGE_NOT_AVAILABLE: 404,
}

MESSAGE_PREFIX = "[YoutubeTranscript] "


class TranscriptError(Exception):
    """Base for every failure the transcript pipeline can end with.

    Callers can either catch the concrete subclass or switch on ``kind``.
    """

    kind: ErrorKind

    def __init__(self, message: str, video_id: Optional[str] = None):
        super().__init__(f"{MESSAGE_PREFIX}{message}")
        self.video_id = video_id

    @property
    def http_status(self) -> int:
        return HTTP_STATUS.get(self.kind, 500)


class IdentifierResolutionError(TranscriptError):
    kind = ErrorKind.IDENTIFIER_RESOLUTION

    def __init__(self, value: str):
        super().__init__("Impossible to retrieve Youtube video ID.")
        self.value = value


class TooManyRequestsError(TranscriptError):
    kind = ErrorKind.TOO_MANY_REQUESTS

    def __init__(self, video_id: Optional[str] = None):
        super().__init__(
            "YouTube is receiving too many requests from this IP and now requires "
            "solving a captcha to continue",
            video_id,
        )


class VideoUnavailableError(TranscriptError):
    kind = ErrorKind.VIDEO_UNAVAILABLE

    def __init__(self, video_id: str):
        super().__init__(f"The video is no longer available ({video_id})", video_id)


class CaptionsDisabledError(TranscriptError):
    kind = ErrorKind.CAPTIONS_DISABLED

    def __init__(self, video_id: str):
        super().__init__(f"Transcript is disabled on this video ({video_id})", video_id)


class TranscriptsNotAvailableError(TranscriptError):
    kind = ErrorKind.TRANSCRIPTS_NOT_AVAILABLE

    def __init__(self, video_id: str):
        super().__init__(f"No transcripts are available for this video ({video_id})", video_id)


class LanguageNotAvailableError(TranscriptError):
    kind = ErrorKind.LANGUAGE_NOT_AVAILABLE

    def __init__(self, language: str, available_languages: List[str], video_id: str):
        super().__init__(
            f"No transcripts are available in {language} this video ({video_id}). "
            f"Available languages: {', '.join(available_languages)}",
            video_id,
        )
        self.language = language
        self.available_languages = list(available_languages)


class NetworkError(TranscriptError):
    kind = ErrorKind.NETWORK

    def __init__(self, message: str, url: Optional[str] = None):
        super().__init__(message)
        self.url = url


class IpCheckError(TranscriptError):
    kind = ErrorKind.IP_CHECK

    def __init__(self, status: str):
        super().__init__(f"Failed to check IP address: {status}")
        self.status = status


def status_for_error(error: Exception) -> int:
    if isinstance(error, TranscriptError):
        return error.http_status
    return 500
