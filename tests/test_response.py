import pytest
from yt_transcript.core.errors import (
    CaptionsDisabledError,
    IdentifierResolutionError,
    IpCheckError,
    LanguageNotAvailableError,
    NetworkError,
    TooManyRequestsError,
    TranscriptsNotAvailableError,
    VideoUnavailableError,
    status_for_error,
)
from yt_transcript.models.response import ErrorResponse, TranscriptResponse
from yt_transcript.models.transcript import Segment, Transcript


def test_transcript_body():
    transcript = Transcript(video_id="dQw4w9WgXcQ", language="en", segments=[
        Segment(text="Hello", offset=0.5, duration=2.3, lang="en"),
        Segment(text="World", offset=2.8, duration=1.1, lang="en"),
    ])
    body = TranscriptResponse.from_transcript("https://youtu.be/dQw4w9WgXcQ", transcript).model_dump(by_alias=True)
    assert body == {
        "success": True,
        "videoId": "https://youtu.be/dQw4w9WgXcQ",
        "transcript": [
            {"text": "Hello", "duration": 2.3, "offset": 0.5, "lang": "en"},
            {"text": "World", "duration": 1.1, "offset": 2.8, "lang": "en"},
        ],
        "segments": 2,
    }


@pytest.mark.parametrize("error, status", [
    (IdentifierResolutionError("x"), 400),
    (CaptionsDisabledError("abc"), 404),
    (TranscriptsNotAvailableError("abc"), 404),
    (TooManyRequestsError("abc"), 500),
    (VideoUnavailableError("abc"), 500),
    (LanguageNotAvailableError("de", ["en"], "abc"), 404),
    (NetworkError("boom"), 500),
    (IpCheckError("Bad Gateway"), 500),
    (RuntimeError("unexpected"), 500),
])
def test_status_mapping(error, status):
    assert status_for_error(error) == status


def test_error_body_passes_message_through():
    error = TranscriptsNotAvailableError("abc")
    response = ErrorResponse.from_error("abc", error)
    assert response.status_code == 404
    assert response.model_dump(by_alias=True) == {
        "success": False,
        "error": "[YoutubeTranscript] No transcripts are available for this video (abc)",
        "videoId": "abc",
    }
