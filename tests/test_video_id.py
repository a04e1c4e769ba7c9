import pytest
from yt_transcript.core.errors import ErrorKind, IdentifierResolutionError
from yt_transcript.providers.youtube import YouTubeProvider

provider = YouTubeProvider()


@pytest.mark.parametrize("value", ["dQw4w9WgXcQ", "not a video", "???????????", "12345678901"])
def test_eleven_characters_are_taken_as_is(value):
    assert provider.resolve_video_id(value) == value


@pytest.mark.parametrize("url", [
    "https://www.youtube.com/watch?v=dQw4w9WgXcQ",
    "https://youtube.com/watch?feature=share&v=dQw4w9WgXcQ",
    "https://www.youtube.com/embed/dQw4w9WgXcQ",
    "https://www.youtube.com/v/dQw4w9WgXcQ?version=3",
    "https://www.youtube.com/e/dQw4w9WgXcQ",
    "https://youtu.be/dQw4w9WgXcQ",
    "https://youtu.be/dQw4w9WgXcQ?t=42",
    "https://www.youtube.com/user/someone/dQw4w9WgXcQ",
    "HTTPS://WWW.YOUTUBE.COM/watch?v=dQw4w9WgXcQ",
])
def test_urls_resolve_to_id(url):
    assert provider.resolve_video_id(url) == "dQw4w9WgXcQ"


@pytest.mark.parametrize("value", ["nope", "https://vimeo.com/123456789", ""])
def test_unresolvable_input(value):
    with pytest.raises(IdentifierResolutionError) as exc:
        provider.resolve_video_id(value)
    assert exc.value.kind is ErrorKind.IDENTIFIER_RESOLUTION
    assert "Impossible to retrieve Youtube video ID" in str(exc.value)
    assert exc.value.http_status == 400
