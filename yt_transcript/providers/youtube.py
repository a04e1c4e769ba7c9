import re
import json
import requests
from typing import Optional
from pydantic import ValidationError
from yt_transcript.core.source import TranscriptSource
from yt_transcript.core.errors import (
    CaptionsDisabledError,
    IdentifierResolutionError,
    IpCheckError,
    LanguageNotAvailableError,
    NetworkError,
    TooManyRequestsError,
    TranscriptsNotAvailableError,
    VideoUnavailableError,
)
from yt_transcript.models.captions import CaptionManifest, CaptionTrack
from yt_transcript.models.request import RetrievalConfig
from yt_transcript.models.transcript import Transcript, Segment
from yt_transcript.providers.ipcheck import check_ip_address
from yt_transcript.utils.http import build_session, http_get
from yt_transcript.utils.logger import logger
from yt_transcript.config import settings

WATCH_URL = "https://www.youtube.com/watch?v={video_id}"

# Markers inside the watch page. The page layout is not a stable contract,
# keep every literal the extractor depends on here.
CAPTIONS_MARKER = '"captions":'
VIDEO_DETAILS_MARKER = ',"videoDetails'
RECAPTCHA_MARKER = 'class="g-recaptcha"'
PLAYABILITY_MARKER = '"playabilityStatus":'
TRACKLIST_KEY = "playerCaptionsTracklistRenderer"
CAPTION_TRACKS_KEY = "captionTracks"

VIDEO_ID_LENGTH = 11
RE_YOUTUBE = re.compile(
    r"(?:youtube\.com/(?:[^/]+/.+/|(?:v|e(?:mbed)?)/|.*[?&]v=)|youtu\.be/)([^\"&?/\s]{11})",
    re.IGNORECASE,
)
RE_XML_TRANSCRIPT = re.compile(r'<text start="([^"]*)" dur="([^"]*)">([^<]*)</text>')
RE_LEADING_NUMBER = re.compile(r"\s*([+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))")


class YouTubeProvider(TranscriptSource):
    def resolve_video_id(self, value: str) -> str:
        # Any 11 character string is taken as an ID without checking its alphabet.
        if len(value) == VIDEO_ID_LENGTH:
            return value
        m = RE_YOUTUBE.search(value)
        if m:
            return m.group(1)
        raise IdentifierResolutionError(value)

    def get_transcript(self, video: str, config: Optional[RetrievalConfig] = None) -> Transcript:
        config = config or RetrievalConfig()
        video_id = self.resolve_video_id(video)

        with build_session(config) as session:
            if settings.CHECK_IP_BEFORE_FETCH:
                self._log_ip_address(config.proxy)
            html = self.fetch_page(video_id, session)
            manifest = self.extract_manifest(html, video_id)
            track = self.select_track(manifest, config.language)
            payload = self.fetch_captions(track, video_id, session)

        language = config.language or manifest.default_track.language_code
        transcript = self.parse_transcript_xml(payload, video_id, language)
        logger.info(f"Fetched {len(transcript)} transcript segments for {video_id} ({language})")
        return transcript

    def _log_ip_address(self, proxy: Optional[str]):
        # Separate session: the echo service gets no Accept-Language header.
        try:
            ip = check_ip_address(proxy)
            logger.info(f"Current IP address: {ip}")
        except (IpCheckError, NetworkError) as e:
            logger.warning(f"Failed to check IP address: {e}")

    def fetch_page(self, video_id: str, session: requests.Session) -> str:
        logger.debug(f"Fetching watch page for {video_id}")
        resp = http_get(session, WATCH_URL.format(video_id=video_id))
        return resp.text

    def extract_manifest(self, html: str, video_id: str) -> CaptionManifest:
        parts = html.split(CAPTIONS_MARKER)
        if len(parts) < 2:
            if RECAPTCHA_MARKER in html:
                raise TooManyRequestsError(video_id)
            if PLAYABILITY_MARKER not in html:
                raise VideoUnavailableError(video_id)
            raise CaptionsDisabledError(video_id)

        fragment = parts[1].split(VIDEO_DETAILS_MARKER, 1)[0].replace("\n", "")
        try:
            captions = json.loads(fragment)
        except ValueError:
            captions = None

        tracklist = captions.get(TRACKLIST_KEY) if isinstance(captions, dict) else None
        if not isinstance(tracklist, dict):
            raise CaptionsDisabledError(video_id)
        if not tracklist.get(CAPTION_TRACKS_KEY):
            raise TranscriptsNotAvailableError(video_id)

        try:
            tracks = [CaptionTrack.model_validate(t) for t in tracklist[CAPTION_TRACKS_KEY]]
        except ValidationError as e:
            raise TranscriptsNotAvailableError(video_id) from e
        return CaptionManifest(video_id=video_id, caption_tracks=tracks)

    def select_track(self, manifest: CaptionManifest, language: Optional[str] = None) -> CaptionTrack:
        if not language:
            return manifest.default_track
        for track in manifest.caption_tracks:
            if track.language_code == language:
                return track
        raise LanguageNotAvailableError(language, manifest.available_languages, manifest.video_id)

    def fetch_captions(self, track: CaptionTrack, video_id: str, session: requests.Session) -> str:
        logger.debug(f"Fetching {track.language_code} captions for {video_id}")
        if not track.base_url:
            raise TranscriptsNotAvailableError(video_id)
        resp = http_get(session, track.base_url)
        if not resp.ok:
            raise TranscriptsNotAvailableError(video_id)
        return resp.text

    def parse_transcript_xml(self, content: str, video_id: str, lang: str) -> Transcript:
        # Text is kept as served, HTML entities included.
        segments = [
            Segment(text=text, offset=_to_float(start), duration=_to_float(dur), lang=lang)
            for start, dur, text in RE_XML_TRANSCRIPT.findall(content)
        ]
        return Transcript(video_id=video_id, language=lang, segments=segments)


def _to_float(value: str) -> float:
    """Read the leading number of ``value``; nan when there is none."""
    m = RE_LEADING_NUMBER.match(value)
    if not m:
        return float("nan")
    return float(m.group(1))
