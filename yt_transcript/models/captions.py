from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field

class CaptionTrack(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    language_code: str = Field(alias="languageCode")
    base_url: Optional[str] = Field(default=None, alias="baseUrl")

class CaptionManifest(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    video_id: str
    caption_tracks: List[CaptionTrack] = Field(alias="captionTracks")

    @property
    def available_languages(self) -> List[str]:
        return [track.language_code for track in self.caption_tracks]

    @property
    def default_track(self) -> Optional[CaptionTrack]:
        """The platform lists its default track first."""
        return self.caption_tracks[0] if self.caption_tracks else None
