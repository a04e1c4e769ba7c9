from typing import Iterator, List
from pydantic import BaseModel, ConfigDict

class Segment(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str
    offset: float
    duration: float
    lang: str

    @property
    def end(self) -> float:
        return self.offset + self.duration

class Transcript(BaseModel):
    model_config = ConfigDict(frozen=True)

    video_id: str
    language: str
    segments: List[Segment]

    def __len__(self) -> int:
        return len(self.segments)

    def __iter__(self) -> Iterator[Segment]:
        return iter(self.segments)
