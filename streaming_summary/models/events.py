"""Play event model for raw streaming history records"""
from pydantic import BaseModel, ConfigDict, Field

from streaming_summary.config import MIN_PLAY_MS, SONG_KEY_SEPARATOR

class PlayEvent(BaseModel):
    """
    One recorded play from a streaming history export.

    Export records look like {"trackName": ..., "artistName": ..., "msPlayed": ...};
    any other keys (endTime etc.) are ignored.
    """
    model_config = ConfigDict(populate_by_name=True, extra='ignore', frozen=True)

    track_name: str = Field(alias="trackName", strict=True, description="Track title")
    artist_name: str = Field(alias="artistName", strict=True, description="Artist name")
    ms_played: int = Field(alias="msPlayed", ge=0, strict=True, description="Elapsed play time in milliseconds")

    @property
    def song_key(self) -> str:
        """Identity used for de-duplication"""
        return f"{self.track_name}{SONG_KEY_SEPARATOR}{self.artist_name}"

    @property
    def qualifies(self) -> bool:
        return self.ms_played >= MIN_PLAY_MS
