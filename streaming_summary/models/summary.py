"""SummaryResponse model definition"""
from typing import Dict, List, Any
from pydantic import BaseModel, Field

class SongStatEntry(BaseModel):
    """Per-song totals as handed to the presentation layer"""
    song: str = Field(description="Track title")
    artist: str = Field(description="Artist name")
    minutes: float = Field(description="Total minutes played, one decimal")
    plays: int = Field(description="Number of qualifying plays")
    total_ms: int = Field(description="Total milliseconds played")

class ChartPayload(BaseModel):
    """Artist chart series with its derived percentage labels"""
    title: str = Field(description="Chart title")
    labels: List[str] = Field(default_factory=list, description="Slice labels in display order")
    values: List[int] = Field(default_factory=list, description="Unique song count per slice")
    percentages: List[str] = Field(default_factory=list, description="Share of the series total, e.g. '12.5%'")

class SummaryResponse(BaseModel):
    """
    Represents one processed upload.

    Attributes:
        valid: True for every generated summary; a rejected upload raises
            MalformedInput instead of producing a response
        unique_song_count: Number of unique qualifying songs
        unique_songs: First-seen qualifying plays, in export shape
        song_stats: Per-song totals across all qualifying plays
        chart: Top artists by unique song count
        artist_frequency: Unique song count for every artist, first seen first
        attributes: Extra counters about the processed batch
    """
    valid: bool = False
    unique_song_count: int = 0
    unique_songs: List[Dict[str, Any]] = Field(default_factory=list)
    song_stats: List[SongStatEntry] = Field(default_factory=list)
    chart: ChartPayload = Field(default_factory=lambda: ChartPayload(title=""))
    artist_frequency: ChartPayload = Field(default_factory=lambda: ChartPayload(title=""))
    attributes: Dict[str, Any] = Field(default_factory=dict)
