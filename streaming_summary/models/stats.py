"""Derived listening statistics"""
from dataclasses import dataclass
from typing import List

@dataclass(frozen=True)
class SongStat:
    """Cumulative listening time and play count for one track/artist pair"""
    song: str
    artist: str
    total_ms: int
    plays: int
    minutes: float

    @property
    def key(self) -> str:
        return f"{self.song} - {self.artist}"

@dataclass(frozen=True)
class ChartSlice:
    """One labelled slice of the artist chart"""
    label: str
    value: int

# Ordered top-N slices, optionally followed by the catch-all slice
ChartSeries = List[ChartSlice]
