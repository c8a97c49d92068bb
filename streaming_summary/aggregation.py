"""Song-level and artist-level aggregation of play events"""
import logging
from collections import Counter
from typing import Any, Dict, List, Sequence, Tuple

from streaming_summary.config import MS_PER_MINUTE
from streaming_summary.filtering import qualifying_plays
from streaming_summary.models.events import PlayEvent
from streaming_summary.models.stats import ChartSeries, ChartSlice, SongStat
from streaming_summary.utils.rounding import format_percentage, round_ratio

logger = logging.getLogger(__name__)

class ListeningAggregator:
    """Builds per-song totals and the top-artists chart series"""

    def __init__(self, top_n: int = 5, other_label: str = "Other"):
        if top_n < 1:
            raise ValueError("top_n must be at least 1")
        self.top_n = top_n
        self.other_label = other_label

    def song_stats(self, records: Any) -> List[SongStat]:
        """
        Total play time and play count per track/artist pair.

        Uses every qualifying play, not the de-duplicated songs, so repeated
        listens add up. Results come back in first-seen order but callers
        should sort for display themselves.
        """
        # (song, artist) -> [total_ms, plays]
        totals: Dict[Tuple[str, str], List[int]] = {}
        for event in qualifying_plays(records):
            tally = totals.setdefault((event.track_name, event.artist_name), [0, 0])
            tally[0] += event.ms_played
            tally[1] += 1

        stats = [
            SongStat(
                song=song,
                artist=artist,
                total_ms=total_ms,
                plays=plays,
                minutes=round_ratio(total_ms, MS_PER_MINUTE)
            ) for (song, artist), (total_ms, plays) in totals.items()
        ]
        logger.info(f"Aggregated {len(stats)} songs from qualifying plays")
        return stats

    def artist_counts(self, unique: Sequence[PlayEvent]) -> Dict[str, int]:
        """Number of unique songs per artist, keyed in first-seen order"""
        return dict(Counter(song.artist_name for song in unique))

    def artist_frequency(self, unique: Sequence[PlayEvent]) -> ChartSeries:
        """Every artist with its unique song count, in first-seen order, no cutoff"""
        return [ChartSlice(label=artist, value=count) for artist, count in self.artist_counts(unique).items()]

    def artist_chart(self, unique: Sequence[PlayEvent]) -> ChartSeries:
        """
        Top artists by unique song count plus a catch-all slice.

        Equal counts keep the order in which the artists first appear in
        `unique`. The catch-all slice is only added when it is non-empty.
        """
        ranked = Counter(self.artist_counts(unique)).most_common()
        series: ChartSeries = [ChartSlice(label=artist, value=count) for artist, count in ranked[:self.top_n]]

        other_count = sum(count for _, count in ranked[self.top_n:])
        if other_count > 0:
            series.append(ChartSlice(label=self.other_label, value=other_count))
        return series

    def percentage_labels(self, series: ChartSeries) -> List[str]:
        """Each slice's share of the series total, e.g. ['62.5%', '37.5%']"""
        total = sum(s.value for s in series)
        return [format_percentage(s.value, total) for s in series]
