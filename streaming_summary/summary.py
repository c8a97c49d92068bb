"""Runs the filter and aggregation steps for one upload"""
import logging
from typing import Any, Optional

from streaming_summary.aggregation import ListeningAggregator
from streaming_summary.config import Settings
from streaming_summary.exceptions import MalformedInput
from streaming_summary.filtering import parse_play_events, unique_songs
from streaming_summary.models.summary import ChartPayload, SongStatEntry, SummaryResponse

logger = logging.getLogger(__name__)

class ListeningSummary:
    """Turns raw play records into the structures the presentation layer draws"""

    def __init__(self, settings: Settings):
        self.settings = settings
        self.aggregator = ListeningAggregator(
            top_n=settings.TOP_ARTISTS,
            other_label=settings.OTHER_LABEL
        )

    def generate(self, records: Any) -> SummaryResponse:
        """
        Process one upload.

        Raises MalformedInput before any aggregation happens if the records
        are not valid play events.
        """
        # Single validation boundary; later steps reuse the parsed events
        events = parse_play_events(records)

        unique = unique_songs(events)
        stats = self.aggregator.song_stats(events)
        series = self.aggregator.artist_chart(unique)
        percentages = self.aggregator.percentage_labels(series)
        frequency = self.aggregator.artist_frequency(unique)
        artist_total = len(frequency)

        response = SummaryResponse(
            valid=True,
            unique_song_count=len(unique),
            unique_songs=[song.model_dump(by_alias=True) for song in unique],
            song_stats=[
                SongStatEntry(
                    song=stat.song,
                    artist=stat.artist,
                    minutes=stat.minutes,
                    plays=stat.plays,
                    total_ms=stat.total_ms
                ) for stat in stats
            ],
            chart=ChartPayload(
                title=f"Top {self.settings.TOP_ARTISTS} Most Streamed Artists",
                labels=[s.label for s in series],
                values=[s.value for s in series],
                percentages=percentages
            ),
            artist_frequency=ChartPayload(
                title="Songs per Artist",
                labels=[s.label for s in frequency],
                values=[s.value for s in frequency],
                percentages=self.aggregator.percentage_labels(frequency)
            ),
            attributes={
                'total_records': len(events),
                'qualifying_plays': sum(stat.plays for stat in stats),
                'distinct_artists': artist_total
            }
        )
        logger.info(f"Summary ready: {response.unique_song_count} unique songs across {artist_total} artists")
        return response

class SummaryState:
    """
    Holds the summary currently on display.

    Each upload replaces the previous summary outright. A rejected upload
    leaves the previous summary in place and sets `error` for the user.
    """

    def __init__(self, summary: ListeningSummary):
        self.summary = summary
        self.current: Optional[SummaryResponse] = None
        self.error: Optional[str] = None

    def upload(self, records: Any) -> Optional[SummaryResponse]:
        """Process an upload and return whatever summary is now on display"""
        try:
            response = self.summary.generate(records)
        except MalformedInput as e:
            logger.error(f"Rejected upload: {e.message}")
            self.error = "Please upload a valid Spotify JSON file"
            return self.current

        self.current = response
        self.error = None
        return self.current

    def clear_error(self) -> None:
        self.error = None
