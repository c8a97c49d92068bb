"""Validation, short-play filtering and de-duplication of play events"""
import logging
from collections.abc import Mapping, Sequence
from typing import Any, List

from pydantic import ValidationError

from streaming_summary.exceptions import MalformedInput
from streaming_summary.models.events import PlayEvent

logger = logging.getLogger(__name__)

def parse_play_events(records: Any) -> List[PlayEvent]:
    """
    Validate a parsed export and return it as PlayEvent objects.

    Every record is checked before anything is returned, so a single bad
    record rejects the whole batch.
    """
    if isinstance(records, (str, bytes)) or not isinstance(records, Sequence):
        raise MalformedInput(
            f"Expected an array of play events, got {type(records).__name__}",
            details={'type': type(records).__name__}
        )

    events: List[PlayEvent] = []
    for index, record in enumerate(records):
        if isinstance(record, PlayEvent):
            events.append(record)
            continue
        if not isinstance(record, Mapping):
            raise MalformedInput(
                f"Record {index} is not an object: {record!r}",
                details={'index': index}
            )
        try:
            events.append(PlayEvent.model_validate(dict(record)))
        except ValidationError as e:
            raise MalformedInput(
                f"Record {index} is not a valid play event: {e.error_count()} error(s)",
                details={'index': index, 'errors': e.errors(include_url=False)}
            ) from e
    return events

def qualifying_plays(records: Any) -> List[PlayEvent]:
    """Return every play of at least 30 seconds, in input order"""
    return [event for event in parse_play_events(records) if event.qualifies]

def unique_songs(records: Any) -> List[PlayEvent]:
    """
    Collapse qualifying plays into unique songs.

    The first play seen for each track/artist pair is kept and later plays of
    the same pair are dropped, so output order follows first appearance.
    """
    events = parse_play_events(records)
    seen = set()
    unique: List[PlayEvent] = []
    qualifying_count = 0
    for event in events:
        if not event.qualifies:
            continue
        qualifying_count += 1
        if event.song_key in seen:
            continue
        seen.add(event.song_key)
        unique.append(event)

    logger.info(f"Filtered {len(events)} plays: {qualifying_count} qualifying, {len(unique)} unique songs")
    return unique
