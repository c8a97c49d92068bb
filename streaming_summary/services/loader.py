"""Reads streaming history exports from disk"""
import glob
import json
import logging
import os
import re
from typing import Any, List

from streaming_summary.exceptions import MalformedInput

logger = logging.getLogger(__name__)

def load_history_file(path: str) -> List[Any]:
    """Parse one export file, which must hold a JSON array"""
    try:
        with open(path, 'r', encoding='utf-8-sig') as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON in {path}: {e}")
        raise MalformedInput(f"{os.path.basename(path)} is not valid JSON: {e.msg}", details={'path': path}) from e
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Could not read {path}: {e}")
        raise MalformedInput(f"Could not read {os.path.basename(path)}: {e}", details={'path': path}) from e

    if not isinstance(data, list):
        raise MalformedInput(
            f"{os.path.basename(path)} does not contain an array of plays",
            details={'path': path, 'type': type(data).__name__}
        )
    logger.info(f"Loaded {len(data)} records from {path}")
    return data

def _natural_key(path: str) -> list:
    # StreamingHistory2.json sorts before StreamingHistory10.json
    return [int(part) if part.isdigit() else part for part in re.split(r"(\d+)", path)]

def find_history_files(input_dir: str, pattern: str = "StreamingHistory*.json") -> List[str]:
    """Export files in input_dir, numbered parts in numeric order"""
    return sorted(glob.glob(os.path.join(input_dir, pattern)), key=_natural_key)

def load_history(input_dir: str, pattern: str = "StreamingHistory*.json") -> List[Any]:
    """
    Load and concatenate every export file in input_dir.

    Spotify splits long histories into StreamingHistory0.json,
    StreamingHistory1.json, ...; they are treated as one upload, so any
    malformed part rejects the whole batch.
    """
    files = find_history_files(input_dir, pattern)
    if not files:
        raise FileNotFoundError(f"No files matching {pattern} found in {input_dir}")

    records: List[Any] = []
    for file_path in files:
        records.extend(load_history_file(file_path))
    return records
