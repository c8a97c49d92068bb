"""
Tests for reading export files from disk.
"""

import json

import pytest

from streaming_summary.exceptions import MalformedInput
from streaming_summary.services.loader import find_history_files, load_history, load_history_file


def write_json(path, data):
    path.write_text(json.dumps(data), encoding="utf-8")
    return str(path)


def test_load_history_file(tmp_path):
    data = [{"endTime": "2023-01-01 10:00", "trackName": "A", "artistName": "X", "msPlayed": 40000}]
    assert load_history_file(write_json(tmp_path / "StreamingHistory0.json", data)) == data


def test_invalid_json_rejected(tmp_path):
    path = tmp_path / "StreamingHistory0.json"
    path.write_text("[{not json", encoding="utf-8")

    with pytest.raises(MalformedInput) as exc:
        load_history_file(str(path))
    assert exc.value.details["path"] == str(path)


def test_non_array_rejected(tmp_path):
    path = write_json(tmp_path / "StreamingHistory0.json", {"trackName": "A"})
    with pytest.raises(MalformedInput):
        load_history_file(path)


def test_missing_file_rejected(tmp_path):
    with pytest.raises(MalformedInput):
        load_history_file(str(tmp_path / "missing.json"))


def test_files_in_numeric_order(tmp_path):
    for i in (10, 2, 0, 1):
        write_json(tmp_path / f"StreamingHistory{i}.json", [])
    write_json(tmp_path / "Userdata.json", {})

    names = [p.rsplit("/", 1)[-1] for p in find_history_files(str(tmp_path))]
    assert names == [
        "StreamingHistory0.json",
        "StreamingHistory1.json",
        "StreamingHistory2.json",
        "StreamingHistory10.json",
    ]


def test_load_history_concatenates(tmp_path):
    write_json(tmp_path / "StreamingHistory1.json", [{"trackName": "B", "artistName": "Y", "msPlayed": 40000}])
    write_json(tmp_path / "StreamingHistory0.json", [{"trackName": "A", "artistName": "X", "msPlayed": 40000}])

    records = load_history(str(tmp_path))
    assert [r["trackName"] for r in records] == ["A", "B"]


def test_load_history_rejects_batch_with_bad_part(tmp_path):
    write_json(tmp_path / "StreamingHistory0.json", [{"trackName": "A", "artistName": "X", "msPlayed": 40000}])
    (tmp_path / "StreamingHistory1.json").write_text("garbage", encoding="utf-8")

    with pytest.raises(MalformedInput):
        load_history(str(tmp_path))


def test_load_history_no_files(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_history(str(tmp_path))


def test_byte_order_mark_accepted(tmp_path):
    path = tmp_path / "StreamingHistory0.json"
    path.write_bytes(b"\xef\xbb\xbf" + json.dumps([{"trackName": "A", "artistName": "X", "msPlayed": 40000}]).encode("utf-8"))

    assert load_history_file(str(path))[0]["trackName"] == "A"
