from __future__ import annotations

import json
from datetime import datetime, timezone

import pytest

import event_log
from sudoku_generator import generate


@pytest.fixture(scope="module")
def result():
    return generate("easy", seed=12)


def test_make_record_fields(result):
    record = event_log.make_record(result, elapsed_ms=17)
    assert record["event"] == event_log.EVENT_NAME
    assert record["difficulty"] == "easy"
    assert record["seed"] == 12
    assert record["clues"] == result.clues
    assert record["time_ms"] == 17
    assert record["puzzle"] == result.puzzle.to_string()
    assert "solved" not in record
    assert event_log.make_record(result, elapsed_ms=0, solved=False)["solved"] is False


def test_append_event_writes_to_todays_file(tmp_path, result):
    base = tmp_path / "events"
    path = event_log.append_event(base, result, elapsed_ms=5, solved=True)
    event_log.append_event(base, result, elapsed_ms=6)
    assert path == event_log.log_path(base)
    lines = path.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 2
    first = json.loads(lines[0])
    assert first["solved"] is True
    assert first["time_ms"] == 5
    assert "ts" in first


def test_log_path_is_named_after_the_utc_day(tmp_path):
    when = datetime(2026, 3, 9, 23, 59, tzinfo=timezone.utc)
    assert event_log.log_path(tmp_path, when) == tmp_path / "generation-20260309.jsonl"


def test_iter_events_reads_days_in_order(tmp_path):
    later = event_log.log_path(tmp_path, datetime(2026, 3, 10, tzinfo=timezone.utc))
    earlier = event_log.log_path(tmp_path, datetime(2026, 3, 9, tzinfo=timezone.utc))
    later.write_text('{"clues": 3}\n\n', encoding="utf-8")
    earlier.write_text('{"clues": 1}\n{"clues": 2}\n', encoding="utf-8")
    (tmp_path / "notes.txt").write_text("ignored\n", encoding="utf-8")
    assert [e["clues"] for e in event_log.iter_events(tmp_path)] == [1, 2, 3]


def test_iter_events_on_missing_directory(tmp_path):
    assert list(event_log.iter_events(tmp_path / "missing")) == []
