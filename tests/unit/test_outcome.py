# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import dataclasses
import json
from datetime import datetime, timezone

import pytest

from healthchecker.models import ProbeOutcome, ProbeStatus, dump_batch, load_batch


def test_up_outcome_creation():
    outcome = ProbeOutcome.up("https://example.com", 200, 100)

    assert outcome.url == "https://example.com"
    assert outcome.status is ProbeStatus.UP
    assert outcome.status_code == 200
    assert outcome.response_time_ms == 100
    assert outcome.error is None
    assert outcome.is_up
    assert outcome.timestamp.tzinfo is not None


def test_down_outcome_without_response():
    outcome = ProbeOutcome.down("https://example.com", "Connection failed", 500)

    assert outcome.status is ProbeStatus.DOWN
    assert outcome.status_code is None
    assert outcome.error == "Connection failed"
    assert not outcome.is_up


def test_down_outcome_keeps_http_status_code():
    outcome = ProbeOutcome.down("https://example.com", "HTTP 503", 12, status_code=503)
    assert outcome.status_code == 503
    assert outcome.error == "HTTP 503"


def test_outcome_is_immutable():
    outcome = ProbeOutcome.up("https://example.com", 204, 1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        outcome.status = ProbeStatus.DOWN  # type: ignore[misc]


@pytest.mark.parametrize(
    "kwargs",
    [
        {"status": ProbeStatus.UP, "status_code": None},
        {"status": ProbeStatus.UP, "status_code": 301},
        {"status": ProbeStatus.UP, "status_code": 200, "error": "nope"},
        {"status": ProbeStatus.DOWN, "status_code": None, "error": None},
        {"status": ProbeStatus.DOWN, "status_code": 200, "error": "HTTP 200"},
        {"status": ProbeStatus.DOWN, "status_code": 700, "error": "HTTP 700"},
        {"status": ProbeStatus.DOWN, "error": "x", "response_time_ms": -1},
    ],
)
def test_outcome_rejects_invariant_violations(kwargs):
    params = {"url": "http://x", "response_time_ms": 0}
    params.update(kwargs)
    with pytest.raises(ValueError):
        ProbeOutcome(**params)


def test_outcome_rejects_naive_timestamp():
    with pytest.raises(ValueError):
        ProbeOutcome(url="http://x", status=ProbeStatus.UP, status_code=200, response_time_ms=0, timestamp=datetime(2025, 1, 1))


def test_status_accepts_plain_string():
    outcome = ProbeOutcome(url="http://x", status="DOWN", response_time_ms=3, error="boom")
    assert outcome.status is ProbeStatus.DOWN


def test_to_dict_includes_null_fields():
    stamp = datetime(2025, 3, 4, 5, 6, 7, tzinfo=timezone.utc)
    outcome = ProbeOutcome(url="http://x", status=ProbeStatus.UP, status_code=200, response_time_ms=42, timestamp=stamp)

    assert outcome.to_dict() == {
        "url": "http://x",
        "status": "UP",
        "status_code": 200,
        "response_time_ms": 42,
        "timestamp": "2025-03-04T05:06:07+00:00",
        "error": None,
    }
    assert outcome.display_timestamp == "2025-03-04 05:06:07 UTC"


def test_batch_json_round_trip():
    batch = [
        ProbeOutcome.up("https://a.example", 200, 15),
        ProbeOutcome.down("https://b.example", "HTTP 404", 20, status_code=404),
        ProbeOutcome.down("https://c.example", "DNS resolution failure", 3),
        ProbeOutcome.up("https://a.example", 299, 0),
    ]
    text = dump_batch(batch)

    assert text.startswith("[\n  {")
    assert load_batch(text) == batch


def test_dump_empty_batch():
    assert json.loads(dump_batch([])) == []


def test_from_mapping_accepts_zulu_timestamp():
    outcome = ProbeOutcome.from_mapping(
        {
            "url": "http://x",
            "status": "down",
            "status_code": None,
            "response_time_ms": 7,
            "timestamp": "2025-03-04T05:06:07Z",
            "error": "timeout",
        }
    )
    assert outcome.status is ProbeStatus.DOWN
    assert outcome.timestamp == datetime(2025, 3, 4, 5, 6, 7, tzinfo=timezone.utc)


def test_load_batch_requires_array():
    with pytest.raises(ValueError):
        load_batch('{"url": "http://x"}')
