# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import io
import json
import logging
from datetime import datetime, timezone

from healthchecker.models import ProbeOutcome, ProbeStatus, load_batch
from healthchecker.report import JsonFileReporter, Reporter, TerminalReporter

STAMP = datetime(2025, 6, 1, 12, 30, 45, tzinfo=timezone.utc)


def _batch():
    return [
        ProbeOutcome(url="https://up.example", status=ProbeStatus.UP, status_code=200, response_time_ms=12, timestamp=STAMP),
        ProbeOutcome(
            url="https://down.example",
            status=ProbeStatus.DOWN,
            status_code=503,
            error="HTTP 503",
            response_time_ms=30,
            timestamp=STAMP,
        ),
        ProbeOutcome(url="https://gone.example", status=ProbeStatus.DOWN, error="DNS resolution failure", response_time_ms=4, timestamp=STAMP),
    ]


def test_terminal_reporter_plain_output():
    stream = io.StringIO()
    TerminalReporter(stream=stream, color=False).report(_batch())
    output = stream.getvalue()

    assert "Health Check Results" in output
    assert "=" * 60 in output
    assert "UP https://up.example [12 ms] - 2025-06-01 12:30:45 UTC" in output
    assert "DOWN https://down.example [30 ms]" in output
    assert " Error: HTTP 503" in output
    assert " Status Code: 503" in output
    assert " Error: DNS resolution failure" in output
    assert output.count("Status Code:") == 2
    assert "\033[" not in output


def test_terminal_reporter_color_output():
    stream = io.StringIO()
    TerminalReporter(stream=stream, color=True).report(_batch()[:2])
    output = stream.getvalue()
    assert "\033[1;32mUP\033[0m" in output
    assert "\033[1;31mDOWN\033[0m" in output


def test_terminal_reporter_color_detection(monkeypatch):
    monkeypatch.delenv("NO_COLOR", raising=False)
    assert TerminalReporter(stream=io.StringIO()).color is False

    class Tty(io.StringIO):
        def isatty(self):
            return True

    assert TerminalReporter(stream=Tty()).color is True
    monkeypatch.setenv("NO_COLOR", "1")
    assert TerminalReporter(stream=Tty()).color is False


def test_json_file_reporter_overwrites(tmp_path):
    path = tmp_path / "out.json"
    path.write_text("stale content that is longer than the new payload" * 100)
    stream = io.StringIO()
    reporter = JsonFileReporter(path, stream=stream)

    assert reporter.report(_batch()) is True
    assert load_batch(path.read_text()) == _batch()
    data = json.loads(path.read_text())
    assert data[2]["status_code"] is None
    assert data[0]["error"] is None
    assert f"Results saved to {path}" in stream.getvalue()

    assert reporter.report(_batch()[:1]) is True
    assert len(json.loads(path.read_text())) == 1


def test_json_file_reporter_logs_write_failures(tmp_path, caplog):
    path = tmp_path / "missing-dir" / "out.json"
    with caplog.at_level(logging.ERROR):
        assert JsonFileReporter(path, stream=io.StringIO()).report(_batch()) is False
    assert "Failed to save results" in caplog.text


def test_reporter_fans_out_to_both_sinks(tmp_path):
    stream = io.StringIO()
    path = tmp_path / "out.json"
    reporter = Reporter(TerminalReporter(stream=stream, color=False), JsonFileReporter(path, stream=stream))

    reporter.report(_batch())

    assert "Health Check Results" in stream.getvalue()
    assert len(json.loads(path.read_text())) == 3


def test_reporter_build_without_output_has_no_file_sink():
    assert Reporter.build(None).json_file is None
    assert Reporter.build("out.json").json_file is not None


def test_empty_output_path_reaches_file_sink(tmp_path, monkeypatch, caplog):
    monkeypatch.chdir(tmp_path)
    reporter = Reporter.build("")
    reporter.terminal = TerminalReporter(stream=io.StringIO(), color=False)

    assert reporter.json_file is not None
    with caplog.at_level(logging.ERROR):
        reporter.report(_batch())
    assert "Failed to save results" in caplog.text
