"""Tests for the plain-text ThreatSource adapter.

Threat files are written to ``tmp_path`` per test.
"""

from __future__ import annotations

import logging

import pytest

from domain.exploration.errors import InvalidThreatRecordError
from domain.exploration.repositories import ThreatSource
from domain.exploration.robot import Robot
from domain.exploration.value_objects import ThreatLocation
# Use infrastructure.* (not src.infrastructure.*) for consistency with domain.* imports.
from infrastructure.threats import TextThreatSource, parse_threat_line


def write_threats(tmp_path, content: str):
    path = tmp_path / "threats.txt"
    path.write_text(content, encoding="utf-8")
    return path


# ===========================================================================
# parse_threat_line
# ===========================================================================
def test_parse_threat_line_basic():
    assert parse_threat_line("3 4 bomb") == ThreatLocation(x=3, y=4, kind="bomb")


@pytest.mark.parametrize("line", ["3 4", "3 4 bomb extra", ""])
def test_parse_threat_line_wrong_token_count(line):
    with pytest.raises(InvalidThreatRecordError, match="expected"):
        parse_threat_line(line)


def test_parse_threat_line_non_integer_reports_line_number():
    with pytest.raises(InvalidThreatRecordError, match="line 7") as exc_info:
        parse_threat_line("x 4 bomb", line_number=7)

    assert exc_info.value.line_number == 7


# ===========================================================================
# TextThreatSource
# ===========================================================================
def test_load_threats_preserves_file_order(tmp_path):
    path = write_threats(tmp_path, "0 1 bomb\n2 2 mine\n0 1 mine\n")

    threats = TextThreatSource(path).load_threats()

    assert threats == (
        ThreatLocation(x=0, y=1, kind="bomb"),
        ThreatLocation(x=2, y=2, kind="mine"),
        ThreatLocation(x=0, y=1, kind="mine"),
    )


def test_load_threats_skips_blank_and_comment_lines(tmp_path):
    path = write_threats(tmp_path, "# field A\n\n   \n1 1 bomb\n  # trailing\n")

    threats = TextThreatSource(path).load_threats()

    assert threats == (ThreatLocation(x=1, y=1, kind="bomb"),)


def test_load_threats_empty_file(tmp_path):
    path = write_threats(tmp_path, "")

    assert TextThreatSource(path).load_threats() == ()


def test_load_threats_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        TextThreatSource(tmp_path / "nope.txt").load_threats()


def test_load_threats_malformed_line_number(tmp_path):
    path = write_threats(tmp_path, "1 1 bomb\n\n1 two bomb\n")

    with pytest.raises(InvalidThreatRecordError) as exc_info:
        TextThreatSource(path).load_threats()

    assert exc_info.value.line_number == 3


def test_load_threats_logs_count(tmp_path, caplog):
    path = write_threats(tmp_path, "1 1 bomb\n2 2 bomb\n")
    caplog.set_level(logging.INFO)

    TextThreatSource(path).load_threats()

    assert "Loaded 2 threat(s) from threats.txt" in caplog.text


def test_adapter_feeds_robot(tmp_path):
    path = write_threats(tmp_path, "0 1 bomb\n")
    source: ThreatSource = TextThreatSource(path)

    robot = Robot(source.load_threats(), "R2", "0 0 N", "FFRFF", 5, 5)
    robot.explore()

    assert robot.retrieve_results() == ("0 1 N", "Threat detected")
