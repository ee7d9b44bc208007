# tests/unit/test_report_service_formats.py
import json
from pathlib import Path

import pytest

from linegroup.domain.errors import ConfigurationError
from linegroup.domain.models import ProcessResult
from linegroup.services.report_service import ReportService

RESULT = ProcessResult(1, [(0, ["A;1", "B;1"]), (2, ["C;2"]), (3, ["D;3"])])

EXPECTED_TXT = (
    "Number of groups with more than one element: 1\n"
    "\n"
    "Group 1\n"
    "A;1\n"
    "B;1\n"
    "\n"
    "Group 2\n"
    "C;2\n"
    "\n"
    "Group 3\n"
    "D;3\n"
    "\n"
)


def test_render_text_report():
    assert ReportService().render(RESULT) == EXPECTED_TXT


def test_render_empty_result():
    assert ReportService().render(ProcessResult(0, [])) == (
        "Number of groups with more than one element: 0\n\n"
    )


def test_write_txt_defaults_and_creates_parent_dirs(tmp_path: Path):
    out = tmp_path / "nested" / "out.txt"
    path = ReportService().write_report(out, RESULT)
    assert path == out
    assert out.read_bytes() == EXPECTED_TXT.encode("utf-8")


def test_write_json(tmp_path: Path):
    out = tmp_path / "out.json"
    ReportService().write_report(out, RESULT, fmt="JSON")
    payload = json.loads(out.read_text(encoding="utf-8"))
    assert payload == {
        "multi_group_count": 1,
        "groups": [["A;1", "B;1"], ["C;2"], ["D;3"]],
    }


def test_unknown_format_raises(tmp_path: Path):
    with pytest.raises(ConfigurationError):
        ReportService().write_report(tmp_path / "out.xml", RESULT, fmt="xml")
    assert not (tmp_path / "out.xml").exists()
