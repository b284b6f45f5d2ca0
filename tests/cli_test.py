"""Command-line interface."""

import json

import pytest

from main import main
from resume_scoring import analyze


def test_cli_json_output(capsys):
    main(["--text", "Skills: Python and SQL.", "--json"])
    data = json.loads(capsys.readouterr().out)
    assert data == analyze("Skills: Python and SQL.").to_dict()


def test_cli_summary_from_file(tmp_path, capsys):
    path = tmp_path / "resume.txt"
    path.write_text("Experience\n- Developed Python services in 2020.\n", encoding="utf-8")
    main([str(path)])
    out = capsys.readouterr().out
    assert "Overall score:" in out
    assert "python" in out


def test_cli_writes_reports(tmp_path, capsys):
    main(["--text", "Summary. Led teams.", "--report-dir", str(tmp_path), "--pdf", str(tmp_path / "r.pdf")])
    reports = list(tmp_path.glob("run_report_*.json"))
    assert len(reports) == 1
    assert (tmp_path / "r.pdf").read_bytes().startswith(b"%PDF")


def test_cli_without_input_exits(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main([])
    assert exc_info.value.code == 1
    assert "Error" in capsys.readouterr().err


def test_cli_missing_file_exits(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc_info:
        main([str(tmp_path / "missing.pdf")])
    assert exc_info.value.code == 1


def test_cli_alternate_keywords(tmp_path, capsys):
    path = tmp_path / "keywords.json"
    path.write_text(json.dumps({"version": "trades", "categories": {"tools": ["hammer"]}}), encoding="utf-8")
    main(["--text", "Hammer work.", "--json", "--keywords", str(path)])
    assert json.loads(capsys.readouterr().out)["matched_keywords"] == ["hammer"]


def test_cli_summary_groups_keywords_by_category(tmp_path, capsys):
    path = tmp_path / "resume.txt"
    path.write_text("Experience\n- Developed Python services in 2020.\n", encoding="utf-8")
    main([str(path)])
    out = capsys.readouterr().out
    assert "Keywords found (2):" in out
    assert "technical: python" in out
    assert "action_verb: developed" in out
