import json

from openpyxl import load_workbook

from moodjournal.__main__ import load_entries, main


def test_load_entries_accepts_paginated_payload(tmp_path):
    path = tmp_path / "entries.json"
    path.write_text(json.dumps({"journals": [{"mood": "happy"}, "junk"]}), encoding="utf-8")
    assert load_entries(str(path)) == [{"mood": "happy"}]


def test_main_prints_summary(tmp_path, capsys):
    path = tmp_path / "entries.json"
    path.write_text("[]", encoding="utf-8")
    assert main([str(path), "--week", "previous"]) == 0
    assert "no entries this week" in capsys.readouterr().out


def test_main_writes_excel(tmp_path):
    path = tmp_path / "entries.json"
    path.write_text("[]", encoding="utf-8")
    out = tmp_path / "week.xlsx"
    assert main([str(path), "--xlsx", str(out)]) == 0
    assert load_workbook(out).active["A2"].value == "Mon"


def test_main_reports_unreadable_file(tmp_path):
    assert main([str(tmp_path / "missing.json")]) == 1
    bad = tmp_path / "bad.json"
    bad.write_text("{not json", encoding="utf-8")
    assert main([str(bad)]) == 1


def test_main_prints_entry_counts(tmp_path, capsys):
    path = tmp_path / "entries.json"
    entries = [
        {"createdAt": "2020-01-01T10:00:00", "mood": "happy", "category": "personal"},
        {"createdAt": "2020-01-02T10:00:00", "mood": "sad", "category": "professional"},
    ]
    path.write_text(json.dumps(entries), encoding="utf-8")
    assert main([str(path)]) == 0
    assert "All entries: 1 professional, 1 personal, 2 with a mood" in capsys.readouterr().out


def test_main_falls_back_to_markdown_when_excel_fails(tmp_path, capsys, monkeypatch):
    monkeypatch.setattr("moodjournal.__main__.weekly_mood_to_excel", lambda data: None)
    path = tmp_path / "entries.json"
    path.write_text("[]", encoding="utf-8")
    out = tmp_path / "week.xlsx"
    assert main([str(path), "--xlsx", str(out)]) == 0
    assert "| Day | Professional | Personal |" in capsys.readouterr().out
    assert not out.exists()
