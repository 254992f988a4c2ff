"""
Tests for the quiztext command line
"""

import json

import pandas as pd

from quiztext.cli import run_cli


class TestRunCli:
    def test_run_when_no_output_then_json_on_stdout(self, sample_file, capsys):
        assert run_cli([str(sample_file)]) == 0
        data = json.loads(capsys.readouterr().out)
        assert [item["kind"] for item in data] == ["radio", "checkbox", "range"]

    def test_run_when_output_then_json_file(self, sample_file, tmp_path, capsys):
        output = tmp_path / "out.json"
        assert run_cli([str(sample_file), "-o", str(output), "--indent", "0"]) == 0
        assert "Wrote 3 question(s)" in capsys.readouterr().out
        assert len(json.loads(output.read_text(encoding="utf-8"))) == 3

    def test_run_when_xlsx_then_workbook_next_to_input(self, sample_file):
        assert run_cli([str(sample_file), "--format", "xlsx"]) == 0
        df = pd.read_excel(sample_file.with_suffix(".xlsx"))
        assert len(df) == 3

    def test_run_when_malformed_then_error_exit(self, tmp_path, capsys):
        path = tmp_path / "bad.txt"
        path.write_text("Question?\n() a\n[] b\n", encoding="utf-8")
        assert run_cli([str(path)]) == 1
        assert "block 1, line 3" in capsys.readouterr().err

    def test_run_when_missing_file_then_error_exit(self, tmp_path, capsys):
        assert run_cli([str(tmp_path / "missing.txt")]) == 1
        assert "not found" in capsys.readouterr().err

    def test_run_when_comma_separator_then_captions_split(self, tmp_path, capsys):
        path = tmp_path / "scale.txt"
        path.write_text("Rate it\n{1-3} low, high\n", encoding="utf-8")
        assert run_cli([str(path), "--separator", ","]) == 0
        assert json.loads(capsys.readouterr().out)[0]["rightText"] == "high"
