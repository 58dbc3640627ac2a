"""Tests for the conductor CLI commands."""

import json
import logging

import pytest

from conductor.__main__ import main


class TestResolveCommand:
    """Tests for `conductor resolve`."""

    @pytest.mark.unit
    def test_prints_json_widths(self, schema_file, capsys):
        assert main(["resolve", str(schema_file), "--width", "500"]) == 0
        assert json.loads(capsys.readouterr().out) == [100, 150, 150, 100]

    @pytest.mark.unit
    def test_table_format_marks_hidden(self, schema_file, capsys):
        assert main(["resolve", str(schema_file), "-w", "200", "-f", "table"]) == 0
        out = capsys.readouterr().out
        assert "b  hidden" in out
        assert "overflow" not in out

    @pytest.mark.unit
    def test_table_format_marks_overflow(self, schema_file, capsys):
        assert main(["resolve", str(schema_file), "-w", "10", "-f", "table"]) == 0
        assert "overflow" in capsys.readouterr().out

    @pytest.mark.unit
    def test_validate_flag_rejects_overflow(self, schema_file, capsys, caplog):
        with caplog.at_level(logging.ERROR):
            code = main(["resolve", str(schema_file), "-w", "10", "--validate"])
        assert code == 1
        assert capsys.readouterr().out == ""
        assert "overflow expected" in caplog.text

    @pytest.mark.unit
    def test_validate_from_environment(self, schema_file, monkeypatch):
        monkeypatch.setenv("CONDUCTOR_VALIDATE", "true")
        assert main(["resolve", str(schema_file), "-w", "10"]) == 1
        assert main(["resolve", str(schema_file), "-w", "10", "--no-validate"]) == 0

    @pytest.mark.unit
    def test_missing_file(self, tmp_path, caplog):
        with caplog.at_level(logging.ERROR):
            code = main(["resolve", str(tmp_path / "missing.json"), "-w", "100"])
        assert code == 1
        assert "Cannot read schema file" in caplog.text

    @pytest.mark.unit
    def test_malformed_schema_file(self, tmp_path, caplog):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps([{"key": "a", "minWidth": "wide"}]))
        with caplog.at_level(logging.ERROR):
            code = main(["resolve", str(path), "-w", "100"])
        assert code == 1
        assert "Invalid schema file" in caplog.text


    @pytest.mark.unit
    @pytest.mark.parametrize("width", ["-1", "nan", "inf"])
    def test_rejects_invalid_width(self, schema_file, capsys, caplog, width):
        """Content widths must be finite and non-negative."""
        with caplog.at_level(logging.ERROR):
            code = main(["resolve", str(schema_file), f"--width={width}"])
        assert code == 1
        assert capsys.readouterr().out == ""
        assert "non-negative width" in caplog.text


class TestSweepCommand:
    """Tests for `conductor sweep`."""

    @pytest.mark.unit
    def test_prints_row_per_width(self, schema_file, capsys):
        assert main(["sweep", str(schema_file), "--start", "100", "--stop", "500", "--step", "200"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert lines[0].split() == ["width", "a", "b", "c", "d"]
        assert [line.split()[0] for line in lines[1:]] == ["100", "300", "500"]
        assert lines[1].endswith("*")
        assert lines[3].split() == ["500", "100", "150", "150", "100"]

    @pytest.mark.unit
    def test_step_from_environment(self, schema_file, capsys, monkeypatch):
        monkeypatch.setenv("CONDUCTOR_SWEEP_STEP", "250")
        assert main(["sweep", str(schema_file), "--stop", "500"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 4

    @pytest.mark.unit
    def test_rejects_bad_range(self, schema_file):
        assert main(["sweep", str(schema_file), "--start", "10", "--stop", "5"]) == 1
        assert main(["sweep", str(schema_file), "--stop", "5", "--step", "0"]) == 1

    @pytest.mark.unit
    def test_fractional_step_includes_stop(self, schema_file, capsys):
        """Rounding in a float step never drops the inclusive stop row."""
        code = main(
            ["sweep", str(schema_file), "--start", "0", "--stop", "0.3", "--step", "0.1"]
        )
        assert code == 0
        lines = capsys.readouterr().out.splitlines()
        assert [line.split()[0] for line in lines[1:]] == ["0", "0.1", "0.2", "0.3"]

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "bounds",
        [
            ["--start=-10", "--stop", "100"],
            ["--stop=-1"],
            ["--stop", "nan"],
            ["--stop", "100", "--step", "inf"],
        ],
    )
    def test_rejects_invalid_widths(self, schema_file, capsys, caplog, bounds):
        with caplog.at_level(logging.ERROR):
            assert main(["sweep", str(schema_file), *bounds]) == 1
        assert capsys.readouterr().out == ""
        assert caplog.text


class TestValidateCommand:
    """Tests for `conductor validate`."""

    @pytest.mark.unit
    def test_valid(self, schema_file, capsys):
        assert main(["validate", str(schema_file), "-w", "500"]) == 0
        assert capsys.readouterr().out.startswith("OK: 4 schemas")

    @pytest.mark.unit
    def test_reports_issues(self, schema_file, capsys):
        assert main(["validate", str(schema_file), "-w", "10"]) == 1
        assert "min_width_overflow" in capsys.readouterr().out

    @pytest.mark.unit
    def test_rejects_negative_width(self, schema_file, caplog):
        with caplog.at_level(logging.ERROR):
            assert main(["validate", str(schema_file), "--width=-5"]) == 1
        assert "non-negative width" in caplog.text


class TestMiscCommands:
    """Tests for schema, env and help handling."""

    @pytest.mark.unit
    def test_schema(self, capsys):
        assert main(["schema"]) == 0
        schema = json.loads(capsys.readouterr().out)
        assert schema["type"] == "array"

    @pytest.mark.unit
    def test_env(self, capsys, monkeypatch):
        monkeypatch.setenv("CONDUCTOR_LOG_LEVEL", "WARNING")
        assert main(["env"]) == 0
        out = capsys.readouterr().out
        assert "CONDUCTOR_LOG_LEVEL=WARNING" in out
        assert "CONDUCTOR_VALIDATE=" in out

    @pytest.mark.unit
    def test_env_category(self, capsys):
        assert main(["env", "--category", "logging"]) == 0
        out = capsys.readouterr().out
        assert "CONDUCTOR_LOG_LEVEL" in out
        assert "CONDUCTOR_VALIDATE" not in out

    @pytest.mark.unit
    def test_no_arguments_prints_help(self, capsys):
        assert main([]) == 1
        assert "usage" in capsys.readouterr().out
