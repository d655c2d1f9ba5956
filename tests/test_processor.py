"""Tests for the process entry point and the CLI wrapper."""
from __future__ import annotations

import logging
from pathlib import Path

import pandas as pd
import pytest

from cli.main import main
from common.errors import FormatError, SourceIOError
from engine.processor import process

DATA_DIR = Path(__file__).parent / "data"


class TestProcess:
    """Tests for process()."""

    def test_logs_one_line_per_asset(self, caplog):
        caplog.set_level(logging.INFO, logger="engine.processor")

        accounts = process(DATA_DIR / "good-test.csv")

        assert len(accounts) == 2
        asset_msgs = [r.getMessage() for r in caplog.records if r.getMessage().startswith("Account: ")]
        assert len(asset_msgs) == 4
        # Rendered lines are passed as arguments, never as format strings
        assert all(r.msg == "%s" for r in caplog.records if r.getMessage().startswith("Account: "))

    def test_reraises_and_logs_failure(self, caplog):
        caplog.set_level(logging.ERROR, logger="engine.processor")

        with pytest.raises(FormatError):
            process(DATA_DIR / "invalid-col-len.csv")

        assert any("unable to process the provided csv" in r.getMessage() for r in caplog.records)

    def test_missing_file(self):
        with pytest.raises(SourceIOError):
            process(DATA_DIR / "nofile.csv")


class TestCli:
    """Tests for the command line wrapper."""

    def test_success_exit_code(self):
        with pytest.raises(SystemExit) as exc_info:
            main(["--csvfile", str(DATA_DIR / "good-test.csv")])

        assert exc_info.value.code == 0

    @pytest.mark.parametrize("name", ["bad-test.csv", "invalid-col-len.csv", "nofile.csv"])
    def test_failure_exit_code(self, name):
        with pytest.raises(SystemExit) as exc_info:
            main(["--csvfile", str(DATA_DIR / name)])

        assert exc_info.value.code == 1

    def test_bad_schema_exit_code(self, tmp_path):
        schema = tmp_path / "schema.yaml"
        schema.write_text("columns:\n  ticker: 1\n", encoding="utf-8")

        with pytest.raises(SystemExit) as exc_info:
            main(["--csvfile", str(DATA_DIR / "good-test.csv"), "--schema", str(schema)])

        assert exc_info.value.code == 1

    def test_output_csv(self, tmp_path):
        out = tmp_path / "out.csv"

        with pytest.raises(SystemExit) as exc_info:
            main(["--csvfile", str(DATA_DIR / "good-test.csv"), "--output", str(out)])

        assert exc_info.value.code == 0
        df = pd.read_csv(out, dtype={"account_number": str})
        assert len(df) == 4
        assert set(df["account_number"]) == {"001", "002"}

    def test_unwritable_output_exit_code(self, tmp_path, caplog):
        out = tmp_path / "missing-dir" / "out.csv"
        caplog.set_level(logging.ERROR, logger="cli.main")

        with pytest.raises(SystemExit) as exc_info:
            main(["--csvfile", str(DATA_DIR / "good-test.csv"), "--output", str(out)])

        assert exc_info.value.code == 1
        assert not out.exists()
        assert any("unable to write" in r.getMessage() for r in caplog.records)

    def test_help(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--help"])

        assert exc_info.value.code == 0
        assert "--csvfile" in capsys.readouterr().out
