"""Typer entry point: env read, fetch, display, exit codes."""

from unittest.mock import patch

import pandas as pd
import pytest
from typer.testing import CliRunner

from solar_resource import cli, config
from solar_resource.errors import ContentTypeMismatch, HTTPFailure, MalformedPayload
from solar_resource.prepare import build_monthly_table, parse_monthly_outputs
from tests.conftest import make_payload

runner = CliRunner()


@pytest.fixture(autouse=True)
def env(monkeypatch):
    monkeypatch.setattr(config, "load_dotenv", lambda *a, **k: False)
    monkeypatch.delenv("NREL_BASE_URL", raising=False)
    monkeypatch.setenv("NREL_API_KEY", "abcd1234efgh")


@pytest.fixture
def table() -> pd.DataFrame:
    return build_monthly_table(parse_monthly_outputs(make_payload()))


class TestFetchCommand:
    def test_prints_table_and_report(self, table):
        with patch.object(cli, "fetch_solar_table", return_value=table) as fetch:
            result = runner.invoke(cli.app, ["fetch", "--lat", "40", "--lon=-105"])

        assert result.exit_code == 0, result.output
        assert "Jan" in result.output and "Dec" in result.output
        assert "Validation Report: PASS" in result.output

        args, kwargs = fetch.call_args
        assert args == (
            config.DEFAULT_ENDPOINT,
            {"api_key": "abcd1234efgh", "lat": 40.0, "lon": -105.0},
        )
        assert kwargs == {"base_url": config.DEFAULT_BASE_URL, "timeout": None}

    def test_writes_csv(self, table, tmp_path):
        out = tmp_path / "nested" / "table.csv"
        with patch.object(cli, "fetch_solar_table", return_value=table):
            result = runner.invoke(
                cli.app, ["fetch", "--lat", "40", "--lon=-105", "--output", str(out)]
            )

        assert result.exit_code == 0, result.output
        assert "Saved table to" in result.output
        pd.testing.assert_frame_equal(pd.read_csv(out), table)

    @pytest.mark.parametrize("error", [
        HTTPFailure(404, "Not Found"),
        ContentTypeMismatch("text/html"),
        MalformedPayload("missing or not an object", "outputs"),
    ])
    def test_fetch_errors_exit_1(self, error):
        with patch.object(cli, "fetch_solar_table", side_effect=error):
            result = runner.invoke(cli.app, ["fetch", "--lat", "40", "--lon=-105"])

        assert result.exit_code == 1
        assert "[nrel]" in result.output

    def test_missing_key_exits_1(self, monkeypatch):
        monkeypatch.delenv("NREL_API_KEY")
        with patch.object(cli, "fetch_solar_table") as fetch:
            result = runner.invoke(cli.app, ["fetch", "--lat", "40", "--lon=-105"])

        assert result.exit_code == 1
        assert "NREL_API_KEY" in result.output
        fetch.assert_not_called()
