#!filepath: tests/test_cli.py
from typer.testing import CliRunner

from datekit import __version__
from datekit.cli import app

runner = CliRunner()


def test_version():
    result = runner.invoke(app, ["version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_rfc2822():
    result = runner.invoke(app, ["rfc2822", "Tue, 26 Jan 2016 13:48:02 GMT"])
    assert result.exit_code == 0
    assert "2016-01-26T13:48:02.000Z" in result.output


def test_rfc2822_invalid_exits_1():
    result = runner.invoke(app, ["rfc2822", "not-a-date"])
    assert result.exit_code == 1
    assert "Not a date" in result.output
    assert "Traceback" not in result.output


def test_iso8601_normalizes_to_utc():
    result = runner.invoke(app, ["iso8601", "2016-01-19T16:07:37+08:00"])
    assert result.exit_code == 0
    assert "2016-01-19T08:07:37.000Z" in result.output


def test_iso8601_invalid_exits_1():
    result = runner.invoke(app, ["iso8601", "not-a-date"])
    assert result.exit_code == 1
    assert "Not an ISO 8601 date" in result.output


def test_leap_year_bare_year():
    assert runner.invoke(app, ["leap-year", "2000"]).output.strip() == "true"
    assert runner.invoke(app, ["leap-year", "1900"]).output.strip() == "false"


def test_leap_year_iso_date():
    result = runner.invoke(app, ["leap-year", "2012-02-01T00:00:00Z"])
    assert result.exit_code == 0
    assert result.output.strip() == "true"


def test_leap_year_out_of_range():
    result = runner.invoke(app, ["leap-year", "0"])
    assert result.exit_code == 1


def test_timespan():
    result = runner.invoke(
        app, ["timespan", "2000-01-01T10:00:00Z", "2000-01-01T15:20:10.453Z"]
    )
    assert result.exit_code == 0
    assert result.output.strip() == "05:20:10.453"


def test_clock_angle():
    result = runner.invoke(app, ["clock-angle", "2016-04-05T03:00:00Z"])
    assert result.exit_code == 0
    assert "1.570796 rad" in result.output
    assert "90.00" in result.output


def test_config_option(tmp_path):
    cfg = tmp_path / "cfg.yaml"
    cfg.write_text("date:\n  default_timezone: Asia/Kolkata\n", encoding="utf-8")

    # 08:30 Kolkata == 03:00 UTC
    result = runner.invoke(
        app, ["--config", str(cfg), "clock-angle", "2016-04-05T08:30:00"]
    )
    assert result.exit_code == 0
    assert "1.570796 rad" in result.output


def test_missing_config_exits_1(tmp_path):
    result = runner.invoke(app, ["--config", str(tmp_path / "nope.yaml"), "version"])
    assert result.exit_code == 1
