#!filepath: datekit/cli.py
import math
from datetime import date, datetime
from functools import wraps
from typing import Optional, Union

import typer
from rich import print
from rich.markup import escape

from datekit import __version__
from datekit.config import AppConfig, init_config
from datekit.utils.datetime_utils import DateTimeUtils as dt
from datekit.utils.errors import UserInputError
from datekit.utils.logger import logs

app = typer.Typer(help="datekit date/time calculations CLI")


def _user_errors(func):
    """UserInputError -> red message + exit code 1, no traceback."""

    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except UserInputError as e:
            print(f"[red]{escape(str(e))}[/red]")
            raise typer.Exit(code=1)

    return wrapper


def _require_iso(text: str) -> datetime:
    d = dt.parse_iso8601(text)
    if not dt.is_valid(d):
        raise UserInputError(f"Not an ISO 8601 date: {text}")
    return d


@app.callback()
def main(
    config: Optional[str] = typer.Option(
        None, "--config", "-c", help="YAML config file (default: bundled base.yml)"
    ),
):
    try:
        cfg = AppConfig.load(path=config)
    except FileNotFoundError as e:
        print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(code=1)
    init_config(cfg)


@app.command()
def version():
    print(__version__)


@app.command()
@_user_errors
@logs.catch("rfc2822 failed", log_inputs=True, expected=(UserInputError,))
def rfc2822(text: str):
    """
    解析 RFC 2822 / 自由格式日期，输出 ISO 8601 (UTC)
    """
    d = dt.parse_rfc2822(text)
    if not dt.is_valid(d):
        raise UserInputError(f"Not a date: {text}")
    print(dt.to_iso8601(d))


@app.command()
@_user_errors
@logs.catch("iso8601 failed", log_inputs=True, expected=(UserInputError,))
def iso8601(text: str):
    """
    解析 ISO 8601 日期，输出归一化后的 UTC 时间
    """
    print(dt.to_iso8601(_require_iso(text)))


@app.command("leap-year")
@_user_errors
@logs.catch("leap-year failed", expected=(UserInputError,))
def leap_year(value: str):
    """
    Check a year ("2000") or an ISO 8601 date ("2000-02-01").
    """
    value = value.strip()
    d: Union[date, datetime]
    if value.isdigit():
        year = int(value)
        if not 1 <= year <= 9999:
            raise UserInputError(f"Year out of range: {value}")
        d = date(year, 1, 1)
    else:
        d = _require_iso(value)
    print("true" if dt.is_leap_year(d) else "false")


@app.command()
@_user_errors
@logs.catch("timespan failed", expected=(UserInputError,))
def timespan(start: str, end: str):
    """
    输出两个 ISO 8601 时间之间的时长 HH:mm:ss.mmm
    """
    print(dt.time_span_to_string(_require_iso(start), _require_iso(end)))


@app.command("clock-angle")
@_user_errors
@logs.catch("clock-angle failed", expected=(UserInputError,))
def clock_angle(time: str):
    """
    Angle between the clock hands at the UTC time of an ISO 8601 value.
    """
    rad = dt.angle_between_clock_hands(_require_iso(time))
    print(f"{rad:.6f} rad ({math.degrees(rad):.2f}°)")


if __name__ == "__main__":
    app()

# python -m datekit.cli clock-angle 2016-04-05T03:00:00Z
