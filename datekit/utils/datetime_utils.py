#!filepath: datekit/utils/datetime_utils.py
from __future__ import annotations

import math
import re
from datetime import date, datetime, timedelta, timezone, tzinfo
from email.utils import parsedate_to_datetime
from typing import Optional, Union
from zoneinfo import ZoneInfo

from dateutil import parser as du_parser
from dateutil import tz as du_tz

from datekit.utils.logger import logs

DateLike = Union[date, datetime]

# "GMT+01" / "UTC-05:30" 结尾的偏移，按字面符号读取
_GMT_SUFFIX = re.compile(
    r"\s*(?:GMT|UTC)\s*([+-])(\d{1,2})(?::?(\d{2}))?\s*$", re.IGNORECASE
)

# RFC 2822: "-0000" 表示 UTC 时刻（来源时区未知）
_MINUS_ZERO = re.compile(r"\s-0000$")

# 时间后面跟着的字母时区
_TRAILING_ZONE = re.compile(r"\d{1,2}:\d{2}(?::\d{2})?\s+([A-Za-z]+)$")
_KNOWN_ZONES = frozenset({
    "GMT", "UT", "UTC", "Z",
    "EST", "EDT", "CST", "CDT", "MST", "MDT", "PST", "PDT",
    "AM", "PM",
})


class DateTimeUtils:
    UTC = ZoneInfo("UTC")
    EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

    # None -> 平台本地时区
    default_tz: Optional[tzinfo] = None

    MS_PER_SECOND = 1000
    MS_PER_MINUTE = 60 * MS_PER_SECOND
    MS_PER_HOUR = 60 * MS_PER_MINUTE

    # ================================================================
    # timezone / epoch helpers
    # ================================================================
    @classmethod
    def set_default_timezone(cls, name: Optional[str]) -> None:
        """Zone used for parsed text that carries no offset. ``None`` = local."""
        cls.default_tz = ZoneInfo(name) if name else None

    @classmethod
    def _local_tz(cls) -> tzinfo:
        return cls.default_tz if cls.default_tz is not None else du_tz.tzlocal()

    @classmethod
    def _anchor(cls, d: datetime) -> datetime:
        if d.tzinfo is None or d.tzinfo.utcoffset(d) is None:
            d = d.replace(tzinfo=cls._local_tz())
        return d.astimezone(cls.UTC)

    @classmethod
    def is_valid(cls, value: object) -> bool:
        return isinstance(value, datetime)

    @classmethod
    def to_epoch_ms(cls, d: datetime) -> int:
        if not isinstance(d, datetime):
            raise TypeError(f"Unsupported date-time type: {type(d)}")
        return (cls._anchor(d) - cls.EPOCH) // timedelta(milliseconds=1)

    @classmethod
    def from_epoch_ms(cls, ms: int) -> datetime:
        return (cls.EPOCH + timedelta(milliseconds=ms)).astimezone(cls.UTC)

    @classmethod
    def to_iso8601(cls, d: datetime) -> str:
        """
        Serialize as ``YYYY-MM-DDTHH:MM:SS.mmmZ`` (UTC, millisecond precision).
        """
        if not isinstance(d, datetime):
            raise TypeError(f"Unsupported date-time type: {type(d)}")
        utc = cls.from_epoch_ms(cls.to_epoch_ms(d))
        return (
            f"{utc.year:04d}-{utc.month:02d}-{utc.day:02d}"
            f"T{utc.hour:02d}:{utc.minute:02d}:{utc.second:02d}"
            f".{utc.microsecond // 1000:03d}Z"
        )

    # ================================================================
    # 🔥 RFC 2822 / free-form date text
    # ================================================================
    @classmethod
    def parse_rfc2822(cls, text: str) -> Optional[datetime]:
        """
        Parse an RFC 2822 date, falling back to free-form text:
            "Tue, 26 Jan 2016 13:48:02 GMT"
            "Sun, 17 May 1998 03:00:00 GMT+01"
            "December 17, 1995 03:24:00"

        Returns an aware UTC datetime, or None when the text is not a date.
        """
        if not isinstance(text, str):
            raise TypeError(f"Unsupported text type: {type(text)}")

        s = text.strip()
        if not s:
            logs.debug("[parse_rfc2822] empty input")
            return None

        offset = None
        m = _GMT_SUFFIX.search(s)
        if m:
            sign = 1 if m.group(1) == "+" else -1
            hours, minutes = int(m.group(2)), int(m.group(3) or 0)
            if hours > 23 or minutes > 59:
                logs.debug(f"[parse_rfc2822] bad offset: {text!r}")
                return None
            offset = timezone(sign * timedelta(hours=hours, minutes=minutes))
            s = s[: m.start()].strip()

        if offset is None:
            z = _TRAILING_ZONE.search(s)
            if z and z.group(1).upper() not in _KNOWN_ZONES:
                logs.debug(f"[parse_rfc2822] unknown zone: {text!r}")
                return None

        parsed = cls._parse_email_date(s) if offset is None else None
        if parsed is not None and parsed.tzinfo is None and _MINUS_ZERO.search(s):
            parsed = parsed.replace(tzinfo=timezone.utc)
        if parsed is None:
            try:
                parsed = du_parser.parse(s)
            except (ValueError, OverflowError):
                logs.debug(f"[parse_rfc2822] not a date: {text!r}")
                return None

        if offset is not None:
            parsed = parsed.replace(tzinfo=offset)

        try:
            return cls._anchor(parsed)
        except (OverflowError, ValueError):
            logs.debug(f"[parse_rfc2822] out of range: {text!r}")
            return None

    @staticmethod
    def _parse_email_date(s: str) -> Optional[datetime]:
        try:
            return parsedate_to_datetime(s)
        except (TypeError, ValueError, IndexError, OverflowError):
            return None

    # ================================================================
    # 🔥 ISO 8601
    # ================================================================
    @classmethod
    def parse_iso8601(cls, text: str) -> Optional[datetime]:
        """
        "2016-01-19T16:07:37+00:00" / "2016-01-19T08:07:37Z" -> aware UTC datetime.
        Date-only text ("2016-01-19") is UTC midnight.
        Returns None for anything that is not ISO 8601.
        """
        if not isinstance(text, str):
            raise TypeError(f"Unsupported text type: {type(text)}")

        s = text.strip()
        day = cls._iso_date_only(s)
        if day is not None:
            return day

        try:
            parsed = du_parser.isoparse(s)
        except (ValueError, OverflowError):
            logs.debug(f"[parse_iso8601] not ISO 8601: {text!r}")
            return None

        try:
            return cls._anchor(parsed)
        except (OverflowError, ValueError):
            logs.debug(f"[parse_iso8601] out of range: {text!r}")
            return None

    @classmethod
    def _iso_date_only(cls, s: str) -> Optional[datetime]:
        # 纯日期 ("2016-01-19") 按 UTC 零点解释；带时间的无偏移形式按本地时区
        try:
            day = du_parser.isoparser().parse_isodate(s)
        except (ValueError, OverflowError):
            return None
        return datetime(day.year, day.month, day.day, tzinfo=cls.UTC)

    # ================================================================
    # calendar arithmetic
    # ================================================================
    @classmethod
    def is_leap_year(cls, d: DateLike) -> bool:
        year = d.year
        return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)

    @classmethod
    def time_span_to_string(cls, start: datetime, end: datetime) -> str:
        """
        |end - start| formatted as "HH:mm:ss.mmm"; hours grow past two digits.
        """
        diff = abs(cls.to_epoch_ms(end) - cls.to_epoch_ms(start))

        hours = diff // cls.MS_PER_HOUR
        minutes = (diff % cls.MS_PER_HOUR) // cls.MS_PER_MINUTE
        seconds = (diff % cls.MS_PER_MINUTE) // cls.MS_PER_SECOND
        millis = diff % cls.MS_PER_SECOND

        return f"{hours:02d}:{minutes:02d}:{seconds:02d}.{millis:03d}"

    @classmethod
    def angle_between_clock_hands(cls, d: datetime) -> float:
        """
        Smaller angle (radians, 0..π) between the hour and minute hands
        of a 12-hour clock at the UTC time of ``d``.
        """
        utc = cls._anchor(d)
        hour = utc.hour % 12
        minute = utc.minute

        hour_angle = (hour + minute / 60) * 30
        minute_angle = minute * 6
        diff = hour_angle - minute_angle
        if abs(diff) > 180:
            diff = abs(diff) - 360

        # radians only at the end
        return abs(diff * math.pi / 180)
