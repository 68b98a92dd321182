#!filepath: datekit/config/date_config.py
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, field_validator


class DateConfig(BaseModel):
    # IANA 时区名；None 表示使用平台本地时区
    default_timezone: Optional[str] = None

    @field_validator("default_timezone")
    @classmethod
    def _known_zone(cls, v: Optional[str]) -> Optional[str]:
        if not v:
            return None
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown timezone: {v}") from e
        return v
