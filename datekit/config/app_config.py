#!filepath: datekit/config/app_config.py
import os
from typing import Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field

from .date_config import DateConfig
from .log_config import LogConfig
from datekit.utils.datetime_utils import DateTimeUtils
from datekit.utils.logger import logs


def project_root() -> str:
    """
    返回项目根目录（基于当前文件位置推导）:
    datekit/config/app_config.py → datekit/config → datekit → project_root
    """
    return os.path.abspath(os.path.join(os.path.dirname(__file__), "../../"))


def default_config_path() -> str:
    return os.path.join(os.path.dirname(os.path.abspath(__file__)), "base.yml")


class AppConfig(BaseModel):
    log: LogConfig = Field(default_factory=LogConfig)
    date: DateConfig = Field(default_factory=DateConfig)

    @classmethod
    def load(cls, path: Optional[str] = None) -> "AppConfig":
        """
        加载 YAML 配置 + .env
        - 默认使用 datekit/config/base.yml
        - DATEKIT_TIMEZONE / DATEKIT_LOG_LEVEL 覆盖 YAML
        """
        load_dotenv(os.path.join(project_root(), ".env"))

        if path is None:
            path = default_config_path()

        if not os.path.exists(path):
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}

        raw.setdefault("log", {})
        raw.setdefault("date", {})

        tz_name = os.getenv("DATEKIT_TIMEZONE")
        if tz_name:
            raw["date"]["default_timezone"] = tz_name

        level = os.getenv("DATEKIT_LOG_LEVEL")
        if level:
            raw["log"]["level"] = level.upper()

        return cls(**raw)


def init_config(cfg: AppConfig) -> AppConfig:
    """Apply a loaded config to the process-wide logger and date defaults."""
    logs.configure(cfg.log)
    DateTimeUtils.set_default_timezone(cfg.date.default_timezone)
    logs.debug(f"[config] default_timezone={cfg.date.default_timezone or 'local'}")
    return cfg
