from .app_config import AppConfig, init_config
from .date_config import DateConfig
from .log_config import LogConfig

__all__ = ["AppConfig", "DateConfig", "LogConfig", "init_config"]
