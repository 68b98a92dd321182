#!filepath: datekit/utils/logger.py
import os
import sys
import json
from functools import wraps
from time import perf_counter
from typing import Callable, Optional, Tuple, Type, TYPE_CHECKING

from loguru import logger

if TYPE_CHECKING:
    from datekit.config.log_config import LogConfig


class Logging:
    """
    Thin wrapper over the global loguru logger
    ---------------------------------------
    - sinks are only installed by configure(), never at import
    - optional daily file sink with retention
    - function-level logging decorator
    ---------------------------------------
    """

    FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level} | {message}"

    def __init__(self):
        self.level = "INFO"
        self.log_dir: Optional[str] = None
        self._configured = False

    def configure(self, cfg: "LogConfig") -> None:
        """
        Replace all sinks according to ``cfg``. Safe to call more than once.
        """
        logger.remove()

        logger.add(sys.stderr, level=cfg.level, format=self.FORMAT)

        if cfg.to_file:
            os.makedirs(cfg.dir, exist_ok=True)
            logger.add(
                sink=f"{cfg.dir}/{{time:YYYY-MM-DD}}.log",
                rotation=cfg.rotation,
                retention=cfg.retention,
                level=cfg.level,
                format=self.FORMAT,
                enqueue=True,  # 多进程安全
                backtrace=True,
                diagnose=False,
            )
            self.log_dir = cfg.dir

        self.level = cfg.level
        self._configured = True
        logger.debug(f"Logger configured level={cfg.level} file={cfg.to_file}")

    @property
    def configured(self) -> bool:
        return self._configured

    # ----------- 日志方法 -----------
    def debug(self, msg: str, *args, **kwargs):
        logger.debug(msg, *args, **kwargs)

    def info(self, msg: str, *args, **kwargs):
        logger.info(msg, *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs):
        logger.warning(msg, *args, **kwargs)

    def error(self, msg: str, *args, **kwargs):
        logger.error(msg, *args, **kwargs)

    def exception(self, msg: str, *args, **kwargs):
        logger.exception(msg, *args, **kwargs)

    # ---------- 日志装饰器 ----------
    def catch(
        self,
        msg: str = "Exception occurred",
        log_inputs: bool = False,
        log_outputs: bool = False,
        log_time: bool = True,
        expected: Tuple[Type[BaseException], ...] = (),
    ) -> Callable:
        """
        Log and re-raise unexpected exceptions; ``expected`` ones pass through unlogged.
        """

        def decorator(func: Callable):
            @wraps(func)
            def wrapper(*args, **kwargs):

                if log_inputs:
                    logger.debug(
                        f"[CALL] {func.__name__} args={args}, "
                        f"kwargs={json.dumps(kwargs, ensure_ascii=False, default=str)}"
                    )

                start = perf_counter()

                try:
                    result = func(*args, **kwargs)
                except expected:
                    raise
                except Exception:
                    logger.exception(f"[ERROR] {func.__name__}: {msg}")
                    raise

                if log_outputs:
                    logger.debug(f"[RETURN] {func.__name__} result={result}")

                if log_time:
                    cost = perf_counter() - start
                    logger.debug(f"[TIME] {func.__name__} took {cost:.4f}s")

                return result

            return wrapper

        return decorator


# 全局 logs；由 init_logging / init_config 配置 sink
logs = Logging()


def init_logging(cfg: "LogConfig") -> Logging:
    logs.configure(cfg)
    return logs
