#!filepath: seqlaws/utils/logger.py
import os
import sys
from typing import Optional

from loguru import logger

_LOGGER_CONFIGURED = False
# Logger 初始化“只执行一次”（除非显式 force=True）


class Logging:
    """
    Harness 日志模块
    ---------------------------------------
    - 默认输出到 stderr
    - 指定 log_dir 时按日期切割写文件
    - 支持日志保留周期
    ---------------------------------------
    """

    def __init__(
        self,
        log_dir: Optional[str] = None,
        rotation: str = "1 day",
        retention: str = "30 days",
        log_level: str = "WARNING",
    ):
        self.log_dir = log_dir
        self.rotation = rotation
        self.retention = retention
        self.level = log_level

        self._configure()

    def _configure(self, force: bool = False) -> None:
        """
        配置全局 logger，只执行一次
        """
        global _LOGGER_CONFIGURED
        if _LOGGER_CONFIGURED and not force:
            return

        logger.remove()

        if self.log_dir:
            os.makedirs(self.log_dir, exist_ok=True)
            logger.add(
                sink=f"{self.log_dir}/{{time:YYYY-MM-DD}}.log",
                rotation=self.rotation,
                retention=self.retention,
                level=self.level,
                format="{time:YYYY-MM-DD HH:mm:ss} | {level} | {message}",
                backtrace=True,
                diagnose=True,
            )
        else:
            logger.add(
                sys.stderr,
                level=self.level,
                format="{time:HH:mm:ss} | {level} | {message}",
            )

        _LOGGER_CONFIGURED = True

    def reconfigure(
        self,
        log_dir: Optional[str] = None,
        rotation: str = "1 day",
        retention: str = "30 days",
        log_level: str = "WARNING",
    ) -> None:
        """用新的 LogConfig 重建 sink（CLI / AppConfig 使用）。"""
        self.log_dir = log_dir
        self.rotation = rotation
        self.retention = retention
        self.level = log_level
        self._configure(force=True)

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


# 默认全局 logs（可被 AppConfig.apply_logging 重新配置）
logs = Logging()
