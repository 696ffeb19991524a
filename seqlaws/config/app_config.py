#!filepath: seqlaws/config/app_config.py
from __future__ import annotations

import os
from typing import Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field

from .check_config import CheckConfig
from .log_config import LogConfig
from seqlaws import logs


def package_root() -> str:
    """
    返回包目录（基于当前文件位置推导）:
    seqlaws/config/app_config.py → seqlaws/config → seqlaws
    """
    return os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))


# env 变量 -> (section, key)
ENV_OVERRIDES = {
    "SEQLAWS_LOG_LEVEL": ("log", "level"),
    "SEQLAWS_LOG_DIR": ("log", "dir"),
    "SEQLAWS_SINK_POLICY": ("checks", "sink_policy"),
    "SEQLAWS_EXHAUSTED_DRAWS": ("checks", "exhausted_draws"),
}


class AppConfig(BaseModel):
    log: LogConfig = Field(default_factory=LogConfig)
    checks: CheckConfig = Field(default_factory=CheckConfig)

    @classmethod
    def load(cls, path: Optional[str] = None) -> "AppConfig":
        """
        加载 YAML 配置 + .env
        - 默认使用 seqlaws/config/base.yml
        - .env 从当前工作目录加载（不存在则忽略）
        - SEQLAWS_* 环境变量覆盖 YAML
        """
        load_dotenv(os.path.join(os.getcwd(), ".env"))

        if path is None:
            path = os.path.join(package_root(), "config", "base.yml")

        if not os.path.exists(path):
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}

        for env_key, (section, key) in ENV_OVERRIDES.items():
            value = os.getenv(env_key)
            if value is not None:
                raw.setdefault(section, {})[key] = value

        return cls(**raw)

    def apply_logging(self) -> None:
        logs.reconfigure(
            log_dir=self.log.dir,
            rotation=self.log.rotation,
            retention=self.log.retention,
            log_level=self.log.level,
        )


_CONFIG: Optional[AppConfig] = None


def get_config() -> AppConfig:
    global _CONFIG
    if _CONFIG is None:
        _CONFIG = AppConfig.load()
    return _CONFIG


def set_config(cfg: Optional[AppConfig]) -> None:
    """替换进程级配置；传 None 则下次 get_config() 重新加载。"""
    global _CONFIG
    _CONFIG = cfg
