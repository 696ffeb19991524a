# tests/conftest.py
from __future__ import annotations

import pytest
from loguru import logger

from seqlaws import set_config
from seqlaws.config.app_config import AppConfig


@pytest.fixture(autouse=True)
def disable_file_logger():
    logger.remove()
    logger.add(lambda msg: None)
    yield
    logger.remove()


@pytest.fixture(autouse=True)
def default_config():
    """
    每个测试使用内置默认配置（不受 base.yml / .env / 环境变量影响）。
    """
    set_config(AppConfig())
    yield
    set_config(None)
