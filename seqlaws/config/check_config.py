# seqlaws/config/check_config.py
from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class CheckConfig(BaseModel):
    """
    CheckConfig

    语义：
      - sink_policy: 未显式传入 sink 时使用的失败处理策略
          record -> 记录并继续（RecordingSink）
          raise  -> 第一次失败即抛出（RaisingSink）
      - exhausted_draws: 迭代器耗尽后再调用 next() 的次数
      - log_failures: RecordingSink 是否把每条失败写入日志
    """

    sink_policy: Literal["record", "raise"] = "record"
    exhausted_draws: int = Field(2, ge=1)
    log_failures: bool = True
