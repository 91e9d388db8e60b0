"""
抽奖服务配置 (从环境变量读取)
"""
import math
import os
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


def _optional_int(value: Optional[str]) -> Optional[int]:
    if value is None or not value.strip():
        return None
    return int(value)


class Config:
    # 点击抽奖到公布结果之间的等待时间 (秒)
    REVEAL_DELAY = os.getenv("GIVEAWAY_REVEAL_DELAY", "1.5")
    # 固定随机种子, 留空则每次抽奖不可复现
    RANDOM_SEED = os.getenv("GIVEAWAY_RANDOM_SEED")

    # 应用配置
    APP_PORT = int(os.getenv("APP_PORT", "8000"))
    APP_TITLE = os.getenv("APP_TITLE", "Sorteio Insta - Giveaway Draw")

    @classmethod
    def reveal_delay(cls) -> float:
        return float(cls.REVEAL_DELAY)

    @classmethod
    def random_seed(cls) -> Optional[int]:
        return _optional_int(cls.RANDOM_SEED)

    @classmethod
    def validate(cls):
        errors = []
        try:
            delay = cls.reveal_delay()
            if not math.isfinite(delay):
                errors.append(f"GIVEAWAY_REVEAL_DELAY must be a finite number: {cls.REVEAL_DELAY!r}")
            elif delay < 0:
                errors.append("GIVEAWAY_REVEAL_DELAY must not be negative")
        except ValueError:
            errors.append(f"GIVEAWAY_REVEAL_DELAY is not a number: {cls.REVEAL_DELAY!r}")
        try:
            cls.random_seed()
        except ValueError:
            errors.append(f"GIVEAWAY_RANDOM_SEED is not an integer: {cls.RANDOM_SEED!r}")

        if errors:
            raise ValueError(f"Invalid configuration: {'; '.join(errors)}")
