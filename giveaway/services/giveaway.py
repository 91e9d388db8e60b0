"""
抽奖会话服务模块

单个内存会话: 名单输入 -> 加载 -> 逐个抽取 -> 重置 / 清空。
抽奖分两步: begin_draw() 进入 "抽奖中" 状态, 等待 reveal_delay 秒后
complete_draw() 公布结果; 抽奖中不允许再次抽奖或重置。
"""
import asyncio
import logging
import math
import random
from datetime import datetime
from typing import List, Optional, Tuple

from giveaway.models.giveaway import GiveawayState
from giveaway.models.participant import Participant, Winner
from giveaway.services.errors import (
    DrawAbortedError,
    DrawInProgressError,
    NoParticipantsError,
    NothingToResetError,
)
from giveaway.services.parser import parse_report, validate_participants

logger = logging.getLogger(__name__)

DEFAULT_REVEAL_DELAY = 1.5


class GiveawayService:
    """抽奖会话"""

    def __init__(
        self,
        reveal_delay: float = DEFAULT_REVEAL_DELAY,
        rng: Optional[random.Random] = None,
    ):
        if not math.isfinite(reveal_delay) or reveal_delay < 0:
            raise ValueError(f"reveal_delay must be a finite, non-negative number: {reveal_delay!r}")
        self.reveal_delay = reveal_delay
        self._rng = rng or random.Random()

        self.participant_text = ""
        self.participants: List[Participant] = []
        self.original_participants: Tuple[Participant, ...] = ()
        self.winners: List[Winner] = []
        self.current_winner: Optional[Winner] = None
        self.is_drawing = False

        # load / clear 时递增, 用于丢弃过期的抽奖
        self._generation = 0

    @property
    def phase(self) -> str:
        if not self.original_participants:
            return "empty"
        if not self.participants:
            return "exhausted"
        return "loaded"

    @property
    def can_draw(self) -> bool:
        return not self.is_drawing and bool(self.participants)

    @property
    def can_reset(self) -> bool:
        return not self.is_drawing and bool(self.winners)

    # ------------- 名单 -------------
    def set_text(self, text: str) -> None:
        """更新输入框内容, 不影响已加载的名单"""
        self.participant_text = text or ""

    def load(self, text: Optional[str] = None) -> List[Participant]:
        """
        解析并加载名单

        text 为 None 时使用当前输入框内容。校验失败时抛出异常, 已加载的名单保持不变。
        成功后名单同时作为剩余池和原始快照, 中奖记录清空。
        """
        if text is not None:
            self.set_text(text)

        report = parse_report(self.participant_text)
        parsed = validate_participants(report.participants)

        self._generation += 1
        self.original_participants = tuple(parsed)
        self.participants = list(parsed)
        self.winners = []
        self.current_winner = None
        self.is_drawing = False

        logger.info(
            f"[Giveaway] Loaded {len(parsed)} participants "
            f"(skipped {report.skipped_lines} line(s))"
        )
        return list(parsed)

    # ------------- 抽奖 -------------
    def begin_draw(self) -> int:
        """进入抽奖中状态, 返回本次抽奖的会话代号"""
        if self.is_drawing:
            raise DrawInProgressError()
        if not self.participants:
            raise NoParticipantsError()

        self.is_drawing = True
        self.current_winner = None
        logger.debug(f"[Giveaway] Drawing from {len(self.participants)} participants...")
        return self._generation

    def complete_draw(self, generation: Optional[int] = None) -> Winner:
        """
        从剩余池中等概率抽取一位中奖者

        generation 与当前会话不一致 (期间执行过 load / clear) 时放弃本次抽奖。
        """
        if generation is not None and generation != self._generation:
            logger.info("[Giveaway] Participant list changed during draw, result discarded")
            raise DrawAbortedError()
        if not self.participants:
            self.is_drawing = False
            raise NoParticipantsError()

        index = self._rng.randrange(len(self.participants))
        selected = self.participants[index]
        winner = Winner(
            **selected.model_dump(),
            drawn_at=datetime.now(),
            position=len(self.winners) + 1,
        )

        self.winners.append(winner)
        del self.participants[index]
        self.current_winner = winner
        self.is_drawing = False

        logger.info(
            f"[Giveaway] Winner #{winner.position}: {winner.number} - {winner.name} "
            f"({len(self.participants)} remaining)"
        )
        return winner

    async def draw(self) -> Winner:
        """完整抽奖流程: 进入抽奖中 -> 等待 reveal_delay -> 公布结果"""
        generation = self.begin_draw()
        try:
            await asyncio.sleep(self.reveal_delay)
        except asyncio.CancelledError:
            if generation == self._generation:
                self.is_drawing = False
            raise
        return self.complete_draw(generation)

    # ------------- 重置 / 清空 -------------
    def reset(self) -> None:
        """恢复完整名单并清空中奖记录"""
        if self.is_drawing:
            raise DrawInProgressError()
        if not self.winners:
            raise NothingToResetError()

        self.participants = list(self.original_participants)
        self.winners = []
        self.current_winner = None
        logger.info(f"[Giveaway] Draw reset, {len(self.participants)} participants restored")

    def clear(self) -> None:
        """清空所有状态, 回到初始状态"""
        self._generation += 1
        self.participant_text = ""
        self.participants = []
        self.original_participants = ()
        self.winners = []
        self.current_winner = None
        self.is_drawing = False
        logger.info("[Giveaway] All data cleared")

    # ------------- 查询 -------------
    def snapshot(self) -> GiveawayState:
        return GiveawayState(
            phase=self.phase,
            participant_text=self.participant_text,
            participants=list(self.participants),
            original_participants=list(self.original_participants),
            winners=list(self.winners),
            current_winner=self.current_winner,
            is_drawing=self.is_drawing,
            remaining_count=len(self.participants),
            winner_count=len(self.winners),
            can_submit=bool(self.participant_text.strip()),
            can_draw=self.can_draw,
            can_reset=self.can_reset,
        )


# 全局会话 (单用户, 仅内存)
_service: Optional[GiveawayService] = None


def init_giveaway(reveal_delay: float = DEFAULT_REVEAL_DELAY, seed: Optional[int] = None) -> GiveawayService:
    """初始化全局抽奖会话"""
    global _service
    _service = GiveawayService(reveal_delay=reveal_delay, rng=random.Random(seed))
    logger.info(
        f"[Giveaway] Session initialized (reveal_delay={reveal_delay}s, "
        f"seed={'fixed' if seed is not None else 'random'})"
    )
    return _service


def get_giveaway_service() -> GiveawayService:
    """FastAPI 依赖: 返回全局抽奖会话, 未初始化时使用默认配置"""
    global _service
    if _service is None:
        _service = GiveawayService()
    return _service
