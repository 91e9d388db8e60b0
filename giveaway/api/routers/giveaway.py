"""
抽奖路由

对应页面上的操作: 输入名单、加载名单、抽奖、重置、清空。
"""
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from giveaway.models.giveaway import ActionResponse, GiveawayState, InputUpdate, LoadRequest, Notice
from giveaway.models.participant import Winner
from giveaway.services.errors import GiveawayError
from giveaway.services.giveaway import GiveawayService, get_giveaway_service

logger = logging.getLogger(__name__)

giveaway_router = APIRouter(prefix="/api/giveaway", tags=["Giveaway"])


def _raise_http(e: GiveawayError):
    logger.warning(f"[GiveawayAPI] {e.title}: {e.description}")
    raise HTTPException(status_code=e.status_code, detail=e.notice.model_dump())


def _raise_internal(action: str, e: Exception):
    logger.error(f"[GiveawayAPI] {action} failed: {e}", exc_info=True)
    raise HTTPException(status_code=500, detail="Internal server error")


@giveaway_router.get("", response_model=GiveawayState)
async def get_state(service: GiveawayService = Depends(get_giveaway_service)):
    """获取当前抽奖状态"""
    return service.snapshot()


@giveaway_router.put("/input", response_model=GiveawayState)
async def update_input(update: InputUpdate, service: GiveawayService = Depends(get_giveaway_service)):
    """更新名单输入框"""
    service.set_text(update.text)
    return service.snapshot()


@giveaway_router.post("/participants", response_model=ActionResponse)
async def load_participants(
    req: LoadRequest = LoadRequest(),
    service: GiveawayService = Depends(get_giveaway_service),
):
    """加载参与者名单"""
    try:
        participants = service.load(req.text)
    except GiveawayError as e:
        _raise_http(e)
    except Exception as e:
        _raise_internal("Load participants", e)

    notice = Notice(
        title="Participants Loaded",
        description=f"Successfully loaded {len(participants)} participants",
    )
    return ActionResponse(state=service.snapshot(), notice=notice)


@giveaway_router.post("/draw", response_model=ActionResponse)
async def draw_winner(service: GiveawayService = Depends(get_giveaway_service)):
    """抽取一位中奖者 (等待揭晓延时后返回)"""
    try:
        winner = await service.draw()
    except GiveawayError as e:
        _raise_http(e)
    except Exception as e:
        _raise_internal("Draw", e)

    notice = Notice(
        title="🎉 Winner Drawn!",
        description=f"{winner.name} has been selected!",
    )
    return ActionResponse(state=service.snapshot(), notice=notice)


@giveaway_router.post("/reset", response_model=ActionResponse)
async def reset_draw(service: GiveawayService = Depends(get_giveaway_service)):
    """恢复完整名单, 清空中奖记录"""
    try:
        service.reset()
    except GiveawayError as e:
        _raise_http(e)
    except Exception as e:
        _raise_internal("Reset", e)

    notice = Notice(title="Draw Reset", description="All participants have been restored")
    return ActionResponse(state=service.snapshot(), notice=notice)


@giveaway_router.post("/clear", response_model=ActionResponse)
async def clear_all(service: GiveawayService = Depends(get_giveaway_service)):
    """清空所有数据"""
    try:
        service.clear()
    except Exception as e:
        _raise_internal("Clear", e)

    notice = Notice(title="Cleared", description="All data has been cleared")
    return ActionResponse(state=service.snapshot(), notice=notice)


@giveaway_router.get("/winners", response_model=List[Winner])
async def list_winners(service: GiveawayService = Depends(get_giveaway_service)):
    """获取中奖记录 (按抽取顺序)"""
    return service.winners
