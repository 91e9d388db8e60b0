"""
抽奖会话相关数据模型
"""
from pydantic import BaseModel, Field
from typing import List, Literal, Optional

from giveaway.models.participant import Participant, Winner


class Notice(BaseModel):
    """前端提示消息 (toast)"""
    title: str
    description: str
    variant: Literal["default", "destructive"] = "default"


class InputUpdate(BaseModel):
    """编辑名单输入框"""
    text: str = ""


class LoadRequest(BaseModel):
    """提交名单请求, 不传 text 时使用输入框中已有的内容"""
    text: Optional[str] = None


class GiveawayState(BaseModel):
    """抽奖会话快照"""
    phase: Literal["empty", "loaded", "exhausted"]
    participant_text: str = ""
    participants: List[Participant] = Field(default_factory=list, description="剩余可抽取的参与者")
    original_participants: List[Participant] = Field(default_factory=list, description="加载时的完整名单")
    winners: List[Winner] = Field(default_factory=list)
    current_winner: Optional[Winner] = None
    is_drawing: bool = False
    remaining_count: int = 0
    winner_count: int = 0
    can_submit: bool = False
    can_draw: bool = False
    can_reset: bool = False


class ActionResponse(BaseModel):
    """操作响应: 最新状态 + 提示消息"""
    state: GiveawayState
    notice: Optional[Notice] = None
