from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime


class Participant(BaseModel):
    """参与者模型"""
    number: int = Field(..., description="参与者编号")
    name: str = Field(..., min_length=1, description="参与者姓名 (已去除首尾空白)")
    id: str = Field(..., description="由编号和规范化姓名派生的列表键")

    model_config = ConfigDict(frozen=True)


class Winner(Participant):
    """中奖者模型"""
    drawn_at: datetime = Field(default_factory=datetime.now, description="抽中时间")
    position: int = Field(..., ge=1, description="本轮中的抽取顺序 (从 1 开始)")
