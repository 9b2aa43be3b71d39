from sqlmodel import Field, SQLModel

from BhapTracker.share.enums.BhapStatus import BhapStatus


class TransitionStatusQo(SQLModel):
    """
    变更 BHAP 状态的查询对象
    """

    bhap_id: int = Field(..., description="BHAP 编号")
    actor_id: int = Field(..., description="执行变更的用户ID")
    target: BhapStatus = Field(..., description="目标状态")
