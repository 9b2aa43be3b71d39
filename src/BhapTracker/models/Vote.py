from datetime import datetime

from sqlalchemy import UniqueConstraint
from sqlmodel import Field, text

from BhapTracker.models.BaseModel import BaseModel
from BhapTracker.share.TimeUtils import TimeUtils


class Vote(BaseModel, table=True):
    """
    用户对 BHAP 的投票记录表模型
    """

    __tablename__ = "bhap_vote"  # type: ignore

    __table_args__ = (UniqueConstraint("bhap_id", "voter_id", name="uk_bhap_vote_voter"),)

    bhap_id: int = Field(foreign_key="bhap.id", index=True, description="关联的 BHAP 编号")
    voter_id: int = Field(foreign_key="bhap_user.id", index=True, description="投票用户ID")
    # 以文本存储，便于发现不合法的历史数据
    value: str = Field(description="投票值: Accepted-赞成, Rejected-反对")
    cast_at: datetime = Field(
        default_factory=TimeUtils.utcnow,
        sa_column_kwargs={"server_default": text("CURRENT_TIMESTAMP")},
        description="投票时间",
    )
