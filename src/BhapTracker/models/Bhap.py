from datetime import datetime
from typing import Optional

from sqlmodel import Field, text

from BhapTracker.models.BaseModel import BaseModel
from BhapTracker.share.TimeUtils import TimeUtils
from BhapTracker.share.enums.BhapStatus import BhapStatus


class Bhap(BaseModel, table=True):
    """
    BHAP 提案表模型
    """

    __tablename__ = "bhap"  # type: ignore

    # ID 由 IdAllocator 在事务内分配，从 0 开始，不使用自增
    id: Optional[int] = Field(
        default=None,
        primary_key=True,
        sa_column_kwargs={"autoincrement": False},
        description="BHAP 编号",
    )
    title: str = Field(description="BHAP 标题")
    content: str = Field(default="", description="BHAP 正文 (Markdown)")
    author_id: int = Field(foreign_key="bhap_user.id", index=True, description="作者的用户ID")
    status: str = Field(
        default=BhapStatus.DRAFT.value,
        index=True,
        description="BHAP 当前状态，取值见 BhapStatus",
    )
    created_date: datetime = Field(
        default_factory=TimeUtils.utcnow,
        sa_column_kwargs={"server_default": text("CURRENT_TIMESTAMP")},
        description="创建时间",
    )
    last_modified: datetime = Field(
        default_factory=TimeUtils.utcnow,
        sa_column_kwargs={
            "server_default": text("CURRENT_TIMESTAMP"),
            "onupdate": text("CURRENT_TIMESTAMP"),
        },
        description="最后修改时间",
    )
