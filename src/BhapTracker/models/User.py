from datetime import datetime

from sqlmodel import Field, text

from BhapTracker.models.BaseModel import BaseModel
from BhapTracker.share.TimeUtils import TimeUtils


class User(BaseModel, table=True):
    """
    用户表模型
    """

    __tablename__ = "bhap_user"  # type: ignore

    email: str = Field(unique=True, description="登录邮箱")
    first_name: str = Field(description="名")
    last_name: str = Field(description="姓")
    created_at: datetime = Field(
        default_factory=TimeUtils.utcnow,
        sa_column_kwargs={"server_default": text("CURRENT_TIMESTAMP")},
        description="注册时间",
    )
