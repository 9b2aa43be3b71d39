from typing import Optional

from sqlmodel import Field, SQLModel


class BaseModel(SQLModel):
    """
    所有数据模型的基类。
    - 提供共享的主键字段。
    """

    id: Optional[int] = Field(default=None, primary_key=True)
