from typing import Optional

from sqlmodel import Field, SQLModel


class EditBhapQo(SQLModel):
    """
    编辑草稿 BHAP 的查询对象，未提供的字段保持不变
    """

    bhap_id: int = Field(..., description="BHAP 编号")
    editor_id: int = Field(..., description="编辑者的用户ID")
    title: Optional[str] = Field(default=None, min_length=1, description="新标题")
    content: Optional[str] = Field(default=None, description="新正文 (Markdown)")
