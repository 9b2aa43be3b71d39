from sqlmodel import Field, SQLModel


class CreateBhapQo(SQLModel):
    """
    创建 BHAP 的查询对象
    """

    author_id: int = Field(..., description="作者的用户ID")
    title: str = Field(..., min_length=1, description="BHAP 标题")
    content: str = Field(default="", description="BHAP 正文 (Markdown)")
