from sqlmodel import Field, SQLModel

from BhapTracker.share.enums.VoteValue import VoteValue


class CastVoteQo(SQLModel):
    """
    提交投票的查询对象
    """

    bhap_id: int = Field(..., description="BHAP 编号")
    voter_id: int = Field(..., description="投票用户ID")
    value: VoteValue = Field(..., description="投票选项: Accepted-赞成, Rejected-反对")
