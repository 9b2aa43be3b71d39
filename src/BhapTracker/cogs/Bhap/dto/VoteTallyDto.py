from pydantic import Field

from BhapTracker.share.BaseDto import BaseDto


class VoteTallyDto(BaseDto):
    """
    BHAP 的计票结果。

    accepted_count + rejected_count + undecided_count == denominator
    """

    vote_count: int = Field(..., description="已投票数")
    denominator: int = Field(..., description="有资格投票的人数")
    accepted_count: int = Field(..., description="赞成票数")
    rejected_count: int = Field(..., description="反对票数")
    undecided_count: int = Field(..., description="尚未投票的人数")
    accepted_pct: int = Field(..., description="赞成比例 (百分比，四舍五入)")
    rejected_pct: int = Field(..., description="反对比例 (百分比，四舍五入)")
    undecided_pct: int = Field(..., description="未投票比例 (百分比，四舍五入)")
