from typing import Optional

from pydantic import Field, computed_field

from BhapTracker.dto.BhapDto import BhapDto
from BhapTracker.share.BaseDto import BaseDto
from BhapTracker.share.enums.OptionsMode import OptionsMode

from .VoteTallyDto import VoteTallyDto


class BhapPageDto(BaseDto):
    """
    BHAP 查看页面所需的全部数据，交给页面渲染层使用。
    """

    logged_in: bool
    full_name: str = ""
    id: int
    bhap: BhapDto
    author_name: str
    selected_vote: str = Field("", description="当前用户的投票: ACCEPT / REJECTED / 空")
    options_mode: OptionsMode
    editable: bool
    html_content: str
    tally: Optional[VoteTallyDto] = Field(
        None, description="计票结果，系统中没有其他用户时为 None"
    )

    @computed_field(alias="voteCount")  # type: ignore[prop-decorator]
    @property
    def vote_count(self) -> int:
        return self.tally.vote_count if self.tally else 0

    @computed_field(alias="userCount")  # type: ignore[prop-decorator]
    @property
    def user_count(self) -> int:
        return self.tally.denominator if self.tally else 0
