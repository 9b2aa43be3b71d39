from datetime import datetime
from typing import Optional

from pydantic import field_validator

from BhapTracker.share.BaseDto import BaseDto
from BhapTracker.share.TimeUtils import TimeUtils


class VoteDto(BaseDto):
    """
    投票记录的数据传输对象。

    value 保持为原始字符串，合法性由计票引擎检查。
    """

    id: int
    bhap_id: int
    voter_id: int
    value: str
    cast_at: Optional[datetime] = None

    @field_validator("cast_at")
    @classmethod
    def _as_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        return TimeUtils.ensure_utc(value)
