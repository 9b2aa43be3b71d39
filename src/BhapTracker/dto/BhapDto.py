from datetime import datetime

from pydantic import field_validator

from BhapTracker.share.BaseDto import BaseDto
from BhapTracker.share.enums.BhapStatus import BhapStatus
from BhapTracker.share.TimeUtils import TimeUtils


class BhapDto(BaseDto):
    """
    BHAP 的数据传输对象
    """

    id: int
    title: str
    content: str
    author_id: int
    status: BhapStatus
    created_date: datetime
    last_modified: datetime

    @field_validator("created_date", "last_modified")
    @classmethod
    def _as_utc(cls, value: datetime) -> datetime:
        return TimeUtils.ensure_utc(value)
