from datetime import datetime, timezone
from typing import Optional


class TimeUtils:
    """
    一个用于处理时间相关操作的工具类。
    """

    @staticmethod
    def utcnow() -> datetime:
        """返回当前带时区信息的 UTC 时间，用作模型时间字段的默认值。"""
        return datetime.now(timezone.utc)

    @staticmethod
    def ensure_utc(value: Optional[datetime]) -> Optional[datetime]:
        """
        SQLite 不保存时区，读回的时间是朴素的。
        朴素时间一律视为 UTC，带时区的时间转换为 UTC。
        """
        if value is None:
            return None
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)
