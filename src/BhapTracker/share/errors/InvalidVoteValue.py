from .BhapTrackerError import BhapTrackerError


class InvalidVoteValue(BhapTrackerError):
    """
    已存储的投票值不属于 {Accepted, Rejected}，说明持久化数据已损坏。
    """

    default_message = "未知的投票类型。"

    def __init__(self, value: object = None, message: str | None = None):
        self.value = value
        super().__init__(message or f"未知的投票类型: {value!r}")
