from enum import Enum


class VoteValue(str, Enum):
    """用户的投票选项"""

    ACCEPTED = "Accepted"  # 赞成
    REJECTED = "Rejected"  # 反对
