from enum import Enum


class BhapStatus(str, Enum):
    """BHAP 当前状态"""

    DRAFT = "Draft"  # 草稿中
    DEFERRED = "Deferred"  # 已搁置
    REJECTED = "Rejected"  # 投票否决
    DISCUSSION = "Discussion"  # 讨论投票中
    WITHDRAWN = "Withdrawn"  # 作者撤回
    ACCEPTED = "Accepted"  # 投票通过
    REPLACED = "Replaced"  # 已被其他 BHAP 取代
    APRIL_FOOLS = "April Fools"  # 愚人节提案，不作数
