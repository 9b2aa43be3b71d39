from .BhapTrackerError import BhapTrackerError


class DuplicateVote(BhapTrackerError):
    """
    同一用户对同一 BHAP 的第二次投票。投票一经提交不可修改。
    """

    default_message = "你已经对该 BHAP 投过票了。"
