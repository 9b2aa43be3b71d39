from .BhapTrackerError import BhapTrackerError


class InconsistentVoterCount(BhapTrackerError):
    """
    已投票数超过了有资格的投票者数量，用户总数与投票记录不一致。
    """

    default_message = "投票数超过了有资格的投票者数量。"
