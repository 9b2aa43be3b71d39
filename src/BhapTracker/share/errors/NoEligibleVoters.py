from .BhapTrackerError import BhapTrackerError


class NoEligibleVoters(BhapTrackerError):
    """
    计票时没有任何有资格的投票者（分母为 0），百分比无意义。
    """

    default_message = "没有有资格的投票者，无法计算投票比例。"
