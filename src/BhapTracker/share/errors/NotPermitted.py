from .BhapTrackerError import BhapTrackerError


class NotPermitted(BhapTrackerError):
    """
    当前用户在当前模式下无权执行该操作（编辑或投票）。
    """

    default_message = "抱歉，你没有权限执行此操作。"
