from .BhapTrackerError import BhapTrackerError


class NotFound(BhapTrackerError):
    """
    请求的 BHAP 或用户不存在。调用方应将其视为 404，不应重试。
    """

    default_message = "找不到请求的对象。"
