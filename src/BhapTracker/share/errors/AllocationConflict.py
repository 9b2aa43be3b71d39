from .BhapTrackerError import BhapTrackerError


class AllocationConflict(BhapTrackerError):
    """
    并发创建 BHAP 时分配到了相同的 ID。调用方需要重试整个创建操作。
    """

    default_message = "BHAP ID 分配冲突，请重试。"
