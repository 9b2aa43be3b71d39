from typing import TYPE_CHECKING

from .BhapTrackerError import BhapTrackerError

if TYPE_CHECKING:
    from BhapTracker.share.enums.BhapStatus import BhapStatus


class InvalidTransition(BhapTrackerError):
    """
    状态机不允许的状态变更。
    """

    def __init__(self, current: "BhapStatus", target: "BhapStatus"):
        self.current = current
        self.target = target
        super().__init__(f"不允许从 {current.value} 变更为 {target.value}。")
