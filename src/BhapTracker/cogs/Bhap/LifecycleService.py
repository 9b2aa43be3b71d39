from enum import Enum
from typing import Dict, FrozenSet, Optional, Tuple

from BhapTracker.share.enums.BhapStatus import BhapStatus
from BhapTracker.share.enums.OptionsMode import OptionsMode
from BhapTracker.share.enums.VoteValue import VoteValue
from BhapTracker.share.errors import InvalidTransition, InvalidVoteValue


class _Stage(Enum):
    """决定页面操作模式时，状态被归入的阶段"""

    DRAFT = "draft"
    DISCUSSION = "discussion"
    FINALIZED = "finalized"


class LifecycleService:
    """
    BHAP 生命周期的判定逻辑：状态机、页面操作模式与可编辑性。

    所有方法都是纯函数，不访问数据库，也不记录日志。
    """

    # 每个状态都必须出现在这里，新增状态时需要同时决定它属于哪个阶段
    STATUS_STAGE: Dict[BhapStatus, _Stage] = {
        BhapStatus.DRAFT: _Stage.DRAFT,
        BhapStatus.DISCUSSION: _Stage.DISCUSSION,
        BhapStatus.DEFERRED: _Stage.FINALIZED,
        BhapStatus.REJECTED: _Stage.FINALIZED,
        BhapStatus.WITHDRAWN: _Stage.FINALIZED,
        BhapStatus.ACCEPTED: _Stage.FINALIZED,
        BhapStatus.REPLACED: _Stage.FINALIZED,
        BhapStatus.APRIL_FOOLS: _Stage.FINALIZED,
    }

    # (阶段, 是否作者, 是否已投票) -> 操作模式，覆盖全部 12 种组合
    MODE_TABLE: Dict[Tuple[_Stage, bool, bool], OptionsMode] = {
        (_Stage.DRAFT, True, False): OptionsMode.DRAFT_AUTHOR,
        (_Stage.DRAFT, True, True): OptionsMode.DRAFT_AUTHOR,
        (_Stage.DRAFT, False, False): OptionsMode.DRAFT_NOT_AUTHOR,
        (_Stage.DRAFT, False, True): OptionsMode.DRAFT_NOT_AUTHOR,
        (_Stage.DISCUSSION, True, False): OptionsMode.DISCUSSION_AUTHOR,
        (_Stage.DISCUSSION, True, True): OptionsMode.DISCUSSION_AUTHOR,
        (_Stage.DISCUSSION, False, False): OptionsMode.DISCUSSION_NO_VOTE,
        (_Stage.DISCUSSION, False, True): OptionsMode.DISCUSSION_VOTED,
        (_Stage.FINALIZED, True, False): OptionsMode.FINALIZED,
        (_Stage.FINALIZED, True, True): OptionsMode.FINALIZED,
        (_Stage.FINALIZED, False, False): OptionsMode.FINALIZED,
        (_Stage.FINALIZED, False, True): OptionsMode.FINALIZED,
    }

    TRANSITIONS: Dict[BhapStatus, FrozenSet[BhapStatus]] = {
        BhapStatus.DRAFT: frozenset(
            {
                BhapStatus.DISCUSSION,
                BhapStatus.WITHDRAWN,
                BhapStatus.DEFERRED,
                BhapStatus.APRIL_FOOLS,
            }
        ),
        BhapStatus.DISCUSSION: frozenset(
            {
                BhapStatus.ACCEPTED,
                BhapStatus.REJECTED,
                BhapStatus.WITHDRAWN,
                BhapStatus.DEFERRED,
            }
        ),
        BhapStatus.DEFERRED: frozenset(
            {BhapStatus.DRAFT, BhapStatus.DISCUSSION, BhapStatus.WITHDRAWN}
        ),
        BhapStatus.ACCEPTED: frozenset({BhapStatus.REPLACED}),
        BhapStatus.APRIL_FOOLS: frozenset({BhapStatus.WITHDRAWN}),
        BhapStatus.REJECTED: frozenset(),
        BhapStatus.WITHDRAWN: frozenset(),
        BhapStatus.REPLACED: frozenset(),
    }

    # 只有作者本人可以发起的状态变更，其余变更属于管理操作
    AUTHOR_TRANSITIONS: FrozenSet[Tuple[BhapStatus, BhapStatus]] = frozenset(
        {
            (BhapStatus.DRAFT, BhapStatus.DISCUSSION),
            (BhapStatus.DRAFT, BhapStatus.WITHDRAWN),
            (BhapStatus.DISCUSSION, BhapStatus.WITHDRAWN),
        }
    )

    SELECTED_VOTE_LABELS: Dict[VoteValue, str] = {
        VoteValue.ACCEPTED: "ACCEPT",
        VoteValue.REJECTED: "REJECTED",
    }

    @staticmethod
    def determine_view_mode(
        status: BhapStatus, is_authenticated: bool, is_author: bool, has_voted: bool
    ) -> OptionsMode:
        """
        根据 BHAP 状态和当前用户的身份决定页面的操作模式。

        判定顺序：是否登录 -> 状态阶段 -> 是否作者 -> 是否已投票。

        Args:
            status: BHAP 当前状态。
            is_authenticated: 是否有已登录的用户在查看。
            is_author: 当前用户是否为作者。
            has_voted: 当前用户是否已经投过票。

        Returns:
            七种操作模式之一。
        """
        if not is_authenticated:
            return OptionsMode.NOT_LOGGED_IN
        stage = LifecycleService.STATUS_STAGE[status]
        return LifecycleService.MODE_TABLE[(stage, is_author, has_voted)]

    @staticmethod
    def is_editable(status: BhapStatus) -> bool:
        """只有草稿可以编辑。"""
        return status == BhapStatus.DRAFT

    @staticmethod
    def allowed_transitions(status: BhapStatus) -> FrozenSet[BhapStatus]:
        return LifecycleService.TRANSITIONS[status]

    @staticmethod
    def can_transition(current: BhapStatus, target: BhapStatus) -> bool:
        return target in LifecycleService.TRANSITIONS[current]

    @staticmethod
    def ensure_transition(current: BhapStatus, target: BhapStatus) -> None:
        """
        Raises:
            InvalidTransition: 状态机中不存在 current -> target。
        """
        if not LifecycleService.can_transition(current, target):
            raise InvalidTransition(current, target)

    @staticmethod
    def requires_author(current: BhapStatus, target: BhapStatus) -> bool:
        return (current, target) in LifecycleService.AUTHOR_TRANSITIONS

    @staticmethod
    def is_terminal(status: BhapStatus) -> bool:
        """
        终结状态不再有任何出路。Accepted 只能被 Replaced 取代，不算在内。
        """
        return not LifecycleService.TRANSITIONS[status]

    @staticmethod
    def selected_vote_label(value: Optional[str]) -> str:
        """
        将用户的投票值转换为页面上显示的标签，没有投票时返回空字符串。

        Raises:
            InvalidVoteValue: 投票值不属于 {Accepted, Rejected}。
        """
        if value is None:
            return ""
        try:
            vote_value = VoteValue(value)
        except ValueError as e:
            raise InvalidVoteValue(value) from e
        return LifecycleService.SELECTED_VOTE_LABELS[vote_value]
