from typing import Protocol, Sequence

from BhapTracker.share.enums.VoteValue import VoteValue
from BhapTracker.share.errors import InconsistentVoterCount, InvalidVoteValue, NoEligibleVoters

from .dto.VoteTallyDto import VoteTallyDto


class _HasVoteValue(Protocol):
    value: str


class TallyService:
    """
    计票逻辑。纯函数，不访问数据库，也不记录日志。
    """

    @staticmethod
    def percent(count: int, denominator: int) -> int:
        """
        计算 count / denominator 的百分比，按四舍五入 (0.5 向上) 取整。

        使用整数运算，等价于 floor(count * 100 / denominator + 0.5)，不受浮点误差影响。
        例如 1/8 -> 12.5 -> 13，1/3 -> 33，2/3 -> 67。
        """
        return (200 * count + denominator) // (2 * denominator)

    @staticmethod
    def tally(
        votes: Sequence[_HasVoteValue], eligible_voter_count: int, exclude_author: bool = True
    ) -> VoteTallyDto:
        """
        统计一个 BHAP 的投票结果。

        Args:
            votes: 该 BHAP 的全部投票记录。
            eligible_voter_count: 注册用户总数。
            exclude_author: 是否从分母中排除作者（作者不能给自己的 BHAP 投票）。

        Returns:
            各类票数及其百分比。

        Raises:
            InvalidVoteValue: 存在不属于 {Accepted, Rejected} 的投票值。
            NoEligibleVoters: 有资格投票的人数为 0。
            InconsistentVoterCount: 已投票数超过了有资格投票的人数。
        """
        accepted_count = 0
        rejected_count = 0
        for vote in votes:
            try:
                value = VoteValue(vote.value)
            except ValueError as e:
                raise InvalidVoteValue(vote.value) from e
            if value is VoteValue.ACCEPTED:
                accepted_count += 1
            else:
                rejected_count += 1

        denominator = eligible_voter_count - 1 if exclude_author else eligible_voter_count
        if denominator <= 0:
            raise NoEligibleVoters()

        undecided_count = denominator - accepted_count - rejected_count
        if undecided_count < 0:
            raise InconsistentVoterCount(
                f"共 {accepted_count + rejected_count} 票，但只有 {denominator} 人有资格投票。"
            )

        return VoteTallyDto(
            vote_count=len(votes),
            denominator=denominator,
            accepted_count=accepted_count,
            rejected_count=rejected_count,
            undecided_count=undecided_count,
            accepted_pct=TallyService.percent(accepted_count, denominator),
            rejected_pct=TallyService.percent(rejected_count, denominator),
            undecided_pct=TallyService.percent(undecided_count, denominator),
        )
