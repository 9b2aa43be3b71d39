import logging
from typing import Optional, Sequence

from sqlalchemy.exc import IntegrityError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from BhapTracker.models.Vote import Vote
from BhapTracker.share.enums.VoteValue import VoteValue
from BhapTracker.share.errors import DuplicateVote

logger = logging.getLogger(__name__)


class VoteService:
    """
    提供处理投票记录 (`Vote`) 相关数据库操作的服务。
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_votes(self, bhap_id: int) -> Sequence[Vote]:
        """
        获取某个 BHAP 的所有投票记录。
        """
        statement = select(Vote).where(Vote.bhap_id == bhap_id).order_by(Vote.id)  # type: ignore
        result = await self.session.exec(statement)
        return result.all()

    async def get_vote(self, bhap_id: int, user_id: int) -> Optional[Vote]:
        """
        获取用户对某个 BHAP 的投票，没有投过票时返回 None。
        """
        statement = select(Vote).where(Vote.bhap_id == bhap_id, Vote.voter_id == user_id)
        result = await self.session.exec(statement)
        return result.one_or_none()

    async def create_vote(self, bhap_id: int, voter_id: int, value: VoteValue) -> Vote:
        """
        记录一次投票。投票不可修改，同一用户重复投票会被拒绝。

        Raises:
            DuplicateVote: 该用户已经对这个 BHAP 投过票。
        """
        if await self.get_vote(bhap_id, voter_id) is not None:
            raise DuplicateVote()

        new_vote = Vote(bhap_id=bhap_id, voter_id=voter_id, value=value.value)
        self.session.add(new_vote)
        try:
            await self.session.flush()
        except IntegrityError as e:
            raise DuplicateVote() from e
        await self.session.refresh(new_vote)
        logger.debug(f"用户 {voter_id} 对 BHAP {bhap_id} 投出 {value.value}")
        return new_vote

