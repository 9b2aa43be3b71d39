import logging
import os
from typing import List, Optional

from BhapTracker.dto.BhapDto import BhapDto
from BhapTracker.dto.UserDto import UserDto
from BhapTracker.dto.VoteDto import VoteDto
from BhapTracker.share.DatabaseHandler import DatabaseHandler
from BhapTracker.share.enums.BhapStatus import BhapStatus
from BhapTracker.share.enums.OptionsMode import OptionsMode
from BhapTracker.share.errors import (
    AllocationConflict,
    DuplicateVote,
    NoEligibleVoters,
    NotPermitted,
)
from BhapTracker.share.MarkdownRenderer import MarkdownRenderer
from BhapTracker.share.UnitOfWork import UnitOfWork

from .dto.BhapPageDto import BhapPageDto
from .dto.VoteTallyDto import VoteTallyDto
from .LifecycleService import LifecycleService
from .qo.CastVoteQo import CastVoteQo
from .qo.CreateBhapQo import CreateBhapQo
from .qo.EditBhapQo import EditBhapQo
from .qo.TransitionStatusQo import TransitionStatusQo
from .TallyService import TallyService

logger = logging.getLogger(__name__)


class BhapLogic:
    """
    处理与 BHAP 相关的业务逻辑。

    负责从数据库加载数据，交给 LifecycleService 和 TallyService 判定，
    并组装页面渲染所需的数据。
    """

    def __init__(self, db_handler: Optional[DatabaseHandler], max_create_attempts: int = 0):
        self.db_handler = db_handler
        self.max_create_attempts = max_create_attempts or int(
            os.getenv("BHAP_CREATE_MAX_ATTEMPTS", "3")
        )

    async def get_bhap_page(self, bhap_id: int, viewer_id: Optional[int] = None) -> BhapPageDto:
        """
        获取 BHAP 查看页面的全部数据。

        Args:
            bhap_id: BHAP 编号。
            viewer_id: 当前登录用户的ID，未登录时为 None。

        Raises:
            NotFound: 没有该编号的 BHAP。
            InvalidVoteValue: 投票记录中存在非法的投票值。
        """
        async with UnitOfWork(self.db_handler) as uow:
            bhap = BhapDto.model_validate(await uow.bhap.get_bhap(bhap_id))
            author = UserDto.model_validate(await uow.user.get_user(bhap.author_id))

            viewer: Optional[UserDto] = None
            if viewer_id is not None:
                viewer_orm = await uow.user.get_user_by_id(viewer_id)
                if viewer_orm is None:
                    logger.warning(f"会话中的用户 {viewer_id} 不存在，按未登录处理。")
                else:
                    viewer = UserDto.model_validate(viewer_orm)

            votes = [VoteDto.model_validate(v) for v in await uow.vote.list_votes(bhap_id)]
            user_count = await uow.user.count_users()

            viewer_vote: Optional[VoteDto] = None
            if viewer is not None:
                viewer_vote_orm = await uow.vote.get_vote(bhap_id, viewer.id)
                if viewer_vote_orm is not None:
                    viewer_vote = VoteDto.model_validate(viewer_vote_orm)

        is_author = viewer is not None and viewer.id == bhap.author_id
        mode = LifecycleService.determine_view_mode(
            bhap.status,
            is_authenticated=viewer is not None,
            is_author=is_author,
            has_voted=viewer_vote is not None,
        )
        selected_vote = LifecycleService.selected_vote_label(
            viewer_vote.value if viewer_vote else None
        )

        tally: Optional[VoteTallyDto] = None
        try:
            tally = TallyService.tally(votes, user_count, exclude_author=True)
        except NoEligibleVoters:
            logger.warning(f"BHAP {bhap_id} 没有有资格的投票者，页面不显示投票统计。")

        page = BhapPageDto(
            logged_in=viewer is not None,
            full_name=viewer.full_name if viewer else "",
            id=bhap.id,
            bhap=bhap,
            author_name=author.full_name,
            selected_vote=selected_vote,
            options_mode=mode,
            editable=LifecycleService.is_editable(bhap.status),
            html_content=MarkdownRenderer.render(bhap.content),
            tally=tally,
        )
        logger.debug(f"BHAP {bhap_id} 页面数据: mode={mode.value}, tally={tally}")
        return page

    async def list_bhaps(self) -> List[BhapDto]:
        """
        按编号顺序获取所有 BHAP。
        """
        async with UnitOfWork(self.db_handler) as uow:
            bhaps = await uow.bhap.list_bhaps()
            return [BhapDto.model_validate(b) for b in bhaps]

    async def create_bhap(self, qo: CreateBhapQo) -> BhapDto:
        """
        创建一个新的草稿 BHAP。

        编号分配与插入在同一个事务中完成。遇到 AllocationConflict 时，
        以新的事务重试整个创建操作，超过次数上限后向上抛出。

        Raises:
            NotFound: 作者不存在。
            AllocationConflict: 多次重试后仍然冲突。
        """
        for attempt in range(1, self.max_create_attempts + 1):
            try:
                async with UnitOfWork(self.db_handler, write=True) as uow:
                    await uow.user.get_user(qo.author_id)
                    bhap = await uow.bhap.create_bhap(
                        author_id=qo.author_id, title=qo.title, content=qo.content
                    )
                    dto = BhapDto.model_validate(bhap)
                    await uow.commit()
            except AllocationConflict:
                if attempt >= self.max_create_attempts:
                    logger.error(f"创建 BHAP 时编号冲突，已重试 {attempt} 次，放弃。")
                    raise
                logger.warning(f"创建 BHAP 时编号冲突，正在进行第 {attempt + 1} 次尝试...")
                continue

            logger.info(f"用户 {qo.author_id} 创建了 BHAP {dto.id}: {dto.title}")
            return dto

        raise AllocationConflict()

    async def edit_bhap(self, qo: EditBhapQo) -> BhapDto:
        """
        作者编辑自己的草稿 BHAP。

        Raises:
            NotFound: BHAP 不存在。
            NotPermitted: 编辑者不是作者，或 BHAP 已不是草稿。
        """
        async with UnitOfWork(self.db_handler, write=True) as uow:
            bhap = await uow.bhap.get_bhap(qo.bhap_id)
            status = BhapStatus(bhap.status)
            mode = LifecycleService.determine_view_mode(
                status,
                is_authenticated=True,
                is_author=qo.editor_id == bhap.author_id,
                has_voted=False,
            )
            if mode != OptionsMode.DRAFT_AUTHOR:
                raise NotPermitted("只有作者可以编辑，并且只能编辑草稿。")

            bhap = await uow.bhap.update_content(bhap, title=qo.title, content=qo.content)
            dto = BhapDto.model_validate(bhap)
            await uow.commit()

        logger.info(f"用户 {qo.editor_id} 编辑了 BHAP {dto.id}")
        return dto

    async def transition_status(self, qo: TransitionStatusQo) -> BhapDto:
        """
        按状态机变更 BHAP 的状态。

        Raises:
            NotFound: BHAP 或执行者不存在。
            InvalidTransition: 状态机不允许该变更。
            NotPermitted: 该变更只能由作者发起。
        """
        async with UnitOfWork(self.db_handler, write=True) as uow:
            bhap = await uow.bhap.get_bhap(qo.bhap_id)
            await uow.user.get_user(qo.actor_id)
            current = BhapStatus(bhap.status)

            LifecycleService.ensure_transition(current, qo.target)
            if (
                LifecycleService.requires_author(current, qo.target)
                and qo.actor_id != bhap.author_id
            ):
                raise NotPermitted(f"只有作者可以将 BHAP 从 {current.value} 变更为 {qo.target.value}。")

            bhap = await uow.bhap.update_status(bhap, qo.target)
            dto = BhapDto.model_validate(bhap)
            await uow.commit()

        logger.info(
            f"用户 {qo.actor_id} 将 BHAP {dto.id} 的状态从 {current.value} 变更为 {qo.target.value}"
        )
        return dto

    async def cast_vote(self, qo: CastVoteQo) -> VoteTallyDto:
        """
        记录用户的投票，并返回更新后的计票结果。

        检查与插入在同一个事务中完成，同一用户的并发重复提交只有一次会成功。

        Raises:
            NotFound: BHAP 或用户不存在。
            DuplicateVote: 用户已经投过票。
            NotPermitted: BHAP 不在讨论阶段，或投票者是作者。
        """
        async with UnitOfWork(self.db_handler, write=True) as uow:
            bhap = await uow.bhap.get_bhap(qo.bhap_id)
            await uow.user.get_user(qo.voter_id)
            existing_vote = await uow.vote.get_vote(qo.bhap_id, qo.voter_id)

            mode = LifecycleService.determine_view_mode(
                BhapStatus(bhap.status),
                is_authenticated=True,
                is_author=qo.voter_id == bhap.author_id,
                has_voted=existing_vote is not None,
            )
            if mode == OptionsMode.DISCUSSION_VOTED:
                raise DuplicateVote()
            if mode == OptionsMode.DISCUSSION_AUTHOR:
                raise NotPermitted("作者不能给自己的 BHAP 投票。")
            if mode != OptionsMode.DISCUSSION_NO_VOTE:
                raise NotPermitted("该 BHAP 当前不在投票阶段。")

            await uow.vote.create_vote(qo.bhap_id, qo.voter_id, qo.value)
            votes = [VoteDto.model_validate(v) for v in await uow.vote.list_votes(qo.bhap_id)]
            user_count = await uow.user.count_users()
            tally = TallyService.tally(votes, user_count, exclude_author=True)
            await uow.commit()

        logger.info(f"用户 {qo.voter_id} 对 BHAP {qo.bhap_id} 投出了 {qo.value.value}")
        return tally

    async def get_tally(self, bhap_id: int) -> VoteTallyDto:
        """
        获取 BHAP 的计票结果。

        Raises:
            NotFound: BHAP 不存在。
            InvalidVoteValue: 投票记录中存在非法的投票值。
            NoEligibleVoters: 系统中除作者外没有其他用户。
        """
        async with UnitOfWork(self.db_handler) as uow:
            await uow.bhap.get_bhap(bhap_id)
            votes = [VoteDto.model_validate(v) for v in await uow.vote.list_votes(bhap_id)]
            user_count = await uow.user.count_users()

        return TallyService.tally(votes, user_count, exclude_author=True)
