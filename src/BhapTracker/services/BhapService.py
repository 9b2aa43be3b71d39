import logging
from typing import Optional, Sequence

from sqlalchemy.exc import IntegrityError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from BhapTracker.models.Bhap import Bhap
from BhapTracker.services.IdAllocator import IdAllocator
from BhapTracker.share.enums.BhapStatus import BhapStatus
from BhapTracker.share.errors import AllocationConflict, NotFound
from BhapTracker.share.TimeUtils import TimeUtils

logger = logging.getLogger(__name__)


class BhapService:
    """
    提供处理 BHAP 相关数据库操作的服务。
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create_bhap(self, author_id: int, title: str, content: str = "") -> Bhap:
        """
        分配编号并创建一个新的草稿 BHAP。

        Args:
            author_id: 作者的用户ID。
            title: BHAP 的标题。
            content: BHAP 的 Markdown 正文。

        Returns:
            新创建的 Bhap ORM 对象。

        Raises:
            AllocationConflict: 编号已被并发的创建操作占用。
        """
        bhap_id = await IdAllocator(self.session).next_id()
        new_bhap = Bhap(
            id=bhap_id,
            author_id=author_id,
            title=title,
            content=content,
            status=BhapStatus.DRAFT.value,
        )
        self.session.add(new_bhap)
        try:
            await self.session.flush()
        except IntegrityError as e:
            raise AllocationConflict(f"BHAP 编号 {bhap_id} 已被占用。") from e
        await self.session.refresh(new_bhap)
        logger.debug(f"成功创建 BHAP {bhap_id}，作者: {author_id}")
        return new_bhap

    async def get_bhap_by_id(self, bhap_id: int) -> Optional[Bhap]:
        """
        根据编号获取 BHAP ORM 对象。
        """
        return await self.session.get(Bhap, bhap_id)

    async def get_bhap(self, bhap_id: int) -> Bhap:
        """
        根据编号获取 BHAP，不存在时抛出 NotFound。
        """
        bhap = await self.get_bhap_by_id(bhap_id)
        if bhap is None:
            raise NotFound(f"没有编号为 {bhap_id} 的 BHAP。")
        return bhap

    async def list_bhaps(self) -> Sequence[Bhap]:
        """
        按编号顺序获取所有 BHAP。
        """
        result = await self.session.exec(select(Bhap).order_by(Bhap.id))  # type: ignore
        return result.all()

    async def update_content(
        self, bhap: Bhap, title: Optional[str] = None, content: Optional[str] = None
    ) -> Bhap:
        """
        更新 BHAP 的标题和/或正文，并刷新最后修改时间。
        """
        if title is not None:
            bhap.title = title
        if content is not None:
            bhap.content = content
        bhap.last_modified = TimeUtils.utcnow()
        self.session.add(bhap)
        await self.session.flush()
        return bhap

    async def update_status(self, bhap: Bhap, status: BhapStatus) -> Bhap:
        """
        更新 BHAP 的状态。状态机检查由调用方负责。
        """
        old_status = bhap.status
        bhap.status = status.value
        bhap.last_modified = TimeUtils.utcnow()
        self.session.add(bhap)
        await self.session.flush()
        logger.debug(f"已将 BHAP {bhap.id} 的状态从 {old_status} 更新为 {status.value}。")
        return bhap
