import logging

from sqlalchemy import func
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from BhapTracker.models.Bhap import Bhap

logger = logging.getLogger(__name__)


class IdAllocator:
    """
    BHAP 编号分配器。

    必须与随后的插入处于同一个事务中使用：事务以 BEGIN IMMEDIATE 开始，
    读取最大编号到插入完成之间不会有其他写入者。
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def next_id(self) -> int:
        """
        返回下一个未使用的 BHAP 编号。没有任何 BHAP 时返回 0。
        """
        result = await self.session.exec(select(func.max(Bhap.id)))
        current_max = result.one_or_none()
        next_id = 0 if current_max is None else current_max + 1
        logger.debug(f"分配 BHAP 编号: {next_id}")
        return next_id
