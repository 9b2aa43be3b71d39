from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from sqlmodel.ext.asyncio.session import AsyncSession

from BhapTracker.share.DatabaseHandler import IMMEDIATE_OPTION, DatabaseHandler

if TYPE_CHECKING:
    from BhapTracker.services.BhapService import BhapService
    from BhapTracker.services.UserService import UserService
    from BhapTracker.services.VoteService import VoteService


logger = logging.getLogger(__name__)


class UnitOfWork:
    """
    一个实现了工作单元模式的异步上下文管理器。

    它封装了数据库会话和事务管理，并提供了对各个服务（仓库）的访问<br>
    这确保了在单个业务操作中的所有数据库更改要么一起提交，要么一起回滚。

    用法:<br>
    async with UnitOfWork(db_handler, write=True) as uow:<br>
        bhap = await uow.bhap.create_bhap(...)<br>
        await uow.commit()<br>

    只读操作使用默认的 write=False，事务以普通的 BEGIN 开始，不占用写锁。
    """

    def __init__(self, db_handler: Optional["DatabaseHandler"], write: bool = False):
        self._db_handler = db_handler
        self._write = write
        self._session: Optional[AsyncSession] = None
        self._committed = False

    async def __aenter__(self) -> "UnitOfWork":
        """在进入上下文时，获取一个新的数据库会话。写操作会立即开始事务并取得写锁。"""
        if self._db_handler is None:
            raise RuntimeError(
                "UnitOfWork 在没有有效 DatabaseHandler 的情况下被使用。"
                "请确保已调用 initialize_db_handler。"
            )
        self._session = self._db_handler.get_session()
        self._committed = False
        if self._write:
            try:
                await self._session.connection(execution_options={IMMEDIATE_OPTION: True})
            except BaseException:
                await self._session.close()
                self._session = None
                raise
        return self

    async def __aexit__(self, exc_type, exc_val, traceback):
        """
        在退出上下文时，根据是否发生异常来提交或回滚事务，并最终关闭会话。
        """
        if not self._session:
            return

        try:
            if exc_type:
                if not self._committed:
                    logger.warning(
                        f"UnitOfWork 检测到异常，正在回滚事务: {exc_type.__name__}: {exc_val}"
                    )
                    await self.rollback()
            else:
                if not self._committed:
                    await self.commit()
        finally:
            await self._session.close()
            self._session = None

    @property
    def session(self) -> AsyncSession:
        """获取当前的数据库会话。"""
        if self._session is None:
            raise RuntimeError("会话尚未初始化。请在 'async with' 块中使用 UnitOfWork。")
        return self._session

    async def commit(self):
        """提交当前事务。"""
        await self.session.commit()
        self._committed = True

    async def rollback(self):
        """回滚当前事务。"""
        await self.session.rollback()
        self._committed = True

    # --- 服务/仓库访问属性 ---

    @property
    def bhap(self) -> "BhapService":
        """获取 BHAP 服务实例。"""
        if not hasattr(self, "_bhap_service"):
            from BhapTracker.services.BhapService import BhapService

            self._bhap_service = BhapService(self.session)
        return self._bhap_service

    @property
    def vote(self) -> "VoteService":
        """获取投票服务实例。"""
        if not hasattr(self, "_vote_service"):
            from BhapTracker.services.VoteService import VoteService

            self._vote_service = VoteService(self.session)
        return self._vote_service

    @property
    def user(self) -> "UserService":
        """获取用户服务实例。"""
        if not hasattr(self, "_user_service"):
            from BhapTracker.services.UserService import UserService

            self._user_service = UserService(self.session)
        return self._user_service

